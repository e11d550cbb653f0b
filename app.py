import os

from dotenv import load_dotenv

load_dotenv()

from showcase.app.factory import create_app  # noqa: E402  (config reads the environment)

app = create_app()

if __name__ == "__main__":
    app.run(
        host=app.config["APP_HOST"],
        port=app.config["APP_PORT"],
        debug=not app.config["PRODUCTION"] and os.getenv("FLASK_DEBUG") == "1",
    )
