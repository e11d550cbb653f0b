from __future__ import annotations

from flask import Blueprint, current_app

cli_bp = Blueprint("cli", __name__, cli_group=None)


@cli_bp.cli.command("components")
def list_components() -> None:
    """List the component catalog.

    One line per entry, in catalog order.
    """
    catalog = current_app.extensions["component_service"].catalog
    for entry in catalog:
        print(f"{entry.key}: {entry.name}")
    print(f"{len(catalog)} components.")
