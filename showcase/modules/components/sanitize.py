from __future__ import annotations

from typing import Any

MAX_KEY_LENGTH = 100

# Markup-significant characters removed from identifiers before lookup.
_STRIPPED = str.maketrans("", "", "<>'\"")


def sanitize(raw: Any) -> str:
    """Normalize an untrusted identifier.

    Non-string values become "". Strings are trimmed, cut to
    MAX_KEY_LENGTH characters and stripped of ``< > ' "``. This is not
    HTML escaping; values rendered into markup are escaped again by the
    presenter.
    """
    if not isinstance(raw, str):
        return ""
    return raw.strip()[:MAX_KEY_LENGTH].translate(_STRIPPED)
