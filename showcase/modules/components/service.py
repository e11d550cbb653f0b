from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from showcase.modules.components.catalog import ComponentCatalog, ComponentDetail
from showcase.modules.components.sanitize import sanitize

NOT_A_STRING = "not a string"
EMPTY_AFTER_SANITIZATION = "empty after sanitization"


@dataclass(frozen=True)
class Found:
    detail: ComponentDetail


@dataclass(frozen=True)
class NotFound:
    key: str


@dataclass(frozen=True)
class Invalid:
    reason: str


LookupResult = Union[Found, NotFound, Invalid]


class ComponentLookupService:
    """Resolve raw, untrusted component ids against the catalog.

    Bad input is an ordinary outcome: ``resolve`` returns ``Invalid`` or
    ``NotFound`` instead of raising.
    """

    def __init__(self, catalog: ComponentCatalog):
        self.catalog = catalog

    def resolve(self, raw: Any) -> LookupResult:
        if not isinstance(raw, str):
            return Invalid(NOT_A_STRING)

        # Sanitize before the emptiness check so "<>" counts as empty.
        key = sanitize(raw)
        if not key:
            return Invalid(EMPTY_AFTER_SANITIZATION)

        key = key.lower()
        entry = self.catalog.lookup(key)
        if entry is None:
            return NotFound(key)
        return Found(entry.detail())
