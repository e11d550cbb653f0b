from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping


@dataclass(frozen=True)
class ComponentDetail:
    """Public view of a catalog item (no key)."""

    name: str
    description: str
    snippet: str


@dataclass(frozen=True)
class ComponentEntry:
    key: str
    name: str
    description: str
    snippet: str  # stored verbatim, escaped only when rendered into HTML

    def detail(self) -> ComponentDetail:
        return ComponentDetail(name=self.name, description=self.description, snippet=self.snippet)


class ComponentCatalog:
    """Read-only mapping of lowercase key -> ComponentEntry.

    Built once at startup; lookups expect keys that are already lowercased.
    """

    def __init__(self, entries: Iterable[ComponentEntry]):
        by_key: dict[str, ComponentEntry] = {}
        for entry in entries:
            if entry.key != entry.key.lower() or not entry.key:
                raise ValueError(f"catalog key must be non-empty lowercase: {entry.key!r}")
            if entry.key in by_key:
                raise ValueError(f"duplicate catalog key: {entry.key!r}")
            by_key[entry.key] = entry
        self._entries: Mapping[str, ComponentEntry] = MappingProxyType(by_key)

    def lookup(self, key: str) -> ComponentEntry | None:
        return self._entries.get(key)

    def keys(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[ComponentEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


DEFAULT_COMPONENTS: tuple[ComponentEntry, ...] = (
    ComponentEntry(
        key="botones",
        name="Botones",
        description="Componentes de botones interactivos con diferentes estilos y estados",
        snippet=(
            '<button class="btn btn-primary">Primario</button>\n'
            '<button class="btn btn-secondary">Secundario</button>\n'
            '<button class="btn" disabled>Deshabilitado</button>'
        ),
    ),
    ComponentEntry(
        key="cards",
        name="Cards",
        description="Tarjetas versátiles para mostrar contenido",
        snippet=(
            '<div class="card">\n'
            '  <div class="card-header">Título</div>\n'
            '  <div class="card-body">\n'
            "    <p>Contenido de la tarjeta</p>\n"
            "  </div>\n"
            '  <div class="card-footer">Pie</div>\n'
            "</div>"
        ),
    ),
    ComponentEntry(
        key="graficos",
        name="Gráficos",
        description="Visualización de datos con Chart.js",
        snippet=(
            '<canvas id="myChart"></canvas>\n'
            "<script>\n"
            "  new Chart(ctx, {\n"
            "    type: 'bar',\n"
            "    data: { labels: [...], datasets: [...] }\n"
            "  });\n"
            "</script>"
        ),
    ),
    ComponentEntry(
        key="formularios",
        name="Formularios",
        description="Campos y controles de formularios",
        snippet=(
            "<form>\n"
            '  <input type="text" placeholder="Nombre">\n'
            '  <textarea placeholder="Mensaje"></textarea>\n'
            '  <button type="submit">Enviar</button>\n'
            "</form>"
        ),
    ),
    ComponentEntry(
        key="badges",
        name="Badges",
        description="Etiquetas y distintivos",
        snippet=(
            '<span class="badge">Nuevo</span>\n'
            '<span class="badge badge-success">Completado</span>\n'
            '<span class="badge badge-danger">Error</span>'
        ),
    ),
    ComponentEntry(
        key="modales",
        name="Modales",
        description="Diálogos y ventanas emergentes",
        snippet=(
            '<div class="modal">\n'
            '  <div class="modal-content">\n'
            '    <button class="btn-close">×</button>\n'
            "    <h2>Título del Modal</h2>\n"
            "    <p>Contenido</p>\n"
            "  </div>\n"
            "</div>"
        ),
    ),
)


def build_default_catalog() -> ComponentCatalog:
    return ComponentCatalog(DEFAULT_COMPONENTS)
