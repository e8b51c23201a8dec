# src/graph/exporter_factory.py — v1
"""Factory for graph exporter instantiation.

JSON exporter is always included regardless of configuration.
"""

from __future__ import annotations

import importlib
from typing import Iterable

from cliqueperc.config.settings import Settings
from cliqueperc.graph.base_graph_exporter import BaseGraphExporter

_EXPORTERS: dict[str, str] = {
    "json": "cliqueperc.graph.exporters.json_exporter.JsonExporter",
    "graphml": "cliqueperc.graph.exporters.graphml_exporter.GraphMLExporter",
}


def create_exporters(
    settings: Settings | None = None,
    formats: Iterable[str] | None = None,
) -> list[BaseGraphExporter]:
    """Create all configured graph exporters.

    JSON is always included. Additional formats come from ``formats`` when
    given, otherwise from settings. Unknown format names are skipped.

    Returns:
        List of exporter instances, sorted by format name.
    """
    wanted: set[str] = {"json"}  # Always present

    if formats is not None:
        wanted.update(f.strip() for f in formats if f.strip())
    elif settings is not None:
        wanted.update(settings.graph_export_formats_list)

    exporters: list[BaseGraphExporter] = []
    for fmt in sorted(wanted):
        fqcn = _EXPORTERS.get(fmt)
        if fqcn is None:
            continue
        module_path, class_name = fqcn.rsplit(".", 1)
        mod = importlib.import_module(module_path)
        cls = getattr(mod, class_name)
        exporters.append(cls())

    return exporters
