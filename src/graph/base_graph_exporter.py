# src/graph/base_graph_exporter.py — v1
"""Abstract graph export interface.

Subclasses name their format and implement ``write``; the base class
resolves the target path, creates its directory and runs the write in a
worker thread so exports can be awaited side by side.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import networkx as nx


class BaseGraphExporter(ABC):
    """Writes a NetworkX view of the community graph in one file format."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Export format identifier (e.g., 'json', 'graphml')."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Output file extension (e.g., '.json', '.graphml')."""

    @abstractmethod
    def write(self, graph: nx.Graph, path: Path) -> None:
        """Serialize ``graph`` to ``path``. The parent directory exists."""

    def target_path(self, output_dir: str | Path, stem: str) -> Path:
        return Path(output_dir) / f"{stem}{self.file_extension}"

    async def export(self, graph: nx.Graph, output_path: str | Path) -> str:
        """Export graph to file, return path to exported file.

        Raises:
            OSError: If the directory cannot be created or the file written.
        """
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        await asyncio.to_thread(self.write, graph, path)
        return str(path)
