# src/api/facade.py — v1
"""Public API facade — single entry point for clique percolation.

Usage:
    from cliqueperc.api.facade import analyze_file, percolate
    result = analyze_file("model.graph", k=3)
    result = percolate(graph, k=4)
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path

from cliqueperc.api.models import PercolationResult
from cliqueperc.config.settings import Settings, check_clique_size
from cliqueperc.graph.community_builder import build_community_graph
from cliqueperc.graph.exporter_factory import create_exporters
from cliqueperc.graph.finder import find_cliques
from cliqueperc.graph.layers.percolation import extract_communities
from cliqueperc.graph.model import Graph
from cliqueperc.graph.parser import load_graph_file
from cliqueperc.logging.context import run_context, stage

logger = logging.getLogger(__name__)


def percolate(
    graph: Graph,
    k: int | None = None,
    settings: Settings | None = None,
    source: str = "<memory>",
) -> PercolationResult:
    """Run the Clique Percolation Method on an in-memory graph.

    Steps:
      1. Find all k-cliques (candidates -> verification -> merge)
      2. Build the community graph (k-1 overlap edges)
      3. Extract communities (connected components)

    Args:
        graph: Input graph with symmetric adjacency.
        k: Clique size. Defaults to ``settings.clique_size``.
        settings: Run settings. Loaded from .env if None.
        source: Name of the graph's origin, for logs and summaries.

    Returns:
        PercolationResult with cliques, community graph and partition.

    Raises:
        ConfigurationError: If k < 2.
        InternalInvariantViolation: If a clique invariant check fails.
    """
    settings = settings or Settings()
    k = check_clique_size(settings.clique_size if k is None else k)

    run_id = _generate_run_id(source)
    with run_context(source, run_id):
        logger.info("Starting percolation: source=%s, run_id=%s, k=%d", source, run_id, k)

        with stage("cliques"):
            search = find_cliques(graph, k, verify_invariants=settings.verify_invariants)

        with stage("community_graph"):
            community_graph = build_community_graph(
                search.cliques, k, separator=settings.label_separator,
            )

        with stage("percolation"):
            partition = extract_communities(
                community_graph, k, min_community_size=settings.community_min_size,
            )

        stats = dict(search.stats)
        stats["community_nodes"] = len(community_graph)
        stats["community_edges"] = community_graph.number_of_edges() // 2
        stats["communities"] = partition.total_communities

        logger.info(
            "Percolation complete: run_id=%s, cliques=%d, communities=%d",
            run_id, len(search.cliques), partition.total_communities,
        )
    return PercolationResult(
        run_id=run_id,
        source=source,
        k=k,
        graph=graph,
        cliques=search.cliques,
        community_graph=community_graph,
        partition=partition,
        stats=stats,
    )


def analyze_file(
    path: str | Path,
    k: int | None = None,
    settings: Settings | None = None,
) -> PercolationResult:
    """Parse a graph definition file and percolate it.

    Raises:
        ConfigurationError: If k < 2 (checked before the file is read).
        MalformedInputError: If the file cannot be read or parsed.
    """
    settings = settings or Settings()
    k = check_clique_size(settings.clique_size if k is None else k)

    with stage("parse"):
        graph = load_graph_file(path, symmetrize=settings.symmetrize_edges)
    return percolate(graph, k=k, settings=settings, source=str(path))


async def export_community_graph(
    result: PercolationResult,
    output_dir: str | Path,
    settings: Settings | None = None,
    formats: list[str] | None = None,
) -> list[str]:
    """Write the community graph in every configured format.

    Files are named ``community_k{k}{ext}`` inside ``output_dir``.

    Returns:
        Paths of the exported files.
    """
    graph = result.community_graph.to_networkx()
    graph.graph["k"] = result.k
    graph.graph["source"] = result.source

    paths: list[str] = []
    for exporter in create_exporters(settings, formats=formats):
        target = exporter.target_path(output_dir, f"community_k{result.k}")
        paths.append(await exporter.export(graph, str(target)))
        logger.info("Exported %s graph to %s", exporter.format_name, target)
    return paths


def _generate_run_id(source: str) -> str:
    """Generate a run ID: yyyymmdd_hhmmss_{uuid5 short}."""
    ts = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    run_uuid = uuid.uuid5(uuid.NAMESPACE_URL, f"{source}_{ts}_{uuid.uuid4().hex}")
    return f"{ts}_{run_uuid.hex[:12]}"
