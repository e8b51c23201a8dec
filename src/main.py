# src/main.py — v1
"""CLI entry point.

Usage:
    cliqueperc [-k K] [--format text|json] [--export FMTS -o DIR] <graph_file>

Exit codes: 0 on success, 1 on configuration, input or export errors, 2 on usage
errors (argparse), 130 when interrupted.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import TextIO

from pydantic import ValidationError

from cliqueperc.api.models import PercolationResult
from cliqueperc.config.settings import ConfigurationError, Settings, load_settings
from cliqueperc.core.errors import MalformedInputError
from cliqueperc.graph.printer import format_graph
from cliqueperc.logging.logger import setup_logging
from cliqueperc.version import __version__

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, stdout: TextIO | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    out = stdout or sys.stdout

    try:
        settings = _load_settings(args)
    except (ConfigurationError, ValidationError) as exc:
        _setup_logging(None, args.verbose)
        logger.error("Configuration error: %s", exc)
        return 1

    _setup_logging(settings, args.verbose)

    try:
        return _cmd_run(args, settings, out)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc)
        return 1
    except MalformedInputError as exc:
        logger.error("Malformed graph definition: %s", exc)
        return 1
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="cliqueperc",
        description=f"cliqueperc v{__version__} — k-clique percolation communities",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "-k", type=int, default=None,
        help="Clique size (default: 3, or CLIQUEPERC_CLIQUE_SIZE)",
    )
    parser.add_argument(
        "--format", dest="output_format", choices=["text", "json"], default=None,
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--export", default=None,
        help="Comma-separated community graph export formats: json, graphml",
    )
    parser.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Export directory (required with --export)",
    )
    parser.add_argument(
        "--strict-symmetry", action="store_true",
        help="Reject one-sided edges instead of adding the reverse edge",
    )
    parser.add_argument("graph_file", type=Path, help="Path to graph definition file")
    return parser


def _load_settings(args: argparse.Namespace) -> Settings:
    overrides: dict[str, object] = {}
    if args.k is not None:
        overrides["clique_size"] = args.k
    if args.output_format is not None:
        overrides["output_format"] = args.output_format
    if args.export is not None:
        overrides["graph_export_formats"] = args.export
    if args.strict_symmetry:
        overrides["symmetrize_edges"] = False
    if args.export is not None and args.output is None:
        raise ConfigurationError("--export requires an output directory (-o)")
    return load_settings(**overrides)


def _setup_logging(settings: Settings | None, verbose: bool) -> None:
    """Configure logging from settings; --verbose forces DEBUG."""
    if settings is None:
        setup_logging(level="DEBUG" if verbose else "WARNING")
        return
    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


def _cmd_run(args: argparse.Namespace, settings: Settings, out: TextIO) -> int:
    """Parse, percolate, print and optionally export."""
    from cliqueperc.api.facade import analyze_file, export_community_graph

    result = analyze_file(args.graph_file, settings=settings)

    if settings.output_format == "json":
        out.write(result.summary().model_dump_json(indent=2) + "\n")
    else:
        _print_result(result, out)

    if args.output is not None:
        paths = asyncio.run(
            export_community_graph(result, args.output, settings=settings)
        )
        for path in paths:
            logger.info("Wrote %s", path)
    return 0


def _print_result(result: PercolationResult, out: TextIO) -> None:
    """Print the original graph, the community graph and the communities."""
    out.write(f"k= {result.k}\n")
    out.write("The original graph\n")
    out.write("------------------\n")
    out.write(format_graph(result.graph) + "\n\n")
    out.write("Community graph:\n")
    out.write("----------------\n")
    out.write(format_graph(result.community_graph) + "\n\n")
    out.write("Communities:\n")
    out.write("------------\n")
    if not result.partition.communities:
        out.write("none\n")
    for community in result.partition.communities:
        out.write(f"{community.community_id}: {' '.join(community.members)}\n")


if __name__ == "__main__":
    sys.exit(main())
