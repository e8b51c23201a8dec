# src/__init__.py — v1
"""cliqueperc — Clique Percolation Method (k-clique communities)."""

from cliqueperc.version import __version__

__all__ = ["__version__"]
