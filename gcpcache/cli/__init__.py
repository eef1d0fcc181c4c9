"""gcpcache command-line interface.

Exposes:
    cli -- Click group entry point (registered as ``gcpcache`` script).
"""

from gcpcache.cli.main import cli

__all__ = ["cli"]
