"""Entry point for `python -m gcpcache`.

Usage:
    python -m gcpcache locations my-project
    python -m gcpcache gke-clusters my-project -l us-central1
"""

from __future__ import annotations

from gcpcache.cli import cli

cli()
