"""CLI module for uxid.

Provides command-line tools to generate and inspect UXIDs.
"""

from uxid.cli.app import app

__all__ = ["app"]
