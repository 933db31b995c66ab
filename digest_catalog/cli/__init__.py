# digest_catalog/cli/__init__.py
"""
digest-catalog CLI module.

Provides the single `digest-catalog` command.
"""

from digest_catalog.cli.cli import app, main

__all__ = ["app", "main"]
