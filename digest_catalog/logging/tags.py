# digest_catalog/logging/tags.py
"""Subsystem tags prefixed to log messages."""

CLI = "[CLI]"
CONFIG = "[CONFIG]"
CATALOG = "[CATALOG]"
DIGEST = "[DIGEST]"
RECONCILE = "[RECONCILE]"

__all__ = ["CLI", "CONFIG", "CATALOG", "DIGEST", "RECONCILE"]
