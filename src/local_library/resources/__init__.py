"""Local Library Resources Package

Read-only resources exposing the catalog pages.
"""

from .catalog import catalog_resources

__all__ = ["catalog_resources"]
