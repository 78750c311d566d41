"""
Pydantic models for the documentation collector.

Shared data models across the collector domains.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel


# =====================================================
# Routing Models
# =====================================================

class Category(str, Enum):
    """Classification of a documentation source, driving its output path."""
    GENERAL = "general"
    CONNECTOR = "connectors"
    PLUGIN = "plugins"

    @property
    def directory(self) -> Optional[str]:
        """Source and output directory name of a component category."""
        if self is Category.GENERAL:
            return None
        return self.value

    @property
    def label(self) -> str:
        """Human readable singular name."""
        return {
            Category.GENERAL: "document",
            Category.CONNECTOR: "connector",
            Category.PLUGIN: "plugin",
        }[self]


# =====================================================
# Run Models
# =====================================================

class CollectionReport(BaseModel):
    """Counters for one full collection pass."""
    documents: int = 0
    assets: int = 0
    connectors: int = 0
    plugins: int = 0
    passthrough: int = 0
    errors: int = 0

    def summary(self) -> str:
        """One-line summary for logs."""
        return (
            f"{self.documents} documents, {self.connectors} connectors, "
            f"{self.plugins} plugins, {self.passthrough} pass-through pages, "
            f"{self.assets} assets, {self.errors} errors"
        )
