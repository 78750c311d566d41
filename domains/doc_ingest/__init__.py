"""
Documentation Ingestion Domain

Collects documentation from the project tree into the docs site:
- Markdown documents → frontmatter injected, routed by category
- Connector/plugin READMEs → flattened pages plus generated indexes
- Assets → resized images, GIFs transcoded to WebP
"""

__all__ = ["collectors", "processors", "watchers"]
