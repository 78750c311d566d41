"""
Documentation Processors

Shared processing utilities for collected files:
- frontmatter.py - Title/description derivation and header injection
- router.py - Category resolution and destination mapping
- images.py - Image resizing and animation transcoding
"""
