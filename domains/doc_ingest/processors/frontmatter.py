"""Frontmatter generation for collected Markdown documents."""

import re

from docsite.utils.helpers import is_index_name, path_segments

FRONTMATTER_DELIMITER = "---"

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")


def generate_title(rel_path: str) -> str:
    """
    Derive a title from the directory containing ``rel_path``.

    kebab-case, snake_case and camelCase names become Title Case words.
    Files at the project root are titled "Root Documentation".
    """
    parts = path_segments(rel_path)[:-1]
    if not parts:
        return "Root Documentation"

    name = parts[-1].replace("-", " ").replace("_", " ")
    name = _CAMEL_BOUNDARY.sub(r"\1 \2", name)
    return " ".join(word[:1].upper() + word[1:].lower() for word in name.split(" ") if word)


def generate_description(rel_path: str) -> str:
    """Describe a document by the path segments leading to it."""
    parts = path_segments(rel_path)
    if parts and is_index_name(parts[-1]):
        parts = parts[:-1]
    elif parts and "." in parts[-1]:
        parts[-1] = parts[-1].rsplit(".", 1)[0]

    if not parts:
        return "Main project documentation"

    return f"Documentation for the {' '.join(parts)} component"


def has_frontmatter(content: str) -> bool:
    """Check if content already starts with a metadata block."""
    return content.startswith(FRONTMATTER_DELIMITER)


def render_frontmatter(title: str, description: str) -> str:
    """Render a title/description metadata block followed by a blank line."""
    return (
        f"{FRONTMATTER_DELIMITER}\n"
        f"title: {title}\n"
        f"description: {description}\n"
        f"{FRONTMATTER_DELIMITER}\n"
        "\n"
    )


def add_frontmatter(content: str, rel_path: str) -> str:
    """
    Prepend a generated metadata block unless one is already present.

    Args:
        content: Markdown source
        rel_path: Project-relative path the title and description derive from

    Returns:
        Content with frontmatter, or the original content unchanged
    """
    if has_frontmatter(content):
        return content

    header = render_frontmatter(generate_title(rel_path), generate_description(rel_path))
    return header + content
