"""
Documentation collector.

Copies Markdown documents and assets from the project tree into the
documentation site's content directory:

- General docs are mirrored as ``<dir>/index.md`` with frontmatter injected
- Connector and plugin READMEs are flattened to ``<category>/<name>.md``
  and listed in a generated ``<category>/index.md``
- Assets are resized/transcoded into the assets directory
- Pre-authored pages under the pass-through directory are copied verbatim

Files are processed one at a time; a failure on one file is logged and the
run continues. Only failing to enumerate the project root aborts a run.
"""

import shutil
from pathlib import Path
from typing import List, Optional

from loguru import logger

from docsite.models.schemas import Category, CollectionReport
from docsite.utils.config import Settings, get_settings
from docsite.utils.helpers import (
    has_dir_segment,
    is_hidden,
    is_markdown,
    normalize_path,
    path_segments,
    relative_posix,
    walk_files,
)
from domains.doc_ingest.processors.frontmatter import add_frontmatter, render_frontmatter
from domains.doc_ingest.processors.images import process_asset
from domains.doc_ingest.processors.router import (
    category_index_path,
    destination_for,
    passthrough_destination,
    resolve_category,
)

ASSETS_DIR_NAME = "assets"
README_NAME = "README.md"


class DocCollectionError(Exception):
    """Base error for the documentation collector."""


class DiscoveryError(DocCollectionError):
    """Raised when the project tree cannot be enumerated."""


class DocCollector:
    """Collects documentation from the project tree into the site."""

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the collector.

        Args:
            settings: Collector settings, defaults to the cached environment settings
        """
        self.settings = settings or get_settings()
        self.root = self.settings.get_project_root()
        self.docs_dir = self.settings.get_docs_dir()
        self.assets_dir = self.settings.get_assets_dir()
        self.ignore_dirs = self.settings.get_ignore_dirs()
        self.passthrough_dir = self.settings.passthrough_dir
        self.image_extensions = self.settings.get_image_extensions()
        self.max_image_size = self.settings.get_max_image_size()

        self.report = CollectionReport()

        logger.debug(f"Project root: {self.root}")
        logger.debug(f"Docs directory: {self.docs_dir}")

    # Discovery -----------------------------------------------------------------

    def discover(self, extra_ignores: Optional[List[str]] = None) -> List[str]:
        """
        List all files under the project root outside ignored directories.

        Raises:
            DiscoveryError: If the project root cannot be listed
        """
        ignores = self.ignore_dirs + (extra_ignores or [])
        try:
            return walk_files(self.root, ignores)
        except OSError as e:
            raise DiscoveryError(f"Cannot enumerate {self.root}: {e}") from e

    def discover_documents(self) -> List[str]:
        """Markdown files of the general pass."""
        special = [
            Category.CONNECTOR.directory,
            Category.PLUGIN.directory,
            ASSETS_DIR_NAME,
            self.passthrough_dir,
        ]
        return [f for f in self.discover(special) if is_markdown(f)]

    # Single-file copy ----------------------------------------------------------

    def copy_document(self, rel_path: str) -> Optional[Path]:
        """
        Copy one document to its routed destination, adding frontmatter.

        Used for every general document and for watch-mode updates. Paths are
        routed the way a full run would treat them: pass-through pages are
        copied verbatim, while documents under ``assets`` and READMEs sitting
        directly in a category directory are skipped.

        Args:
            rel_path: Project-relative source path

        Returns:
            Destination path, or None if nothing was copied
        """
        rel_path = normalize_path(rel_path)

        if has_dir_segment(rel_path, [ASSETS_DIR_NAME]):
            logger.debug(f"Skipping {rel_path}: inside an assets directory")
            return None

        if has_dir_segment(rel_path, [self.passthrough_dir]):
            return self.copy_passthrough_page(rel_path)

        category = resolve_category(rel_path)
        if category is Category.GENERAL and has_dir_segment(
            rel_path, [Category.CONNECTOR.directory, Category.PLUGIN.directory]
        ):
            logger.debug(f"Skipping {rel_path}: not a component document")
            return None

        target = self.docs_dir / destination_for(category, rel_path)

        try:
            self._write_document(self.root / rel_path, target, rel_path)
        except FileNotFoundError:
            logger.info(f"File {rel_path} no longer exists, skipping")
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error copying file {rel_path}: {e}")
            self.report.errors += 1
            return None

        logger.info(f"Copied and processed {rel_path} to {target}")
        return target

    def copy_passthrough_page(self, rel_path: str) -> Optional[Path]:
        """Copy a pre-authored page verbatim with the pass-through segment removed."""
        rel_path = normalize_path(rel_path)
        target = self.docs_dir / passthrough_destination(rel_path, self.passthrough_dir)

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(self.root / rel_path, target)
        except FileNotFoundError:
            logger.info(f"File {rel_path} no longer exists, skipping")
            return None
        except OSError as e:
            logger.error(f"Error copying page {rel_path}: {e}")
            self.report.errors += 1
            return None

        logger.info(f"Copied {rel_path} to {target}")
        return target

    def _write_document(self, source: Path, target: Path, rel_path: str):
        content = source.read_bytes().decode("utf-8")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(add_frontmatter(content, rel_path).encode("utf-8"))

    # Passes --------------------------------------------------------------------

    def collect_documents(self) -> List[str]:
        """
        Copy every general document.

        Raises:
            DiscoveryError: If discovery fails
        """
        files = self.discover_documents()
        logger.info(f"Found files: {files}")

        for file in files:
            if self.copy_document(file) is not None:
                self.report.documents += 1

        return files

    def collect_passthrough(self) -> List[str]:
        """Copy pre-authored pages verbatim, dropping the pass-through segment."""
        try:
            files = self.discover([ASSETS_DIR_NAME])
        except DiscoveryError as e:
            logger.error(f"Error collecting pass-through pages: {e}")
            self.report.errors += 1
            return []

        pages = [
            f for f in files
            if is_markdown(f) and has_dir_segment(f, [self.passthrough_dir])
        ]

        for page in pages:
            if self.copy_passthrough_page(page) is not None:
                self.report.passthrough += 1

        return pages

    def collect_assets(self) -> List[str]:
        """Process every file inside an ``assets`` directory."""
        try:
            files = self.discover()
        except DiscoveryError as e:
            logger.error(f"Error collecting assets: {e}")
            self.report.errors += 1
            return []

        assets = [
            f for f in files
            if has_dir_segment(f, [ASSETS_DIR_NAME]) and "." in path_segments(f)[-1]
        ]
        logger.info(f"Found asset files: {assets}")

        for asset in assets:
            source = self.root / asset
            target = self.assets_dir / source.name
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                process_asset(source, target, self.max_image_size, self.image_extensions)
                self.report.assets += 1
            except OSError as e:
                logger.error(f"Error copying asset {asset}: {e}")
                self.report.errors += 1

        return assets

    def find_readme(self, component_dir: Path) -> Optional[Path]:
        """Locate a component README, falling back to a case-insensitive match."""
        exact = component_dir / README_NAME
        if exact.is_file():
            return exact

        for item in sorted(component_dir.iterdir()):
            if item.is_file() and item.name.lower() == README_NAME.lower():
                return item

        return None

    def collect_category(self, category: Category) -> List[str]:
        """
        Flatten the READMEs of one component category and write its index.

        Args:
            category: Category.CONNECTOR or Category.PLUGIN

        Returns:
            Component names listed in the index
        """
        category_root = self.root / category.directory
        if not category_root.is_dir():
            logger.info(f"No {category.directory} directory in {self.root}, skipping")
            return []

        try:
            components = sorted(
                item.name for item in category_root.iterdir()
                if item.is_dir() and not is_hidden(item)
            )
        except OSError as e:
            logger.error(f"Error collecting {category.directory} documentation: {e}")
            self.report.errors += 1
            return []

        logger.info(f"Found {category.label} directories: {components}")

        for name in components:
            self._collect_component(category, category_root / name)

        self.write_category_index(category, components)
        return components

    def _collect_component(self, category: Category, component_dir: Path):
        name = component_dir.name
        try:
            readme = self.find_readme(component_dir)
            if readme is None:
                logger.info(f"No README.md found for {category.label} {name}")
                return

            rel_path = relative_posix(readme, self.root)
            target = self.docs_dir / destination_for(category, rel_path)
            self._write_document(readme, target, rel_path)

        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error processing {category.label} {name}: {e}")
            self.report.errors += 1
            return

        if category is Category.CONNECTOR:
            self.report.connectors += 1
        else:
            self.report.plugins += 1
        logger.info(f"Generated documentation for {category.label} {name}")

    def write_category_index(self, category: Category, names: List[str]):
        """Write the generated index page listing every component."""
        title = category.directory.capitalize()
        content = render_frontmatter(
            title, f"List of all available {category.directory} and their documentation"
        )
        content += f"# Available {title}\n\n"
        content += "\n".join(f"- [{name}]({name})" for name in names)
        content += "\n"

        target = self.docs_dir / category_index_path(category)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
            logger.info(f"Generated {category.directory} index")
        except OSError as e:
            logger.error(f"Error writing {category.directory} index: {e}")
            self.report.errors += 1

    # Full run ------------------------------------------------------------------

    def clean(self):
        """Remove previously generated docs and assets."""
        for directory in (self.docs_dir, self.assets_dir):
            if not directory.exists():
                continue

            # Never delete a directory holding the sources
            if directory == self.root or directory in self.root.parents:
                logger.error(f"Refusing to clean {directory}: it contains the project root")
                continue

            try:
                shutil.rmtree(directory)
                logger.info(f"Removed previous output {directory}")
            except OSError as e:
                logger.error(f"Failed to remove {directory}: {e}")
                self.report.errors += 1

    def collect(self) -> CollectionReport:
        """
        Clean the output and run every collection pass.

        Returns:
            Counters for this run

        Raises:
            DiscoveryError: If the project root cannot be enumerated
        """
        self.report = CollectionReport()
        logger.info(f"Collecting documentation from {self.root}")

        self.clean()
        self.collect_documents()
        self.collect_passthrough()
        self.collect_assets()
        self.collect_category(Category.PLUGIN)
        self.collect_category(Category.CONNECTOR)

        logger.success(f"Documentation collection completed: {self.report.summary()}")
        return self.report
