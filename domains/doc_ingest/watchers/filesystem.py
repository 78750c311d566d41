"""
File system watcher for the documentation collector.

Re-copies README files as they change. Only the single-file copy runs on an
event: category indexes, assets and pass-through pages are refreshed by the
next full collection.
"""

import threading
from pathlib import Path
from typing import Optional

from loguru import logger
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from docsite.utils.helpers import path_segments, relative_posix, should_exclude_path
from domains.doc_ingest.collectors.doc_collector import README_NAME, DocCollector


class DocsEventHandler(FileSystemEventHandler):
    """Watchdog handler that re-copies changed README files."""

    def __init__(self, collector: DocCollector):
        """
        Initialize event handler.

        Args:
            collector: Collector performing the copies
        """
        super().__init__()
        self.collector = collector

    def should_process(self, rel_path: str) -> bool:
        """
        Check if a project-relative path is a README outside ignored directories.

        Args:
            rel_path: Normalized project-relative path

        Returns:
            True if should process, False otherwise
        """
        parts = path_segments(rel_path)
        if not parts or parts[-1].lower() != README_NAME.lower():
            return False

        return not should_exclude_path(rel_path, self.collector.ignore_dirs)

    def on_created(self, event: FileSystemEvent):
        """Copy a newly created README."""
        if event.is_directory:
            return
        self._handle_change(event.src_path)

    def on_modified(self, event: FileSystemEvent):
        """Copy a modified README."""
        if event.is_directory:
            return
        self._handle_change(event.src_path)

    def on_moved(self, event: FileSystemEvent):
        """Copy a README renamed into place."""
        dest = getattr(event, "dest_path", None)
        if event.is_directory or not dest:
            return
        self._handle_change(dest)

    def _handle_change(self, raw_path: str) -> Optional[Path]:
        rel_path = relative_posix(Path(raw_path), self.collector.root)
        if rel_path is None or not self.should_process(rel_path):
            return None

        logger.info(f"Change detected in {rel_path}")
        return self.collector.copy_document(rel_path)


class DocsWatcher:
    """Runs a recursive observer over the project root."""

    def __init__(self, collector: DocCollector):
        """Initialize the watcher for ``collector``'s project root."""
        self.collector = collector
        self.event_handler = DocsEventHandler(collector)
        self.observer = Observer()

    def start(self):
        """Start watching the project root."""
        self.observer.schedule(self.event_handler, str(self.collector.root), recursive=True)
        self.observer.start()
        logger.success(f"Watching {self.collector.root} for file changes...")

    def stop(self):
        """Stop watching."""
        self.observer.stop()
        self.observer.join()
        logger.info("File system observer stopped")

    def run(self, stop_event: threading.Event, poll: float = 1.0):
        """
        Watch until ``stop_event`` is set.

        Args:
            stop_event: Event signalling shutdown
            poll: Seconds between stop checks
        """
        self.start()
        try:
            while not stop_event.is_set():
                stop_event.wait(poll)
        finally:
            self.stop()
