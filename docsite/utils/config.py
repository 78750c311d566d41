"""
Configuration management for the documentation collector.

Uses pydantic-settings to load configuration from environment variables
and .env files.
"""

from functools import lru_cache
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Collector settings loaded from environment."""

    # Source tree
    project_root: Path = Path(".")

    # Output locations (relative paths are resolved against project_root)
    docs_dir: Path = Path("docs/src/content/docs")
    assets_dir: Path = Path("docs/src/content/docs/assets")

    # Discovery
    ignore_dirs: str = "node_modules,docs,dist,vendor,build,tmp"
    passthrough_dir: str = "docs-content"

    # Image processing
    image_extensions: str = ".png,.jpg,.jpeg,.gif,.webp"
    max_image_width: int = 1200
    max_image_height: int = 1200

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="DOCSITE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    def get_project_root(self) -> Path:
        """Return the absolute project root."""
        return self.project_root.expanduser().absolute()

    def get_docs_dir(self) -> Path:
        """Return the absolute docs content directory."""
        return self._under_root(self.docs_dir)

    def get_assets_dir(self) -> Path:
        """Return the absolute processed-assets directory."""
        return self._under_root(self.assets_dir)

    def get_ignore_dirs(self) -> list[str]:
        """Parse ignored directory names into list."""
        return [d.strip() for d in self.ignore_dirs.split(',') if d.strip()]

    def get_image_extensions(self) -> list[str]:
        """Parse image extensions into lowercase list."""
        return [e.strip().lower() for e in self.image_extensions.split(',') if e.strip()]

    def get_max_image_size(self) -> tuple[int, int]:
        """Bounding box images are shrunk to fit."""
        return self.max_image_width, self.max_image_height

    def _under_root(self, path: Path) -> Path:
        path = path.expanduser()
        if path.is_absolute():
            return path
        return self.get_project_root() / path


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
