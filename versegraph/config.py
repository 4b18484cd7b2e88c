"""
Configuration for VerseGraph.

Supports loading from:
1. Environment variables (highest priority)
2. YAML config file
3. Default values (fallback)
"""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator


def _read_yaml(path: Path) -> dict[str, Any]:
    with open(path) as f:
        return yaml.safe_load(f) or {}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    log_to_file: bool = True
    log_dir: str = "logs"
    file_rotation: str = "10 MB"
    file_retention: str = "7 days"
    compression: str = "zip"
    serialize: bool = True


class CrossReferenceConfig(BaseModel):
    """Cross-reference store and graph builder configuration."""

    backend: str = "memory"  # memory, sqlite
    db_path: str = "data/versegraph.db"
    seed_catalogue: bool = True
    default_depth: int = Field(default=1, ge=1)
    max_depth: int = Field(default=3, ge=1)

    @model_validator(mode="after")
    def _depth_bounds(self) -> "CrossReferenceConfig":
        if self.default_depth > self.max_depth:
            raise ValueError("default_depth cannot exceed max_depth")
        return self


class LayoutConfig(BaseModel):
    """Radial layout geometry."""

    center_x: float = 200.0
    center_y: float = 200.0
    radius: float = Field(default=150.0, gt=0)


class ExplorerConfig(BaseModel):
    """Explorer interaction limits."""

    min_scale: float = Field(default=0.5, gt=0)
    max_scale: float = Field(default=2.0, gt=0)
    # None leaves panning unclamped
    pan_limit: float | None = None

    @model_validator(mode="after")
    def _scale_bounds(self) -> "ExplorerConfig":
        if self.min_scale > self.max_scale:
            raise ValueError("min_scale cannot exceed max_scale")
        return self


class DeepLinkConfig(BaseModel):
    """Deep link URL scheme configuration."""

    scheme: str = "biblev1"
    host: str = "verse"
    default_translation: str = "engKJV"


class ArchiveConfig(BaseModel):
    """Conversation archive configuration."""

    export_dir: str = "exports"


class Config(BaseModel):
    """Main configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    cross_references: CrossReferenceConfig = Field(default_factory=CrossReferenceConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    explorer: ExplorerConfig = Field(default_factory=ExplorerConfig)
    deep_links: DeepLinkConfig = Field(default_factory=DeepLinkConfig)
    archive: ArchiveConfig = Field(default_factory=ArchiveConfig)

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """
        Load configuration from environment variables.

        Priority: .env file -> system environment variables -> defaults

        Args:
            env_file: Optional path to .env file (default: .env in project root)

        Returns:
            Config instance

        Environment variables:
            VERSEGRAPH_XREF_BACKEND: Cross-reference backend (memory, sqlite)
            VERSEGRAPH_XREF_DB_PATH: SQLite database path
            VERSEGRAPH_XREF_SEED: Seed the built-in catalogue on initialize
            VERSEGRAPH_XREF_DEFAULT_DEPTH: Default graph traversal depth
            VERSEGRAPH_XREF_MAX_DEPTH: Maximum graph traversal depth
            VERSEGRAPH_LAYOUT_RADIUS: Radial layout radius
            VERSEGRAPH_EXPLORER_MIN_SCALE / VERSEGRAPH_EXPLORER_MAX_SCALE: Zoom bounds
            VERSEGRAPH_EXPLORER_PAN_LIMIT: Optional pan clamp
            VERSEGRAPH_DEEP_LINK_SCHEME: Deep link URL scheme
            VERSEGRAPH_DEFAULT_TRANSLATION: Translation used when a link has none
            VERSEGRAPH_EXPORT_DIR: Directory for conversation exports
            VERSEGRAPH_LOG_LEVEL: Log level
        """
        if env_file:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv()

        def get_env(key: str, default: Any = None, cast: type | None = None) -> Any:
            """Get environment variable with type conversion."""
            value = os.getenv(key)
            if value is None or value == "":
                return default
            target = cast or type(default)
            if target is bool:
                return str(value).lower() in ("true", "1", "yes")
            if target in (int, float):
                return target(value)
            return value

        return cls(
            cross_references=CrossReferenceConfig(
                backend=get_env("VERSEGRAPH_XREF_BACKEND", "memory"),
                db_path=get_env("VERSEGRAPH_XREF_DB_PATH", "data/versegraph.db"),
                seed_catalogue=get_env("VERSEGRAPH_XREF_SEED", True),
                default_depth=get_env("VERSEGRAPH_XREF_DEFAULT_DEPTH", 1),
                max_depth=get_env("VERSEGRAPH_XREF_MAX_DEPTH", 3),
            ),
            layout=LayoutConfig(
                center_x=get_env("VERSEGRAPH_LAYOUT_CENTER_X", 200.0),
                center_y=get_env("VERSEGRAPH_LAYOUT_CENTER_Y", 200.0),
                radius=get_env("VERSEGRAPH_LAYOUT_RADIUS", 150.0),
            ),
            explorer=ExplorerConfig(
                min_scale=get_env("VERSEGRAPH_EXPLORER_MIN_SCALE", 0.5),
                max_scale=get_env("VERSEGRAPH_EXPLORER_MAX_SCALE", 2.0),
                pan_limit=get_env("VERSEGRAPH_EXPLORER_PAN_LIMIT", None, cast=float),
            ),
            deep_links=DeepLinkConfig(
                scheme=get_env("VERSEGRAPH_DEEP_LINK_SCHEME", "biblev1"),
                host=get_env("VERSEGRAPH_DEEP_LINK_HOST", "verse"),
                default_translation=get_env("VERSEGRAPH_DEFAULT_TRANSLATION", "engKJV"),
            ),
            archive=ArchiveConfig(
                export_dir=get_env("VERSEGRAPH_EXPORT_DIR", "exports"),
            ),
            logging=LoggingConfig(
                level=get_env("VERSEGRAPH_LOG_LEVEL", "INFO"),
                log_to_file=get_env("VERSEGRAPH_LOG_TO_FILE", True),
                log_dir=get_env("VERSEGRAPH_LOG_DIR", "logs"),
                file_rotation=get_env("VERSEGRAPH_LOG_FILE_ROTATION", "10 MB"),
                file_retention=get_env("VERSEGRAPH_LOG_FILE_RETENTION", "7 days"),
                compression=get_env("VERSEGRAPH_LOG_COMPRESSION", "zip"),
                serialize=get_env("VERSEGRAPH_LOG_SERIALIZE", True),
            ),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        return cls(**_read_yaml(path))

    @classmethod
    def from_env_or_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str | Path | None = None
    ) -> "Config":
        """
        Load configuration with priority: env vars > YAML > defaults.

        Args:
            yaml_path: Optional path to YAML config
            env_file: Optional path to .env file

        Returns:
            Config instance
        """
        merged = _read_yaml(Path(yaml_path)) if yaml_path and Path(yaml_path).exists() else {}
        env_config = cls.from_env(env_file=env_file)
        defaults = cls()

        # A section set through the environment replaces the YAML section
        for section in cls.model_fields:
            env_section = getattr(env_config, section)
            if env_section != getattr(defaults, section):
                merged[section] = env_section.model_dump()

        return cls(**merged)

