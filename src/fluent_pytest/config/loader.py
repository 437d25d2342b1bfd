"""YAML configuration loader for fluent checks."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from fluent_pytest.config.models import FluentConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """
    Build the session configuration from a YAML file and option overrides.

    Resolution order, later entries winning:
    1. model defaults
    2. the configuration file (explicit, or found by searching)
    3. overrides, typically the pytest command line
    """

    DEFAULT_CONFIG_NAMES = [
        "fluent.yaml",
        "fluent.yml",
        ".fluent.yaml",
        ".fluent.yml",
        "fluent-pytest.yaml",
        "fluent-pytest.yml",
    ]

    @classmethod
    def load(
        cls,
        config_path: Optional[str | Path] = None,
        root_dir: Optional[Path] = None,
        *,
        start_dir: Optional[Path] = None,
        required: bool = True,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> FluentConfig:
        """
        Load the configuration.

        Args:
            config_path: Config file, relative paths resolved against root_dir.
                If None, default names are searched from start_dir up to root_dir.
            root_dir: Project root, never searched past. Defaults to the current directory.
            start_dir: Directory the search starts from. Defaults to root_dir.
            required: Whether a missing config_path is an error. When False, a
                missing file falls back to the default search.
            overrides: Field values applied on top of the file. None values are
                ignored, so unset command line options can be passed as-is.

        Returns:
            Validated FluentConfig.

        Raises:
            FileNotFoundError: If a required config_path does not exist.
            pydantic.ValidationError: If the file or overrides hold invalid values.
        """
        root_dir = (root_dir or Path.cwd()).resolve()
        path = cls._resolve_path(config_path, root_dir, required)
        if path is None:
            path = cls.find_config_file(start_dir or root_dir, stop_dir=root_dir)

        if path is None:
            logger.info("No fluent configuration file found, using defaults")
            cfg = FluentConfig()
        else:
            cfg = cls._load_from_file(path)

        applied = {k: v for k, v in (overrides or {}).items() if v is not None}
        if applied:
            logger.debug(f"Applying fluent option overrides: {sorted(applied)}")
            cfg = cls.merge_configs(cfg, FluentConfig(**applied))
        return cfg

    @classmethod
    def _resolve_path(
        cls,
        config_path: Optional[str | Path],
        root_dir: Path,
        required: bool,
    ) -> Optional[Path]:
        if config_path is None:
            return None
        path = Path(config_path)
        if not path.is_absolute():
            path = root_dir / path
        if path.is_file():
            return path
        if required:
            raise FileNotFoundError(f"Configuration file not found: {path}")
        logger.debug(f"Optional fluent config {path} is missing, searching defaults")
        return None

    @classmethod
    def find_config_file(cls, start_dir: Path, stop_dir: Optional[Path] = None) -> Optional[Path]:
        """
        Find the nearest default config file.

        Looks in start_dir, then its parents up to and including stop_dir. A
        start_dir outside stop_dir is searched alone. Without stop_dir the
        search goes up to the filesystem root.

        Returns:
            Path to the found file, or None.
        """
        current = start_dir.resolve()
        stop = stop_dir.resolve() if stop_dir is not None else None
        if stop is not None and current != stop and stop not in current.parents:
            stop = current

        while True:
            for name in cls.DEFAULT_CONFIG_NAMES:
                candidate = current / name
                if candidate.is_file():
                    logger.debug(f"Found fluent config file: {candidate}")
                    return candidate
            if current == stop or current.parent == current:
                return None
            current = current.parent

    @classmethod
    def _load_from_file(cls, path: Path) -> FluentConfig:
        logger.info(f"Loading fluent configuration from: {path}")
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Fluent configuration in {path} must be a mapping")
        return FluentConfig.model_validate(data)

    @classmethod
    def merge_configs(cls, base: FluentConfig, override: FluentConfig) -> FluentConfig:
        """Merge two configurations, fields explicitly set on override winning."""
        merged = base.model_dump()
        merged.update(override.model_dump(exclude_unset=True))
        return FluentConfig.model_validate(merged)
