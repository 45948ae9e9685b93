"""Configuration file loaders for JSON and TOML formats."""

import json
import tomllib
from pathlib import Path

from .models import Settings


class ConfigLoader:
    """Load detection ``Settings`` from configuration files.

    A config file holds the same structure as ``Settings``::

        # detection.toml
        n_jobs = 4

        [detection]
        heart_rate_hz = 1.2
        r_threshold = 2.0

    Raises on load:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError / tomllib.TOMLDecodeError: If the file cannot be parsed
        pydantic.ValidationError: If the content doesn't match ``Settings``
    """

    @staticmethod
    def from_json(path: str | Path) -> Settings:
        return Settings.model_validate(json.loads(Path(path).read_text(encoding="utf-8")))

    @staticmethod
    def from_toml(path: str | Path) -> Settings:
        return Settings.model_validate(tomllib.loads(Path(path).read_text(encoding="utf-8")))

    @classmethod
    def from_file(cls, path: str | Path) -> Settings:
        """Load settings, picking the parser from the file extension.

        Raises:
            ValueError: If the extension is neither .json nor .toml
        """
        path = Path(path)
        loaders = {".json": cls.from_json, ".toml": cls.from_toml}
        if path.suffix not in loaders:
            raise ValueError(f"Unsupported config file format: {path.suffix!r}. Only .json and .toml are supported.")
        return loaders[path.suffix](path)
