"""YAML loader for suite configuration files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ruamel.yaml import YAML


class SuiteConfigLoader:
    """
    Loads suite configuration documents into plain mappings.

    The loader does not interpret the options; it only guarantees that a
    document is a mapping at root level. An empty document loads as an
    empty mapping.
    """

    def __init__(self):
        self.yaml = YAML(typ="safe")

    def load(self, file_path: str | Path) -> dict[str, Any]:
        """
        Load suite configuration from a YAML file.

        Args:
            file_path: Path to the YAML file

        Returns:
            The configuration mapping

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the document is not a mapping
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Suite config file not found: {file_path}")

        with open(path, encoding="utf-8") as f:
            data = self.yaml.load(f)

        return self._ensure_mapping(data)

    def load_from_string(self, yaml_content: str) -> dict[str, Any]:
        """
        Load suite configuration from a YAML string.

        Raises:
            ValueError: If the document is not a mapping
        """
        return self._ensure_mapping(self.yaml.load(yaml_content))

    @staticmethod
    def _ensure_mapping(data: Any) -> dict[str, Any]:
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError("Suite config must contain a mapping at root level")
        return data
