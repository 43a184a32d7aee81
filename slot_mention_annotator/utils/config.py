"""
Configuration management for the slot mention annotator
"""

import copy
import logging
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

logger = logging.getLogger(__name__)


DEFAULT_CONFIG = {
    "modifiers": {
        "enabled": True,
        "phrase_label": "NP"
    },
    "coreference": {
        "rewrite_pronouns": True
    },
    "slots": {
        "max_token_distance": 40
    },
    "gazetteer": {
        "path": None
    },
    "processing": {
        "workers": 1
    }
}


class ConfigManager:
    """Manages configuration for the slot mention annotator"""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to YAML config file, if None uses defaults
        """
        self.config = copy.deepcopy(DEFAULT_CONFIG)

        if config_path and config_path.exists():
            self.load_config(config_path)
        elif config_path:
            logger.warning(f"Config file not found: {config_path}, using defaults")

    def load_config(self, config_path: Path) -> None:
        """
        Merge a YAML file over the defaults.

        Raises:
            ValueError: if the file holds anything but a mapping
            yaml.YAMLError: if the file is not valid YAML
        """
        with open(config_path, "r", encoding="utf-8") as f:
            file_config = yaml.safe_load(f) or {}

        if not isinstance(file_config, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping")

        self.config = _deep_merge(DEFAULT_CONFIG, file_config)
        logger.info(f"Loaded configuration from {config_path}")

    def get(self, key_path: str, default: Any = None) -> Any:
        """Look up a dotted path like 'slots.max_token_distance'; ``default`` if any part is missing."""
        node: Any = self.config
        for key in key_path.split("."):
            if not isinstance(node, dict) or key not in node:
                return default
            node = node[key]
        return node

    def set(self, key_path: str, value: Any) -> None:
        """
        Set a dotted path like 'modifiers.enabled', creating sections on the way.

        Raises:
            ValueError: if a parent key already holds a non-mapping value
        """
        *parents, leaf = key_path.split(".")
        section = self.config
        for key in parents:
            section = section.setdefault(key, {})
            if not isinstance(section, dict):
                raise ValueError(f"Cannot set {key_path!r}: {key!r} is not a section")
        section[leaf] = value

    def save_config(self, config_path: Path) -> None:
        """Write the current settings as YAML, keeping section order."""
        with open(config_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(self.config, f, default_flow_style=False, sort_keys=False)
        logger.info(f"Saved configuration to {config_path}")


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of ``base`` with ``override`` merged in; nested mappings merge key by key."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged
