"""
Geographic lookups used to type location-referring pronouns
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_GAZETTEER_PATH = Path(__file__).with_name("gazetteer.yaml")


class Gazetteer(ABC):
    """Read-only geography service; implementations must be safe to share across threads"""

    @abstractmethod
    def is_valid_city(self, name: str) -> bool:
        pass

    @abstractmethod
    def is_valid_region(self, name: str) -> bool:
        pass

    @abstractmethod
    def is_valid_country(self, name: str) -> bool:
        pass


def _normalize(name: str) -> str:
    return " ".join(name.split()).lower()


class StaticGazetteer(Gazetteer):
    """Gazetteer backed by in-memory name lists, matched case-insensitively"""

    def __init__(
        self,
        cities: Iterable[str] = (),
        regions: Iterable[str] = (),
        countries: Iterable[str] = (),
    ):
        self._cities = frozenset(_normalize(c) for c in cities)
        self._regions = frozenset(_normalize(r) for r in regions)
        self._countries = frozenset(_normalize(c) for c in countries)

    def is_valid_city(self, name: str) -> bool:
        return _normalize(name) in self._cities

    def is_valid_region(self, name: str) -> bool:
        return _normalize(name) in self._regions

    def is_valid_country(self, name: str) -> bool:
        return _normalize(name) in self._countries

    def __len__(self) -> int:
        return len(self._cities) + len(self._regions) + len(self._countries)

    @classmethod
    def from_dict(cls, data: Dict[str, Iterable[str]]) -> "StaticGazetteer":
        return cls(
            cities=data.get("cities") or (),
            regions=data.get("regions") or (),
            countries=data.get("countries") or (),
        )

    @classmethod
    def from_yaml(cls, path: Path) -> "StaticGazetteer":
        """
        Load a gazetteer from a YAML file.

        Args:
            path: File with optional ``cities``, ``regions`` and ``countries`` lists

        Returns:
            StaticGazetteer over the listed names
        """
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Gazetteer file {path} must contain a mapping")
        gazetteer = cls.from_dict(data)
        logger.info(f"Loaded {len(gazetteer)} gazetteer entries from {path}")
        return gazetteer

    @classmethod
    def default(cls, path: Optional[Path] = None) -> "StaticGazetteer":
        """Load ``path`` if given, otherwise the bundled list."""
        return cls.from_yaml(path or DEFAULT_GAZETTEER_PATH)
