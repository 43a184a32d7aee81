"""
Closeness policies deciding whether a candidate span is near a primary entity
"""

from abc import ABC, abstractmethod
from typing import Collection, Optional

from ..spans import Span


class ProximityPolicy(ABC):
    """Predicate over a candidate span and the primary entity extents"""

    @abstractmethod
    def close_enough(self, span: Span, entity_spans: Collection[Span]) -> bool:
        pass


class TokenDistanceProximity(ProximityPolicy):
    """
    Accept a span lying within ``max_distance`` tokens of some primary extent.

    With no primary extents nothing is close. ``max_distance=None`` drops the
    distance limit but still requires at least one primary extent.
    """

    def __init__(self, max_distance: Optional[int] = 40):
        if max_distance is not None and max_distance < 0:
            raise ValueError(f"max_distance must be non-negative, got {max_distance}")
        self.max_distance = max_distance

    def close_enough(self, span: Span, entity_spans: Collection[Span]) -> bool:
        for entity_span in entity_spans:
            if self.max_distance is None or span.distance_to(entity_span) <= self.max_distance:
                return True
        return False


class AlwaysClose(ProximityPolicy):
    """No proximity filtering."""

    def close_enough(self, span: Span, entity_spans: Collection[Span]) -> bool:
        return True
