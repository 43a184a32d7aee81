"""Collaborator services consulted by the annotation passes."""

from .gazetteer import DEFAULT_GAZETTEER_PATH, Gazetteer, StaticGazetteer
from .proximity import AlwaysClose, ProximityPolicy, TokenDistanceProximity

__all__ = [
    "DEFAULT_GAZETTEER_PATH",
    "Gazetteer",
    "StaticGazetteer",
    "AlwaysClose",
    "ProximityPolicy",
    "TokenDistanceProximity",
]
