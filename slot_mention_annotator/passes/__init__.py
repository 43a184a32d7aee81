"""Annotation passes run over each sentence."""

from .modifiers import ModifierFinder, find_modifier_span
from .slots import SlotSpanScanner, build_entity_mask, rewrite_coreferent_ner, vote_entity_ner

__all__ = [
    "ModifierFinder",
    "find_modifier_span",
    "SlotSpanScanner",
    "build_entity_mask",
    "rewrite_coreferent_ner",
    "vote_entity_ner",
]
