"""Slot Mention Annotator package."""

__version__ = "0.1.0"
__author__ = "slot-mention-annotator"

from .annotator import AnnotatorConfig, SlotMentionAnnotator
from .models import (
    AnnotationResult,
    EntityMention,
    Sentence,
    SentenceAnnotation,
    SlotMention,
    Token,
)
from .ner import NER_BLANK, PERSON_PRONOUNS, NERTag
from .spans import Span
from .tree import ParseTree

__all__ = [
    "AnnotatorConfig",
    "SlotMentionAnnotator",
    "AnnotationResult",
    "EntityMention",
    "Sentence",
    "SentenceAnnotation",
    "SlotMention",
    "Token",
    "NER_BLANK",
    "PERSON_PRONOUNS",
    "NERTag",
    "Span",
    "ParseTree",
]
