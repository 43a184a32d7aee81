"""
Data models for slot mention annotation
"""

from collections import Counter
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .ner import NER_BLANK, NERTag
from .spans import Span
from .tree import ParseTree


class Token(BaseModel):
    """
    A tagged token. ``ner`` is rewritten in place by the annotation passes.

    A null ``ner`` is kept as None and treated like the blank tag by the scan;
    only an explicit ``"O"`` makes a token a modifier or retagging candidate.
    """
    word: str
    pos: str
    ner: Optional[str] = NER_BLANK
    antecedent: Optional[str] = None  # Coreference antecedent text, if resolved

    @field_validator("antecedent", mode="before")
    @classmethod
    def _empty_antecedent_is_absent(cls, value: Any) -> Any:
        if value == "":
            return None
        return value


class EntityMention(BaseModel):
    """
    A primary entity mention found upstream.

    ``head`` is a contiguous ``[start, end)`` range like ``extent``; a
    two-element list is always read as a range, never as two token indices.
    """
    model_config = ConfigDict(frozen=True)

    mention_id: str = Field(default_factory=lambda: str(uuid4()))
    extent: Span
    head: Span
    ner_type: str = NER_BLANK

    @field_validator("extent", "head", mode="before")
    @classmethod
    def _coerce_span(cls, value: Any) -> Any:
        return Span.coerce(value)


class SlotMention(BaseModel):
    """A candidate slot filler proposed for the sentence's primary entities"""
    model_config = ConfigDict(frozen=True)

    mention_id: str = Field(default_factory=lambda: str(uuid4()))
    extent: Span
    head: Span
    ner_type: str
    ner_tag: NERTag
    normalized_name: Optional[str] = None

    @field_validator("ner_type")
    @classmethod
    def _ner_type_not_blank(cls, value: str) -> str:
        if not value.strip() or value == NER_BLANK:
            raise ValueError(f"Slot mention needs a named-entity type, got {value!r}")
        return value


class Sentence(BaseModel):
    """A tokenized, tagged and parsed sentence with its primary entity mentions"""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    sentence_id: str = Field(default_factory=lambda: str(uuid4()))
    tokens: List[Token]
    entity_mentions: List[EntityMention] = Field(default_factory=list)
    parse_tree: Optional[ParseTree] = None

    @field_validator("parse_tree", mode="before")
    @classmethod
    def _read_bracketed_tree(cls, value: Any) -> Any:
        if isinstance(value, str):
            return ParseTree.from_string(value) if value.strip() else None
        return value

    @field_serializer("parse_tree")
    def _write_bracketed_tree(self, tree: Optional[ParseTree]) -> Optional[str]:
        return tree.to_string() if tree is not None else None

    @property
    def text(self) -> str:
        return " ".join(token.word for token in self.tokens)

    def span_text(self, span: Span) -> str:
        return " ".join(self.tokens[i].word for i in span)

    def validate_bounds(self) -> None:
        """Raise ValueError if any mention span falls outside the token sequence."""
        size = len(self.tokens)
        for mention in self.entity_mentions:
            for name, span in (("extent", mention.extent), ("head", mention.head)):
                if span.end > size:
                    raise ValueError(
                        f"Entity mention {mention.mention_id} {name} [{span.start}, {span.end}) "
                        f"exceeds sentence length {size}"
                    )


class SentenceAnnotation(BaseModel):
    """Everything the annotator produced for one sentence"""
    sentence_id: str
    slot_mentions: List[SlotMention] = Field(default_factory=list)
    modifier_spans: List[Span] = Field(default_factory=list)
    coreference_rewrites: int = 0
    tokens: List[Token] = Field(default_factory=list)


class AnnotationResult(BaseModel):
    """Complete result from annotating a batch of sentences"""
    sentences: List[SentenceAnnotation]
    meta: Dict[str, Any] = Field(default_factory=dict)

    def model_post_init(self, __context) -> None:
        """Add summary metadata after initialization"""
        if not self.meta:
            slot_types = Counter(
                slot.ner_type
                for sentence in self.sentences
                for slot in sentence.slot_mentions
            )
            self.meta = {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "sentences_count": len(self.sentences),
                "slot_mentions_count": sum(slot_types.values()),
                "modifiers_count": sum(len(s.modifier_spans) for s in self.sentences),
                "slot_types": dict(slot_types),
            }
