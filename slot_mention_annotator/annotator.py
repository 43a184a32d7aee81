"""Sentence-level orchestration of the modifier and slot passes."""

from __future__ import annotations

import concurrent.futures
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from .models import AnnotationResult, Sentence, SentenceAnnotation
from .passes.modifiers import ModifierFinder
from .passes.slots import SlotSpanScanner, rewrite_coreferent_ner
from .resources.gazetteer import Gazetteer, StaticGazetteer
from .resources.proximity import ProximityPolicy, TokenDistanceProximity
from .spans import Span
from .utils.config import ConfigManager

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AnnotatorConfig:
    find_modifiers: bool = True
    phrase_label: str = "NP"
    rewrite_coreferent_pronouns: bool = True
    max_token_distance: Optional[int] = 40  # None disables the distance limit
    gazetteer_path: Optional[Path] = None
    workers: int = 1

    @classmethod
    def from_config_manager(cls, manager: ConfigManager) -> "AnnotatorConfig":
        gazetteer_path = manager.get("gazetteer.path")
        max_token_distance = manager.get("slots.max_token_distance", 40)
        return cls(
            find_modifiers=bool(manager.get("modifiers.enabled", True)),
            phrase_label=manager.get("modifiers.phrase_label", "NP"),
            rewrite_coreferent_pronouns=bool(manager.get("coreference.rewrite_pronouns", True)),
            max_token_distance=int(max_token_distance) if max_token_distance is not None else None,
            gazetteer_path=Path(gazetteer_path) if gazetteer_path else None,
            workers=int(manager.get("processing.workers", 1)),
        )


class SlotMentionAnnotator:
    """
    Annotates slot mentions in a set of sentences.

    Each sentence goes through the modifier pass (needs a parse tree), then
    the coreference retagging of pronouns, then the slot scan. Sentences share
    no state, so a batch can be spread over worker threads.
    """

    def __init__(
        self,
        config: Optional[AnnotatorConfig] = None,
        gazetteer: Optional[Gazetteer] = None,
        proximity: Optional[ProximityPolicy] = None,
    ):
        self.config = config or AnnotatorConfig()
        if gazetteer is None:
            gazetteer = StaticGazetteer.default(self.config.gazetteer_path)
        self.gazetteer = gazetteer
        self.proximity = proximity or TokenDistanceProximity(self.config.max_token_distance)
        self.modifier_finder = ModifierFinder(phrase_label=self.config.phrase_label)
        # Pronoun retagging happens in annotate_sentence, after the modifier pass
        self.scanner = SlotSpanScanner(
            gazetteer=self.gazetteer,
            proximity=self.proximity,
            rewrite_pronouns=False,
        )

    def annotate_sentence(self, sentence: Sentence) -> SentenceAnnotation:
        """Run both passes over one sentence, mutating its token NER tags."""
        sentence.validate_bounds()
        tokens = sentence.tokens
        mentions = sentence.entity_mentions

        modifier_spans = []
        if self.config.find_modifiers:
            modifier_spans = self._find_modifiers(sentence)

        rewrites = 0
        if self.config.rewrite_coreferent_pronouns:
            rewrites = rewrite_coreferent_ner(tokens, self.gazetteer)

        slots = self.scanner.scan(tokens, mentions, id_prefix=sentence.sentence_id)
        logger.debug(f"Sentence {sentence.sentence_id}: {len(slots)} slot mentions")

        return SentenceAnnotation(
            sentence_id=sentence.sentence_id,
            slot_mentions=slots,
            modifier_spans=modifier_spans,
            coreference_rewrites=rewrites,
            tokens=[token.model_copy() for token in tokens],
        )

    def annotate(self, sentences: Sequence[Sentence]) -> AnnotationResult:
        """Annotate every sentence; results keep the input order."""
        if self.config.workers > 1 and len(sentences) > 1:
            with concurrent.futures.ThreadPoolExecutor(max_workers=self.config.workers) as executor:
                annotations = list(executor.map(self.annotate_sentence, sentences))
        else:
            annotations = [self.annotate_sentence(sentence) for sentence in sentences]
        return AnnotationResult(sentences=annotations)

    def _find_modifiers(self, sentence: Sentence) -> List[Span]:
        tree = sentence.parse_tree
        if tree is None:
            logger.warning(f"No tree in sentence {sentence.sentence_id}: {sentence.text}")
            return []

        leaf_count = len(tree.leaves())
        if leaf_count != len(sentence.tokens):
            logger.warning(
                f"Parse tree of sentence {sentence.sentence_id} has {leaf_count} leaves "
                f"but the sentence has {len(sentence.tokens)} tokens; skipping modifiers"
            )
            return []

        return self.modifier_finder.tag_modifiers(sentence.tokens, tree, sentence.entity_mentions)
