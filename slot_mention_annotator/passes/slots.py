"""
Slot span scanning: proposes named-entity runs that are not the primary entity
"""

import logging
from collections import Counter
from typing import Iterable, List, Optional, Sequence

from ..models import EntityMention, SlotMention, Token
from ..ner import (
    FUNCTION_WORD_POS,
    NER_BLANK,
    PERSON_PRONOUNS,
    PERSONAL_PRONOUN_POS,
    NERTag,
    is_blank,
)
from ..resources.gazetteer import Gazetteer
from ..resources.proximity import ProximityPolicy, TokenDistanceProximity
from ..spans import Span

logger = logging.getLogger(__name__)

# Slot types that never take an antecedent as their normalized name
_UNNORMALIZED_TAGS = frozenset({NERTag.DATE, NERTag.NUMBER})


def build_entity_mask(size: int, entity_spans: Iterable[Span]) -> List[bool]:
    """Mark every token index covered by a primary entity extent."""
    mask = [False] * size
    for span in entity_spans:
        for i in span:
            mask[i] = True
    return mask


def vote_entity_ner(tokens: Sequence[Token], mentions: Iterable[EntityMention]) -> Optional[str]:
    """
    Majority NER tag over the head tokens of the primary mentions.

    Returns None when there are no head tokens or the winner is the blank tag.
    """
    votes: Counter = Counter()
    for mention in mentions:
        for i in mention.head:
            votes[tokens[i].ner] += 1
    if not votes:
        return None
    winner, _ = votes.most_common(1)[0]
    if is_blank(winner):
        return None
    return winner


def rewrite_coreferent_ner(tokens: Sequence[Token], gazetteer: Optional[Gazetteer] = None) -> int:
    """
    Give untagged personal pronouns the entity type of their antecedent.

    Only pronouns whose antecedent looks like a proper name (capitalized) are
    considered. Person pronouns become PERSON; anything else is typed by
    looking the antecedent up as a city, then a region, then a country.

    Returns:
        Number of tokens whose NER tag was rewritten
    """
    rewritten = 0
    for token in tokens:
        antecedent = token.antecedent
        if token.ner != NER_BLANK or token.pos != PERSONAL_PRONOUN_POS:
            continue
        if not antecedent or not antecedent[0].isupper():
            continue

        new_ner = None
        if token.word.lower() in PERSON_PRONOUNS:
            new_ner = NERTag.PERSON.value
        elif gazetteer is not None:
            if gazetteer.is_valid_city(antecedent):
                new_ner = NERTag.CITY.value
            elif gazetteer.is_valid_region(antecedent):
                new_ner = NERTag.STATE_OR_PROVINCE.value
            elif gazetteer.is_valid_country(antecedent):
                new_ner = NERTag.COUNTRY.value

        if new_ner is not None:
            logger.debug(f"Retagged pronoun '{token.word}' -> {new_ner} (antecedent '{antecedent}')")
            token.ner = new_ner
            rewritten += 1
    return rewritten


class SlotSpanScanner:
    """
    Finds candidate slot mentions in a tagged sentence.

    A slot is a maximal run of tokens sharing one NER tag that lies outside
    every primary entity extent, does not start or end on a function word,
    and is close enough to a primary entity to be a plausible relation
    argument.
    """

    def __init__(
        self,
        gazetteer: Optional[Gazetteer] = None,
        proximity: Optional[ProximityPolicy] = None,
        rewrite_pronouns: bool = True,
    ):
        self.gazetteer = gazetteer
        self.proximity = proximity or TokenDistanceProximity()
        self.rewrite_pronouns = rewrite_pronouns

    def find_slot_mentions(
        self,
        tokens: Sequence[Token],
        entity_mentions: Sequence[EntityMention],
        id_prefix: str = "slot",
    ) -> List[SlotMention]:
        """Retag coreferent pronouns, then scan for slot spans."""
        if self.rewrite_pronouns:
            rewrite_coreferent_ner(tokens, self.gazetteer)
        return self.scan(tokens, entity_mentions, id_prefix=id_prefix)

    def scan(
        self,
        tokens: Sequence[Token],
        entity_mentions: Sequence[EntityMention],
        id_prefix: str = "slot",
    ) -> List[SlotMention]:
        """
        Scan tokens left to right and emit slot mentions in token order.

        Does not modify the tokens.
        """
        entity_spans = list(dict.fromkeys(mention.extent for mention in entity_mentions))
        entity_mask = build_entity_mask(len(tokens), entity_spans)
        entity_ner = vote_entity_ner(tokens, entity_mentions)

        slots: List[SlotMention] = []
        size = len(tokens)
        start = 0
        while start < size:
            token = tokens[start]
            ner = token.ner

            # Valid starts are NEs, outside the primary entity, not a continuation
            # of the primary entity's type, and not a function word
            if (is_blank(ner)
                    or entity_mask[start]
                    or (start > 0 and entity_mask[start] and entity_ner == ner)
                    or token.pos in FUNCTION_WORD_POS):
                start += 1
                continue

            antecedent = token.antecedent
            end = start + 1
            while end < size:
                current = tokens[end]
                if current.ner != ner or entity_mask[end]:
                    break
                if antecedent is None:
                    antecedent = current.antecedent
                end += 1

            while end > start + 1 and tokens[end - 1].pos in FUNCTION_WORD_POS:
                end -= 1

            # Dangling tag on the edge of the primary entity, e.g. a PERSON-tagged title just before it
            if (end < size - 1 and entity_mask[end]
                    and entity_ner is not None and tokens[end - 1].ner == entity_ner):
                start += 1
                continue

            span = Span(start, end)
            for ner_tag in NERTag.from_string(ner):
                if span.overlaps_any(entity_spans):
                    continue
                if not self.proximity.close_enough(span, entity_spans):
                    continue
                normalized_name = None
                if antecedent is not None and ner_tag not in _UNNORMALIZED_TAGS:
                    normalized_name = antecedent
                slot = SlotMention(
                    mention_id=f"{id_prefix}:{start}-{end}:{ner_tag.value}",
                    extent=span,
                    head=span,
                    ner_type=ner,
                    ner_tag=ner_tag,
                    normalized_name=normalized_name,
                )
                logger.debug(
                    f"Found slot mention [{start}, {end}) {ner_tag.value}: "
                    f"{' '.join(t.word for t in tokens[start:end])}"
                )
                slots.append(slot)

            start = end
        return slots
