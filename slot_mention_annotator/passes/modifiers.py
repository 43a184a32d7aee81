"""
Modifier finding: tags common-noun runs that premodify a primary entity
"""

import logging
from typing import List, Optional, Sequence

from ..models import EntityMention, Token
from ..ner import MODIFIER_TAG, NER_BLANK
from ..spans import Span
from ..tree import ParseTree

logger = logging.getLogger(__name__)


def _is_modifier_candidate(token: Token) -> bool:
    return token.pos.startswith("NN") and token.ner == NER_BLANK


def find_modifier_span(tokens: Sequence[Token], phrase_start: int, scan_end: int) -> Optional[Span]:
    """
    First maximal run of untagged nouns in ``[phrase_start, scan_end)``.

    Returns None if no token in the range qualifies.
    """
    modifier_start = None
    for i in range(phrase_start, scan_end):
        candidate = _is_modifier_candidate(tokens[i])
        if modifier_start is None:
            if candidate:
                modifier_start = i
        elif not candidate:
            return Span(modifier_start, i)
    if modifier_start is None:
        return None
    return Span(modifier_start, scan_end)


class ModifierFinder:
    """
    Tags noun modifiers of primary entity mentions with MODIFIER.

    For each mention, the smallest NP covering its head is located in the
    parse tree; untagged common nouns between the start of that NP and the
    head (e.g. "Prime Minister" in "former Prime Minister Tony Blair") are
    retagged in place.
    """

    def __init__(self, phrase_label: str = "NP"):
        self.phrase_label = phrase_label

    def tag_modifiers(
        self,
        tokens: Sequence[Token],
        tree: ParseTree,
        entity_mentions: Sequence[EntityMention],
    ) -> List[Span]:
        """
        Find and tag modifiers for every mention.

        Returns:
            The modifier spans tagged, in mention order
        """
        modifiers: List[Span] = []
        for mention in entity_mentions:
            head = mention.head
            phrase = tree.find_smallest_covering(head, self.phrase_label)
            if phrase is None:
                logger.debug(f"No {self.phrase_label} covers head [{head.start}, {head.end})")
                continue

            span = find_modifier_span(tokens, phrase.begin, head.start)
            if span is None:
                continue

            for i in span:
                tokens[i].ner = MODIFIER_TAG
            logger.debug(
                f"Found modifier [{' '.join(tokens[i].word for i in span)}] for entity "
                f"[{' '.join(tokens[i].word for i in mention.extent)}]"
            )
            modifiers.append(span)
        return modifiers
