"""Shared fixtures for slot mention annotator tests."""

import pytest

from slot_mention_annotator.models import EntityMention, Sentence, Token
from slot_mention_annotator.resources.gazetteer import StaticGazetteer


def _tokens(rows):
    """Build tokens from (word, pos, ner[, antecedent]) tuples."""
    tokens = []
    for row in rows:
        word, pos, ner = row[:3]
        antecedent = row[3] if len(row) > 3 else None
        tokens.append(Token(word=word, pos=pos, ner=ner, antecedent=antecedent))
    return tokens


@pytest.fixture
def make_tokens():
    return _tokens


@pytest.fixture
def make_sentence():
    def _make(rows, mentions=(), tree=None, sentence_id="s1"):
        return Sentence(
            sentence_id=sentence_id,
            tokens=_tokens(rows),
            entity_mentions=[
                EntityMention(extent=extent, head=head, ner_type=ner_type)
                for extent, head, ner_type in mentions
            ],
            parse_tree=tree,
        )
    return _make


@pytest.fixture
def gazetteer():
    return StaticGazetteer(
        cities=["Paris", "Honolulu", "Washington"],
        regions=["Hawaii", "Washington"],
        countries=["France", "United States"],
    )


@pytest.fixture
def obama_rows():
    """Scenario: 'Barack Obama was born in Honolulu'."""
    return [
        ("Barack", "NNP", "PERSON"),
        ("Obama", "NNP", "PERSON"),
        ("was", "VBD", "O"),
        ("born", "VBN", "O"),
        ("in", "IN", "O"),
        ("Honolulu", "NNP", "CITY"),
    ]


@pytest.fixture
def blair_rows():
    """Scenario: 'former Prime Minister Tony Blair resigned'."""
    return [
        ("former", "JJ", "O"),
        ("Prime", "NNP", "O"),
        ("Minister", "NNP", "O"),
        ("Tony", "NNP", "PERSON"),
        ("Blair", "NNP", "PERSON"),
        ("resigned", "VBD", "O"),
    ]


BLAIR_TREE = (
    "(ROOT (S (NP (JJ former) (NNP Prime) (NNP Minister) (NNP Tony) (NNP Blair))"
    " (VP (VBD resigned))))"
)


@pytest.fixture
def blair_tree():
    return BLAIR_TREE
