"""Tests for spans, NER tag mapping and the pydantic data models."""

import pytest
from pydantic import ValidationError

from slot_mention_annotator.models import EntityMention, Sentence, SlotMention, Token
from slot_mention_annotator.ner import PERSON_PRONOUNS, NERTag, is_blank
from slot_mention_annotator.spans import Span
from slot_mention_annotator.tree import ParseTree


class TestSpan:
    def test_overlap_is_half_open(self):
        assert Span(0, 2).overlaps(Span(1, 3))
        assert not Span(0, 2).overlaps(Span(2, 4))
        assert Span(2, 4).overlaps_any([Span(0, 1), Span(3, 5)])

    def test_distance(self):
        assert Span(0, 2).distance_to(Span(5, 6)) == 3
        assert Span(5, 6).distance_to(Span(0, 2)) == 3
        assert Span(0, 2).distance_to(Span(2, 3)) == 0
        assert Span(0, 4).distance_to(Span(1, 2)) == 0

    def test_iteration_and_length(self):
        assert list(Span(2, 5)) == [2, 3, 4]
        assert len(Span(2, 5)) == 3
        assert 3 in Span(2, 5)
        assert 5 not in Span(2, 5)

    @pytest.mark.parametrize("start,end", [(3, 2), (-1, 2)])
    def test_invalid_spans_rejected(self, start, end):
        with pytest.raises(ValueError):
            Span(start, end)

    def test_hashable_and_ordered(self):
        assert len({Span(0, 1), Span(0, 1), Span(1, 2)}) == 2
        assert sorted([Span(2, 3), Span(0, 1)]) == [Span(0, 1), Span(2, 3)]


class TestNERTag:
    def test_full_names(self):
        assert NERTag.from_string("PERSON") == (NERTag.PERSON,)
        assert NERTag.from_string("state_or_province") == (NERTag.STATE_OR_PROVINCE,)

    def test_short_names(self):
        assert NERTag.from_string("ORG") == (NERTag.ORGANIZATION,)
        assert NERTag.from_string("CRY") == (NERTag.COUNTRY,)

    def test_aliases_keep_order(self):
        assert NERTag.from_string("GPE") == (NERTag.COUNTRY, NERTag.STATE_OR_PROVINCE, NERTag.CITY)

    @pytest.mark.parametrize("name", [None, "", "O", "SOMETHING"])
    def test_unknown_maps_to_nothing(self, name):
        assert NERTag.from_string(name) == ()

    def test_blank_sentinel(self):
        assert is_blank("O") and is_blank("") and is_blank(None)
        assert not is_blank("PERSON")

    def test_person_pronouns_exclude_possessives(self):
        assert {"he", "she", "'em", "ourselves"} <= PERSON_PRONOUNS
        assert not {"his", "my", "their", "it"} & PERSON_PRONOUNS


class TestModels:
    def test_token_defaults(self):
        token = Token(word="dog", pos="NN")
        assert token.ner == "O"
        assert token.antecedent is None

    def test_null_ner_accepted(self):
        sentence = Sentence.model_validate({
            "tokens": [
                {"word": "Bob", "pos": "NNP", "ner": "PERSON"},
                {"word": "x", "pos": "NN", "ner": None},
            ],
        })
        assert sentence.tokens[1].ner is None

    def test_mention_accepts_pairs(self):
        mention = EntityMention(extent=[0, 2], head=(1, 2))
        assert mention.extent == Span(0, 2)
        assert mention.head == Span(1, 2)

    def test_head_pair_is_a_range(self):
        mention = EntityMention(extent=[0, 4], head=[1, 3])
        assert mention.head == Span(1, 3)
        assert list(mention.head) == [1, 2]

    def test_mention_accepts_objects(self):
        mention = EntityMention.model_validate({"extent": {"start": 0, "end": 2}, "head": [0, 2]})
        assert mention.extent == Span(0, 2)

    def test_inverted_span_is_validation_error(self):
        with pytest.raises(ValidationError):
            EntityMention(extent=[2, 1], head=[2, 1])

    def test_slot_mention_requires_real_type(self):
        with pytest.raises(ValidationError):
            SlotMention(extent=Span(0, 1), head=Span(0, 1), ner_type="O", ner_tag=NERTag.PERSON)
        with pytest.raises(ValidationError):
            SlotMention(extent=Span(0, 1), head=Span(0, 1), ner_type="  ", ner_tag=NERTag.PERSON)

    def test_sentence_reads_tree_string(self):
        sentence = Sentence.model_validate({
            "tokens": [{"word": "Bob", "pos": "NNP", "ner": "PERSON"}],
            "parse_tree": "(ROOT (NP (NNP Bob)))",
        })
        assert isinstance(sentence.parse_tree, ParseTree)
        assert sentence.model_dump()["parse_tree"] == "(ROOT (NP (NNP Bob)))"

    def test_blank_tree_string_is_no_tree(self):
        sentence = Sentence.model_validate({"tokens": [], "parse_tree": "  "})
        assert sentence.parse_tree is None

    def test_bad_tree_string_is_validation_error(self):
        with pytest.raises(ValidationError):
            Sentence.model_validate({"tokens": [], "parse_tree": "(ROOT (NP"})

    def test_validate_bounds(self, make_sentence):
        sentence = make_sentence([("Bob", "NNP", "PERSON")], mentions=[((0, 2), (0, 2), "PERSON")])
        with pytest.raises(ValueError, match="exceeds sentence length"):
            sentence.validate_bounds()

    def test_span_text(self, make_sentence, obama_rows):
        sentence = make_sentence(obama_rows)
        assert sentence.span_text(Span(0, 2)) == "Barack Obama"
        assert sentence.text.endswith("in Honolulu")
