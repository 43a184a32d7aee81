"""
Named-entity tag vocabulary shared by the annotation passes
"""

from enum import Enum
from typing import Dict, Optional, Tuple


# Tag the upstream tagger assigns to tokens outside any entity
NER_BLANK = "O"

MODIFIER_TAG = "MODIFIER"

PERSONAL_PRONOUN_POS = "PRP"

# POS tags that may neither begin nor end a slot span
FUNCTION_WORD_POS = frozenset({"IN", "DT", "RB", "EX", "POS"})

# Personal pronouns that refer to a person. Possessives (his, her, my) are not included.
PERSON_PRONOUNS = frozenset({
    "he", "him", "himself",
    "she", "her", "herself",
    "themself", "themselves", "'em",
    "you", "yourself", "yourselves",
    "i", "me", "myself", "ourself", "ourselves",
})


class NERTag(str, Enum):
    """Entity types recognized as slot fillers"""
    PERSON = "PERSON"
    ORGANIZATION = "ORGANIZATION"
    LOCATION = "LOCATION"
    MISC = "MISC"
    CITY = "CITY"
    STATE_OR_PROVINCE = "STATE_OR_PROVINCE"
    COUNTRY = "COUNTRY"
    NATIONALITY = "NATIONALITY"
    RELIGION = "RELIGION"
    TITLE = "TITLE"
    IDEOLOGY = "IDEOLOGY"
    CRIMINAL_CHARGE = "CRIMINAL_CHARGE"
    CAUSE_OF_DEATH = "CAUSE_OF_DEATH"
    DATE = "DATE"
    DURATION = "DURATION"
    NUMBER = "NUMBER"
    MONEY = "MONEY"
    PERCENT = "PERCENT"
    URL = "URL"
    EMAIL = "EMAIL"
    MODIFIER = "MODIFIER"

    @classmethod
    def from_string(cls, name: Optional[str]) -> Tuple["NERTag", ...]:
        """
        Map a tagger's NER string onto zero or more tags.

        Full names are tried first, then short codes, then aliases used by
        other taggers. The returned order is stable.
        """
        if not name:
            return ()
        key = name.strip().upper()
        if key in cls.__members__:
            return (cls[key],)
        if key in _SHORT_NAMES:
            return (_SHORT_NAMES[key],)
        return _ALIASES.get(key, ())


_SHORT_NAMES: Dict[str, NERTag] = {
    "PER": NERTag.PERSON,
    "ORG": NERTag.ORGANIZATION,
    "LOC": NERTag.LOCATION,
    "CIT": NERTag.CITY,
    "SOP": NERTag.STATE_OR_PROVINCE,
    "CRY": NERTag.COUNTRY,
    "NAT": NERTag.NATIONALITY,
    "REL": NERTag.RELIGION,
    "TIT": NERTag.TITLE,
    "IDY": NERTag.IDEOLOGY,
    "CC": NERTag.CRIMINAL_CHARGE,
    "COD": NERTag.CAUSE_OF_DEATH,
    "DT": NERTag.DATE,
    "DUR": NERTag.DURATION,
    "NUM": NERTag.NUMBER,
    "MOD": NERTag.MODIFIER,
}

# Coarse labels that stand for several fine-grained types
_ALIASES: Dict[str, Tuple[NERTag, ...]] = {
    "GPE": (NERTag.COUNTRY, NERTag.STATE_OR_PROVINCE, NERTag.CITY),
    "NORP": (NERTag.NATIONALITY, NERTag.RELIGION, NERTag.IDEOLOGY),
    "CARDINAL": (NERTag.NUMBER,),
    "TIME": (NERTag.DATE,),
    "STATE": (NERTag.STATE_OR_PROVINCE,),
    "PROVINCE": (NERTag.STATE_OR_PROVINCE,),
}


def is_blank(ner: Optional[str]) -> bool:
    """True when a token carries no entity tag."""
    return ner is None or ner == "" or ner == NER_BLANK
