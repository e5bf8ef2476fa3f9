from __future__ import annotations

from .priority import DefaultPriority, Prefix, PriorityEntry, PriorityTable, default_priority, exact


DUTCH_SIMPLE_REPLACE_RULE = "NL_SIMPLE_REPLACE"
SPACE_IN_COMPOUND_RULE = "NL_SPACE_IN_COMPOUND"
LONG_SENTENCE_RULE = "TOO_LONG_SENTENCE"
AI_HYDRA_LEO = "AI_NL_HYDRA_LEO"
AI_HYDRA_LEO_MISSING_COMMA = "AI_NL_HYDRA_LEO_MISSING_COMMA"


DUTCH_PRIORITIES = PriorityTable(
    (
        PriorityEntry(Prefix(DUTCH_SIMPLE_REPLACE_RULE), 1),
        PriorityEntry(Prefix(SPACE_IN_COMPOUND_RULE), 1),
    )
    + exact({
        LONG_SENTENCE_RULE: -1,
        # above MORFOLOGIK_RULE_NL_NL
        "ET_AL": 1,
        "N_PERSOONS": 1,
        "HOOFDLETTERS_OVERBODIG_A": 1,
        "IJ_HFDLTRS": 1,
        "STAM_ZONDER_IK": -1,
        "KOMMA_ONTBR": -1,
        # above DOUBLE_PUNCTUATION
        "KOMMA_AANH": -1,
        "KOMMA_KOMMA": -1,
        # compound word rules go first
        "HET_FIETS": -2,
        "JIJ_JOU_JOUW": -2,
        "JOU_JOUW": -3,
        # below BE_GE_SPLITST
        "BE": -3,
        "DOUBLE_PUNCTUATION": -3,
        # spelling errors are reported first
        "KORT_1": -5,
        "KORT_2": -5,
        "EINDE_ZIN_ONVERWACHT": -5,
        "TOO_LONG_PARAGRAPH": -15,
        # below the speller and simple replace rule
        "ERG_LANG_WOORD": -20,
        "DE_ONVERWACHT": -20,
        "TE-VREEMD": -20,
    })
    + (
        # AI rules yield to more specific rules, missing commas to comma style rules
        PriorityEntry(Prefix(AI_HYDRA_LEO_MISSING_COMMA), -51),
        PriorityEntry(Prefix(AI_HYDRA_LEO), -5),
    )
)


def dutch_priority(rule_id: str, default: DefaultPriority = default_priority) -> int:
    return DUTCH_PRIORITIES.resolve(rule_id, default)
