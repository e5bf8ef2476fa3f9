"""Tests for ordering overlapping rule matches by priority."""

from prooftag.rules import RuleMatch, dutch_priority, resolve_overlaps


def test_higher_priority_wins_overlap():
    matches = [
        RuleMatch("DOUBLE_PUNCTUATION", 10, 12),
        RuleMatch("KOMMA_KOMMA", 10, 12),
    ]
    assert resolve_overlaps(matches, dutch_priority) == [RuleMatch("KOMMA_KOMMA", 10, 12)]


def test_non_overlapping_matches_are_kept_in_text_order():
    matches = [
        RuleMatch("AI_NL_HYDRA_LEO_MISSING_COMMA_1", 20, 25),
        RuleMatch("TE-VREEMD", 0, 4),
        RuleMatch("ET_AL", 5, 10),
    ]
    kept = resolve_overlaps(matches, dutch_priority)
    assert [m.rule_id for m in kept] == ["TE-VREEMD", "ET_AL", "AI_NL_HYDRA_LEO_MISSING_COMMA_1"]


def test_ties_keep_input_order():
    matches = [RuleMatch("KORT_1", 0, 5), RuleMatch("KORT_2", 3, 8)]
    assert resolve_overlaps(matches, dutch_priority) == [RuleMatch("KORT_1", 0, 5)]
    assert resolve_overlaps(list(reversed(matches)), dutch_priority) == [RuleMatch("KORT_2", 3, 8)]


def test_touching_matches_do_not_overlap():
    a = RuleMatch("BE", 0, 2)
    b = RuleMatch("JOU_JOUW", 2, 6)
    assert not a.overlaps(b)
    assert resolve_overlaps([a, b], dutch_priority) == [a, b]


def test_empty():
    assert resolve_overlaps([], dutch_priority) == []
