"""Tests for the language registry."""

import pytest

from prooftag.exceptions import UnknownLanguageError
from prooftag.language import DUTCH, LANGUAGES, PORTUGUESE, get_language
from prooftag.tagging import DictionaryTagger, Reading


def test_registry():
    assert get_language("pt") is PORTUGUESE
    assert get_language("nl") is DUTCH
    assert get_language("pt-BR") is PORTUGUESE
    assert get_language("nl-BE") is DUTCH
    assert set(LANGUAGES) == {"pt", "nl"}


def test_unknown_language():
    with pytest.raises(UnknownLanguageError) as exc:
        get_language("xx")
    assert exc.value.code == "xx"
    assert exc.value.error_code == "UNKNOWN_LANGUAGE"


def test_portuguese_tagger_derives(pt_dictionary):
    tagger = PORTUGUESE.create_tagger(pt_dictionary)
    assert tagger.tag(["rapidamente"])[0].readings == (Reading("rapidamente", "RG", "rapidamente"),)


def test_dutch_uses_plain_dictionary_tagger(pt_dictionary):
    tagger = DUTCH.create_tagger(pt_dictionary)
    assert isinstance(tagger, DictionaryTagger)
    assert tagger.rules == ()


def test_priorities():
    assert DUTCH.priority_for_id("DOUBLE_PUNCTUATION") == -3
    assert DUTCH.priority_for_id("UNKNOWN", default=lambda rule_id: 3) == 3
    assert PORTUGUESE.priority_for_id("DOUBLE_PUNCTUATION") == 0


def test_dutch_typography():
    assert DUTCH.advanced_typography
    assert (DUTCH.opening_double_quote, DUTCH.closing_double_quote) == ("“", "”")
    assert (DUTCH.opening_single_quote, DUTCH.closing_single_quote) == ("‘", "’")
    assert DUTCH.countries == ("NL", "BE")
    assert not PORTUGUESE.advanced_typography


def test_load_dictionary_uses_language_overwrite_choice(clean_env, tmp_path):
    from dataclasses import replace

    d = tmp_path / "pt"
    d.mkdir()
    (d / "pt.tsv").write_text("casa\tcasa\tNCFS000\n", encoding="utf-8")
    (d / "added.tsv").write_text("casa\tcasar\tVMIP3S0\n", encoding="utf-8")

    assert not PORTUGUESE.overwrite_manual
    assert PORTUGUESE.load_dictionary(tmp_path).lookup("casa") == [("NCFS000", "casa"), ("VMIP3S0", "casar")]

    overwriting = replace(PORTUGUESE, overwrite_manual=True)
    assert overwriting.load_dictionary(tmp_path).lookup("casa") == [("VMIP3S0", "casar")]
