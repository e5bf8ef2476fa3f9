"""Shared fixtures: a tiny Portuguese dictionary and its tagger."""

import pytest

from prooftag.config import reload_settings
from prooftag.tagging.dicts import MemoryDictionary
from prooftag.tagging.pt import portuguese_tagger


PT_ROWS = [
    # form, lemma, tag
    ("ele", "ele", "PP3MS000"),
    ("casa", "casa", "NCFS000"),
    ("casa", "casar", "VMIP3S0"),
    ("Lisboa", "Lisboa", "NPFSG00"),
    ("escreveu", "escrever", "VMIS3S0"),
    ("escrever", "escrever", "VMN0000"),
    ("rapida", "rápido", "AQ0FS0"),
    ("lenta", "lento", "AQ0FS0"),
    ("lenta", "lentar", "VMIP3S0"),
    ("lento", "lento", "AQ0MS0"),
    ("movida", "mover", "VMP00SF0"),
    ("mente", "mente", "NCFS000"),
    ("mente", "mentir", "VMIP3S0"),
    ("ideia", "ideia", "NCFS000"),
    ("gira", "girar", "VMIP3S0"),
    ("gira", "giro", "AQ0FS0"),
    ("gira", "gira", "AQ0CS0"),
    ("d'água", "d'água", "NCFS000"),
    ("ONU", "ONU", "NPFSO00"),
]


@pytest.fixture
def pt_dictionary():
    return MemoryDictionary.from_rows(PT_ROWS)


@pytest.fixture
def pt_tagger(pt_dictionary):
    return portuguese_tagger(pt_dictionary)


@pytest.fixture
def clean_env(monkeypatch):
    """Drop prooftag env overrides and re-read settings around the test."""
    for name in ("PROOFTAG_DICT_ROOT", "PROOFTAG_DEFAULT_PRIORITY", "PROOFTAG_COMBINE_MANUAL", "PROOFTAG_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reload_settings()
    yield monkeypatch
    monkeypatch.undo()
    reload_settings()
