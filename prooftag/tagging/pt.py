"""Portuguese tagger.

Dictionary tagging plus two derivations for words the dictionary lacks:

* ``-mente`` adverbs built on a feminine singular adjective or participle
  (``rapidamente`` from ``rapida``) are tagged ``RG``, adverb of manner;
* verbs with an ``auto-`` or ``re-`` prefix (``reescreveu``) copy the tags of
  the unprefixed verb, with the prefix glued onto its lemma.
"""

from __future__ import annotations

from .assembler import DictionaryTagger
from .derivation import PrefixedVerbRule, SuffixAdverbRule
from .dicts.provider import Dictionary


ADJ_PART_FS = r"V.P..SF.|A[QO].[FC][SN]."
VERB = r"V.+"
PREFIXES_FOR_VERBS = r"(auto|re)(...+)"
ADVERB_OF_MANNER = "RG"

MENTE_ADVERBS = SuffixAdverbRule("mente", stem_tag=ADJ_PART_FS, adverb_tag=ADVERB_OF_MANNER)
PREFIXED_VERBS = PrefixedVerbRule(PREFIXES_FOR_VERBS, verb_tag=VERB)


def portuguese_tagger(dictionary: Dictionary) -> DictionaryTagger:
    return DictionaryTagger(dictionary, rules=(MENTE_ADVERBS, PREFIXED_VERBS))
