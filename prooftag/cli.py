from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import get_settings
from .exceptions import ProofTagError
from .language import get_language
from .schemas import PriorityOut, ReadingSetOut, TaggedSentenceOut
from .tagging.dicts import load_tsv
from .tokenize import WordTokenizer

logger = logging.getLogger(__name__)


def _cmd_tag(args: argparse.Namespace) -> int:
    lang = get_language(args.lang)
    if args.dict:
        dictionary = load_tsv(Path(args.dict))
    else:
        dictionary = lang.load_dictionary()
    tokens = WordTokenizer().tokenize(" ".join(args.text))
    tagged = lang.create_tagger(dictionary).tag(tokens)
    out = TaggedSentenceOut(lang=lang.short_code, tokens=[ReadingSetOut.from_reading_set(rs) for rs in tagged])
    print(out.model_dump_json(indent=2))
    return 0


def _cmd_priority(args: argparse.Namespace) -> int:
    lang = get_language(args.lang)
    for rule_id in args.rule_ids:
        print(PriorityOut(rule_id=rule_id, priority=lang.priority_for_id(rule_id)).model_dump_json())
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="prooftag", description="Morphological tagging and rule priorities")
    sub = ap.add_subparsers(dest="command", required=True)

    tag = sub.add_parser("tag", help="Tag a sentence and print the readings as JSON")
    tag.add_argument("--lang", default="pt", help="Language code (default: pt)")
    tag.add_argument("--dict", default=None, help="Dictionary TSV (default: <dict root>/<lang>/<lang>.tsv)")
    tag.add_argument("text", nargs="+", help="Sentence to tag")
    tag.set_defaults(func=_cmd_tag)

    prio = sub.add_parser("priority", help="Print the priority of rule ids")
    prio.add_argument("--lang", default="nl", help="Language code (default: nl)")
    prio.add_argument("rule_ids", nargs="+")
    prio.set_defaults(func=_cmd_priority)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=get_settings().LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except ProofTagError as e:
        logger.error(f"{e.error_code}: {e.message}")
        return 1
