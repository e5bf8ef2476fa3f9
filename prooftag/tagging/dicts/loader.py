from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from ...config import get_settings
from ...exceptions import DictionaryLoadError
from .provider import CombiningDictionary, Dictionary, MemoryDictionary

logger = logging.getLogger(__name__)


def _read_rows(path: Path) -> List[Tuple[str, str, str]]:
    rows: List[Tuple[str, str, str]] = []
    try:
        # utf-8-sig drops a leading byte-order mark from exported files
        with path.open("r", encoding="utf-8-sig") as f:
            for lineno, line in enumerate(f, start=1):
                line = line.rstrip("\r\n")
                if not line.strip() or line.startswith("#"):
                    continue
                # Format: form<TAB>lemma<TAB>tag
                parts = line.split("\t")
                if len(parts) != 3 or not all(parts):
                    raise DictionaryLoadError(path, "expected form<TAB>lemma<TAB>tag", line=lineno)
                rows.append((parts[0], parts[1], parts[2]))
    except FileNotFoundError as e:
        raise DictionaryLoadError(path, "file not found") from e
    except OSError as e:
        raise DictionaryLoadError(path, str(e.strerror or e)) from e
    except UnicodeDecodeError as e:
        raise DictionaryLoadError(path, f"not valid UTF-8 ({e.reason})") from e
    return rows


def load_tsv(path: Path) -> MemoryDictionary:
    """Load a tab-separated dictionary export into memory.

    Raises DictionaryLoadError when the file is missing or a line is malformed.
    """
    path = Path(path)
    rows = _read_rows(path)
    d = MemoryDictionary.from_rows(rows)
    logger.info(f"Loaded dictionary {path} ({len(d)} forms, {len(rows)} analyses)")
    return d


def dictionary_path(lang: str, root: Optional[Path] = None) -> Path:
    base = Path(root) if root is not None else get_settings().DICT_ROOT
    return base / lang / f"{lang}.tsv"


def load_language_dictionary(lang: str, root: Optional[Path] = None, overwrite: bool = False) -> Dictionary:
    """Load ``<root>/<lang>/<lang>.tsv`` plus optional manual files beside it.

    ``added.tsv`` and ``removed.tsv`` hold manual corrections; when neither
    exists the main dictionary is returned as is. ``overwrite`` is the
    language's choice between replacing and merging with manual additions;
    PROOFTAG_COMBINE_MANUAL, when set, takes precedence.
    """
    main_path = dictionary_path(lang, root)
    main = load_tsv(main_path)
    added_path = main_path.parent / "added.tsv"
    removed_path = main_path.parent / "removed.tsv"
    added = load_tsv(added_path) if added_path.exists() else None
    removed = load_tsv(removed_path) if removed_path.exists() else None
    if added is None and removed is None:
        return main
    combine = get_settings().COMBINE_MANUAL
    if combine is not None:
        overwrite = not combine
    return CombiningDictionary(main, added, removed, overwrite=overwrite)
