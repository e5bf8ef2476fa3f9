"""
Project-specific exception classes.

Lookups, derivations and priority resolution never raise; errors are confined
to setup boundaries (loading dictionaries, picking a language).
"""

from pathlib import Path
from typing import Optional, Union


class ProofTagError(Exception):
    """Base exception class for prooftag errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class DictionaryLoadError(ProofTagError):
    """Raised when a dictionary resource is missing or malformed."""

    def __init__(self, path: Union[str, Path], reason: str, line: Optional[int] = None, **kwargs):
        where = f"{path}:{line}" if line is not None else str(path)
        super().__init__(f"Cannot load dictionary {where}: {reason}", error_code="DICTIONARY_LOAD_ERROR", **kwargs)
        self.path = Path(path)
        self.reason = reason
        self.line = line


class UnknownLanguageError(ProofTagError):
    """Raised when no language is registered for a short code."""

    def __init__(self, code: str, **kwargs):
        super().__init__(f"No language registered for code {code!r}", error_code="UNKNOWN_LANGUAGE", **kwargs)
        self.code = code
