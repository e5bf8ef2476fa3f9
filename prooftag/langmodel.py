from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable, Generic, Optional, Protocol, TypeVar

logger = logging.getLogger(__name__)


class LanguageModel(Protocol):
    def get_count(self, *tokens: str) -> int:
        ...


M = TypeVar("M")


class LanguageModelHandle(Generic[M]):
    """Construct-once holder for an n-gram language model.

    The owning process creates one handle and passes it to the components that
    need the model. ``get()`` builds the model on first use; concurrent first
    calls build it only once. A failed build leaves the handle empty and the
    error propagates, so a later call can try again.
    """

    def __init__(self, factory: Callable[[Path], M], index_dir: Path) -> None:
        self._factory = factory
        self.index_dir = Path(index_dir)
        self._model: Optional[M] = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._model is not None

    def get(self) -> M:
        model = self._model
        if model is not None:
            return model
        with self._lock:
            if self._model is None:
                logger.info(f"Loading language model from {self.index_dir}")
                self._model = self._factory(self.index_dir)
            return self._model
