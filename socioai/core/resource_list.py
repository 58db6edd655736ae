"""
Client-side slot holding the last fetched list of one resource type.

State machine: IDLE -> LOADING -> {LOADED, LOAD_ERROR}; any reload goes back
to LOADING. Each load gets a generation number and only the newest
generation may write the slot, so a slow response that arrives after a newer
one is dropped instead of overwriting it.
"""

import threading
from concurrent.futures import Executor, Future
from enum import Enum
from typing import Callable, Generic, List, Optional, TypeVar

from ..utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    LOAD_ERROR = "load_error"


class ResourceList(Generic[T]):
    """Last successful full fetch of a resource list. No partial or optimistic state."""

    def __init__(self, name: str):
        self.name = name
        self.items: List[T] = []
        self.state = LoadState.IDLE
        self.error: Optional[Exception] = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def generation(self) -> int:
        return self._generation

    def begin(self) -> int:
        """Start a load and return its generation"""
        with self._lock:
            self._generation += 1
            self.state = LoadState.LOADING
            return self._generation

    def complete(self, generation: int, items: List[T]) -> bool:
        """Apply a successful response; False when it was superseded"""
        with self._lock:
            if generation != self._generation:
                logger.debug("Discarding stale list response", resource=self.name, generation=generation, current=self._generation)
                return False
            self.items = list(items)
            self.error = None
            self.state = LoadState.LOADED
            return True

    def fail(self, generation: int, error: Exception) -> bool:
        """Record a failed load. Previously loaded items are kept."""
        with self._lock:
            if generation != self._generation:
                return False
            self.error = error
            self.state = LoadState.LOAD_ERROR
            return True

    def load(self, fetch: Callable[[], List[T]]) -> List[T]:
        """Run fetch synchronously; its exception propagates after the slot is marked failed"""
        generation = self.begin()
        try:
            items = fetch()
        except Exception as e:
            self.fail(generation, e)
            raise
        self.complete(generation, items)
        return self.items

    def load_async(self, fetch: Callable[[], List[T]], executor: Executor) -> "Future[List[T]]":
        """Run fetch on an executor; the slot is updated before the future resolves"""
        generation = self.begin()

        def _run() -> List[T]:
            try:
                items = fetch()
            except Exception as e:
                self.fail(generation, e)
                raise
            self.complete(generation, items)
            return items

        return executor.submit(_run)

    @property
    def is_loading(self) -> bool:
        return self.state == LoadState.LOADING
