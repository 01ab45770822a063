"""Debounced query lifecycle for the SearchPro search box.

The controller owns the typed text, the live result set shown in the dropdown
and the committed ("final") result set. Keystrokes restart a single-shot
QTimer; only when it fires is the query resolved, from the LRU cache when
possible and by a fresh filter pass otherwise.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from PySide6 import QtCore

from .config import CONFIG
from .dataset import Record
from .errors import InvalidConfiguration
from .logging_setup import get_logger
from .utils.cache import LRUCache
from .utils.matching import filter_records

logger = get_logger(__name__)

Results = Tuple[Record, ...]


class QueryPhase(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class QueryState:
    raw_input: str
    live_results: Results
    committed_results: Results
    phase: QueryPhase


class QueryController(QtCore.QObject):
    liveResultsChanged = QtCore.Signal(object)
    committedResultsChanged = QtCore.Signal(object)
    phaseChanged = QtCore.Signal(str)

    def __init__(
        self,
        dataset: Iterable[Record],
        *,
        debounce_ms: Optional[int] = None,
        cache_size: Optional[int] = None,
        commit_enabled: Optional[bool] = None,
        parent: Optional[QtCore.QObject] = None,
    ) -> None:
        super().__init__(parent)
        delay = CONFIG.debounce_ms if debounce_ms is None else int(debounce_ms)
        if delay < 0:
            raise InvalidConfiguration(f"debounce delay must be >= 0 ms, got {delay}")

        self._dataset: Results = tuple(dataset)
        self._cache: LRUCache[str, Results] = LRUCache(CONFIG.cache_size if cache_size is None else cache_size)
        self._commit_enabled = CONFIG.commit_enabled if commit_enabled is None else bool(commit_enabled)
        self._debounce_ms = delay

        self._raw_input = ""
        self._pending_query = ""
        self._live_results: Results = ()
        self._live_query = ""
        self._committed_results: Results = ()
        self._committed_query = ""
        self._phase = QueryPhase.IDLE
        self._computations = 0

        self._timer = QtCore.QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(delay)
        self._timer.timeout.connect(self._on_timer_fired)

    # ---------- read side ----------
    @property
    def dataset(self) -> Results:
        return self._dataset

    @property
    def cache(self) -> LRUCache[str, Results]:
        return self._cache

    @property
    def debounce_ms(self) -> int:
        return self._debounce_ms

    @property
    def commit_enabled(self) -> bool:
        return self._commit_enabled

    @property
    def raw_input(self) -> str:
        return self._raw_input

    @property
    def live_results(self) -> Results:
        return self._live_results

    @property
    def committed_results(self) -> Results:
        return self._committed_results

    @property
    def live_query(self) -> str:
        """Query text that produced the live results; may lag the input while pending."""
        return self._live_query

    @property
    def committed_query(self) -> str:
        """Query text that produced the committed results."""
        return self._committed_query

    @property
    def phase(self) -> QueryPhase:
        return self._phase

    @property
    def computations(self) -> int:
        """Number of filter passes run so far (cache hits excluded)."""
        return self._computations

    def is_pending(self) -> bool:
        return self._timer.isActive()

    def state(self) -> QueryState:
        return QueryState(self._raw_input, self._live_results, self._committed_results, self._phase)

    # ---------- transitions ----------
    def on_input(self, text: str) -> None:
        self._raw_input = text or ""
        if not self._raw_input:
            self._timer.stop()
            self._set_live((), "")
            self._set_phase(QueryPhase.IDLE)
            return
        self._pending_query = self._raw_input
        # start() on an active single-shot timer restarts it; the old fire never happens
        self._timer.start(self._debounce_ms)
        self._set_phase(QueryPhase.PENDING)

    def resolve(self, query: Optional[str] = None) -> bool:
        """Publish results for ``query`` (default: the current input).

        Returns False when ``query`` no longer matches the typed text or the
        input is empty; nothing is written in that case.
        """
        if query is None:
            query = self._raw_input
        if query != self._raw_input:
            logger.debug("Discarding stale resolve for %r (input is %r)", query, self._raw_input)
            return False
        self._timer.stop()
        if not query:
            self._set_live((), "")
            self._set_phase(QueryPhase.IDLE)
            return False

        cached = self._cache.get(query)
        if cached is not None:
            logger.debug("Cache hit for %r (%d results)", query, len(cached))
            results = cached
        else:
            results = filter_records(self._dataset, query)
            self._computations += 1
            self._cache.set(query, results)
            logger.debug("Cache miss for %r, computed %d results", query, len(results))

        self._set_live(results, query)
        self._set_phase(QueryPhase.RESOLVED)
        return True

    def flush(self) -> bool:
        """Resolve right away if a debounce delay is still running."""
        if not self._timer.isActive():
            return False
        return self.resolve(self._pending_query)

    def commit(self) -> bool:
        if not self._commit_enabled:
            logger.debug("Commit ignored: commit support is disabled")
            return False
        if not self._live_results:
            logger.debug("Commit ignored: no live results for %r", self._raw_input)
            return False

        committed = tuple(self._live_results)
        self._committed_query = self._live_query
        self._timer.stop()
        self._raw_input = ""
        self._pending_query = ""
        self._set_live((), "")
        self._committed_results = committed
        self.committedResultsChanged.emit(committed)
        self._set_phase(QueryPhase.IDLE)
        logger.info("Committed %d results for %r", len(committed), self._committed_query)
        return True

    def clear(self) -> None:
        self._timer.stop()
        self._raw_input = ""
        self._pending_query = ""
        self._set_live((), "")
        self._committed_query = ""
        if self._committed_results:
            self._committed_results = ()
            self.committedResultsChanged.emit(())
        self._set_phase(QueryPhase.IDLE)
        logger.info("Search cleared")

    # ---------- internals ----------
    @QtCore.Slot()
    def _on_timer_fired(self) -> None:
        self.resolve(self._pending_query)

    def _set_live(self, results: Results, query: str) -> None:
        self._live_query = query
        if results is self._live_results:
            return
        self._live_results = results
        self.liveResultsChanged.emit(results)

    def _set_phase(self, phase: QueryPhase) -> None:
        if phase is self._phase:
            return
        self._phase = phase
        self.phaseChanged.emit(phase.value)


__all__ = ["QueryController", "QueryPhase", "QueryState"]
