"""Scope profiling written out in the Chrome trace-event JSON format."""

from __future__ import annotations

import functools
import threading
import time
from dataclasses import dataclass
from typing import IO, Callable, TypeVar

F = TypeVar("F", bound=Callable)


@dataclass(frozen=True)
class ProfileResult:
    name: str
    start: int
    end: int
    thread_id: int


class Instrumentor:
    """Writes timed scopes of one session to a trace file."""

    def __init__(self) -> None:
        self._stream: IO[str] | None = None
        self._session_name: str | None = None
        self._profile_count = 0
        self._lock = threading.Lock()

    @property
    def session_name(self) -> str | None:
        return self._session_name

    def begin_session(self, name: str, filepath: str = "results.json") -> None:
        if self._stream is not None:
            self.end_session()
        with self._lock:
            self._stream = open(filepath, "w", encoding="utf-8")
            self._stream.write('{"otherData": {},"traceEvents":[')
            self._stream.flush()
            self._session_name = name

    def end_session(self) -> None:
        with self._lock:
            if self._stream is not None:
                self._stream.write("]}")
                self._stream.close()
            self._stream = None
            self._session_name = None
            self._profile_count = 0

    def write_profile(self, result: ProfileResult) -> None:
        """Append one trace event; dropped when no session is open."""
        with self._lock:
            if self._stream is None:
                return
            separator = "," if self._profile_count > 0 else ""
            self._profile_count += 1
            name = result.name.replace('"', "'")
            self._stream.write(
                f'{separator}{{"cat":"function",'
                f'"dur":{result.end - result.start},'
                f'"name":"{name}",'
                f'"ph":"X",'
                f'"pid":0,'
                f'"tid":{result.thread_id},'
                f'"ts":{result.start}}}'
            )
            self._stream.flush()


_instance = Instrumentor()


def get_instrumentor() -> Instrumentor:
    """The process-wide instrumentor."""
    return _instance


def _now_us() -> int:
    return time.perf_counter_ns() // 1000


class InstrumentationTimer:
    """Times a scope; usable as a context manager."""

    def __init__(self, name: str, instrumentor: Instrumentor | None = None) -> None:
        self.name = name
        self._instrumentor = instrumentor if instrumentor is not None else get_instrumentor()
        self._start = _now_us()
        self.stopped = False

    def stop(self) -> ProfileResult:
        end = _now_us()
        result = ProfileResult(
            self.name, self._start, end, threading.get_ident() & 0xFFFFFFFF
        )
        self._instrumentor.write_profile(result)
        self.stopped = True
        return result

    def __enter__(self) -> InstrumentationTimer:
        return self

    def __exit__(self, *exc_info) -> None:
        if not self.stopped:
            self.stop()


def profile_scope(name: str) -> InstrumentationTimer:
    """A timer for a ``with`` block, recorded by the global instrumentor."""
    return InstrumentationTimer(name)


def profile_function(func: F) -> F:
    """Decorator timing every call of ``func``."""
    name = f"{func.__module__}.{func.__qualname__}"

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with InstrumentationTimer(name):
            return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]