"""Memoization cell for deferred property computations."""

from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

from propmap.exceptions import PropertiesIOError, PropmapError

T = TypeVar("T")


class LazyState(str, Enum):
    """State of a LazyResult. COMPUTED is terminal."""

    EMPTY = "empty"
    COMPUTED = "computed"


class LazyResult(Generic[T]):
    """Computes a value at most once and returns the cached instance after.

    A failed computation leaves the cell EMPTY, so the next ``value()`` call
    runs the computation again. Any exception is surfaced as
    ``PropertiesIOError`` with the original attached as ``__cause__``.

    There is no thread-safety guarantee: concurrent first calls may each run
    the computation.
    """

    def __init__(self, func: Callable[[], T]):
        self._func = func
        self._state = LazyState.EMPTY
        self._result: Optional[T] = None

    @property
    def state(self) -> LazyState:
        return self._state

    def value(self) -> T:
        if self._state is LazyState.COMPUTED:
            return self._result  # type: ignore[return-value]
        try:
            result = self._func()
        except PropertiesIOError:
            raise
        except Exception as exc:
            details = {"cause": type(exc).__name__}
            if isinstance(exc, PropmapError):
                details["cause_code"] = exc.code
            raise PropertiesIOError(str(exc) or type(exc).__name__, details=details) from exc
        self._result = result
        self._state = LazyState.COMPUTED
        return result
