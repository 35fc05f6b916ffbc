"""Compute-once values."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")

_UNSET = object()


class Memo(Generic[T]):
    """Wrap a zero-argument factory so it runs at most once.

    The first :meth:`get` calls the factory and stores its result; every
    later call returns the stored value.  If the factory raises, nothing is
    stored and the next call tries again.
    """

    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._value: object = _UNSET

    @property
    def computed(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> T:
        if self._value is _UNSET:
            self._value = self._factory()
        return self._value  # type: ignore[return-value]
