from typing import Any, Generic, TypeVar


T = TypeVar('T')


class Cell(Generic[T]):
    """
    A single storage location.

    Two cells holding equal values are still two locations, which is what
    handles resolve to. CPython shares small ints and interned strings, so a
    bare `42` cannot stand for "an independent storage location".
    """

    __slots__ = ('_value',)

    def __init__(self, value: T):
        self._value = value

    def get(self) -> T:
        return self._value

    def set(self, value: T):
        self._value = value

    def replace(self, value: T) -> T:
        old, self._value = self._value, value
        return old

    def __eq__(self, other: Any):
        if not isinstance(other, Cell):
            return NotImplemented
        return self._value == other._value

    # mutable, so unhashable by value
    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"
