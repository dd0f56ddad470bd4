from typing import Any, Generic, TypeVar

from same.hasher import DefaultHasher
from same.traits import Same, RefHash


T = TypeVar('T', bound=Same)


class RefCmp(Generic[T]):
    """
    Wrapper that makes `==` and `hash()` compare and hash addresses.

    `__eq__` is `Same.same` on the wrapped handles and `__hash__` is
    `RefHash.ref_hash` fed into a `DefaultHasher`. Mainly useful for storing
    unique objects in sets and dicts:

        a = Arc(42)
        s = {RefCmp(a)}
        s.add(RefCmp(a.clone()))   # same allocation, not added
        s.add(RefCmp(Arc(42)))     # equal value, different allocation
        assert len(s) == 2
    """

    __slots__ = ('_inner',)

    def __init__(self, inner: T):
        if not isinstance(inner, Same):
            raise TypeError(f"Expected Same, got {type(inner).__name__}")
        self._inner = inner

    @classmethod
    def from_ref(cls, inner: T) -> 'RefCmp[T]':
        """
        Wraps `inner` without copying it.

        Python cannot reinterpret a reference as a reference to a wrapper, so
        this wraps the very same handle object; nothing it points to is
        copied.
        """
        return cls(inner)

    @property
    def inner(self) -> T:
        """Read-only access to the wrapped handle."""
        return self._inner

    def borrow(self) -> T:
        return self._inner

    def as_ref(self) -> Any:
        return self._inner.as_ref()

    def __getattr__(self, name: str) -> Any:
        # only reached for names RefCmp itself lacks
        if name == '_inner':
            raise AttributeError(name)
        return getattr(self._inner, name)

    def __eq__(self, other: Any):
        if not isinstance(other, RefCmp):
            return NotImplemented
        # different handle kinds can collide in a dict but never alias
        if type(self._inner) is not type(other._inner):
            return False
        return self._inner.same(other._inner)

    def __hash__(self):
        if not isinstance(self._inner, RefHash):
            raise TypeError(f"Expected RefHash, got {type(self._inner).__name__}")
        hasher = DefaultHasher()
        self._inner.ref_hash(hasher)
        return hasher.finish()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._inner!r})"
