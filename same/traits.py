from abc import ABC, abstractmethod
from typing import Any

from same.hasher import Hasher


class Same(ABC):
    """
    Allows to test identity of objects, the way `==` tests equality.

    Implemented by the shared reference kinds (`Ref`, `Rc`, `Arc`) and, for
    uniformity of generic code, by `Box`, where distinct handles never alias
    and the answer is always `False` unless a box is compared with itself.
    """

    __slots__ = ()

    @abstractmethod
    def same(self, other: Any) -> bool:
        """Returns True if `self` is the same instance of object as `other`."""
        pass


class RefHash(ABC):
    """Hashes the address of the referenced object instead of the object itself."""

    __slots__ = ()

    @abstractmethod
    def ref_hash(self, hasher: Hasher):
        """Feeds the address into the hasher."""
        pass


def check_same_kind(a: Any, b: Any):
    if type(a) is not type(b):
        raise TypeError(f"Cannot compare identity of {type(a).__name__} and {type(b).__name__}")


def check_hasher(hasher: Any):
    if not isinstance(hasher, Hasher):
        raise TypeError(f"Expected Hasher, got {type(hasher).__name__}")


def same(a: Same, b: Same) -> bool:
    return a.same(b)
