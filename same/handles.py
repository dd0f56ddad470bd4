"""
Reference handles: a plain borrow (`Ref`), an exclusive owner (`Box`), a
non-atomically shared owner (`Rc`) and an atomically shared owner (`Arc`).

`==` and `hash()` on a handle compare and hash the *referent*, the way they
do for the value itself. `same` and `ref_hash` look at the storage address
instead. Each kind implements them on its own, since the kinds differ in
what can alias what.
"""

import threading
import weakref
from typing import Any, Generic, TypeVar

from same.cell import Cell
from same.hasher import Hasher
from same.trace import debug
from same.traits import Same, RefHash, check_same_kind, check_hasher


T = TypeVar('T')


class Ref(Same, RefHash, Generic[T]):
    """A shared borrow of an existing object. Copies of a borrow alias."""

    __slots__ = ('_target',)

    def __init__(self, target: T):
        self._target = target

    def get(self) -> T:
        return self._target

    @property
    def address(self) -> int:
        return id(self._target)

    def as_ref(self) -> 'Ref[T]':
        return self

    def clone(self) -> 'Ref[T]':
        return Ref(self._target)

    __copy__ = clone

    @debug
    def same(self, other: 'Ref[T]') -> bool:
        check_same_kind(self, other)
        return self._target is other._target

    @debug
    def ref_hash(self, hasher: Hasher):
        check_hasher(hasher)
        hasher.write_usize(id(self._target))

    def __eq__(self, other: Any):
        if not isinstance(other, Ref):
            return NotImplemented
        return self._target == other._target

    def __hash__(self):
        return hash(self._target)

    def __repr__(self) -> str:
        return f"Ref({self._target!r})"


class Box(Same, RefHash, Generic[T]):
    """
    Exclusive owner of a freshly allocated cell.

    Cloning a box allocates again, so two distinct boxes never share a cell
    and `same` only holds for a box and itself.
    """

    __slots__ = ('_cell',)

    def __init__(self, value: T):
        self._cell = Cell(value)

    def get(self) -> T:
        return self._cell.get()

    def set(self, value: T):
        self._cell.set(value)

    @property
    def address(self) -> int:
        # the owned cell, not the Box object
        return id(self._cell)

    def as_ref(self) -> Ref[Cell[T]]:
        return Ref(self._cell)

    def clone(self) -> 'Box[T]':
        return Box(self._cell.get())

    __copy__ = clone

    @debug
    def same(self, other: 'Box[T]') -> bool:
        check_same_kind(self, other)
        return self._cell is other._cell

    @debug
    def ref_hash(self, hasher: Hasher):
        self.as_ref().ref_hash(hasher)

    def __eq__(self, other: Any):
        if not isinstance(other, Box):
            return NotImplemented
        return self._cell.get() == other._cell.get()

    def __hash__(self):
        return hash(self._cell.get())

    def __repr__(self) -> str:
        return f"Box({self._cell.get()!r})"


class _Shared:
    """One allocation plus the number of live handles pointing at it."""

    __slots__ = ('cell', 'count')

    def __init__(self, value):
        self.cell = Cell(value)
        self.count = 0

    def acquire(self):
        self.count += 1

    def release(self):
        self.count -= 1

    def strong_count(self) -> int:
        return self.count


class _AtomicShared(_Shared):
    __slots__ = ('lock',)

    def __init__(self, value):
        super().__init__(value)
        self.lock = threading.Lock()

    def acquire(self):
        with self.lock:
            self.count += 1

    def release(self):
        with self.lock:
            self.count -= 1

    def strong_count(self) -> int:
        with self.lock:
            return self.count


class Rc(Same, RefHash, Generic[T]):
    """
    Shared owner of a single allocation. `clone()` hands out another handle
    to the same allocation. The handle bookkeeping is not thread-safe; use
    `Arc` for handles cloned or dropped from several threads.
    """

    __slots__ = ('_shared', '__weakref__')

    _shared_type = _Shared

    def __init__(self, value: T):
        self._attach(self._shared_type(value))

    def _attach(self, shared: _Shared):
        self._shared = shared
        shared.acquire()
        # counted by identity; handles hash and compare by value
        finalizer = weakref.finalize(self, shared.release)
        finalizer.atexit = False

    @classmethod
    def _from_shared(cls, shared: _Shared):
        handle = cls.__new__(cls)
        handle._attach(shared)
        return handle

    def get(self) -> T:
        return self._shared.cell.get()

    @property
    def address(self) -> int:
        return id(self._shared.cell)

    def as_ref(self) -> Ref[Cell[T]]:
        return Ref(self._shared.cell)

    def clone(self) -> 'Rc[T]':
        return self._from_shared(self._shared)

    __copy__ = clone

    def strong_count(self) -> int:
        return self._shared.strong_count()

    @staticmethod
    def ptr_eq(a: 'Rc[T]', b: 'Rc[T]') -> bool:
        return a._shared is b._shared

    @debug
    def same(self, other: 'Rc[T]') -> bool:
        check_same_kind(self, other)
        return Rc.ptr_eq(self, other)

    @debug
    def ref_hash(self, hasher: Hasher):
        self.as_ref().ref_hash(hasher)

    def __eq__(self, other: Any):
        if type(other) is not type(self):
            return NotImplemented
        return self.get() == other.get()

    def __hash__(self):
        return hash(self.get())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.get()!r})"


class Arc(Rc[T]):
    """
    An `Rc` whose handle bookkeeping is guarded by a lock. `same` and
    `ref_hash` are inherited: the allocation never moves, so reading it needs
    no lock.
    """

    __slots__ = ()

    _shared_type = _AtomicShared
