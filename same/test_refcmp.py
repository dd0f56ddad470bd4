import pytest

from same.cell import Cell
from same.handles import Ref, Box, Rc, Arc
from same.refcmp import RefCmp


def test_refs():
    a = Cell(42)
    b = Cell(42)

    r0 = Ref(a)
    r1 = Ref(a)
    r2 = Ref(b)

    hash_set = set()
    hash_set.add(RefCmp(r0))
    hash_set.add(RefCmp(r1))
    assert len(hash_set) == 1
    hash_set.add(RefCmp(r2))
    assert len(hash_set) == 2


def test_boxes():
    a = Box(42)
    b = Box(42)

    hash_set = {RefCmp(Ref(a)), RefCmp(Ref(a))}
    assert len(hash_set) == 1
    hash_set.add(RefCmp(Ref(b)))
    assert len(hash_set) == 2


def test_boxes_owned():
    a = Box(42)
    # distinct boxes never collapse, even with equal values
    hash_set = {RefCmp(a), RefCmp(a.clone()), RefCmp(Box(42))}
    assert len(hash_set) == 3
    assert RefCmp(a) in hash_set


@pytest.mark.parametrize("kind", [Rc, Arc])
def test_shared_owners(kind):
    a = kind(42)
    a_cloned = a.clone()
    b = kind(42)

    hash_set = set()
    hash_set.add(RefCmp(a))
    hash_set.add(RefCmp(a_cloned))
    assert len(hash_set) == 1
    hash_set.add(RefCmp(b))
    assert len(hash_set) == 2


def test_arcs_from_iterable():
    a = Arc(42)
    a2 = a.clone()
    b = Arc(42)

    assert a.same(a2)
    assert not a.same(b)
    assert len({RefCmp(h) for h in (a, a2, b)}) == 2


def test_equal_values_compare_unequal():
    a = Rc([1, 2])
    b = Rc([1, 2])
    assert a == b
    assert RefCmp(a) != RefCmp(b)
    assert RefCmp(a) == RefCmp(a.clone())
    assert hash(RefCmp(a)) == hash(RefCmp(a.clone()))


def test_unhashable_referents():
    # the referent's value is never hashed
    a = Cell([])
    keys = {RefCmp(Ref(a)): "a"}
    assert keys[RefCmp(Ref(a))] == "a"


def test_from_ref_wraps_same_handle():
    a = Arc(42)
    key = RefCmp.from_ref(a)
    assert key.inner is a
    assert key == RefCmp(a)


def test_pass_through():
    a = Rc("hello")
    key = RefCmp(a)

    assert key.inner is a
    assert key.borrow() is a
    assert key.get() == "hello"
    assert key.strong_count() == 1
    assert key.as_ref().same(a.as_ref())

    with pytest.raises(AttributeError):
        key.no_such_attribute


def test_inner_is_read_only():
    key = RefCmp(Ref(1))
    with pytest.raises(AttributeError):
        key.inner = Ref(2)


def test_mixed_kinds_never_equal():
    cell = Cell(42)
    borrowed = Ref(cell)
    a = Rc(42)
    # both resolve to a cell address, but the kinds differ
    assert RefCmp(borrowed) != RefCmp(a)
    assert RefCmp(Rc(1)) != RefCmp(Arc(1))
    assert RefCmp(a) != a


def test_dict_keys():
    a = Arc("config")
    b = Arc("config")
    seen = {RefCmp(a): 1}
    seen[RefCmp(a.clone())] += 1
    seen[RefCmp(b)] = 1
    assert seen == {RefCmp(a): 2, RefCmp(b): 1}


def test_requires_same():
    with pytest.raises(TypeError):
        RefCmp(42)
    with pytest.raises(TypeError):
        RefCmp(Cell(42))


def test_repr():
    assert repr(RefCmp(Arc(42))) == "RefCmp(Arc(42))"
