import pytest

from inkrt.core import InkError
from inkrt.restorable import Restorable


def is_none(element):
    return element is None


def make(*values, capacity=None):
    r = Restorable(capacity)
    for v in values:
        r.push(v)
    return r


def test_push_returns_element_and_pop_is_lifo():
    r = Restorable()
    assert r.push(5) == 5
    r.push(6)
    r.push(7)
    assert [r.pop(), r.pop(), r.pop()] == [7, 6, 5]
    assert r.is_empty()


def test_pop_empty_raises():
    with pytest.raises(InkError):
        Restorable().pop()


def test_top_empty_raises():
    with pytest.raises(InkError):
        Restorable().top()


def test_top_does_not_remove():
    r = make(1, 2)
    assert r.top() == 2
    assert r.size() == 2


def test_capacity_overflow():
    r = make(1, 2, capacity=2)
    with pytest.raises(InkError):
        r.push(3)


def test_iterate_orders():
    r = make(1, 2, 3)
    assert list(r.iterate()) == [1, 2, 3]
    assert list(r.reverse_iterate()) == [3, 2, 1]


def test_save_restore_rolls_back():
    r = make(1, 2)
    r.save()
    assert r.is_saved()
    assert r.pop() == 2
    r.push(9)
    r.restore()
    assert not r.is_saved()
    assert list(r.iterate()) == [1, 2]
    assert r.top() == 2


def test_saved_view_hides_popped_region():
    r = make(1, 2)
    r.save()
    r.pop()
    r.push(9)
    assert list(r.iterate()) == [1, 9]
    assert list(r.reverse_iterate()) == [9, 1]
    assert list(r.iterate_all()) == [1, 2, 9]
    assert r.size() == 2


def test_forget_nullifies_jumped_region():
    r = make(1, 2)
    r.save()
    r.pop()
    r.push(9)
    r.forget(lambda e: None)
    assert not r.is_saved()
    assert list(r.iterate(is_none)) == [1, 9]
    assert r.size(is_none) == 2
    assert r.pop(is_none) == 9
    assert r.pop(is_none) == 1
    assert r.is_empty()


def test_forget_keeps_pushes_after_save():
    r = make(1)
    r.save()
    r.push(2)
    r.forget(lambda e: None)
    assert list(r.iterate(is_none)) == [1, 2]


def test_top_skips_nulls():
    r = make(1, None)
    assert r.top(is_none) == 1
    assert r.top() is None


def test_double_save_raises():
    r = make(1)
    r.save()
    with pytest.raises(InkError):
        r.save()


def test_restore_without_save_raises():
    with pytest.raises(InkError):
        make(1).restore()


def test_forget_without_save_raises():
    with pytest.raises(InkError):
        make(1).forget(lambda e: None)


def test_clear_resets_everything():
    r = make(1, 2)
    r.save()
    r.clear()
    assert r.is_empty()
    assert not r.is_saved()
    assert list(r.iterate()) == []


def test_find_and_reverse_find():
    r = make(1, 2, 3, 4)
    assert r.find(lambda e: e % 2 == 0) == 2
    assert r.reverse_find(lambda e: e % 2 == 0) == 4
    assert r.find(lambda e: e > 10) is None
    assert r.reverse_find(lambda e: e > 10) is None


def test_find_skips_nulls():
    r = make(None, 5)
    assert r.find(lambda e: True, is_none) == 5