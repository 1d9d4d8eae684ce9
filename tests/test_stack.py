import pytest

from inkrt.core import InkError
from inkrt.stack import SimpleRestorableStack

NULL = -1


def make(*values, capacity=None):
    s = SimpleRestorableStack(NULL, capacity)
    for v in values:
        s.push(v)
    return s


def test_push_pop_top():
    s = make(1, 2, 3)
    assert len(s) == 3
    assert s.top() == 3
    assert s.pop() == 3
    assert list(s) == [2, 1]


def test_push_null_raises():
    with pytest.raises(InkError):
        make().push(NULL)


def test_pop_and_top_empty_raise():
    s = make()
    assert s.is_empty()
    with pytest.raises(InkError):
        s.pop()
    with pytest.raises(InkError):
        s.top()


def test_capacity_overflow():
    s = make(1, 2, capacity=2)
    with pytest.raises(InkError):
        s.push(3)


def test_unbounded_growth():
    s = make(*range(100))
    assert len(s) == 100
    assert s.top() == 99


def test_save_restore():
    s = make(1, 2)
    s.save()
    assert s.pop() == 2
    s.push(7)
    assert len(s) == 2
    assert s.top() == 7
    assert list(s) == [7, 1]
    s.restore()
    assert len(s) == 2
    assert s.top() == 2
    assert list(s) == [2, 1]


def test_forget_after_jump_keeps_new_values():
    s = make(1, 2)
    s.save()
    s.pop()
    s.push(7)
    s.forget()
    assert list(s) == [7, 1]
    assert s.top() == 7


def test_forget_at_save_point_moves_to_jump():
    s = make(1, 2)
    s.save()
    s.pop()
    s.push(7)
    assert s.pop() == 7
    s.forget()
    assert len(s) == 1
    assert s.top() == 1
    assert list(s) == [1]


def test_pop_across_save_point():
    s = make(1, 2)
    s.save()
    s.pop()
    s.push(7)
    assert s.pop() == 7
    assert s.pop() == 1
    assert s.is_empty()


def test_double_save_raises():
    s = make(1)
    s.save()
    with pytest.raises(InkError):
        s.save()


def test_restore_without_save_raises():
    with pytest.raises(InkError):
        make(1).restore()


def test_forget_without_save_raises():
    with pytest.raises(InkError):
        make(1).forget()


def test_clear():
    s = make(1, 2)
    s.save()
    s.clear()
    assert s.is_empty()
    assert list(s) == []
    s.save()
    s.restore()
    assert s.is_empty()