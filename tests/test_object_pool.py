import pytest

from timber.object_pool import ObjectPool


class Dummy:
    def __init__(self):
        self.active = True
        self.inits = 0
        self.resets = 0

    def init(self):
        self.inits += 1

    def reset(self):
        self.resets += 1


def test_initial_objects_are_created_and_initialised():
    made = []

    def factory():
        obj = Dummy()
        made.append(obj)
        return obj

    pool = ObjectPool(factory, init_size=3)
    assert len(made) == 3
    assert all(obj.inits == 1 and obj.resets == 0 for obj in made)
    taken = [pool.take() for _ in range(3)]
    assert taken == made
    assert len(made) == 3


def test_take_resets_and_activates():
    pool = ObjectPool(Dummy, init_size=1)
    obj = pool.take()
    assert obj.active is True
    assert obj.resets == 1


def test_release_deactivates_and_object_is_reused():
    pool = ObjectPool(Dummy, init_size=1)
    obj = pool.take()
    pool.release(obj)
    assert obj.active is False
    again = pool.take()
    assert again is obj
    assert again.active is True
    assert again.resets == 2


def test_take_beyond_size_creates_new_object():
    pool = ObjectPool(Dummy, init_size=1)
    first = pool.take()
    second = pool.take()
    assert second is not first
    assert (second.inits, second.resets) == (1, 1)


def test_released_objects_go_to_back_of_queue():
    pool = ObjectPool(Dummy, init_size=2)
    a = pool.take()
    pool.release(a)
    b = pool.take()
    assert b is not a


def test_release_foreign_object_raises():
    pool = ObjectPool(Dummy, init_size=1)
    with pytest.raises(ValueError):
        pool.release(Dummy())


def test_release_twice_raises():
    pool = ObjectPool(Dummy, init_size=1)
    obj = pool.take()
    pool.release(obj)
    with pytest.raises(ValueError):
        pool.release(obj)