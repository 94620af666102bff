from ecsengine.component import Component
from ecsengine.transform import Transform
from ecsengine.vector import Vect2D


def test_defaults():
    t = Transform()
    assert t.pos == Vect2D(0, 0)
    assert t.scale == Vect2D(1, 1)
    assert t.rotation == 0


def test_position_only():
    t = Transform(10.0, 20.0)
    assert t.pos == Vect2D(10.0, 20.0)
    assert t.scale == Vect2D(1, 1)


def test_all_arguments():
    t = Transform(1.0, 2.0, 3.0, 4.0, 45.0)
    assert t.pos == Vect2D(1.0, 2.0)
    assert t.scale == Vect2D(3.0, 4.0)
    assert t.rotation == 45.0


def test_instances_do_not_share_vectors():
    a = Transform()
    b = Transform()
    a.pos += Vect2D(5, 5)
    assert b.pos == Vect2D(0, 0)


def test_is_component_and_initialises():
    t = Transform()
    assert isinstance(t, Component)
    assert t.init() is True
    assert t.draw() is None
    assert t.entity is None