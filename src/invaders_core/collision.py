"""
Collision tests.

Projectiles are points tested against a box, edges included. Ship and
invader are box-vs-box, and boxes that only share an edge do not collide.
"""

from __future__ import annotations

from invaders_core.geometry import Box


def point_in_box(x: float, y: float, box: Box) -> bool:
    """
    Check whether the point ``(x, y)`` lies inside ``box`` (inclusive).

    :param x: Point x
    :type x: float

    :param y: Point y
    :type y: float

    :param box: Box to test against
    :type box: Box

    :return: bool
    """
    return box.left <= x <= box.right and box.top <= y <= box.bottom


def boxes_overlap(a: Box, b: Box) -> bool:
    """
    Check whether two boxes overlap by a non-zero area.

    :param a: First box
    :type a: Box

    :param b: Second box
    :type b: Box

    :return: bool
    """
    return (
        a.right > b.left
        and a.left < b.right
        and a.bottom > b.top
        and a.top < b.bottom
    )
