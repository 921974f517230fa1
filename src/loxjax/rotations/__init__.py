"""Rotation primitive: elementary frame rotations and :class:`Rotation`."""

from loxjax.rotations._matrices import Rx, Ry, Rz
from loxjax.rotations._rotation import Rotation, skew

__all__ = [
    "Rotation",
    "Rx",
    "Ry",
    "Rz",
    "skew",
]
