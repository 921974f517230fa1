"""Elementary frame rotations about the coordinate axes.

The matrices use the passive (frame) convention of SOFA/ERFA: ``Rz(a) @ v``
gives the components of a fixed vector *v* in a frame rotated by *a*
about +z.  Composite rotations therefore read right to left, e.g. the
body-fixed matrix ``Rz(W) @ Rx(pi/2 - dec) @ Rz(ra + pi/2)`` applies the
``ra`` rotation first.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from loxjax.config import get_dtype
from loxjax.utils import to_radians


def _axis_rotation(angle: ArrayLike, use_degrees: bool, axis: int) -> Array:
    angle = jnp.asarray(to_radians(angle, use_degrees), dtype=get_dtype())
    c = jnp.cos(angle)
    s = jnp.sin(angle)
    one = jnp.ones_like(c)
    zero = jnp.zeros_like(c)

    if axis == 0:
        rows = ((one, zero, zero), (zero, c, s), (zero, -s, c))
    elif axis == 1:
        rows = ((c, zero, -s), (zero, one, zero), (s, zero, c))
    else:
        rows = ((c, s, zero), (-s, c, zero), (zero, zero, one))
    return jnp.stack([jnp.stack(row) for row in rows])


def Rx(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Frame rotation about the x-axis.

    Args:
        angle (float): Rotation angle, positive counter-clockwise when
            looking back along +x.
        use_degrees (bool): Interpret *angle* in degrees. Default: ``False``

    Returns:
        Array: 3x3 rotation matrix.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    return _axis_rotation(angle, use_degrees, 0)


def Ry(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Frame rotation about the y-axis.

    Args:
        angle (float): Rotation angle, positive counter-clockwise when
            looking back along +y.
        use_degrees (bool): Interpret *angle* in degrees. Default: ``False``

    Returns:
        Array: 3x3 rotation matrix.
    """
    return _axis_rotation(angle, use_degrees, 1)


def Rz(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Frame rotation about the z-axis.

    Args:
        angle (float): Rotation angle, positive counter-clockwise when
            looking back along +z.
        use_degrees (bool): Interpret *angle* in degrees. Default: ``False``

    Returns:
        Array: 3x3 rotation matrix.
    """
    return _axis_rotation(angle, use_degrees, 2)
