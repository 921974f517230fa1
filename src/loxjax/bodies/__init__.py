"""Solar-system origins and their IAU rotational elements."""

from loxjax.bodies._origins import Origin
from loxjax.bodies._rotational_elements import (
    Elements,
    ElementType,
    NutationPrecessionAngles,
    RotationalElement,
    RotationalElements,
    has_rotational_elements,
    rotational_elements,
)

__all__ = [
    "ElementType",
    "Elements",
    "NutationPrecessionAngles",
    "Origin",
    "RotationalElement",
    "RotationalElements",
    "has_rotational_elements",
    "rotational_elements",
]
