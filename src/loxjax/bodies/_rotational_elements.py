"""IAU rotational-element models.

The orientation of a body's pole and prime meridian in the ICRF is given
by three angles (right ascension ``alpha``, declination ``delta`` and
rotation angle ``W``), each a quadratic polynomial in TDB time since J2000
plus optional nutation-precession terms:

    alpha = a0 + a1 T + a2 T^2 + sum(a_i sin(theta_i))
    delta = d0 + d1 T + d2 T^2 + sum(d_i cos(theta_i))
    W     = w0 + w1 d + w2 d^2 + sum(w_i sin(theta_i))

with ``T`` in Julian centuries, ``d`` in days and
``theta_i = theta0_i + theta1_i T + theta2_i T^2``.  All models take the
time as TDB seconds since J2000 and work in radians.
"""

from __future__ import annotations

import enum
from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from loxjax.bodies import _data
from loxjax.bodies._origins import Origin
from loxjax.config import get_dtype
from loxjax.constants import DEG2RAD, SECONDS_PER_DAY, SECONDS_PER_JULIAN_CENTURY
from loxjax.errors import UndefinedRotationalElements


class ElementType(enum.Enum):
    """Which of the three rotational elements a series describes."""

    RIGHT_ASCENSION = "right_ascension"
    DECLINATION = "declination"
    ROTATION = "rotation"

    @property
    def dt(self) -> float:
        """Time unit of the polynomial [s]."""
        if self is ElementType.ROTATION:
            return float(SECONDS_PER_DAY)
        return float(SECONDS_PER_JULIAN_CENTURY)


class NutationPrecessionAngles(NamedTuple):
    """Nutation-precession angles of a planetary system [rad].

    Attributes:
        theta0: Values at J2000, shape ``(n,)``.
        theta1: Rates [rad/century], shape ``(n,)``.
        theta2: Quadratic coefficients [rad/century^2], shape ``(n,)``.
    """

    theta0: Array
    theta1: Array
    theta2: Array

    @classmethod
    def from_degrees(cls, table) -> NutationPrecessionAngles:
        dtype = get_dtype()
        if not table:
            empty = jnp.zeros((0,), dtype=dtype)
            return cls(empty, empty, empty)
        theta = jnp.asarray(table, dtype=dtype) * DEG2RAD
        return cls(theta[:, 0], theta[:, 1], theta[:, 2])

    def __len__(self) -> int:
        return self.theta0.shape[0]

    def evaluate(self, t: ArrayLike) -> tuple[Array, Array]:
        """Angles [rad] and their rates [rad/s] at *t* TDB seconds since J2000."""
        century = float(SECONDS_PER_JULIAN_CENTURY)
        tc = t / century
        theta = self.theta0 + self.theta1 * tc + self.theta2 * tc**2
        theta_dot = (self.theta1 + 2.0 * self.theta2 * tc) / century
        return theta, theta_dot


class RotationalElement:
    """One rotational element: polynomial plus nutation-precession terms.

    Args:
        typ (ElementType): Which element this is; selects the time unit
            and the trigonometric function.
        coefficients (ArrayLike): Polynomial ``(c0, c1, c2)`` [rad].
        trig_coefficients (ArrayLike): Amplitudes [rad] aligned with the
            system's nutation-precession angles. May be shorter than the
            angle table; missing amplitudes are zero.
    """

    def __init__(self, typ: ElementType, coefficients: ArrayLike, trig_coefficients: ArrayLike = ()) -> None:
        dtype = get_dtype()
        self.typ = typ
        self.coefficients = jnp.asarray(coefficients, dtype=dtype)
        self.trig_coefficients = jnp.asarray(trig_coefficients, dtype=dtype)

    def _trig(self, angles: NutationPrecessionAngles, t: ArrayLike) -> tuple[Array, Array]:
        n = self.trig_coefficients.shape[0]
        if n == 0:
            zero = jnp.zeros((), dtype=self.coefficients.dtype)
            return zero, zero
        theta, theta_dot = angles.evaluate(t)
        theta, theta_dot = theta[:n], theta_dot[:n]
        c = self.trig_coefficients
        if self.typ is ElementType.DECLINATION:
            return jnp.sum(c * jnp.cos(theta)), -jnp.sum(c * theta_dot * jnp.sin(theta))
        return jnp.sum(c * jnp.sin(theta)), jnp.sum(c * theta_dot * jnp.cos(theta))

    def angle(self, t: ArrayLike, angles: NutationPrecessionAngles) -> Array:
        """Element value [rad] at *t* TDB seconds since J2000."""
        c0, c1, c2 = self.coefficients
        x = t / self.typ.dt
        return c0 + c1 * x + c2 * x**2 + self._trig(angles, t)[0]

    def rate(self, t: ArrayLike, angles: NutationPrecessionAngles) -> Array:
        """Element rate [rad/s] at *t* TDB seconds since J2000."""
        _, c1, c2 = self.coefficients
        dt = self.typ.dt
        return c1 / dt + 2.0 * c2 * t / dt**2 + self._trig(angles, t)[1]


class Elements(NamedTuple):
    """Right ascension, declination and rotation angle (or their rates)."""

    right_ascension: Array
    declination: Array
    rotation_angle: Array


class RotationalElements:
    """Complete rotational model of a body.

    Args:
        right_ascension (RotationalElement): Pole right ascension.
        declination (RotationalElement): Pole declination.
        rotation (RotationalElement): Prime-meridian angle ``W``.
        angles (NutationPrecessionAngles): Angles the trigonometric
            terms refer to.

    Examples:
        ```python
        from loxjax.bodies import Origin, rotational_elements

        jupiter = rotational_elements(Origin.JUPITER)
        ra, dec, w = jupiter.elements(0.0)
        ra_dot, dec_dot, w_dot = jupiter.rates(0.0)
        ```
    """

    def __init__(
        self,
        right_ascension: RotationalElement,
        declination: RotationalElement,
        rotation: RotationalElement,
        angles: NutationPrecessionAngles | None = None,
    ) -> None:
        self.right_ascension = right_ascension
        self.declination = declination
        self.rotation = rotation
        self.angles = angles if angles is not None else NutationPrecessionAngles.from_degrees(())

    @classmethod
    def from_degrees(cls, ra, dec, pm, angles=()) -> RotationalElements:
        """Build a model from published tables in degrees.

        Args:
            ra: ``(polynomial, amplitudes)`` for the right ascension.
            dec: ``(polynomial, amplitudes)`` for the declination.
            pm: ``(polynomial, amplitudes)`` for the prime meridian.
            angles: Nutation-precession angle table ``((theta0, theta1,
                theta2), ...)``.

        Returns:
            RotationalElements: The model in radians.
        """

        def element(typ, table):
            poly, trig = table
            return RotationalElement(
                typ,
                [c * DEG2RAD for c in poly],
                [a * DEG2RAD for a in trig],
            )

        return cls(
            element(ElementType.RIGHT_ASCENSION, ra),
            element(ElementType.DECLINATION, dec),
            element(ElementType.ROTATION, pm),
            NutationPrecessionAngles.from_degrees(angles),
        )

    def right_ascension_at(self, t: ArrayLike) -> Array:
        return self.right_ascension.angle(t, self.angles)

    def right_ascension_rate(self, t: ArrayLike) -> Array:
        return self.right_ascension.rate(t, self.angles)

    def declination_at(self, t: ArrayLike) -> Array:
        return self.declination.angle(t, self.angles)

    def declination_rate(self, t: ArrayLike) -> Array:
        return self.declination.rate(t, self.angles)

    def rotation_angle(self, t: ArrayLike) -> Array:
        return self.rotation.angle(t, self.angles)

    def rotation_rate(self, t: ArrayLike) -> Array:
        return self.rotation.rate(t, self.angles)

    def elements(self, t: ArrayLike) -> Elements:
        """Evaluate ``(alpha, delta, W)`` [rad] at *t* TDB seconds since J2000."""
        return Elements(self.right_ascension_at(t), self.declination_at(t), self.rotation_angle(t))

    def rates(self, t: ArrayLike) -> Elements:
        """Evaluate the element rates [rad/s] at *t* TDB seconds since J2000."""
        return Elements(self.right_ascension_rate(t), self.declination_rate(t), self.rotation_rate(t))


_TABLES = {
    Origin.SUN: _data.SUN,
    Origin.MERCURY: _data.MERCURY,
    Origin.VENUS: _data.VENUS,
    Origin.EARTH: _data.EARTH,
    Origin.MOON: _data.MOON,
    Origin.MARS: _data.MARS,
    Origin.JUPITER: _data.JUPITER,
    Origin.SATURN: _data.SATURN,
    Origin.URANUS: _data.URANUS,
    Origin.NEPTUNE: _data.NEPTUNE,
    Origin.PLUTO: _data.PLUTO,
}


def has_rotational_elements(origin: Origin) -> bool:
    """Return True if *origin* has a builtin rotational-element model."""
    return Origin(origin) in _TABLES


def rotational_elements(origin: Origin) -> RotationalElements:
    """Return the rotational-element model of *origin*.

    Models are built on each call so they pick up the current
    :func:`~loxjax.config.get_dtype`.

    Args:
        origin (Origin): Body to look up.

    Returns:
        RotationalElements: The body's model.

    Raises:
        UndefinedRotationalElements: For barycenters and bodies without a
            builtin model.
    """
    origin = Origin(origin)
    try:
        table = _TABLES[origin]
    except KeyError:
        raise UndefinedRotationalElements(origin) from None
    return RotationalElements.from_degrees(*table)
