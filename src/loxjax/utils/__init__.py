"""Shared utility functions for loxjax."""

from loxjax.utils._angle import (
    TWO_PI,
    mod_two_pi,
    mod_two_pi_signed,
    normalize_two_pi,
    to_radians,
)

__all__ = [
    "TWO_PI",
    "mod_two_pi",
    "mod_two_pi_signed",
    "normalize_two_pi",
    "to_radians",
]
