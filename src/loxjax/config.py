"""Module-wide floating-point precision configuration.

Provides ``set_dtype`` and ``get_dtype`` to control the float dtype used by
the rotation and series code in loxjax.  The default is ``jnp.float64``:
the Earth orientation models are only meaningful at microarcsecond level
in double precision, so importing loxjax enables JAX's 64-bit mode
(``jax_enable_x64``).  Lower precisions remain available for batched
GPU/TPU work where that accuracy is not needed.

Call ``set_dtype`` **before** any JIT compilation, just like JAX's own
``jax.config.update("jax_enable_x64", True)``.

Time arithmetic (:mod:`loxjax.time`) is exact integer arithmetic and does
not depend on this setting.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

_VALID_DTYPES = (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64)

DEFAULT_DTYPE = jnp.float64

jax.config.update("jax_enable_x64", True)
_dtype = DEFAULT_DTYPE


def set_dtype(dtype) -> None:
    """Set the module-wide float dtype for loxjax.

    If *dtype* is ``jnp.float64``, JAX's 64-bit mode is automatically
    enabled via ``jax.config.update("jax_enable_x64", True)``.

    Args:
        dtype: One of ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32``,
            or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _VALID_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: "
            f"jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def reset_dtype() -> None:
    """Restore the default dtype (``jnp.float64``)."""
    set_dtype(DEFAULT_DTYPE)


def get_dtype():
    """Return the current module-wide float dtype.

    Returns:
        The active float dtype (default ``jnp.float64``).
    """
    return _dtype


def get_rotation_tolerance() -> float:
    """Return the dtype-adaptive tolerance for rotation matrix comparisons.

    - ``float16``:  1e-2
    - ``bfloat16``: 1e-2
    - ``float32``:  1e-6
    - ``float64``:  1e-12

    Returns:
        float: Absolute tolerance on matrix elements.
    """
    if _dtype == jnp.float64:
        return 1e-12
    if _dtype == jnp.float32:
        return 1e-6
    # float16 and bfloat16
    return 1e-2
