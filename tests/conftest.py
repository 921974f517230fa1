import pytest

from loxjax.config import reset_dtype


@pytest.fixture(autouse=True)
def _default_dtype():
    """Run every test under the default configuration.

    Tests that need another dtype override it (test_config.py has its own
    autouse fixture that sets float32).
    """
    reset_dtype()
