"""
Pytest fixtures for the minilang tests.
"""

import pytest
import pandas as pd

from minilang.utils.logging_config import setup_logging


@pytest.fixture
def acceptance_cases():
    """Source texts paired with whether the recognizer should reject them."""
    return [
        ("x = 5", False),
        ("if (x > 2) { y = 4 } else { y = 5 }", False),
        ("x = (3 + 2) - (2 * 1)", False),
        ("if (x > 2) { 3 = 4 } else { y = 5 }", True),
    ]


@pytest.fixture
def mixed_sources():
    """One accepted program per construct plus one failure of each kind."""
    return [
        "x = 5",
        "if (x > 2) { y = 4 } else { y = 5 }",
        "x = (3 + 2) - (2 * 1)",
        "if (x > 2) { 3 = 4 } else { y = 5 }",
        "x = $",
    ]


@pytest.fixture
def programs_frame():
    """DataFrame holding programs in a non-default column."""
    return pd.DataFrame({
        'id': [1, 2, 3],
        'program': ["x = 1", "x = * 3", "else"],
    })


@pytest.fixture
def quiet_logging():
    """Route logging away from the console for the duration of a test."""
    yield
    setup_logging(log_level="INFO", enable_console=False)
