import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from skewgen.utils.random import create_rng  # noqa: E402


@pytest.fixture
def rng():
    return create_rng(1234)
