import random
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so the tests run without installing the package
ROOT_DIR = Path(__file__).resolve().parent.parent
if ROOT_DIR.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_DIR.as_posix())


@pytest.fixture
def rng():
    """Seeded RNG for property checks."""
    return random.Random(20240617)


@pytest.fixture
def random_word(rng):
    """Factory for short random lowercase words over a small alphabet."""
    def _make(max_len: int = 6) -> str:
        return "".join(rng.choice("abcd") for _ in range(rng.randint(0, max_len)))
    return _make


@pytest.fixture
def reference_sentence():
    return "The quick brown fox jumps over the lazy dog."
