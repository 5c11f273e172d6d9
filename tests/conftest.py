import sys
from pathlib import Path

import pytest

# Ensure the flat layout (ml/, ui/, app.py) is importable from tests
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("INPUTS", "LEARNING_RATE", "THRESHOLD", "LIMIT"):
        monkeypatch.delenv(f"PERCEPTRON_{name}", raising=False)
