import sys
from pathlib import Path

import pytest

# Ensure `import bidlint` works when running `pytest` without needing PYTHONPATH hacks.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def _isolate_rule_group_env(monkeypatch) -> None:
    monkeypatch.delenv("BIDLINT_RULE_GROUPS", raising=False)
