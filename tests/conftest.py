from pathlib import Path

import pytest

from listkit.adapters.rules_port import RulesAdapter
from listkit.rules.loader import load_rules
from listkit.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules() -> Rules:
    """The project's real rules file."""
    rules_path = PROJECT_ROOT / "rules.yaml"
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")
    return load_rules(rules_path)


@pytest.fixture
def rules_port(rules: Rules) -> RulesAdapter:
    return RulesAdapter(rules)


@pytest.fixture
def write_rules(tmp_path):
    """Write rules text to a temporary file and return its path."""

    def _write(text: str, name: str = "rules.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write
