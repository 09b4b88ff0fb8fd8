"""
Rules loading and validation tests.

Verifies that the rules loader reads rules.yaml, tolerates markdown-wrapped
YAML, fills defaults, and fails fast on invalid content.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from listkit.rules.loader import load_rules
from listkit.rules.models import Rules, default_rules

MINIMAL = """
project:
  slug: listkit
  rules_version: "1.0"
"""


class TestRulesLoading:
    """Test rules file loading."""

    def test_load_actual_rules_file(self, rules: Rules) -> None:
        """Project rules file loads successfully."""
        assert rules.project.slug == "listkit"
        assert rules.equality.mode == "value"
        assert rules.flatten.detect_cycles is True
        assert rules.flatten.max_depth is None

    def test_load_nonexistent_file_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(Path("/nonexistent/path/rules.yaml"))

    def test_load_invalid_yaml_raises(self, write_rules) -> None:
        path = write_rules("invalid: yaml: content: [")
        with pytest.raises(ValueError, match="Invalid YAML syntax") as exc_info:
            load_rules(path)
        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)

    def test_defaults_filled(self, write_rules) -> None:
        """Sections other than project are optional."""
        loaded = load_rules(write_rules(MINIMAL))
        assert loaded.equality.mode == "value"
        assert loaded.random.seed is None
        assert loaded.logging.level == "WARNING"

    def test_markdown_fenced_file_rejected(self, write_rules) -> None:
        """Rules files are plain YAML; a fenced markdown block is a syntax error."""
        with pytest.raises(ValueError, match="Invalid YAML syntax"):
            load_rules(write_rules("```yaml" + MINIMAL + "```\n"))

    def test_default_rules_match_empty_sections(self, write_rules) -> None:
        assert load_rules(write_rules(MINIMAL)) == default_rules()


class TestRulesValidation:
    """Test schema validation failures."""

    @pytest.mark.parametrize(
        "extra",
        [
            "equality:\n  mode: fuzzy\n",
            "flatten:\n  max_depth: -1\n",
            "logging:\n  level: LOUD\n",
            "unknown_section: {}\n",
        ],
    )
    def test_invalid_values_rejected(self, write_rules, extra: str) -> None:
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(write_rules(MINIMAL + extra))

    def test_missing_project_rejected(self, write_rules) -> None:
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(write_rules("equality:\n  mode: value\n"))

    def test_empty_file_rejected(self, write_rules) -> None:
        with pytest.raises(ValueError):
            load_rules(write_rules(""))
