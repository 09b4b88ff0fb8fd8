"""
Structure lint tests.
Verify that every component follows the atomic component layout.
"""

import importlib
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
COMPONENTS_DIR = PROJECT_ROOT / "listkit" / "components"

COMPONENT_FILES = ["__init__.py", "_impl.py", "component.py", "models.py", "ports.py"]


def component_dirs() -> list[Path]:
    return sorted(p for p in COMPONENTS_DIR.iterdir() if p.is_dir() and not p.name.startswith("_"))


class TestProjectStructure:
    """Verify project structure follows component conventions."""

    def test_core_directories_exist(self) -> None:
        assert COMPONENTS_DIR.is_dir()
        assert (PROJECT_ROOT / "listkit" / "rules").is_dir()
        assert (PROJECT_ROOT / "listkit" / "adapters").is_dir()
        assert (PROJECT_ROOT / "listkit" / "app_shell").is_dir()

    def test_tests_structure_exists(self) -> None:
        assert (PROJECT_ROOT / "tests" / "unit").is_dir()
        assert (PROJECT_ROOT / "tests" / "regression").is_dir()

    def test_rules_file_present(self) -> None:
        assert (PROJECT_ROOT / "rules.yaml").is_file()

    def test_components_have_required_files(self) -> None:
        names = [p.name for p in component_dirs()]
        assert names == ["combinatorics", "list_utils"]
        for component in component_dirs():
            for filename in COMPONENT_FILES:
                assert (component / filename).is_file(), f"Missing {filename} in {component.name}"
            assert (component / "tests" / "test_unit.py").is_file()

    def test_components_export_run(self) -> None:
        """Every component exposes a run dispatcher and lists it in __all__."""
        for component in component_dirs():
            module = importlib.import_module(f"listkit.components.{component.name}")
            assert callable(module.run)
            assert "run" in module.__all__
            for name in module.__all__:
                assert hasattr(module, name), f"{component.name} exports missing {name}"
