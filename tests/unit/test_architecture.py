"""Tests to verify the layered package structure."""

from pathlib import Path

import pytest

# Compute project root relative to this test file
PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def package_path() -> Path:
    """Return the taskledger package directory path."""
    return PROJECT_ROOT / "taskledger"


def test_main_layers_exist(package_path: Path) -> None:
    """Verify all main layer directories exist."""
    layers = ["domain", "application", "infrastructure", "config", "bootstrap"]
    for layer in layers:
        assert (package_path / layer).is_dir(), f"Missing layer: {layer}"
        assert (package_path / layer / "__init__.py").is_file(), (
            f"Missing {layer}/__init__.py"
        )


def test_domain_has_no_outer_layer_imports(package_path: Path) -> None:
    """Verify the domain layer imports nothing from the outer layers."""
    forbidden = [
        "taskledger.application",
        "taskledger.infrastructure",
        "taskledger.config",
        "taskledger.bootstrap",
    ]

    for py_file in (package_path / "domain").rglob("*.py"):
        content = py_file.read_text()
        for module in forbidden:
            assert module not in content, f"{py_file} imports {module}"


def test_application_does_not_import_bootstrap(package_path: Path) -> None:
    for py_file in (package_path / "application").rglob("*.py"):
        assert "taskledger.bootstrap" not in py_file.read_text(), (
            f"{py_file} imports the composition root"
        )


def test_no_direct_clock_reads_in_domain(package_path: Path) -> None:
    """Domain code never reads the wall clock; timestamps are injected."""
    for py_file in (package_path / "domain").rglob("*.py"):
        content = py_file.read_text()
        assert "datetime.now(" not in content, f"{py_file} reads the wall clock"
        assert "datetime.utcnow(" not in content, f"{py_file} reads the wall clock"
