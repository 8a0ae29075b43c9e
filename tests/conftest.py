"""
This module contains shared fixtures for testing.
"""

from pathlib import Path

import pytest

from electrode.options import reset_electrode_options


@pytest.fixture(autouse=True)
def default_options():
    """Restore the default option values around every test."""
    reset_electrode_options()
    yield
    reset_electrode_options()


@pytest.fixture
def options_dir(tmp_path: Path) -> Path:
    """A directory holding one options file per supported format."""
    (tmp_path / "options.toml").write_text(
        '[electrode]\nrequires_key = "@inject"\nsingleton_key = "@shared"\n',
        encoding="utf-8",
    )
    (tmp_path / "options.yaml").write_text(
        "requires_key: '@needs'\n", encoding="utf-8"
    )
    (tmp_path / "options.json").write_text(
        '{"electrode": {"singleton_key": "@once"}}', encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def dynamic_function():
    """A function whose source text cannot be retrieved."""
    namespace = {}
    exec("def dynamic(a, b):\n    return a, b\n", namespace)  # noqa: S102
    return namespace["dynamic"]
