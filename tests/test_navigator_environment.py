"""Tests for the explicit environment object and env file loading."""

import os
from pathlib import Path

import pytest

from hydra_navigator.navigator_environment import (
    NavigatorEnvironment,
    activate,
    load_navigator_environment,
    read_env_file,
)


def test_get_treats_empty_as_unset() -> None:
    """Verify empty values read as missing."""
    env = NavigatorEnvironment("", {"A": "", "B": "x"})
    assert env.get("A") is None
    assert env.get("B") == "x"
    assert env.get("C") is None


def test_read_env_file_missing(tmp_path: Path) -> None:
    """Verify a missing env file yields no variables."""
    assert read_env_file(str(tmp_path / ".env")) == {}


def test_read_env_file_values(tmp_path: Path) -> None:
    """Verify key=value lines and quotes are parsed."""
    env_file = tmp_path / ".env"
    env_file.write_text('PYTHONPATH=src\nHYDRA_CONFIG_PATH="/etc/hydra"\nEMPTY\n')
    assert read_env_file(str(env_file)) == {
        "PYTHONPATH": "src",
        "HYDRA_CONFIG_PATH": "/etc/hydra",
    }


def test_load_environment_file_fills_missing(tmp_path: Path) -> None:
    """Verify env file values are used when the variable is not set."""
    (tmp_path / ".env").write_text("PYTHONPATH=src\n")
    env = load_navigator_environment(str(tmp_path), {})
    assert env.workspace_root == str(tmp_path)
    assert env.get("PYTHONPATH") == "src"


def test_load_environment_existing_variables_win(tmp_path: Path) -> None:
    """Verify variables already set are not overridden by the env file."""
    (tmp_path / ".env").write_text("PYTHONPATH=src\n")
    env = load_navigator_environment(str(tmp_path), {"PYTHONPATH": "lib"})
    assert env.get("PYTHONPATH") == "lib"


def test_load_environment_is_idempotent(tmp_path: Path) -> None:
    """Verify reloading the same env file gives the same variables."""
    (tmp_path / ".env").write_text("PYTHONPATH=src\n")
    first = load_navigator_environment(str(tmp_path), {})
    second = load_navigator_environment(str(tmp_path), dict(first.variables))
    assert first == second


def test_load_environment_uses_injected_reader() -> None:
    """Verify the env file reader can be replaced."""
    calls: list[str] = []

    def reader(path: str) -> dict[str, str]:
        calls.append(path)
        return {"PYTHONPATH": "pkgs"}

    env = load_navigator_environment("/ws", {}, env_file=".env.local", reader=reader)
    assert calls == [os.path.join("/ws", ".env.local")]
    assert env.get("PYTHONPATH") == "pkgs"


def test_activate_loads_into_process(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Verify activation exports env file values without overriding."""
    monkeypatch.delenv("HYDRA_NAV_TEST_NEW", raising=False)
    monkeypatch.setenv("HYDRA_NAV_TEST_SET", "process")
    (tmp_path / ".env").write_text(
        "HYDRA_NAV_TEST_NEW=from_file\nHYDRA_NAV_TEST_SET=from_file\n"
    )
    assert activate(str(tmp_path)) is True
    try:
        assert os.environ["HYDRA_NAV_TEST_NEW"] == "from_file"
        assert os.environ["HYDRA_NAV_TEST_SET"] == "process"
    finally:
        os.environ.pop("HYDRA_NAV_TEST_NEW", None)


def test_activate_without_env_file(tmp_path: Path) -> None:
    """Verify activation is a no-op when the workspace has no env file."""
    assert activate(str(tmp_path)) is False
