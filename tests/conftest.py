"""Shared fixtures for tf-plan-format tests."""

from pathlib import Path
import pytest

PLANS_DIR = Path(__file__).parent / "fixtures" / "plans"

PLAN_CASES = ["create", "delete", "delete-create", "no-op", "no-resources", "sensitive", "update"]


def plan_file(case: str) -> str:
    """Path to a fixture plan, e.g. plan_file('update')."""
    return str(PLANS_DIR / case / "terraform.tfplan.json")


@pytest.fixture
def plans_dir():
    """Directory holding fixture plans."""
    return PLANS_DIR


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files out of tests."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("USERPROFILE", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def plan_path():
    """Factory returning the path of a named fixture plan."""
    return plan_file


@pytest.fixture
def artificial_plan():
    """Factory returning the path of a hand-built broken plan."""
    def _path(name: str) -> str:
        return str(PLANS_DIR / "artificial" / f"{name}.json")
    return _path
