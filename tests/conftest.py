"""Shared fixtures for rb-parameters tests."""

import pytest

from rb_parameters.parameters import RBParameters


@pytest.fixture
def empty_params():
    """A fresh, empty parameter set."""
    return RBParameters()


@pytest.fixture
def sample_params():
    """Parameter set with primary and extra values."""
    params = RBParameters({"mu_1": 2.75, "mu_0": 1.5})
    params.set_extra_value("tag", 7.0)
    return params


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run a test from an empty directory (no pyproject.toml)."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
