"""Pytest fixtures for kicad-plcc tests."""

import pytest

from kicad_plcc import config as config_module
from kicad_plcc.library import MountingOptions, build_geometry, lookup
from kicad_plcc.logging import disable_verbose


@pytest.fixture
def spec84():
    """The 84 pin reference plug."""
    return lookup(84)


@pytest.fixture
def spec20():
    """The smallest plug."""
    return lookup(20)


@pytest.fixture
def smd_options():
    return MountingOptions(double_sided=False)


@pytest.fixture
def geometry84(spec84):
    """Default (double sided, vias outside) geometry of the 84 pin plug."""
    return build_geometry(spec84, MountingOptions())


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run in an empty project directory without user config."""
    monkeypatch.setattr(config_module, "USER_CONFIG_PATH", tmp_path / "user" / "config.toml")
    project = tmp_path / "project"
    project.mkdir()
    (project / ".git").mkdir()
    monkeypatch.chdir(project)
    return project


@pytest.fixture(autouse=True)
def quiet_logging():
    yield
    disable_verbose()
