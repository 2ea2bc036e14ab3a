from pathlib import Path

import pytest

import config as config_module


APP_PATH = str(Path(__file__).resolve().parents[1] / "app.py")


@pytest.fixture
def app_path():
    return APP_PATH


@pytest.fixture
def session():
    """Plain mapping standing in for Streamlit's session state"""
    return {}


@pytest.fixture(autouse=True)
def fresh_config():
    config_module._config = None
    yield
    config_module._config = None
