import pytest

from wordcount.config import CONFIG_ENV_VAR


@pytest.fixture(autouse=True)
def _clean_config_env(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
