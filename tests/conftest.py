import pytest

from geodist.config.settings import get_settings

_ENV_VARS = ("GEODIST_CONFIG_PATH", "GEODIST_LOG_LEVEL", "GEODIST_DEFAULT_UNIT")


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    # Settings are lru_cached; every test starts from the packaged defaults.
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
