"""
Общие fixtures: изоляция Settings от окружения процесса.
"""

import pytest

from number_human.config import ENV_PREFIX, get_settings

_ENV_KEYS = ("PRECISION", "DELIMITER", "SEPARATOR", "LOCALE")


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Сброс переменных окружения и кэша Settings вокруг каждого теста"""
    for key in _ENV_KEYS:
        monkeypatch.delenv(f"{ENV_PREFIX}{key}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
