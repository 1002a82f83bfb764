import pytest

from stockview.config import set_config_for_test


@pytest.fixture(autouse=True)
def app_config(monkeypatch):
    for var in ["DATA_BACKEND", "DATA_DIR", "TIMEZONE", "LOG_LEVEL", "UNSPECIFIED_LABEL", "HISTORY_DAYS"]:
        monkeypatch.delenv(var, raising=False)
    set_config_for_test(timezone="UTC", log_level="DEBUG")
    yield
