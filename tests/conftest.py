import pytest

SETTINGS_VARS = ("QUIZSTATS_UPPER_LIMIT", "QUIZSTATS_LOG_LEVEL")


# start every test from a clean environment; setting first makes monkeypatch
# also undo values a loaded .env file adds during the test
@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in SETTINGS_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
