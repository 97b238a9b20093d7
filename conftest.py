import pytest

from config import reset_config


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Every test starts from default settings, unaffected by QUORIDOR_* variables."""
    for name in ("QUORIDOR_DEPTH", "QUORIDOR_SEED", "QUORIDOR_PATH_WEIGHT",
                 "QUORIDOR_WALL_WEIGHT", "QUORIDOR_LOG_LEVEL", "QUORIDOR_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
