import sys

from loguru import logger

from horecascan.core.config import Settings
from horecascan.core.logging import setup_logging


def test_settings_defaults():
    s = Settings(_env_file=None)
    assert s.OVERPASS_API_URL == "https://overpass-api.de/api/interpreter"
    assert 10 <= s.OVERPASS_TIMEOUT_S <= 15
    assert s.DEFAULT_RADIUS_M == 500


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("DEFAULT_RADIUS_M", "750")
    monkeypatch.setenv("OVERPASS_TIMEOUT_S", "12.5")
    s = Settings(_env_file=None)
    assert s.DEFAULT_RADIUS_M == 750
    assert s.OVERPASS_TIMEOUT_S == 12.5


def test_setup_logging_writes_file(tmp_path):
    log_file = setup_logging(tmp_path / "logs", level="DEBUG", enqueue=False)
    try:
        logger.debug("buurt analysis started")
        assert log_file.exists()
        assert "buurt analysis started" in log_file.read_text(encoding="utf-8")
    finally:
        logger.remove()
        logger.add(sys.stderr)
