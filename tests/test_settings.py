import io
import json

from pokeduel.core.logging import Logger
from pokeduel.system.settings import Settings, SettingsData, DEFAULT_API_BASE


def test_defaults_when_file_missing(tmp_path):
    s = Settings.load(tmp_path / "none.json")
    assert s.data.api_base == DEFAULT_API_BASE
    assert s.data.request_timeout == 10.0
    assert s.data.max_candidates == 60
    assert s.data.menu_size == 12
    assert s.data.bot_pool_size == 10


def test_partial_file_is_backfilled_and_normalized(tmp_path):
    path = tmp_path / "s.json"
    path.write_text(json.dumps({"api_base": "http://localhost:8000/api/v2/", "log_level": "loud",
                                "bot_pool_size": 2, "unknown_key": 1}))
    s = Settings.load(path)
    assert s.data.api_base == "http://localhost:8000/api/v2"
    assert s.data.log_level == "WARN"
    assert s.data.bot_pool_size == 5
    assert s.data.text_delay == 0.4


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "s.json"
    path.write_text("{not json")
    s = Settings.load(path)
    assert s.data == SettingsData()


def test_save_round_trip_and_override(tmp_path):
    s = Settings.load(tmp_path / "s.json")
    s.override(text_delay=0.0, request_timeout=None, log_level="debug")
    assert s.data.text_delay == 0.0
    assert s.data.request_timeout == 10.0
    assert s.data.log_level == "DEBUG"
    s.save()
    assert Settings.load(s.path).data == s.data


def test_logger_threshold_and_format():
    buf = io.StringIO()
    log = Logger("INFO", stream=buf)
    log.debug("Hidden")
    log.info("Fetch", url="x")
    text = buf.getvalue()
    assert "Hidden" not in text
    assert "[INFO] Fetch url=x" in text
    log.set_level("ERROR")
    assert not log.is_enabled("WARN")
