import io
import logging

import pytest

from StarChart import logconf
from StarChart.utils import Timer, default_logconf


@pytest.fixture
def restore_logging():
    names = ["", "StarChart.Test", "PIL.Image", "PIL.PngImagePlugin"]
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


@pytest.mark.unit
def test_read_config_accepts_json5(restore_logging):
    conf = io.StringIO(
        """
        {
            // comments and trailing commas are fine
            version: 1,
            disable_existing_loggers: false,
            loggers: {
                "StarChart.Test": {level: "ERROR"},
            },
        }
        """
    )
    logconf.read_config(conf)
    assert logging.getLogger("StarChart.Test").level == logging.ERROR


@pytest.mark.unit
def test_shipped_config(monkeypatch, restore_logging):
    applied = []
    # keep the root handlers pytest installed
    monkeypatch.setattr(logconf.logging.config, "dictConfig", applied.append)
    assert default_logconf.exists()
    logconf.configure_logging(default_logconf)
    (config,) = applied
    assert config["version"] == 1
    assert config["root"]["handlers"] == ["console"]
    assert config["loggers"]["StarChart.Sampling"]["level"] == "WARNING"
    assert logging.getLogger("PIL.Image").level == logging.WARNING


@pytest.mark.unit
def test_missing_config(tmp_path, restore_logging):
    with pytest.raises(FileNotFoundError):
        logconf.configure_logging(tmp_path / "missing.json")


@pytest.mark.unit
def test_basic_config_and_level(restore_logging):
    logconf.configure_logging()
    assert logging.getLogger().level == logging.INFO
    logconf.configure_logging(level=logging.DEBUG)
    assert logging.getLogger().level == logging.DEBUG


@pytest.mark.unit
def test_timer_logs_elapsed(caplog):
    caplog.set_level(logging.DEBUG, logger="StarChart.Test")
    with Timer("something", "StarChart.Test") as t:
        pass
    assert t.elapsed >= 0.0
    assert "something:" in caplog.text
