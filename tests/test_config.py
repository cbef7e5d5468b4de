import logging

import pytest

from certalg.algorithms.catalog import is_enabled
from certalg.algorithms.constants import KeyAlgorithm
from certalg.config import AlgorithmSettings, get_settings, load_settings, reload_settings
from certalg.utils.logging import get_logger


def test_defaults():
    s = get_settings()
    assert s == AlgorithmSettings()
    assert s.gost3410_enabled and s.dstu4145_enabled and s.accept_legacy_digests
    assert get_settings() is s


def test_yaml_file(tmp_path):
    cfg = tmp_path / "certalg.yml"
    cfg.write_text("gost3410_enabled: false\nlog_level: DEBUG\n", encoding="utf-8")
    s = load_settings(str(cfg))
    assert s.gost3410_enabled is False
    assert s.dstu4145_enabled is True
    assert s.log_level == "DEBUG"


def test_config_env_points_at_file(monkeypatch, tmp_path):
    cfg = tmp_path / "other.yml"
    cfg.write_text("dstu4145_enabled: false\n", encoding="utf-8")
    monkeypatch.setenv("CERTALG_CONFIG", str(cfg))
    reload_settings()
    assert get_settings().dstu4145_enabled is False
    assert not is_enabled(KeyAlgorithm.DSTU4145)
    assert is_enabled(KeyAlgorithm.ECGOST3410)


def test_env_overrides_file(monkeypatch, tmp_path):
    cfg = tmp_path / "certalg.yml"
    cfg.write_text("accept_legacy_digests: false\n", encoding="utf-8")
    monkeypatch.setenv("CERTALG_ACCEPT_LEGACY_DIGESTS", "yes")
    assert load_settings(str(cfg)).accept_legacy_digests is True
    monkeypatch.setenv("CERTALG_ACCEPT_LEGACY_DIGESTS", "off")
    assert load_settings(str(cfg)).accept_legacy_digests is False


def test_missing_and_empty_files(tmp_path):
    assert load_settings(str(tmp_path / "nope.yml")) == AlgorithmSettings()
    empty = tmp_path / "empty.yml"
    empty.write_text("", encoding="utf-8")
    assert load_settings(str(empty)) == AlgorithmSettings()


def test_non_mapping_file_rejected(tmp_path):
    bad = tmp_path / "bad.yml"
    bad.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(str(bad))


def test_unsupported_is_never_enabled():
    assert not is_enabled(KeyAlgorithm.UNSUPPORTED)
    assert is_enabled(KeyAlgorithm.RSA)


def test_log_level_is_normalised():
    assert AlgorithmSettings(log_level=" debug ").log_level == "DEBUG"
    assert AlgorithmSettings(log_level="warning").log_level == "WARNING"
    assert AlgorithmSettings(log_level="verbose").log_level == "INFO"
    assert AlgorithmSettings(log_level=None).log_level == "INFO"


def test_bad_log_level_env_does_not_break_loggers(monkeypatch):
    monkeypatch.setenv("CERTALG_LOG_LEVEL", "verbose")
    s = reload_settings()
    assert s.log_level == "INFO"
    assert get_logger().level == logging.INFO


def test_reload_reapplies_log_level(monkeypatch):
    log = get_logger()
    monkeypatch.setenv("CERTALG_LOG_LEVEL", "DEBUG")
    reload_settings()
    assert log.level == logging.DEBUG
    monkeypatch.setenv("CERTALG_LOG_LEVEL", "error")
    reload_settings()
    assert log.level == logging.ERROR
