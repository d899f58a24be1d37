from adaptive_motor.categories import Intensity
from adaptive_motor.config import Config, _bool


def test_bool_helper(monkeypatch) -> None:
    monkeypatch.setenv("ADAPTIVE_FLAG", "Yes")
    assert _bool("ADAPTIVE_FLAG", False)
    monkeypatch.setenv("ADAPTIVE_FLAG", "off")
    assert not _bool("ADAPTIVE_FLAG", True)
    monkeypatch.delenv("ADAPTIVE_FLAG")
    assert _bool("ADAPTIVE_FLAG", True)


def test_config_defaults(monkeypatch) -> None:
    for name in ("ADAPTIVE_LOG_LEVEL", "ADAPTIVE_DEFAULT_INTENSITY", "ADAPTIVE_LOG_AUDIT_TRAIL"):
        monkeypatch.delenv(name, raising=False)
    config = Config(_env_file=None)
    assert config.LOG_LEVEL == "INFO"
    assert config.DEFAULT_INTENSITY is Intensity.INTERMEDIO
    assert config.LOG_AUDIT_TRAIL is False


def test_config_from_env(monkeypatch) -> None:
    monkeypatch.setenv("ADAPTIVE_LOG_LEVEL", "debug")
    monkeypatch.setenv("ADAPTIVE_DEFAULT_INTENSITY", "alta")
    monkeypatch.setenv("ADAPTIVE_LOG_AUDIT_TRAIL", "true")
    config = Config(_env_file=None)
    assert config.LOG_LEVEL == "DEBUG"
    assert config.DEFAULT_INTENSITY is Intensity.ALTO
    assert config.LOG_AUDIT_TRAIL is True
