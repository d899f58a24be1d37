"""
Tests for logging setup and health data filtering.
"""

import logging

from adaptive_motor import HealthDataFilter, setup_logging


def _record(msg, args=()):
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=args,
        exc_info=None,
    )


def test_health_data_filter_redacts_injuries():
    """Injury names are redacted, severities are kept."""
    filter_obj = HealthDataFilter()
    record = _record("Prescription audit: %s", ("level:Advanced; injury:Rodilla_high",))

    assert filter_obj.filter(record) is True
    assert "Rodilla" not in record.msg
    assert "injury:<REDACTED>_high" in record.msg
    assert record.args is None


def test_health_data_filter_normal_message():
    """Messages without injuries pass through unchanged."""
    filter_obj = HealthDataFilter()
    record = _record("Nutrition factors: kcal=0.920")
    original_msg = record.msg

    assert filter_obj.filter(record) is True
    assert record.msg == original_msg


def test_setup_logging_installs_filtered_handler(monkeypatch):
    """setup_logging configures the root logger once."""
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging("DEBUG")
    setup_logging("DEBUG")

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    handler = root.handlers[0]
    assert any(isinstance(f, HealthDataFilter) for f in handler.filters)


def test_health_data_filter_redacts_multi_word_and_bare_injuries():
    """Whole audit descriptions are redacted, with or without a severity."""
    filter_obj = HealthDataFilter()
    record = _record(
        "Prescription audit: %s",
        ("level:Intermediate; injury:Hernia Discal_high; injury:Codo; injury:dolor de rodilla_low",),
    )

    assert filter_obj.filter(record) is True
    for leaked in ("Hernia", "Discal", "Codo", "dolor", "rodilla"):
        assert leaked not in record.msg
    assert record.msg == (
        "Prescription audit: level:Intermediate; injury:<REDACTED>_high; "
        "injury:<REDACTED>; injury:<REDACTED>_low"
    )


def test_health_data_filter_keeps_bare_severity():
    """Severity-only audit entries carry no description and stay as they are."""
    filter_obj = HealthDataFilter()
    record = _record("Prescription audit: injury:high; injury:medium")

    assert filter_obj.filter(record) is True
    assert record.msg == "Prescription audit: injury:high; injury:medium"


def test_audit_trail_is_redacted_end_to_end(monkeypatch, caplog):
    """Audit logging of a capped prescription never shows injury names."""
    from adaptive_motor.config import SETTINGS
    from adaptive_motor.models import AthleteProfile, Baseline
    from adaptive_motor.prescription import reconstruct_prescription

    monkeypatch.setattr(SETTINGS, "LOG_AUDIT_TRAIL", True)
    caplog.handler.addFilter(HealthDataFilter())
    profile = AthleteProfile(
        training_level="Beginner",
        injuries=["Hernia Discal_high", "Codo", "dolor de rodilla_low"],
    )
    with caplog.at_level(logging.DEBUG, logger="adaptive_motor"):
        result = reconstruct_prescription(Baseline(sets=3, reps=10, load_kg=60), profile)

    assert result.was_capped.peso
    for leaked in ("Hernia", "Codo", "dolor", "rodilla"):
        assert leaked not in caplog.text
    assert "injury:high; injury:medium; injury:low" in caplog.text


def test_unmatched_injury_debug_log_omits_name(caplog):
    from adaptive_motor.normalize import parse_injury

    with caplog.at_level(logging.DEBUG, logger="adaptive_motor.normalize"):
        parse_injury("Codo izquierdo_high")

    assert "Codo" not in caplog.text
    assert "generic factor" in caplog.text
