import logging
import re

from .config import SETTINGS

# Audit entries "injury:<description>" up to the next ";" or end of line. A bare
# severity ("injury:high") carries no description and is left alone.
_AUDIT_INJURY_RE = re.compile(
    r"\binjury:(?!(?:low|medium|high)(?:;|$))[^;\n]*?(_(?:low|medium|high))?(?=;|$)",
    re.IGNORECASE | re.MULTILINE,
)
# "<name>_<severity>" injury tokens outside the audit format
_INJURY_RE = re.compile(r"[^\s,;:'\"()\[\]{}|]+_(low|medium|high)\b", re.IGNORECASE)


def _redact_audit_injury(match: re.Match) -> str:
    return f"injury:<REDACTED>{match.group(1) or ''}"


class HealthDataFilter(logging.Filter):
    """
    Logging filter that redacts athlete injury descriptions, keeping only the severity.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.args:
            try:
                message = record.getMessage()
            except (TypeError, ValueError):
                return True
            record.msg = message
            record.args = None
        if isinstance(record.msg, str):
            msg = _AUDIT_INJURY_RE.sub(_redact_audit_injury, record.msg)
            record.msg = _INJURY_RE.sub(r"<REDACTED>_\1", msg)
        return True


def setup_logging(level: int | str | None = None) -> None:
    """
    Set up root logger with a stream handler that redacts health data.
    """
    root = logging.getLogger()
    if root.handlers:
        return  # already configured
    root.setLevel(level if level is not None else SETTINGS.LOG_LEVEL)
    fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    ch.addFilter(HealthDataFilter())
    root.addHandler(ch)
