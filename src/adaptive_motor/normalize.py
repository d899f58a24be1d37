"""
Normalization of free-text profile fields into closed categories.

Coaches and athletes fill these fields in Spanish or English, so matching is
case-insensitive and substring based. Nothing here raises: unmatched input
falls back to a safe default.
"""

from __future__ import annotations

import logging

from .categories import ActivityLevel, Gender, Injury, Intensity, Severity, TrainingLevel
from .constants import DEFAULT_TABLES, EngineTables

logger = logging.getLogger(__name__)

_BEGINNER_WORDS = ("principiante", "beginner", "bajo")
_ADVANCED_WORDS = ("avanzado", "advanced", "alto")
# Female synonyms are tested first: "female" contains "male".
_FEMALE_WORDS = ("femenino", "mujer", "female")
_MALE_WORDS = ("masculino", "hombre", "male")

_ACTIVITY_NAMES = {
    "sedentary": ActivityLevel.SEDENTARY,
    "sedentario": ActivityLevel.SEDENTARY,
    "lightly active": ActivityLevel.LIGHTLY_ACTIVE,
    "ligeramente activo": ActivityLevel.LIGHTLY_ACTIVE,
    "moderately active": ActivityLevel.MODERATELY_ACTIVE,
    "moderadamente activo": ActivityLevel.MODERATELY_ACTIVE,
    "active": ActivityLevel.ACTIVE,
    "activo": ActivityLevel.ACTIVE,
    "very active": ActivityLevel.VERY_ACTIVE,
    "muy activo": ActivityLevel.VERY_ACTIVE,
}

_INTENSITY_NAMES = {
    "leve": Intensity.LEVE,
    "baja": Intensity.LEVE,
    "low": Intensity.LEVE,
    "intermedio": Intensity.INTERMEDIO,
    "media": Intensity.INTERMEDIO,
    "medium": Intensity.INTERMEDIO,
    "alto": Intensity.ALTO,
    "alta": Intensity.ALTO,
    "high": Intensity.ALTO,
}

# Applied in order, a later match overrides an earlier one ("hernia lumbar" -> Hernia Discal).
_INJURY_SUBSTRINGS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("lumbar", "espalda baja"), "Lumbalgia"),
    (("hernia",), "Hernia Discal"),
    (("rodilla",), "Rodilla"),
    (("hombro",), "Hombro"),
)


def _text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    # str-enums format as their value
    return str(getattr(value, "value", value))


def parse_training_level(value: object) -> TrainingLevel:
    text = _text(value).lower()
    if any(word in text for word in _BEGINNER_WORDS):
        return TrainingLevel.BEGINNER
    if any(word in text for word in _ADVANCED_WORDS):
        return TrainingLevel.ADVANCED
    if text and "intermedi" not in text:
        logger.debug("Unrecognized training level %r, using Intermediate", value)
    return TrainingLevel.INTERMEDIATE


def parse_gender(value: object) -> Gender:
    text = _text(value).lower()
    if any(word in text for word in _FEMALE_WORDS):
        return Gender.FEMALE
    if any(word in text for word in _MALE_WORDS):
        return Gender.MALE
    logger.debug("Unrecognized gender %r, using male", value)
    return Gender.MALE


def parse_activity_level(value: object) -> ActivityLevel | None:
    text = " ".join(_text(value).lower().replace("_", " ").split())
    if not text:
        return None
    level = _ACTIVITY_NAMES.get(text)
    if level is None:
        logger.debug("Unrecognized activity level %r, no activity factor", value)
    return level


def parse_intensity(value: object, default: Intensity = Intensity.INTERMEDIO) -> Intensity:
    text = _text(value).strip().lower()
    if not text:
        return default
    intensity = _INTENSITY_NAMES.get(text)
    if intensity is None:
        logger.debug("Unrecognized intensity %r, using %s", value, default.value)
        return default
    return intensity


def parse_severity(value: object) -> Severity:
    text = _text(value).strip().lower()
    if text == Severity.LOW.value:
        return Severity.LOW
    if text == Severity.HIGH.value:
        return Severity.HIGH
    return Severity.MEDIUM


def canonical_injury(name: str, tables: EngineTables = DEFAULT_TABLES) -> str | None:
    """Map a raw injury name onto a key of the injury table, or None."""
    lowered = name.strip().lower()
    canonical = None
    for key in tables.injuries:
        if key.lower() == lowered:
            canonical = key
            break
    for words, key in _INJURY_SUBSTRINGS:
        if any(word in lowered for word in words):
            canonical = key
    return canonical


def injury_severity(raw: str) -> Severity:
    """Severity suffix of a ``"<name>_<severity>"`` string, medium when absent."""
    parts = raw.split("_")
    return parse_severity(parts[1] if len(parts) > 1 else None)


def parse_injury(value: object, tables: EngineTables = DEFAULT_TABLES) -> Injury:
    """
    Parse ``"<name>_<severity>"`` into an :class:`Injury`.

    Severity defaults to medium when missing or unknown; the name keeps its
    raw spelling and is matched against the injury table separately.
    """
    raw = _text(value)
    name = raw.split("_")[0]
    severity = injury_severity(raw)
    canonical = canonical_injury(name, tables)
    if canonical is None:
        # name left out: injury descriptions are health data
        logger.debug("Injury without a table entry (%s), using generic factor", severity.value)
    return Injury(raw=raw, name=name, canonical=canonical, severity=severity)
