"""Closed categories that free-text profile fields are normalized into."""

import enum

from pydantic import BaseModel, ConfigDict


class TrainingLevel(str, enum.Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class ActivityLevel(str, enum.Enum):
    SEDENTARY = "Sedentary"
    LIGHTLY_ACTIVE = "Lightly Active"
    MODERATELY_ACTIVE = "Moderately Active"
    ACTIVE = "Active"
    VERY_ACTIVE = "Very Active"


class Gender(str, enum.Enum):
    MALE = "male"
    FEMALE = "female"


class Severity(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Intensity(str, enum.Enum):
    """How strongly a nutrition factor's deviation from 1.0 is applied."""

    LEVE = "Leve"
    INTERMEDIO = "Intermedio"
    ALTO = "Alto"


class FactorCategory(str, enum.Enum):
    """Rule categories recorded in the audit trail."""

    LEVEL = "level"
    AGE = "age"
    WEIGHT = "weight"
    GENDER = "gender"
    INJURY = "injury"


class Injury(BaseModel):
    """
    One parsed injury entry.

    ``raw`` is the original ``"<name>_<severity>"`` string, ``canonical`` the
    injury table key it resolved to (None means the generic multiplier).
    """

    model_config = ConfigDict(frozen=True)

    raw: str
    name: str
    canonical: str | None = None
    severity: Severity = Severity.MEDIUM
