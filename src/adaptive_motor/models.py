"""
Input and output models of the adaptive prescription engine.

Inputs normalize their fields in ``mode="before"`` validators so that
constructing a profile or baseline from stored data never fails: unknown
text falls back to a default category and unparseable numbers are dropped
or zeroed.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .categories import ActivityLevel, FactorCategory, Gender, Injury, TrainingLevel
from .normalize import parse_activity_level, parse_gender, parse_injury, parse_training_level
from .numeric import parse_number


def _as_sequence(value: Any) -> tuple[Any, ...]:
    if value is None:
        return ()
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(value)
    return (value,)


def _int_or_float(value: Any) -> int | float:
    number = parse_number(value)
    if number is None:
        return 0
    return int(number) if number.is_integer() else number


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class AthleteProfile(_FrozenModel):
    """Biometric and training attributes of one athlete (or household/cohort)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    training_level: TrainingLevel = TrainingLevel.INTERMEDIATE
    activity_level: ActivityLevel | None = None
    ages: tuple[int, ...] = ()
    genders: tuple[Gender, ...] = ()
    bmis: tuple[float, ...] = ()
    weight: float | None = None
    injuries: tuple[Injury, ...] = ()

    @field_validator("training_level", mode="before")
    @classmethod
    def _normalize_training_level(cls, v: Any) -> TrainingLevel:
        return parse_training_level(v)

    @field_validator("activity_level", mode="before")
    @classmethod
    def _normalize_activity_level(cls, v: Any) -> ActivityLevel | None:
        return parse_activity_level(v)

    @field_validator("ages", mode="before")
    @classmethod
    def _normalize_ages(cls, v: Any) -> tuple[int, ...]:
        numbers = (parse_number(age) for age in _as_sequence(v))
        return tuple(int(n) for n in numbers if n is not None)

    @field_validator("genders", mode="before")
    @classmethod
    def _normalize_genders(cls, v: Any) -> tuple[Gender, ...]:
        return tuple(parse_gender(g) for g in _as_sequence(v))

    @field_validator("bmis", mode="before")
    @classmethod
    def _normalize_bmis(cls, v: Any) -> tuple[float, ...]:
        numbers = (parse_number(bmi) for bmi in _as_sequence(v))
        return tuple(n for n in numbers if n is not None)

    @field_validator("weight", mode="before")
    @classmethod
    def _normalize_weight(cls, v: Any) -> float | None:
        return parse_number(v)

    @field_validator("injuries", mode="before")
    @classmethod
    def _normalize_injuries(cls, v: Any) -> tuple[Injury, ...]:
        return tuple(
            inj if isinstance(inj, Injury) else parse_injury(inj) for inj in _as_sequence(v)
        )


class Baseline(_FrozenModel):
    """Unadjusted prescription for one exercise. ``series`` falls back to ``sets``."""

    sets: int | float = 0
    series: int | float | None = None
    reps: int | float = 0
    load_kg: int | float = 0

    @field_validator("sets", "reps", "load_kg", mode="before")
    @classmethod
    def _coerce_number(cls, v: Any) -> int | float:
        return _int_or_float(v)

    @field_validator("series", mode="before")
    @classmethod
    def _coerce_series(cls, v: Any) -> int | float | None:
        if v is None:
            return None
        return _int_or_float(v)

    @property
    def effective_series(self) -> int | float:
        # 0 counts as missing
        return self.series or self.sets


class FactorDetail(_FrozenModel):
    """Audit record of one rule that contributed to the cumulative factors."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    phase: Literal[1, 2, 3]
    category: FactorCategory
    name: str
    peso: float
    series: float
    reps: float
    is_active: bool = True


class CapFlags(_FrozenModel):
    peso: bool = False
    series: bool = False
    reps: bool = False


class FinalPrescription(_FrozenModel):
    sets: int
    series: int
    reps: int
    load: float


class AdaptiveResult(_FrozenModel):
    base: Baseline
    applied_factors: tuple[FactorDetail, ...] = Field(default=(), alias="appliedFactors")
    factor_peso_total: float
    factor_series_total: float
    factor_reps_total: float
    was_capped: CapFlags = Field(default_factory=CapFlags, alias="wasCapped")
    final: FinalPrescription


class NutritionFactors(_FrozenModel):
    factor_kcal: float = Field(alias="factorKcal")
    factor_protein: float = Field(alias="factorProtein")
    factor_carbs: float = Field(alias="factorCarbs")
    factor_fats: float = Field(alias="factorFats")
    target_percent: int = Field(alias="targetPercent")


class IngredientQuantity(_FrozenModel):
    cantidad: float
    unidad: str


class IngredientLine(_FrozenModel):
    """One ingredient line of a meal as stored by the coach."""

    nombre: str = ""
    cantidad: float | str | None = None
    unidad: str = ""


class MacroTargets(_FrozenModel):
    """Daily nutrition target in absolute units."""

    kcal: float = 0
    protein_g: float = 0
    carbs_g: float = 0
    fats_g: float = 0
