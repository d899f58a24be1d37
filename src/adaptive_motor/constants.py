"""Lookup tables for the adaptive prescription engine.

All tables are read-only and live on a single frozen :class:`EngineTables`
instance. Bracket tables are ordered ``(upper_bound, multiplier)`` pairs: the
first bracket whose bound matches wins, ``None`` marks the open-ended top
bracket.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, NamedTuple


class Multiplier(NamedTuple):
    """Exercise multiplier for load (``peso``), series and reps."""

    peso: float
    series: float
    reps: float


class MacroMultiplier(NamedTuple):
    """Nutrition multiplier for calories and the three macronutrients."""

    kcal: float
    protein: float
    carbs: float
    fats: float


class Bounds(NamedTuple):
    lower: float
    upper: float


NEUTRAL = Multiplier(1.0, 1.0, 1.0)
NEUTRAL_MACROS = MacroMultiplier(1.0, 1.0, 1.0, 1.0)

Bracket = tuple[float | None, Multiplier]


def _frozen(d: dict) -> Mapping:
    return MappingProxyType(d)


@dataclass(frozen=True)
class EngineTables:
    # Phase 1
    level: Mapping[str, Multiplier] = field(
        default_factory=lambda: _frozen(
            {
                "Beginner": Multiplier(0.85, 0.80, 0.80),
                "Intermediate": Multiplier(1.00, 1.00, 1.00),
                "Advanced": Multiplier(1.10, 1.20, 1.20),
            }
        )
    )

    # Phase 2, upper bounds inclusive except the first (strict "<").
    age_brackets: tuple[Bracket, ...] = (
        (18, Multiplier(0.80, 0.85, 0.90)),
        (25, Multiplier(1.00, 1.00, 1.00)),
        (35, Multiplier(1.05, 1.00, 1.00)),
        (45, Multiplier(1.00, 0.95, 0.95)),
        (55, Multiplier(0.90, 0.90, 0.95)),
        (65, Multiplier(0.85, 0.85, 0.90)),
        (None, Multiplier(0.75, 0.80, 0.85)),
    )
    weight_brackets: tuple[Bracket, ...] = (
        (50, Multiplier(0.80, 1.00, 1.00)),
        (65, Multiplier(0.90, 1.00, 1.00)),
        (80, Multiplier(1.00, 1.00, 1.00)),
        (95, Multiplier(1.05, 1.00, 1.00)),
        (110, Multiplier(1.10, 0.95, 0.95)),
        (None, Multiplier(1.15, 0.90, 0.90)),
    )
    # Not consulted by the exercise pipeline, kept for parity with the rule catalog.
    bmi_brackets: tuple[Bracket, ...] = (
        (18.5, Multiplier(0.90, 1.00, 1.00)),
        (24.9, Multiplier(1.00, 1.00, 1.00)),
        (29.9, Multiplier(1.00, 0.95, 0.95)),
        (None, Multiplier(0.85, 0.90, 0.90)),
    )
    gender: Mapping[str, Multiplier] = field(
        default_factory=lambda: _frozen(
            {
                "male": Multiplier(1.00, 1.00, 1.00),
                "female": Multiplier(0.90, 1.00, 1.00),
            }
        )
    )

    # Phase 3
    injuries: Mapping[str, Multiplier] = field(
        default_factory=lambda: _frozen(
            {
                "Lumbalgia": Multiplier(0.80, 0.90, 0.90),
                "Hernia Discal": Multiplier(0.75, 0.85, 0.85),
                "Escoliosis": Multiplier(0.85, 0.95, 0.95),
                "Rodilla": Multiplier(0.85, 0.90, 0.90),
                "Hombro": Multiplier(0.85, 0.90, 0.90),
                "Cervicales": Multiplier(0.85, 0.90, 0.90),
                "Muñeca / Mano": Multiplier(0.90, 0.95, 0.95),
                "Tobillo": Multiplier(0.90, 0.95, 0.95),
                "Cadera": Multiplier(0.85, 0.90, 0.90),
                "Tendinitis": Multiplier(0.85, 0.95, 0.95),
            }
        )
    )
    injury_generic: Multiplier = Multiplier(0.85, 0.90, 0.90)
    injury_low: Multiplier = Multiplier(0.90, 0.95, 0.95)
    injury_high_peso_scale: float = 0.80
    injury_high_series_scale: float = 0.85

    # Exercise safety clamps; reps has no clamp.
    peso_bounds: Bounds = Bounds(0.50, 1.45)
    series_bounds: Bounds = Bounds(0.60, 1.70)
    load_step: float = 2.5

    # Nutrition
    activity: Mapping[str, MacroMultiplier] = field(
        default_factory=lambda: _frozen(
            {
                "Sedentary": MacroMultiplier(0.85, 1.00, 0.85, 0.90),
                "Lightly Active": MacroMultiplier(0.95, 1.00, 0.95, 0.95),
                "Moderately Active": MacroMultiplier(1.00, 1.00, 1.00, 1.00),
                "Active": MacroMultiplier(1.10, 1.05, 1.10, 1.05),
                "Very Active": MacroMultiplier(1.20, 1.10, 1.20, 1.05),
            }
        )
    )
    nutrition_default_age: int = 30
    nutrition_youth_age: int = 18
    nutrition_senior_age: int = 50
    nutrition_youth: MacroMultiplier = MacroMultiplier(1.10, 1.05, 1.10, 1.05)
    nutrition_senior: MacroMultiplier = MacroMultiplier(0.95, 1.05, 0.95, 1.00)
    nutrition_gender: Mapping[str, MacroMultiplier] = field(
        default_factory=lambda: _frozen(
            {
                "male": MacroMultiplier(1.05, 1.00, 1.05, 1.00),
                "female": MacroMultiplier(0.90, 1.00, 0.90, 1.00),
            }
        )
    )
    nutrition_default_bmi: float = 24.0
    nutrition_underweight_bmi: float = 18.5
    nutrition_obese_bmi: float = 30.0
    nutrition_underweight: MacroMultiplier = MacroMultiplier(1.15, 1.05, 1.15, 1.05)
    nutrition_obese: MacroMultiplier = MacroMultiplier(0.90, 1.05, 0.85, 0.95)
    intensity_scale: Mapping[str, float] = field(
        default_factory=lambda: _frozen({"Leve": 0.3, "Intermedio": 1.0, "Alto": 1.5})
    )
    kcal_bounds: Bounds = Bounds(0.75, 1.30)
    protein_bounds: Bounds = Bounds(0.85, 1.20)
    carbs_bounds: Bounds = Bounds(0.70, 1.30)
    fats_bounds: Bounds = Bounds(0.75, 1.25)

    # Ingredient rounding
    gram_units: frozenset[str] = frozenset({"g", "gr", "gramos", "ml"})
    count_units: frozenset[str] = frozenset({"un", "u", "unidad", "unidades"})
    gram_step: float = 5.0
    count_step: float = 0.25
    default_step: float = 0.1


def lookup_bracket(brackets: tuple[Bracket, ...], value: float) -> Multiplier:
    """Return the multiplier of the bracket ``value`` falls into.

    The first bracket is exclusive (``value < bound``), the following ones
    are inclusive (``value <= bound``).
    """
    for idx, (bound, mult) in enumerate(brackets):
        if bound is None:
            return mult
        if value < bound or (idx > 0 and value <= bound):
            return mult
    return brackets[-1][1]


DEFAULT_TABLES = EngineTables()
