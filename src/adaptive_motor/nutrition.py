"""
Nutrition target personalization.

- Activity level, first age, gender and first BMI compound into kcal /
  protein / carbs / fats factors.
- Intensity then rescales each factor's distance from 1.0:
    adjusted = 1 - (1 - factor) * scale   (Leve 0.3, Intermedio 1.0, Alto 1.5)
- Factors are clamped to nutrition-safe bounds.

Ingredient quantities are adjusted one line at a time from an aggregate
factor the caller already computed (e.g. ``factor_carbs`` for a rice line).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .categories import Gender, Intensity
from .config import SETTINGS
from .constants import DEFAULT_TABLES, NEUTRAL_MACROS, EngineTables, MacroMultiplier
from .models import (
    AthleteProfile,
    IngredientLine,
    IngredientQuantity,
    MacroTargets,
    NutritionFactors,
)
from .normalize import parse_intensity
from .numeric import clamp, parse_number, round_half_up, round_to_step

logger = logging.getLogger(__name__)


def _resolve_intensity(intensity: object) -> Intensity:
    return parse_intensity(intensity, default=SETTINGS.DEFAULT_INTENSITY)


def intensity_scale(intensity: object = None, tables: EngineTables = DEFAULT_TABLES) -> float:
    return tables.intensity_scale[_resolve_intensity(intensity).value]


def scale_toward_neutral(
    value: float, intensity: object = None, tables: EngineTables = DEFAULT_TABLES
) -> float:
    """Rescale how far ``value`` sits from 1.0 by the intensity scale."""
    return 1.0 - (1.0 - value) * intensity_scale(intensity, tables)


def _compound(total: MacroMultiplier, m: MacroMultiplier) -> MacroMultiplier:
    return MacroMultiplier(
        total.kcal * m.kcal,
        total.protein * m.protein,
        total.carbs * m.carbs,
        total.fats * m.fats,
    )


def _profile_multipliers(
    profile: AthleteProfile, tables: EngineTables
) -> Iterable[MacroMultiplier]:
    if profile.activity_level is not None:
        activity = tables.activity.get(profile.activity_level.value)
        if activity is not None:
            yield activity

    age = profile.ages[0] if profile.ages else 0
    age = age or tables.nutrition_default_age
    if age < tables.nutrition_youth_age:
        yield tables.nutrition_youth
    elif age > tables.nutrition_senior_age:
        yield tables.nutrition_senior

    genders = set(profile.genders)
    if Gender.MALE in genders:
        yield tables.nutrition_gender[Gender.MALE.value]
    if Gender.FEMALE in genders:
        yield tables.nutrition_gender[Gender.FEMALE.value]

    bmi = profile.bmis[0] if profile.bmis else 0
    bmi = bmi or tables.nutrition_default_bmi
    if bmi < tables.nutrition_underweight_bmi:
        yield tables.nutrition_underweight
    elif bmi >= tables.nutrition_obese_bmi:
        yield tables.nutrition_obese


def reconstruct_nutrition(
    profile: AthleteProfile | dict,
    intensity: Intensity | str | None = None,
    tables: EngineTables = DEFAULT_TABLES,
) -> NutritionFactors:
    """
    Compute the four cumulative nutrition factors for an athlete.

    ``target_percent`` is the kcal factor as a whole percentage of the
    baseline calories.
    """
    if not isinstance(profile, AthleteProfile):
        profile = AthleteProfile.model_validate(profile)

    total = NEUTRAL_MACROS
    for m in _profile_multipliers(profile, tables):
        total = _compound(total, m)

    scale = intensity_scale(intensity, tables)
    kcal = clamp(1.0 - (1.0 - total.kcal) * scale, tables.kcal_bounds)
    protein = clamp(1.0 - (1.0 - total.protein) * scale, tables.protein_bounds)
    carbs = clamp(1.0 - (1.0 - total.carbs) * scale, tables.carbs_bounds)
    fats = clamp(1.0 - (1.0 - total.fats) * scale, tables.fats_bounds)
    logger.debug(
        "Nutrition factors: raw=%s scale=%s -> kcal=%.3f protein=%.3f carbs=%.3f fats=%.3f",
        tuple(round(f, 4) for f in total),
        scale,
        kcal,
        protein,
        carbs,
        fats,
    )
    return NutritionFactors(
        factor_kcal=kcal,
        factor_protein=protein,
        factor_carbs=carbs,
        factor_fats=fats,
        target_percent=round_half_up(kcal * 100),
    )


def _unit_step(unidad: str, tables: EngineTables) -> float:
    u = (unidad or "").strip().lower()
    if u in tables.gram_units:
        return tables.gram_step
    if u in tables.count_units:
        return tables.count_step
    return tables.default_step


def adjust_ingredient_manual(
    cantidad: float | str | None,
    unidad: str,
    factor_total: float,
    intensity: Intensity | str | None = None,
    tables: EngineTables = DEFAULT_TABLES,
) -> IngredientQuantity:
    """
    Scale one ingredient quantity by an aggregate nutrition factor.

    Grams and millilitres round to multiples of 5, unit counts to quarters,
    anything else to one decimal. An unparseable quantity yields 0.
    """
    qty = parse_number(cantidad)
    if qty is None:
        logger.debug("Unparseable ingredient quantity %r %s, using 0", cantidad, unidad)
        return IngredientQuantity(cantidad=0, unidad=unidad)

    adjusted = scale_toward_neutral(factor_total, intensity, tables)
    final_qty = round_to_step(qty * adjusted, _unit_step(unidad, tables))
    return IngredientQuantity(cantidad=final_qty, unidad=unidad)


def adjust_meal(
    ingredients: Iterable[IngredientLine | dict],
    factor_total: float,
    intensity: Intensity | str | None = None,
    tables: EngineTables = DEFAULT_TABLES,
) -> list[IngredientLine]:
    """Adjust every line of one meal with the meal's shared aggregate factor."""
    adjusted: list[IngredientLine] = []
    for line in ingredients:
        if not isinstance(line, IngredientLine):
            line = IngredientLine.model_validate(line)
        qty = adjust_ingredient_manual(line.cantidad, line.unidad, factor_total, intensity, tables)
        adjusted.append(line.model_copy(update={"cantidad": qty.cantidad}))
    return adjusted


def scale_macro_targets(targets: MacroTargets | dict, factors: NutritionFactors) -> MacroTargets:
    """Apply nutrition factors to absolute daily targets, rounded to whole units."""
    if not isinstance(targets, MacroTargets):
        targets = MacroTargets.model_validate(targets)
    return MacroTargets(
        kcal=round_half_up(targets.kcal * factors.factor_kcal),
        protein_g=round_half_up(targets.protein_g * factors.factor_protein),
        carbs_g=round_half_up(targets.carbs_g * factors.factor_carbs),
        fats_g=round_half_up(targets.fats_g * factors.factor_fats),
    )
