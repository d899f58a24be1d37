"""Adaptive Motor - deterministic exercise and nutrition prescription personalization."""

import importlib.metadata

from .categories import (
    ActivityLevel,
    FactorCategory,
    Gender,
    Injury,
    Intensity,
    Severity,
    TrainingLevel,
)
from .constants import DEFAULT_TABLES, EngineTables
from .logging_setup import HealthDataFilter, setup_logging
from .models import (
    AdaptiveResult,
    AthleteProfile,
    Baseline,
    CapFlags,
    FactorDetail,
    FinalPrescription,
    IngredientLine,
    IngredientQuantity,
    MacroTargets,
    NutritionFactors,
)
from .nutrition import (
    adjust_ingredient_manual,
    adjust_meal,
    reconstruct_nutrition,
    scale_macro_targets,
    scale_toward_neutral,
)
from .prescription import reconstruct_prescription
from .report import render_adaptive_result, render_nutrition_factors

try:
    __version__ = importlib.metadata.version("adaptive-motor")
except importlib.metadata.PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "DEFAULT_TABLES",
    "ActivityLevel",
    "AdaptiveResult",
    "AthleteProfile",
    "Baseline",
    "CapFlags",
    "EngineTables",
    "FactorCategory",
    "FactorDetail",
    "FinalPrescription",
    "Gender",
    "HealthDataFilter",
    "IngredientLine",
    "IngredientQuantity",
    "Injury",
    "Intensity",
    "MacroTargets",
    "NutritionFactors",
    "Severity",
    "TrainingLevel",
    "adjust_ingredient_manual",
    "adjust_meal",
    "reconstruct_nutrition",
    "reconstruct_prescription",
    "render_adaptive_result",
    "render_nutrition_factors",
    "scale_macro_targets",
    "scale_toward_neutral",
    "setup_logging",
]
