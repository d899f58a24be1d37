"""
Plain-text rendering of engine results for logs and coach review.
"""

from .models import AdaptiveResult, NutritionFactors

_PHASE_TITLES = {1: "Level", 2: "Characteristics", 3: "Injury safety"}


def _fmt(value: float) -> str:
    return f"{value:.2f}"


def render_adaptive_result(result: AdaptiveResult) -> str:
    """Render the audit trail, totals and final prescription of one exercise."""
    base = result.base
    lines = [
        f"Base: {base.sets}x{base.reps} ({base.effective_series} series) @ {base.load_kg}kg",
    ]

    current_phase = None
    for detail in result.applied_factors:
        if detail.phase != current_phase:
            current_phase = detail.phase
            lines.append(f"Phase {detail.phase} — {_PHASE_TITLES[detail.phase]}")
        marker = "" if detail.is_active else " (inactive)"
        lines.append(
            f"  {detail.category.value} {detail.name}: "
            f"load × {_fmt(detail.peso)}, series × {_fmt(detail.series)}, "
            f"reps × {_fmt(detail.reps)}{marker}"
        )

    capped = result.was_capped
    totals = (
        f"Totals: load × {_fmt(result.factor_peso_total)}"
        f"{' (capped)' if capped.peso else ''}, "
        f"series × {_fmt(result.factor_series_total)}"
        f"{' (capped)' if capped.series else ''}, "
        f"reps × {_fmt(result.factor_reps_total)}"
    )
    lines.append(totals)

    final = result.final
    lines.append(
        f"Final: {final.sets}x{final.reps} ({final.series} series) @ {final.load:g}kg"
    )
    return "\n".join(lines)


def render_nutrition_factors(factors: NutritionFactors) -> str:
    return (
        f"Target: {factors.target_percent}% of base kcal "
        f"(kcal × {_fmt(factors.factor_kcal)}, protein × {_fmt(factors.factor_protein)}, "
        f"carbs × {_fmt(factors.factor_carbs)}, fats × {_fmt(factors.factor_fats)})"
    )
