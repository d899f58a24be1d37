"""Test plain-text rendering of engine results."""

from adaptive_motor.models import AthleteProfile, Baseline
from adaptive_motor.nutrition import reconstruct_nutrition
from adaptive_motor.prescription import reconstruct_prescription
from adaptive_motor.report import render_adaptive_result, render_nutrition_factors


def test_render_adaptive_result():
    profile = AthleteProfile(
        training_level="Advanced", ages=[40], genders=["male"], injuries=["Rodilla_high"]
    )
    result = reconstruct_prescription(Baseline(sets=4, series=4, reps=8, load_kg=80), profile)

    text = render_adaptive_result(result)
    assert "Phase 1 — Level" in text
    assert "Phase 3 — Injury safety" in text
    assert "injury Rodilla_high: load × 0.68, series × 0.77, reps × 0.77" in text
    assert "(capped)" not in text
    assert text.endswith("Final: 4x7 (4 series) @ 60kg")


def test_render_capped_totals():
    profile = AthleteProfile(training_level="Beginner", injuries=["Hernia_high", "Lumbar_high"])
    result = reconstruct_prescription(Baseline(sets=3, reps=10, load_kg=40), profile)
    assert "load × 0.50 (capped)" in render_adaptive_result(result)


def test_render_nutrition_factors():
    factors = reconstruct_nutrition(AthleteProfile(activity_level="Very Active"))
    text = render_nutrition_factors(factors)
    assert text.startswith("Target: 120% of base kcal")
