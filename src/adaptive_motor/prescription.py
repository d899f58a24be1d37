"""
Exercise prescription personalization.

Three ordered phases compound into load (``peso``), series and reps factors:

1. training level
2. athlete characteristics (each age, body weight, each gender)
3. injury safety (each injury, scaled by severity)

Load and series factors are clamped afterwards; the reps factor is not.
Every contributing rule leaves a :class:`FactorDetail` in the audit trail.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import NamedTuple

from .categories import FactorCategory, Gender, Injury, Severity
from .config import SETTINGS
from .constants import DEFAULT_TABLES, NEUTRAL, EngineTables, Multiplier, lookup_bracket
from .models import (
    AdaptiveResult,
    AthleteProfile,
    Baseline,
    CapFlags,
    FactorDetail,
    FinalPrescription,
)
from .normalize import injury_severity
from .numeric import clamp, round_half_up, round_places, round_to_step

logger = logging.getLogger(__name__)

MASTER_RULE_ID = 0
_UNSPECIFIED_AGE = 30


class _Totals(NamedTuple):
    peso: float
    series: float
    reps: float
    trail: tuple[FactorDetail, ...]


def _apply(totals: _Totals, detail: FactorDetail) -> _Totals:
    return _Totals(
        totals.peso * detail.peso,
        totals.series * detail.series,
        totals.reps * detail.reps,
        totals.trail + (detail,),
    )


def _detail(
    phase: int, category: FactorCategory, name: str, mult: Multiplier, active: bool = True
) -> FactorDetail:
    return FactorDetail(
        phase=phase,
        category=category,
        name=name,
        peso=mult.peso,
        series=mult.series,
        reps=mult.reps,
        is_active=active,
    )


def is_rule_active(rule_ids: Iterable[int] | None, category: FactorCategory, value: str) -> bool:
    """
    Whether a rule of ``category`` matching ``value`` applies.

    Gating by rule id is not defined yet: every rule applies, in master mode
    (``0`` among the ids), with no ids, and with any other selection.
    """
    return True


def injury_multiplier(injury: Injury, tables: EngineTables = DEFAULT_TABLES) -> Multiplier:
    """Severity-specific multiplier for one injury."""
    if injury.severity is Severity.LOW:
        return tables.injury_low
    key = injury.canonical
    base = tables.injuries.get(key, tables.injury_generic) if key else tables.injury_generic
    if injury.severity is Severity.HIGH:
        series = round_places(base.series * tables.injury_high_series_scale)
        return Multiplier(
            peso=round_places(base.peso * tables.injury_high_peso_scale),
            series=series,
            reps=series,
        )
    return base


def _plain_number(value: float) -> int | float:
    return int(value) if value.is_integer() else value


def _audit_label(detail: FactorDetail) -> str:
    # injuries are logged by severity only
    if detail.category is FactorCategory.INJURY:
        return f"{detail.category.value}:{injury_severity(detail.name).value}"
    return f"{detail.category.value}:{detail.name}"


def _level_phase(
    totals: _Totals, profile: AthleteProfile, rule_ids, tables: EngineTables
) -> _Totals:
    level = profile.training_level
    if not is_rule_active(rule_ids, FactorCategory.LEVEL, level.value):
        return totals
    mult = tables.level.get(level.value, NEUTRAL)
    return _apply(totals, _detail(1, FactorCategory.LEVEL, level.value, mult))


def _characteristics_phase(
    totals: _Totals, profile: AthleteProfile, rule_ids, tables: EngineTables
) -> _Totals:
    ages = profile.ages
    for age in ages:
        if age == _UNSPECIFIED_AGE and len(ages) == 1:
            continue
        if not is_rule_active(rule_ids, FactorCategory.AGE, str(age)):
            continue
        mult = lookup_bracket(tables.age_brackets, age)
        totals = _apply(totals, _detail(2, FactorCategory.AGE, f"{age} años", mult))

    weight = profile.weight
    if weight and weight > 0 and is_rule_active(rule_ids, FactorCategory.WEIGHT, str(weight)):
        mult = lookup_bracket(tables.weight_brackets, weight)
        name = f"{_plain_number(weight)}kg"
        totals = _apply(totals, _detail(2, FactorCategory.WEIGHT, name, mult))

    for gender in profile.genders:
        if not is_rule_active(rule_ids, FactorCategory.GENDER, gender.value):
            continue
        mult = tables.gender.get(gender.value, NEUTRAL)
        name = "H" if gender is Gender.MALE else "M"
        totals = _apply(totals, _detail(2, FactorCategory.GENDER, name, mult))
    return totals


def _injury_phase(
    totals: _Totals, profile: AthleteProfile, rule_ids, tables: EngineTables
) -> _Totals:
    for injury in profile.injuries:
        if not is_rule_active(rule_ids, FactorCategory.INJURY, injury.name):
            continue
        mult = injury_multiplier(injury, tables)
        totals = _apply(totals, _detail(3, FactorCategory.INJURY, injury.raw, mult))
    return totals


def reconstruct_prescription(
    base: Baseline | dict,
    profile: AthleteProfile | dict,
    rule_ids: Iterable[int] | None = None,
    tables: EngineTables = DEFAULT_TABLES,
) -> AdaptiveResult:
    """
    Personalize one exercise baseline for an athlete.

    ``rule_ids`` selects the rule catalog entries attached to the activity;
    ``0`` means master mode. All rules currently apply regardless of the
    selection, see :func:`is_rule_active`.
    """
    if not isinstance(base, Baseline):
        base = Baseline.model_validate(base)
    if not isinstance(profile, AthleteProfile):
        profile = AthleteProfile.model_validate(profile)
    rule_ids = tuple(rule_ids) if rule_ids is not None else None
    logger.debug(
        "Reconstructing prescription: base=%s level=%s rule_ids=%s master=%s",
        base.model_dump(),
        profile.training_level.value,
        rule_ids,
        bool(rule_ids and MASTER_RULE_ID in rule_ids),
    )

    totals = _Totals(1.0, 1.0, 1.0, ())
    totals = _level_phase(totals, profile, rule_ids, tables)
    totals = _characteristics_phase(totals, profile, rule_ids, tables)
    totals = _injury_phase(totals, profile, rule_ids, tables)

    peso = clamp(totals.peso, tables.peso_bounds)
    series = clamp(totals.series, tables.series_bounds)
    reps = totals.reps
    capped = CapFlags(peso=peso != totals.peso, series=series != totals.series, reps=False)

    final = FinalPrescription(
        sets=max(1, round_half_up(base.sets * series)),
        series=max(1, round_half_up(base.effective_series * series)),
        reps=max(1, round_half_up(base.reps * reps)),
        load=round_to_step(base.load_kg * peso, tables.load_step),
    )
    result = AdaptiveResult(
        base=base,
        applied_factors=totals.trail,
        factor_peso_total=peso,
        factor_series_total=series,
        factor_reps_total=reps,
        was_capped=capped,
        final=final,
    )
    if capped.peso or capped.series:
        logger.info(
            "Prescription factors capped: peso %.3f -> %.3f, series %.3f -> %.3f",
            totals.peso,
            peso,
            totals.series,
            series,
        )
    if SETTINGS.LOG_AUDIT_TRAIL:
        logger.info(
            "Prescription audit: %s",
            "; ".join(_audit_label(d) for d in result.applied_factors),
        )
    return result
