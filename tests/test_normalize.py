import pytest

from adaptive_motor.categories import ActivityLevel, Gender, Intensity, Severity, TrainingLevel
from adaptive_motor.models import AthleteProfile, Baseline
from adaptive_motor.normalize import (
    canonical_injury,
    parse_activity_level,
    parse_gender,
    parse_injury,
    parse_intensity,
    parse_training_level,
)


@pytest.mark.parametrize(
    "raw, level",
    [
        ("Principiante", TrainingLevel.BEGINNER),
        ("nivel bajo", TrainingLevel.BEGINNER),
        ("ADVANCED", TrainingLevel.ADVANCED),
        ("Avanzado", TrainingLevel.ADVANCED),
        ("Intermedio", TrainingLevel.INTERMEDIATE),
        ("elite", TrainingLevel.INTERMEDIATE),
        (None, TrainingLevel.INTERMEDIATE),
    ],
)
def test_parse_training_level(raw, level):
    assert parse_training_level(raw) is level


@pytest.mark.parametrize(
    "raw, gender",
    [
        ("male", Gender.MALE),
        ("Hombre", Gender.MALE),
        ("masculino", Gender.MALE),
        ("female", Gender.FEMALE),
        ("Femenino", Gender.FEMALE),
        ("mujer", Gender.FEMALE),
        ("otro", Gender.MALE),
    ],
)
def test_parse_gender(raw, gender):
    assert parse_gender(raw) is gender


def test_parse_activity_level():
    assert parse_activity_level("very_active") is ActivityLevel.VERY_ACTIVE
    assert parse_activity_level("Muy Activo") is ActivityLevel.VERY_ACTIVE
    assert parse_activity_level("Active") is ActivityLevel.ACTIVE
    assert parse_activity_level("couch") is None
    assert parse_activity_level("") is None


def test_parse_intensity():
    assert parse_intensity("leve") is Intensity.LEVE
    assert parse_intensity("alta") is Intensity.ALTO
    assert parse_intensity(None) is Intensity.INTERMEDIO
    assert parse_intensity("???", default=Intensity.ALTO) is Intensity.ALTO


def test_parse_injury_severity():
    assert parse_injury("Rodilla_high").severity is Severity.HIGH
    assert parse_injury("Rodilla_LOW").severity is Severity.LOW
    assert parse_injury("Rodilla").severity is Severity.MEDIUM
    assert parse_injury("Rodilla_grave").severity is Severity.MEDIUM


def test_canonical_injury_names():
    assert canonical_injury("Dolor de espalda baja") == "Lumbalgia"
    assert canonical_injury("hernia lumbar") == "Hernia Discal"
    assert canonical_injury("rodilla izquierda") == "Rodilla"
    assert canonical_injury("tobillo") == "Tobillo"
    assert canonical_injury("Muñeca / Mano") == "Muñeca / Mano"
    assert canonical_injury("codo") is None


def test_parse_injury_keeps_raw():
    injury = parse_injury("Lesión de hombro_low")
    assert injury.raw == "Lesión de hombro_low"
    assert injury.name == "Lesión de hombro"
    assert injury.canonical == "Hombro"


def test_profile_accepts_camel_case_and_free_text():
    profile = AthleteProfile.model_validate(
        {
            "trainingLevel": "avanzado",
            "activityLevel": "Sedentario",
            "ages": ["35", 40.9],
            "genders": "Mujer",
            "bmis": [27.5, None],
            "weight": "82 kg",
            "injuries": ["Hombro_high"],
        }
    )
    assert profile.training_level is TrainingLevel.ADVANCED
    assert profile.activity_level is ActivityLevel.SEDENTARY
    assert profile.ages == (35, 40)
    assert profile.genders == (Gender.FEMALE,)
    assert profile.bmis == (27.5,)
    assert profile.weight == 82.0
    assert profile.injuries[0].canonical == "Hombro"


def test_baseline_coerces_numbers():
    base = Baseline(sets="4", series=0, reps="10 reps", load_kg="62.5")
    assert base.sets == 4
    assert base.effective_series == 4
    assert base.reps == 10
    assert base.load_kg == 62.5
