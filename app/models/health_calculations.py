import math
from types import MappingProxyType

from app.models.schemas import (
    ActivityLevel,
    BiometricInput,
    BMICategory,
    DerivedMetrics,
    Gender,
    Goal,
)


class ConfigurationError(ValueError):
    """Raised when a lookup table has no entry for the given key."""


ACTIVITY_MULTIPLIERS = MappingProxyType({
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
})

GOAL_CALORIE_OFFSET = 500  # kcal/day

CM_PER_INCH = 2.54


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    """
    Body Mass Index: weight / height(m)^2.

    height_cm must be > 0. The value is not rounded; presentation code
    rounds to one decimal place.
    """
    height_in_meters = height_cm / 100
    return weight_kg / (height_in_meters * height_in_meters)


def calculate_bmr(gender: Gender, weight_kg: float, height_cm: float, age: int) -> float:
    """Basal Metabolic Rate (revised Harris-Benedict), kcal/day"""
    if gender == Gender.MALE:
        return 88.362 + 13.397 * weight_kg + 4.799 * height_cm - 5.677 * age
    return 447.593 + 9.247 * weight_kg + 3.098 * height_cm - 4.330 * age


def calculate_tdee(bmr: float, activity_level: ActivityLevel) -> float:
    """Calculate Total Daily Energy Expenditure (TDEE)"""
    try:
        multiplier = ACTIVITY_MULTIPLIERS[ActivityLevel(activity_level)]
    except ValueError:
        valid = ", ".join(level.value for level in ActivityLevel)
        raise ConfigurationError(f"Unknown activity level '{activity_level}'. Must be one of: {valid}.")
    return bmr * multiplier


def adjust_calories_for_goal(tdee: float, goal: Goal) -> float:
    """Calculate calorie target based on goal"""
    try:
        goal = Goal(goal)
    except ValueError:
        valid = ", ".join(g.value for g in Goal)
        raise ConfigurationError(f"Unknown goal '{goal}'. Must be one of: {valid}.")

    if goal == Goal.LOSE:
        return tdee - GOAL_CALORIE_OFFSET
    if goal == Goal.GAIN:
        return tdee + GOAL_CALORIE_OFFSET
    return tdee


def get_bmi_category(bmi: float) -> BMICategory:
    # Upper bounds are exclusive: 24.9 is Overweight, 29.9 is Obese
    if bmi < 18.5:
        return BMICategory.UNDERWEIGHT
    if bmi < 24.9:
        return BMICategory.NORMAL
    if bmi < 29.9:
        return BMICategory.OVERWEIGHT
    return BMICategory.OBESE


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def cm_to_feet_inches(cm: float) -> str:
    """
    Format a height in cm as e.g. "6ft0in".

    Inches that round up to 12 are left as "12in" and not carried into
    the feet (so 182.6cm gives "5ft12in"). Use cm_to_feet_inches_normalized
    for the carried form.
    """
    total_inches = cm / CM_PER_INCH
    feet = math.floor(total_inches / 12)
    inches = _round_half_up(total_inches % 12)
    return f"{feet}ft{inches}in"


def cm_to_feet_inches_normalized(cm: float) -> str:
    """Same as cm_to_feet_inches, but 12in is carried into an extra foot."""
    total_inches = cm / CM_PER_INCH
    feet = math.floor(total_inches / 12)
    inches = _round_half_up(total_inches % 12)
    if inches == 12:
        feet += 1
        inches = 0
    return f"{feet}ft{inches}in"


def derive_metrics(biometrics: BiometricInput) -> DerivedMetrics:
    """Run the full derivation: BMI, category, BMR, TDEE and the goal-adjusted target."""
    bmi = calculate_bmi(biometrics.weight, biometrics.height)
    bmr = calculate_bmr(biometrics.gender, biometrics.weight, biometrics.height, biometrics.age)
    tdee = calculate_tdee(bmr, biometrics.activity_level)

    return DerivedMetrics(
        bmi=bmi,
        bmi_category=get_bmi_category(bmi),
        bmr=bmr,
        tdee=tdee,
        target_calories=adjust_calories_for_goal(tdee, biometrics.goal),
    )


def generate_recommendations(bmi_category: BMICategory, goal: Goal) -> str:
    """Short plain-text advice, one line per recommendation."""
    recommendations = []

    if bmi_category in (BMICategory.OBESE, BMICategory.OVERWEIGHT):
        recommendations.append("Aim to lose 0.5-1 kg per week through a combination of diet and exercise")
        recommendations.append("150-300 minutes of moderate-intensity exercise per week")
    elif bmi_category == BMICategory.UNDERWEIGHT:
        recommendations.append("Focus on gradual weight gain through calorie surplus and strength training")
    else:
        recommendations.append("Maintain current weight with balanced diet and regular exercise")

    if goal == Goal.LOSE:
        recommendations.append("Strength training 2-3 times per week combined with cardio 3-5 times per week")
    elif goal == Goal.GAIN:
        recommendations.append("Resistance training 4-5 times per week with adequate protein intake")

    recommendations.append("Get 7-9 hours of quality sleep each night")
    recommendations.append("Stay hydrated - drink at least 2-3 liters of water daily")

    return "\n".join(recommendations)
