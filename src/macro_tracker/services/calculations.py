"""Energy and macronutrient calculations.

Every function here is a pure transform of its arguments. Inputs are metric
(kilograms, centimeters, years); callers convert imperial values first.

Rounding mirrors the mobile client the targets were first shown in: halves
round up (``2.5 -> 3``, ``-2.5 -> -2``), and each value is rounded once at the
output boundary from unrounded intermediates.
"""

import math

from macro_tracker.domain.nutrition import (
    ActivityLevel,
    BMICategory,
    Goal,
    MacroTargets,
    NutritionTargets,
    Sex,
)

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

CALORIE_OFFSETS: dict[Goal, int] = {
    Goal.LOSE: -500,
    Goal.MAINTAIN: 0,
    Goal.GAIN: 300,
}

PROTEIN_G_PER_KG: dict[Goal, float] = {
    Goal.LOSE: 2.0,
    Goal.MAINTAIN: 2.2,
    Goal.GAIN: 2.4,
}

WEEKLY_WEIGHT_CHANGE_KG: dict[Goal, float] = {
    Goal.LOSE: -0.5,
    Goal.MAINTAIN: 0.0,
    Goal.GAIN: 0.25,
}

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9
FAT_SHARE = 0.25
SUGAR_SHARE_OF_CARBS = 0.2

UNDERWEIGHT_BELOW = 18.5
OVERWEIGHT_FROM = 25.0
OBESE_FROM = 30.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going toward +infinity."""
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def calculate_bmr(weight: float, height: float, age: float, sex: Sex | str) -> float:
    """Return basal metabolic rate (kcal/day) via Mifflin-St Jeor."""
    base = 10 * weight + 6.25 * height - 5 * age
    if Sex(sex) is Sex.MALE:
        return base + 5
    return base - 161


def calculate_tdee(bmr: float, activity_level: ActivityLevel | str) -> int:
    """Scale BMR by the activity multiplier."""
    return round_half_up(bmr * ACTIVITY_MULTIPLIERS[ActivityLevel(activity_level)])


def calculate_target_calories(tdee: float, goal: Goal | str) -> int:
    """Apply the fixed per-goal calorie offset to TDEE."""
    return round_half_up(tdee + CALORIE_OFFSETS[Goal(goal)])


def calculate_macros(
    target_calories: float, weight: float, goal: Goal | str
) -> MacroTargets:
    """Split target calories into protein, carb, fat and sugar grams.

    Protein scales with body weight, fat is a fixed share of the calories and
    carbohydrate takes the remainder. The remainder is not clamped, so a small
    calorie budget with a heavy body weight yields negative carbs and sugars.
    """
    protein_grams = weight * PROTEIN_G_PER_KG[Goal(goal)]
    protein_calories = protein_grams * KCAL_PER_G_PROTEIN
    fat_calories = target_calories * FAT_SHARE
    carb_calories = target_calories - protein_calories - fat_calories

    return MacroTargets(
        protein=round_half_up(protein_grams),
        carbs=round_half_up(carb_calories / KCAL_PER_G_CARBS),
        fats=round_half_up(fat_calories / KCAL_PER_G_FAT),
        sugars=round_half_up(carb_calories * SUGAR_SHARE_OF_CARBS / KCAL_PER_G_CARBS),
    )


def calculate_bmi(weight: float, height: float) -> float:
    """Return body mass index from kilograms and centimeters."""
    height_m = height / 100
    return weight / (height_m * height_m)


def get_bmi_category(bmi: float) -> BMICategory:
    """Map a BMI value onto its band."""
    if bmi < UNDERWEIGHT_BELOW:
        return BMICategory.UNDERWEIGHT
    if bmi < OVERWEIGHT_FROM:
        return BMICategory.NORMAL
    if bmi < OBESE_FROM:
        return BMICategory.OVERWEIGHT
    return BMICategory.OBESE


def calculate_projected_weight(
    current_weight: float, goal: Goal | str, weeks: float
) -> float:
    """Extrapolate weight linearly at the goal's weekly rate.

    There is no floor; a long enough ``lose`` projection goes negative.
    """
    return current_weight + WEEKLY_WEIGHT_CHANGE_KG[Goal(goal)] * weeks


def compute_targets(  # noqa: PLR0913
    weight: float,
    height: float,
    age: float,
    sex: Sex | str,
    activity_level: ActivityLevel | str,
    goal: Goal | str,
) -> NutritionTargets:
    """Run the BMR -> TDEE -> target calories -> macros chain."""
    bmr = calculate_bmr(weight, height, age, sex)
    tdee = calculate_tdee(bmr, activity_level)
    target_calories = calculate_target_calories(tdee, goal)
    return NutritionTargets(
        bmr=bmr,
        tdee=tdee,
        target_calories=target_calories,
        macros=calculate_macros(target_calories, weight, goal),
    )
