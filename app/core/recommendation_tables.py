from types import MappingProxyType

from app.models.schemas import BMICategory, Goal, Recommendation, RecommendationSection

# Canned advice used when the AI recommendation can't be fetched.

BMI_CATEGORY_RECOMMENDATIONS = MappingProxyType({
    BMICategory.UNDERWEIGHT: MappingProxyType({
        "nutrition": (
            "🍳 Breakfast: 3-egg omelette (450 kcal) with 1/2 avocado + 50g oatmeal (Total: 650 kcal, 35g protein)",
            "🥪 Lunch: Grilled chicken wrap (200g chicken, whole wheat) with hummus & veggies (800 kcal, 55g protein)",
            "🍲 Dinner: 200g salmon with 100g quinoa & 150g roasted sweet potatoes (900 kcal, 60g protein)",
            "🥛 Snacks: 200g Greek yogurt (120 kcal) + 100g berries, 50g trail mix (300 kcal), protein shake (30g whey)",
        ),
        "exercise": (
            "🏋️ Strength Training: 4x/week (5x5 compound lifts, 70-80% 1RM)",
            "🤸 Mobility: Daily 15-min dynamic stretching + foam rolling",
            "🚴 Cardio: Moderate cycling (12-15 mph) 2x/week (30 mins)",
        ),
        "lifestyle": (
            "Track calorie intake using MyFitnessPal",
            "Add healthy fats (nuts, olive oil, avocado)",
            "Consider mass gainer shakes if struggling to eat enough",
        ),
    }),
    BMICategory.NORMAL: MappingProxyType({
        "nutrition": (
            "🥑 Balanced meals: 40% carbs (150-200g), 30% protein (120-150g), 30% fats (60-80g)",
            "🐟 Omega-3: 200g salmon 3x/week (1.5g EPA/DHA) + 30g chia seeds daily",
            "🌿 Fiber: 50g broccoli (5g fiber), 150g berries (8g fiber), 100g lentils (13g fiber)",
        ),
        "exercise": (
            "🏃 Cardio: 150 mins/week zone 2 training (60-70% max HR)",
            "💪 Strength: 3x full-body workouts (8-12 reps, 3 sets)",
            "🧘 Recovery: 2x yoga sessions + daily 10-min mobility drills",
        ),
        "lifestyle": (
            "Maintain consistent sleep schedule",
            "Try new physical activities monthly",
            "Practice mindful eating techniques",
        ),
    }),
    BMICategory.OVERWEIGHT: MappingProxyType({
        "nutrition": (
            "🥦 Volume eating: 500g veggies/day (broccoli, spinach, peppers)",
            "🍗 Protein: 1.6g/kg (e.g., 120g for 75kg) from chicken breast, tofu, fish",
            "🚫 Limit: <25g added sugar, <50g refined carbs daily",
            "🍵 Metabolism: 3 cups green tea + 1g cayenne pepper daily",
        ),
        "exercise": (
            "🔥 HIIT: 3x/week (30s sprint/90s rest x 10 rounds)",
            "🚶 LISS: Daily 45-min walk (3.5 mph, 150-170 bpm)",
            "🏋️ Resistance: 3x circuit training (12 stations, 30s work/15s rest)",
        ),
        "lifestyle": (
            "Use smaller plates for portion control",
            "Practice 16:8 intermittent fasting",
            "Stay accountable with weekly weigh-ins",
        ),
    }),
    BMICategory.OBESE: MappingProxyType({
        "nutrition": (
            "🍽️ Plate method: 50% veggies (300g), 25% protein (100-120g), 25% carbs (75-100g)",
            "🥤 Hydration: 500ml water 30 mins before each meal",
            "🍎 Smart swaps: 200g zoodles (30 kcal) vs pasta (400 kcal)",
            "⏲️ Mindful eating: 20 chews/bite, 20-min meals",
        ),
        "exercise": (
            "🏊 Low-Impact: Water aerobics 3x/week (40 mins, 120-140 bpm)",
            "🪑 Chair exercises: 15-min AM/PM routines (leg lifts, seated marches)",
            "🚶 Gradual walking: 10-min sessions 3x/day (2.5 mph)",
        ),
        "lifestyle": (
            "Food journaling for awareness",
            "Stress management techniques",
            "Sleep quality improvement plan",
        ),
    }),
})

GOAL_RECOMMENDATIONS = MappingProxyType({
    Goal.LOSE: MappingProxyType({
        "category": "🔥 Weight Loss Focus",
        "items": (
            "🏃♀️ Cardio: 2x weekly sprints (8x30s all-out w/ 2min rests)",
            "🍴 Meal Timing: 40% calories at breakfast, 30% lunch, 30% dinner",
            "🛑 Cravings: 2 pieces sugar-free gum + 500ml water when hungry",
            "📉 Deficit: 500kcal/day (3500kcal/week = 1lb loss)",
        ),
        "tips": (
            "Weekly progress: Front/side photos + waist measurement",
            "Track non-scale wins: Energy levels, sleep quality, clothing fit",
            "16:8 fasting: Eat between 10am-6pm daily",
        ),
    }),
    Goal.GAIN: MappingProxyType({
        "category": "💪 Muscle Gain Focus",
        "items": (
            "🏋️ Progressive Overload: +5% weight weekly (e.g., 100kg → 105kg squat)",
            "⏱️ Rest: 90s between sets for hypertrophy (8-12 rep range)",
            "🍌 Post-Workout: 75g carbs + 25g protein within 30 mins",
            "💤 Recovery: 8hr sleep + 20-min naps",
        ),
        "tips": (
            "Weekly checks: Goal +0.5-1lb, adjust calories by 200 if not progressing",
            "Mass gainer: 1000kcal shake (oats, peanut butter, whey, banana)",
            "Prioritize: Squat, deadlift, bench press, pull-ups",
        ),
    }),
    Goal.MAINTAIN: MappingProxyType({
        "category": "⚖️ Maintenance Focus",
        "items": (
            "🔄 Training: Rotate modalities every 4-6 weeks (e.g., swimming → cycling)",
            "🍽️ Diet: ±200kcal cycling (workout vs rest days)",
            "📊 Monitoring: Weekly weigh-ins ±1kg threshold",
            "🎯 Goals: Skill targets (e.g., 10 pull-ups, 5k run time)",
        ),
        "tips": (
            "Quarterly DEXA scans for body composition",
            "Macro cycling: 40/30/30 (training) vs 30/30/40 (rest) carb/pro/fat",
            "Active recovery: 1 week every 8 weeks at 50% volume",
        ),
    }),
})

FALLBACK_TITLE = "AI Recommendations Unavailable"
FALLBACK_ICON = "⚠️"


def get_bmi_based_recommendations(bmi_category: BMICategory) -> list[RecommendationSection]:
    category = BMICategory(bmi_category)
    category_data = BMI_CATEGORY_RECOMMENDATIONS[category]

    return [
        RecommendationSection(
            category=f"📈 {category.value} Management",
            items=[*category_data["nutrition"], *category_data["exercise"]],
            tips=list(category_data["lifestyle"]),
        )
    ]


def get_goal_specific_recommendations(goal: Goal) -> list[RecommendationSection]:
    goal_data = GOAL_RECOMMENDATIONS[Goal(goal)]

    return [
        RecommendationSection(
            category=f"🎯 {goal_data['category']}",
            items=list(goal_data["items"]),
            tips=list(goal_data["tips"]),
        )
    ]


def build_fallback_recommendation(bmi_category: BMICategory, goal: Goal) -> Recommendation:
    """The recommendation shown when the AI call fails: error notice, then BMI and goal tables."""
    return Recommendation(
        title=FALLBACK_TITLE,
        icon=FALLBACK_ICON,
        sections=[
            RecommendationSection(
                category="Error",
                items=["Failed to fetch recommendations. Using default suggestions..."],
                tips=[],
            ),
            *get_bmi_based_recommendations(bmi_category),
            *get_goal_specific_recommendations(goal),
        ],
    )
