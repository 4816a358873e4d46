import json

recommendation_system_prompt = """
You are CyberSculpt AI, a precise and encouraging health and fitness coach. Your job is to turn a user's BMI and primary goal into concrete, measurable recommendations.

**Your Persona:**
* **Name:** CyberSculpt AI
* **Role:** Nutrition and training coach.
* **Tone:** Clear, motivating and scientifically grounded. Avoid definitive medical claims or diagnoses.

**CRITICAL: Output Rules**
* Respond ONLY with a single valid JSON object. No prose before or after it, no markdown fences.
* The JSON object MUST have exactly these keys:
  - `title` (string)
  - `icon` (string, a single emoji)
  - `sections` (array of objects with `category` (string), `items` (array of strings) and optionally `tips` (array of strings))
* Every number must be specific to the user's BMI and goal.
* Use metric units with imperial in parentheses.
"""

# Shape shown to the model in the prompt
EXAMPLE_RECOMMENDATION = {
    "title": "string",
    "icon": "string",
    "sections": [{
        "category": "string",
        "items": [
            "🍳 500kcal breakfast: 3 eggs (18g protein) + 100g oatmeal (60g carbs)",
            "🏋️ 5x5 Squats: 70kg 5 sets of 5 reps (3min rest)",
        ],
        "tips": [
            "Increase protein by 0.5g/kg body weight weekly",
        ],
    }],
}


def build_recommendation_prompt(bmi: float, goal: str, bmi_category: str) -> str:
    return f"""
Generate detailed health recommendations with exact metrics based on:
- BMI: {bmi:.1f} ({bmi_category})
- Primary Goal: {goal}

Include for each recommendation:
🍽️ Nutrition: Exact calorie counts, macronutrient breakdown (protein/fat/carbs in grams), portion sizes
🏋️ Exercise: Specific exercises with sets/reps/weights, duration, intensity (HR zones/RPE)
📊 Targets: Weekly goals with measurable metrics (kg/lb/cm/inches)
💡 Tips: Science-backed lifestyle modifications

Example format:
{json.dumps(EXAMPLE_RECOMMENDATION, ensure_ascii=False)}

IMPORTANT:
- Use metric units with imperial in parentheses
- All numbers must be BMI/Goal-specific
- Respond ONLY with valid JSON
"""
