import asyncio
import json
import re
from typing import Optional

from google import genai
from google.genai import types
from pydantic import ValidationError

from app.core.config import get_settings
from app.core.prompts import build_recommendation_prompt, recommendation_system_prompt
from app.core.recommendation_tables import build_fallback_recommendation
from app.models.schemas import BMICategory, Goal, Recommendation, RecommendationResult


def parse_recommendation(raw_text: str) -> Recommendation:
    """
    Parse the model's reply into a Recommendation.

    The model sometimes wraps its JSON in ```json fences even when asked not
    to, so those are stripped first. Sections without tips get an empty list.

    Raises:
        ValueError: if the text is not JSON or doesn't match the expected shape.
    """
    json_str = re.sub(r"```(?:json)?", "", raw_text or "").strip()
    if not json_str:
        raise ValueError("Empty response from recommendation model")

    try:
        content = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in recommendation response: {str(e)}")

    if not isinstance(content, dict) or not isinstance(content.get("sections"), list):
        raise ValueError("Recommendation response is missing 'sections'")

    sections = []
    for section in content["sections"]:
        if not isinstance(section, dict):
            raise ValueError(f"Expected a dict for each section, got {type(section).__name__}")
        sections.append({
            "category": section.get("category"),
            "items": section.get("items"),
            "tips": section.get("tips") or [],
        })

    try:
        return Recommendation(
            title=content.get("title"),
            icon=content.get("icon"),
            sections=sections,
        )
    except ValidationError as e:
        raise ValueError(f"Malformed recommendation payload: {str(e)}")


async def fetch_ai_recommendations(
    bmi: float,
    goal: Goal,
    bmi_category: BMICategory,
    client: Optional[genai.Client] = None,
    timeout: Optional[float] = None,
) -> RecommendationResult:
    """
    Ask the LLM for a structured recommendation.

    Never raises: any failure (unknown goal or category, missing key, network,
    timeout, bad JSON) comes back as RecommendationResult(ok=False) so the
    caller can fall back.
    """
    settings = get_settings()

    try:
        goal_value = Goal(goal).value
        category_value = BMICategory(bmi_category).value

        if client is None:
            if not settings.gemini_api_key:
                raise EnvironmentError("GEMINI_API_KEY not found")
            client = genai.Client(api_key=settings.gemini_api_key)

        prompt = build_recommendation_prompt(bmi, goal_value, category_value)
        print(f"🤖 Requesting AI recommendations (BMI {bmi:.1f}, {category_value}, goal: {goal_value})...")

        response = await asyncio.wait_for(
            client.aio.models.generate_content(
                model=settings.gemini_model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    system_instruction=recommendation_system_prompt,
                    response_mime_type="application/json",
                    temperature=0.5,
                    max_output_tokens=2000,
                ),
            ),
            timeout=timeout if timeout is not None else settings.recommendation_timeout,
        )

        recommendation = parse_recommendation(response.text)
        print(f"✅ AI recommendation received: {recommendation.title}")
        return RecommendationResult(ok=True, recommendation=recommendation)

    except asyncio.TimeoutError:
        print("❌ AI Recommendation Error: request timed out")
        return RecommendationResult(ok=False, error="Recommendation request timed out")
    except Exception as e:
        print(f"❌ AI Recommendation Error: {str(e)}")
        return RecommendationResult(ok=False, error=str(e))


async def recommend_with_fallback(
    bmi: float,
    goal: Goal,
    bmi_category: BMICategory,
    client: Optional[genai.Client] = None,
) -> Recommendation:
    """AI recommendation when available, otherwise the canned BMI + goal tables."""
    result = await fetch_ai_recommendations(bmi, goal, bmi_category, client=client)
    if result.ok:
        return result.recommendation

    print(f"⚠️ Using default recommendations for {BMICategory(bmi_category).value} / {Goal(goal).value}")
    return build_fallback_recommendation(bmi_category, goal)
