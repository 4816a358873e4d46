from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse

from app.models.health_calculations import (
    ConfigurationError,
    cm_to_feet_inches,
    cm_to_feet_inches_normalized,
    derive_metrics,
    generate_recommendations,
)
from app.models.schemas import BiometricInput
from app.services.recommendation_service import recommend_with_fallback

router = APIRouter(
    prefix="/public",
    tags=["public"]
)


@router.post("/calculate", response_class=JSONResponse)
async def calculate_health_metrics(request: BiometricInput):
    """
    Derive BMI, BMR, TDEE and the daily calorie target, then attach an AI
    recommendation (or the default one when the AI service is unavailable).
    """
    try:
        metrics = derive_metrics(request)
        print(f"🎯 Metrics - BMI: {metrics.bmi:.1f} ({metrics.bmi_category.value}), TDEE: {round(metrics.tdee)}, Target: {round(metrics.target_calories)}")

        recommendation = await recommend_with_fallback(
            metrics.bmi,
            request.goal,
            metrics.bmi_category,
        )

        response_data = {
            "success": True,
            "data": {
                "bmi": round(metrics.bmi, 1),
                "bmi_category": metrics.bmi_category.value,
                "calories": round(metrics.target_calories),
                "height_display": cm_to_feet_inches(request.height),
                "metrics": metrics.model_dump(mode="json"),
                "summary": generate_recommendations(metrics.bmi_category, request.goal),
                "recommendation": recommendation.model_dump(mode="json"),
            }
        }

        return JSONResponse(content=response_data, status_code=200)

    except ConfigurationError as ce:
        raise HTTPException(status_code=400, detail=str(ce))
    except Exception as e:
        print(f"❌ Error calculating health metrics: {str(e)}")
        raise HTTPException(status_code=500, detail=f"An error occurred: {str(e)}")


@router.get("/height", response_class=JSONResponse)
def convert_height(
    cm: float = Query(..., ge=0, le=300),
    normalized: bool = False,
):
    """Height in feet/inches for display next to the cm input."""
    display = cm_to_feet_inches_normalized(cm) if normalized else cm_to_feet_inches(cm)
    return {"cm": cm, "display": display}
