from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from app.services.data_service import (
    DataService,
    RecordKind,
    RecordNotFoundError,
    get_data_service,
    summarize_description,
)

router = APIRouter(
    prefix="/plans",
    tags=["Meal Plans"]
)


@router.get("/meal-plans", response_class=JSONResponse)
def list_meal_plans(data_service: DataService = Depends(get_data_service)):
    """
    Saved meal plans for the authenticated user, newest first.
    Each plan carries a short `preview` of its markdown description.
    """
    try:
        meal_plans = data_service.list(RecordKind.MEAL_PLANS)
        return {
            "meal_plans": [
                {**plan.model_dump(mode="json"), "preview": summarize_description(plan.description)}
                for plan in meal_plans
            ],
            "count": len(meal_plans)
        }
    except Exception as e:
        print(f"❌ Error retrieving meal plans: {str(e)}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to load meal plans: {str(e)}"
        )


@router.get("/meal-plans/{plan_id}", response_class=JSONResponse)
def get_meal_plan(plan_id: str, data_service: DataService = Depends(get_data_service)):
    """Full meal plan, including the markdown description and day plan."""
    try:
        return data_service.get(RecordKind.MEAL_PLANS, plan_id).model_dump(mode="json")
    except RecordNotFoundError as nf:
        raise HTTPException(status_code=404, detail=str(nf))
    except Exception as e:
        print(f"❌ Error retrieving meal plan {plan_id}: {str(e)}")
        raise HTTPException(
            status_code=500,
            detail=f"An error occurred while retrieving the meal plan: {str(e)}"
        )


@router.delete("/meal-plans/{plan_id}", response_class=JSONResponse)
def delete_meal_plan(plan_id: str, data_service: DataService = Depends(get_data_service)):
    """
    Delete a meal plan and return the refreshed list so the client
    doesn't need a second round trip.
    """
    result = data_service.delete(RecordKind.MEAL_PLANS, plan_id)
    if not result.success:
        raise HTTPException(status_code=400, detail=result.error or "Failed to delete meal plan")

    try:
        remaining = data_service.refetch(RecordKind.MEAL_PLANS)
    except Exception as e:
        print(f"❌ Error refetching meal plans: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Meal plan deleted but refetch failed: {str(e)}")

    return {
        "status": "success",
        "message": "Meal plan deleted successfully",
        "meal_plans": [plan.model_dump(mode="json") for plan in remaining]
    }
