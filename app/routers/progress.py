import traceback

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from app.models.schemas import ChartRequest
from app.services.data_service import DataService, get_data_service
from app.services.progress_chart import build_chart_data

router = APIRouter(
    prefix="/progress",
    tags=["Progress"]
)


@router.get("/dashboard", response_class=JSONResponse)
def get_dashboard(data_service: DataService = Depends(get_data_service)):
    """Meal plans, workout programs, progress logs and profile in one call."""
    try:
        dashboard = data_service.fetch_dashboard()
        return {
            "meal_plans": [plan.model_dump(mode="json") for plan in dashboard["meal_plans"]],
            "workout_programs": [program.model_dump(mode="json") for program in dashboard["workout_programs"]],
            "progress_logs": [log.model_dump(mode="json") for log in dashboard["progress_logs"]],
            "profile": dashboard["profile"],
        }
    except Exception as e:
        print(f"❌ Error loading dashboard: {str(e)}")
        traceback.print_exc()
        raise HTTPException(status_code=500, detail=f"Error loading dashboard: {str(e)}")


@router.post("/chart", response_class=JSONResponse)
def get_chart_series(request: ChartRequest, data_service: DataService = Depends(get_data_service)):
    """
    Chart-ready series for one metric. BMI and body fat values are filled
    in from the user's logs and profile height.
    """
    try:
        profile = data_service.get_profile() or {}
        progress_logs = data_service.list_progress_logs()

        series = build_chart_data(
            request.data,
            request.metric,
            unit=request.unit,
            progress_logs=progress_logs,
            height_cm=profile.get("height"),
            start=request.start,
            end=request.end,
        )
        return series.model_dump(mode="json")
    except Exception as e:
        print(f"❌ Error building chart for {request.metric}: {str(e)}")
        traceback.print_exc()
        raise HTTPException(status_code=500, detail=f"Error building chart: {str(e)}")
