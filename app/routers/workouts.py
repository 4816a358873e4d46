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
    prefix="/workouts",
    tags=["Workout Programs"]
)


@router.get("/programs", response_class=JSONResponse)
def list_workout_programs(data_service: DataService = Depends(get_data_service)):
    try:
        programs = data_service.list(RecordKind.WORKOUT_PROGRAMS)
        return {
            "workout_programs": [
                {**program.model_dump(mode="json"), "preview": summarize_description(program.description)}
                for program in programs
            ],
            "count": len(programs)
        }
    except Exception as e:
        print(f"❌ Error retrieving workout programs: {str(e)}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to load workouts: {str(e)}"
        )


@router.get("/programs/{program_id}", response_class=JSONResponse)
def get_workout_program(program_id: str, data_service: DataService = Depends(get_data_service)):
    try:
        return data_service.get(RecordKind.WORKOUT_PROGRAMS, program_id).model_dump(mode="json")
    except RecordNotFoundError as nf:
        raise HTTPException(status_code=404, detail=str(nf))
    except Exception as e:
        print(f"❌ Error retrieving workout program {program_id}: {str(e)}")
        raise HTTPException(
            status_code=500,
            detail=f"An error occurred while retrieving the workout program: {str(e)}"
        )


@router.delete("/programs/{program_id}", response_class=JSONResponse)
def delete_workout_program(program_id: str, data_service: DataService = Depends(get_data_service)):
    result = data_service.delete(RecordKind.WORKOUT_PROGRAMS, program_id)
    if not result.success:
        raise HTTPException(status_code=400, detail=result.error or "Failed to delete workout program")

    try:
        remaining = data_service.refetch(RecordKind.WORKOUT_PROGRAMS)
    except Exception as e:
        print(f"❌ Error refetching workout programs: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Workout program deleted but refetch failed: {str(e)}")

    return {
        "status": "success",
        "message": "Workout program deleted successfully",
        "workout_programs": [program.model_dump(mode="json") for program in remaining]
    }
