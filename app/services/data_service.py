from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from fastapi import Depends
from supabase import Client
from supabase_auth.types import UserResponse

from app.core.security import get_current_user
from app.models.schemas import DeleteResult, MealPlan, ProgressLog, WorkoutProgram
from app.services.supabase_client import get_supabase_client


class RecordKind(str, Enum):
    MEAL_PLANS = "meal_plans"
    WORKOUT_PROGRAMS = "workout_programs"


RECORD_MODELS = {
    RecordKind.MEAL_PLANS: MealPlan,
    RecordKind.WORKOUT_PROGRAMS: WorkoutProgram,
}


class RecordNotFoundError(LookupError):
    pass


class DataService:
    """
    Reads and deletes the user's saved records in Supabase.

    Every query is scoped to `user_id`, so one user can never see or delete
    another user's meal plans or workout programs.
    """

    def __init__(self, client: Client, user_id: str):
        self.client = client
        self.user_id = user_id

    def list(self, kind: RecordKind) -> list[Union[MealPlan, WorkoutProgram]]:
        """All records of one kind, newest first."""
        kind = RecordKind(kind)
        response = self.client.table(kind.value)\
            .select('*')\
            .eq('user_id', self.user_id)\
            .order('created_at', desc=True)\
            .execute()

        model = RECORD_MODELS[kind]
        records = [model.model_validate(row) for row in (response.data or [])]
        print(f"✅ Loaded {len(records)} {kind.value} for user {self.user_id}")
        return records

    def refetch(self, kind: RecordKind) -> list[Union[MealPlan, WorkoutProgram]]:
        # Nothing is cached here; refetch is a fresh read, e.g. after a delete.
        return self.list(kind)

    def get(self, kind: RecordKind, record_id: str) -> Union[MealPlan, WorkoutProgram]:
        kind = RecordKind(kind)
        response = self.client.table(kind.value)\
            .select('*')\
            .eq('id', record_id)\
            .eq('user_id', self.user_id)\
            .limit(1)\
            .execute()

        if not response.data:
            raise RecordNotFoundError(f"No {kind.value} record '{record_id}' found for this user.")
        return RECORD_MODELS[kind].model_validate(response.data[0])

    def delete(self, kind: RecordKind, record_id: str) -> DeleteResult:
        """Delete one record. Failures are reported in the result, not raised."""
        kind = RecordKind(kind)
        try:
            response = self.client.table(kind.value)\
                .delete()\
                .eq('id', record_id)\
                .eq('user_id', self.user_id)\
                .execute()
        except Exception as e:
            print(f"❌ Failed to delete {kind.value} '{record_id}': {str(e)}")
            return DeleteResult(success=False, error=str(e))

        if not response.data:
            print(f"⚠️ Nothing deleted for {kind.value} '{record_id}'")
            return DeleteResult(success=False, error=f"No {kind.value} record '{record_id}' found for this user.")

        print(f"✅ Deleted {kind.value} '{record_id}'")
        return DeleteResult(success=True)

    def list_progress_logs(self) -> list[ProgressLog]:
        response = self.client.table('progress_logs')\
            .select('*')\
            .eq('user_id', self.user_id)\
            .order('logged_at')\
            .execute()
        return [ProgressLog.model_validate(row) for row in (response.data or [])]

    def get_profile(self) -> Optional[dict]:
        response = self.client.table('profiles')\
            .select('*')\
            .eq('id', self.user_id)\
            .limit(1)\
            .execute()
        return response.data[0] if response.data else None

    def fetch_dashboard(self) -> dict:
        """Everything the dashboard shows in one payload."""
        return {
            "meal_plans": self.list(RecordKind.MEAL_PLANS),
            "workout_programs": self.list(RecordKind.WORKOUT_PROGRAMS),
            "progress_logs": self.list_progress_logs(),
            "profile": self.get_profile(),
        }


def summarize_description(description: Optional[str], limit: int = 100) -> str:
    """
    Preview line for a markdown description in the saved-records list.

    If the description has bold text, the first line of the first bold
    segment is used; otherwise the first `limit` characters plus "...".
    """
    if description is None:
        return ""
    if "**" in description:
        return description.split("**")[1].split("\n")[0].strip()
    return description[:limit] + "..."


def get_data_service(
    current_user: UserResponse = Depends(get_current_user),
    supabase: Client = Depends(get_supabase_client),
) -> DataService:
    """FastAPI dependency: a DataService scoped to the authenticated user."""
    return DataService(supabase, str(current_user.user.id))
