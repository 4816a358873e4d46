import pytest

from app.models.schemas import MealPlan, WorkoutProgram
from app.services.data_service import (
    DataService,
    RecordKind,
    RecordNotFoundError,
    summarize_description,
)

USER_ID = "user-1"
OTHER_USER_ID = "user-2"


@pytest.fixture
def data_service(fake_supabase):
    return DataService(fake_supabase, USER_ID)


def test_list_returns_only_own_records_newest_first(data_service):
    meal_plans = data_service.list(RecordKind.MEAL_PLANS)

    assert [plan.id for plan in meal_plans] == ["mp-2", "mp-1"]
    assert all(isinstance(plan, MealPlan) for plan in meal_plans)


def test_list_workout_programs(data_service):
    programs = data_service.list("workout_programs")

    assert [program.id for program in programs] == ["wp-1"]
    assert isinstance(programs[0], WorkoutProgram)
    assert programs[0].duration_weeks == 8


def test_get_other_users_record_is_not_found(data_service):
    with pytest.raises(RecordNotFoundError):
        data_service.get(RecordKind.MEAL_PLANS, "mp-3")


def test_delete_then_refetch(data_service, fake_supabase):
    result = data_service.delete(RecordKind.MEAL_PLANS, "mp-1")

    assert result.success
    assert result.error is None
    assert [plan.id for plan in data_service.refetch(RecordKind.MEAL_PLANS)] == ["mp-2"]


def test_delete_other_users_record_fails(data_service, fake_supabase):
    result = data_service.delete(RecordKind.MEAL_PLANS, "mp-3")

    assert not result.success
    assert "mp-3" in result.error
    assert any(plan["id"] == "mp-3" for plan in fake_supabase.tables["meal_plans"])


def test_delete_reports_database_errors(data_service, fake_supabase):
    fake_supabase.fail_on_execute = True

    result = data_service.delete(RecordKind.WORKOUT_PROGRAMS, "wp-1")

    assert not result.success
    assert result.error == "database unavailable"


def test_fetch_dashboard(data_service):
    dashboard = data_service.fetch_dashboard()

    assert len(dashboard["meal_plans"]) == 2
    assert len(dashboard["workout_programs"]) == 1
    assert [log.type for log in dashboard["progress_logs"]] == ["WEIGHT", "BODY_FAT"]
    assert dashboard["profile"]["height"] == 200


def test_other_user_sees_own_records(fake_supabase):
    service = DataService(fake_supabase, OTHER_USER_ID)

    assert [plan.id for plan in service.list(RecordKind.MEAL_PLANS)] == ["mp-3"]
    assert service.get_profile() is None


class TestSummarizeDescription:
    def test_bold_heading_is_used(self):
        assert summarize_description("Intro **Bulk Phase One**\nmore text") == "Bulk Phase One"

    def test_plain_text_is_truncated(self):
        description = "x" * 150
        assert summarize_description(description) == "x" * 100 + "..."

    def test_short_plain_text_still_gets_ellipsis(self):
        assert summarize_description("Short plan") == "Short plan..."

    def test_none(self):
        assert summarize_description(None) == ""
