from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from app.core.security import get_current_user
from app.main import app
from app.services.supabase_client import get_supabase_client

USER_ID = "user-1"
OTHER_USER_ID = "user-2"


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    """Just enough of the postgrest query builder for the data service."""

    def __init__(self, db, table_name):
        self.db = db
        self.table_name = table_name
        self.filters = []
        self.order_by = None
        self.row_limit = None
        self.is_delete = False

    def select(self, *columns):
        return self

    def delete(self):
        self.is_delete = True
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def limit(self, count):
        self.row_limit = count
        return self

    def execute(self):
        if self.db.fail_on_execute:
            raise RuntimeError("database unavailable")

        rows = self.db.tables.setdefault(self.table_name, [])
        matched = [row for row in rows if all(row.get(col) == val for col, val in self.filters)]

        if self.is_delete:
            self.db.tables[self.table_name] = [row for row in rows if row not in matched]
            return FakeResponse(matched)

        if self.order_by:
            column, desc = self.order_by
            matched = sorted(matched, key=lambda row: row[column], reverse=desc)
        if self.row_limit is not None:
            matched = matched[:self.row_limit]
        return FakeResponse([dict(row) for row in matched])


class FakeAuth:
    def __init__(self, valid_tokens):
        self.valid_tokens = valid_tokens

    def get_user(self, token):
        user_id = self.valid_tokens.get(token)
        if user_id is None:
            return SimpleNamespace(user=None)
        return SimpleNamespace(user=SimpleNamespace(id=user_id))


class FakeSupabase:
    def __init__(self, tables=None):
        self.tables = tables or {}
        self.fail_on_execute = False
        self.auth = FakeAuth({"good-token": USER_ID})

    def table(self, name):
        return FakeQuery(self, name)


def make_meal_plan(plan_id, user_id=USER_ID, created_at="2024-01-01T10:00:00+00:00", **overrides):
    plan = {
        "id": plan_id,
        "title": f"Plan {plan_id}",
        "description": "**High protein week**\nEggs, chicken and rice.",
        "created_at": created_at,
        "updated_at": created_at,
        "user_id": user_id,
        "days": {"monday": ["oats", "chicken"]},
        "calories_per_day": 2400,
        "dietary_tags": ["high-protein"],
        "is_active": True,
    }
    plan.update(overrides)
    return plan


def make_workout_program(program_id, user_id=USER_ID, created_at="2024-01-01T10:00:00+00:00", **overrides):
    program = {
        "id": program_id,
        "title": f"Program {program_id}",
        "description": "## Week 1\nSquat, bench and deadlift three times a week.",
        "created_at": created_at,
        "user_id": user_id,
        "duration_weeks": 8,
        "days_per_week": 3,
        "difficulty": "intermediate",
    }
    program.update(overrides)
    return program


@pytest.fixture
def fake_supabase():
    return FakeSupabase({
        "meal_plans": [
            make_meal_plan("mp-1", created_at="2024-01-01T10:00:00+00:00"),
            make_meal_plan("mp-2", created_at="2024-02-01T10:00:00+00:00", description="Plain text plan"),
            make_meal_plan("mp-3", user_id=OTHER_USER_ID),
        ],
        "workout_programs": [
            make_workout_program("wp-1"),
            make_workout_program("wp-2", user_id=OTHER_USER_ID),
        ],
        "progress_logs": [
            {"id": "log-1", "user_id": USER_ID, "type": "WEIGHT", "value": 80, "logged_at": "2024-01-01T08:00:00+00:00"},
            {"id": "log-2", "user_id": USER_ID, "type": "BODY_FAT", "value": 21.5, "logged_at": "2024-01-02T08:00:00+00:00"},
        ],
        "profiles": [
            {"id": USER_ID, "height": 200, "gender": "male"},
        ],
    })


@pytest.fixture
def client(fake_supabase):
    app.dependency_overrides[get_supabase_client] = lambda: fake_supabase
    app.dependency_overrides[get_current_user] = lambda: SimpleNamespace(user=SimpleNamespace(id=USER_ID))
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(fake_supabase):
    """Client that goes through the real bearer-token check."""
    app.dependency_overrides[get_supabase_client] = lambda: fake_supabase
    yield TestClient(app)
    app.dependency_overrides.clear()
