from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "veryActive"


class Goal(str, Enum):
    MAINTAIN = "maintain"
    LOSE = "lose"
    GAIN = "gain"


class BMICategory(str, Enum):
    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"


class BiometricInput(BaseModel):
    """Form data from the health calculator. Ranges are enforced here, not in the engine."""
    model_config = ConfigDict(populate_by_name=True)

    age: int = Field(25, ge=1, le=120)
    gender: Gender = Gender.MALE
    height: float = Field(170, ge=30, le=300)  # in cm
    weight: float = Field(70, ge=10, le=500)  # in kg
    activity_level: ActivityLevel = Field(ActivityLevel.MODERATE, alias="activityLevel")
    goal: Goal = Goal.MAINTAIN


class DerivedMetrics(BaseModel):
    bmi: float
    bmi_category: BMICategory
    bmr: float  # kcal/day
    tdee: float  # kcal/day
    target_calories: float  # kcal/day after goal adjustment


# --- Recommendations ---

class RecommendationSection(BaseModel):
    category: str
    items: list[str]
    tips: list[str] = []


class Recommendation(BaseModel):
    title: str
    icon: str
    sections: list[RecommendationSection]


class RecommendationResult(BaseModel):
    """Outcome of the LLM call. On failure `recommendation` is None and the caller falls back."""
    ok: bool
    recommendation: Optional[Recommendation] = None
    error: Optional[str] = None


# --- Records owned by the data service ---

class MealPlan(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    user_id: str
    days: Any = None  # structured day plan, stored as JSON
    calories_per_day: Optional[float] = None
    dietary_tags: list[str] = []
    is_active: bool = False


class WorkoutProgram(BaseModel):
    id: str
    title: str
    description: str = ""
    created_at: datetime
    updated_at: Optional[datetime] = None
    user_id: str
    duration_weeks: Optional[int] = None
    days_per_week: Optional[int] = None
    difficulty: Optional[str] = None


class ProgressLog(BaseModel):
    id: Optional[str] = None
    type: str  # "WEIGHT", "BODY_FAT", ...
    value: Optional[float] = None
    logged_at: datetime


class DeleteResult(BaseModel):
    success: bool
    error: Optional[str] = None


# --- Progress chart ---

class ChartDataPoint(BaseModel):
    date: str
    value: Optional[float] = None


class ChartSeries(BaseModel):
    metric: str
    unit: str
    points: list[ChartDataPoint]
    first_value: Optional[float] = None
    last_value: Optional[float] = None
    change: Optional[float] = None


class ChartRequest(BaseModel):
    metric: str  # "weight", "bmi", "bodyFat", ...
    unit: str = ""
    data: list[ChartDataPoint]
    start: Optional[str] = None
    end: Optional[str] = None
