import re
from pydantic import BaseModel, Field, StrictBool, field_validator
from typing import Optional, List
from datetime import datetime
from uuid import UUID

# Full date-time: date, "T", hours:minutes[:seconds[.fraction]], optional Z or +HH:MM
ISO_DATETIME_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d{1,6})?)?(Z|[+-]\d{2}:\d{2})?$"
)


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 date-time string, keeping the offset it was sent with.

    Raises:
        ValueError: for dates without a time, epoch numbers and other formats
    """
    if not ISO_DATETIME_RE.match(value):
        raise ValueError("datetime must be an ISO-8601 date-time string")
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    # fromisoformat before 3.11 only takes 3 or 6 fraction digits
    value = re.sub(r"\.(\d{1,6})", lambda m: "." + m.group(1).ljust(6, "0"), value)
    return datetime.fromisoformat(value)


class MealWrite(BaseModel):
    """Request body for creating a meal or replacing all of its mutable fields"""

    name: str = Field(..., min_length=1, description="Meal name")
    description: Optional[str] = Field(None, description="Free-text description")
    consumed_at: datetime = Field(
        ..., alias="datetime", description="ISO-8601 time the meal was eaten"
    )
    on_diet: StrictBool = Field(
        ..., alias="onDiet", description="Whether the meal conforms to the diet"
    )

    @field_validator("consumed_at", mode="before")
    @classmethod
    def require_iso_string(cls, v):
        """Only ISO-8601 date-time strings are accepted on the wire"""
        if isinstance(v, datetime):
            return v
        if isinstance(v, str):
            return parse_iso_datetime(v)
        raise ValueError("datetime must be an ISO-8601 date-time string")


class MealResponse(BaseModel):
    """Schema for a stored meal"""

    id: UUID
    user_id: str
    name: str
    description: Optional[str] = None
    consumed_at: datetime = Field(..., serialization_alias="datetime")
    on_diet: bool
    created_at: datetime
    updated_at: datetime


class MealListResponse(BaseModel):
    """All meals of the requesting owner, oldest record first"""

    meals: List[MealResponse]


class MealSummaryResponse(BaseModel):
    """Diet adherence statistics for the requesting owner"""

    total: int = Field(..., ge=0)
    onDietMeals: int = Field(..., ge=0)
    offDietMeals: int = Field(..., ge=0)
    bestSequenceOfOnDietMeals: int = Field(..., ge=0)
