"""Budget schemas."""

from pydantic import BaseModel, Field


class Budget(BaseModel):
    monthly_limit: float = Field(ge=0)
    alert_threshold: float = Field(ge=0, le=100)  # percent of monthly_limit
