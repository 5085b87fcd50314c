from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DayName = Literal[
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"
]


class StrictSection(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class FormattingRules(StrictSection):
    default_to_upper: bool = True


class RatingsRules(StrictSection):
    min_rating: float = 4.0


class CalendarRules(StrictSection):
    weekend_days: list[DayName] = Field(default_factory=lambda: ["sunday"])

    @field_validator("weekend_days", mode="before")
    @classmethod
    def _lower_day_names(cls, value: object) -> object:
        if isinstance(value, list):
            return [v.strip().lower() if isinstance(v, str) else v for v in value]
        return value


class DeferredRules(StrictSection):
    delay_seconds: float = Field(default=1.0, ge=0)


class Rules(StrictSection):
    schema_version: Literal[1] = 1
    project_slug: str = "utility-kit"
    formatting: FormattingRules = Field(default_factory=FormattingRules)
    ratings: RatingsRules = Field(default_factory=RatingsRules)
    calendar: CalendarRules = Field(default_factory=CalendarRules)
    deferred: DeferredRules = Field(default_factory=DeferredRules)
