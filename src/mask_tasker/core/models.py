"""Pydantic data models — config, month data files, submissions, and standings.

Field aliases follow the camelCase keys used in the JSON data files, so a
payload can be validated as-is and dumped back with ``by_alias=True``.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

MonthId = Union[str, int]


class Config(BaseModel):
    """The ``config.json`` file: which months exist, in display order."""

    model_config = ConfigDict(extra="allow")

    months: list[MonthId]


class Submission(BaseModel):
    """One team's score entry within a month."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    team_name: str = Field(alias="teamName")
    score: float


class MonthData(BaseModel):
    """A ``month<ID>.json`` file.

    Only ``submissions`` is required. Display fields are kept as text whatever
    their JSON type, so they never cause a month to be rejected.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    submissions: list[Submission]
    name: Optional[str] = None
    title: Optional[str] = None
    date: Optional[str] = None

    @field_validator("name", "title", "date", mode="before")
    @classmethod
    def display_fields_as_text(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        return value if isinstance(value, str) else str(value)

    @property
    def label(self) -> Optional[str]:
        return self.name or self.title


class MonthLoad(BaseModel):
    """Outcome of loading a single month: either ``data`` or ``error`` is set."""

    month_id: str
    data: Optional[MonthData] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, month_id: MonthId, data: MonthData) -> MonthLoad:
        return cls(month_id=str(month_id), data=data)

    @classmethod
    def err(cls, month_id: MonthId, error: Exception) -> MonthLoad:
        return cls(month_id=str(month_id), error=f"{type(error).__name__}: {error}")

    @property
    def is_ok(self) -> bool:
        return self.data is not None


class TeamStanding(BaseModel):
    """A team's place on the leaderboard."""

    position: int
    team_name: str
    total: float
