"""Team split models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

Strategy = Literal["random", "balanced", "sequential"]


def _check_names(names: list[str], where: str) -> list[str]:
    cleaned = []
    for i, name in enumerate(names):
        stripped = name.strip()
        if not stripped:
            raise ValueError(f"{where}[{i}] must be a non-empty string")
        cleaned.append(stripped)
    return cleaned


class DistributeRequest(BaseModel):
    """What the client sends to POST /api/teams/distribute."""

    model_config = {"extra": "forbid", "populate_by_name": True}

    members: list[str] = Field(min_length=1)
    team_count: int = Field(alias="teamCount", ge=1)
    strategy: Strategy | None = None

    @field_validator("members")
    @classmethod
    def members_not_blank(cls, v: list[str]) -> list[str]:
        return _check_names(v, "members")


class DistributeResponse(BaseModel):
    """What the distribute endpoint returns."""

    teams: list[list[str]]
    strategy: Strategy


class SaveTeamDataRequest(BaseModel):
    """What the client sends to persist a finished split."""

    model_config = {"extra": "forbid"}

    teams: list[list[str]]
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("teams")
    @classmethod
    def teams_not_blank(cls, v: list[list[str]]) -> list[list[str]]:
        return [_check_names(team, f"teams[{i}]") for i, team in enumerate(v)]


class SaveTeamDataResponse(BaseModel):
    """What the save endpoint returns."""

    model_config = {"populate_by_name": True}

    file_name: str = Field(alias="fileName")


class HistoryRecord(BaseModel):
    """One line of the save history log."""

    model_config = {"populate_by_name": True}

    timestamp: str
    action: str = "SAVE_TEAM_DATA"
    file_name: str = Field(alias="fileName")
    details: str = ""
