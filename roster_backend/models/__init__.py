"""
Pydantic models for the roster backend.

All data shapes defined here. No imports from repos or routes.
"""

from roster_backend.models.team_data import (
    DistributeRequest,
    DistributeResponse,
    HistoryRecord,
    SaveTeamDataRequest,
    SaveTeamDataResponse,
)

__all__ = [
    "DistributeRequest",
    "DistributeResponse",
    "SaveTeamDataRequest",
    "SaveTeamDataResponse",
    "HistoryRecord",
]
