"""Team split routes — distribute a roster and persist the result."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from roster_backend.config import settings
from roster_backend.models.team_data import (
    DistributeRequest,
    DistributeResponse,
    HistoryRecord,
    SaveTeamDataRequest,
    SaveTeamDataResponse,
)
from roster_backend.repos.team_data_repo import TeamDataRepo
from roster_engine.kernel import actions
from roster_engine.kernel.snapshot import split_state
from roster_engine.kernel.store import create_store

router = APIRouter(prefix="/api", tags=["teams"])


def get_team_data_repo() -> TeamDataRepo:
    return TeamDataRepo()


@router.post("/teams/distribute", status_code=200)
async def distribute_teams(req: DistributeRequest) -> DistributeResponse:
    """
    Split a roster into teams.

    Names go through the same store the browser uses, so duplicates come
    back disambiguated ("Kim" twice → "Kim-1", "Kim-2").
    """
    store = create_store(history_limit=settings.HISTORY_LIMIT)
    store.dispatch(actions.set_total_members(len(req.members)))
    store.dispatch(actions.confirm_total_members())
    for name in req.members:
        store.dispatch(actions.add_member(name))
    store.dispatch(actions.set_team_count(req.team_count))
    store.dispatch(actions.confirm_team_count())

    state = store.get_state()
    if not state.is_team_count_confirmed:
        raise HTTPException(
            status_code=422,
            detail=f"teamCount must be between 1 and {len(req.members)}.",
        )

    strategy = req.strategy or settings.DEFAULT_STRATEGY
    snapshot = split_state(state, strategy)
    return DistributeResponse(teams=snapshot["teams"], strategy=strategy)


@router.post("/team-data", status_code=201)
async def save_team_data(
    req: SaveTeamDataRequest,
    repo: TeamDataRepo = Depends(get_team_data_repo),
) -> SaveTeamDataResponse:
    """Persist a finished split as the new current file."""
    file_name = await repo.save(req)
    return SaveTeamDataResponse(file_name=file_name)


@router.get("/team-data/current", status_code=200)
async def get_current_team_data(
    repo: TeamDataRepo = Depends(get_team_data_repo),
) -> dict[str, Any]:
    """Return the most recently saved split."""
    data = await repo.get_current()
    if data is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No team data saved yet.")
    return data


@router.get("/team-data/history", status_code=200)
async def get_team_data_history(
    repo: TeamDataRepo = Depends(get_team_data_repo),
) -> list[HistoryRecord]:
    """List every save, oldest first."""
    return await repo.list_history()
