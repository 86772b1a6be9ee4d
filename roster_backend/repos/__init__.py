"""File-backed repositories."""

from roster_backend.repos.team_data_repo import TeamDataRepo

__all__ = ["TeamDataRepo"]
