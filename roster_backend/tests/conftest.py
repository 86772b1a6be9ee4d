"""
Pytest configuration and fixtures for backend tests.

Every test gets its own data and public directories under tmp_path.
"""

from __future__ import annotations

import httpx
import pytest

from roster_backend.main import create_app
from roster_backend.repos.team_data_repo import TeamDataRepo
from roster_backend.routes.team_data import get_team_data_repo


@pytest.fixture
def repo(tmp_path):
    return TeamDataRepo(root=tmp_path / "data")


@pytest.fixture
def public_dir(tmp_path):
    d = tmp_path / "public"
    d.mkdir()
    (d / "index.html").write_text('<html><body><div id="app"></div></body></html>', encoding="utf-8")
    (d / "app.js").write_text("console.log('roster');", encoding="utf-8")
    return d


@pytest.fixture
def app(repo, public_dir):
    app = create_app(public_dir=public_dir)
    app.dependency_overrides[get_team_data_repo] = lambda: repo
    return app


@pytest.fixture
async def client(app):
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
