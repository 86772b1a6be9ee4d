"""
Repository for saved team splits.

Layout under the data root:

  current/    — the latest split, exactly one file
  archiving/  — every previously current split
  history/    — history.jsonl, one line per save

File work runs in a worker thread; there is no locking. A new split is
written before the previous one is archived, so current/ is never empty
after the first save.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import shutil
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from roster_backend.config import settings
from roster_backend.models.team_data import HistoryRecord, SaveTeamDataRequest

logger = logging.getLogger(__name__)

HISTORY_FILE = "history.jsonl"


class TeamDataRepo:
    """Persists team splits as JSON files."""

    def __init__(self, root: Path | None = None) -> None:
        root = root if root is not None else settings.data_root
        self.current_dir = root / settings.DATA_CURRENT_DIR
        self.archiving_dir = root / settings.DATA_ARCHIVING_DIR
        self.history_dir = root / settings.DATA_HISTORY_DIR

    def _ensure_dirs(self) -> None:
        for d in (self.current_dir, self.archiving_dir, self.history_dir):
            d.mkdir(parents=True, exist_ok=True)

    async def save(self, req: SaveTeamDataRequest) -> str:
        """
        Write a split as the new current file. Returns the file name.

        Whatever was current moves to archiving once the new file is in place.
        """
        return await asyncio.to_thread(self._save, req)

    async def get_current(self) -> dict[str, Any] | None:
        """Return the current split, or None when nothing has been saved."""
        return await asyncio.to_thread(self._read_current)

    async def list_history(self) -> list[HistoryRecord]:
        """Return save history, oldest first. Malformed lines are skipped."""
        return await asyncio.to_thread(self._read_history)

    # -----------------------------------------------------------------------
    # Blocking file work, run off the event loop
    # -----------------------------------------------------------------------

    def _save(self, req: SaveTeamDataRequest) -> str:
        self._ensure_dirs()

        now = datetime.now(UTC)
        file_name = f"team-{now.strftime('%Y-%m-%dT%H-%M-%S-%fZ')}.json"
        previous = sorted(self.current_dir.glob("*.json"))

        payload = {
            "timestamp": now.strftime("%Y-%m-%dT%H:%M:%SZ"),
            "teams": req.teams,
            "metadata": req.metadata,
        }
        # Stage under a non-.json name so a failed write never shows up as current
        staged = self.current_dir / f"{file_name}.tmp"
        staged.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        os.replace(staged, self.current_dir / file_name)

        for old in previous:
            shutil.move(str(old), str(self.archiving_dir / old.name))
            logger.info("team_data: archived %s", old.name)

        record = HistoryRecord(
            timestamp=payload["timestamp"],
            file_name=file_name,
            details=f"saved {len(req.teams)} teams",
        )
        with (self.history_dir / HISTORY_FILE).open("a", encoding="utf-8") as f:
            f.write(record.model_dump_json(by_alias=True) + "\n")

        logger.info("team_data: saved %s (%d teams)", file_name, len(req.teams))
        return file_name

    def _read_current(self) -> dict[str, Any] | None:
        if not self.current_dir.is_dir():
            return None
        files = sorted(self.current_dir.glob("*.json"))
        if not files:
            return None
        return json.loads(files[-1].read_text(encoding="utf-8"))

    def _read_history(self) -> list[HistoryRecord]:
        path = self.history_dir / HISTORY_FILE
        if not path.exists():
            return []
        records = []
        for line in path.read_text(encoding="utf-8").splitlines():
            stripped = line.strip()
            if not stripped:
                continue
            try:
                records.append(HistoryRecord.model_validate_json(stripped))
            except ValueError:
                logger.warning("team_data: skipping malformed history line: %r", stripped[:200])
        return records
