"""
Snapshot history.

Saved models, most recent first, keyed by creation timestamp in
milliseconds. Saving beyond the limit drops the oldest entries.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, TypeAdapter

from ..core.models import Model

logger = logging.getLogger(__name__)

DEFAULT_SNAPSHOT_LIMIT = 20


class Snapshot(BaseModel):
    """One saved model."""

    id: int
    name: str
    created_at: datetime
    model: Model


_SNAPSHOT_LIST = TypeAdapter(List[Snapshot])


class SnapshotHistory:
    """
    Bounded list of saved snapshots.

    Usage:
        history = SnapshotHistory()
        snap = history.save(model, "Option A")
        model = history.restore(snap.id)
    """

    def __init__(self, limit: int = DEFAULT_SNAPSHOT_LIMIT, snapshots: Optional[List[Snapshot]] = None):
        if limit < 1:
            raise ValueError(f"Snapshot limit must be at least 1, got {limit}")
        self.limit = limit
        self._snapshots: List[Snapshot] = list(snapshots or [])[:limit]

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def snapshots(self) -> List[Snapshot]:
        """Snapshots, most recent first."""
        return list(self._snapshots)

    def save(self, model: Model, name: str, created_at: Optional[datetime] = None) -> Snapshot:
        created_at = created_at or datetime.now(timezone.utc)
        snapshot_id = int(created_at.timestamp() * 1000)
        # Keep ids unique when two saves land in the same millisecond
        if self._snapshots and snapshot_id <= self._snapshots[0].id:
            snapshot_id = self._snapshots[0].id + 1

        snapshot = Snapshot(id=snapshot_id, name=name, created_at=created_at, model=model)
        self._snapshots.insert(0, snapshot)

        dropped = self._snapshots[self.limit:]
        del self._snapshots[self.limit:]
        if dropped:
            logger.debug(f"Evicted {len(dropped)} snapshot(s) beyond limit {self.limit}")
        logger.info(f"Saved snapshot '{name}'", extra={"snapshot_id": snapshot_id})
        return snapshot

    def get(self, snapshot_id: int) -> Snapshot:
        for snapshot in self._snapshots:
            if snapshot.id == snapshot_id:
                return snapshot
        raise KeyError(f"No snapshot with id {snapshot_id}")

    def restore(self, snapshot_id: int) -> Model:
        """The saved model, exactly as stored."""
        return self.get(snapshot_id).model

    def latest(self) -> Optional[Snapshot]:
        return self._snapshots[0] if self._snapshots else None

    def clear(self) -> None:
        self._snapshots.clear()

    # File persistence

    def dump(self, path: Path | str) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(_SNAPSHOT_LIST.dump_json(self._snapshots, indent=2))
        return path

    @classmethod
    def load(cls, path: Path | str, limit: int = DEFAULT_SNAPSHOT_LIMIT) -> SnapshotHistory:
        """Read a history file; a missing file gives an empty history."""
        path = Path(path)
        if not path.exists():
            return cls(limit=limit)
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return cls(limit=limit, snapshots=_SNAPSHOT_LIST.validate_python(data))
