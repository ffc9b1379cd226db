"""Export and persistence of model values."""

from .model_json import (
    ExportRecord,
    ModelJSONExporter,
    build_record,
    export_filename,
    restore_model,
)
from .snapshots import DEFAULT_SNAPSHOT_LIMIT, Snapshot, SnapshotHistory

__all__ = [
    "ExportRecord",
    "ModelJSONExporter",
    "build_record",
    "export_filename",
    "restore_model",
    "DEFAULT_SNAPSHOT_LIMIT",
    "Snapshot",
    "SnapshotHistory",
]
