"""
Model JSON exporter.

Exports a model as a self-describing record and restores it again:
{name, masses, trees, grid_module, materials, generated_at}.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from rich.console import Console

from ..core.materials import materials_for_ids
from ..core.models import Mass, Material, Model, Tree

logger = logging.getLogger(__name__)
console = Console()


class ExportRecord(BaseModel):
    """Serialized model plus the catalog entries it uses."""

    name: str
    grid_module: float
    masses: list[Mass] = Field(default_factory=list)
    trees: list[Tree] = Field(default_factory=list)
    materials: list[Material] = Field(default_factory=list)
    generated_at: datetime


def export_filename(name: str) -> str:
    """'My Model' -> 'My_Model.json'."""
    return re.sub(r"\s+", "_", name) + ".json"


def build_record(model: Model, name: str, generated_at: Optional[datetime] = None) -> ExportRecord:
    return ExportRecord(
        name=name,
        grid_module=model.grid_module,
        masses=list(model.masses),
        trees=list(model.trees),
        materials=materials_for_ids(model.material_ids()),
        generated_at=generated_at or datetime.now(timezone.utc),
    )


def restore_model(record: ExportRecord) -> Model:
    """
    Rebuild a model from an export record.

    Openings are taken as stored; wall containment is not re-checked.
    """
    return Model(
        grid_module=record.grid_module,
        masses=tuple(record.masses),
        trees=tuple(record.trees),
    )


class ModelJSONExporter:
    """
    Write and read model records as JSON files.

    Usage:
        exporter = ModelJSONExporter()
        path = exporter.export(model, "My Model", Path("output"))
        model = exporter.load_model(path)
    """

    def __init__(self, pretty: bool = True, quiet: bool = False):
        """
        Initialize exporter.

        Args:
            pretty: Whether to format JSON with indentation
            quiet: Suppress console output
        """
        self.pretty = pretty
        self.quiet = quiet

    def to_json(self, record: ExportRecord) -> str:
        return record.model_dump_json(indent=2 if self.pretty else None)

    def export(
        self,
        model: Model,
        name: str,
        output_dir: Path | str = Path("."),
        generated_at: Optional[datetime] = None,
    ) -> Path:
        """
        Export a model to <output_dir>/<name>.json.

        Returns:
            Path to exported file
        """
        output_path = Path(output_dir) / export_filename(name)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        record = build_record(model, name, generated_at)
        output_path.write_text(self.to_json(record), encoding="utf-8")

        logger.info(f"Exported {len(record.masses)} masses to {output_path}")
        if not self.quiet:
            console.print(f"[green]Exported model JSON: {output_path}[/green]")
        return output_path

    def load(self, path: Path | str) -> ExportRecord:
        """Parse an exported file."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return ExportRecord.model_validate(data)

    def load_model(self, path: Path | str) -> Model:
        return restore_model(self.load(path))
