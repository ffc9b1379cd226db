"""
Configuration management for Massing Studio.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .units import feet_to_meters


class Settings(BaseSettings):
    """
    Application settings.

    Can be configured via environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="MASSING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Paths
    data_dir: Path = Field(default=Path("data"))
    snapshot_file: Path = Field(default=Path("data/snapshots.json"))

    # Geometry defaults
    grid_module_m: float = Field(default=feet_to_meters(4), gt=0, description="Snapping quantum (4 ft)")
    default_height_m: float = Field(default=feet_to_meters(12), gt=0, description="Height of newly drawn masses (12 ft)")
    min_height_m: float = Field(default=feet_to_meters(8), gt=0, description="Push-pull height floor (8 ft)")

    # Active materials for new masses
    default_wall_material: str = Field(default="wood-insul")
    default_roof_material: str = Field(default="roof-insul")
    default_glazing_material: str = Field(default="glass-loE")

    # Proxy inputs
    heating_degree_days: float = Field(default=3000, description="HDD (°C-days/year)")
    cooling_degree_days: float = Field(default=800, description="CDD (°C-days/year)")
    lighting_power_density: float = Field(default=8.0, description="Installed lighting (W/m²)")

    # Site
    latitude: float = Field(default=40.7, ge=-90, le=90)
    longitude: float = Field(default=-74.0, ge=-180, le=180)

    # Persistence
    snapshot_limit: int = Field(default=20, gt=0, description="Saved snapshots kept, most recent first")

    def ensure_dirs(self) -> None:
        """Create all required directories."""
        for dir_path in [self.data_dir, self.snapshot_file.parent]:
            dir_path.mkdir(parents=True, exist_ok=True)


# Global settings instance
settings = Settings()
