"""Configuration management."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Sampler settings pulled from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="POISSON_DISK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: Literal["console", "json"] = Field(
        default="console", description="Log renderer (console or json)"
    )

    # Resource limits
    max_domain_area: int = Field(
        default=4096 * 4096,
        gt=0,
        description="Largest width*height the sampler will allocate grids for",
    )
    max_steps: int = Field(
        default=1_000_000, gt=0, description="Safety cap for run-to-convergence loops"
    )

    # Generation defaults
    default_width: int = Field(default=300, gt=0, description="Default domain width")
    default_height: int = Field(default=300, gt=0, description="Default domain height")
    default_radius: int = Field(default=5, gt=0, description="Default minimum separation")
    default_num_samples: int = Field(
        default=5, gt=0, description="Default candidates tried per step"
    )
    steps_per_frame: int = Field(
        default=10, gt=0, description="Steps the visualizer runs per frame"
    )


settings = Settings()
