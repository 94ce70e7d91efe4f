"""Load Elo engine definitions from TOML files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from domain.ratings.config_base import BaseSystemConfig, load_system_configs
from domain.ratings.elo.calculator import EngineParameters


@dataclass(frozen=True)
class EloSystemConfig(BaseSystemConfig):
    """Configuration for one tournament Elo system."""

    parameters: EngineParameters

    def as_config_json(self) -> dict[str, Any]:
        return {
            "initial_rating": self.parameters.initial_rating,
            "scale_factor": self.parameters.scale_factor,
            "calibrating_k_factor": self.parameters.calibrating_k_factor,
            "established_k_factor": self.parameters.established_k_factor,
            "calibration_games": self.parameters.calibration_games,
            "placement_score_decimals": self.parameters.placement_score_decimals,
            "win_max_position": self.parameters.win_max_position,
            "loss_min_position": self.parameters.loss_min_position,
            "draw_probability_pct": self.parameters.draw_probability_pct,
        }


def load_elo_system_configs(config_dir: Path) -> list[EloSystemConfig]:
    """Load and validate all Elo system TOML config files in a directory."""
    return load_system_configs(
        config_dir,
        _parse_elo_system_config,
        duplicate_name_label="elo",
    )


DEFAULT_SYSTEM_NAME = "tournament_elo_default"


def get_elo_system(config_dir: Path, name: str) -> EloSystemConfig:
    """Return the named system from a config directory."""
    systems = load_elo_system_configs(config_dir)
    for system in systems:
        if system.name == name:
            return system
    available = ", ".join(system.name for system in systems)
    raise KeyError(f"No elo system named {name!r} in {config_dir}. Available: {available}")


def _parse_elo_system_config(raw: dict[str, Any], file_path: Path) -> EloSystemConfig:
    system_raw = raw.get("system", {})
    elo_raw = raw.get("elo", {})

    name = str(system_raw.get("name", "")).strip()
    if not name:
        raise ValueError(f"{file_path}: [system].name is required")

    description_value = system_raw.get("description")
    description = None if description_value is None else str(description_value)

    parameters = EngineParameters(
        initial_rating=int(elo_raw.get("initial_rating", 1500)),
        scale_factor=float(elo_raw.get("scale_factor", 400.0)),
        calibrating_k_factor=float(elo_raw.get("calibrating_k_factor", 40.0)),
        established_k_factor=float(elo_raw.get("established_k_factor", 25.0)),
        calibration_games=int(elo_raw.get("calibration_games", 10)),
        placement_score_decimals=int(elo_raw.get("placement_score_decimals", 2)),
        win_max_position=int(elo_raw.get("win_max_position", 1)),
        loss_min_position=int(elo_raw.get("loss_min_position", 3)),
        draw_probability_pct=int(elo_raw.get("draw_probability_pct", 5)),
    )
    _validate_parameters(file_path=file_path, parameters=parameters)

    return EloSystemConfig(
        name=name,
        description=description,
        file_path=file_path,
        parameters=parameters,
    )


def _validate_parameters(*, file_path: Path, parameters: EngineParameters) -> None:
    if parameters.initial_rating < 0:
        raise ValueError(f"{file_path}: [elo].initial_rating must be >= 0")
    if parameters.scale_factor <= 0.0:
        raise ValueError(f"{file_path}: [elo].scale_factor must be > 0")
    if parameters.calibrating_k_factor <= 0.0:
        raise ValueError(f"{file_path}: [elo].calibrating_k_factor must be > 0")
    if parameters.established_k_factor <= 0.0:
        raise ValueError(f"{file_path}: [elo].established_k_factor must be > 0")
    if parameters.calibration_games < 0:
        raise ValueError(f"{file_path}: [elo].calibration_games must be >= 0")
    if parameters.placement_score_decimals < 0:
        raise ValueError(f"{file_path}: [elo].placement_score_decimals must be >= 0")
    if parameters.win_max_position < 1:
        raise ValueError(f"{file_path}: [elo].win_max_position must be >= 1")
    if parameters.loss_min_position <= parameters.win_max_position:
        raise ValueError(
            f"{file_path}: [elo].loss_min_position must be > win_max_position"
        )
    if not 0 <= parameters.draw_probability_pct < 100:
        raise ValueError(f"{file_path}: [elo].draw_probability_pct must be in [0, 100)")
