from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Water:
    """Water surface tuning for a scene."""

    alpha: float = 0.7
    mix: float = 0.5
    amplitude_wave: float = 0.1
    water_animation_speed: float = 1.0
    angle_wave_speed: float = 1.0
    water_material: str = "water"
