# core.config.py

from dataclasses import dataclass, field
from typing import List, Tuple

@dataclass
class optionsConfig:
    export_model_flag: bool = True
    partition_mode: str = "uniform"      # "uniform", "weighted"
    skip_3d_build: bool = False          # If True, only compute the lattice (no CAD solids - useful if cadquery is slow/failing)

@dataclass
class TowerDefaults:
    height: float = 300.0
    base_radius: float = 60.0
    top_radius: float = 5.0
    section_count: int = 6
    strut_count: int = 24
    ring_count: int = 4                  # rings per section
    strut_radius: float = 0.5
    show_rings: bool = True
    twist_angle: float = 50.0            # degrees, applied to every section
    auto_waist: bool = True
    waist_radius: float = 20.0
    waist_position: float = 0.5

@dataclass
class EvaluatorSettings:
    waist_denominator_tol: float = 1e-4  # absolute
    ring_tube_factor: float = 0.8        # ring tube radius = strut_radius * factor
    min_member_length: float = 1e-9

@dataclass
class ControlRanges:
    # (min, max, step) for the live demo sliders
    height: Tuple[float, float, float] = (50, 300, 1)
    base_radius: Tuple[float, float, float] = (10, 80, 1)
    top_radius: Tuple[float, float, float] = (5, 60, 1)
    section_count: Tuple[float, float, float] = (1, 12, 1)
    twist_angle: Tuple[float, float, float] = (10, 180, 1)
    waist_radius: Tuple[float, float, float] = (5, 50, 0.5)
    waist_position: Tuple[float, float, float] = (0.1, 0.9, 0.01)
    strut_count: Tuple[float, float, float] = (6, 48, 2)
    ring_count: Tuple[float, float, float] = (2, 20, 1)
    strut_radius: Tuple[float, float, float] = (0.2, 2, 0.1)

@dataclass
class PlotSettings:
    profile_resolution: int = 101
    strut_color: str = "#c0c0c0"
    ring_color: str = "#a0a0a0"
    waist_color: str = "tab:red"
    elev: float = 15
    azim: float = -60
    figsize: Tuple[float, float] = (8, 10)
    section_colors: List[str] = field(default_factory=lambda: ['b', 'g', 'r', 'c', 'm', 'y', 'k'])
