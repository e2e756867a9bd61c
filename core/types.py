# core/types.py
import math
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Any

Point3 = Tuple[float, float, float]

@dataclass(frozen=True)
class TowerSpec:
    height: float
    base_radius: float
    top_radius: float
    section_count: int
    strut_count: int
    ring_count: int
    strut_radius: float
    show_rings: bool
    twist_angle: float                  # degrees, per section
    auto_waist: bool = True
    waist_radius: Optional[float] = None
    waist_position: Optional[float] = None
    partition_mode: str = "uniform"     # "uniform", "weighted"

    @property
    def twist_radians(self) -> float:
        return math.radians(self.twist_angle)

@dataclass(frozen=True)
class WaistGeometry:
    waist_position: float
    waist_radius: float

@dataclass(frozen=True)
class Section:
    bottom_height: float
    top_height: float
    bottom_radius: float
    top_radius: float
    twist_radians: float                # signed, alternates between sections
    index: int

    @property
    def height(self) -> float:
        return self.top_height - self.bottom_height

@dataclass(frozen=True)
class StrutSegment:
    start: Point3
    end: Point3
    section_index: int
    strut_index: int
    family: int                         # +1 -> end at theta + phi, -1 -> end at theta - phi

    @property
    def length(self) -> float:
        return math.dist(self.start, self.end)

@dataclass(frozen=True)
class RingSpec:
    radius: float
    height: float
    section_index: int

@dataclass
class TowerGeometry:
    sections: List[Section]
    struts: List[StrutSegment]
    rings: List[RingSpec]

@dataclass
class Model3D:
    threeD_model: Any
    n_struts: int = 0
    n_rings: int = 0
    skipped: int = 0

@dataclass
class RunOptions:
    export_model: bool = True
    export_tables: bool = False
    plot_tower: bool = False
    plot_profile: bool = False
    plot_footprint: bool = False
    directory: Optional[str] = None
    ch_export_type: str = "stl"
    overwrite: bool = True

@dataclass
class BuildReport:
    spec: TowerSpec
    geometry: TowerGeometry
    waist: WaistGeometry
    section_waists: List[WaistGeometry]
    model3d: Optional[Model3D] = None
    timings: Dict[str, float] = field(default_factory=dict)
