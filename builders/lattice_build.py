# builders/lattice_build.py

from typing import List

from core.types import TowerSpec, Section, StrutSegment, RingSpec, TowerGeometry

from builders.build_modules.hyperboloid_helpers import (
    strut_endpoints,
    sample_rings,
)

def generate_struts(sections: List[Section], strut_count: int) -> List[StrutSegment]:
    struts: List[StrutSegment] = []
    for section in sections:
        for k in range(max(1, int(strut_count))):
            line_a, line_b = strut_endpoints(section, k, strut_count)
            struts.append(line_a)
            struts.append(line_b)
    return struts

def generate_rings(sections: List[Section], ring_count: int) -> List[RingSpec]:
    rings: List[RingSpec] = []
    for section in sections:
        rings.extend(sample_rings(section, ring_count, is_first=(section.index == 0)))
    return rings

def generate_lattice(sections: List[Section], spec: TowerSpec) -> TowerGeometry:
    """
    Evaluate every section of the tower.

    Struts are ordered by section, strut index, then family (A before B).
    Rings are only produced when spec.show_rings is set.
    """
    struts = generate_struts(sections, spec.strut_count)
    rings = generate_rings(sections, spec.ring_count) if spec.show_rings else []

    return TowerGeometry(
        sections=sections,
        struts=struts,
        rings=rings
    )
