# builders/sections_build.py

from typing import List

from core.types import TowerSpec, Section

from builders.build_modules.section_helpers import (
    compute_section_weights,
    build_sections,
)

def generate_sections(spec: TowerSpec) -> List[Section]:
    """
    Split the tower into stacked hyperboloid sections.

    Args:
        spec (TowerSpec): Tower parameters. spec.partition_mode selects
            equal-height ("uniform") or bottom-heavy ("weighted") sections.

    Returns:
        List[Section]: Sections ordered bottom to top, covering [0, spec.height].
    """
    weights = compute_section_weights(spec.section_count, spec.partition_mode)

    return build_sections(
        height=spec.height,
        base_radius=spec.base_radius,
        top_radius=spec.top_radius,
        twist_radians=spec.twist_radians,
        weights=weights,
    )
