# builders/build_modules/section_helpers.py

from typing import List

from core.types import Section


def compute_section_weights(section_count: int, mode: str = "uniform") -> List[int]:
    """
    Relative height of each section, bottom to top.
      uniform  -> [1, 1, ..., 1]
      weighted -> [n, n-1, ..., 1]  (progressively shorter sections towards the top)
    Unknown modes fall back to uniform.
    """
    n = max(1, int(section_count))
    if mode == "weighted":
        return [n - i for i in range(n)]
    return [1] * n


def compute_section_boundaries(height: float, weights: List[int]) -> List[float]:
    """
    Cumulative height boundaries [0, h1, ..., height] from the section weights.
    Each boundary is taken from the running integer weight sum, so the last
    boundary is height * 1.0 and cannot drift.
    """
    total = sum(weights)
    boundaries = [0.0]
    cumulative = 0
    for w in weights:
        cumulative += w
        boundaries.append(height * (cumulative / total))
    return boundaries


def interpolate_radius(base_radius: float, top_radius: float, fraction: float) -> float:
    # linear taper along total height
    return base_radius + (top_radius - base_radius) * fraction


def signed_twist(index: int, twist_radians: float) -> float:
    # even sections twist one way, odd sections the other
    return twist_radians if index % 2 == 0 else -twist_radians


def build_sections(
    height: float,
    base_radius: float,
    top_radius: float,
    twist_radians: float,
    weights: List[int],
) -> List[Section]:
    boundaries = compute_section_boundaries(height, weights)
    sections: List[Section] = []
    for i in range(len(weights)):
        bottom_y, top_y = boundaries[i], boundaries[i + 1]
        bottom_frac = bottom_y / height if height else 0.0
        top_frac = top_y / height if height else 1.0
        sections.append(Section(
            bottom_height=bottom_y,
            top_height=top_y,
            bottom_radius=interpolate_radius(base_radius, top_radius, bottom_frac),
            top_radius=interpolate_radius(base_radius, top_radius, top_frac),
            twist_radians=signed_twist(i, twist_radians),
            index=i,
        ))
    return sections


def section_heights(sections: List[Section]) -> List[float]:
    return [s.height for s in sections]

