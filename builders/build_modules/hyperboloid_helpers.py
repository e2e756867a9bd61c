# builders/build_modules/hyperboloid_helpers.py

import math
from typing import List, Tuple

import numpy as np

from core.types import Section, StrutSegment, RingSpec, WaistGeometry, Point3

from core.config import EvaluatorSettings
evaluator = EvaluatorSettings()

# -----------------------------------------
# Radius of the ruled surface
# -----------------------------------------

def radius_at_height(t: float, a: float, b: float, phi: float) -> float:
    """
    Radius of the straight ruling line at normalized height t.

    A strut runs from radius a (t=0) to radius b (t=1) while its azimuth
    advances by phi. The horizontal distance from the axis is

        r^2(t) = (1-t)^2 a^2 + t^2 b^2 + 2 (1-t) t a b cos(phi)

    which does not depend on the start azimuth, so every strut of the section
    passes through the same circle at height t.
    """
    cos_phi = math.cos(phi)
    r_sq = (1 - t) * (1 - t) * a * a + t * t * b * b + 2 * (1 - t) * t * a * b * cos_phi
    # cancellation near t=0 / t=1 can leave a tiny negative value
    return math.sqrt(max(0.0, r_sq))


def radius_profile(t_values, a: float, b: float, phi: float) -> np.ndarray:
    """Vectorised radius_at_height for an array of normalized heights."""
    t = np.asarray(t_values, dtype=float)
    r_sq = (1 - t) ** 2 * a * a + t ** 2 * b * b + 2 * (1 - t) * t * a * b * np.cos(phi)
    return np.sqrt(np.maximum(0.0, r_sq))

# -----------------------------------------
# Waist (minimum radius)
# -----------------------------------------

def calculate_waist_geometry(a: float, b: float, phi: float) -> WaistGeometry:
    """
    Position and radius of the narrowest point of a section.

    r^2(t) is an upward-opening quadratic in t; its vertex is at

        t = (a^2 + a b cos(phi)) / (a^2 + b^2 + 2 a b cos(phi))

    Clamping t to [0, 1] gives the minimum over the closed interval. A
    vanishing denominator (a == b, phi == 180 deg collapses the section
    through the axis) returns the midpoint with the mean radius.
    """
    cos_phi = math.cos(phi)
    denominator = a * a + b * b + 2 * a * b * cos_phi

    if abs(denominator) < evaluator.waist_denominator_tol:
        return WaistGeometry(waist_position=0.5, waist_radius=(a + b) / 2)

    t = (a * a + a * b * cos_phi) / denominator
    t = min(1.0, max(0.0, t))

    return WaistGeometry(waist_position=t, waist_radius=radius_at_height(t, a, b, phi))


def section_waist(section: Section) -> WaistGeometry:
    return calculate_waist_geometry(section.bottom_radius, section.top_radius, abs(section.twist_radians))

# -----------------------------------------
# Struts
# -----------------------------------------

def _point_on_circle(radius: float, y: float, angle: float) -> Point3:
    return (radius * math.cos(angle), y, radius * math.sin(angle))


def strut_endpoints(section: Section, strut_index: int, strut_count: int) -> Tuple[StrutSegment, StrutSegment]:
    """
    The two ruling lines through angular position strut_index.
    Both start at the same bottom point; line A ends at theta + phi and
    line B at theta - phi, one strut from each family of the doubly-ruled
    surface.
    """
    n = max(1, int(strut_count))
    theta = 2 * math.pi * strut_index / n
    phi = section.twist_radians

    start = _point_on_circle(section.bottom_radius, section.bottom_height, theta)
    end_a = _point_on_circle(section.top_radius, section.top_height, theta + phi)
    end_b = _point_on_circle(section.top_radius, section.top_height, theta - phi)

    line_a = StrutSegment(start=start, end=end_a, section_index=section.index, strut_index=strut_index, family=1)
    line_b = StrutSegment(start=start, end=end_b, section_index=section.index, strut_index=strut_index, family=-1)
    return line_a, line_b

# -----------------------------------------
# Rings
# -----------------------------------------

def sample_rings(section: Section, ring_count: int, is_first: bool) -> List[RingSpec]:
    """
    ring_count + 1 evenly spaced rings along the section. The bottom ring
    coincides with the top ring of the section below, so it is only kept
    for the first section.
    """
    n = max(1, int(ring_count))
    phi = abs(section.twist_radians)
    rings: List[RingSpec] = []
    for i in range(n + 1):
        if i == 0 and not is_first:
            continue
        t = i / n
        rings.append(RingSpec(
            radius=radius_at_height(t, section.bottom_radius, section.top_radius, phi),
            height=section.bottom_height + t * section.height,
            section_index=section.index,
        ))
    return rings
