# builders/build_modules/threeD_helpers.py

import cadquery as cq

import builders.build_modules.general_helpers as helpers
from core.types import StrutSegment, RingSpec

from core.config import EvaluatorSettings
evaluator = EvaluatorSettings()

# vertical axis of the tower
UP = cq.Vector(0, 1, 0)
# -----------------------------------------

def create_strut(segment: StrutSegment, strut_radius: float):
    """
    Cylinder of strut_radius running from segment.start to segment.end.
    Returns None for zero-length segments.
    """
    length = helpers.segment_length(segment.start, segment.end)
    if length < evaluator.min_member_length:
        return None

    start = cq.Vector(*segment.start)
    direction = cq.Vector(*segment.end) - start

    return cq.Solid.makeCylinder(strut_radius, length, pnt=start, dir=direction)

def create_ring(ring: RingSpec, tube_radius: float):
    """
    Horizontal torus centred on the tower axis at ring.height.
    Returns None when the ring is too small to hold the tube.
    """
    if ring.radius <= tube_radius:
        return None

    centre = cq.Vector(0, ring.height, 0)
    return cq.Solid.makeTorus(ring.radius, tube_radius, pnt=centre, dir=UP)

def create_tower_model(struts: list[StrutSegment], rings: list[RingSpec], strut_radius: float):
    """
    Combine every strut and ring into one compound.
    Returns (workplane, n_struts, n_rings, skipped).
    """
    tube_radius = strut_radius * evaluator.ring_tube_factor

    solids = []
    n_struts, n_rings, skipped = 0, 0, 0

    for segment in struts:
        solid = create_strut(segment, strut_radius)
        if solid is None:
            skipped += 1
            continue
        solids.append(solid)
        n_struts += 1

    for ring in rings:
        solid = create_ring(ring, tube_radius)
        if solid is None:
            skipped += 1
            continue
        solids.append(solid)
        n_rings += 1

    if skipped:
        print(f"Skipped {skipped} degenerate member(s)")

    compound = cq.Compound.makeCompound(solids)
    model = cq.Workplane("XY").add(compound)

    return model, n_struts, n_rings, skipped
