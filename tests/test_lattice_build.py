from dataclasses import replace

from builders.sections_build import generate_sections
from builders.lattice_build import generate_lattice, generate_struts, generate_rings


def _lattice(spec):
    return generate_lattice(generate_sections(spec), spec)


def test_shared_boundary_rings_not_duplicated(tower_spec):
    spec = replace(tower_spec, section_count=2, ring_count=4, show_rings=True)
    geometry = _lattice(spec)
    assert len(geometry.rings) == (4 + 1) + 4

    heights = [r.height for r in geometry.rings]
    assert all(h0 < h1 for h0, h1 in zip(heights, heights[1:]))


def test_rings_hidden(tower_spec):
    geometry = _lattice(replace(tower_spec, show_rings=False))
    assert geometry.rings == []
    assert len(geometry.struts) > 0


def test_two_struts_per_index_per_section(tower_spec):
    spec = replace(tower_spec, section_count=3, strut_count=8)
    geometry = _lattice(spec)
    assert len(geometry.struts) == 3 * 8 * 2


def test_strut_ordering(tower_spec):
    spec = replace(tower_spec, section_count=2, strut_count=3)
    struts = _lattice(spec).struts
    keys = [(s.section_index, s.strut_index, s.family) for s in struts]
    assert keys[:4] == [(0, 0, 1), (0, 0, -1), (0, 1, 1), (0, 1, -1)]
    assert keys[-1] == (1, 2, -1)


def test_struts_meet_at_section_boundaries(tower_spec):
    """Struts of the upper section start on the circle the lower section ends on."""
    spec = replace(tower_spec, section_count=2, strut_count=6)
    sections = generate_sections(spec)
    struts = generate_struts(sections, spec.strut_count)
    boundary = sections[0].top_height
    lower_tops = {round(s.end[1], 9) for s in struts if s.section_index == 0}
    upper_bottoms = {round(s.start[1], 9) for s in struts if s.section_index == 1}
    assert lower_tops == upper_bottoms == {round(boundary, 9)}


def test_minimum_counts(tower_spec):
    spec = replace(tower_spec, section_count=1, strut_count=1, ring_count=1)
    geometry = _lattice(spec)
    assert len(geometry.sections) == 1
    assert len(geometry.struts) == 2
    assert len(geometry.rings) == 2


def test_generate_rings_matches_ring_count(tower_spec):
    spec = replace(tower_spec, section_count=6, ring_count=4)
    rings = generate_rings(generate_sections(spec), spec.ring_count)
    assert len(rings) == 5 + 5 * 4
