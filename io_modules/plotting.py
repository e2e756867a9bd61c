# io_modules/plotting.py

import math
import matplotlib.pyplot as plt
import numpy as np

import builders.build_modules.general_helpers as helpers
from builders.build_modules.hyperboloid_helpers import radius_profile
from core.types import BuildReport

from core.config import PlotSettings
plot_cfg = PlotSettings()

def _section_color(index: int) -> str:
    return plot_cfg.section_colors[index % len(plot_cfg.section_colors)]

def plot_tower_3d(report: BuildReport, color_by_section: bool = False, projection: str = "persp", ax=None):
    """
    Wireframe view of the lattice. The tower's vertical axis (y) is drawn as
    the matplotlib z axis.
    Returns: matplotlib Figure
    """
    geometry = report.geometry
    if ax is None:
        fig = plt.figure(figsize=plot_cfg.figsize)
        ax = fig.add_subplot(111, projection='3d')
    else:
        fig = ax.figure
        ax.clear()

    for strut in geometry.struts:
        color = _section_color(strut.section_index) if color_by_section else plot_cfg.strut_color
        ax.plot(
            [strut.start[0], strut.end[0]],
            [strut.start[2], strut.end[2]],
            [strut.start[1], strut.end[1]],
            '-', color=color, lw=0.8,
        )

    angles = np.linspace(0, 2 * np.pi, 64)
    for ring in geometry.rings:
        ax.plot(
            ring.radius * np.cos(angles),
            ring.radius * np.sin(angles),
            np.full_like(angles, ring.height),
            '-', color=plot_cfg.ring_color, lw=1.2,
        )

    spec = report.spec
    if geometry.struts:
        points = [s.start for s in geometry.struts] + [s.end for s in geometry.struts]
        r_max = max(1.0, helpers.find_max_radius(points))
        z_min, z_max = helpers.find_min_y(points), helpers.find_max_y(points)
    else:
        r_max, z_min, z_max = 1.0, 0.0, spec.height
    ax.set_xlim(-r_max, r_max)
    ax.set_ylim(-r_max, r_max)
    ax.set_zlim(z_min, z_max)
    ax.set_box_aspect((2 * r_max, 2 * r_max, max(1e-6, z_max - z_min)))

    ax.set_title(f"Tower: {spec.section_count} sections, {spec.strut_count} struts, twist {spec.twist_angle:g}°")
    ax.set_xlabel("X")
    ax.set_ylabel("Z")
    ax.set_zlabel("Height")
    try:
        ax.set_proj_type(projection)  # "persp" or "ortho"
    except ValueError:
        pass
    ax.view_init(elev=plot_cfg.elev, azim=plot_cfg.azim)
    return fig

def plot_radius_profile(report: BuildReport, resolution: int = None, ax=None):
    """
    Radius against height for every section, with the waist of each section
    marked. Both flanks of the profile are drawn so the silhouette reads
    like the tower.
    Returns: matplotlib Figure
    """
    n = int(resolution or plot_cfg.profile_resolution)
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 8))
    else:
        fig = ax.figure
        ax.clear()

    t = np.linspace(0.0, 1.0, max(2, n))
    for section, waist in zip(report.geometry.sections, report.section_waists):
        phi = abs(section.twist_radians)
        r = radius_profile(t, section.bottom_radius, section.top_radius, phi)
        y = section.bottom_height + t * section.height
        color = _section_color(section.index)
        ax.plot(r, y, '-', color=color, lw=1.2, label=f"Section {section.index + 1}")
        ax.plot(-r, y, '-', color=color, lw=1.2)

        waist_y = section.bottom_height + waist.waist_position * section.height
        ax.plot([waist.waist_radius, -waist.waist_radius], [waist_y, waist_y], 'x',
                color=plot_cfg.waist_color, ms=6)

    for ring in report.geometry.rings:
        ax.plot([-ring.radius, ring.radius], [ring.height, ring.height], ':', color=plot_cfg.ring_color, lw=0.8)

    ax.set_title("Section radius profile")
    ax.set_xlabel("Radius")
    ax.set_ylabel("Height")
    ax.grid(True, alpha=0.3)
    ax.set_aspect('equal', adjustable='datalim')
    if len(report.geometry.sections) <= 12:
        ax.legend(loc='center left', bbox_to_anchor=(1, 0.5), fontsize=8)
    fig.tight_layout()
    return fig

def plot_tower_footprint(report: BuildReport, cols: int = 3):
    """
    Plan view of each section: bottom circle, top circle, waist circle and
    the strut projections.
    Returns: matplotlib Figure (None if there is nothing to plot)
    """
    sections = report.geometry.sections
    if not sections:
        print("No sections found to plot.")
        return None

    cols = max(1, int(cols))
    rows = math.ceil(len(sections) / cols)
    fig, axes = plt.subplots(rows, cols, figsize=(4 * cols, 4 * rows), squeeze=False)

    for ax in axes.flat[len(sections):]:
        ax.set_axis_off()

    for section, waist, ax in zip(sections, report.section_waists, axes.flat):
        for radius, style in ((section.bottom_radius, '-'), (section.top_radius, '--'), (waist.waist_radius, ':')):
            pts = helpers.create_circle_of_radius(radius)
            ax.plot([p[0] for p in pts], [p[1] for p in pts], style, color='k', lw=1.0)

        for strut in report.geometry.struts:
            if strut.section_index != section.index:
                continue
            ax.plot([strut.start[0], strut.end[0]], [strut.start[2], strut.end[2]],
                    '-', color=_section_color(section.index), lw=0.5, alpha=0.7)

        ax.set_title(f"Section {section.index + 1} (twist {math.degrees(section.twist_radians):+.0f}°)")
        ax.set_aspect('equal')
        ax.grid(True, alpha=0.3)

    fig.suptitle("Section footprints", y=0.98)
    fig.tight_layout()
    return fig
