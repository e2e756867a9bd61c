"""
Interactive tower demo

Rebuilds the lattice tower on every slider change and shows the 3D wireframe
next to the section radius profile. With "Auto waist" ticked the waist
sliders follow the formula-derived waist of the whole tower; untick it to
set the waist by hand.

Usage:
  python tower_live_demo.py
  python tower_live_demo.py "?height=250&twistAngle=40"

Requirements:
  - matplotlib, numpy
"""

from __future__ import annotations

import sys
from dataclasses import replace

import matplotlib.pyplot as plt
from matplotlib.widgets import Slider, CheckButtons

from core.types import TowerSpec
from core.generate_geometry import generate_geometry
from core.param_builder import default_spec, apply_query_params, validate_tower_spec, with_auto_waist
from io_modules.plotting import plot_tower_3d, plot_radius_profile

from core.config import ControlRanges

ranges = ControlRanges()

# slider label -> TowerSpec field
SLIDER_FIELDS = (
    ("Height", "height"),
    ("Base Radius", "base_radius"),
    ("Top Radius", "top_radius"),
    ("Sections", "section_count"),
    ("Twist Angle (°)", "twist_angle"),
    ("Waist Radius", "waist_radius"),
    ("Waist Position", "waist_position"),
    ("Strut Count", "strut_count"),
    ("Ring Count", "ring_count"),
    ("Strut Thickness", "strut_radius"),
)

WAIST_FIELDS = ("waist_radius", "waist_position")


def spec_from_values(current: TowerSpec, values: dict, flags: dict) -> TowerSpec:
    """New spec from slider values and checkbox states. Auto mode refills the waist."""
    updates = {}
    for _, name in SLIDER_FIELDS:
        if name not in values:
            continue
        val = values[name]
        updates[name] = int(round(val)) if name in ("section_count", "strut_count", "ring_count") else float(val)
    updates["show_rings"] = bool(flags.get("Show Rings", current.show_rings))
    updates["auto_waist"] = bool(flags.get("Auto Waist", current.auto_waist))
    weighted = flags.get("Weighted Sections", current.partition_mode == "weighted")
    updates["partition_mode"] = "weighted" if weighted else "uniform"

    spec = validate_tower_spec(replace(current, **updates))
    return with_auto_waist(spec)


def main():
    spec = default_spec()
    if len(sys.argv) > 1:
        spec = apply_query_params(spec, sys.argv[1])
    spec = with_auto_waist(validate_tower_spec(spec))

    fig = plt.figure(figsize=(13, 9))
    ax3d = fig.add_axes([0.02, 0.36, 0.55, 0.62], projection='3d')
    ax_prof = fig.add_axes([0.62, 0.40, 0.34, 0.56])

    state = {"spec": spec}

    def redraw():
        report = generate_geometry(state["spec"])
        ax_prof.set_axis_on()
        plot_tower_3d(report, ax=ax3d)
        plot_radius_profile(report, ax=ax_prof)
        fig.canvas.draw_idle()

    # --- Sliders ---
    slider_height = 0.025
    y0 = 0.30
    x0 = 0.15
    w = 0.45

    sliders = {}
    for i, (label, name) in enumerate(SLIDER_FIELDS):
        lo, hi, step = getattr(ranges, name)
        ax_s = fig.add_axes([x0, y0 - i * slider_height, w, slider_height])
        init = getattr(spec, name)
        init = min(hi, max(lo, init))
        sliders[name] = Slider(ax_s, label, lo, hi, valinit=init, valstep=step)

    ax_chk = fig.add_axes([0.72, 0.08, 0.2, 0.15])
    labels = ("Show Rings", "Auto Waist", "Weighted Sections")
    checks = CheckButtons(ax_chk, labels, (spec.show_rings, spec.auto_waist, spec.partition_mode == "weighted"))

    syncing = {"active": False}

    def sync_waist_sliders():
        # display the computed waist without triggering another rebuild
        syncing["active"] = True
        try:
            for name in WAIST_FIELDS:
                lo, hi, _ = getattr(ranges, name)
                val = getattr(state["spec"], name)
                sliders[name].set_val(min(hi, max(lo, val)))
        finally:
            syncing["active"] = False
        for name in WAIST_FIELDS:
            sliders[name].ax.set_alpha(0.5 if state["spec"].auto_waist else 1.0)

    def on_change(_):
        if syncing["active"]:
            return
        values = {name: s.val for name, s in sliders.items()}
        flags = dict(zip(labels, checks.get_status()))
        try:
            state["spec"] = spec_from_values(state["spec"], values, flags)
            if state["spec"].auto_waist:
                sync_waist_sliders()
            redraw()
        except ValueError as e:
            ax_prof.clear()
            ax_prof.text(0.05, 0.95, f"Error: {e}", transform=ax_prof.transAxes, va='top', ha='left', color='red')
            ax_prof.set_axis_off()
            fig.canvas.draw_idle()

    for s in sliders.values():
        s.on_changed(on_change)
    checks.on_clicked(on_change)

    sync_waist_sliders()
    redraw()
    plt.show()


if __name__ == "__main__":
    main()
