# core/generate_geometry.py

from pytictoc import TicToc
t = TicToc()

from core.types import TowerSpec, BuildReport
from core.param_builder import resolve_waist
from builders.sections_build import generate_sections
from builders.lattice_build import generate_lattice
from builders.build_modules.hyperboloid_helpers import section_waist

from io_modules.progress_bar import start_progress_bar, stop_progress_bar, estimate_build_seconds

def generate_geometry(spec: TowerSpec) -> BuildReport:
    """
    Sections -> struts/rings -> waists. Pure; no solids are built here.
    """
    t.tic()
    sections = generate_sections(spec)
    geometry = generate_lattice(sections, spec)
    lattice_time = t.tocvalue()

    return BuildReport(
        spec=spec,
        geometry=geometry,
        waist=resolve_waist(spec),
        section_waists=[section_waist(s) for s in sections],
        timings={"lattice": lattice_time},
    )

def generate_model(report: BuildReport, show_progress: bool = True) -> BuildReport:
    """
    Build the CAD solids for an already computed report (in place) and return it.
    """
    # cadquery is only needed once solids are requested
    from builders.mesh_build import generate_3D_model

    n_members = len(report.geometry.struts) + len(report.geometry.rings)
    ct_estimate = estimate_build_seconds(n_members)

    print("Beginning Build")
    print(f"Estimated build time: {ct_estimate:.2f} seconds")

    t.tic()
    if show_progress:
        start_progress_bar(n_members, ct_estimate)
    try:
        report.model3d = generate_3D_model(report.geometry, report.spec)
    finally:
        if show_progress:
            stop_progress_bar()

    report.timings["model"] = t.tocvalue()
    print(f"Total build time: {report.timings['model']:.2f} seconds")
    return report
