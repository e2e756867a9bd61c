"""Build hyperboloid lattice towers and export models, tables and plots.

Towers come either from a CSV (one tower per row, columns named after the
TowerSpec fields or their camelCase panel names, plus an optional
'Tower ID') or from the defaults with URL-style overrides.

Example:

python generate_models.py --csv datasets/towers.csv --plot-tower --plot-profile

python generate_models.py --query "?height=250&twistAngle=40&sectionCount=4" --export-type STEP
"""

from __future__ import annotations
import argparse

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from typing import Any, Dict, List, Optional

from core.types import RunOptions, TowerSpec, BuildReport
from core.generate_geometry import generate_geometry, generate_model
from core.param_builder import (
    build_spec_from_row,
    default_spec,
    apply_query_params,
    validate_tower_spec,
)

from io_modules.exporting import export, export_plot
from io_modules.plotting import (
    plot_tower_3d,
    plot_radius_profile,
    plot_tower_footprint,
)
from io_modules.read_csv import read_param_rows_csv
from io_modules.write_output_csv import (
    export_geometry_tables,
    tower_metrics,
    write_tower_metrics_csv,
)

from core.config import optionsConfig

options = optionsConfig()

CSV_PATH = None
ID_COL = "Tower ID"

def build_tower(spec: TowerSpec, tower_id: str, run: RunOptions,
                model_folder: str = "tower_models",
                tables_folder: str = "tower_tables",
                plots_folder: str = "tower_plots") -> BuildReport:
    report = generate_geometry(spec)
    print(f"  sections={len(report.geometry.sections)} struts={len(report.geometry.struts)} "
          f"rings={len(report.geometry.rings)} waist r={report.waist.waist_radius:.3f} "
          f"at t={report.waist.waist_position:.3f}")

    # ---- Export model
    if run.export_model and not options.skip_3d_build:
        generate_model(report)
        print(f"Exporting 3D Model as {run.ch_export_type}...")
        export(
            report.model3d.threeD_model,
            title=tower_id,
            overwrite=run.overwrite,
            directory=run.directory,
            export_type=run.ch_export_type,
            folder=model_folder,
        )

    # ---- Optional: strut/ring tables
    if run.export_tables:
        export_geometry_tables(report.geometry, title=tower_id, directory=run.directory, folder=tables_folder)

    # ---- Optional: plots
    if run.plot_tower:
        fig = plot_tower_3d(report)
        export_plot(fig, title=f"{tower_id}_3d", directory=run.directory, folder=plots_folder, overwrite=run.overwrite)
        plt.close(fig)
    if run.plot_profile:
        fig = plot_radius_profile(report)
        export_plot(fig, title=f"{tower_id}_profile", directory=run.directory, folder=plots_folder, overwrite=run.overwrite)
        plt.close(fig)
    if run.plot_footprint:
        fig = plot_tower_footprint(report)
        if fig is not None:
            export_plot(fig, title=f"{tower_id}_footprint", directory=run.directory, folder=plots_folder, overwrite=run.overwrite)
            plt.close(fig)

    return report

def generate_towers(csv_path: str, run: RunOptions, query: Optional[str] = None,
                    partition_mode: Optional[str] = None) -> Dict[str, BuildReport]:
    rows = read_param_rows_csv(csv_path)
    reports: Dict[str, BuildReport] = {}
    metrics_by_id: Dict[str, Dict[str, Any]] = {}

    for i, row in enumerate(rows, start=1):
        tower_id = str(row.get(ID_COL) or f"row_{i}")
        spec = build_spec_from_row(row, partition_mode=partition_mode)
        if query:
            spec = validate_tower_spec(apply_query_params(spec, query))

        print(f"[{i}/{len(rows)}] Building {tower_id} ({spec.partition_mode})")
        report = build_tower(spec, tower_id, run)
        reports[tower_id] = report
        metrics_by_id[tower_id] = tower_metrics(report)

    write_tower_metrics_csv(csv_path, metrics_by_id, id_col=ID_COL)
    return reports

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate hyperboloid lattice tower models."
    )
    parser.add_argument("--csv", default=CSV_PATH, help="CSV with one tower per row (defaults are used if omitted).")
    parser.add_argument(
        "--query",
        help="URL-style overrides, e.g. '?height=250&twistAngle=40'.",
    )
    parser.add_argument(
        "--name",
        default="tower",
        help="File stem when building a single tower without a CSV.",
    )
    parser.add_argument(
        "--weighted",
        action="store_true",
        help="Use progressively shorter sections towards the top.",
    )
    parser.add_argument(
        "--directory",
        default=".",
        help="Root directory for all outputs.",
    )
    parser.add_argument(
        "--export-type",
        default="stl",
        choices=("stl", "STEP"),
        help="CAD export format (default: %(default)s).",
    )
    parser.add_argument("--no-model", action="store_true", help="Skip building/exporting CAD solids.")
    parser.add_argument("--tables", action="store_true", help="Write strut/ring CSV tables.")
    parser.add_argument("--plot-tower", action="store_true", help="Export a 3D wireframe plot.")
    parser.add_argument("--plot-profile", action="store_true", help="Export the radius profile plot.")
    parser.add_argument("--plot-footprint", action="store_true", help="Export per-section plan views.")
    parser.add_argument("--no-overwrite", action="store_true", help="Ask before overwriting existing files.")
    return parser.parse_args(argv)

def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    run = RunOptions(
        export_model=options.export_model_flag and not args.no_model,
        export_tables=args.tables,
        plot_tower=args.plot_tower,
        plot_profile=args.plot_profile,
        plot_footprint=args.plot_footprint,
        overwrite=not args.no_overwrite,
        ch_export_type=args.export_type,
        directory=args.directory,
    )

    partition_mode = "weighted" if args.weighted else None
    if args.csv:
        return generate_towers(args.csv, run=run, query=args.query, partition_mode=partition_mode)

    spec = default_spec(partition_mode=partition_mode)
    if args.query:
        spec = apply_query_params(spec, args.query)
    spec = validate_tower_spec(spec)
    print(f"Building {args.name} ({spec.partition_mode})")
    return {args.name: build_tower(spec, args.name, run)}

if __name__ == "__main__":
    main()
