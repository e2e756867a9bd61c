# io_modules/write_output_csv.py

import csv
import os
from typing import Dict, Optional, Any

import pandas as pd

from core.types import BuildReport, TowerGeometry
from builders.build_modules.section_helpers import section_heights

METRIC_COLUMNS = (
    "waist_position",
    "waist_radius",
    "min_section_waist_radius",
    "min_section_height",
    "max_section_height",
    "n_struts",
    "total_strut_length",
    "n_rings",
)

def tower_metrics(report: BuildReport) -> Dict[str, float]:
    geometry = report.geometry
    section_radii = [w.waist_radius for w in report.section_waists]
    heights = section_heights(geometry.sections)
    return {
        "waist_position": report.waist.waist_position,
        "waist_radius": report.waist.waist_radius,
        "min_section_waist_radius": min(section_radii) if section_radii else 0.0,
        "min_section_height": min(heights) if heights else 0.0,
        "max_section_height": max(heights) if heights else 0.0,
        "n_struts": len(geometry.struts),
        "total_strut_length": sum(s.length for s in geometry.struts),
        "n_rings": len(geometry.rings),
    }

def write_tower_metrics_csv(
    input_csv_path: str,
    metrics_by_id: Dict[str, Dict[str, Any]],
    out_csv_path: Optional[str] = None,
    id_col: str = "Tower ID",
) -> str:
    """
    Read the input tower CSV and write a copy with one extra column per metric.
    Values are pulled from `metrics_by_id[id]` where `id` is the value in `id_col`.
    Missing metrics are left blank.
    """
    # Decide output path
    if out_csv_path is None:
        out_csv_path = (
            input_csv_path[:-4] + "_with_metrics.csv"
            if input_csv_path.lower().endswith(".csv")
            else input_csv_path + "_with_metrics.csv"
        )

    # Read original rows
    with open(input_csv_path, "r", newline="") as f_in:
        reader = csv.DictReader(f_in)
        rows = list(reader)
        fieldnames = list(reader.fieldnames or [])

    for col in METRIC_COLUMNS:
        if col not in fieldnames:
            fieldnames.append(col)

    # Fill metrics
    for i, row in enumerate(rows, start=1):
        tid = row.get(id_col) or f"row_{i}"
        metrics = metrics_by_id.get(tid, {})
        for col in METRIC_COLUMNS:
            val = metrics.get(col)
            if val is None:
                row[col] = ""
            elif col.startswith("n_"):
                row[col] = str(int(val))
            else:
                row[col] = f"{float(val):.6f}"

    with open(out_csv_path, "w", newline="") as f_out:
        writer = csv.DictWriter(f_out, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)

    print(f"[metrics] wrote: {out_csv_path}")
    return out_csv_path

def struts_dataframe(geometry: TowerGeometry) -> pd.DataFrame:
    return pd.DataFrame([
        {
            "section": s.section_index,
            "strut": s.strut_index,
            "family": s.family,
            "x0": s.start[0], "y0": s.start[1], "z0": s.start[2],
            "x1": s.end[0], "y1": s.end[1], "z1": s.end[2],
            "length": s.length,
        }
        for s in geometry.struts
    ], columns=["section", "strut", "family", "x0", "y0", "z0", "x1", "y1", "z1", "length"])

def rings_dataframe(geometry: TowerGeometry) -> pd.DataFrame:
    return pd.DataFrame(
        [{"section": r.section_index, "height": r.height, "radius": r.radius} for r in geometry.rings],
        columns=["section", "height", "radius"],
    )

def export_geometry_tables(
    geometry: TowerGeometry,
    title: str,
    directory: Optional[str] = None,
    folder: str = "tower_tables",
) -> Dict[str, str]:
    """
    Write '<title>_struts.csv' and '<title>_rings.csv'. Returns the written paths.
    """
    out_dir = os.path.join(directory or os.getcwd(), folder)
    os.makedirs(out_dir, exist_ok=True)

    paths = {
        "struts": os.path.join(out_dir, f"{title}_struts.csv"),
        "rings": os.path.join(out_dir, f"{title}_rings.csv"),
    }
    struts_dataframe(geometry).to_csv(paths["struts"], index=False, float_format="%.6f")
    rings_dataframe(geometry).to_csv(paths["rings"], index=False, float_format="%.6f")

    print(f"[tables] wrote: {paths['struts']}, {paths['rings']}")
    return paths
