import csv
from dataclasses import replace

import matplotlib.pyplot as plt
import pandas as pd
import pytest

from core.generate_geometry import generate_geometry
from io_modules.read_csv import read_param_rows_csv, _parse_cell
from io_modules.write_output_csv import (
    tower_metrics,
    write_tower_metrics_csv,
    export_geometry_tables,
    struts_dataframe,
    rings_dataframe,
)
from io_modules.exporting import export, export_plot
from io_modules.progress_bar import estimate_build_seconds, estimated_members_done, _fmt_time, _render_line


def _write_csv(path, rows):
    with open(path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        writer.writerows(rows)


def test_parse_cell():
    assert _parse_cell("12") == 12
    assert _parse_cell("2.5") == 2.5
    assert _parse_cell("True") is True
    assert _parse_cell("none") is None
    assert _parse_cell("  ") is None
    assert _parse_cell("weighted") == "weighted"


def test_read_param_rows_drops_empty_cells(tmp_path):
    path = tmp_path / "towers.csv"
    _write_csv(path, [
        {"Tower ID": "A", "height": "200", "twist_angle": ""},
        {"Tower ID": "B", "height": "", "twist_angle": "30"},
    ])
    rows = read_param_rows_csv(str(path))
    assert rows == [
        {"Tower ID": "A", "height": 200},
        {"Tower ID": "B", "twist_angle": 30},
    ]


def test_read_param_rows_requires_header(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("")
    with pytest.raises(ValueError):
        read_param_rows_csv(str(path))


def test_tower_metrics(tower_spec):
    report = generate_geometry(tower_spec)
    metrics = tower_metrics(report)
    assert metrics["n_struts"] == 2 * 24 * 6
    assert metrics["n_rings"] == 25
    assert metrics["waist_radius"] == report.waist.waist_radius
    assert metrics["total_strut_length"] > 6 * tower_spec.height
    assert metrics["min_section_waist_radius"] <= tower_spec.base_radius
    assert metrics["min_section_height"] == pytest.approx(50.0)
    assert metrics["max_section_height"] == pytest.approx(50.0)


def test_tower_metrics_weighted_section_heights(tower_spec):
    """Weighted 6-section tower: weights 6..1 over a total of 21."""
    report = generate_geometry(replace(tower_spec, partition_mode="weighted"))
    metrics = tower_metrics(report)
    assert metrics["max_section_height"] == pytest.approx(300 * 6 / 21)
    assert metrics["min_section_height"] == pytest.approx(300 / 21)


def test_write_tower_metrics_csv(tmp_path, tower_spec):
    path = tmp_path / "towers.csv"
    _write_csv(path, [{"Tower ID": "A", "height": "300"}, {"Tower ID": "B", "height": "200"}])
    report = generate_geometry(tower_spec)

    out = write_tower_metrics_csv(str(path), {"A": tower_metrics(report)})
    assert out.endswith("towers_with_metrics.csv")

    df = pd.read_csv(out)
    assert list(df["Tower ID"]) == ["A", "B"]
    assert df.loc[0, "n_struts"] == 288
    assert df.loc[0, "waist_radius"] == pytest.approx(report.waist.waist_radius, abs=1e-6)
    assert pd.isna(df.loc[1, "waist_radius"])


def test_geometry_dataframes(tower_spec):
    geometry = generate_geometry(tower_spec).geometry
    struts = struts_dataframe(geometry)
    rings = rings_dataframe(geometry)
    assert len(struts) == len(geometry.struts)
    assert len(rings) == len(geometry.rings)
    assert set(struts["family"]) == {1, -1}
    assert rings["height"].is_monotonic_increasing


def test_export_geometry_tables(tmp_path, tower_spec):
    geometry = generate_geometry(tower_spec).geometry
    paths = export_geometry_tables(geometry, "demo", directory=str(tmp_path))
    assert len(pd.read_csv(paths["struts"])) == len(geometry.struts)
    assert len(pd.read_csv(paths["rings"])) == len(geometry.rings)


def test_export_plot(tmp_path):
    fig, ax = plt.subplots()
    ax.plot([0, 1], [0, 1])
    path = export_plot(fig, "line.png", directory=str(tmp_path), folder="plots", overwrite=True)
    plt.close(fig)
    assert path is not None
    assert (tmp_path / "plots" / "line.png").exists()


def test_export_plot_unsupported_type(tmp_path):
    fig = plt.figure()
    assert export_plot(fig, "x", export_type="bmp", directory=str(tmp_path)) is None
    plt.close(fig)


def test_export_rejects_model_without_export(tmp_path):
    assert export(object(), "nothing", directory=str(tmp_path), overwrite=True) is None


def test_progress_estimates():
    assert estimate_build_seconds(0) == 0.5
    assert estimate_build_seconds(1000) == pytest.approx(4.0)
    assert _fmt_time(75) == "01:15"
    assert _fmt_time(3725) == "01:02:05"


def test_progress_member_count_holds_before_last():
    """The bar never claims the final member before the build reports back."""
    assert estimated_members_done(1.0, 4.0, 100) == 25
    assert estimated_members_done(10.0, 4.0, 100) == 99
    assert estimated_members_done(1.0, 0.0, 100) == 99
    assert estimated_members_done(1.0, 4.0, 0) == 0


def test_progress_line_shows_members():
    line = _render_line(50, 100, 10, 2.0, 2.0)
    assert line.startswith("\r[#####-----]")
    assert "50/100 members" in line
    assert line.endswith("00:02<00:02")
