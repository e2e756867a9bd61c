import csv, ast
from typing import Any, Dict, List

def _parse_cell(v: str) -> Any:
    if v is None:
        return None
    s = str(v).strip()
    if s == "":
        return None
    low = s.lower()
    if low == "none":
        return None
    if low in ("true", "false"):
        return low == "true"
    # try literal (numbers, lists, tuples, etc.)
    try:
        return ast.literal_eval(s)
    except (ValueError, SyntaxError):
        return s  # fallback: raw string

def read_param_rows_csv(csv_path: str) -> List[Dict[str, Any]]:
    """
    Reads a 'one-tower-per-row' CSV.
    Returns a list of dictionaries (column_name -> parsed_value).
    Empty cells are dropped so the tower defaults apply.
    """
    rows: List[Dict[str, Any]] = []
    with open(csv_path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        if not reader.fieldnames:
            raise ValueError(f"CSV '{csv_path}' has no header row")
        for raw_row in reader:
            row = {k.strip(): _parse_cell(v) for k, v in raw_row.items() if k is not None}
            row = {k: v for k, v in row.items() if v is not None}
            if row:
                rows.append(row)
    return rows
