# create_experiment_set.py

import argparse
import os

import numpy as np
import pandas as pd
from scipy.stats import qmc

# ---------------------------
# Settings
# ---------------------------
SEED = 42
N_TOWERS = 12
P_WEIGHTED = 0.5                    # fraction of towers with weighted sections
MASTER_CSV_PATH = "datasets/tower_designs.csv"

# ---------------------------
# Parameter bounds
# ---------------------------
PARAM_RANGES = {
    "height":       (150, 300),
    "base_radius":  (30, 80),
    "top_radius":   (5, 30),
    "twist_angle":  (20, 90),
    "strut_radius": (0.3, 1.0),
}

INT_RANGES = {
    "section_count": (2, 8),
    "strut_count":   (12, 36),       # rounded to even
    "ring_count":    (2, 6),
}

SCALAR_DP = 2


def _scale_int(u: float, lo: int, hi: int) -> int:
    # map [0, 1) onto the inclusive integer range
    return int(min(hi, lo + np.floor(u * (hi - lo + 1))))


def sample_tower_designs(n: int = N_TOWERS, seed: int = SEED, p_weighted: float = P_WEIGHTED) -> pd.DataFrame:
    """
    Latin-hypercube sample of tower parameters, one tower per row.
    Columns match the TowerSpec field names plus 'Tower ID'.
    """
    if n < 1:
        raise ValueError("n must be at least 1")

    dim = len(PARAM_RANGES) + len(INT_RANGES)
    sampler = qmc.LatinHypercube(d=dim, seed=seed)
    U = sampler.random(n=n)

    lows = np.array([lo for lo, _ in PARAM_RANGES.values()], dtype=float)
    highs = np.array([hi for _, hi in PARAM_RANGES.values()], dtype=float)
    scaled = qmc.scale(U[:, :len(PARAM_RANGES)], lows, highs)

    rng = np.random.default_rng(seed)
    rows = []
    for i in range(n):
        row = {"Tower ID": f"T{i+1}"}
        for j, name in enumerate(PARAM_RANGES):
            row[name] = round(float(scaled[i, j]), SCALAR_DP)

        for j, (name, (lo, hi)) in enumerate(INT_RANGES.items()):
            val = _scale_int(U[i, len(PARAM_RANGES) + j], lo, hi)
            if name == "strut_count" and val % 2:
                val = val + 1 if val < hi else val - 1
            row[name] = val

        row["show_rings"] = True
        row["auto_waist"] = True
        row["partition_mode"] = "weighted" if rng.random() < p_weighted else "uniform"
        rows.append(row)

    cols_order = ["Tower ID"] + list(PARAM_RANGES) + list(INT_RANGES) + ["show_rings", "auto_waist", "partition_mode"]
    return pd.DataFrame(rows)[cols_order]


def main():
    parser = argparse.ArgumentParser(description="Sample a set of tower designs into a CSV.")
    parser.add_argument("--n", type=int, default=N_TOWERS, help="Number of towers (default: %(default)s).")
    parser.add_argument("--seed", type=int, default=SEED, help="Sampler seed (default: %(default)s).")
    parser.add_argument("--out", default=MASTER_CSV_PATH, help="Output CSV path (default: %(default)s).")
    args = parser.parse_args()

    df = sample_tower_designs(args.n, args.seed)
    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    df.to_csv(args.out, index=False)
    print(f"[designs] wrote {len(df)} towers to {args.out}")


if __name__ == "__main__":
    main()
