#!/usr/bin/env python3
"""
Example: compare path lengths of the three orderings on one CSV snapshot.

- Load a CSV with x, y, z columns
- Sweep cluster counts and slice counts
- Write a summary table of path lengths and timings

Usage:
  python examples/run_benchmark_orderings.py path/to/points.csv
"""

from __future__ import annotations

import sys
import time
from dataclasses import asdict

import pandas as pd

from pointorder import ClusterParams, PointOrdering3D


def main(csv_path: str) -> None:
    df = pd.read_csv(csv_path)
    eng = PointOrdering3D(df)
    params = ClusterParams(seed=0)

    runs = [("nearest", {})]
    runs += [("cluster", {"cluster_count": k, "params": params}) for k in (4, 8, 16)]
    runs += [("contour", {"axis": "z", "slice_count": s}) for s in (5, 10, 20)]

    rows = []
    for method, kwargs in runs:
        t0 = time.time()
        ordered = eng.order(method, **kwargs)
        rows.append({
            "method": method,
            "cluster_count": kwargs.get("cluster_count"),
            "slice_count": kwargs.get("slice_count"),
            "time_s": time.time() - t0,
            "path_length": eng.path_length(ordered),
            "params": asdict(params) if method == "cluster" else None,
        })

    out = pd.DataFrame(rows)
    out.to_csv("ordering_summary.csv", index=False)
    print(out.to_string(index=False))
    print("Wrote ordering_summary.csv")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        raise SystemExit(2)
    main(sys.argv[1])
