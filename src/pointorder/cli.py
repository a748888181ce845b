# cli.py — CLI for ordering 3D point sets (nearest / cluster / contour)
from __future__ import annotations
import argparse
import json
import sys

import pandas as pd

from .cluster import ClusterParams
from .ordering import METHODS, PointOrdering3D


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="pointorder",
        description="Order 3D points into a short travel sequence (greedy nearest-neighbor, "
                    "cluster-then-chain, or axis-sliced contours)."
    )

    ap.add_argument("--input", required=True, help="CSV with columns x,y,z (extra columns are kept)")
    ap.add_argument("--output", default=None, help="Write the reordered CSV here")
    ap.add_argument("--plot", default=None, help="Save a 3D plot of the ordered path (e.g. path.pdf)")
    ap.add_argument("--method", choices=METHODS, default="nearest",
                    help="Ordering strategy (default: nearest).")

    # -------- cluster options --------
    ap.add_argument("--clusters", type=int, default=8,
                    help="Target cluster count for --method cluster (clamped to the number of points).")
    ap.add_argument("--max-iters", type=int, default=ClusterParams.max_iters,
                    help="Maximum Lloyd iterations (default 8).")
    ap.add_argument("--convergence-thr", type=float, default=ClusterParams.convergence_thr_sq,
                    help="Squared centroid movement below which clustering stops (default 0.1).")
    ap.add_argument("--seed", type=int, default=None, help="Seed for centroid sampling.")

    # -------- contour options --------
    ap.add_argument("--axis", choices=["x", "y", "z"], default="z",
                    help="Slicing axis for --method contour (default z).")
    ap.add_argument("--slices", type=int, default=10,
                    help="Number of slices for --method contour (default 10).")

    ap.add_argument("--quiet", action="store_true", help="Only print the JSON summary.")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        if args.clusters < 1:
            print(f"[warn] --clusters {args.clusters} < 1; using 1.", file=sys.stderr)
        if args.slices < 1:
            print(f"[warn] --slices {args.slices} < 1; using 1.", file=sys.stderr)

        df = pd.read_csv(args.input)
        eng = PointOrdering3D(df, verbose=not args.quiet)
        if eng.points.shape[0] == 0:
            print("[warn] input contains no points.", file=sys.stderr)

        if args.method == "cluster":
            params = ClusterParams(max_iters=args.max_iters,
                                   convergence_thr_sq=args.convergence_thr,
                                   seed=args.seed)
            if args.clusters > len(df) and len(df) > 0:
                print(f"[warn] --clusters {args.clusters} > {len(df)} points; using {len(df)}.",
                      file=sys.stderr)
            ordered = eng.by_cluster(args.clusters, params=params)
        elif args.method == "contour":
            ordered = eng.by_contour(args.axis, args.slices)
        else:
            ordered = eng.by_nearest()

        if args.output:
            ordered.to_csv(args.output, index=False)
        if args.plot:
            from .plotting import plot_path_3d
            plot_path_3d(eng.points, eng.last_order, args.plot,
                         title=f"{args.method} order", labels=eng.last_labels)

        result = {
            "method": args.method,
            "n_points": int(len(ordered)),
            "path_length_input": eng.path_length(),
            "path_length_ordered": eng.path_length(ordered),
            "output": args.output,
            "plot": args.plot,
        }
        print(json.dumps(result, indent=2))

    except Exception as e:
        print(f"[ERROR] {type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
