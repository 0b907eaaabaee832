from __future__ import annotations

import argparse
import time
from typing import Any, Dict, List

import pandas as pd

from .composable_triples import composable_triple_stats
from .config import JobConfig, SweepConfig, load_sweep_config
from .count_monoids import count_monoids
from .count_semigroups import count_semigroups
from .monoid_acts import monoid_act_counts


def run_job(job: JobConfig, cfg: SweepConfig) -> Dict[str, Any]:
    t0 = time.perf_counter()
    row: Dict[str, Any] = {"kind": job.kind, "n": job.n, "param": None}
    if job.kind == "monoids":
        row["count"] = count_monoids(job.n, progress_every=cfg.progress_every)
        row["mean"] = None
    elif job.kind == "semigroups":
        row["count"] = count_semigroups(job.n, chunk_size=cfg.chunk_size)
        row["mean"] = None
    elif job.kind == "monoid_acts":
        counts = monoid_act_counts(job.n, int(job.sections))
        row["param"] = job.sections
        row["count"] = sum(counts)
        row["mean"] = sum(counts) / len(counts)
    elif job.kind == "composable_triples":
        stats = composable_triple_stats(job.n, int(job.objects))
        row["param"] = job.objects
        row["count"] = stats.triples
        row["mean"] = stats.average
    else:
        raise ValueError(f"Unknown job kind={job.kind!r}")
    row["seconds"] = time.perf_counter() - t0
    return row


def run_sweep(cfg: SweepConfig) -> pd.DataFrame:
    rows: List[Dict[str, Any]] = []
    for job in cfg.jobs:
        print(f"[pshcalc] running {job.kind} n={job.n}")
        rows.append(run_job(job, cfg))
    return pd.DataFrame(rows, columns=["kind", "n", "param", "count", "mean", "seconds"])


def main() -> None:
    ap = argparse.ArgumentParser(description="Run a list of enumeration jobs from a YAML file and print a summary table.")
    ap.add_argument("--config", type=str, required=True, help="Path to sweep YAML")
    args = ap.parse_args()

    cfg = load_sweep_config(args.config)
    df = run_sweep(cfg)
    print(df.to_string(index=False))


if __name__ == "__main__":
    main()
