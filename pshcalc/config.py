from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

JOB_KINDS = ("monoids", "semigroups", "monoid_acts", "composable_triples")


@dataclass(frozen=True)
class JobConfig:
    kind: str  # one of JOB_KINDS
    n: int     # monoid / semigroup size, or |M| for composable_triples

    # monoid_acts: number of sections; composable_triples: |O|
    sections: Optional[int] = None
    objects: Optional[int] = None


@dataclass(frozen=True)
class SweepConfig:
    jobs: List[JobConfig]
    progress_every: int = 0          # 0 disables progress lines
    chunk_size: int = 1 << 15        # block size for the batched semigroup count


def _require(d: Mapping[str, Any], key: str) -> Any:
    if key not in d:
        raise KeyError(f"Missing required config key: {key}")
    return d[key]


def _get(d: Mapping[str, Any], key: str, default: Any) -> Any:
    return d[key] if key in d else default


def parse_job(d: Mapping[str, Any]) -> JobConfig:
    kind = str(_require(d, "kind"))
    if kind not in JOB_KINDS:
        raise ValueError(f"Unknown job kind={kind!r} (use one of {', '.join(JOB_KINDS)})")
    job = JobConfig(
        kind=kind,
        n=int(_require(d, "n")),
        sections=None if _get(d, "sections", None) is None else int(d["sections"]),
        objects=None if _get(d, "objects", None) is None else int(d["objects"]),
    )
    if job.n < 1:
        raise ValueError(f"job {kind}: n must be >= 1, got {job.n}")
    if kind == "monoid_acts" and job.sections is None:
        raise KeyError("Missing required config key: sections (monoid_acts)")
    if kind == "composable_triples" and job.objects is None:
        raise KeyError("Missing required config key: objects (composable_triples)")
    return job


def load_yaml(path: str | Path) -> Dict[str, Any]:
    path = Path(path)
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML file {path} must contain a mapping at the top level")
    return data


def sweep_config_from_dict(data: Mapping[str, Any]) -> SweepConfig:
    jobs = _require(data, "jobs")
    if not isinstance(jobs, list) or not jobs:
        raise ValueError("config key 'jobs' must be a non-empty list")
    return SweepConfig(
        jobs=[parse_job(j) for j in jobs],
        progress_every=int(_get(data, "progress_every", 0)),
        chunk_size=int(_get(data, "chunk_size", 1 << 15)),
    )


def load_sweep_config(path: str | Path) -> SweepConfig:
    return sweep_config_from_dict(load_yaml(path))
