from __future__ import annotations

from pathlib import Path

import pytest

from pshcalc.config import JobConfig, load_sweep_config, sweep_config_from_dict


def test_load_sweep_config(tmp_path: Path) -> None:
    path = tmp_path / "sweep.yaml"
    path.write_text(
        "progress_every: 10\n"
        "jobs:\n"
        "  - {kind: monoids, n: 3}\n"
        "  - {kind: monoid_acts, n: 2, sections: 3}\n",
        encoding="utf-8",
    )
    cfg = load_sweep_config(path)

    assert cfg.progress_every == 10
    assert cfg.chunk_size == 1 << 15
    assert cfg.jobs == [JobConfig(kind="monoids", n=3), JobConfig(kind="monoid_acts", n=2, sections=3)]


def test_shipped_config_loads() -> None:
    path = Path(__file__).resolve().parents[1] / "configs" / "sweep.yaml"
    cfg = load_sweep_config(path)
    assert [j.kind for j in cfg.jobs] == ["semigroups", "monoids", "monoid_acts", "composable_triples"]


def test_unknown_kind_rejected() -> None:
    with pytest.raises(ValueError):
        sweep_config_from_dict({"jobs": [{"kind": "groups", "n": 2}]})


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"jobs": [{"kind": "monoids"}]},
        {"jobs": [{"kind": "monoid_acts", "n": 2}]},
        {"jobs": [{"kind": "composable_triples", "n": 2}]},
    ],
)
def test_missing_keys_rejected(data) -> None:
    with pytest.raises(KeyError):
        sweep_config_from_dict(data)


def test_empty_job_list_rejected() -> None:
    with pytest.raises(ValueError):
        sweep_config_from_dict({"jobs": []})


def test_top_level_must_be_a_mapping(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_sweep_config(path)
