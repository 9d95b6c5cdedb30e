# Shared pytest fixtures
from __future__ import annotations

from pathlib import Path

import pytest

from dexgen.logging.init import reset_logging

SAMPLE_CSV = (
    "Species,Num,Types,BaseStats,Abilities,HeightM,WeightKg,EggGroups\n"
    'Bulbasaur,1,grass/poison,45/49/49/65/65/45,overgrow/-/chlorophyll,"0,7",6.9,"monster,grass"\n'
    "megagengar,94,ghost/poison,60/65/80/170/95/130,shadow tag,1.4,40.5,amorphous\n"
)


@pytest.fixture(autouse=True)
def clean_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(tmp_path: Path, monkeypatch) -> Path:
    (tmp_path / "config").mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DEXGEN_CONFIG", raising=False)
    return tmp_path


@pytest.fixture()
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture()
def write_csv(temp_workdir: Path, sample_csv: str) -> Path:
    path = temp_workdir / "pokedex.csv"
    path.write_text(sample_csv, encoding="utf-8")
    return path


@pytest.fixture()
def sample_config_yaml() -> str:
    return """input_path: data/mod.csv
output_path: out/pokedex.js
mode: standalone
export_name: BattlePokedex
line_ending: lf
duplicate_policy: overwrite
extra_aliases:
  Bulba: Bulbasaur
error_log_dir: logs
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "dexgen.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg
