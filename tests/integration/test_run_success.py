from __future__ import annotations

import json
from pathlib import Path

from dexgen.cli import main as cli_main

"""End-to-end runs through the CLI on real files in a temp directory."""

EXPECTED_LEGACY = "\r\n".join([
    "exports.BattlePokedex = {",
    '\t"bulbasaur": {',
    '\t\t"inherit": true,',
    '\t\t"num": 1,',
    '\t\t"types": ["Grass", "Poison"],',
    '\t\t"baseStats": {"hp": 45, "atk": 49, "def": 49, "spa": 65, "spd": 65, "spe": 45},',
    '\t\t"abilities": {"0": "Overgrow", "H": "Chlorophyll"},',
    '\t\t"heightm": 0.7,',
    '\t\t"weightkg": 6.9,',
    '\t\t"eggGroups": ["Monster", "Grass"]',
    "\t},",
    '\t"gengarmega": {',
    '\t\t"inherit": true,',
    '\t\t"num": 94,',
    '\t\t"types": ["Ghost", "Poison"],',
    '\t\t"baseStats": {"hp": 60, "atk": 65, "def": 80, "spa": 170, "spd": 95, "spe": 130},',
    '\t\t"abilities": {"0": "Shadow Tag"},',
    '\t\t"heightm": 1.4,',
    '\t\t"weightkg": 40.5,',
    '\t\t"eggGroups": ["Amorphous"]',
    "\t}",
    "};",
    "",
])


def test_run_legacy_defaults(write_csv: Path, temp_workdir: Path, capsys):
    code = cli_main([])
    out = capsys.readouterr().out
    assert code == 0
    output = temp_workdir / "pokedex.js.out"
    assert output.read_bytes().decode("utf-8") == EXPECTED_LEGACY
    assert "INFO File 'pokedex.js.out' successfully written." in out
    assert "SUMMARY rows=2 entries=2 duplicates=0 warnings=0" in out


def test_run_with_positional_paths(temp_workdir: Path, sample_csv: str, capsys):
    (temp_workdir / "mod").mkdir()
    src = temp_workdir / "mod" / "dex.csv"
    src.write_text(sample_csv, encoding="utf-8")
    code = cli_main(["mod/dex.csv", "mod/pokedex.js"])
    assert code == 0
    assert (temp_workdir / "mod" / "pokedex.js").read_bytes().decode("utf-8") == EXPECTED_LEGACY
    assert not (temp_workdir / "pokedex.js.out").exists()


def test_run_standalone_flag(temp_workdir: Path, capsys):
    (temp_workdir / "pokedex.csv").write_text(
        "species,basespecies,forme,num,gender,types,abilities\n"
        "rotomw,rotom,wash,479,genderless,electric/water,levitate\n"
        "nidoranfemale,,,29,f,poison,poison point/rivalry/hustle\n",
        encoding="utf-8",
    )
    code = cli_main(["--standalone"])
    assert code == 0
    text = (temp_workdir / "pokedex.js.out").read_bytes().decode("utf-8")
    assert '"inherit"' not in text
    body = text.removeprefix("exports.BattlePokedex = ").removesuffix(";\r\n")
    dex = json.loads(body)
    assert list(dex) == ["rotomwash", "nidoranf"]
    assert dex["rotomwash"] == {
        "species": "Rotom-Wash",
        "baseSpecies": "Rotom",
        "forme": "Wash",
        "num": 479,
        "gender": "N",
        "types": ["Electric", "Water"],
        "abilities": {"0": "Levitate"},
    }
    assert dex["nidoranf"] == {
        "species": "Nidoran-F",
        "num": 29,
        "gender": "F",
        "types": ["Poison"],
        "abilities": {"0": "Poison Point", "1": "Rivalry", "H": "Hustle"},
    }


def test_run_with_config_file(write_config: Path, temp_workdir: Path, capsys):
    (temp_workdir / "data").mkdir()
    (temp_workdir / "out").mkdir()
    (temp_workdir / "data" / "mod.csv").write_text(
        "species,num,tier\nbulba,1,OU\nbulbasaur,2,UU\n", encoding="utf-8"
    )
    code = cli_main([])
    out = capsys.readouterr().out
    assert code == 0
    text = (temp_workdir / "out" / "pokedex.js").read_bytes().decode("utf-8")
    # lf line endings, standalone entries, alias from config, duplicate overwritten
    assert "\r" not in text
    assert text == (
        "exports.BattlePokedex = {\n"
        '\t"bulbasaur": {\n'
        '\t\t"species": "Bulbasaur",\n'
        '\t\t"num": 2\n'
        "\t}\n"
        "};\n"
    )
    assert "WARN Header 'tier' is invalid." in out
    assert "WARN entry 'bulbasaur' at line 3 overwrites line 2" in out
    assert "SUMMARY rows=2 entries=1 duplicates=1 warnings=2" in out

    logs = list((temp_workdir / "logs").glob("errors-*.log"))
    assert len(logs) == 1
    records = [json.loads(line) for line in logs[0].read_text(encoding="utf-8").splitlines()]
    assert [r["error_type"] for r in records] == ["UNRECOGNIZED_HEADER", "DUPLICATE_ENTRY"]
    assert records[1]["line"] == 3


def test_run_cli_overrides_config(write_config: Path, temp_workdir: Path, sample_csv: str):
    (temp_workdir / "pokedex.csv").write_text(sample_csv, encoding="utf-8")
    code = cli_main(["--legacy", "pokedex.csv", "result.js"])
    assert code == 0
    text = (temp_workdir / "result.js").read_bytes().decode("utf-8")
    # mode from the flag, line ending still from the config file
    assert '"inherit": true' in text
    assert "\r\n" not in text
