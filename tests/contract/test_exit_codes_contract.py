from __future__ import annotations

from pathlib import Path

import pytest

from dexgen.cli import main as cli_main

"""Exit code contract: 0 on success, 1 on every fatal error kind."""


def test_exit_code_success(write_csv: Path):
    assert cli_main([]) == 0


def test_exit_code_success_with_unrecognized_header(temp_workdir: Path, capsys):
    (temp_workdir / "pokedex.csv").write_text("species,tier\npikachu,OU\n", encoding="utf-8")
    assert cli_main([]) == 0
    assert "WARN Header 'tier' is invalid." in capsys.readouterr().out


@pytest.mark.parametrize(
    "csv_text",
    [
        'species,num\nbad"row,1\n',  # malformed row
        "num,species,num\n1,a,1\n",  # duplicate header
        "num,types\n1,fire\n",  # missing species header
        "species\n\n \n,\n",  # empty species value
    ],
)
def test_exit_code_fatal_input(temp_workdir: Path, csv_text: str):
    (temp_workdir / "pokedex.csv").write_text(csv_text, encoding="utf-8")
    assert cli_main([]) == 1
    assert not (temp_workdir / "pokedex.js.out").exists()


def test_exit_code_input_missing(temp_workdir: Path):
    assert cli_main([]) == 1


def test_exit_code_output_unwritable(write_csv: Path):
    assert cli_main(["pokedex.csv", "no/such/dir/out.js"]) == 1
