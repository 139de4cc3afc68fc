from __future__ import annotations

import json
from pathlib import Path

import pytest

from tabedit import cli
from tabedit.io.read import load_table


_ENV_KEYS = [
    "TABEDIT_RECORDS_PER_PAGE",
    "TABEDIT_HAS_HEADER",
    "TABEDIT_DELIMITER",
    "TABEDIT_ENCODING",
    "TABEDIT_OUTPUT_PATH",
]


def make_source(tmp: Path, n_rows: int = 25) -> Path:
    p = tmp / "data.csv"
    lines = ["id,word"] + [f"{i},w{i}" for i in range(n_rows)]
    p.write_text("\n".join(lines) + "\n")
    return p


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch) -> None:
    # Keep repo/user config out of CLI runs
    monkeypatch.chdir(tmp_path)
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_cli_shows_first_page(tmp_path: Path, capsys) -> None:
    src = make_source(tmp_path)

    code = cli.main([str(src), "-r", "10"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Created 3 pages" in out
    assert "w9" in out
    assert "w10" not in out
    # No edits, no output file
    assert not (tmp_path / "output.csv").exists()


def test_cli_edits_and_writes(tmp_path: Path, capsys) -> None:
    src = make_source(tmp_path)
    dest = tmp_path / "edited.csv"

    code = cli.main(
        [str(src), "--delete-row", "0", "--set", "1", "0", "X", "-o", str(dest)]
    )

    assert code == 0
    t = load_table(dest)
    assert t.rows[0] == ["", ""]
    assert t.rows[1] == ["X", "w1"]
    assert t.row_count == 25
    assert f"Wrote {dest}" in capsys.readouterr().out


def test_cli_default_output_path(tmp_path: Path) -> None:
    src = make_source(tmp_path, 3)

    assert cli.main([str(src), "--set", "2", "1", "z"]) == 0

    assert load_table(tmp_path / "output.csv").rows[2] == ["2", "z"]


def test_cli_reports_mutation_errors_and_continues(tmp_path: Path, capsys) -> None:
    src = make_source(tmp_path, 3)
    dest = tmp_path / "out.csv"

    code = cli.main(
        [
            str(src),
            "--delete-row", "9",
            "--set", "0", "5", "bad",
            "--set", "0", "1", "good",
            "-o", str(dest),
        ]
    )

    err = capsys.readouterr().err
    assert code == 0
    assert "Error deleting row" in err
    assert "Error modifying field" in err
    assert load_table(dest).rows[0] == ["0", "good"]


def test_cli_missing_file_fails(tmp_path: Path, capsys) -> None:
    code = cli.main([str(tmp_path / "nope.csv")])
    assert code == 1
    assert "error:" in capsys.readouterr().err


def test_cli_dimension_override_and_info(tmp_path: Path, capsys) -> None:
    src = make_source(tmp_path, 5)

    code = cli.main([str(src), "--dimension", "40,2", "-r", "0", "--info"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Created 4 pages" in out
    info = json.loads(out[out.index("{") :])
    assert info["row_count"] == 40
    assert info["field_count"] == 2
    assert info["stored_rows"] == 5
    assert info["source_name"] == str(src)
    assert info["byte_size"] == src.stat().st_size


def test_cli_malformed_dimension_is_measured(tmp_path: Path, capsys) -> None:
    src = make_source(tmp_path, 5)

    assert cli.main([str(src), "--dimension", "lots", "--info"]) == 0

    out = capsys.readouterr().out
    info = json.loads(out[out.index("{") :])
    assert info["row_count"] == 5


def test_cli_rejects_non_integer_set_indices(tmp_path: Path) -> None:
    src = make_source(tmp_path, 2)
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(src), "--set", "a", "0", "v"])
    assert excinfo.value.code == 2


def test_cli_rejects_multibyte_delimiter(tmp_path: Path) -> None:
    src = make_source(tmp_path, 2)
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(src), "--delimiter", "é"])
    assert excinfo.value.code == 2


def test_cli_ignores_multibyte_delimiter_from_env(
    tmp_path: Path, monkeypatch, capsys
) -> None:
    src = make_source(tmp_path, 2)
    monkeypatch.setenv("TABEDIT_DELIMITER", "é")

    assert cli.main([str(src)]) == 0
    assert "Created 1 pages" in capsys.readouterr().out
