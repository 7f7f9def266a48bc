"""Tests for the command line driver."""

from __future__ import annotations

import csv

import pytest

from alignment_checker.main import main, parse_args
from tests.conftest import SAMPLE_ROWS, data_row, write_input


@pytest.fixture(autouse=True)
def in_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def run(*argv):
    return main(parse_args([str(a) for a in argv]))


def test_prints_faulty_elements_and_mean(sample_csv, capsys):
    run(sample_csv)
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[1].startswith("| Id ")
    assert sum(1 for line in lines if line.startswith("| ")) == 5
    assert lines[-1] == "mean vp: 90.00 km/h"


def test_all_elements(sample_csv, capsys):
    run(sample_csv, "--all")
    out = capsys.readouterr().out
    assert sum(1 for line in out.splitlines() if line.startswith("| ")) == 7


def test_log_file_written(sample_csv, tmp_path):
    run(sample_csv, "--log-dir", tmp_path / "mylogs")
    (log_file,) = (tmp_path / "mylogs").glob("log_*.txt")
    assert "Check Summary" in log_file.read_text(encoding="utf-8")


def test_csv_export(sample_csv, tmp_path):
    out = tmp_path / "result.csv"
    report = run(sample_csv, "-o", out)
    with out.open(newline="", encoding="utf-8") as f:
        assert list(csv.reader(f)) == report.table()


def test_default_export_path(sample_csv, tmp_path):
    run(sample_csv, "-o")
    assert (tmp_path / "alignment_checked.csv").exists()


def test_dxf_export(sample_csv, tmp_path):
    out = tmp_path / "band.dxf"
    run(sample_csv, "--output", out)
    assert out.exists()


def test_missing_input(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        run(tmp_path / "nope.csv")
    assert exc.value.code == 1
    assert "does not exist" in capsys.readouterr().err


def test_malformed_input_aborts_without_output(tmp_path, capsys):
    path = write_input(tmp_path / "bad.csv", [data_row(1, "Radius", 10, 100), data_row(2, "Kurve", 10)])
    out = tmp_path / "result.csv"
    with pytest.raises(SystemExit) as exc:
        run(path, "-o", out)
    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "row 5" in captured.err
    assert not out.exists()


def test_missing_radius_aborts(tmp_path, capsys):
    path = write_input(tmp_path / "straight.csv", [data_row(1, "Gerade", 100), data_row(2, "Klothoide", 50)])
    with pytest.raises(SystemExit):
        run(path)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "radius" in captured.err


def test_zero_length_mean_is_undefined(tmp_path, capsys):
    path = write_input(tmp_path / "zero.csv", [data_row(1, "Radius", 0, 100)])
    run(path)
    assert capsys.readouterr().out.splitlines()[-1].startswith("mean vp: undefined")


def test_verbose_report(sample_csv, tmp_path):
    run(sample_csv, "--verbose", "--report-dir", tmp_path / "rep")
    (report_file,) = (tmp_path / "rep").glob("verbose_*.txt")
    text = report_file.read_text(encoding="utf-8")
    assert "Radius 3" in text
    assert "*** ERROR" in text


def test_unknown_check_is_skipped(sample_csv, capsys):
    run(sample_csv, "-c", "vp_diff", "nonsense")
    assert "Unknown check 'nonsense'" in capsys.readouterr().err
