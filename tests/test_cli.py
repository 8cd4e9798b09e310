"""Tests for the command line interface."""
import json

import pytest

from robust_estimators.cli import main


def test_quantile_command(capsys):
    exit_code = main(["quantile", "0", "25", "50", "75", "100", "-p", "0.1", "-p", "0.5"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert [entry["probability"] for entry in payload] == [0.1, 0.5]
    assert payload[0]["quantile"] == pytest.approx(4.81290947065674, abs=1e-9)
    assert payload[1]["quantile"] == pytest.approx(50.0)


def test_quantile_with_confidence_interval(capsys):
    main(["quantile", "1", "2", "3", "4", "5", "-p", "0.5", "--confidence-level", "0.9"])
    interval = json.loads(capsys.readouterr().out)[0]["confidence_interval"]

    assert interval["lower"] < interval["estimation"] < interval["upper"]
    assert interval["confidence_level"] == 0.9


def test_outliers_command(capsys):
    values = ["1", "4", "4", "4", "5", "5", "5", "5", "7", "7", "8", "10", "16", "30"]
    exit_code = main(["outliers", *values, "--mad", "simple"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["outliers"] == [1.0, 16.0, 30.0]


def test_output_file(tmp_path, capsys):
    target = tmp_path / "result.json"
    main(["--output", str(target), "outliers", "3", "3", "3"])

    assert capsys.readouterr().out == ""
    assert json.loads(target.read_text())["outliers"] == []


def test_invalid_probability(capsys):
    exit_code = main(["quantile", "1", "2", "-p", "1.5"])

    assert exit_code == 2
    assert "probability" in capsys.readouterr().err


def test_non_finite_value(capsys):
    exit_code = main(["outliers", "1", "nan", "3"])

    assert exit_code == 2
    assert "finite" in capsys.readouterr().err
