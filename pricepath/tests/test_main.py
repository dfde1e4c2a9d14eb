from __future__ import annotations

import csv
import json
import os

import pytest

from pricepath.main import main

_END = 1_700_000_000_000


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("PRICEPATH_"):
            monkeypatch.delenv(key, raising=False)


def _args(*extra: str) -> list[str]:
    return ["--timeframe", "24h", "--seed", "7", "--end-millis", str(_END), *extra]


def test_main_writes_json(tmp_path) -> None:
    out = tmp_path / "out" / "path.json"

    assert main(_args("--output", str(out))) == 0

    records = json.loads(out.read_text(encoding="utf-8"))
    assert len(records) == 25
    assert records[-1]["timestamp"] == _END
    assert records[0]["yesPrice"] == 0.5
    assert set(records[0]) == {"timestamp", "date", "yesPrice", "noPrice", "volume"}


def test_main_writes_csv(tmp_path) -> None:
    out = tmp_path / "path.csv"

    assert main(_args("--format", "csv", "--output", str(out))) == 0

    with out.open(newline="", encoding="utf-8") as handle:
        rows = list(csv.DictReader(handle))
    assert len(rows) == 25
    assert int(rows[-1]["timestamp"]) == _END
    assert float(rows[0]["yesPrice"]) + float(rows[0]["noPrice"]) == pytest.approx(1.0)


def test_main_output_is_deterministic(tmp_path) -> None:
    first = tmp_path / "a.json"
    second = tmp_path / "b.json"
    assert main(_args("--output", str(first))) == 0
    assert main(_args("--output", str(second))) == 0
    assert first.read_bytes() == second.read_bytes()


def test_main_defaults_to_stdout(capsys) -> None:
    assert main(_args("--summary")) == 0
    records = json.loads(capsys.readouterr().out)
    assert len(records) == 25


def test_main_uses_env_timeframe(monkeypatch, capsys) -> None:
    monkeypatch.setenv("PRICEPATH_TIMEFRAME", "30d")
    assert main(["--end-millis", str(_END)]) == 0
    assert len(json.loads(capsys.readouterr().out)) == 121


def test_main_rejects_invalid_base_price(tmp_path) -> None:
    out = tmp_path / "never.json"
    assert main(_args("--base-price", "1.5", "--output", str(out))) == 2
    assert not out.exists()


def test_main_rejects_unknown_env_timeframe(monkeypatch) -> None:
    monkeypatch.setenv("PRICEPATH_TIMEFRAME", "1y")
    assert main(["--end-millis", str(_END)]) == 2
