from __future__ import annotations

from apycalc.cli import EXIT_INVALID_INPUT, main


def test_cli_prints_breakdown(capsys):
    assert main(["--apy", "5", "--amount", "1,000"]) == 0

    out = capsys.readouterr().out
    assert "With $1,000.00 at 5.00% APY, you'll earn:" in out
    assert "Total after 1 year: $1,051.27" in out


def test_cli_apy_daily_method(capsys):
    assert main(["--apy", "5", "--amount", "1000", "--method", "apy_daily"]) == 0
    assert "Yearly: $50.00" in capsys.readouterr().out


def test_cli_rejects_invalid_input(capsys):
    assert main(["--apy", "abc", "--amount", "-5"]) == EXIT_INVALID_INPUT

    err = capsys.readouterr().err
    assert "error: APY must be a valid number." in err
    assert "error: Amount must be greater than $0." in err


def test_cli_exports_csv(tmp_path, capsys):
    target = tmp_path / "out.csv"
    assert main(["--apy", "5", "--amount", "1000", "--export", "csv", "--output", str(target)]) == 0

    assert target.read_bytes().startswith(b"Category,Value")
    assert f"Saved {target}" in capsys.readouterr().out
