from __future__ import annotations

import json

import pytest

from qrforge import cli


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("QRFORGE_EC_LEVEL", "QRFORGE_MODULE_SIZE", "QRFORGE_MARGIN",
                 "QRFORGE_DARK_COLOR", "QRFORGE_LIGHT_COLOR"):
        monkeypatch.delenv(name, raising=False)


def test_cli_svg_to_stdout(capsys) -> None:
    assert cli.main(["Hello"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("<svg")
    assert "<path" in out


def test_cli_ascii(capsys) -> None:
    assert cli.main(["Hi", "--ec-level", "L", "--format", "ascii"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 21


def test_cli_matrix_json(capsys) -> None:
    assert cli.main(["Hi", "--ec-level", "l", "--format", "matrix"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["version"] == 1
    assert payload["size"] == 21
    assert payload["ecLevel"] == "L"
    assert len(payload["matrix"]) == 21


def test_cli_writes_files(tmp_path) -> None:
    svg_path = tmp_path / "qr.svg"
    assert cli.main(["Hello", "--format", "svg-rects", "--dark", "#ff0000", "-o", str(svg_path)]) == 0
    assert 'fill="#ff0000"' in svg_path.read_text(encoding="utf-8")

    png_path = tmp_path / "qr.png"
    assert cli.main(["Hello", "--format", "png", "--module-size", "2", "-o", str(png_path)]) == 0
    assert png_path.read_bytes().startswith(b"\x89PNG")


def test_cli_default_level_from_env(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.setenv("QRFORGE_EC_LEVEL", "H")
    assert cli.main(["Hi", "--format", "matrix"]) == 0
    assert json.loads(capsys.readouterr().out)["ecLevel"] == "H"


@pytest.mark.parametrize(
    "argv, message",
    [
        (["Test", "--ec-level", "X"], "Invalid EC level"),
        (["a" * 300, "--ec-level", "H"], "too long"),
        (["Test", "--format", "png"], "needs --output"),
        (["Test", "--dark", "red"], "Invalid color"),
        (["Test", "--mask", "9"], "Invalid mask"),
    ],
)
def test_cli_errors(argv: list[str], message: str, capsys) -> None:
    assert cli.main(argv) == 2
    err = capsys.readouterr().err
    assert err.startswith("error: ")
    assert message in err


@pytest.mark.parametrize("output_format", ["svg", "png"])
def test_cli_reports_unwritable_output(output_format: str, tmp_path, capsys) -> None:
    target = tmp_path / "missing" / ("qr." + output_format)
    assert cli.main(["Hello", "--format", output_format, "-o", str(target)]) == 2
    err = capsys.readouterr().err
    assert err.startswith("error: ")
    assert "No such file or directory" in err
    assert not target.exists()
