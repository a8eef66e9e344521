"""CLI behaviour tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from topowrite.cli import USAGE, _build_parser, main
from topowrite.logging import configure_logging
from topowrite.template import TEMPLATE
from tests._fixtures.project_builder import ProjectBuilder


def test_cli_accepts_short_and_long_flags() -> None:
    parser = _build_parser()
    args = parser.parse_args(["-i", "in.json", "--output", "out.tex", "-l", "debug"])
    assert args.input == "in.json"
    assert args.output == "out.tex"
    assert args.loglevel == "debug"
    assert args.template == ""


def test_cli_defaults_to_critical_log_level() -> None:
    args = _build_parser().parse_args([])
    assert args.loglevel == "critical"
    assert args.verbose is False


def test_cli_rejects_unknown_log_level() -> None:
    with pytest.raises(SystemExit):
        _build_parser().parse_args(["-l", "trace"])


def test_cli_help_exits_without_work(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "--template" in capsys.readouterr().out


def test_cli_requires_input(capsys) -> None:
    main(["-o", "out.tex"])
    out = capsys.readouterr().out
    assert "You need to specify an input file." in out
    assert USAGE in out


def test_cli_requires_output(capsys, tmp_path: Path) -> None:
    main(["-i", str(tmp_path / "in.json")])
    assert "You need to specify an output file." in capsys.readouterr().out


def test_cli_reports_missing_input_file(capsys, tmp_path: Path) -> None:
    output = tmp_path / "out.tex"
    main(["-i", str(tmp_path / "missing.json"), "-o", str(output)])
    assert "The input file does not exist." in capsys.readouterr().out
    assert not output.exists()


def test_cli_writes_template_and_skips_pipeline(tmp_path: Path) -> None:
    target = tmp_path / "example.json"
    output = tmp_path / "out.tex"
    main(["-t", str(target), "-i", str(tmp_path / "missing.json"), "-o", str(output)])
    assert target.read_text(encoding="utf-8") == TEMPLATE
    assert not output.exists()


def test_cli_runs_pipeline(project: ProjectBuilder, capsys) -> None:
    project.write({"h.tex": "\\documentclass{article}\n"})
    config = project.write_config(
        {"header": "h.tex", "a": {"depends": ["b"], "input": "a.tex"}, "b": {"input": "b.tex"}}
    )
    output = project.path("out.tex")

    main(["-i", str(config), "-o", str(output)])

    assert "Document written to" in capsys.readouterr().out
    text = output.read_text(encoding="utf-8")
    assert text.index("\\input{b.tex}") < text.index("\\input{a.tex}")


def test_cli_exits_with_error_on_cycle(project: ProjectBuilder, capsys) -> None:
    project.write({"h.tex": "\\documentclass{article}\n"})
    config = project.write_config(
        {"header": "h.tex", "a": {"depends": ["b"]}, "b": {"depends": ["a"]}}
    )

    with pytest.raises(SystemExit) as excinfo:
        main(["-i", str(config), "-o", str(project.path("out.tex"))])

    assert excinfo.value.code == 1
    assert "dependency cycle" in capsys.readouterr().err


def test_cli_exits_with_error_on_schema_problem(tmp_path: Path, capsys) -> None:
    config = tmp_path / "in.json"
    config.write_text(json.dumps({"header": "h.tex", "a": {"inputs": "a.tex"}}), encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["-i", str(config), "-o", str(tmp_path / "out.tex")])

    assert excinfo.value.code == 1
    assert "inputs" in capsys.readouterr().err


def test_cli_exits_with_error_when_output_dir_is_missing(project: ProjectBuilder, capsys) -> None:
    project.write({"h.tex": "\\documentclass{article}\n"})
    config = project.write_config({"header": "h.tex", "a": {"input": "a.tex"}})

    with pytest.raises(SystemExit) as excinfo:
        main(["-i", str(config), "-o", str(project.path("missing/out.tex"))])

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "Run with --verbose" in err


def test_cli_exits_with_error_when_header_is_missing(project: ProjectBuilder, capsys) -> None:
    config = project.write_config({"header": "absent.tex", "a": {"input": "a.tex"}})
    output = project.path("out.tex")

    with pytest.raises(SystemExit) as excinfo:
        main(["-i", str(config), "-o", str(output)])

    assert excinfo.value.code == 1
    assert "absent.tex" in capsys.readouterr().err
    assert not output.exists()


def test_cli_copies_latin1_header(project: ProjectBuilder) -> None:
    (project.path("h.tex")).write_bytes(b"% caf\xe9\n\\documentclass{article}\n")
    config = project.write_config({"header": "h.tex", "a": {"input": "a.tex"}})
    output = project.path("out.tex")

    main(["-i", str(config), "-o", str(output)])

    assert output.read_bytes().startswith(b"% caf\xe9\n\\documentclass{article}\n\n")


def test_cli_verbose_enables_debug_logging(project: ProjectBuilder, capsys) -> None:
    project.write({"h.tex": "\\documentclass{article}\n"})
    config = project.write_config({"header": "h.tex", "a": {"input": "a.tex"}})

    try:
        main(["-v", "-i", str(config), "-o", str(project.path("out.tex"))])
        assert logging.getLogger("topowrite").level == logging.DEBUG
        err = capsys.readouterr().err
        assert "Reading" in err
        assert "['a']" in err
    finally:
        configure_logging()


def test_cli_reports_non_utf8_project_file(tmp_path: Path, capsys) -> None:
    config = tmp_path / "in.json"
    config.write_bytes(b'{"header": "h\xe9.tex"}')

    with pytest.raises(SystemExit) as excinfo:
        main(["-i", str(config), "-o", str(tmp_path / "out.tex")])

    assert excinfo.value.code == 1
    assert "Failed to read in.json" in capsys.readouterr().err
