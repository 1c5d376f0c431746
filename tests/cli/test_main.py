"""Unit tests for the CLI main module."""

import json
import logging
from unittest.mock import patch

import pytest

from lsdirp.cli.argparser import create_parser
from lsdirp.cli.main import build_options, configure_logging, format_result, main
from lsdirp.types import FileType


def run_main(argv):
    """Run main() with the given arguments, returning the exit code."""
    with patch("sys.argv", ["lsdirp"] + argv):
        try:
            main()
        except SystemExit as e:
            return e.code
    return 0


def test_build_options():
    args = create_parser().parse_args(["-r", "base", "-n", "-F", "-t", "directory", "-L", "-d", "2", "-i", "*.tmp", "x"])
    options = build_options(args)

    assert options.root == "base"
    assert options.prepend_path is False
    assert options.flatten is True
    assert options.file_type is FileType.DIRECTORY
    assert options.allow_symlinks is True
    assert options.depth == 2
    assert options.ignore_paths[-1] == "*.tmp"


def test_format_result_list():
    assert format_result(["a/1", "a/2"]) == "a/1\na/2"


def test_format_result_mapping():
    result = {"src": ["src/a.py", "src/b.py"], "src/empty": []}
    assert format_result(result) == "src:\n  src/a.py\n  src/b.py\n\nsrc/empty:"


def test_format_result_json():
    result = {"src": ["src/a.py"]}
    assert json.loads(format_result(result, "json")) == result


def test_configure_logging_levels():
    configure_logging(0)
    assert logging.getLogger().level == logging.WARNING
    configure_logging(1)
    assert logging.getLogger().level == logging.INFO
    configure_logging(3)
    assert logging.getLogger().level == logging.DEBUG


def test_main_flat_listing(sample_project, capsys):
    assert run_main(["-r", "tests/sample_dir", "-F", "src"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 6
    assert "tests/sample_dir/src/sub_dir/helper.ts" in lines


def test_main_grouped_listing(sample_project, capsys):
    assert run_main(["-r", "tests/sample_dir", "-n", "src/*.ts"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "tests/sample_dir/src:"
    assert sorted(lines[1:]) == ["  app.ts", "  index.ts"]


def test_main_json_listing(sample_project, capsys):
    assert run_main(["-r", "tests/sample_dir", "-f", "json", "-t", "directory", "-F", "-P", "."]) == 0

    paths = json.loads(capsys.readouterr().out)
    assert paths[0] == "tests/sample_dir"
    assert len(paths) == 5


def test_main_empty_listing_prints_nothing(sample_project, capsys):
    assert run_main(["-F", "missing"]) == 0
    assert capsys.readouterr().out == ""


def test_main_negated_spec_warns(sample_project, capsys):
    assert run_main(["-F", "!src"]) == 0
    assert "!src" in capsys.readouterr().err


def test_main_invalid_args(sample_project, capsys):
    assert run_main(["-P", "src"]) == 2
    assert "--include-parent-dir requires --type directory" in capsys.readouterr().err


def test_main_runtime_error(sample_project, capsys):
    assert run_main(["-r", "tests/sample_dir", "src/file.js"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_main_permission_denied(capsys):
    with patch("lsdirp.cli.main.lsdirp", side_effect=PermissionError("Permission denied: 'locked'")):
        assert run_main(["locked"]) == 126
    assert "Error: Permission denied: 'locked'" in capsys.readouterr().err


def test_main_keyboard_interrupt():
    with patch("lsdirp.cli.main.lsdirp", side_effect=KeyboardInterrupt):
        assert run_main(["."]) == 130


def test_main_broken_pipe():
    with (
        patch("lsdirp.cli.main.lsdirp", side_effect=BrokenPipeError),
        patch("lsdirp.cli.main.os.dup2") as mock_dup2,
        patch("lsdirp.cli.main.os.open", return_value=99),
        patch("sys.stdout") as mock_stdout,
    ):
        mock_stdout.fileno.return_value = 1
        assert run_main(["."]) == 141
        mock_dup2.assert_called_once_with(99, 1)


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo the logging configuration applied by main()."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    logging.captureWarnings(False)
    root.handlers[:] = handlers
    root.setLevel(level)
