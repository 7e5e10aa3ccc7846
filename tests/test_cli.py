from unittest import mock
from urllib.parse import unquote

import pytest

from dddplayer.browser import encode_uri_component
from dddplayer.cli import main, run_open, run_version
from dddplayer.version import build_version_string


def test_run_open_requires_path():
    with pytest.raises(ValueError, match="please specify a target arch diagram path"):
        run_open("")


def test_run_open_missing_file(tmp_path):
    missing = tmp_path / "nope.dot"
    with pytest.raises(FileNotFoundError, match="does not exist"):
        run_open(str(missing))


def test_run_open_sends_file_content(tmp_path):
    source = "digraph { a -> b }"
    diagram = tmp_path / "arch.dot"
    diagram.write_text(source)
    with mock.patch("dddplayer.browser.subprocess.Popen") as popen:
        run_open(str(diagram))
    fragment = popen.call_args.args[0][1].split("#", 1)[1]
    assert fragment == encode_uri_component(source)
    assert unquote(fragment) == source


def test_run_version_prints_banner(capsys):
    run_version()
    assert capsys.readouterr().out.strip() == build_version_string()


def test_main_version(capsys):
    assert main(["version"]) == 0
    assert capsys.readouterr().out.strip() == build_version_string()


def test_main_open_missing_file(tmp_path, capsys):
    missing = tmp_path / "gone.dot"
    assert main(["open", "-p", str(missing)]) == 1
    err = capsys.readouterr().err
    assert err.startswith("\nError: ")
    assert f"file {missing} does not exist" in err


def test_main_open_without_path(capsys):
    assert main(["open"]) == 1
    assert "please specify a target arch diagram path" in capsys.readouterr().err


def test_main_open_success(tmp_path):
    diagram = tmp_path / "arch.dot"
    diagram.write_text("x")
    with mock.patch("dddplayer.browser.subprocess.Popen") as popen:
        assert main(["open", "-p", str(diagram)]) == 0
    assert popen.call_args.args[0][1].endswith("#x")