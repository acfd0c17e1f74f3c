"""End-to-end tests for the command line entry points."""

import re

import pytest

from hello_tools import cli
from hello_tools.settings import FailureMode, GeneratorSettings


def test_hello_prints_greeting(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli.hello_main([], settings=GeneratorSettings(failure_mode=FailureMode.NEVER))

    captured = capsys.readouterr()
    assert exit_code == 0
    match = re.fullmatch(r"Hello, world! (\d+)\n", captured.out)
    assert match is not None
    assert 1 <= int(match.group(1)) <= 100
    assert captured.err == ""


def test_hello_reports_simulated_failure(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli.hello_main([], settings=GeneratorSettings(failure_mode=FailureMode.ALWAYS))

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert captured.err == "Error generating random number: Random error occurred (simulated)\n"


def test_hello_rejects_arguments() -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.hello_main(["--count", "3"])
    assert exc_info.value.code == 2


def test_main_exits_with_status(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "hello_main", lambda: 1)

    with pytest.raises(SystemExit) as exc_info:
        cli.main()

    assert exc_info.value.code == 1


def test_sum_calc_defaults(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.sum_main([]) == 0
    assert capsys.readouterr().out == "Sum: 15\n"


def test_sum_calc_numbers(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.sum_main(["4", "-10", "2"]) == 0
    assert capsys.readouterr().out == "Sum: -4\n"


def test_sum_calc_rejects_non_integers() -> None:
    with pytest.raises(SystemExit):
        cli.sum_main(["one"])
