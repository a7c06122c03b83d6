import io
import sys

import pytest

from minishell.shell import PROMPT, Shell, parse_line


def test_parse_line_splits_path_and_argument():
    job = parse_line("/bin/ls la")
    assert len(job.commands) == 1
    assert job.commands[0].argv == ["/bin/ls", "la"]


def test_parse_line_single_command_is_not_pipeline():
    assert parse_line("/bin/ls la").is_pipeline() is False


@pytest.mark.parametrize(
    "line, expected",
    [
        ("echo   hello  world", ["echo", "hello", "world"]),
        ("  ls", ["ls"]),
        ("cat file\n", ["cat", "file"]),
    ],
)
def test_parse_line_drops_empty_words(line, expected):
    assert parse_line(line).commands[0].argv == expected


def test_parse_line_blank_gives_empty_job():
    assert parse_line("    ").commands == []


def test_run_line_returns_child_status():
    shell = Shell(env={"PATH": ""}, stdin=io.StringIO(), stdout=io.StringIO())
    status = shell.run_line(f"{sys.executable} -c raise(SystemExit(3))")
    assert status == 3
    assert shell.last_status == 3


def test_run_line_command_not_found(tmp_path):
    shell = Shell(env={"PATH": str(tmp_path)}, stdin=io.StringIO(), stdout=io.StringIO())
    assert shell.run_line("no-such-command-here") == 127


def test_run_line_directory(tmp_path):
    shell = Shell(env={"PATH": str(tmp_path)}, stdin=io.StringIO(), stdout=io.StringIO())
    assert shell.run_line(str(tmp_path) + "/") == 126


def test_run_line_empty_is_not_recorded():
    shell = Shell(env={}, stdin=io.StringIO(), stdout=io.StringIO())
    assert shell.run_line("") == 0
    assert shell.history == []


def test_loop_prints_prompt_and_exit_on_eof():
    out = io.StringIO()
    shell = Shell(env={}, stdin=io.StringIO(""), stdout=out)
    shell.loop()
    assert out.getvalue() == PROMPT + "exit\n"


def test_loop_records_history_and_status(tmp_path):
    out = io.StringIO()
    shell = Shell(
        env={"PATH": str(tmp_path)},
        stdin=io.StringIO("\nmissing-cmd arg\n"),
        stdout=out,
    )
    status = shell.loop()
    assert shell.history == ["missing-cmd arg"]
    assert status == 127
    assert out.getvalue() == PROMPT * 3 + "exit\n"