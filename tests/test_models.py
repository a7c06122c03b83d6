import pytest

from minishell.models import Command, Job, Redirect, Token


def test_single_command_is_not_pipeline():
    job = Job([Command(["ls", "-la"])])
    assert job.is_pipeline() is False


def test_two_commands_form_pipeline():
    job = Job([Command(["ls"]), Command(["wc", "-l"])])
    assert job.is_pipeline() is True


def test_empty_job_is_not_pipeline():
    assert Job().is_pipeline() is False


def test_command_name_is_first_argument():
    assert Command(["/bin/ls", "la"]).name == "/bin/ls"


def test_command_without_arguments_has_no_name():
    assert Command().name is None


@pytest.mark.parametrize("kind", [Token.PIPE, Token.COMMAND, Token.LIMITER])
def test_redirect_rejects_non_redirection_tokens(kind):
    with pytest.raises(ValueError):
        Redirect(kind, "file")


def test_redirect_direction():
    infile = Redirect(Token.REDIRECT_INPUT, "infile")
    heredoc = Redirect(Token.HERE_DOC_REDIRECT, "tmp")
    out = Redirect(Token.APPEND, "out")
    assert (infile.is_input, infile.is_output) == (True, False)
    assert heredoc.is_input is True
    assert (out.is_input, out.is_output) == (False, True)


def test_commands_do_not_share_default_lists():
    first = Command()
    second = Command()
    first.argv.append("echo")
    assert second.argv == []