"""Shared fixtures for the awsetup tests."""

import subprocess

import pytest

from awsetup.aws_utils import AwsCli
from awsetup.config import AwsetupConfig
from awsetup.models import SetupContext


class ScriptedPrompter:
    """Prompter that answers from prepared lists instead of the terminal.

    Running out of answers behaves like the user pressing Ctrl-D.
    """

    def __init__(self, answers=(), confirms=()):
        self.answers = list(answers)
        self.confirms = list(confirms)
        self.asked = []
        self.requests = []
        self.confirm_messages = []
        self.pauses = 0

    def ask(self, request):
        self.asked.append(request.name)
        self.requests.append(request)
        if not self.answers:
            raise EOFError
        answer = self.answers.pop(0)
        if request.validate is not None:
            assert request.validate(answer), f"{answer!r} rejected for {request.name}"
        return answer.strip()

    def confirm(self, message, default=False):
        self.confirm_messages.append(message)
        return self.confirms.pop(0) if self.confirms else default

    def pause(self, message="Press Enter to continue..."):
        self.pauses += 1


def completed(stdout="", stderr="", returncode=0):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


def invoked(mock_run):
    """Return the AWS CLI argument lists passed to subprocess.run, without the executable."""
    return [tuple(c.args[0][1:]) for c in mock_run.call_args_list]


@pytest.fixture
def aws_on_path(mocker):
    return mocker.patch("awsetup.helpers.shutil.which", return_value="/usr/local/bin/aws")


@pytest.fixture
def mock_run(mocker, aws_on_path):
    """subprocess.run replacement; every AWS CLI call succeeds with empty output by default."""
    return mocker.patch("awsetup.aws_utils.subprocess.run", return_value=completed())


@pytest.fixture
def mock_identity(mocker):
    """Replace the STS identity check; returns None (failed check) unless told otherwise."""
    return mocker.patch("awsetup.aws_utils.verify_identity", return_value=None)


@pytest.fixture
def make_setup(tmp_path):
    def _make(answers=(), confirms=(), environ=None, config=None):
        return SetupContext(
            config=config or AwsetupConfig(),
            prompter=ScriptedPrompter(answers, confirms),
            aws=AwsCli("aws"),
            output_dir=tmp_path,
            environ=environ or {},
        )
    return _make
