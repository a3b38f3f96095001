import subprocess
from types import SimpleNamespace

import pytest

from wpdock.cli.main import WPDockTestApp


class FakeRunner:
    """Records commands handed to subprocess.run and answers them.

    Rules match when every token appears in the command argv; the most
    recently added rule wins. Unmatched commands succeed silently.
    """

    def __init__(self):
        self.calls = []
        self.rules = []

    def on(self, *tokens, returncode=0, stdout=''):
        self.rules.insert(0, (tokens, returncode, stdout))

    def _answer(self, argv):
        for tokens, returncode, stdout in self.rules:
            if all(token in argv for token in tokens):
                return returncode, stdout
        return 0, ''

    def __call__(self, command, **kwargs):
        argv = command.split() if isinstance(command, str) else list(command)
        self.calls.append(argv)
        returncode, output = self._answer(argv)

        out = kwargs.get('stdout')
        if out is not None and hasattr(out, 'write'):
            out.write(output.encode('utf-8'))
        if kwargs.get('capture_output'):
            return subprocess.CompletedProcess(argv, returncode, output, '')
        if kwargs.get('stderr') == subprocess.PIPE:
            return subprocess.CompletedProcess(argv, returncode, None, b'')
        return subprocess.CompletedProcess(argv, returncode)

    def find(self, *tokens):
        """First recorded argv holding every token, or None"""
        for argv in self.calls:
            if all(token in argv for token in tokens):
                return argv
        return None

    def ran(self, *tokens):
        return self.find(*tokens) is not None


def ps_listing(*containers):
    """``docker compose ps`` text with the given containers Up"""
    lines = ["NAME            IMAGE     COMMAND    SERVICE   STATUS"]
    for name in containers:
        lines.append(f"{name}   image     \"entry\"    svc       Up 2 minutes")
    return "\n".join(lines) + "\n"


@pytest.fixture
def runner(monkeypatch):
    fake = FakeRunner()
    monkeypatch.setattr(
        'wpdock.core.shellexec.subprocess',
        SimpleNamespace(run=fake, PIPE=subprocess.PIPE))
    return fake


@pytest.fixture
def project(tmp_path, monkeypatch):
    """Empty project directory holding only a compose file"""
    monkeypatch.chdir(tmp_path)
    (tmp_path / 'docker-compose.yml').write_text('services: {}\n')
    return tmp_path


@pytest.fixture
def no_sleep(monkeypatch):
    slept = []
    monkeypatch.setattr('wpdock.cli.plugins.environment.time.sleep', slept.append)
    return slept


@pytest.fixture
def answers(monkeypatch):
    """Feed canned replies to input(); EOFError once exhausted"""
    replies = []

    def fake_input(prompt=''):
        if not replies:
            raise EOFError
        return replies.pop(0)

    monkeypatch.setattr('builtins.input', fake_input)
    return replies


@pytest.fixture
def app():
    with WPDockTestApp(argv=[]) as test_app:
        yield test_app


def make_controller(controller_class, app, **pargs):
    controller = controller_class()
    controller.app = app
    controller.app._parsed_args = SimpleNamespace(**pargs)
    return controller
