from types import SimpleNamespace

import pytest

from conftest import ps_listing
from wpdock.core.compose import ComposeError, WPCompose


@pytest.fixture
def controller(app):
    return SimpleNamespace(app=app)


def test_base_command_uses_configured_file(controller):
    controller.app.config.set('wpdock', 'compose_file', 'stack.yml')
    assert WPCompose.base_command(controller) == ['docker', 'compose', '-f', 'stack.yml']


def test_exec_command_without_tty_adds_T(controller):
    argv = WPCompose.exec_command(controller, 'wpcli', ['wp', 'core', 'version'], tty=False)
    assert argv == ['docker', 'compose', '-f', 'docker-compose.yml',
                    'exec', '-T', 'wpcli', 'wp', 'core', 'version']


def test_exec_command_with_tty(controller):
    argv = WPCompose.exec_command(controller, 'wpcli', ['wp', 'shell'], tty=True)
    assert '-T' not in argv
    assert argv[-3:] == ['wpcli', 'wp', 'shell']


def test_is_up_matches_container_line(controller, runner):
    runner.on('ps', stdout=ps_listing('wp_mysql'))
    assert WPCompose.is_up(controller, 'wp_mysql') is True
    assert WPCompose.is_up(controller, 'wp_wordpress') is False
    assert WPCompose.is_up(controller) is True


def test_is_up_with_nothing_running(controller, runner):
    runner.on('ps', stdout=ps_listing())
    assert WPCompose.is_up(controller) is False


def test_check_docker_raises_when_daemon_down(controller, runner):
    runner.on('docker', 'info', returncode=1)
    with pytest.raises(ComposeError, match='Docker is not running'):
        WPCompose.check_docker(controller)


def test_check_compose_file(controller, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ComposeError, match='docker-compose.yml not found'):
        WPCompose.check_compose_file(controller)
    (tmp_path / 'docker-compose.yml').write_text('services: {}\n')
    WPCompose.check_compose_file(controller)


def test_up_down_and_logs_arguments(controller, runner):
    WPCompose.up(controller, force_recreate=True)
    WPCompose.down(controller, volumes=True)
    WPCompose.logs(controller, 'wordpress')
    assert runner.calls == [
        ['docker', 'compose', '-f', 'docker-compose.yml', 'up', '-d', '--force-recreate'],
        ['docker', 'compose', '-f', 'docker-compose.yml', 'down', '-v'],
        ['docker', 'compose', '-f', 'docker-compose.yml', 'logs', '-f', 'wordpress'],
    ]


def test_failed_pull_raises(controller, runner):
    runner.on('pull', returncode=1)
    with pytest.raises(ComposeError):
        WPCompose.pull(controller)


def test_dump_database_writes_file(controller, runner, tmp_path):
    runner.on('mysqldump', stdout='CREATE TABLE wp_posts;\n')
    dest = tmp_path / 'database.sql'
    WPCompose.dump_database(controller, str(dest))
    argv = runner.find('mysqldump')
    assert argv[argv.index('exec'):argv.index('exec') + 3] == ['exec', '-T', 'db']
    assert '--password=wordpress_password' in argv
    assert '--single-transaction' in argv
    assert argv[-1] == 'wordpress'
    assert dest.read_text() == 'CREATE TABLE wp_posts;\n'


def test_failed_dump_raises(controller, runner, tmp_path):
    runner.on('mysqldump', returncode=2)
    with pytest.raises(ComposeError, match='mysqldump failed'):
        WPCompose.dump_database(controller, str(tmp_path / 'database.sql'))
