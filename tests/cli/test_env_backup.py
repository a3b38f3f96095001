import os

import pytest

from conftest import make_controller, ps_listing
from wpdock.cli.plugins.env_backup import WPEnvBackupController


@pytest.fixture
def content(project):
    content = project / 'wp-content'
    (content / 'uploads' / '2024').mkdir(parents=True)
    (content / 'uploads' / '2024' / 'photo.jpg').write_bytes(b'\xff\xd8')
    return content


def test_backup_without_database(app, content, runner, capsys):
    runner.on('ps', stdout=ps_listing())
    controller = make_controller(WPEnvBackupController, app)
    controller.backup()

    backups = os.listdir(content.parent / 'backups')
    assert len(backups) == 1
    target = content.parent / 'backups' / backups[0]
    assert (target / 'wp-content' / 'uploads' / '2024' / 'photo.jpg').is_file()
    assert not (target / 'database.sql').exists()

    out = capsys.readouterr().out
    assert 'skipping database backup' in out
    assert 'Backup created:' in out
    assert 'Backup size:' in out


def test_backup_failure_exits(app, content, runner, capsys):
    runner.on('ps', stdout=ps_listing('wp_mysql'))
    runner.on('mysqldump', returncode=1)
    controller = make_controller(WPEnvBackupController, app)
    with pytest.raises(SystemExit):
        controller.backup()
    assert 'Backup failed' in capsys.readouterr().out


def test_backups_lists_newest_first(app, project, capsys):
    older = project / 'backups' / '20240101_000000'
    newer = project / 'backups' / '20240102_000000'
    (older / 'wp-content').mkdir(parents=True)
    newer.mkdir(parents=True)
    (newer / 'database.sql').write_text('--')

    controller = make_controller(WPEnvBackupController, app)
    controller.backups()

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith('20240102_000000')
    assert 'database.sql' in lines[0]
    assert lines[1].startswith('20240101_000000')
    assert 'wp-content' in lines[1]


def test_backups_when_empty(app, project, capsys):
    controller = make_controller(WPEnvBackupController, app)
    controller.backups()
    assert 'No backups found in backups' in capsys.readouterr().out


def test_restore_confirmed(app, content, runner, answers):
    backup = content.parent / 'backups' / '20240101_000000'
    (backup / 'wp-content' / 'themes' / 'astra').mkdir(parents=True)
    runner.on('ps', stdout=ps_listing())
    answers.append('y')

    controller = make_controller(WPEnvBackupController, app,
                                 backup=str(backup), force=False)
    controller.restore()

    assert (content / 'themes' / 'astra').is_dir()
    assert not (content / 'uploads').exists()
    snapshots = [n for n in os.listdir(content.parent) if n.startswith('wp-content.backup.')]
    assert len(snapshots) == 1


def test_restore_declined(app, content, answers, capsys):
    backup = content.parent / 'backups' / '20240101_000000'
    (backup / 'wp-content').mkdir(parents=True)
    answers.append('n')

    controller = make_controller(WPEnvBackupController, app,
                                 backup=str(backup), force=False)
    controller.restore()

    assert (content / 'uploads' / '2024' / 'photo.jpg').is_file()
    assert 'Restore cancelled' in capsys.readouterr().out


def test_restore_defaults_to_latest(app, content, runner, answers):
    for name in ('20240101_000000', '20240105_000000'):
        (content.parent / 'backups' / name / 'wp-content' / name).mkdir(parents=True)
    runner.on('ps', stdout=ps_listing())
    answers.extend(['', 'y'])

    controller = make_controller(WPEnvBackupController, app, backup=None, force=False)
    controller.restore()

    assert (content / '20240105_000000').is_dir()


def test_restore_unknown_backup(app, project, capsys):
    controller = make_controller(WPEnvBackupController, app,
                                 backup='backups/missing', force=True)
    with pytest.raises(SystemExit):
        controller.restore()
    assert 'Backup not found: backups/missing' in capsys.readouterr().out
