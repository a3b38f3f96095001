from types import SimpleNamespace

import pytest

from wpdock.cli.plugins.env_init import WPEnvInitController
from wpdock.core.template import WPTemplate


@pytest.fixture
def controller(app):
    controller = WPEnvInitController()
    controller.app = app
    return controller


def test_wp_config_local_rendered(controller, tmp_path):
    target = tmp_path / 'wp-config-local.php'
    data = controller._template_data()
    assert WPTemplate.deploy(controller, str(target), 'wp-config-local.mustache', data)
    text = target.read_text()
    assert "define('WP_DEBUG', true);" in text
    assert "define('WP_MEMORY_LIMIT', '256M');" in text
    assert "define('WP_ENVIRONMENT_TYPE', 'development');" in text


def test_compose_file_uses_config(controller, tmp_path):
    controller.app.config.set('wordpress', 'port', 9090)
    target = tmp_path / 'docker-compose.yml'
    WPTemplate.deploy(controller, str(target), 'docker-compose.mustache',
                      controller._template_data())
    text = target.read_text()
    assert 'wp_mysql' in text
    assert '9090:80' in text
    assert 'wp-config-local.php' in text


def test_existing_file_kept_without_overwrite(controller, tmp_path):
    target = tmp_path / 'uploads.ini'
    target.write_text('mine\n')
    written = WPTemplate.deploy(controller, str(target), 'uploads-ini.mustache',
                                controller._template_data(), overwrite=False)
    assert written is False
    assert target.read_text() == 'mine\n'


def test_custom_file_takes_precedence(tmp_path, app):
    target = tmp_path / 'uploads.ini'
    (tmp_path / 'uploads.ini.custom').write_text('upload_max_filesize = 1G\n')
    WPTemplate.deploy(SimpleNamespace(app=app), str(target), 'uploads-ini.mustache', {})
    assert target.read_text() == 'upload_max_filesize = 1G\n'
