from cement import Controller, ex

from wpdock.core.logging import Log
from wpdock.core.template import WPTemplate


class WPEnvInitController(Controller):
    class Meta:
        label = 'env_init'
        stacked_on = 'base'
        stacked_type = 'embedded'
        description = 'write the compose and PHP configuration files'

    def _template_data(self):
        config = self.app.config
        return {
            'compose_file': config.get('wpdock', 'compose_file'),
            'content_dir': config.get('wpdock', 'content_dir'),
            'db_service': config.get('database', 'service'),
            'db_container': config.get('database', 'container'),
            'db_name': config.get('database', 'name'),
            'db_user': config.get('database', 'user'),
            'db_password': config.get('database', 'password'),
            'db_root_password': config.get('database', 'root_password'),
            'db_volume': config.get('database', 'volume'),
            'db_port': config.get('database', 'port'),
            'wp_container': config.get('wordpress', 'container'),
            'cli_service': config.get('wordpress', 'cli_service'),
            'cli_container': config.get('wordpress', 'cli_container'),
            'wp_port': config.get('wordpress', 'port'),
            'pma_port': config.get('wordpress', 'phpmyadmin_port'),
            'pma_container': config.get('wordpress', 'phpmyadmin_container'),
            'memory_limit': config.get('wordpress', 'memory_limit'),
            'upload_max_filesize': config.get('wordpress', 'upload_max_filesize'),
            'environment_type': 'development',
            'debug': 'true',
        }

    @ex(
        help='write docker-compose.yml, wp-config-local.php and uploads.ini',
        arguments=[
            (['--force'],
             dict(help='overwrite existing files', action='store_true')),
        ],
    )
    def init(self):
        data = self._template_data()
        files = [
            (data['compose_file'], 'docker-compose.mustache'),
            ('wp-config-local.php', 'wp-config-local.mustache'),
            ('uploads.ini', 'uploads-ini.mustache'),
        ]
        for fileconf, template in files:
            if WPTemplate.deploy(self, fileconf, template, data,
                                 overwrite=self.app.pargs.force):
                Log.valide(self, f"Writing {fileconf}")
            else:
                Log.info(self, f"{fileconf} exists, use --force to overwrite")
        Log.info(self, "Use 'wpdock start' to start the environment", log=False)
