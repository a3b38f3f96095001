"""wpdock main application entry point."""
import sys
from copy import deepcopy

from cement import App, init_defaults
from cement.core.exc import CaughtSignal
from cement.ext.ext_argparse import ArgparseArgumentHandler

from wpdock.cli.controllers.base import WPDockBaseController
from wpdock.cli.plugins.env_backup import WPEnvBackupController
from wpdock.cli.plugins.env_init import WPEnvInitController
from wpdock.cli.plugins.environment import WPEnvironmentController
from wpdock.cli.plugins.wp_menus import WPMenusController
from wpdock.cli.plugins.wptools import WPToolsController
from wpdock.core.logging import Log
from wpdock.core.shellexec import CommandExecutionError
from wpdock.core.variables import WPVar

# application default.  should update config/wpdock.conf as well.
defaults = init_defaults('wpdock', 'database', 'wordpress', 'log.logging')

defaults['wpdock']['compose_file'] = WPVar.wp_compose_file
defaults['wpdock']['backup_dir'] = WPVar.wp_backup_dir
defaults['wpdock']['content_dir'] = WPVar.wp_content_dir
defaults['wpdock']['startup_wait'] = WPVar.wp_startup_wait
defaults['wpdock']['restart_wait'] = WPVar.wp_restart_wait

defaults['database']['service'] = WPVar.wp_db_service
defaults['database']['container'] = WPVar.wp_db_container
defaults['database']['name'] = WPVar.wp_db_name
defaults['database']['user'] = WPVar.wp_db_user
defaults['database']['password'] = WPVar.wp_db_password
defaults['database']['root_password'] = WPVar.wp_db_root_password
defaults['database']['volume'] = WPVar.wp_db_volume
defaults['database']['port'] = WPVar.wp_db_port

defaults['wordpress']['container'] = WPVar.wp_container
defaults['wordpress']['cli_service'] = WPVar.wp_cli_service
defaults['wordpress']['cli_container'] = WPVar.wp_cli_container
defaults['wordpress']['port'] = WPVar.wp_port
defaults['wordpress']['phpmyadmin_port'] = WPVar.wp_pma_port
defaults['wordpress']['phpmyadmin_container'] = WPVar.wp_pma_container
defaults['wordpress']['url'] = f"http://localhost:{WPVar.wp_port}"
defaults['wordpress']['phpmyadmin_url'] = f"http://localhost:{WPVar.wp_pma_port}"
defaults['wordpress']['memory_limit'] = WPVar.wp_memory_limit
defaults['wordpress']['upload_max_filesize'] = WPVar.wp_upload_max_filesize

defaults['log.logging']['file'] = WPVar.wp_log_file
defaults['log.logging']['level'] = 'INFO'
defaults['log.logging']['to_console'] = False


class WPDockArgumentHandler(ArgparseArgumentHandler):
    """argparse handler printing the full help on bad input"""

    class Meta:
        label = 'wpdock_argparse'

    def error(self, message):
        self.print_help(sys.stdout)
        self.exit(1, f"\n{Log.FAIL}❌ {message}{Log.ENDC}\n")


class WPDockApp(App):
    class Meta:
        label = 'wpdock'

        config_defaults = defaults

        # project local configuration, read after the system and user ones
        config_files = ['./wpdock.conf']

        extensions = ['mustache']
        log_handler = 'logging'
        output_handler = 'mustache'
        template_handler = 'mustache'
        template_module = 'wpdock.cli.templates'

        argument_handler = 'wpdock_argparse'

        handlers = [
            WPDockArgumentHandler,
            WPDockBaseController,
            WPEnvironmentController,
            WPEnvBackupController,
            WPEnvInitController,
            WPToolsController,
            WPMenusController,
        ]

        exit_on_close = True


test_defaults = deepcopy(defaults)
test_defaults['log.logging']['file'] = None


class WPDockTestApp(WPDockApp):
    """A test app that is better suited for testing."""
    class Meta:
        argv = []
        config_defaults = test_defaults
        config_files = []
        core_system_config_files = []
        core_user_config_files = []
        exit_on_close = False


# Define the applicaiton object outside of main, as some libraries might wish
# to import it as a global (rather than passing it into another class/func)
app = WPDockApp()


def main():
    with app:
        try:
            app.run()

        except CommandExecutionError as e:
            print(f"{Log.FAIL}❌ {e}{Log.ENDC}")
            app.exit_code = 1

        except CaughtSignal as e:
            # Default Cement signals are SIGINT and SIGTERM, exit 0 (non-error)
            print(f'\n{e}')
            app.exit_code = 0


if __name__ == '__main__':
    main()
