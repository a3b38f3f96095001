"""wpdock base controller."""
from argparse import RawDescriptionHelpFormatter

from cement import Controller, ex

from wpdock.core.variables import WPVar

BANNER = WPVar.wp_banner

EPILOG = f"""
examples:
  wpdock start                 # Start WordPress environment
  wpdock logs wordpress        # Show WordPress container logs
  wpdock backup                # Create backup
  wpdock wp create-admin       # Create a WordPress admin user

service URLs:
  WordPress:   http://localhost:{WPVar.wp_port}
  phpMyAdmin:  http://localhost:{WPVar.wp_pma_port}
  MySQL:       localhost:{WPVar.wp_db_port}

direct WP-CLI:
  docker compose exec {WPVar.wp_cli_service} wp [command]
"""


class WPDockBaseController(Controller):
    class Meta:
        label = 'base'
        description = 'WordPress Docker Environment Management'
        epilog = EPILOG
        argument_formatter = RawDescriptionHelpFormatter
        arguments = [
            (['-v', '--version'],
             dict(action='version', version=BANNER)),
        ]

    def _default(self):
        self.app.args.print_help()

    @ex(label='help', help='show this help message')
    def show_help(self):
        self.app.args.print_help()
