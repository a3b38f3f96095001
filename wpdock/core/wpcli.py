"""WP-CLI wrapper running ``wp`` inside the compose CLI service"""
from typing import List

from wpdock.core.compose import WPCompose
from wpdock.core.logging import Log
from wpdock.core.shellexec import WPShellExec


class WPCliError(Exception):
    """Raised when a WP-CLI command fails"""
    pass


def build_wp_command(action, *args, **kwargs) -> List[str]:
    """argv for ``wp <action> <args> --<key>=<value>``.

    ``action`` may hold several words (``"plugin install"``). None
    positional args are dropped; an empty string is kept, since
    ``wp rewrite structure ''`` means plain permalinks. A True or None
    option becomes a bare ``--flag``, False drops it.
    """
    argv = ['wp'] + action.split()

    for arg in args:
        if arg is None:
            continue
        argv.append(str(arg))

    for key, value in kwargs.items():
        if isinstance(value, bool):
            if value:
                argv.append(f"--{key}")
        elif value is None:
            argv.append(f"--{key}")
        else:
            argv.append(f"--{key}={value}")

    return argv


class WPCli:
    """Run WP-CLI commands through ``docker compose exec``"""

    @staticmethod
    def service(controller) -> str:
        return controller.app.config.get('wordpress', 'cli_service')

    @staticmethod
    def command(controller, action, *args, tty=None, **kwargs) -> List[str]:
        return WPCompose.exec_command(
            controller, WPCli.service(controller),
            build_wp_command(action, *args, **kwargs), tty=tty)

    @staticmethod
    def is_wordpress_up(controller) -> bool:
        return WPCompose.is_up(controller, controller.app.config.get('wordpress', 'container'))

    @staticmethod
    def run(controller, action, *args, errormsg='', **kwargs) -> None:
        """Run a WP-CLI command with its output on the terminal.

        Raises WPCliError on a non-zero exit.
        """
        cmd = WPCli.command(controller, action, *args, **kwargs)
        if not WPShellExec.cmd_exec(controller, cmd, capture=False):
            raise WPCliError(errormsg or f"wp {action} failed")

    @staticmethod
    def output(controller, action, *args, **kwargs) -> str:
        """Captured, stripped stdout of a WP-CLI command"""
        cmd = WPCli.command(controller, action, *args, tty=False, **kwargs)
        return WPShellExec.cmd_exec_stdout(controller, cmd).strip()

    @staticmethod
    def export_db(controller, dest, **kwargs) -> None:
        """``wp db export -`` streamed into a file on the host"""
        cmd = WPCli.command(controller, 'db export', '-', tty=False, **kwargs)
        with open(dest, 'wb') as out:
            ok = WPShellExec.cmd_exec_redirect(controller, cmd, stdout=out)
        if not ok:
            raise WPCliError(f"Failed to export database to {dest}")
        Log.debug(controller, f"Database exported to {dest}")

    @staticmethod
    def import_db(controller, src) -> None:
        """``wp db import -`` fed from a file on the host"""
        cmd = WPCli.command(controller, 'db import', '-', tty=False)
        with open(src, 'rb') as dump:
            ok = WPShellExec.cmd_exec_redirect(controller, cmd, stdin=dump)
        if not ok:
            raise WPCliError(f"Failed to import database from {src}")
