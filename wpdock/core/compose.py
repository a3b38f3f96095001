"""Docker Compose wrapper

Every call shells out to ``docker compose`` with the project compose file
from the ``[wpdock]`` config section. Container state is read from the
``docker compose ps`` listing, the same text a user would grep.
"""
import os
import re
import sys
from typing import List, Optional, Sequence

from wpdock.core.logging import Log
from wpdock.core.shellexec import WPShellExec


class ComposeError(Exception):
    """Raised when a docker compose operation fails"""
    pass


class WPCompose:
    """docker compose operations"""

    @staticmethod
    def compose_file(controller) -> str:
        return controller.app.config.get('wpdock', 'compose_file')

    @staticmethod
    def base_command(controller) -> List[str]:
        return ['docker', 'compose', '-f', WPCompose.compose_file(controller)]

    @staticmethod
    def docker_running(controller) -> bool:
        """True when the docker daemon answers ``docker info``"""
        return WPShellExec.cmd_exec(controller, ['docker', 'info'])

    @staticmethod
    def compose_file_exists(controller) -> bool:
        return os.path.isfile(WPCompose.compose_file(controller))

    @staticmethod
    def check_docker(controller) -> None:
        if not WPCompose.docker_running(controller):
            raise ComposeError("Docker is not running. Please start Docker first.")

    @staticmethod
    def check_compose_file(controller) -> None:
        if not WPCompose.compose_file_exists(controller):
            raise ComposeError(
                f"{WPCompose.compose_file(controller)} not found in current directory")

    @staticmethod
    def ps(controller, *extra: str) -> str:
        return WPShellExec.cmd_exec_stdout(
            controller, WPCompose.base_command(controller) + ['ps', *extra])

    @staticmethod
    def is_up(controller, container: Optional[str] = None) -> bool:
        """Whether ``docker compose ps`` lists ``container`` as Up.

        Without a container name, any running service counts.
        """
        pattern = re.compile(f"{re.escape(container)}.*Up" if container else "Up")
        return any(pattern.search(line) for line in WPCompose.ps(controller).splitlines())

    @staticmethod
    def _run(controller, args: Sequence[str], errormsg: str, capture: bool = False) -> None:
        command = WPCompose.base_command(controller) + list(args)
        if not WPShellExec.cmd_exec(controller, command, capture=capture):
            raise ComposeError(errormsg)

    @staticmethod
    def pull(controller) -> None:
        WPCompose._run(controller, ['pull'], "docker compose pull failed")

    @staticmethod
    def up(controller, force_recreate: bool = False) -> None:
        args = ['up', '-d']
        if force_recreate:
            args.append('--force-recreate')
        WPCompose._run(controller, args, "docker compose up failed")

    @staticmethod
    def down(controller, volumes: bool = False) -> None:
        args = ['down']
        if volumes:
            args.append('-v')
        WPCompose._run(controller, args, "docker compose down failed")

    @staticmethod
    def status_table(controller) -> bool:
        """Print the service table; False when compose cannot list it."""
        command = WPCompose.base_command(controller) + ['ps', '--format', 'table']
        return WPShellExec.cmd_exec(controller, command, capture=False)

    @staticmethod
    def logs(controller, service: Optional[str] = None) -> None:
        """Follow service logs until interrupted"""
        args = ['logs', '-f']
        if service:
            args.append(service)
        WPCompose._run(controller, args, "docker compose logs failed")

    @staticmethod
    def exec_command(controller, service: str, args: Sequence[str], tty: Optional[bool] = None) -> List[str]:
        """argv for ``docker compose exec``.

        ``-T`` disables the pseudo-TTY; it is added whenever stdin is not a
        terminal, or when the caller captures or redirects output.
        """
        if tty is None:
            tty = sys.stdin.isatty()
        command = WPCompose.base_command(controller) + ['exec']
        if not tty:
            command.append('-T')
        return command + [service] + [str(a) for a in args]

    @staticmethod
    def volume_rm(controller, volume: str) -> bool:
        """Remove a named volume, failure is not an error"""
        return WPShellExec.cmd_exec(controller, ['docker', 'volume', 'rm', volume])

    @staticmethod
    def copy_from(controller, container: str, src: str, dest: str) -> None:
        if not WPShellExec.cmd_exec(controller, ['docker', 'cp', f"{container}:{src}", dest]):
            raise ComposeError(f"docker cp {container}:{src} failed")

    @staticmethod
    def dump_database(controller, dest: str) -> None:
        """mysqldump the WordPress database from the db service into dest"""
        config = controller.app.config
        command = WPCompose.exec_command(
            controller, config.get('database', 'service'),
            ['mysqldump',
             f"--user={config.get('database', 'user')}",
             f"--password={config.get('database', 'password')}",
             '--single-transaction',
             '--routines',
             '--triggers',
             config.get('database', 'name')],
            tty=False)
        with open(dest, 'wb') as out:
            ok = WPShellExec.cmd_exec_redirect(controller, command, stdout=out)
        if not ok:
            raise ComposeError("mysqldump failed to backup database")
        Log.debug(controller, f"Database dumped to {dest}")

    @staticmethod
    def load_database(controller, src: str) -> None:
        """Feed an SQL dump into the WordPress database of the db service"""
        config = controller.app.config
        command = WPCompose.exec_command(
            controller, config.get('database', 'service'),
            ['mysql',
             f"--user={config.get('database', 'user')}",
             f"--password={config.get('database', 'password')}",
             config.get('database', 'name')],
            tty=False)
        with open(src, 'rb') as dump:
            ok = WPShellExec.cmd_exec_redirect(controller, command, stdin=dump)
        if not ok:
            raise ComposeError(f"mysql failed to import {src}")
