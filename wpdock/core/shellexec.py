"""wpdock Shell Functions"""
import re
import subprocess
from typing import IO, Optional, Sequence, Union

from wpdock.core.logging import Log


class CommandExecutionError(Exception):
    """custom Exception for command execution"""
    pass


class WPShellExec:
    """Method to run shell commands"""
    def __init__(self):
        pass

    _SECRET_PATTERNS = [
        r'(--password=)(\S+)', r'(--user_pass=)(\S+)', r'(--pass=)(\S+)',
        r'(--dbpass=)(\S+)', r'(-p\s+)(\S+)', r'(--password\s+)(\S+)',
    ]

    @staticmethod
    def _redact(s: str) -> str:
        for pat in WPShellExec._SECRET_PATTERNS:
            s = re.sub(pat, r'\1***', s, flags=re.IGNORECASE)
        return s

    @staticmethod
    def _shown(command: Union[str, Sequence[str]]) -> str:
        if isinstance(command, str):
            return WPShellExec._redact(command)
        return WPShellExec._redact(" ".join(map(str, command)))

    @staticmethod
    def cmd_exec(
        controller,
        command: Union[str, Sequence[str]],
        errormsg: str = '',
        log: bool = True,
        capture: bool = True,
    ) -> bool:
        """Run a command and return True on a zero exit status.

        Strings run via shell; sequences run without shell. With
        ``capture=False`` the child inherits the terminal, which is what
        streaming commands (``logs -f``, ``wp`` listings) need.
        """
        use_shell = isinstance(command, str)
        if log:
            Log.debug(controller, f"Running command: {WPShellExec._shown(command)}")
        try:
            if capture:
                proc = subprocess.run(
                    command,
                    text=True,
                    encoding="utf-8",
                    errors="replace",
                    capture_output=True,
                    shell=use_shell,
                )
                if proc.stderr and proc.stderr.strip():
                    Log.debug(controller, f"Command Output: {proc.stdout}, \nCommand Error: {proc.stderr}")
                else:
                    Log.debug(controller, f"Command Output: {proc.stdout}")
            else:
                proc = subprocess.run(command, shell=use_shell)

            if proc.returncode != 0 and errormsg:
                Log.error(controller, errormsg, False)

            return proc.returncode == 0

        except OSError as e:
            Log.debug(controller, str(e))
            raise CommandExecutionError(f"unable to run {WPShellExec._shown(command)}: {e}")

    @staticmethod
    def cmd_exec_stdout(controller, command, errormsg: str = '', log: bool = True) -> str:
        """Run command and return stdout as text, regardless of exit status."""
        use_shell = isinstance(command, str)
        if log:
            Log.debug(controller, f"Running command: {WPShellExec._shown(command)}")
        try:
            proc = subprocess.run(
                command,
                shell=use_shell,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            Log.debug(controller, str(e))
            raise CommandExecutionError(f"unable to run {WPShellExec._shown(command)}: {e}")

        if proc.stderr and proc.stderr.strip():
            Log.debug(controller, f"Command Output: {proc.stdout}, \nCommand Error: {proc.stderr}")
        else:
            Log.debug(controller, f"Command Output: {proc.stdout}")

        if proc.returncode != 0 and errormsg:
            Log.error(controller, errormsg, False)
        return proc.stdout

    @staticmethod
    def cmd_exec_redirect(
        controller,
        command: Sequence[str],
        stdin: Optional[IO] = None,
        stdout: Optional[IO] = None,
        errormsg: str = '',
    ) -> bool:
        """Run command with its stdin and/or stdout bound to open files.

        Used for database dumps and imports, where the payload never goes
        through memory.
        """
        Log.debug(controller, f"Running command: {WPShellExec._shown(command)}")
        try:
            proc = subprocess.run(
                list(command),
                stdin=stdin,
                stdout=stdout,
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            Log.debug(controller, str(e))
            raise CommandExecutionError(f"unable to run {WPShellExec._shown(command)}: {e}")

        if proc.stderr:
            Log.debug(controller, f"Command Error: {proc.stderr.decode('utf-8', 'replace')}")
        if proc.returncode != 0 and errormsg:
            Log.error(controller, errormsg, False)
        return proc.returncode == 0
