"""Random password generation"""
import secrets

from wpdock.core.logging import Log
from wpdock.core.shellexec import CommandExecutionError, WPShellExec


class RANDOM:
    """Generate random strings for credentials"""

    @staticmethod
    def password(controller, nbytes=12):
        """base64 password from ``openssl rand``.

        If openssl is missing or prints nothing, the bytes come from the
        OS random source instead.
        """
        try:
            generated = WPShellExec.cmd_exec_stdout(
                controller, ['openssl', 'rand', '-base64', str(nbytes)], log=True).strip()
        except CommandExecutionError as e:
            Log.debug(controller, str(e))
            generated = ''
        if not generated:
            Log.debug(controller, "openssl produced no output, using secrets")
            generated = secrets.token_urlsafe(nbytes)
        return generated
