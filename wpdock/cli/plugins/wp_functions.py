from wpdock.core.backup import BackupError
from wpdock.core.compose import ComposeError
from wpdock.core.logging import Log
from wpdock.core.shellexec import CommandExecutionError
from wpdock.core.wpcli import WPCli, WPCliError

# failures a wp command reports and exits on
WP_ERRORS = (WPCliError, ComposeError, BackupError, CommandExecutionError)


def ask(prompt, default=''):
    """input() that treats a closed stdin as the default answer"""
    try:
        answer = input(prompt).strip()
    except EOFError:
        answer = ''
    return answer or default


def check_wordpress(self):
    """Exit unless the WordPress container is up"""
    try:
        running = WPCli.is_wordpress_up(self)
    except CommandExecutionError as e:
        Log.debug(self, str(e))
        running = False
    if not running:
        Log.error(self, "WordPress is not running. Please run 'wpdock start' first.")


def print_menu(title, entries):
    print(title)
    for number, entry in enumerate(entries, start=1):
        print(f"{number}. {entry}")


def parse_selection(selection, count):
    """0-based indexes from a comma-separated list of 1-based numbers.

    Entries that are not numbers or fall outside 1..count are dropped.
    """
    indexes = []
    for token in selection.split(','):
        token = token.strip()
        try:
            index = int(token) - 1
        except ValueError:
            continue
        if 0 <= index < count:
            indexes.append(index)
    return indexes


def install_and_activate(self, kind, slug, fatal=True):
    """``wp <kind> install <slug> --activate``.

    Returns False on failure when not fatal, raises WPCliError otherwise.
    """
    try:
        WPCli.run(self, f'{kind} install', slug, activate=True,
                  errormsg=f"Failed to install {slug}")
    except WPCliError as e:
        if fatal:
            raise
        Log.warn(self, str(e))
        return False
    return True
