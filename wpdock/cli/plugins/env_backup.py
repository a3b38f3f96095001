import os

from cement import Controller, ex

from wpdock.cli.plugins.env_functions import confirm
from wpdock.core.backup import BackupError, WPBackup
from wpdock.core.fileutils import WPFileUtils
from wpdock.core.logging import Log
from wpdock.core.shellexec import CommandExecutionError


class WPEnvBackupController(Controller):
    class Meta:
        label = 'env_backup'
        stacked_on = 'base'
        stacked_type = 'embedded'
        description = 'backup and restore wp-content and the database'

    @ex(help='create a backup of wp-content and database')
    def backup(self):
        Log.step(self, "Creating WordPress backup...")
        service = WPBackup(self)
        try:
            backup_path = service.create_environment_backup()
        except (BackupError, CommandExecutionError, OSError) as e:
            Log.error(self, f"Backup failed: {e}")

        Log.success(self, f"Backup created: {backup_path}")
        Log.info(self, f"Backup size: {WPFileUtils.human_size(WPFileUtils.dirsize(backup_path))}")

    @ex(help='list available backups, newest first')
    def backups(self):
        service = WPBackup(self)
        data = {
            'backup_dir': service.backup_root,
            'backups': [service.describe(path) for path in service.list_backups()],
        }
        print(self.app.render(data, 'backups.mustache', out=None), end='')

    @ex(
        help='restore wp-content and database from a backup directory',
        arguments=[
            (['backup'],
             dict(help='path to backup directory', nargs='?')),
            (['--force'],
             dict(help='restore without prompt', action='store_true')),
        ],
    )
    def restore(self):
        pargs = self.app.pargs
        service = WPBackup(self)

        if not pargs.backup:
            latest = service.list_backups()
            default = latest[0] if latest else ''
            try:
                pargs.backup = input(f'Enter path to backup [{default}]: ').strip() or default
            except EOFError:
                pargs.backup = default
        if not pargs.backup:
            Log.error(self, 'No backup selected')
        if not os.path.isdir(pargs.backup):
            Log.error(self, f"Backup not found: {pargs.backup}")

        Log.warn(self, f"This will replace {service.content_dir} and the database with {pargs.backup}")
        if not (pargs.force or confirm('Are you sure you want to continue?')):
            Log.info(self, "Restore cancelled")
            return

        Log.step(self, f"Restoring from {pargs.backup}...")
        try:
            safety = service.restore(pargs.backup)
        except (BackupError, CommandExecutionError) as e:
            Log.error(self, str(e))

        Log.success(self, f"Restored {pargs.backup}")
        if safety:
            Log.info(self, f"Previous {service.content_dir} kept as {safety}")
