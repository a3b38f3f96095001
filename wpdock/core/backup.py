"""
wpdock Backup Service
Backup functionality shared by the environment and WP-CLI commands.

Two layouts are produced under the configured backup directory:

- environment backup (``wpdock backup``): ``wp-content/``, ``database.sql``
  when the database container is up, and ``backup_info.txt``
- site backup (``wpdock wp backup``): ``database.sql`` exported by WP-CLI,
  ``wordpress-files/`` copied out of the WordPress container, and
  ``backup-info.txt``

Usage:
    from wpdock.core.backup import WPBackup

    backup = WPBackup(controller)
    path = backup.create_environment_backup()
"""

import os
import re
from datetime import datetime
from typing import Any, Dict, List, Optional

from wpdock.core.compose import ComposeError, WPCompose
from wpdock.core.fileutils import WPFileUtils
from wpdock.core.logging import Log
from wpdock.core.variables import WPVar
from wpdock.core.wpcli import WPCli


class BackupError(Exception):
    """Raised when a backup or restore cannot complete"""
    pass


ENV_INFO_FILE = 'backup_info.txt'
SITE_INFO_FILE = 'backup-info.txt'
DATABASE_FILE = 'database.sql'
SITE_FILES_DIR = 'wordpress-files'

BACKUP_NAME = re.compile(r'^(\d{8}_\d{6})(?:_(\d+))?$')


def _backup_order(path):
    name = os.path.basename(path)
    match = BACKUP_NAME.match(name)
    if not match:
        return (name, 0)
    return (match.group(1), int(match.group(2) or 0))


class WPBackup:
    """Backup service for the compose environment."""

    def __init__(self, controller):
        self.controller = controller
        self.config = controller.app.config
        self.backup_root = self.config.get('wpdock', 'backup_dir')
        self.content_dir = self.config.get('wpdock', 'content_dir')

    @staticmethod
    def _timestamp():
        return WPVar.timestamp()

    def _content_name(self) -> str:
        return os.path.basename(os.path.normpath(self.content_dir))

    def _target_dir(self) -> str:
        """Create and return a fresh backup directory.

        An existing directory for the same second is never reused.
        """
        target = WPFileUtils.unique_path(
            self.controller, os.path.join(self.backup_root, self._timestamp()))
        WPFileUtils.mkdir(self.controller, target)
        return target

    def _render_info(self, target_dir: str, filename: str, template: str, data: Dict[str, Any]) -> None:
        data = dict(data, created=datetime.now().strftime('%a %b %d %H:%M:%S %Y'))
        with open(os.path.join(target_dir, filename), 'w', encoding='utf-8') as f:
            self.controller.app.render(data, template, out=f)

    def create_environment_backup(self) -> str:
        """Copy wp-content and dump the database when it is running.

        Returns:
            str: path of the new backup directory
        """
        target_dir = self._target_dir()

        if os.path.isdir(self.content_dir):
            Log.step(self.controller, f"Backing up {self.content_dir}...")
            WPFileUtils.copyfiles(
                self.controller, self.content_dir,
                os.path.join(target_dir, self._content_name()))

        if WPCompose.is_up(self.controller, self.config.get('database', 'container')):
            Log.step(self.controller, "Backing up database...")
            try:
                WPCompose.dump_database(self.controller, os.path.join(target_dir, DATABASE_FILE))
            except ComposeError as e:
                raise BackupError(str(e))
        else:
            Log.warn(self.controller, "Database not running - skipping database backup")

        self._render_info(target_dir, ENV_INFO_FILE, 'backup-info.mustache', {
            'db_name': self.config.get('database', 'name'),
            'db_user': self.config.get('database', 'user'),
            'content_dir': self.content_dir,
        })
        return target_dir

    def create_site_backup(self) -> str:
        """Export the database with WP-CLI and copy the WordPress webroot.

        Returns:
            str: path of the new backup directory
        """
        target_dir = self._target_dir()

        Log.step(self.controller, "Exporting database...")
        WPCli.export_db(self.controller, os.path.join(target_dir, DATABASE_FILE),
                        **{'add-drop-table': True})

        Log.step(self.controller, "Backing up WordPress files...")
        try:
            WPCompose.copy_from(
                self.controller, self.config.get('wordpress', 'container'),
                WPVar.wp_webroot, os.path.join(target_dir, SITE_FILES_DIR))
        except ComposeError as e:
            raise BackupError(str(e))

        siteurl = WPCli.output(self.controller, 'option get', 'siteurl')
        self._render_info(target_dir, SITE_INFO_FILE, 'wp-backup-info.mustache', {
            'wp_version': WPCli.output(self.controller, 'core version'),
            'db_name': self.config.get('database', 'name'),
            'siteurl': siteurl,
        })
        return target_dir

    def describe(self, path: str) -> Dict[str, Any]:
        """Contents summary of one backup directory"""
        contents = []
        for entry in (self._content_name(), DATABASE_FILE, SITE_FILES_DIR):
            if os.path.exists(os.path.join(path, entry)):
                contents.append(entry)
        return {
            'name': os.path.basename(path),
            'path': path,
            'contents': contents,
            'size': WPFileUtils.human_size(WPFileUtils.dirsize(path)),
        }

    def list_backups(self) -> List[str]:
        """Backup directories, newest first.

        Names are timestamps with an optional collision suffix; the
        suffix is compared as a number so _10 sorts after _2.
        """
        if not os.path.isdir(self.backup_root):
            return []
        entries = [os.path.join(self.backup_root, name)
                   for name in os.listdir(self.backup_root)]
        return sorted((e for e in entries if os.path.isdir(e)),
                      key=_backup_order, reverse=True)

    def restore(self, backup_dir: str) -> Optional[str]:
        """Restore wp-content and the database from an environment backup.

        The current wp-content is kept aside and put back if copying the
        backed-up tree fails.

        Returns:
            str or None: path of the safety copy of the previous wp-content
        """
        if not os.path.isdir(backup_dir):
            raise BackupError(f"Backup not found: {backup_dir}")

        content_name = self._content_name()
        src_content = os.path.join(backup_dir, content_name)
        dump_file = os.path.join(backup_dir, DATABASE_FILE)
        if not os.path.isdir(src_content) and not os.path.isfile(dump_file):
            raise BackupError(f"Nothing to restore in {backup_dir}")

        safety = None
        if os.path.isdir(src_content):
            if os.path.isdir(self.content_dir):
                safety = WPFileUtils.unique_path(
                    self.controller, f"{self.content_dir}.backup.{self._timestamp()}")
                WPFileUtils.copyfiles(self.controller, self.content_dir, safety)
                Log.debug(self.controller, f"Created safety backup at: {safety}")
            try:
                WPFileUtils.copyfiles(self.controller, src_content, self.content_dir, overwrite=True)
                Log.success(self.controller, f"{self.content_dir} restored")
            except OSError as e:
                if safety:
                    WPFileUtils.copyfiles(self.controller, safety, self.content_dir, overwrite=True)
                    Log.info(self.controller, f"Original {self.content_dir} restored from safety backup")
                raise BackupError(f"Restore failed: {e}")
        else:
            Log.warn(self.controller, f"No {content_name} directory found in backup")

        if os.path.isfile(dump_file):
            if WPCompose.is_up(self.controller, self.config.get('database', 'container')):
                Log.step(self.controller, "Importing database...")
                try:
                    WPCompose.load_database(self.controller, dump_file)
                except ComposeError as e:
                    raise BackupError(str(e))
                Log.success(self.controller, "Database restored")
            else:
                Log.warn(self.controller, "Database not running - skipping database restore")
        else:
            Log.warn(self.controller, f"No database dump found: {dump_file}")

        return safety
