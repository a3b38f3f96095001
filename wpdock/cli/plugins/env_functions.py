import os

from wpdock.core.fileutils import WPFileUtils
from wpdock.core.logging import Log
from wpdock.core.variables import WPVar

CONTENT_PERMS = 0o755


def confirm(prompt):
    """Ask a [y/N] question; only y or Y is a yes."""
    try:
        reply = input(f'{prompt} [y/N]: ')
    except EOFError:
        reply = ''
    return reply.strip() in ('y', 'Y')


def create_directories(self):
    """Create the wp-content tree and the backup directory."""
    Log.step(self, "Creating necessary directories...")
    config = self.app.config
    content_dir = config.get('wpdock', 'content_dir')

    for sub in WPVar.wp_content_subdirs:
        WPFileUtils.mkdir(self, os.path.join(content_dir, sub))
    WPFileUtils.mkdir(self, config.get('wpdock', 'backup_dir'))

    WPFileUtils.chmod(self, content_dir, CONTENT_PERMS, recursive=True)

    Log.success(self, "Directories created successfully")


def show_service_urls(self):
    config = self.app.config
    Log.info(self, "Service URLs:", log=False)
    Log.info(self, f"🌐 WordPress: {config.get('wordpress', 'url')}", log=False)
    Log.info(self, f"🗄️  phpMyAdmin: {config.get('wordpress', 'phpmyadmin_url')}", log=False)
    Log.info(self, f"📊 MySQL: localhost:{config.get('database', 'port')}", log=False)


def show_credentials(self):
    config = self.app.config
    Log.info(self, "Default database credentials:", log=False)
    Log.info(self, f"  Database: {config.get('database', 'name')}", log=False)
    Log.info(self, f"  Username: {config.get('database', 'user')}", log=False)
    Log.info(self, f"  Password: {config.get('database', 'password')}", log=False)


def get_wait(self, key):
    return float(self.app.config.get('wpdock', key))
