"""Environment lifecycle commands: start, stop, restart, status, logs,
reset, update and sample."""
import os
import time

from cement import Controller, ex

from wpdock.cli.plugins.env_functions import (
    confirm,
    create_directories,
    get_wait,
    show_credentials,
    show_service_urls,
)
from wpdock.core.compose import ComposeError, WPCompose
from wpdock.core.fileutils import WPFileUtils
from wpdock.core.logging import Log
from wpdock.core.shellexec import CommandExecutionError
from wpdock.core.variables import WPVar
from wpdock.core.wpcli import WPCli, WPCliError


class WPEnvironmentController(Controller):
    class Meta:
        label = 'environment'
        stacked_on = 'base'
        stacked_type = 'embedded'
        description = 'manage the WordPress compose stack'

    def _start(self):
        Log.step(self, "Starting WordPress development environment...")

        WPCompose.check_docker(self)
        WPCompose.check_compose_file(self)
        create_directories(self)

        Log.step(self, "Pulling latest Docker images...")
        WPCompose.pull(self)

        Log.step(self, "Starting all services...")
        WPCompose.up(self)

        Log.step(self, "Waiting for services to be ready...")
        time.sleep(get_wait(self, 'startup_wait'))

        if not WPCompose.is_up(self):
            raise ComposeError("Failed to start some services. Check logs with 'wpdock logs'")

        Log.success(self, "WordPress environment started successfully!")
        Log.info(self, "", log=False)
        show_service_urls(self)
        Log.info(self, "", log=False)
        show_credentials(self)
        Log.info(self, "", log=False)
        Log.info(self, "Use 'wpdock wp create-admin' to create a WordPress admin user", log=False)

    def _stop(self):
        Log.step(self, "Stopping WordPress development environment...")
        WPCompose.check_compose_file(self)
        WPCompose.down(self)
        Log.success(self, "WordPress environment stopped successfully!")

    @ex(help='start the WordPress environment')
    def start(self):
        try:
            self._start()
        except (ComposeError, CommandExecutionError) as e:
            Log.error(self, str(e))

    @ex(help='stop the WordPress environment')
    def stop(self):
        try:
            self._stop()
        except (ComposeError, CommandExecutionError) as e:
            Log.error(self, str(e))

    @ex(help='restart the WordPress environment')
    def restart(self):
        Log.step(self, "Restarting WordPress development environment...")
        try:
            self._stop()
            time.sleep(get_wait(self, 'restart_wait'))
            self._start()
        except (ComposeError, CommandExecutionError) as e:
            Log.error(self, str(e))

    @ex(help='show current status of all services')
    def status(self):
        Log.step(self, "WordPress Environment Status:")
        print()
        try:
            listed = WPCompose.status_table(self)
        except CommandExecutionError as e:
            Log.debug(self, str(e))
            listed = False
        if listed:
            print()
            show_service_urls(self)
        else:
            Log.warn(self, "No services are currently running")
            Log.info(self, "Use 'wpdock start' to start the environment", log=False)

    @ex(
        help="show logs for all services (or 'logs [service]' for one service)",
        arguments=[
            (['service'],
             dict(help='compose service to follow', nargs='?')),
        ],
    )
    def logs(self):
        Log.step(self, "Showing WordPress logs...")
        try:
            WPCompose.check_compose_file(self)
            WPCompose.logs(self, self.app.pargs.service)
        except (ComposeError, CommandExecutionError) as e:
            Log.error(self, str(e))

    @ex(
        help='reset environment (removes all data - use with caution!)',
        arguments=[
            (['--force'],
             dict(help='reset without prompt', action='store_true')),
        ],
    )
    def reset(self):
        Log.warn(self, "This will remove ALL WordPress data including database, uploads, and plugins!")
        if not (self.app.pargs.force or confirm('Are you sure you want to continue?')):
            Log.info(self, "Reset cancelled")
            return

        Log.step(self, "Resetting WordPress environment...")
        config = self.app.config
        content_dir = config.get('wpdock', 'content_dir')
        snapshot = None
        try:
            WPCompose.down(self)
            WPCompose.down(self, volumes=True)
            WPCompose.volume_rm(self, config.get('database', 'volume'))

            if os.path.isdir(content_dir):
                Log.step(self, f"Backing up {content_dir} before reset...")
                snapshot = WPFileUtils.unique_path(
                    self, f"{content_dir}.backup.{WPVar.timestamp()}")
                WPFileUtils.copyfiles(self, content_dir, snapshot)
                WPFileUtils.clear(self, content_dir)
                create_directories(self)
        except (ComposeError, CommandExecutionError, OSError) as e:
            Log.error(self, str(e))

        Log.success(self, "Environment reset successfully!")
        if snapshot:
            Log.info(self, f"Previous {content_dir} backed up as {snapshot}")
        Log.info(self, "Use 'wpdock start' to recreate the environment", log=False)

    @ex(help='update Docker images and recreate containers')
    def update(self):
        Log.step(self, "Updating WordPress environment...")
        try:
            WPCompose.pull(self)
            WPCompose.up(self, force_recreate=True)
        except (ComposeError, CommandExecutionError) as e:
            Log.error(self, str(e))
        Log.success(self, "Environment updated successfully!")

    @ex(help='install sample content (themes, plugins, pages)')
    def sample(self):
        Log.step(self, "Installing sample WordPress content...")
        try:
            if not WPCli.is_wordpress_up(self):
                Log.error(self, "WordPress is not running. Use 'wpdock start' first.")
            WPCli.run(self, 'plugin install', 'hello-dolly', activate=True)
            WPCli.run(self, 'theme install', 'twentytwentythree', activate=True)
            WPCli.run(self, 'post create',
                      post_type='page',
                      post_title='Sample Page',
                      post_content='This is a sample page created by the setup script.')
        except (WPCliError, CommandExecutionError) as e:
            Log.error(self, str(e))
        Log.success(self, "Sample content installed!")
