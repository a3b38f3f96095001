"""wpdock template rendering"""
import os

from wpdock.core.logging import Log


class WPTemplate:
    """wpdock template utilities"""

    def deploy(self, fileconf, template, data, overwrite=True):
        """Render a mustache template into fileconf.

        A ``<fileconf>.custom`` file takes precedence and is copied as is.
        Returns True when fileconf was written.
        """
        data = dict(data)
        custom = f'{fileconf}.custom'
        if os.path.isfile(custom):
            Log.debug(self, f'Using custom configuration {custom}')
            with open(custom, encoding='utf-8') as src, \
                    open(fileconf, encoding='utf-8', mode='w') as dest:
                dest.write(src.read())
            return True

        if os.path.isfile(fileconf) and not overwrite:
            Log.debug(self, f'{fileconf} already exists, not overwriting')
            return False

        Log.debug(self, f'Writing the configuration to file {fileconf}')
        with open(fileconf, encoding='utf-8', mode='w') as wp_template:
            self.app.render(data, template, out=wp_template)
        return True
