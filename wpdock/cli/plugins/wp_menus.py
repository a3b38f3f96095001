"""Interactive database and site management menus."""
import os

from cement import Controller, ex

from wpdock.cli.plugins.env_functions import confirm
from wpdock.cli.plugins.wp_functions import WP_ERRORS, ask, check_wordpress, print_menu
from wpdock.core.logging import Log
from wpdock.core.variables import WPVar
from wpdock.core.wpcli import WPCli

DB_OPERATIONS = [
    "Export database",
    "Import database",
    "Reset database",
    "Optimize database",
    "Search and replace URLs",
]

SITE_OPERATIONS = [
    "Flush rewrite rules",
    "Clear all caches",
    "Update permalink structure",
    "Set maintenance mode",
    "Disable maintenance mode",
    "Generate sample content",
]


class WPMenusController(Controller):
    class Meta:
        label = 'wp_menus'
        stacked_on = 'wp'
        stacked_type = 'embedded'
        description = 'database and site management menus'

    def _choice(self, title, entries):
        print_menu(title, entries)
        return ask('Select operation: ')

    # database menu

    def _db_export(self):
        filename = ask('Export filename (default: export.sql): ', 'export.sql')
        WPCli.export_db(self, filename)
        Log.success(self, f"Database exported to {filename}")

    def _db_import(self):
        sql_file = ask('SQL file path: ')
        if not os.path.isfile(sql_file):
            Log.error(self, f"File not found: {sql_file}")
        WPCli.import_db(self, sql_file)
        Log.success(self, f"Database imported from {sql_file}")

    def _db_reset(self):
        Log.warn(self, "This will DELETE ALL WordPress data!")
        if confirm('Are you sure?'):
            WPCli.run(self, 'db reset', yes=True)
            Log.success(self, "Database reset!")
        else:
            Log.info(self, "Database reset cancelled")

    def _db_optimize(self):
        WPCli.run(self, 'db optimize')
        Log.success(self, "Database optimized!")

    def _db_search_replace(self):
        old_url = ask('Old URL: ')
        new_url = ask('New URL: ')
        if not old_url or not new_url:
            Log.error(self, "Both the old and the new URL are required")
        WPCli.run(self, 'search-replace', old_url, new_url)
        Log.success(self, "URLs updated!")

    @ex(label='db-ops', help='database operations menu')
    def db_ops(self):
        check_wordpress(self)
        actions = {
            '1': self._db_export,
            '2': self._db_import,
            '3': self._db_reset,
            '4': self._db_optimize,
            '5': self._db_search_replace,
        }
        action = actions.get(self._choice("Database Operations:", DB_OPERATIONS))
        if action is None:
            Log.error(self, "Invalid choice")
        try:
            action()
        except WP_ERRORS + (OSError,) as e:
            Log.error(self, str(e))

    # site menu

    def _flush_rewrite(self):
        WPCli.run(self, 'rewrite flush')
        Log.success(self, "Rewrite rules flushed!")

    def _clear_caches(self):
        WPCli.run(self, 'cache flush')
        WPCli.run(self, 'transient delete', all=True)
        Log.success(self, "All caches cleared!")

    def _permalinks(self):
        presets = WPVar.wp_permalink_structures
        print_menu("Permalink structures:",
                   [label for label, _ in presets] + ["Custom structure"])
        choice = ask('Select structure: ')
        try:
            index = int(choice) - 1
        except ValueError:
            index = -1
        if 0 <= index < len(presets):
            structure = presets[index][1]
        elif index == len(presets):
            structure = ask('Enter custom structure: ')
        else:
            Log.error(self, "Invalid choice")
        WPCli.run(self, 'rewrite structure', structure)
        Log.success(self, "Permalink structure updated!")

    def _maintenance_on(self):
        WPCli.run(self, 'maintenance-mode activate')
        Log.success(self, "Maintenance mode enabled!")

    def _maintenance_off(self):
        WPCli.run(self, 'maintenance-mode deactivate')
        Log.success(self, "Maintenance mode disabled!")

    def _generate_content(self):
        WPCli.run(self, 'post generate', count=10)
        WPCli.run(self, 'user generate', count=5)
        WPCli.run(self, 'comment generate', count=20)
        Log.success(self, "Sample content generated!")

    @ex(label='site-mgmt', help='site management operations')
    def site_mgmt(self):
        check_wordpress(self)
        actions = {
            '1': self._flush_rewrite,
            '2': self._clear_caches,
            '3': self._permalinks,
            '4': self._maintenance_on,
            '5': self._maintenance_off,
            '6': self._generate_content,
        }
        action = actions.get(self._choice("Site Management:", SITE_OPERATIONS))
        if action is None:
            Log.error(self, "Invalid choice")
        try:
            action()
        except WP_ERRORS + (OSError,) as e:
            Log.error(self, str(e))
