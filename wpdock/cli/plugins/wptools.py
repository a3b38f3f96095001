"""WP-CLI management commands, run in the compose CLI service."""
import os
from getpass import getpass

from cement import Controller, ex

from wpdock.cli.plugins.wp_functions import (
    WP_ERRORS,
    ask,
    check_wordpress,
    install_and_activate,
    parse_selection,
    print_menu,
)
from wpdock.core.backup import WPBackup
from wpdock.core.logging import Log
from wpdock.core.random import RANDOM
from wpdock.core.variables import WPVar
from wpdock.core.wpcli import WPCli, WPCliError


class WPToolsController(Controller):
    class Meta:
        label = 'wp'
        stacked_on = 'base'
        stacked_type = 'nested'
        description = 'WordPress WP-CLI management tools'
        help = 'WordPress WP-CLI management tools'

    @ex(label='help', help='show this help message')
    def show_help(self):
        self._parser.print_help()

    @ex(help='show WordPress installation information')
    def info(self):
        Log.step(self, "WordPress Installation Information:")
        print()
        check_wordpress(self)

        sections = [
            ("📊 WordPress Core:", [('core version', (), {'extra': True})]),
            ("🗄️ Database Status:", [('db check', (), {})]),
            ("👥 User Count:", [('user list', (), {'format': 'count'})]),
            ("📄 Post Count:", [('post list', (), {'format': 'count'})]),
            ("🎨 Active Theme:", [('theme status', (), {})]),
            ("🔌 Active Plugins:", [('plugin list', (), {'status': 'active', 'format': 'table'})]),
            ("⚙️ WordPress URL:", [('option get', ('home',), {}),
                                   ('option get', ('siteurl',), {})]),
        ]
        try:
            for title, commands in sections:
                print(title)
                for action, args, options in commands:
                    WPCli.run(self, action, *args, **options)
                print()
        except WP_ERRORS as e:
            Log.error(self, str(e))

    @ex(
        label='create-admin',
        help='create WordPress admin user',
        arguments=[
            (['--user'], dict(help='admin username')),
            (['--email'], dict(help='admin email')),
            (['--password'],
             dict(help='admin password, generated when empty', dest='admin_pass')),
        ],
    )
    def create_admin(self):
        Log.step(self, "Creating WordPress admin user...")
        check_wordpress(self)
        pargs = self.app.pargs

        admin_user = pargs.user or ask('Admin username: ')
        admin_email = pargs.email or ask('Admin email: ')
        admin_pass = pargs.admin_pass
        if admin_pass is None:
            admin_pass = getpass('Admin password (leave empty for auto-generated): ')

        if not admin_pass:
            admin_pass = RANDOM.password(self)
            Log.info(self, f"Generated password: {admin_pass}", log=False)

        try:
            WPCli.run(self, 'user create', admin_user, admin_email,
                      role='administrator', user_pass=admin_pass,
                      errormsg="Failed to create admin user")
        except WP_ERRORS as e:
            Log.error(self, str(e))

        Log.success(self, "Admin user created successfully!")
        Log.info(self, "", log=False)
        Log.info(self, "Login details:", log=False)
        Log.info(self, f"Username: {admin_user}", log=False)
        Log.info(self, f"Email: {admin_email}", log=False)
        Log.info(self, f"Password: {admin_pass}", log=False)
        Log.info(self, f"Login URL: {self.app.config.get('wordpress', 'url')}/wp-admin/", log=False)

    @ex(
        label='install-plugin',
        help='install popular plugins',
        arguments=[
            (['selection'],
             dict(help='comma-separated menu numbers', nargs='?')),
        ],
    )
    def install_plugin(self):
        Log.step(self, "Installing popular WordPress plugins...")
        check_wordpress(self)

        plugins = WPVar.wp_popular_plugins
        all_choice = str(len(plugins) + 1)
        custom_choice = str(len(plugins) + 2)
        print_menu("Available plugins:", plugins + ["Install all", "Custom plugin"])

        selection = (self.app.pargs.selection
                     or ask('Select plugins to install (comma-separated numbers): '))

        try:
            if selection == all_choice:
                for plugin in plugins:
                    Log.step(self, f"Installing {plugin}...")
                    install_and_activate(self, 'plugin', plugin, fatal=False)
                Log.success(self, "All plugins installed!")
            elif selection == custom_choice:
                custom_plugin = ask('Enter plugin slug or URL: ')
                if not custom_plugin:
                    Log.error(self, "No plugin given")
                install_and_activate(self, 'plugin', custom_plugin)
                Log.success(self, "Custom plugin installed!")
            else:
                for index in parse_selection(selection, len(plugins)):
                    Log.step(self, f"Installing {plugins[index]}...")
                    install_and_activate(self, 'plugin', plugins[index], fatal=False)
                Log.success(self, "Selected plugins installed!")
        except WP_ERRORS as e:
            Log.error(self, str(e))

    @ex(
        label='install-theme',
        help='install and activate themes',
        arguments=[
            (['selection'], dict(help='menu number', nargs='?')),
        ],
    )
    def install_theme(self):
        Log.step(self, "Installing WordPress themes...")
        check_wordpress(self)

        themes = WPVar.wp_popular_themes
        custom_choice = str(len(themes) + 1)
        print_menu("Available themes:", themes + ["Custom theme"])

        selection = self.app.pargs.selection or ask('Select theme to install and activate: ')

        try:
            if selection == custom_choice:
                custom_theme = ask('Enter theme slug or URL: ')
                if not custom_theme:
                    Log.error(self, "No theme given")
                install_and_activate(self, 'theme', custom_theme)
                Log.success(self, "Custom theme installed and activated!")
                return

            try:
                index = int(selection) - 1
            except ValueError:
                index = -1
            if not 0 <= index < len(themes):
                Log.error(self, "Invalid selection")
            theme = themes[index]
            Log.step(self, f"Installing {theme}...")
            install_and_activate(self, 'theme', theme)
            Log.success(self, f"Theme {theme} installed and activated!")
        except WP_ERRORS as e:
            Log.error(self, str(e))

    @ex(help='update WordPress core, plugins, and themes')
    def update(self):
        Log.step(self, "Updating WordPress core, plugins, and themes...")
        check_wordpress(self)
        try:
            print("🔄 Updating WordPress core...")
            WPCli.run(self, 'core update')
            WPCli.run(self, 'core update-db')

            print("🔄 Updating plugins...")
            WPCli.run(self, 'plugin update', all=True)

            print("🔄 Updating themes...")
            WPCli.run(self, 'theme update', all=True)

            print("🔄 Optimizing database...")
            WPCli.run(self, 'db optimize')
        except WP_ERRORS as e:
            Log.error(self, str(e))
        Log.success(self, "WordPress updated successfully!")

    @ex(help='create complete WordPress backup')
    def backup(self):
        Log.step(self, "Creating WordPress backup...")
        check_wordpress(self)
        try:
            backup_dir = WPBackup(self).create_site_backup()
        except WP_ERRORS + (OSError,) as e:
            Log.error(self, f"Backup failed: {e}")
        Log.success(self, f"Backup created in {backup_dir}")

    @ex(
        label='db-export',
        help='export database to SQL file',
        arguments=[
            (['filename'], dict(help='export file', nargs='?')),
        ],
    )
    def db_export(self):
        check_wordpress(self)
        filename = (self.app.pargs.filename
                    or ask('Export filename (default: wordpress_export.sql): ',
                           'wordpress_export.sql'))
        try:
            WPCli.export_db(self, filename)
        except WP_ERRORS + (OSError,) as e:
            Log.error(self, str(e))
        Log.success(self, f"Database exported to {filename}")

    @ex(
        label='db-import',
        help='import database from SQL file',
        arguments=[
            (['sql_file'], dict(help='SQL file to import', nargs='?')),
        ],
    )
    def db_import(self):
        check_wordpress(self)
        sql_file = self.app.pargs.sql_file or ask('SQL file path: ')
        if not os.path.isfile(sql_file):
            Log.error(self, f"File not found: {sql_file}")
        try:
            WPCli.import_db(self, sql_file)
        except WP_ERRORS as e:
            Log.error(self, str(e))
        Log.success(self, "Database imported successfully!")

    @ex(
        label='search-replace',
        help='search and replace URLs in database',
        arguments=[
            (['old_url'], dict(help='URL to search for', nargs='?')),
            (['new_url'], dict(help='replacement URL', nargs='?')),
        ],
    )
    def search_replace(self):
        check_wordpress(self)
        pargs = self.app.pargs
        old_url = pargs.old_url or ask('Old URL: ')
        new_url = pargs.new_url or ask('New URL: ')
        if not old_url or not new_url:
            Log.error(self, "Both the old and the new URL are required")
        try:
            WPCli.run(self, 'search-replace', old_url, new_url)
        except WPCliError as e:
            Log.error(self, str(e))
        Log.success(self, "URLs updated successfully!")
