"""wpdock static variables"""
from datetime import datetime


class WPVar:
    """Intialization of core variables"""

    wp_version = "1.0.0"
    wp_banner = f"wpdock v{wp_version}"

    # project layout
    wp_compose_file = "docker-compose.yml"
    wp_backup_dir = "backups"
    wp_content_dir = "wp-content"
    wp_content_subdirs = ["themes", "plugins", "uploads", "mu-plugins"]
    wp_log_file = "setup.log"
    wp_startup_wait = 10
    wp_restart_wait = 2

    # database service
    wp_db_service = "db"
    wp_db_container = "wp_mysql"
    wp_db_name = "wordpress"
    wp_db_user = "wordpress"
    wp_db_password = "wordpress_password"
    wp_db_root_password = "somewordpress"
    wp_db_volume = "wp_db_data"
    wp_db_port = 3307

    # wordpress services
    wp_container = "wp_wordpress"
    wp_cli_service = "wpcli"
    wp_cli_container = "wp_cli"
    wp_webroot = "/var/www/html"
    wp_port = 8080
    wp_pma_port = 8081
    wp_pma_container = "wp_phpmyadmin"
    wp_memory_limit = "256M"
    wp_upload_max_filesize = "64M"

    wp_timestamp_format = "%Y%m%d_%H%M%S"

    wp_popular_plugins = [
        "akismet",
        "jetpack",
        "yoast-seo",
        "contact-form-7",
        "elementor",
        "woocommerce",
        "wp-super-cache",
        "wordfence",
        "updraftplus",
        "classic-editor",
    ]

    wp_popular_themes = [
        "twentytwentythree",
        "twentytwentytwo",
        "twentytwentyone",
        "astra",
        "generatepress",
        "neve",
        "oceanwp",
        "kadence",
        "blocksy",
        "customify",
    ]

    # (label, structure) pairs offered by site-mgmt
    wp_permalink_structures = [
        ("Plain: http://example.com/?p=123", ""),
        ("Day and name: http://example.com/2023/04/15/sample-post/",
         "/%year%/%monthnum%/%day%/%postname%/"),
        ("Month and name: http://example.com/2023/04/sample-post/",
         "/%year%/%monthnum%/%postname%/"),
        ("Numeric: http://example.com/archives/123", "/archives/%post_id%"),
        ("Post name: http://example.com/sample-post/", "/%postname%/"),
    ]

    @staticmethod
    def timestamp():
        return datetime.now().strftime(WPVar.wp_timestamp_format)
