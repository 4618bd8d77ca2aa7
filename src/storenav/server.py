"""aiohttp server for Storenav.

Application factory and route registration for the navigation API.
"""

import logging

from aiohttp import web

from storenav.api.config import create_config_routes
from storenav.api.navigation import create_navigation_routes
from storenav.app_keys import navigation_manager_key, page_store_key
from storenav.config import Config
from storenav.core.navigation import NavigationManager
from storenav.store import PageStore

logger = logging.getLogger(__name__)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    The app owns one NavigationManager seeded from the configured
    navigation options; PATCH /api/config mutates it in place.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    app[page_store_key] = PageStore(config.store.pages_file)
    app[navigation_manager_key] = NavigationManager(config.navigation)

    app.router.add_routes(create_navigation_routes())
    app.router.add_routes(create_config_routes())

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    logger.info(f"Serving navigation for {config.store.pages_file}")
    web.run_app(app, host=config.server.host, port=config.server.port)
