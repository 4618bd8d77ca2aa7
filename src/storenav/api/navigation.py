"""Navigation API endpoints.

Provides generated navigation, validation, breadcrumbs and item lookup.
"""

import json
import logging

from aiohttp import web

from storenav.app_keys import navigation_manager_key, page_store_key
from storenav.core.navigation import GeneratedNavigation
from storenav.store import SiteData

logger = logging.getLogger(__name__)


def create_navigation_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/navigation", get_navigation),
        web.get("/api/navigation/validate", validate_navigation),
        web.get("/api/navigation/breadcrumbs/{path:.*}", get_breadcrumbs),
        web.get("/api/navigation/items/{path:.*}", get_navigation_item),
    ]


async def get_navigation(request: web.Request) -> web.Response:
    navigation = generate_for_request(request)
    manager = request.app[navigation_manager_key]
    return web.json_response(
        {**navigation.to_dict(), "config": manager.config.to_dict()},
    )


async def validate_navigation(request: web.Request) -> web.Response:
    navigation = generate_for_request(request)
    manager = request.app[navigation_manager_key]
    report = manager.validate_navigation(navigation.all_items())
    return web.json_response(report.to_dict())


async def get_breadcrumbs(request: web.Request) -> web.Response:
    slug = _normalize_slug(request.match_info["path"])
    navigation = generate_for_request(request)
    manager = request.app[navigation_manager_key]
    breadcrumbs = manager.get_breadcrumbs(slug, navigation.all_items())
    return web.json_response({"breadcrumbs": [item.to_dict() for item in breadcrumbs]})


async def get_navigation_item(request: web.Request) -> web.Response:
    slug = _normalize_slug(request.match_info["path"])
    navigation = generate_for_request(request)
    manager = request.app[navigation_manager_key]
    item = manager.find_navigation_item(slug, navigation.all_items())
    if item is None:
        return web.json_response(
            {"error": "Navigation item not found", "path": slug},
            status=404,
        )
    return web.json_response(item.to_dict())


def generate_for_request(request: web.Request) -> GeneratedNavigation:
    site = load_site_for_request(request)
    manager = request.app[navigation_manager_key]
    return manager.generate_navigation(site.pages, site.policies)


def load_site_for_request(request: web.Request) -> SiteData:
    """Load site data or fail the request with a JSON 500."""
    store = request.app[page_store_key]
    try:
        return store.load()
    except (FileNotFoundError, ValueError) as e:
        logger.exception(f"Failed to load pages from {store.path}")
        raise web.HTTPInternalServerError(
            text=json.dumps({"error": str(e)}),
            content_type="application/json",
        ) from e


def _normalize_slug(path: str) -> str:
    return path if path.startswith("/") else f"/{path}"
