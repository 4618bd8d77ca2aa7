"""Navigation config API endpoint.

Backs the navigation settings screen: read the current layout options or
merge a partial update and get the regenerated navigation back.
"""

import json
import logging
import re
from typing import Any

from aiohttp import web

from storenav.api.navigation import load_site_for_request
from storenav.app_keys import navigation_manager_key

logger = logging.getLogger(__name__)

_SECTIONS = ("header", "footer")


def create_config_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/config", get_config),
        web.patch("/api/config", update_config),
    ]


async def get_config(request: web.Request) -> web.Response:
    manager = request.app[navigation_manager_key]
    return web.json_response(manager.config.to_dict())


async def update_config(request: web.Request) -> web.Response:
    try:
        payload = await request.json()
    except json.JSONDecodeError:
        return web.json_response({"error": "Request body must be JSON"}, status=400)

    if not isinstance(payload, dict):
        return web.json_response({"error": "Request body must be an object"}, status=400)

    unknown = sorted(set(payload) - set(_SECTIONS))
    if unknown:
        return web.json_response(
            {"error": f"Unknown config section(s): {', '.join(unknown)}"},
            status=400,
        )

    site = load_site_for_request(request)
    manager = request.app[navigation_manager_key]
    try:
        changes = {
            section: _snake_case_keys(payload[section])
            for section in _SECTIONS
            if section in payload
        }
        config = manager.update_config(**changes)
    except ValueError as e:
        return web.json_response({"error": str(e)}, status=400)

    logger.info(f"Navigation config changed: {config.to_dict()}")
    navigation = manager.generate_navigation(site.pages, site.policies)
    return web.json_response({"config": config.to_dict(), "navigation": navigation.to_dict()})


def _snake_case_keys(section: Any) -> dict[str, Any]:
    if not isinstance(section, dict):
        raise ValueError("config sections must be objects")
    return {re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower(): value for key, value in section.items()}
