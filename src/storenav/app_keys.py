"""Application keys for type-safe app configuration access."""

from aiohttp import web

from storenav.core.navigation import NavigationManager
from storenav.store import PageStore

page_store_key = web.AppKey("page_store", PageStore)
navigation_manager_key = web.AppKey("navigation_manager", NavigationManager)
