# ui/navigation.py
from nicegui import ui

from servers import ServerRegistry
from storage import registry_store
from ui.dashboard import render_dashboard
from ui.servers_page import servers_page
from ui.actions_page import actions_page

import logging
logger = logging.getLogger(__name__)


def get_registry() -> ServerRegistry:
    """
    Registry for the current page (per-browser storage unless configured otherwise).
    Loaded once per page view, so simulated statuses change on reload.
    """
    return ServerRegistry(registry_store())


# -------------------
# Header (called inside each page)
# -------------------
def build_header():
    dark = ui.dark_mode()
    dark.enable()
    with ui.header().classes('items-center'):
        ui.colors(brand='#424242')
        ui.label('Sentinel').classes('text-lg font-bold text-brand')
        ui.link('Dashboard', '/').classes('font-bold text-brand')
        ui.link('Servers', '/servers').classes('font-bold text-brand')
        ui.link('Actions', '/actions').classes('font-bold text-brand')
        ui.space()
        with ui.icon('info', color='gray').classes('text-3xl'):
            ui.tooltip('Demo only: no remote connection is ever made').classes('bg-gray')


# -------------------
# Pages
# -------------------
@ui.page('/')
def home_page():
    logger.info("dashboard page called")
    build_header()
    render_dashboard(get_registry())


@ui.page('/servers')
def servers_page_wrapper():
    logger.info("servers page called")
    build_header()
    servers_page(get_registry())


@ui.page('/actions')
def actions_page_wrapper():
    logger.info("actions page called")
    build_header()
    actions_page(get_registry())
