# ui/dashboard.py
"""
Fleet overview.

Responsibilities:
- Count registry entries per status
- Render summary cards with NiceGUI
"""

from nicegui import ui

from servers import ServerRegistry, ServerStatus

import logging
logger = logging.getLogger(__name__)


STATUS_ICONS = {
    ServerStatus.ONLINE.value: ('cloud_done', 'text-green'),
    ServerStatus.OFFLINE.value: ('cloud_off', 'text-gray-500'),
    ServerStatus.WARNING.value: ('warning', 'text-orange'),
}


# -------------------------------------------------------------------
# UI helpers
# -------------------------------------------------------------------

def _stat_card(title: str, value: str, icon: str = 'dns', color: str = 'text-primary'):
    with ui.card().classes('w-48 text-center'):
        ui.icon(icon).classes(f'text-3xl {color}')
        ui.label(title).classes('text-sm text-gray-500')
        ui.label(value).classes('text-xl font-bold')


# -------------------------------------------------------------------
# Dashboard
# -------------------------------------------------------------------

def render_dashboard(registry: ServerRegistry):
    counts = registry.status_counts()
    total = sum(counts.values())
    logger.debug(f"dashboard counts: {counts}")

    ui.label('Overview').classes('text-2xl font-bold')

    if not total:
        ui.label('No servers configured').classes('text-red')
        ui.button('Go to Servers', on_click=lambda: ui.navigate.to('/servers'))
        return

    with ui.row().classes('gap-6 mt-4'):
        _stat_card('Servers', str(total))
        for status, count in counts.items():
            icon, color = STATUS_ICONS[status]
            _stat_card(status, str(count), icon=icon, color=color)

    with ui.row().classes('gap-2 mt-6'):
        ui.button('Manage servers', icon='dns', on_click=lambda: ui.navigate.to('/servers'))
        ui.button('Run cleanup', icon='cleaning_services', on_click=lambda: ui.navigate.to('/actions'))
