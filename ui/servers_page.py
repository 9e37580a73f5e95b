# ui/servers_page.py
"""
Server registry UI.

Responsibilities:
- List servers with their (simulated) status
- Add / delete servers
"""

from nicegui import ui

from servers import ServerRegistry, ServerStatus

import logging
logger = logging.getLogger(__name__)


STATUS_COLORS = {
    ServerStatus.ONLINE: 'green',
    ServerStatus.OFFLINE: 'gray',
    ServerStatus.WARNING: 'orange',
}

# -------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------

def _refresh():
    ui.navigate.to('/servers')


# -------------------------------------------------------------------
# Server creation dialog
# -------------------------------------------------------------------

def _add_server_dialog(registry: ServerRegistry):
    with ui.dialog() as dialog, ui.card().classes('w-lvw'):
        ui.label('Add Server').classes('text-lg font-bold w-full')

        name = ui.input('Server name').classes('w-full')
        ip_address = ui.input('IP address').classes('w-full')

        def save():
            if not (name.value or '').strip() or not (ip_address.value or '').strip():
                ui.notify('Missing required fields', type='negative')
                return

            registry.add_server(name.value.strip(), ip_address.value.strip())

            ui.notify('Server added successfully', type='positive')
            dialog.close()
            _refresh()

        with ui.row().classes('justify-end gap-2').classes('w-full'):
            ui.button('Cancel', on_click=dialog.close)
            ui.button('Create', on_click=save)

    dialog.open()


def _delete_server(registry: ServerRegistry, server_id: str):
    registry.delete_server(server_id)
    ui.notify('Server deleted', type='positive')
    _refresh()


# -------------------------------------------------------------------
# Main page
# -------------------------------------------------------------------

def servers_page(registry: ServerRegistry):
    with ui.row().classes('items-center w-full'):
        ui.label('Servers').classes('text-2xl font-bold')
        ui.space()
        ui.button('Add Server', icon='add', on_click=lambda: _add_server_dialog(registry))

    servers = registry.servers

    if not servers:
        ui.label('No servers configured').classes('text-red')
        return

    for server in servers:
        with ui.card().classes('mb-4 w-full'):
            with ui.row().classes('w-full items-center'):
                ui.label(server.name).classes('text-lg font-bold')
                ui.space()
                ui.chip(server.status.value.upper(), color=STATUS_COLORS[server.status])
                ui.chip(icon='delete', color='warning',
                    on_click=lambda s=server.id: _delete_server(registry, s),
                ).props('color=negative')
            ui.label(f"Address: {server.ip_address}")
            ui.label(f"Id: {server.id}").classes('text-sm text-gray-500')
