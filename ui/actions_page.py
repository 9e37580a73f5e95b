# ui/actions_page.py
"""
Cleanup action UI.

Responsibilities:
- Pick a server that is not offline
- Collect WinRM credentials
- Run the simulated cleanup and show its output
- Placeholder for disk resizing (not implemented)
"""

from nicegui import ui

from servers import ServerRegistry
from winrm_actions import run_cleanup_action

import logging
logger = logging.getLogger(__name__)


def actions_page(registry: ServerRegistry):
    options = {
        s.ip_address: f'{s.name} ({s.ip_address})'
        for s in registry.selectable_servers()
    }

    with ui.row().classes('w-full gap-6 no-wrap'):
        with ui.card().classes('w-1/2'):
            ui.label('Run Cleanup').classes('text-lg font-bold')
            ui.label(
                'Connect to a Windows server via WinRM to run a simulated cleanup script. '
                'Enter credentials to proceed.'
            ).classes('text-sm text-gray-500')

            server_ip = ui.select(
                options=options,
                label='Server',
            ).classes('w-full')
            if not options:
                server_ip.disable()
            username = ui.input('Username').classes('w-full')
            password = ui.input('Password', password=True, password_toggle_button=True).classes('w-full')

        with ui.card().classes('w-1/2'):
            ui.label('Output').classes('text-lg font-bold')
            spinner = ui.spinner(size='lg')
            spinner.set_visibility(False)
            output = ui.code('', language='text').classes('w-full')
            output.set_visibility(False)
            error = ui.label('').classes('text-red w-full')
            error.set_visibility(False)

    async def run():
        if not server_ip.value:
            ui.notify('Please select a server.', type='negative')
            return
        if not username.value:
            ui.notify('Username is required.', type='negative')
            return
        if not password.value:
            ui.notify('Password is required.', type='negative')
            return

        run_button.disable()
        spinner.set_visibility(True)
        output.set_visibility(False)
        error.set_visibility(False)
        try:
            result = await run_cleanup_action({
                'server_ip': server_ip.value,
                'username': username.value,
                'password': password.value,
            })
        finally:
            spinner.set_visibility(False)
            run_button.enable()

        if result.ok:
            output.content = result.stdout
            output.set_visibility(True)
            ui.notify('Cleanup completed', type='positive')
        else:
            logger.info(f"cleanup on {server_ip.value} failed: {result.stderr}")
            error.set_text(result.stderr)
            error.set_visibility(True)
            ui.notify('Cleanup failed', type='negative')

    with ui.row().classes('w-full'):
        run_button = ui.button('Run Cleanup', icon='play_arrow', on_click=run)

    with ui.card().classes('w-1/2 mt-6'):
        ui.label('Resize Disks').classes('text-lg font-bold')
        ui.label(
            'Attempt to automatically resize partitions on servers with low disk space. '
            'This requires unallocated space to be available.'
        ).classes('text-sm text-gray-500')
        ui.button('Run Resize (Not Implemented)', icon='storage').disable()
