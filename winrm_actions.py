# winrm_actions.py
"""
Simulated WinRM cleanup action.

Responsibilities:
- Validate the connection parameters typed into the actions form
- Pretend to connect, authenticate and clean temp folders
- Return a transcript (stdout) or an error text (stderr), never both

Nothing here opens a socket or runs a remote command. Every figure in
the transcript comes from the injected random source.
"""

import asyncio
import random
from dataclasses import dataclass
from datetime import datetime
from typing import Awaitable, Callable, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from storage import get_option

import logging
logger = logging.getLogger(__name__)


WINRM_PORT = 5985
DEFAULT_DELAY_SECONDS = 1.5
DEFAULT_OFFLINE_OCTET = '100'


# -------------------------------------------------------------------
# Request / result
# -------------------------------------------------------------------

class CleanupRequest(BaseModel):
    """
    Connection parameters typed into the actions form.
    Strict: no coercion, so a missing or non-string field is rejected.
    """
    model_config = ConfigDict(strict=True, frozen=True)

    server_ip: str
    username: str
    password: str

    @field_validator('server_ip', 'username')
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('must not be blank')
        return value


@dataclass
class CleanupResult:
    stdout: Optional[str] = None
    stderr: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.stdout is not None

    def to_dict(self) -> dict:
        if self.ok:
            return {'stdout': self.stdout}
        return {'stderr': self.stderr}


# -------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------

def offline_octet() -> str:
    return str(get_option('cleanup', 'offline_octet', DEFAULT_OFFLINE_OCTET))


def cleanup_delay() -> float:
    try:
        return float(get_option('cleanup', 'delay_seconds', DEFAULT_DELAY_SECONDS))
    except (TypeError, ValueError):
        logger.warning("cleanup.delay_seconds is not a number, using default")
        return DEFAULT_DELAY_SECONDS


def is_offline_address(address: str, octet: Optional[str] = None) -> bool:
    """
    The simulated backup server: any address ending in the designated
    offline octet (e.g. 10.0.0.100, 192.168.1.100).
    """
    octet = octet or offline_octet()
    return address.strip().split('.')[-1] == octet


def _transcript(server_ip: str, username: str, rng: random.Random, now: datetime) -> str:
    timestamp = now.strftime('%Y-%m-%d %H:%M:%S')
    host = f"SERVER-{server_ip.strip().split('.')[-1]}"

    win_temp_mb = round(rng.random() * 50 + 10, 2)
    user_temp_mb = round(rng.random() * 250 + 50, 2)
    downloads_mb = round(rng.random() * 1024, 2)
    total_gb = (win_temp_mb + user_temp_mb + downloads_mb) / 1024

    win_temp_items = rng.randint(10, 109)
    user_temp_items = rng.randint(20, 319)
    downloads_items = rng.randint(0, 19)

    lines = [
        f'Starting cleanup operation on {host} ({server_ip}) as {username}.',
        'Cleaning Windows temp folder: C:\\Windows\\Temp\\*',
        f'Successfully cleaned {win_temp_items} items from Windows Temp. Space freed: {win_temp_mb:.2f} MB.',
        f'Cleaning User temp folder: C:\\Users\\{username}\\AppData\\Local\\Temp\\*',
        f'Successfully cleaned {user_temp_items} items from User Temp. Space freed: {user_temp_mb:.2f} MB.',
        f'Cleaning files older than 30 days from Downloads folder: C:\\Users\\{username}\\Downloads',
        f'Successfully cleaned {downloads_items} old files from Downloads. Space freed: {downloads_mb:.2f} MB.',
        '-' * 50,
        'CLEANUP SUMMARY',
        f'Total space freed: {total_gb:.2f} GB.',
        'Cleanup completed successfully with no errors.',
        '-' * 50,
    ]
    return '\n'.join(f'{timestamp} - {line}' for line in lines)


# -------------------------------------------------------------------
# Public API
# -------------------------------------------------------------------

async def run_cleanup_action(
    request: Union[CleanupRequest, dict],
    *,
    rng: Optional[random.Random] = None,
    delay: Optional[float] = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    now: Callable[[], datetime] = datetime.now,
) -> CleanupResult:
    """
    Run the simulated cleanup against ``request.server_ip``.

    ``request`` may be a raw dict of form values; it is validated here
    and a validation failure becomes an ``Invalid input`` result.

    Invalid input returns at once. Every other outcome waits for the
    artificial delay first, then:
      - empty password            -> authentication error
      - designated offline octet  -> connection refused on port 5985
      - anything else             -> synthetic cleanup transcript
    """
    try:
        request = CleanupRequest.model_validate(request)
    except ValidationError as e:
        logger.debug(f"cleanup request rejected: {e}")
        return CleanupResult(stderr=f'Invalid input: {e}')

    rng = rng or random.Random()
    await sleep(cleanup_delay() if delay is None else delay)

    server_ip = request.server_ip
    username = request.username

    if request.password == '':
        return CleanupResult(
            stderr=f"Authentication failed for user '{username}': empty password is not accepted."
        )

    if is_offline_address(server_ip):
        return CleanupResult(
            stderr=(
                f'Connection refused. Ensure WinRM is enabled on {server_ip} and the firewall '
                f'allows connections on port {WINRM_PORT}. On the target server, run: winrm quickconfig -q'
            )
        )

    logger.debug(f"simulated cleanup finished for {server_ip}")
    return CleanupResult(stdout=_transcript(server_ip, username, rng, now()))
