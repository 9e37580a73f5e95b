# servers.py
"""
Server model and registry.

This module owns the structure of the stored server list and nothing else.
UI code should NEVER manipulate the storage slot directly.
"""

import json
import random
import string
import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Dict, List, Optional

from winrm_actions import is_offline_address

import logging
logger = logging.getLogger(__name__)


STORAGE_KEY = 'sentinel_servers'
ONLINE_PROBABILITY = 0.9


class ServerStatus(str, Enum):
    ONLINE = 'Online'
    OFFLINE = 'Offline'
    WARNING = 'Warning'


@dataclass(frozen=True)
class Server:
    id: str
    name: str
    ip_address: str
    status: ServerStatus = ServerStatus.ONLINE

    def to_dict(self) -> Dict:
        return {
            'id': self.id,
            'name': self.name,
            'ipAddress': self.ip_address,
            'status': self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'Server':
        return cls(
            id=str(data['id']),
            name=str(data['name']),
            ip_address=str(data['ipAddress']),
            status=ServerStatus(data.get('status', ServerStatus.ONLINE.value)),
        )


INITIAL_SERVERS: List[Server] = [
    Server('srv-001', 'DC-PRIMARY', '192.168.1.10', ServerStatus.ONLINE),
    Server('srv-002', 'FILE-SERVER-01', '192.168.1.20', ServerStatus.ONLINE),
    Server('srv-003', 'SQL-PROD-01', '192.168.1.30', ServerStatus.WARNING),
    Server('srv-004', 'WEB-IIS-01', '192.168.1.40', ServerStatus.ONLINE),
    Server('srv-005', 'BACKUP-01', '192.168.1.100', ServerStatus.OFFLINE),
]


def _base36(rng: random.Random, length: int = 5) -> str:
    alphabet = string.digits + string.ascii_lowercase
    return ''.join(rng.choice(alphabet) for _ in range(length))


class ServerRegistry:
    """
    List / add / delete of server records kept in a single storage slot.

    ``store`` is anything with ``get(key)`` and item assignment:
    ``app.storage.user`` in the browser, ``storage.JsonFileStore`` elsewhere,
    or a plain dict in tests. Storage failures are logged and never raised.
    """

    def __init__(
        self,
        store,
        *,
        rng: Optional[random.Random] = None,
        simulate_status: bool = True,
        clock: Callable[[], float] = time.time,
    ):
        self.store = store
        self.rng = rng or random.Random()
        self.simulate_status = simulate_status
        self.clock = clock
        # what is persisted, and what is shown (statuses may be simulated)
        self._stored: List[Server] = []
        self._servers: Optional[List[Server]] = None

    # ---------------------------------------------------------------
    # Loading
    # ---------------------------------------------------------------

    def load(self) -> List[Server]:
        """
        Read the stored list, seeding it on first use.
        Falls back to the built-in defaults if the slot is unreadable.
        """
        try:
            raw = self.store.get(STORAGE_KEY)
            if raw:
                loaded = [Server.from_dict(item) for item in json.loads(raw)]
            else:
                loaded = list(INITIAL_SERVERS)
                self.store[STORAGE_KEY] = self._dump(loaded)
        except (OSError, AttributeError, TypeError, ValueError, KeyError) as e:
            logger.error(f"Failed to load servers from storage: {e}")
            self._stored = list(INITIAL_SERVERS)
            self._servers = list(INITIAL_SERVERS)
            return self.servers

        self._stored = loaded
        if self.simulate_status:
            self._servers = [self._simulated(server) for server in loaded]
        else:
            self._servers = list(loaded)
        return self.servers

    def _simulated(self, server: Server) -> Server:
        # display only, not a health check
        if is_offline_address(server.ip_address):
            return replace(server, status=ServerStatus.OFFLINE)
        if server.status == ServerStatus.WARNING:
            return server
        online = self.rng.random() < ONLINE_PROBABILITY
        return replace(server, status=ServerStatus.ONLINE if online else ServerStatus.OFFLINE)

    @property
    def servers(self) -> List[Server]:
        if self._servers is None:
            self.load()
        return list(self._servers)

    # ---------------------------------------------------------------
    # Persistence
    # ---------------------------------------------------------------

    @staticmethod
    def _dump(servers: List[Server]) -> str:
        return json.dumps([s.to_dict() for s in servers])

    def _update_storage(self, stored: List[Server], shown: List[Server]) -> None:
        self._stored = stored
        self._servers = shown
        try:
            self.store[STORAGE_KEY] = self._dump(stored)
        except (OSError, AttributeError, TypeError, ValueError) as e:
            logger.error(f"Failed to save servers to storage: {e}")

    # ---------------------------------------------------------------
    # CRUD
    # ---------------------------------------------------------------

    def new_id(self) -> str:
        existing = {s.id for s in self.servers}
        while True:
            server_id = f'srv-{int(self.clock() * 1000)}-{_base36(self.rng)}'
            if server_id not in existing:
                return server_id

    def add_server(self, name: str, ip_address: str) -> Server:
        shown = self.servers
        server = Server(
            id=self.new_id(),
            name=name,
            ip_address=ip_address,
            status=ServerStatus.ONLINE,
        )
        self._update_storage(self._stored + [server], shown + [server])
        logger.info(f"Server {name} ({ip_address}) added as {server.id}")
        return server

    def delete_server(self, server_id: str) -> None:
        shown = self.servers
        remaining = [s for s in shown if s.id != server_id]
        if len(remaining) == len(shown):
            logger.debug(f"delete_server: {server_id} not found")
        self._update_storage([s for s in self._stored if s.id != server_id], remaining)

    def get_server(self, server_id: str) -> Optional[Server]:
        for server in self.servers:
            if server.id == server_id:
                return server
        return None

    # ---------------------------------------------------------------
    # UI helpers
    # ---------------------------------------------------------------

    def selectable_servers(self) -> List[Server]:
        return [s for s in self.servers if s.status != ServerStatus.OFFLINE]

    def status_counts(self) -> Dict[str, int]:
        counts = {status.value: 0 for status in ServerStatus}
        for server in self.servers:
            counts[server.status.value] += 1
        return counts

