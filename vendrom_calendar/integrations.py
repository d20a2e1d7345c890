"""
Integration registry for external calendar providers.

Each provider is either connected or disconnected; only the user moves it
between the two. Connecting stamps last_sync with LAST_SYNC_ON_CONNECT and
disconnecting clears it. Pulling events from a provider is the job of an
IntegrationTransport, which this module only notifies.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from vendrom_calendar.event_models import CalendarIntegration
from vendrom_calendar.logging_helper import Log

LAST_SYNC_ON_CONNECT = "Just now"


class IntegrationTransport(ABC):
    """Abstract base class for the provider-side connect/disconnect calls."""

    @abstractmethod
    def connect(self, provider_id: str) -> None:
        pass

    @abstractmethod
    def disconnect(self, provider_id: str) -> None:
        pass


class NullTransport(IntegrationTransport):
    """Transport that only logs; used when no real provider sync is wired in."""

    def connect(self, provider_id: str) -> None:
        Log.info(f"No sync transport configured - {provider_id} connect recorded only")

    def disconnect(self, provider_id: str) -> None:
        Log.info(f"No sync transport configured - {provider_id} disconnect recorded only")


class IntegrationRegistry:
    """Connection status per provider, keyed by provider id."""

    def __init__(
        self,
        integrations: Iterable[CalendarIntegration] = (),
        transport: Optional[IntegrationTransport] = None,
    ):
        self._integrations: Dict[str, CalendarIntegration] = {
            integration.id: integration for integration in integrations
        }
        self._transport = transport or NullTransport()

    def __iter__(self):
        return iter(self.all())

    def all(self) -> List[CalendarIntegration]:
        return list(self._integrations.values())

    def get(self, provider_id: str) -> CalendarIntegration:
        """
        Raises:
            KeyError: If the provider is not registered
        """
        if provider_id not in self._integrations:
            raise KeyError(f"Unknown calendar provider: {provider_id}")
        return self._integrations[provider_id]

    def connect(self, provider_id: str) -> CalendarIntegration:
        integration = self.get(provider_id)
        if integration.connected:
            Log.info(f"{integration.name} is already connected")
            return integration
        self._transport.connect(provider_id)
        integration.connected = True
        integration.last_sync = LAST_SYNC_ON_CONNECT
        Log.kv({"stage": "integration", "provider": provider_id, "connected": True})
        return integration

    def disconnect(self, provider_id: str) -> CalendarIntegration:
        integration = self.get(provider_id)
        if not integration.connected:
            Log.info(f"{integration.name} is already disconnected")
            return integration
        self._transport.disconnect(provider_id)
        integration.connected = False
        integration.last_sync = None
        Log.kv({"stage": "integration", "provider": provider_id, "connected": False})
        return integration

    def toggle(self, provider_id: str) -> CalendarIntegration:
        if self.get(provider_id).connected:
            return self.disconnect(provider_id)
        return self.connect(provider_id)
