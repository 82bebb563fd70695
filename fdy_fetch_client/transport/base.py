"""
Transport engine interface.

The client never talks to the network itself. An engine receives the fully
assembled options for one call and returns the raw outcome; networking, TLS,
redirects, retries and timing are entirely its business.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class EngineResponse:
    """Raw result of one engine call, with the body already decoded to text."""
    ok: bool
    status_code: int
    body: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)
    request: Any = None


class TransportEngine(ABC):
    """
    Abstract base class for transport engines.

    ``send`` receives at least ``url``, ``method``, ``headers``, ``body`` and
    ``proxy_url``, followed by any caller-supplied engine options. Options
    the engine does not understand should be rejected by the underlying
    library rather than silently dropped.
    """

    @abstractmethod
    async def send(self, **options: Any) -> EngineResponse:
        """
        Perform one HTTP exchange.

        Returns:
            EngineResponse for any status code the server answered with

        Raises:
            Engine-specific transport faults (connection, DNS, timeout)
        """
        pass

    async def aclose(self) -> None:
        """Release engine resources. Engines without state need not override."""
        return None
