"""Client identifier issuance: the collaborator that stamps new assessment records."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ClientIdIssuer(Protocol):
    """Supplies opaque, monotonically increasing client identifiers.

    Each call is side-effecting and must be made exactly once per new record.
    The classification and composition code never calls an issuer.
    """

    def next_id(self) -> str:
        """Return the next identifier."""
        ...
