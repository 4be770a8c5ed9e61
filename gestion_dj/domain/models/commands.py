"""Save commands sent by the interface to the core.

Creation and update are distinct variants so callers never rely on the
presence of an ``id`` to pick one.
"""

from dataclasses import dataclass

from gestion_dj.domain.models.entities import (
    Client,
    ClientDraft,
    Event,
    EventDraft,
)


@dataclass(frozen=True)
class CreateEvent:
    draft: EventDraft


@dataclass(frozen=True)
class UpdateEvent:
    event: Event


@dataclass(frozen=True)
class CreateClient:
    draft: ClientDraft


@dataclass(frozen=True)
class UpdateClient:
    client: Client


EventCommand = CreateEvent | UpdateEvent
ClientCommand = CreateClient | UpdateClient


__all__ = [
    "CreateEvent",
    "UpdateEvent",
    "CreateClient",
    "UpdateClient",
    "EventCommand",
    "ClientCommand",
]
