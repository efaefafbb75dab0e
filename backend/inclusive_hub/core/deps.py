"""FastAPI dependencies exposing the process-wide store, generator and upstream client."""

from typing import Optional

from fastapi import Request

from inclusive_hub.services.kolosal import KolosalClient
from inclusive_hub.services.mock_data import MockDataGenerator
from inclusive_hub.services.store import PersonaStore


def get_store(request: Request) -> PersonaStore:
    return request.app.state.store


def get_generator(request: Request) -> MockDataGenerator:
    return request.app.state.generator


def get_kolosal_client(request: Request) -> Optional[KolosalClient]:
    """The app's shared live client, or ``None`` in mock mode."""
    return request.app.state.kolosal
