"""In-memory persona store.

Personas are only ever added, never edited or removed, so the store keeps a
newest-first deque plus an id index. A lock makes prepend and snapshot atomic
with respect to each other; concurrent creates land in lock order, which need
not match request arrival order.
"""

from __future__ import annotations

import threading
from collections import deque
from itertools import islice
from typing import Deque, Dict, Iterable, List, Optional

from inclusive_hub.schemas.persona import CampaignPersona


class PersonaStore:
    def __init__(self, personas: Iterable[CampaignPersona] = ()) -> None:
        self._lock = threading.Lock()
        self._items: Deque[CampaignPersona] = deque()
        self._by_id: Dict[str, CampaignPersona] = {}
        for persona in personas:
            self._items.append(persona)
            self._by_id[persona.id] = persona

    def __len__(self) -> int:
        return len(self._items)

    def prepend(self, persona: CampaignPersona) -> CampaignPersona:
        with self._lock:
            self._items.appendleft(persona)
            self._by_id[persona.id] = persona
        return persona

    def get(self, persona_id: str) -> Optional[CampaignPersona]:
        return self._by_id.get(persona_id)

    def slice(self, start: int, stop: int) -> List[CampaignPersona]:
        with self._lock:
            return list(islice(self._items, start, stop))

    def snapshot(self) -> List[CampaignPersona]:
        with self._lock:
            return list(self._items)
