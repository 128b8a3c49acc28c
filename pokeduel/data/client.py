"""PokeAPI access for creature and move records.

One client per battle session; it owns its :class:`LookupCache`, so a
repeated request for the same URL never reaches the network twice.
"""
from __future__ import annotations
from typing import Any, Dict, Optional, Union

import requests

from pokeduel.core.errors import NotFound, TransportError
from pokeduel.core.logging import logger
from pokeduel.system.settings import DEFAULT_API_BASE
from .cache import LookupCache, MISSING
from .models import Creature, Move

class PokeAPIClient:
    def __init__(self, base_url: str = DEFAULT_API_BASE, *, timeout: float = 10.0,
                 session: Optional[requests.Session] = None, cache: Optional[LookupCache] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.cache = cache if cache is not None else LookupCache()

    @classmethod
    def from_settings(cls, settings, **kw) -> "PokeAPIClient":
        return cls(settings.data.api_base, timeout=settings.data.request_timeout, **kw)

    def creature_url(self, name_or_id: Union[str, int]) -> str:
        key = str(name_or_id).strip().lower()
        return f"{self.base_url}/pokemon/{key}"

    def move_url(self, ref: Union[str, int]) -> str:
        ref = str(ref).strip()
        if ref.startswith(("http://", "https://")):
            return ref
        return f"{self.base_url}/move/{ref.lower()}"

    def get_json(self, url: str) -> Dict[str, Any]:
        cached = self.cache.get(url)
        if cached is not MISSING:
            logger.debug("CacheHit", url=url)
            return cached
        logger.debug("Fetch", url=url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.Timeout:
            raise TransportError(url, f"timed out after {self.timeout}s")
        except requests.RequestException as e:
            raise TransportError(url, str(e))
        if resp.status_code == 404:
            raise NotFound(url)
        if not 200 <= resp.status_code < 300:
            raise TransportError(url, f"HTTP {resp.status_code}")
        try:
            data = resp.json()
        except ValueError as e:
            raise TransportError(url, f"invalid JSON: {e}")
        if not isinstance(data, dict):
            raise TransportError(url, f"unexpected payload: {type(data).__name__}")
        self.cache.put(url, data)
        return data

    def get_creature(self, name_or_id: Union[str, int]) -> Creature:
        url = self.creature_url(name_or_id)
        data = self.get_json(url)
        try:
            return Creature.from_api(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise TransportError(url, f"malformed creature record: {e}")

    def get_move(self, ref: Union[str, int]) -> Move:
        url = self.move_url(ref)
        data = self.get_json(url)
        try:
            return Move.from_api(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise TransportError(url, f"malformed move record: {e}")

    def close(self):
        self.session.close()

__all__ = ["PokeAPIClient"]
