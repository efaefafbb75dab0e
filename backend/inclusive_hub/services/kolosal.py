"""Client for the external Kolosal bias-check and copy-generation API."""

from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from inclusive_hub.core.config import Settings
from inclusive_hub.core.result import Err, Ok, Result


class KolosalClient:
    """Thin wrapper over ``requests`` that reports failures as :class:`Err` values.

    The client never retries. Transport errors, timeouts, non-2xx statuses and
    bodies that are not a JSON object all come back as ``Err``.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        bias_timeout: float = 10.0,
        copy_timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key
        self.bias_timeout = bias_timeout
        self.copy_timeout = copy_timeout
        self._session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings) -> Optional["KolosalClient"]:
        if not settings.kolosal_configured:
            return None
        return cls(
            settings.KOLOSAL_API_URL,
            settings.KOLOSAL_API_KEY,
            bias_timeout=settings.KOLOSAL_BIAS_TIMEOUT_SEC,
            copy_timeout=settings.KOLOSAL_COPY_TIMEOUT_SEC,
        )

    def close(self) -> None:
        self._session.close()

    def _post(self, path: str, payload: Dict[str, Any], timeout: float) -> Result[Dict[str, Any]]:
        url = f"{self.base_url}/{path}"
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        try:
            resp = self._session.post(url, json=payload, headers=headers, timeout=timeout)
        except requests.Timeout:
            return Err(f"timed out after {timeout}s")
        except requests.RequestException as exc:
            return Err(f"request failed: {exc}")

        if not 200 <= resp.status_code < 300:
            return Err(f"HTTP {resp.status_code}", status_code=resp.status_code)
        try:
            body = resp.json()
        except ValueError:
            return Err("response body is not valid JSON", status_code=resp.status_code)
        if not isinstance(body, dict):
            return Err("response body is not a JSON object", status_code=resp.status_code)
        return Ok(body)

    def check_bias(self, content: str, language: str, campaign_id: Optional[str]) -> Result[Dict[str, Any]]:
        payload = {"content": content, "language": language, "campaignId": campaign_id}
        return self._post("bias-check", payload, self.bias_timeout)

    def generate_copy(
        self, prompt: str, language: str, tone: Optional[str], campaign_id: Optional[str]
    ) -> Result[Dict[str, Any]]:
        payload = {"prompt": prompt, "language": language, "tone": tone, "campaignId": campaign_id}
        return self._post("generate-copy", payload, self.copy_timeout)
