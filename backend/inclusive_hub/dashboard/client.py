"""HTTP client used by the dashboard to talk to the hub API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from inclusive_hub.schemas.bias import BiasInsight
from inclusive_hub.schemas.copy_suggestion import CopySuggestion
from inclusive_hub.schemas.persona import CampaignPersona, PersonaPage
from inclusive_hub.schemas.stats import PlatformStats


class ApiError(Exception):
    """Non-2xx response or transport failure. ``status`` is 0 for the latter."""

    def __init__(self, status: int, message: str, data: Any = None) -> None:
        super().__init__(message)
        self.status = status
        self.message = message
        self.data = data


class HubClient:
    def __init__(
        self,
        base_url: str = "http://localhost:3001",
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 20.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        try:
            resp = self._session.request(
                method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs
            )
        except requests.RequestException as exc:
            raise ApiError(0, "Network error or server unavailable") from exc

        try:
            body = resp.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {"data": body}

        if not 200 <= resp.status_code < 300:
            raise ApiError(resp.status_code, body.get("message") or "API request failed", body)
        return body

    @staticmethod
    def _data(body: Dict[str, Any]) -> Any:
        # Envelope when present, bare payload otherwise.
        return body["data"] if "data" in body else body

    def fetch_campaigns(self, page: int = 1, limit: int = 12, freeze: bool = False) -> PersonaPage:
        params: Dict[str, Any] = {"page": page, "limit": limit}
        if freeze:
            params["freeze"] = "true"
        return PersonaPage.model_validate(self._request("GET", "/api/campaigns", params=params))

    def fetch_campaign(self, persona_id: str) -> CampaignPersona:
        body = self._request("GET", f"/api/campaigns/{persona_id}")
        return CampaignPersona.model_validate(self._data(body))

    def create_campaign(
        self,
        business_name: str,
        business_type: str,
        target_audience: str,
        marketing_goals: List[str],
    ) -> CampaignPersona:
        payload = {
            "businessName": business_name,
            "businessType": business_type,
            "targetAudience": target_audience,
            "marketingGoals": marketing_goals,
        }
        body = self._request("POST", "/api/campaigns", json=payload)
        return CampaignPersona.model_validate(self._data(body))

    def check_bias(
        self, content: str, language: str = "en", campaign_id: Optional[str] = None
    ) -> BiasInsight:
        payload = {"content": content, "language": language, "campaignId": campaign_id}
        body = self._request("POST", "/api/bias", json=payload)
        return BiasInsight.model_validate(self._data(body))

    def generate_copy(
        self,
        prompt: str,
        language: str = "en",
        tone: str = "friendly",
        campaign_id: Optional[str] = None,
    ) -> CopySuggestion:
        payload = {"prompt": prompt, "language": language, "tone": tone, "campaignId": campaign_id}
        body = self._request("POST", "/api/copy", json=payload)
        return CopySuggestion.model_validate(self._data(body))

    def fetch_platform_stats(self) -> PlatformStats:
        return PlatformStats.model_validate(self._data(self._request("GET", "/api/stats")))

    def check_health(self) -> Dict[str, Any]:
        return self._request("GET", "/health")
