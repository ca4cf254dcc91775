import asyncio
import logging
from typing import Dict

import requests

from use_cases.gateways import ResponsePayload

log = logging.getLogger(__name__)


class HttpDataGateway:
    """DataGateway backed by a JSON HTTP API."""

    def __init__(self, base_url: str, timeout: int = 10):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def post(self, path: str, body: Dict[str, str]) -> ResponsePayload:
        # requests is blocking; keep the event loop free while it runs.
        return await asyncio.to_thread(self._post_sync, path, body)

    def _post_sync(self, path: str, body: Dict[str, str]) -> ResponsePayload:
        url = f"{self.base_url}{path}"
        try:
            response = requests.post(url, json=body, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            log.error(f"POST {path} failed: {e}")
            return ResponsePayload(success=False, server_message=f"Failed: network error ({type(e).__name__}).")

        try:
            data = response.json()
        except ValueError:
            log.error(f"POST {path} returned non-JSON body (status {response.status_code}): {response.text[:200]}")
            return ResponsePayload(success=False, server_message=f"Failed: server error ({response.status_code}).")

        if not isinstance(data, dict):
            log.error(f"POST {path} returned unexpected JSON type {type(data).__name__}")
            return ResponsePayload(success=False, server_message=f"Failed: server error ({response.status_code}).")

        return ResponsePayload.from_dict(data)
