from __future__ import annotations

import os

import requests

from .constants import DEFAULT_TIMEOUT_SECONDS, HTTP_TOKEN_ENV_VAR


class HttpSource:
    def __init__(
        self,
        token: str | None = None,
        *,
        timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self.token = token if token is not None else os.getenv(HTTP_TOKEN_ENV_VAR)
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def fetch(self, url: str) -> str:
        try:
            resp = self.session.get(url, timeout=self.timeout_seconds, headers=self._headers())
        except requests.RequestException as exc:
            raise RuntimeError(f"Fetch failed for {url}: {exc}") from exc
        if resp.status_code < 200 or resp.status_code > 299:
            raise RuntimeError(f"Fetch failed: HTTP {resp.status_code} from {url}")
        resp.encoding = resp.encoding or "utf-8"
        return resp.text

    def _headers(self) -> dict[str, str]:
        h = {"Accept": "application/json, text/plain"}
        if self.token:
            h["Authorization"] = f"Bearer {self.token}"
        return h
