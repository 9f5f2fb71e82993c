from __future__ import annotations

import logging
import re

import httpx

from . import __version__
from .config_types import ClientConfig
from .errors import TransportError

log = logging.getLogger(__name__)

_KEY_RE = re.compile(r"([?&]key=)[0-9a-fA-F]+")


def mask_key(url: str) -> str:
    return _KEY_RE.sub(r"\1***", url)


class Transport:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        self._client = httpx.Client(
            timeout=cfg.timeout_s,
            headers={"User-Agent": f"jsonapi-client/{__version__}"},
            follow_redirects=False,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def get(self, url: str, *, timeout_s: float | None = None) -> str:
        """GET ``url`` and return the response body only.

        Non-2xx responses are not errors here; their body still goes to the decoder.
        """
        log.debug("GET %s", mask_key(url))
        kwargs = {}
        if timeout_s is not None:
            kwargs["timeout"] = timeout_s
        try:
            r = self._client.get(url, **kwargs)
        except httpx.RequestError as e:
            raise TransportError(f"GET {mask_key(url)} failed: {e}", url=mask_key(url)) from e

        if not r.is_success:
            log.warning("GET %s returned %s", mask_key(url), r.status_code)
        return r.text
