from __future__ import annotations

import hashlib
import json
from typing import Any, Iterable, Sequence
from urllib.parse import quote

import httpx

from .args import as_list, encode_json, normalize_args, normalize_args_list
from .config_types import ClientConfig
from .errors import ArityMismatchError, ConfigError, DecodeError
from .transport import Transport


def _q(value: str) -> str:
    return quote(value, safe="")


class JSONAPIClient:
    """Client for the JSONAPI server plugin's HTTP interface.

    Every request is a GET whose query string carries the method name, the
    JSON-encoded arguments and a SHA-256 key derived from the shared secrets.
    """

    CALL_URL_FORMAT = "http://{host}:{port}/api/call?method={method}&args={args}&key={key}"
    CALL_MULTIPLE_URL_FORMAT = "http://{host}:{port}/api/call-multiple?method={method}&args={args}&key={key}"

    def __init__(
            self,
            host: str,
            port: int,
            username: str,
            password: str,
            salt: str,
            *,
            timeout_s: float | None = 15.0,
            transport: httpx.BaseTransport | None = None,
    ):
        cfg = ClientConfig(
            host=host,
            port=port,
            username=username,
            password=password,
            salt=salt,
            timeout_s=timeout_s,
        )
        self._cfg = cfg
        self._t = Transport(cfg, transport=transport)

    @classmethod
    def from_config(cls, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None) -> JSONAPIClient:
        return cls(
            cfg.host,
            cfg.port,
            cfg.username,
            cfg.password,
            cfg.salt,
            timeout_s=cfg.timeout_s,
            transport=transport,
        )

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> JSONAPIClient:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # --- keys and urls ---
    def create_token(self, method: str) -> str:
        """Return the hex SHA-256 key for ``method``: username + method + password + salt."""
        if not isinstance(method, str) or not method:
            raise ConfigError("method must be a non-empty string")
        raw = self._cfg.username + method + self._cfg.password + self._cfg.salt
        return hashlib.sha256(raw.encode("utf-8")).hexdigest()

    def build_call_url(self, method: str, args: Sequence[Any] = ()) -> str:
        return self.CALL_URL_FORMAT.format(
            host=self._cfg.host,
            port=self._cfg.port,
            method=_q(method),
            args=_q(encode_json(as_list(args))),
            key=self.create_token(method),
        )

    def build_multi_call_url(self, methods: Sequence[str], args_list: Sequence[Sequence[Any]]) -> str:
        methods = as_list(methods)
        args_list = [as_list(args) for args in as_list(args_list)]
        _check_arity(methods, args_list)
        # The batch is signed with its first method's key.
        return self.CALL_MULTIPLE_URL_FORMAT.format(
            host=self._cfg.host,
            port=self._cfg.port,
            method=_q(encode_json(methods)),
            args=_q(encode_json(args_list)),
            key=self.create_token(methods[0]),
        )

    # --- calls ---
    def call(self, method: str, args: Iterable[Any] = (), *, timeout_s: float | None = None) -> Any:
        if not isinstance(method, str):
            raise TypeError("call() takes a single method name; use call_multiple() for batches")
        url = self.build_call_url(method, normalize_args(as_list(args)))
        return self._get_json(url, timeout_s=timeout_s)

    def call_multiple(
            self,
            methods: Sequence[str],
            args_list: Sequence[Iterable[Any]],
            *,
            timeout_s: float | None = None,
    ) -> Any:
        methods = as_list(methods)
        args_list = as_list(args_list)
        _check_arity(methods, args_list)
        url = self.build_multi_call_url(methods, normalize_args_list(as_list(a) for a in args_list))
        return self._get_json(url, timeout_s=timeout_s)

    def _get_json(self, url: str, *, timeout_s: float | None) -> Any:
        body = self._t.get(url, timeout_s=timeout_s)
        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise DecodeError(f"response is not valid JSON: {e}", body) from e


def _check_arity(methods: list, args_list: list) -> None:
    if len(methods) != len(args_list):
        raise ArityMismatchError(len(methods), len(args_list))
    if not methods:
        raise ArityMismatchError(0, 0, "call_multiple needs at least one method")
