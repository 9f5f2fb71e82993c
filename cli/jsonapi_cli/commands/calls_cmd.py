from __future__ import annotations

import json
from typing import Any

import typer
from jsonapi_client import JSONAPIClientError
from jsonapi_client.args import normalize_args

from .. import console
from ..config import load_config
from ..http import make_client

PROFILE_HELP = "Settings profile from [profiles.<name>]."


def parse_cli_arg(text: str) -> Any:
    """Parse one command-line argument as JSON, or keep it as a plain string."""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def _client(profile: str | None, host: str | None, port: int | None):
    try:
        return make_client(load_config(), profile=profile, host_override=host, port_override=port)
    except JSONAPIClientError as e:
        console.err(f"Invalid settings: {e}")
        console.info("Run `jsonapi settings init` or pass --profile.")
        raise typer.Exit(code=2)


def key(
        method: str = typer.Argument(..., help="API method name."),
        profile: str | None = typer.Option(None, "--profile", help=PROFILE_HELP),
):
    client = _client(profile, None, None)
    try:
        console.console.print(client.create_token(method))
    except JSONAPIClientError as e:
        console.err(str(e))
        raise typer.Exit(code=2)
    finally:
        client.close()


def url(
        method: str = typer.Argument(..., help="API method name."),
        args: list[str] | None = typer.Argument(None, help="Arguments, each parsed as JSON when possible."),
        profile: str | None = typer.Option(None, "--profile", help=PROFILE_HELP),
        host: str | None = typer.Option(None, "--host", help="Override host."),
        port: int | None = typer.Option(None, "--port", help="Override port."),
):
    client = _client(profile, host, port)
    try:
        values = normalize_args(parse_cli_arg(a) for a in args or [])
        console.console.print(client.build_call_url(method, values), soft_wrap=True, markup=False)
    except (JSONAPIClientError, ValueError, TypeError) as e:
        console.err(str(e))
        raise typer.Exit(code=2)
    finally:
        client.close()


def call(
        method: str = typer.Argument(..., help="API method name."),
        args: list[str] | None = typer.Argument(None, help="Arguments, each parsed as JSON when possible."),
        profile: str | None = typer.Option(None, "--profile", help=PROFILE_HELP),
        host: str | None = typer.Option(None, "--host", help="Override host."),
        port: int | None = typer.Option(None, "--port", help="Override port."),
        timeout: float | None = typer.Option(None, "--timeout", help="Request timeout in seconds."),
):
    client = _client(profile, host, port)
    try:
        data = client.call(method, [parse_cli_arg(a) for a in args or []], timeout_s=timeout)
    except (JSONAPIClientError, ValueError, TypeError) as e:
        console.err(f"Call {method} failed: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()
    console.print_json(data)


def call_multiple(
        methods: list[str] = typer.Option(..., "-m", "--method", help="Method name; repeat for each call."),
        args_json: list[str] | None = typer.Option(
            None,
            "-a",
            "--args",
            help="JSON array of arguments; repeat once per --method, in the same order.",
        ),
        profile: str | None = typer.Option(None, "--profile", help=PROFILE_HELP),
        host: str | None = typer.Option(None, "--host", help="Override host."),
        port: int | None = typer.Option(None, "--port", help="Override port."),
        timeout: float | None = typer.Option(None, "--timeout", help="Request timeout in seconds."),
):
    args_list = []
    for raw in args_json or []:
        value = parse_cli_arg(raw)
        if not isinstance(value, list):
            console.err(f"--args must be a JSON array, got: {raw}")
            raise typer.Exit(code=2)
        args_list.append(value)

    client = _client(profile, host, port)
    try:
        data = client.call_multiple(methods, args_list, timeout_s=timeout)
    except (JSONAPIClientError, ValueError, TypeError) as e:
        console.err(f"Call failed: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()
    console.print_json(data)
