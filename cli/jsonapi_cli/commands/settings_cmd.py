from __future__ import annotations

import os

import typer
from jsonapi_client import DEFAULT_PORT

from .. import console
from ..config import (
    SETTING_KEYS,
    coerce_setting,
    config_path,
    default_config,
    load_config,
    save_config,
)

app = typer.Typer(help="Manage local settings (~/.config/jsonapi/config.toml).")


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        host: str = typer.Option("localhost", "--host", prompt="Server host", help="Server host name or IP."),
        port: int = typer.Option(DEFAULT_PORT, "--port", prompt="JSONAPI port", help="JSONAPI port."),
        username: str = typer.Option(..., "--username", prompt="Username", help="JSONAPI username."),
        password: str = typer.Option(
            ...,
            "--password",
            prompt="Password",
            hide_input=True,
            help="JSONAPI password.",
        ),
        salt: str = typer.Option(..., "--salt", prompt="Salt", help="JSONAPI salt."),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.host = host.strip()
    cfg.port = port
    cfg.username = username.strip()
    cfg.password = password
    cfg.salt = salt
    if not cfg.host:
        console.err("Host cannot be empty.")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    password_state = "(set)" if cfg.password else "(empty)"
    salt_state = "(set)" if cfg.salt else "(empty)"
    console.console.print(
        f"host={cfg.host} port={cfg.port} username={cfg.username} "
        f"password={password_state} salt={salt_state} timeout_s={cfg.timeout_s}",
        markup=False,
    )


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help="Setting key (host, port, username, salt, timeout_s)."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k == "password":
        console.err("Refusing to print the password.")
        raise typer.Exit(code=2)
    if k not in SETTING_KEYS:
        console.err(f"Unknown setting: {key}")
        raise typer.Exit(code=2)
    console.console.print(str(getattr(cfg, k)), markup=False)


@app.command("set")
def set_setting(
        key: str = typer.Argument(..., help=f"Setting key ({', '.join(SETTING_KEYS)})."),
        value: str = typer.Argument(..., help="New value."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k not in SETTING_KEYS:
        console.err(f"Unknown setting: {key}")
        raise typer.Exit(code=2)
    try:
        setattr(cfg, k, coerce_setting(k, value))
    except ValueError:
        console.err(f"Invalid value for {k}: {value}")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
