from __future__ import annotations

import typer

from syncano_client.credentials import mask_secret

from .. import console
from ..config import client_config, config_path, load_config, normalize_api_root, save_config

app = typer.Typer(help="Local CLI configuration.")


@app.command("show")
def show_config():
    cfg = load_config()
    effective = client_config(cfg)
    api_key = mask_secret(cfg.auth.api_key) or "(empty)"
    console.console.print(f"path={config_path()}")
    console.console.print(
        f"api_root={effective.api_root} server_name={effective.server_name} "
        f"skip_tls_verification={cfg.skip_tls_verification}"
    )
    console.console.print(f"email={cfg.auth.email or '(empty)'} api_key={api_key}")


@app.command("set")
def set_config(
    api_root: str | None = typer.Option(None, "--api-root", help="Syncano API root URL."),
    server_name: str | None = typer.Option(None, "--server-name", help="TLS server name."),
    insecure: bool | None = typer.Option(
        None,
        "--insecure/--secure",
        help="Skip (or enforce) TLS certificate verification.",
    ),
):
    cfg = load_config()
    if api_root is not None:
        normalized = normalize_api_root(api_root)
        if not normalized:
            console.err("API root cannot be empty.")
            raise typer.Exit(code=2)
        cfg.api_root = normalized
    if server_name is not None:
        if not server_name.strip():
            console.err("Server name cannot be empty.")
            raise typer.Exit(code=2)
        cfg.server_name = server_name.strip()
    if insecure is not None:
        cfg.skip_tls_verification = insecure
    save_config(cfg)
    console.ok("Config updated.")
