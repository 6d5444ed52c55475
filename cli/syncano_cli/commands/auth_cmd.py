from __future__ import annotations

import typer
from rich.table import Table

from syncano_client import AuthError, ConnectionCredentials, SyncanoClientError
from syncano_client.errors_utils import describe_error

from .. import console
from ..auth_state import resolve_auth_context
from ..config import load_config, save_config
from ..http import make_session

app = typer.Typer(help="Auth commands.")


@app.command("login")
def login(
    email: str = typer.Option(..., "--email", prompt=True, help="Account email."),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True, help="Account password."),
    insecure: bool = typer.Option(False, "--insecure", help="Skip TLS certificate verification."),
):
    cfg = load_config()
    creds = ConnectionCredentials(
        email=email,
        password=password,
        skip_tls_verification=insecure or cfg.skip_tls_verification,
    )
    try:
        session = make_session(cfg, credentials=creds)
    except AuthError:
        console.err("Login failed: invalid email or password.")
        raise typer.Exit(code=2)
    except SyncanoClientError as e:
        console.err(f"Login failed: {describe_error(e)}")
        raise typer.Exit(code=2)

    with session:
        cfg.auth.api_key = session.api_key
        cfg.auth.email = email
    save_path = save_config(cfg)
    console.ok(f"Login successful. API key saved to {save_path}.")


@app.command("logout", help="Clear the stored API key.")
def logout():
    cfg = load_config()
    cfg.auth.api_key = ""
    save_path = save_config(cfg)
    console.ok(f"API key cleared from {save_path}.")


@app.command("status")
def status():
    """Check whether the configured credentials are accepted."""
    ctx = resolve_auth_context()
    if ctx.state == "authenticated":
        console.ok(f"Authenticated as {ctx.email or '-'}.")
        return
    if ctx.state == "no_credentials":
        console.warn("No credentials found.")
        console.info("Run: syncano auth login, or set SYNCANO_API_KEY")
    elif ctx.state == "invalid_credentials":
        console.err("Credentials were rejected by the API.")
    else:
        console.err("Syncano API is unreachable.")
    raise typer.Exit(code=2)


def whoami_impl(
    json_output: bool = typer.Option(False, "--json", help="Output JSON only."),
):
    """
    Show the account the current credentials belong to.
    """
    cfg = load_config()
    try:
        session = make_session(cfg)
    except SyncanoClientError as e:
        console.err(f"Not authenticated: {describe_error(e)}")
        console.info("Run: syncano auth login")
        raise typer.Exit(code=2)

    with session:
        try:
            account = session.get_account_details()
        except SyncanoClientError as e:
            console.err(f"Failed to fetch account details: {describe_error(e)}")
            raise typer.Exit(code=2)

    if json_output:
        console.print_json(account.to_dict())
        return

    table = Table(title="Account")
    table.add_column("id", style="bold")
    table.add_column("email")
    table.add_column("name")
    table.add_row(str(account.id), account.email or "-", account.full_name or "-")
    console.console.print(table)
