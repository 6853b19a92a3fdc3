"""CLI commands: modelcaps sign-in / open -- open the web app."""

from __future__ import annotations

import os
import sys

import click

from modelcaps.auth import SignInClient, open_authenticated_url, open_cloud_url
from modelcaps.config import CLOUD_API_HOST, ModelcapsConfig
from modelcaps.errors import ConfigurationError, SignInError


def _config() -> ModelcapsConfig:
    try:
        return ModelcapsConfig.from_env()
    except ConfigurationError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)


@click.command("sign-in")
@click.option("--path", default="/", help="Page to land on after signing in")
@click.option(
    "--token-env",
    default="MODELCAPS_AUTH_TOKEN",
    help="Environment variable holding the account token",
)
def sign_in(path: str, token_env: str) -> None:
    """Open the web app in a browser, already signed in."""
    config = _config()
    with SignInClient(
        config.api_host, auth_token=os.environ.get(token_env), timeout=config.timeout
    ) as client:
        try:
            open_authenticated_url("Opening the web app...", path, client=client)
        except SignInError as exc:
            click.echo(f"Error creating sign in code: {exc}", err=True)
            sys.exit(1)


@click.command("open")
@click.argument("path", default="/")
def open_page(path: str) -> None:
    """Open PATH on the cloud web app without signing in."""
    open_cloud_url("Opening the web app...", path, api_host=CLOUD_API_HOST)
