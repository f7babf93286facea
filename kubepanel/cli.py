from __future__ import annotations

import asyncio
import json
from pathlib import Path

import click

from kubepanel.catalog import list_catalog
from kubepanel.log import setup_logging
from kubepanel.models.enums import ResourceKind
from kubepanel.settings import KubepanelSettings, get_settings

KIND_CHOICE = click.Choice([kind.value for kind in ResourceKind], case_sensitive=False)


def _settings() -> KubepanelSettings:
    settings = get_settings()
    setup_logging(settings.log_level)
    return settings


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
def main() -> None:
    """kubepanel - create cluster resources from templates and manage the panel session."""


# ---------------------------------------------------------------------------
# Resource provisioning
# ---------------------------------------------------------------------------


@main.command()
def kinds() -> None:
    """List creatable resource kinds by category."""
    for category in list_catalog():
        click.echo(category.label)
        for leaf in category.children or ():
            click.echo(f"  {leaf.value:<24}{leaf.label}")


@main.command()
@click.argument("kind", type=KIND_CHOICE)
def template(kind: str) -> None:
    """Print the template for KIND (served from the local cache when present)."""
    from kubepanel.api.client import TemplateFetchError
    from kubepanel.panel import Panel

    settings = _settings()

    async def _resolve() -> str:
        async with Panel.open(settings) as panel:
            return await panel.templates.resolve(ResourceKind(kind))

    try:
        text = asyncio.run(_resolve())
    except TemplateFetchError as exc:
        raise click.ClickException(str(exc)) from None
    click.echo(text)


@main.command()
@click.argument("kind", type=KIND_CHOICE)
def evict(kind: str) -> None:
    """Drop the cached template for KIND so the next use re-fetches it."""
    from kubepanel.panel import Panel

    settings = _settings()

    async def _evict() -> None:
        async with Panel.open(settings) as panel:
            await panel.templates.evict(ResourceKind(kind))

    asyncio.run(_evict())
    click.echo(f"Evicted template for {kind}.")


@main.command()
@click.argument("kind", type=KIND_CHOICE)
@click.option(
    "-f",
    "--filename",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Manifest to submit (default: the unmodified template for KIND).",
)
def create(kind: str, filename: Path | None) -> None:
    """Create a KIND resource from a manifest or its template."""
    from kubepanel.models.enums import NoticeLevel
    from kubepanel.panel import Panel

    settings = _settings()
    manifest = filename.read_text(encoding="utf-8") if filename else None

    async def _create() -> str:
        async with Panel.open(settings) as panel:
            dialog = panel.open_create_dialog()
            await dialog.select([ResourceKind(kind)])
            latest = panel.notifier.latest()
            if manifest is not None:
                dialog.edit(manifest)
            elif latest is not None and latest.level == NoticeLevel.WARNING:
                raise click.ClickException(latest.text)

            result = await dialog.create()
            if result is None or not result.succeeded:
                message = result.message if result is not None else "create action is disabled"
                raise click.ClickException(f"Failed to create resource: {message}")
            return "Successfully created resource"

    click.echo(asyncio.run(_create()))


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


@main.group()
def session() -> None:
    """Inspect and manage the persisted panel session."""


@session.command()
def show() -> None:
    """Print the persisted session record."""
    from kubepanel.panel import Panel

    settings = _settings()

    async def _show() -> dict:
        async with Panel.open(settings) as panel:
            return {"logged_in": panel.sessions.is_user_login(), **panel.sessions.session.model_dump(mode="json")}

    click.echo(json.dumps(asyncio.run(_show()), indent=2))


@session.command()
def token() -> None:
    """Print the bearer token derived from the session kubeconfig."""
    from kubepanel.managers.session import KubeconfigError
    from kubepanel.panel import Panel

    settings = _settings()

    async def _token() -> str:
        async with Panel.open(settings) as panel:
            return panel.sessions.get_bearer_token()

    try:
        click.echo(asyncio.run(_token()))
    except KubeconfigError as exc:
        raise click.ClickException(str(exc)) from None


@session.command()
@click.option(
    "--kubeconfig",
    "kubeconfig_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Kubeconfig file whose first user token authorizes panel requests.",
)
@click.option("--user-id", required=True, help="Panel user ID.")
@click.option("--name", default=None, help="Display name.")
@click.option("--locale", default="en", show_default=True)
def login(kubeconfig_path: Path, user_id: str, name: str | None, locale: str) -> None:
    """Store a new session (replaces any existing one)."""
    from kubepanel.models.session import Session, SessionUser
    from kubepanel.panel import Panel

    settings = _settings()
    record = Session(
        user=SessionUser(id=user_id, name=name),
        kubeconfig=kubeconfig_path.read_text(encoding="utf-8"),
        locale=locale,
    )

    async def _login() -> None:
        async with Panel.open(settings) as panel:
            await panel.sessions.set_session(record)

    asyncio.run(_login())
    click.echo(f"Logged in as {user_id}.")


@session.command(name="set")
@click.argument("key")
@click.argument("value")
def set_prop(key: str, value: str) -> None:
    """Set a single session field, leaving the others untouched."""
    from pydantic import ValidationError

    from kubepanel.panel import Panel

    settings = _settings()

    async def _set() -> None:
        async with Panel.open(settings) as panel:
            await panel.sessions.set_session_prop(key, value)

    try:
        asyncio.run(_set())
    except ValidationError as exc:
        raise click.ClickException(f"Invalid value for {key}: {exc.errors()[0]['msg']}") from None
    click.echo(f"Session {key} updated.")


@session.command()
def logout() -> None:
    """Delete the persisted session."""
    from kubepanel.panel import Panel

    settings = _settings()

    async def _logout() -> None:
        async with Panel.open(settings) as panel:
            await panel.logout()

    asyncio.run(_logout())
    click.echo("Logged out.")


if __name__ == "__main__":
    main()
