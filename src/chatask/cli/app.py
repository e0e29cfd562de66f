"""Click CLI group with ask, providers, and config commands."""

from __future__ import annotations

import asyncio

import click
from rich.console import Console
from rich.table import Table

from chatask.binder import ReplyBinder
from chatask.core.config import Settings, get_settings
from chatask.core.logging import mask_secret, setup_logging
from chatask.llm.factory import build_client
from chatask.llm.types import Provider

console = Console()

_PROVIDER_CHOICE = click.Choice([p.value for p in Provider])


@click.group()
def cli() -> None:
    """Ask DeepSeek or Coze a single question."""


@cli.command()
@click.argument("prompt", nargs=-1, required=True)
@click.option("--provider", "-p", type=_PROVIDER_CHOICE, default=None,
              help="Provider to ask (defaults to CHATASK_DEFAULT_PROVIDER).")
def ask(prompt: tuple[str, ...], provider: str | None) -> None:
    """Ask a single question and print the reply."""
    settings = get_settings()
    setup_logging(settings.log_level)

    full_prompt = " ".join(prompt)
    if not full_prompt:
        click.echo("Error: prompt is empty.", err=True)
        raise SystemExit(2)

    ok = asyncio.run(_run_ask(settings, provider, full_prompt))
    if not ok:
        raise SystemExit(1)


async def _run_ask(settings: Settings, provider: str | None, prompt: str) -> bool:
    """Run one exchange through a binder that prints to the console."""
    client = build_client(settings, provider)
    if not client.is_configured():
        await client.close()
        click.echo(f"Error: credentials for {client.provider} are not set.", err=True)
        raise SystemExit(2)

    async with client:
        with console.status(settings.placeholder) as status:
            shown = False

            def render(text: str) -> None:
                nonlocal shown
                if not shown:
                    shown = True
                    status.update(text)
                else:
                    console.print(text, markup=False, highlight=False)

            binder = ReplyBinder(
                client,
                render,
                placeholder=settings.placeholder,
                error_prefix=settings.error_prefix,
            )
            await binder.trigger(prompt)

    return binder.last_error is None


@cli.command()
def providers() -> None:
    """List providers and whether their credentials are configured."""
    settings = get_settings()

    table = Table(title="Providers")
    table.add_column("Provider")
    table.add_column("Endpoint")
    table.add_column("Configured")
    table.add_column("Default")

    for p, url, configured in asyncio.run(_describe_providers(settings)):
        table.add_row(
            p.value,
            url,
            "[green]yes[/green]" if configured else "[red]no[/red]",
            "*" if p is settings.default_provider else "",
        )

    console.print(table)


async def _describe_providers(settings: Settings) -> list[tuple[Provider, str, bool]]:
    rows = []
    for p in Provider:
        async with build_client(settings, p) as client:
            rows.append((p, client.chat_url, client.is_configured()))
    return rows


@cli.command("config")
def config_cmd() -> None:
    """Show the effective settings with credentials masked."""
    settings = get_settings()
    secrets = {"deepseek_api_key", "coze_api_key", "coze_bot_id"}

    table = Table(title="Settings")
    table.add_column("Key")
    table.add_column("Value")
    for key, value in settings.model_dump().items():
        if key in secrets:
            value = mask_secret(value) or "[dim](unset)[/dim]"
        elif isinstance(value, Provider):
            value = value.value
        table.add_row(key, str(value))
    console.print(table)
