"""Solace CLI — run the API server or talk to the companion from a terminal."""

import sys

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from solace import __version__
from solace.config import Settings
from solace.errors import SolaceError
from solace.logging_config import configure_logging
from solace.safety.keyword_store import DEFAULT_KEYWORDS
from solace.safety.matcher import detect_safety_keywords

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", default=None, help="Override SOLACE_LOG_LEVEL")
@click.pass_context
def main(ctx: click.Context, log_level: str | None):
    """Solace — wellness and safety companion.

    Serves the companion REST API and offers quick terminal access to the
    chat pipeline and the safety keyword detector.
    """
    settings = Settings.from_env()
    if log_level:
        settings.log_level = log_level.upper()
    configure_logging(settings.log_level)
    ctx.obj = settings


# ── Serve ────────────────────────────────────────────────────────────


@main.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: str, port: int, reload: bool):
    """Start the REST API with uvicorn."""
    import uvicorn

    console.print(f"\n[bold magenta]Solace[/] — API listening on http://{host}:{port}\n")
    uvicorn.run(
        "web.backend.app.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


# ── Chat ─────────────────────────────────────────────────────────────


@main.command()
@click.argument("message")
@click.pass_obj
def chat(settings: Settings, message: str):
    """Send MESSAGE through the chat pipeline and print the reply."""
    from solace.service import build_service

    service = build_service(settings)
    try:
        entry = service.submit_chat_message(message)
    except SolaceError as e:
        console.print(f"[red]Chat failed:[/] {e}")
        sys.exit(1)

    if entry.is_safety_alert:
        console.print("[bold red]Safety alert:[/] this message matched an active safety keyword.")
    console.print(Panel(entry.ai_response, title="Solace", border_style="magenta"))


# ── Keywords ─────────────────────────────────────────────────────────


@main.command()
def keywords():
    """List the default safety keywords a new session starts with."""
    table = Table(title=f"Default Safety Keywords ({len(DEFAULT_KEYWORDS)})")
    table.add_column("Keyword", style="cyan")
    table.add_column("Active", justify="center", style="green")
    for kw in DEFAULT_KEYWORDS:
        table.add_row(kw, "yes")
    console.print(table)


@main.command()
@click.argument("message")
@click.option(
    "--keyword",
    "-k",
    "extra",
    multiple=True,
    help="Additional keyword to check (repeatable)",
)
@click.option("--no-defaults", is_flag=True, help="Ignore the default keyword set")
def check(message: str, extra: tuple[str, ...], no_defaults: bool):
    """Check MESSAGE against the safety keywords without calling the LLM."""
    active = list(extra) if no_defaults else list(DEFAULT_KEYWORDS) + list(extra)
    if detect_safety_keywords(message, active):
        console.print("[bold red]ALERT[/]: message contains a safety keyword.")
        sys.exit(2)
    console.print("[green]OK[/]: no safety keywords found.")


if __name__ == "__main__":
    main()
