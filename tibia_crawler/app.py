"""Typer CLI entrypoint for tibia-crawler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import typer
import yaml
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import ConfigRepository, CrawlerConfig
from .errors import TibiaCrawlerError
from .infra import RateLimiter
from .logging_conf import configure_logging
from .parsers import BoostableBossesParser, ParseOptions
from .tibia import BoostableBoss, BoostableBosses

app = typer.Typer(
    help="tibia.com crawler command line",
    no_args_is_help=True,
    rich_markup_mode=None,
)
config_app = typer.Typer(
    name="config",
    help="Inspect or create the configuration file",
    no_args_is_help=True,
    rich_markup_mode=None,
)

console = Console()


@dataclass
class AppState:
    repository: ConfigRepository
    config: CrawlerConfig
    parser: Optional[BoostableBossesParser] = None

    def ensure_parser(self) -> BoostableBossesParser:
        """Build the parser on first use; config commands never need one."""

        if self.parser is None:
            self.parser = BoostableBossesParser(self.config)
        return self.parser

    def close(self) -> None:
        if self.parser is not None:
            self.parser.close()


def build_state(verbose: bool) -> AppState:
    repository = ConfigRepository()
    try:
        config = repository.load()
    except (ValueError, yaml.YAMLError) as exc:
        console.print(
            f"Invalid configuration at {repository.locator.config_path()}: {exc}",
            style="red",
            markup=False,
        )
        raise typer.Exit(code=1) from exc
    configure_logging(verbose=verbose, log_dir=repository.locator.logs_dir)
    return AppState(repository=repository, config=config)


def _get_state(ctx: typer.Context) -> AppState:
    state = ctx.obj
    if state is None:
        state = build_state(verbose=False)
        ctx.obj = state
        ctx.call_on_close(state.close)
    return state


def _fetch(state: AppState, retries: Optional[int], rate_limit: bool) -> BoostableBosses:
    limiter = None
    if rate_limit:
        pace = state.config.rate_limit
        limiter = RateLimiter(pace.rate, pace.per_seconds)
    options = ParseOptions(
        rate_limiter=limiter,
        retries=retries,
        disallow_cached_responses=True,
    )
    try:
        return state.ensure_parser().parse(None, options)
    except TibiaCrawlerError as exc:
        console.print(f"Failed to fetch boostable bosses: {exc}", style="red")
        raise typer.Exit(code=1) from exc


def _render_bosses_table(bosses: Sequence[BoostableBoss], boosted: BoostableBoss) -> Table:
    table = Table(
        title=f"Boostable bosses · {len(bosses)} total · boosted: {boosted.name or '-'}",
        box=box.SIMPLE_HEAD,
        show_lines=False,
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Boosted", style="green")
    table.add_column("Image", style="magenta", overflow="fold")
    for idx, boss in enumerate(bosses, start=1):
        table.add_row(
            str(idx),
            boss.name,
            "yes" if boss.is_boosted else "",
            boss.image_url,
            style="bold" if boss.is_boosted else None,
        )
    return table


app.add_typer(config_app, name="config", help="Configuration commands (show/init)")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging", is_flag=True),
) -> None:
    state = build_state(verbose)
    ctx.obj = state
    ctx.call_on_close(state.close)


@app.command("boosted", help="Show today's boosted boss.")
def boosted(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of text."),
    retries: Optional[int] = typer.Option(None, "--retries", min=0, help="Attempt budget."),
    rate_limit: bool = typer.Option(False, "--rate-limit", help="Pace requests to tibia.com."),
) -> None:
    state = _get_state(ctx)
    parsed = _fetch(state, retries, rate_limit)
    if as_json:
        console.print_json(parsed.boosted.model_dump_json(by_alias=True))
        return
    console.print(f"Today's boosted boss: [bold cyan]{escape(parsed.boosted.name)}[/]")
    console.print(parsed.boosted.image_url, style="dim")


@app.command("bosses", help="List every boostable boss.")
def bosses(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
    retries: Optional[int] = typer.Option(None, "--retries", min=0, help="Attempt budget."),
    rate_limit: bool = typer.Option(False, "--rate-limit", help="Pace requests to tibia.com."),
    name: Optional[str] = typer.Option(None, "--name", help="Only show bosses whose name contains this text."),
) -> None:
    state = _get_state(ctx)
    parsed = _fetch(state, retries, rate_limit)
    if as_json:
        console.print_json(parsed.to_json())
        return
    selected = list(parsed.bosses)
    if name:
        needle = name.lower()
        selected = [boss for boss in selected if needle in boss.name.lower()]
    if not selected:
        console.print("No bosses matched.", style="yellow")
        raise typer.Exit(code=0)
    console.print(_render_bosses_table(selected, parsed.boosted))


@config_app.command("show", help="Print the resolved configuration.")
def config_show(ctx: typer.Context) -> None:
    state = _get_state(ctx)
    payload = state.config.model_dump(mode="json")
    console.print(yaml.safe_dump(payload, allow_unicode=True, sort_keys=False), end="", markup=False, highlight=False, emoji=False)
    console.print(f"# source: {state.repository.locator.config_path()}", style="dim")


@config_app.command("init", help="Write the default configuration file.")
def config_init(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file."),
) -> None:
    state = _get_state(ctx)
    if state.repository.exists() and not force:
        console.print(
            f"Configuration already exists at {state.repository.locator.config_path()}; use --force to overwrite.",
            style="yellow",
        )
        raise typer.Exit(code=1)
    path = state.repository.save(CrawlerConfig())
    console.print(f"Configuration written to {path}", style="green")


def cli() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    cli()
