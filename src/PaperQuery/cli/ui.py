"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to the runner.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from PaperQuery.cli.commands import (
    CanonicalizeCommand,
    ClassicQueryCommand,
    PaperQueryCommand,
    ParseCommand,
    SavedCommand,
)
from PaperQuery.cli.runner import CommandRunner
from PaperQuery.config import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from PaperQuery.config.output import ALLOWED_FORMATS
from PaperQuery.core.query import QuerySource
from PaperQuery.sources.ads.forms import AdsDatabase, QueryLogic
from PaperQuery.sources.registry import resolve_source, supported_source_names

_SOURCE_CHOICE = click.Choice(supported_source_names(), case_sensitive=False)
_FORMAT_CHOICE = click.Choice(ALLOWED_FORMATS, case_sensitive=False)
_LOGIC_CHOICE = click.Choice([logic.value for logic in QueryLogic], case_sensitive=False)


def _source_or_default(cfg: AppConfig, source: str | None) -> QuerySource:
    return resolve_source(source) if source else cfg.query.default_source


def _format_or_default(cfg: AppConfig, output_format: str | None) -> str:
    return output_format.lower() if output_format else cfg.output.format


@click.group(help="PaperQuery: parse and build arXiv / ADS search queries.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help=(
        "Path to YAML config file, merged over the default config. "
        "Built-in defaults are used when the default file is missing."
    ),
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
    """
    load_dotenv()

    if not config_path.exists():
        if config_path != DEFAULT_CONFIG_PATH:
            raise click.BadParameter(f"File {config_path} does not exist.", param_hint="'--config'")
        ctx.obj = parse_config_dict({})
    elif DEFAULT_CONFIG_PATH.exists():
        ctx.obj = load_config_with_defaults(config_path, DEFAULT_CONFIG_PATH)
    else:
        ctx.obj = load_config(config_path)


@cli.command("parse")
@click.argument("query")
@click.option("--source", type=_SOURCE_CHOICE, default=None, help="Query source (defaults to config).")
@click.option("--format", "output_format", type=_FORMAT_CHOICE, default=None, help="Output format.")
@click.pass_context
def parse_cmd(ctx: click.Context, query: str, source: str | None, output_format: str | None) -> None:
    """Parse QUERY into field-qualified terms."""
    cfg = ctx.obj
    command = ParseCommand(
        text=query,
        source=_source_or_default(cfg, source),
        output_format=_format_or_default(cfg, output_format),
    )
    CommandRunner(cfg).run(ctx.command.name, command)


@cli.command("canonicalize")
@click.argument("query")
@click.option("--source", type=_SOURCE_CHOICE, default=None, help="Query source (defaults to config).")
@click.pass_context
def canonicalize_cmd(ctx: click.Context, query: str, source: str | None) -> None:
    """Print the canonical form of QUERY."""
    cfg = ctx.obj
    command = CanonicalizeCommand(text=query, source=_source_or_default(cfg, source))
    CommandRunner(cfg).run(ctx.command.name, command)


@cli.command("saved")
@click.option("--format", "output_format", type=_FORMAT_CHOICE, default=None, help="Output format.")
@click.pass_context
def saved_cmd(ctx: click.Context, output_format: str | None) -> None:
    """Parse and canonicalize the saved searches listed in the config."""
    cfg = ctx.obj
    command = SavedCommand(saved=cfg.query.saved, output_format=_format_or_default(cfg, output_format))
    CommandRunner(cfg).run(ctx.command.name, command)


@cli.command("classic")
@click.option("--author", "authors", multiple=True, help="Author name; repeat for several authors.")
@click.option("--object", "objects", default="", help="SIMBAD/NED object name.")
@click.option("--title", "title_words", default="", help="Title words.")
@click.option("--title-logic", type=_LOGIC_CHOICE, default="AND", show_default=True)
@click.option("--abstract", "abstract_words", default="", help="Abstract / keyword words.")
@click.option("--abstract-logic", type=_LOGIC_CHOICE, default="AND", show_default=True)
@click.option("--year-from", type=int, default=None)
@click.option("--year-to", type=int, default=None)
@click.option(
    "--database",
    type=click.Choice([db.value for db in AdsDatabase], case_sensitive=False),
    default=AdsDatabase.ALL.value,
    show_default=True,
)
@click.option("--refereed", is_flag=True, help="Refereed papers only.")
@click.option("--articles", is_flag=True, help="Journal articles only.")
@click.pass_context
def classic_cmd(
    ctx: click.Context,
    authors: tuple[str, ...],
    objects: str,
    title_words: str,
    title_logic: str,
    abstract_words: str,
    abstract_logic: str,
    year_from: int | None,
    year_to: int | None,
    database: str,
    refereed: bool,
    articles: bool,
) -> None:
    """Build an ADS query from classic search-form fields."""
    command = ClassicQueryCommand(
        authors=authors,
        objects=objects,
        title_words=title_words,
        title_logic=QueryLogic(title_logic.upper()),
        abstract_words=abstract_words,
        abstract_logic=QueryLogic(abstract_logic.upper()),
        year_from=year_from,
        year_to=year_to,
        database=AdsDatabase(database.lower()),
        refereed_only=refereed,
        articles_only=articles,
    )
    CommandRunner(ctx.obj).run(ctx.command.name, command)


@cli.command("paper")
@click.option("--bibcode", default="", help="ADS bibcode.")
@click.option("--doi", default="", help="DOI.")
@click.option("--arxiv", "arxiv_id", default="", help="arXiv identifier (old or new style).")
@click.pass_context
def paper_cmd(ctx: click.Context, bibcode: str, doi: str, arxiv_id: str) -> None:
    """Build an ADS query matching any of the given paper identifiers."""
    command = PaperQueryCommand(bibcode=bibcode, doi=doi, arxiv_id=arxiv_id)
    CommandRunner(ctx.obj).run(ctx.command.name, command)
