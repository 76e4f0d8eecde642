# sectiongen/cli.py
"""
sectiongen CLI -- Click commands with a coral/greige terminal UI.

Provides the ``sectiongen`` console entry-point declared in pyproject.toml as
``sectiongen.cli:cli``.  Commands call into the generation pipeline:

- generate section:    fetch a section and write it into the project
- generate component:  fetch a single component and write it
- config show:         SectiongenConfig display
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Optional

import click
import httpx
import pydantic
from click.formatting import wrap_text
from rich.console import Console
from rich.markup import escape as _esc

from . import __version__
from . import cli_theme as theme
from .config import SectiongenConfig, get_config
from .errors import SectiongenError
from .naming import normalize_section_name
from .notify import Notifier
from .utils.logging import get_logger, setup_logging

console = Console()
logger = get_logger(__name__)


def _print_version(
    ctx: click.Context,
    _param: click.Parameter,
    value: bool,
) -> None:
    if not value or ctx.resilient_parsing:
        return
    theme.print_version(__version__, console)
    ctx.exit()


# ---------------------------------------------------------------------------
# Styled Click help
# ---------------------------------------------------------------------------


def _ansi(markup: str) -> str:
    """Render Rich markup to an ANSI string for Click to echo."""
    buf = io.StringIO()
    Console(file=buf, force_terminal=True, highlight=False, soft_wrap=True).print(markup, end="")
    return buf.getvalue()


class ThemedHelpFormatter(click.HelpFormatter):
    """Click help formatter using the coral/greige palette.

    Command names are coral, option flags greige, descriptions dim.  Layout
    is computed on the plain text so ANSI codes never affect wrapping.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._heading = ""

    def write_usage(self, prog: str, args: str = "", prefix: Optional[str] = None) -> None:
        self.write(
            _ansi(
                f"{' ' * self.current_indent}[bold {theme.CORAL}]Usage:[/bold {theme.CORAL}] "
                f"[{theme.GREIGE}]{_esc(prog)} {_esc(args)}[/{theme.GREIGE}]"
            )
            + "\n"
        )

    def write_heading(self, heading: str) -> None:
        self._heading = heading
        self.write(
            _ansi(f"{' ' * self.current_indent}[bold {theme.CORAL}]{_esc(heading)}:[/bold {theme.CORAL}]")
            + "\n"
        )

    def write_dl(self, rows, col_max: int = 30, col_spacing: int = 2) -> None:
        rows = list(rows)
        term_style = f"bold {theme.CORAL}" if self._heading == "Commands" else theme.GREIGE
        indent = " " * self.current_indent
        first_col = min(max((len(term) for term, _ in rows), default=0), col_max) + col_spacing
        text_width = max((self.width or 80) - first_col - self.current_indent, 10)

        for term, desc in rows:
            self.write(indent + _ansi(f"[{term_style}]{_esc(term)}[/{term_style}]"))
            lines = wrap_text(desc, text_width).splitlines() if desc else []
            if not lines:
                self.write("\n")
                continue
            if len(term) <= first_col - col_spacing:
                self.write(" " * (first_col - len(term)))
            else:
                self.write("\n" + indent + " " * first_col)
            pad = "\n" + indent + " " * first_col
            self.write(pad.join(_ansi(f"[{theme.MUTED}]{_esc(line)}[/{theme.MUTED}]") for line in lines))
            self.write("\n")


class _ThemedContext(click.Context):
    formatter_class = ThemedHelpFormatter


class SectiongenCommand(click.Command):
    """Click command with styled help output."""

    context_class = _ThemedContext


class SectiongenGroup(click.Group):
    """Click group with styled help; the top-level help also shows the banner."""

    context_class = _ThemedContext
    command_class = SectiongenCommand
    group_class = type

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        if ctx.parent is None:
            theme.print_banner(__version__, console, registry=_load_config().registry_url)
        super().format_help(ctx, formatter)


def _load_config() -> SectiongenConfig:
    """``get_config()`` with settings errors reported as a ClickException."""
    try:
        return get_config()
    except pydantic.ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'settings'}: {err['msg']}"
            for err in exc.errors()
        )
        raise click.ClickException(f"Invalid configuration: {problems}")


# ---------------------------------------------------------------------------
# Main CLI group
# ---------------------------------------------------------------------------


@click.group(invoke_without_command=True, cls=SectiongenGroup)
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show version and exit.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Also log to stderr at DEBUG level.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """sectiongen -- fetch registry sections into your project."""
    cfg = _load_config()
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    setup_logging(
        cfg.resolved_log_dir,
        level="DEBUG" if verbose else cfg.log_level,
        console_output=verbose,
    )
    theme.print_banner(__version__, console, registry=cfg.registry_url)


def _run_generation(fn, name: str, path: Optional[Path]) -> list[Path]:
    """Call a generate_* function, turning failures into ClickExceptions."""
    directory = path.resolve() if path else Path.cwd()
    try:
        return fn(name, directory, config=_load_config(), notifier=Notifier(console))
    except SectiongenError as exc:
        raise click.ClickException(str(exc))
    except httpx.HTTPError as exc:
        logger.error(f"Registry request failed: {exc}")
        raise click.ClickException(f"Registry request failed: {exc}")


# ---------------------------------------------------------------------------
# generate (group)
# ---------------------------------------------------------------------------


@cli.group()
def generate() -> None:
    """Generate sections and components from the registry."""


@generate.command("section")
@click.argument("section_name", envvar="SHOPIFY_HYDROGEN_ARG_SECTION")
@click.option("--path", type=click.Path(file_okay=False, path_type=Path), default=None, help="Project directory (default: current directory).")
@click.option("--adapter", type=str, default=None, help="Framework adapter (accepted for compatibility).")
@click.option("--typescript/--no-typescript", "typescript", default=None, help="Output language preference (accepted for compatibility).")
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite existing files (files are always overwritten).")
def generate_section_cmd(
    section_name: str,
    path: Optional[Path],
    adapter: Optional[str],
    typescript: Optional[bool],
    force: bool,
) -> None:
    """Fetch a section and write it into the project.

    SECTION_NAME is the registry name of the section.  It is lower-cased
    and capitalised before lookup (imagetext -> Imagetext).  Can also be
    given via SHOPIFY_HYDROGEN_ARG_SECTION.

    \b
    Writes:
      sections/<Name>.tsx
      sections/<Name>.schema.ts
      components/<Component>.tsx   (one per dependency)

    \b
    Examples:
      sectiongen generate section hero
      sectiongen generate section hero --path ./app
    """
    from .generate import generate_section

    name = normalize_section_name(section_name)
    logger.info(
        f"generate section {name!r} (adapter={adapter}, typescript={typescript}, force={force})"
    )
    if not force:
        console.print(theme.warn("Existing files with the same name will be overwritten"))

    written = _run_generation(generate_section, name, path)
    console.print()
    console.print(theme.ok(f"Section {_esc(name)}: {len(written)} file(s) written"))


@generate.command("component")
@click.argument("component_name")
@click.option("--path", type=click.Path(file_okay=False, path_type=Path), default=None, help="Project directory (default: current directory).")
def generate_component_cmd(component_name: str, path: Optional[Path]) -> None:
    """Fetch a single component and write it to components/.

    \b
    Examples:
      sectiongen generate component ProductCard
    """
    from .generate import generate_component

    written = _run_generation(generate_component, component_name.strip(), path)
    console.print()
    console.print(theme.ok(f"Component {_esc(component_name.strip())}: {len(written)} file(s) written"))


# ---------------------------------------------------------------------------
# config (group)
# ---------------------------------------------------------------------------


@cli.group()
def config() -> None:
    """View sectiongen configuration."""


@config.command("show")
def config_show() -> None:
    """Show current configuration.

    \b
    Examples:
      sectiongen config show
    """
    cfg = _load_config()
    dump = cfg.model_dump()

    # 01 · Registry
    theme.section("Registry", console, "01")
    t = theme.make_kv_table()
    t.add_row("registry_url", _esc(dump["registry_url"]) if dump["registry_url"] else "[dim]not set[/dim]")
    t.add_row("timeout", f"{dump['timeout']}s" if dump["timeout"] is not None else "[dim]none[/dim]")
    console.print(t)

    # 02 · Writing
    theme.section("Writing", console, "02")
    t = theme.make_kv_table()
    t.add_row("max_workers", str(dump["max_workers"]))
    console.print(t)

    # 03 · Paths & Logging
    theme.section("Paths & Logging", console, "03")
    t = theme.make_kv_table()
    t.add_row("home_dir", str(dump["home_dir"]))
    t.add_row("log_dir", str(cfg.resolved_log_dir))
    t.add_row("log_level", dump["log_level"])
    console.print(t)
    console.print()
