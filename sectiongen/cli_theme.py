# sectiongen/cli_theme.py
"""Terminal theme for the sectiongen CLI.

Coral & greige palette:
  - Compact brand banner with the active registry
  - Numbered section headers ("01 · SECTION NAME")
  - Rounded panels with warm greige borders
  - Works in both light and dark terminal modes
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

# ── Brand ─────────────────────────────────────────────────────────

BRAND = "S E C T I O N G E N"
TAGLINE = "Registry sections, written into your project"

# ── Palette ───────────────────────────────────────────────────────

CORAL = "#E87461"
GREIGE = "#B5A89A"
MUTED = "dim"


# ── Banner ────────────────────────────────────────────────────────


def print_banner(version: str, console: Console, registry: str | None = None) -> None:
    """Print the brand banner and the registry the run will talk to."""
    console.print(f"\n  [bold {CORAL}]{BRAND}[/bold {CORAL}]")
    console.print(f"  [{GREIGE}]{TAGLINE}[/{GREIGE}]")
    console.print(f"  [{MUTED}]v{version}[/{MUTED}]")

    rule = "─" * len(TAGLINE)
    console.print(f"  [{GREIGE}]{rule}[/{GREIGE}]")
    if registry:
        console.print(
            f"  [reverse {CORAL}] registry [/reverse {CORAL}] [{MUTED}]▸[/{MUTED}] "
            f"[{CORAL}]{escape(registry)}[/{CORAL}]"
        )
    else:
        console.print(f"  [reverse yellow] registry [/reverse yellow] [{MUTED}]not configured[/{MUTED}]")
    console.print()


def print_version(version: str, console: Console) -> None:
    """Print a compact branded version line."""
    t = Text()
    t.append(BRAND, style=f"bold {CORAL}")
    t.append(f"  v{version}", style=MUTED)
    console.print(t)


# ── Section headers ──────────────────────────────────────────────


def section(
    title: str,
    console: Console,
    number: str | None = None,
    uppercase: bool = True,
) -> None:
    """Print a numbered section header."""
    console.print()
    t = Text()
    if number:
        t.append(f"  {number}", style=f"bold {CORAL}")
        t.append(" · ", style=MUTED)
    else:
        t.append("  ", style="")
    display = title.upper() if uppercase else title
    t.append(display, style="bold")
    console.print(t)
    rule = "─" * len(TAGLINE)
    console.print(f"  {rule}", style=GREIGE)


# ── Tables ───────────────────────────────────────────────────────


def make_table(title: str | None = None, **kwargs: object) -> Table:
    """Create a table with rounded greige borders."""
    return Table(
        title=title,
        box=box.ROUNDED,
        border_style=GREIGE,
        title_style=f"bold {CORAL}",
        header_style="bold",
        padding=(0, 1),
        **kwargs,
    )


def make_kv_table() -> Table:
    """Create a headerless two-column key-value table."""
    t = make_table(show_header=False)
    t.add_column("Key", style=f"bold {CORAL}", no_wrap=True)
    t.add_column("Value")
    return t


# ── Status lines ─────────────────────────────────────────────────
# Callers escape user-supplied text; these helpers emit Rich markup.


def info(msg: str) -> str:
    """Info-level status line (coral arrow, dim text)."""
    return f"  [{CORAL}]›[/{CORAL}] [{MUTED}]{msg}[/{MUTED}]"


def ok(msg: str) -> str:
    """Success status line (green check)."""
    return f"  [bold green]✓[/bold green] {msg}"


def warn(msg: str) -> str:
    """Warning status line (yellow bang)."""
    return f"  [bold yellow]![/bold yellow] [yellow]{msg}[/yellow]"
