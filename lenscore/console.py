"""
LensCore Console Interface
===========================

Rich-powered console abstraction giving PassLens one consistent
presentation style: banner, section rules, coloured status messages,
and tables.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_LENS_THEME = Theme(
    {
        "lens.banner": "bold bright_cyan",
        "lens.section": "bold bright_magenta",
        "lens.success": "bold green",
        "lens.warning": "bold yellow",
        "lens.error": "bold red",
        "lens.info": "bold bright_blue",
        "lens.dim": "dim white",
        "lens.critical": "bold white on red",
        "lens.high": "bold red",
        "lens.medium": "bold yellow",
        "lens.low": "bold bright_cyan",
        "lens.informational": "bold bright_blue",
    }
)

_BANNER_ART = r"""
[bright_cyan]
  ____               _
 |  _ \ __ _ ___ ___| |    ___ _ __  ___
 | |_) / _` / __/ __| |   / _ \ '_ \/ __|
 |  __/ (_| \__ \__ \ |__|  __/ | | \__ \
 |_|   \__,_|___/___/_____\___|_| |_|___/
[/bright_cyan]"""

_TAGLINE = "Password strength, entropy & crack-time estimation"
_PRIVACY_NOTE = "Local analysis only. Nothing leaves this process."


class LensConsole:
    """Unified console interface for PassLens.

    Usage::

        con = LensConsole()
        con.banner()
        con.section("Entropy & Strength")
        con.success("Report written")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (library / test mode).
            record: Enable Rich recording for HTML export.
        """
        self._console = Console(
            theme=_LENS_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner and sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the PassLens ASCII-art banner."""
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[lens.banner]{_TAGLINE}[/lens.banner]\n"
            f"[lens.dim]{_PRIVACY_NOTE}[/lens.dim]\n"
            f"[lens.dim]Version: {version}  |  {now}[/lens.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="lens.section",
            characters="─",
        )

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(
            f"[lens.success][✔] SUCCESS:[/lens.success] {message}"
        )

    def warning(self, message: str) -> None:
        self._console.print(
            f"[lens.warning][⚠] WARNING:[/lens.warning] {message}"
        )

    def error(self, message: str) -> None:
        self._console.print(
            f"[lens.error][✘] ERROR:[/lens.error] {message}"
        )

    def info(self, message: str) -> None:
        self._console.print(
            f"[lens.info][ℹ] INFO:[/lens.info] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Row tuples; each element is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)

    def findings_table(self, findings: Sequence[Any]) -> None:
        """Render a findings table with automatic severity colouring.

        Expects objects with ``severity``, ``title``, and ``description``
        attributes (e.g. :class:`~lenscore.models.Finding`).
        """
        severity_style_map: dict[str, str] = {
            "CRITICAL": "lens.critical",
            "HIGH": "lens.high",
            "MEDIUM": "lens.medium",
            "LOW": "lens.low",
            "INFO": "lens.informational",
        }

        tbl = Table(
            title="Findings",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        tbl.add_column("#", style="dim", width=4, justify="right")
        tbl.add_column("Severity", width=12)
        tbl.add_column("Title")
        tbl.add_column("Description", ratio=2)

        for idx, finding in enumerate(findings, start=1):
            sev = getattr(finding, "severity", "INFO")
            sev_name = sev.value if hasattr(sev, "value") else str(sev).upper()
            sev_style = severity_style_map.get(sev_name, "")
            sev_cell = (
                f"[{sev_style}]{sev_name}[/{sev_style}]" if sev_style else sev_name
            )
            tbl.add_row(
                str(idx),
                sev_cell,
                Text(str(getattr(finding, "title", ""))),
                Text(str(getattr(finding, "description", ""))),
            )

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Proxy to :meth:`rich.console.Console.print`."""
        self._console.print(*args, **kwargs)

    def blank(self, count: int = 1) -> None:
        for _ in range(count):
            self._console.print()

    def export_html(self) -> str:
        """Export recorded console output as HTML (requires ``record=True``)."""
        return self._console.export_html()
