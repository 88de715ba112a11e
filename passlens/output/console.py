"""
PassLens Console Output
========================

Rich-based console formatters for password analysis results: strength
meter and badge, character-class checklist, weakness list, crack-time
card, attack-model comparison, entropy-history chart and suggestions.

Uses the LensCore console infrastructure for consistent styling.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from lenscore.console import LensConsole
from passlens.analyzers.crack_time import AVERAGE_CASE_NOTE
from passlens.core.models import (
    CrackTimeEstimate,
    HistorySample,
    PasswordAnalysis,
    PasswordReport,
    PasswordStrength,
)


# ===================================================================== #
#  Colour Maps
# ===================================================================== #

_STRENGTH_COLOURS: dict[PasswordStrength, str] = {
    PasswordStrength.VERY_WEAK: "bold red",
    PasswordStrength.WEAK: "bold dark_orange",
    PasswordStrength.MEDIUM: "bold yellow",
    PasswordStrength.STRONG: "bold green_yellow",
    PasswordStrength.VERY_STRONG: "bold bright_green",
}

_SPARK_CHARS = "▁▂▃▄▅▆▇█"

_METER_WIDTH = 40


def strength_colour(strength: PasswordStrength) -> str:
    """Rich style for a strength bucket."""
    return _STRENGTH_COLOURS.get(strength, "white")


def sparkline(values: Sequence[float]) -> str:
    """Render *values* as a one-line block-character chart.

    The scale runs from zero to the largest value, so a flat history of
    zeros draws the lowest block.
    """
    if not values:
        return ""
    top = max(values)
    if top <= 0:
        return _SPARK_CHARS[0] * len(values)
    steps = len(_SPARK_CHARS) - 1
    return "".join(
        _SPARK_CHARS[max(0, min(steps, int(round(v / top * steps))))]
        for v in values
    )


class PassLensConsoleOutput:
    """Console output formatters for PassLens results.

    Usage::

        console = LensConsole()
        output = PassLensConsoleOutput(console)
        output.display_report(report, password_display="********")
        output.display_history(session.history.samples)
    """

    def __init__(self, console: Optional[LensConsole] = None) -> None:
        """Initialise the console output formatter.

        Args:
            console: LensConsole instance. Creates one if not provided.
        """
        self.console = console or LensConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Full report
    # ------------------------------------------------------------------ #

    def display_report(
        self,
        report: PasswordReport,
        *,
        password_display: Optional[str] = None,
        recommended_length: int = 12,
        comparison: Optional[Iterable[CrackTimeEstimate]] = None,
    ) -> None:
        """Display every panel for one password.

        Args:
            report: Report from :meth:`PassLensEngine.evaluate`.
            password_display: Masked or plain password text to echo; not
                shown when ``None``.
            recommended_length: Length hint printed beside the length.
            comparison: Optional estimates for every attack model.
        """
        self.display_strength(report.analysis, password_display=password_display)
        self.display_composition(report.analysis, recommended_length=recommended_length)
        self.display_weaknesses(report.analysis)
        self.display_crack_time(report.crack_time)
        if comparison is not None:
            self.display_crack_times(comparison)
        self.display_suggestions(report.suggestions)

    # ------------------------------------------------------------------ #
    #  Strength
    # ------------------------------------------------------------------ #

    def display_strength(
        self,
        analysis: PasswordAnalysis,
        *,
        password_display: Optional[str] = None,
    ) -> None:
        """Display the strength meter and badge."""
        self.console.section("Password Strength")

        colour = strength_colour(analysis.strength)
        filled = int((analysis.strength_score / 100) * _METER_WIDTH)
        filled = max(0, min(_METER_WIDTH, filled))

        meter = Text()
        if password_display is not None:
            meter.append("Password: ", style="bold")
            meter.append(f"{password_display}\n")
        meter.append("Score: ", style="bold")
        meter.append(f"{analysis.strength_score}/100  ")
        meter.append("[", style="dim")
        meter.append("█" * filled, style=colour)
        meter.append("░" * (_METER_WIDTH - filled), style="dim")
        meter.append("]", style="dim")
        meter.append("  ")
        meter.append(analysis.strength.value.upper(), style=colour)

        self._rich.print(Panel(meter, title="Strength Meter", border_style="cyan"))

    # ------------------------------------------------------------------ #
    #  Composition
    # ------------------------------------------------------------------ #

    def display_composition(
        self,
        analysis: PasswordAnalysis,
        *,
        recommended_length: int = 12,
    ) -> None:
        """Display length, entropy and the character-class checklist."""
        tbl = Table(
            title="Entropy Analysis",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")

        length_style = "green" if analysis.length >= recommended_length else "yellow"
        tbl.add_row(
            "Length",
            Text(f"{analysis.length} characters", style=length_style),
        )
        tbl.add_row("Character Set Size", str(analysis.charset_size))
        tbl.add_row("Entropy", f"{analysis.entropy:.1f} bits")

        for name, present in analysis.character_classes.items():
            mark = Text("✔ yes", style="green") if present else Text("✘ no", style="dim")
            tbl.add_row(name, mark)

        self._rich.print(tbl)

    def display_weaknesses(self, analysis: PasswordAnalysis) -> None:
        if not analysis.has_weaknesses:
            return
        self._rich.print()
        self._rich.print("[bold]Weaknesses Detected:[/bold]")
        for line in analysis.weaknesses:
            self._rich.print(f"  [yellow]⚠[/yellow] {line}")

    # ------------------------------------------------------------------ #
    #  Crack time
    # ------------------------------------------------------------------ #

    def display_crack_time(self, estimate: CrackTimeEstimate) -> None:
        """Display the crack-time card for the selected attack model."""
        card = Text()
        card.append("Attack Model: ", style="bold")
        card.append(f"{estimate.attack_model.label}\n")
        card.append("Estimated Time to Crack: ", style="bold")
        card.append(estimate.display, style="bold bright_cyan")
        card.append("\n\n")
        card.append(AVERAGE_CASE_NOTE, style="dim")

        self._rich.print(Panel(card, title="Crack Time", border_style="red"))

    def display_crack_times(self, estimates: Iterable[CrackTimeEstimate]) -> None:
        """Display a comparison table across attack models."""
        crack_tbl = Table(
            title="Crack Time Estimates",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        crack_tbl.add_column("Attack Scenario", style="bold")
        crack_tbl.add_column("Speed", justify="right")
        crack_tbl.add_column("Estimated Time", justify="right")

        for estimate in estimates:
            crack_tbl.add_row(
                estimate.attack_model.label,
                f"{estimate.guesses_per_second:.0e} g/s",
                estimate.display,
            )

        self._rich.print(crack_tbl)

    # ------------------------------------------------------------------ #
    #  History
    # ------------------------------------------------------------------ #

    def display_history(
        self,
        samples: Sequence[HistorySample],
        *,
        max_rows: int = 10,
    ) -> None:
        """Display the entropy history as a sparkline and a sample table.

        Only the most recent *max_rows* samples are listed in the table;
        the sparkline covers the whole window.
        """
        self.console.section("Entropy History")
        if not samples:
            self._rich.print("[dim]No samples yet.[/dim]")
            return

        line = Text()
        line.append("Entropy: ", style="bold")
        line.append(sparkline([s.entropy for s in samples]), style="bright_blue")
        line.append(f"  ({len(samples)} samples)", style="dim")
        self._rich.print(line)

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
        )
        tbl.add_column("#", style="dim", justify="right")
        tbl.add_column("Characters", justify="right")
        tbl.add_column("Entropy (bits)", justify="right")

        offset = max(0, len(samples) - max_rows)
        for idx, sample in enumerate(samples[offset:], start=offset + 1):
            tbl.add_row(str(idx), str(sample.chars), f"{sample.entropy:.1f}")

        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Suggestions
    # ------------------------------------------------------------------ #

    def display_suggestions(self, suggestions: Iterable[str]) -> None:
        self._rich.print()
        self._rich.print("[bold]Suggestions:[/bold]")
        for suggestion in suggestions:
            self._rich.print(f"  [bright_cyan]•[/bright_cyan] {suggestion}")
