"""
PassLens CLI
=============

Click-based command-line interface for the PassLens password analyzer.

Usage::

    python -m passlens analyze                      # hidden prompt
    python -m passlens analyze "Tr0ub4dor&3" --model gpu
    python -m passlens -o json analyze "hunter2"
    python -m passlens crack-time 52.4
    python -m passlens models
    printf 'p\\npa\\npas\\n' | python -m passlens watch

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import click

from lenscore.config import LensConfig
from lenscore.console import LensConsole
from lenscore.logger import LensLogger
from lenscore.models import ScanResult

from passlens import __version__
from passlens.analyzers.crack_time import AVERAGE_CASE_NOTE
from passlens.core.engine import ERROR_FINDING_TITLE, PassLensEngine
from passlens.core.models import (
    AttackModel,
    CrackTimeEstimate,
    PasswordAnalysis,
    PasswordReport,
)
from passlens.output.console import PassLensConsoleOutput
from passlens.output.report import PassLensReportGenerator
from passlens.session import AnalysisSession

_MODEL_CHOICES = [model.value for model in AttackModel]

_DEFAULT_HTML_NAME = "passlens_report.html"


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="passlens")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to PassLens configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json", "html"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON/HTML output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log debug messages to stderr.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
    verbose: bool,
) -> None:
    """PassLens -- Password Strength Analyzer.

    Estimate entropy, detect weak patterns, project crack times under
    several attacker models, and suggest improvements. Passwords never
    leave this process and are never written to logs or reports.
    """
    ctx.ensure_object(dict)

    try:
        lens_config = LensConfig.load(config)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--config") from exc

    if verbose:
        lens_config.global_settings.log_level = "DEBUG"

    ctx.obj["config"] = lens_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet
    ctx.obj["verbose"] = verbose

    console = LensConsole(quiet=quiet)
    ctx.obj["console"] = console
    ctx.obj["engine"] = PassLensEngine(
        lens_config,
        logger=LensLogger.from_config(
            "engine", lens_config.global_settings, console_output=verbose
        ),
    )
    ctx.obj["display"] = PassLensConsoleOutput(console)
    ctx.obj["reporter"] = PassLensReportGenerator()

    if not quiet and output == "console":
        console.banner(version=__version__)


def _handle_output(ctx: click.Context, result: ScanResult) -> None:
    """Write *result* as JSON or HTML according to the selected format."""
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    reporter: PassLensReportGenerator = ctx.obj["reporter"]
    console: LensConsole = ctx.obj["console"]

    if output_format == "json":
        if output_file:
            path = reporter.generate_json(result, Path(output_file))
            console.success(f"JSON report saved to: {path}")
        else:
            click.echo(reporter.render_json(result))
    elif output_format == "html":
        if output_file:
            path = reporter.generate_html(result, Path(output_file))
        else:
            config: LensConfig = ctx.obj["config"]
            default_path = Path(config.global_settings.output_dir) / _DEFAULT_HTML_NAME
            path = reporter.generate_html(result, default_path)
        console.success(f"HTML report saved to: {path}")


def _has_error(result: ScanResult) -> bool:
    return any(f.title == ERROR_FINDING_TITLE for f in result.findings)


def _report_from_result(result: ScanResult) -> PasswordReport:
    meta = result.metadata
    return PasswordReport(
        analysis=PasswordAnalysis.model_validate(meta["analysis"]),
        crack_time=CrackTimeEstimate.model_validate(meta["crack_time"]),
        suggestions=tuple(meta.get("suggestions", ())),
    )


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("password", required=False)
@click.option(
    "--model", "-m",
    type=click.Choice(_MODEL_CHOICES, case_sensitive=False),
    default=None,
    help="Attacker model (default from configuration).",
)
@click.option(
    "--show/--hide",
    default=None,
    help="Echo the password in clear text or masked.",
)
@click.pass_context
def analyze(
    ctx: click.Context,
    password: Optional[str],
    model: Optional[str],
    show: Optional[bool],
) -> None:
    """Analyse password strength, entropy and crack time.

    When PASSWORD is omitted it is read from a hidden prompt, which keeps
    it out of shell history.
    """
    engine: PassLensEngine = ctx.obj["engine"]
    display: PassLensConsoleOutput = ctx.obj["display"]
    console: LensConsole = ctx.obj["console"]
    settings = ctx.obj["config"].passlens

    if password is None:
        password = click.prompt(
            "Password", hide_input=True, default="", show_default=False
        )

    result = engine.scan(password, model)

    if ctx.obj["output_format"] != "console":
        _handle_output(ctx, result)
    elif _has_error(result):
        console.findings_table(result.findings)
    else:
        report = _report_from_result(result)
        reveal = show if show is not None else not settings.mask_passwords
        comparison = [
            CrackTimeEstimate.model_validate(est)
            for est in result.metadata.get("crack_times", [])
        ]
        display.display_report(
            report,
            password_display=password if reveal else engine.mask_password(password),
            recommended_length=settings.recommended_length,
            comparison=comparison,
        )
        console.blank()
        console.findings_table(result.findings)

    if _has_error(result):
        console.error(result.summary)
        ctx.exit(1)


@cli.command("crack-time")
@click.argument("entropy", type=float)
@click.option(
    "--model", "-m",
    type=click.Choice(_MODEL_CHOICES, case_sensitive=False),
    default=None,
    help="Attacker model. All models are compared when omitted.",
)
@click.pass_context
def crack_time(ctx: click.Context, entropy: float, model: Optional[str]) -> None:
    """Estimate time to crack a password of ENTROPY bits."""
    engine: PassLensEngine = ctx.obj["engine"]
    display: PassLensConsoleOutput = ctx.obj["display"]
    console: LensConsole = ctx.obj["console"]

    if model is not None:
        estimates = [engine.estimate(entropy, model)]
    else:
        estimates = engine.crack_times(entropy)

    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps(
            [est.model_dump(mode="json") for est in estimates],
            indent=2,
        ))
        return

    if len(estimates) == 1:
        display.display_crack_time(estimates[0])
    else:
        display.display_crack_times(estimates)
        console.print(f"[dim]{AVERAGE_CASE_NOTE}[/dim]")


@cli.command()
@click.pass_context
def models(ctx: click.Context) -> None:
    """List attacker models and their guess rates."""
    console: LensConsole = ctx.obj["console"]
    default = ctx.obj["engine"].default_attack_model

    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps(
            [
                {
                    "model": m.value,
                    "label": m.label,
                    "guesses_per_second": m.guesses_per_second,
                    "default": m is default,
                }
                for m in AttackModel
            ],
            indent=2,
        ))
        return

    console.table(
        "Attack Models",
        ["Model", "Description", "Guesses/sec", "Default"],
        [
            (m.value, m.label, f"{m.guesses_per_second:.0e}", "*" if m is default else "")
            for m in AttackModel
        ],
    )


@cli.command()
@click.option(
    "--model", "-m",
    type=click.Choice(_MODEL_CHOICES, case_sensitive=False),
    default=None,
    help="Attacker model (default from configuration).",
)
@click.pass_context
def watch(ctx: click.Context, model: Optional[str]) -> None:
    """Re-analyse on every line read from stdin.

    Each line is treated as the new value of the password field; an empty
    line clears it and resets the entropy history. The history chart is
    printed at end of input.
    """
    engine: PassLensEngine = ctx.obj["engine"]
    display: PassLensConsoleOutput = ctx.obj["display"]
    console: LensConsole = ctx.obj["console"]
    as_json = ctx.obj["output_format"] == "json"

    session = AnalysisSession(engine=engine, attack_model=model)
    stream = click.get_text_stream("stdin")

    for raw_line in stream:
        password = raw_line.rstrip("\r\n")
        report = session.update(password)
        analysis = report.analysis

        if as_json:
            click.echo(json.dumps({
                "chars": analysis.length,
                "entropy": round(analysis.entropy, 1),
                "score": analysis.strength_score,
                "strength": analysis.strength.value,
                "crack_time": report.crack_time.display,
                "history_size": len(session.history),
            }))
        elif not password:
            console.info("Password cleared; history reset")
        else:
            console.print(
                f"{analysis.length:>3} chars | {analysis.entropy:6.1f} bits | "
                f"{analysis.strength_score:>3}/100 {analysis.strength.value:<11} | "
                f"{report.crack_time.display}"
            )

    if not as_json:
        display.display_history(session.history.samples)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the PassLens CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
