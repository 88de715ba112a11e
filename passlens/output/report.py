"""
PassLens Report Generator
==========================

Writes HTML and JSON reports of a password :class:`ScanResult`.

The HTML report uses inline CSS so it opens anywhere without external
assets. The JSON report is the machine-readable form for CI checks and
audits. Neither format contains the password: the target is the masked
form produced by the engine and the payload holds only derived values.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from lenscore.models import ScanResult

from passlens import __version__
from passlens.analyzers.crack_time import AVERAGE_CASE_NOTE
from passlens.core.models import AttackModel


_METER_COLOURS: dict[str, str] = {
    "Very Weak": "#f85149",
    "Weak": "#db6d28",
    "Medium": "#d29922",
    "Strong": "#a3e635",
    "Very Strong": "#3fb950",
}

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>PassLens Report - {title}</title>
    <style>
        :root {{
            --bg: #111827;
            --panel: #1f2937;
            --muted: #9ca3af;
            --text: #e5e7eb;
            --accent: #22d3ee;
            --line: #374151;
        }}
        body {{
            font-family: -apple-system, 'Segoe UI', Helvetica, Arial, sans-serif;
            background: var(--bg);
            color: var(--text);
            margin: 0;
            padding: 2rem;
        }}
        .container {{ max-width: 960px; margin: 0 auto; }}
        h1 {{ color: var(--accent); margin-bottom: 0.25rem; }}
        .subtitle {{ color: var(--muted); font-size: 0.9rem; }}
        .section {{
            background: var(--panel);
            border: 1px solid var(--line);
            border-radius: 0.75rem;
            padding: 1.25rem 1.5rem;
            margin: 1.25rem 0;
        }}
        .section h2 {{ margin-top: 0; font-size: 1.2rem; }}
        table {{ width: 100%; border-collapse: collapse; }}
        th, td {{ padding: 0.5rem 0.75rem; border-bottom: 1px solid var(--line); text-align: left; }}
        th {{ color: var(--accent); }}
        .meter {{ height: 0.6rem; background: var(--line); border-radius: 999px; overflow: hidden; }}
        .meter-fill {{ height: 100%; }}
        .badge {{ font-weight: 700; }}
        .finding {{ border-left: 4px solid var(--line); padding: 0.5rem 1rem; margin: 0.5rem 0; }}
        .severity-critical {{ border-left-color: #f85149; }}
        .severity-high {{ border-left-color: #db6d28; }}
        .severity-medium {{ border-left-color: #d29922; }}
        .severity-low {{ border-left-color: #22d3ee; }}
        .severity-info {{ border-left-color: #3fb950; }}
        .finding p {{ color: var(--muted); margin: 0.25rem 0; }}
        .note {{ color: var(--muted); font-size: 0.85rem; }}
        .footer {{ text-align: center; color: var(--muted); font-size: 0.8rem; margin-top: 2rem; }}
    </style>
</head>
<body>
    <div class="container">
        <h1>PassLens</h1>
        <div class="subtitle">Password Strength Report | {target} | Generated: {timestamp}</div>

        <div class="section">
            <h2>Summary</h2>
            <p>{summary}</p>
            {strength_html}
            <table>
                <tr><th>Tool</th><td>{tool}</td><th>Duration</th><td>{duration:.3f}s</td></tr>
                <tr><th>Findings</th><td>{finding_count}</td><th>Risk</th><td>{risk}</td></tr>
            </table>
        </div>

        {crack_time_html}

        <div class="section">
            <h2>Findings</h2>
            {findings_html}
        </div>

        <div class="footer">PassLens v{version} | Local password analysis</div>
    </div>
</body>
</html>
"""


class PassLensReportGenerator:
    """Generates HTML and JSON reports from PassLens scan results.

    Usage::

        generator = PassLensReportGenerator()
        generator.generate_html(scan_result, Path("report.html"))
        generator.generate_json(scan_result, Path("report.json"))
    """

    def generate_html(
        self,
        result: ScanResult,
        output_path: Path,
        title: Optional[str] = None,
    ) -> Path:
        """Write an HTML report of *result* to *output_path*.

        Returns:
            Path to the generated HTML file.
        """
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
        report_title = title or f"Analysis of {result.target}"

        html_content = _HTML_TEMPLATE.format(
            title=self._escape_html(report_title),
            target=self._escape_html(result.target),
            timestamp=timestamp,
            summary=self._escape_html(result.summary),
            tool=self._escape_html(result.tool_name),
            duration=result.duration_seconds or 0.0,
            finding_count=result.finding_count,
            risk=self._escape_html(result.risk.level.value if result.risk else "N/A"),
            strength_html=self._build_strength_html(result),
            crack_time_html=self._build_crack_time_html(result),
            findings_html=self._build_findings_html(result),
            version=__version__,
        )

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html_content, encoding="utf-8")
        return output_path

    def generate_json(self, result: ScanResult, output_path: Path) -> Path:
        """Write a JSON report of *result* to *output_path*.

        Returns:
            Path to the generated JSON file.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render_json(result), encoding="utf-8")
        return output_path

    def render_json(self, result: ScanResult) -> str:
        """Serialise *result* to the JSON report document."""
        report_data: dict[str, Any] = {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": result.tool_name,
                "target": result.target,
                "version": __version__,
            },
            "summary": {
                "total_findings": result.finding_count,
                "severity_counts": result.severity_counts,
                "risk_score": result.risk.score if result.risk else None,
                "risk_level": result.risk.level.value if result.risk else None,
                "duration_seconds": result.duration_seconds,
                "description": result.summary,
            },
            "findings": [
                {
                    "id": str(f.id),
                    "title": f.title,
                    "description": f.description,
                    "severity": f.severity.value,
                    "risk": f.risk.value,
                    "confidence": f.confidence,
                    "evidence": f.evidence,
                    "recommendation": f.recommendation,
                    "references": f.references,
                    "timestamp": f.timestamp.isoformat(),
                }
                for f in result.findings
            ],
            "metadata": result.metadata,
        }
        return json.dumps(report_data, indent=2, ensure_ascii=False, default=str)

    # ------------------------------------------------------------------ #
    #  Private HTML Builders
    # ------------------------------------------------------------------ #

    def _build_strength_html(self, result: ScanResult) -> str:
        analysis = result.metadata.get("analysis")
        if not analysis:
            return ""
        strength = str(analysis.get("strength", ""))
        score = int(analysis.get("strength_score", 0))
        colour = _METER_COLOURS.get(strength, "#9ca3af")
        return (
            f'<p><span class="badge" style="color: {colour};">'
            f"{self._escape_html(strength)}</span> "
            f"&middot; {score}/100 &middot; "
            f"{float(analysis.get('entropy', 0.0)):.1f} bits &middot; "
            f"{int(analysis.get('length', 0))} characters</p>"
            f'<div class="meter"><div class="meter-fill" '
            f'style="width: {score}%; background: {colour};"></div></div>'
        )

    def _build_crack_time_html(self, result: ScanResult) -> str:
        estimates = result.metadata.get("crack_times") or []
        if not estimates:
            return ""
        rows = "\n".join(
            f"<tr><td>{self._escape_html(AttackModel.parse(est['attack_model']).label)}</td>"
            f"<td>{float(est['guesses_per_second']):.0e} g/s</td>"
            f"<td>{self._escape_html(str(est['display']))}</td></tr>"
            for est in estimates
        )
        return (
            '<div class="section">'
            "<h2>Crack Time Estimates</h2>"
            "<table><tr><th>Attack Model</th><th>Speed</th><th>Estimated Time</th></tr>"
            f"{rows}</table>"
            f'<p class="note">{self._escape_html(AVERAGE_CASE_NOTE)}</p>'
            "</div>"
        )

    def _build_findings_html(self, result: ScanResult) -> str:
        if not result.findings:
            return '<p class="note">No findings.</p>'

        html_parts: list[str] = []
        for finding in result.findings:
            html_parts.append(
                f'<div class="finding {finding.severity.css_class}">'
                f"<strong>[{finding.severity.value}]</strong> "
                f"{self._escape_html(finding.title)}"
                f"<p>{self._escape_html(finding.description)}</p>"
            )
            if finding.recommendation:
                html_parts.append(
                    "<p><strong>Recommendation:</strong> "
                    f"{self._escape_html(finding.recommendation)}</p>"
                )
            html_parts.append("</div>")
        return "\n".join(html_parts)

    @staticmethod
    def _escape_html(text: str) -> str:
        return (
            text.replace("&", "&amp;")
            .replace("<", "&lt;")
            .replace(">", "&gt;")
            .replace('"', "&quot;")
            .replace("'", "&#x27;")
        )
