"""
Report Generator
================

Generate research trend reports in various formats from saved analysis results.
"""

import html
import json
import os
import re
from datetime import datetime
from typing import Any, Dict, List

TABLE_RULE = re.compile(r"^\|[-:| ]+\|$")


class ReportGenerator:
    """Generate analysis reports in various formats."""

    def __init__(self, data_dir: str) -> None:
        """Initialize the report generator.

        Args:
            data_dir: Directory containing analysis results (an ``analysis``
                subdirectory written by ResearchAnalyzer).
        """
        self.data_dir = data_dir
        self.analysis_dir = os.path.join(data_dir, "analysis")

    def generate(self, format: str = "markdown") -> str:
        """Generate a report in the specified format.

        Args:
            format: Output format ('markdown', 'html', 'json').

        Returns:
            Report content as a string.
        """
        data = self._load_analysis_data()

        if format == "markdown":
            return self._generate_markdown(data)
        elif format == "html":
            return self._generate_html(data)
        elif format == "json":
            return json.dumps(data, indent=2, ensure_ascii=False, default=str)
        else:
            raise ValueError(f"Unknown format: {format}")

    def _load_analysis_data(self) -> Dict[str, Any]:
        """Load all analysis JSON files."""
        data: Dict[str, Any] = {}

        papers_file = os.path.join(self.data_dir, "papers.json")
        if os.path.exists(papers_file):
            with open(papers_file, "r", encoding="utf-8") as f:
                data["paper_count"] = len(json.load(f))

        if os.path.exists(self.analysis_dir):
            for filename in sorted(os.listdir(self.analysis_dir)):
                if filename.endswith(".json"):
                    filepath = os.path.join(self.analysis_dir, filename)
                    with open(filepath, "r", encoding="utf-8") as f:
                        key = filename.replace("_analysis.json", "").replace(".json", "")
                        data[key] = json.load(f)

        if "paper_count" not in data and "trends" in data:
            trends = data["trends"]
            if trends.get("metric") == "count":
                data["paper_count"] = sum(p["value"] for p in trends.get("data", []))

        return data

    def _generate_markdown(self, data: Dict[str, Any]) -> str:
        """Generate markdown report."""
        lines = [
            "# Research Trends Report",
            "",
            f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}",
            "",
            "---",
            "",
        ]

        paper_count = data.get("paper_count", 0)
        lines.extend([
            "## Overview",
            "",
            f"- **Total Papers Analyzed**: {paper_count:,}",
            "",
        ])

        if data.get("insights"):
            lines.extend(["## Key Insights", ""])
            for insight in data["insights"]:
                lines.append(f"- {insight['icon']} {insight['text']}")
            lines.append("")

        if "trends" in data:
            trends = data["trends"]
            lines.extend([
                f"## Publication Trend ({trends.get('metric', 'count')} by {trends.get('group_by', 'year')})",
                "",
                "| Period | Value |",
                "|--------|-------|",
            ])
            for point in trends.get("data", []):
                lines.append(f"| {point['period']} | {point['value']:,} |")
            lines.append("")

        if "tags" in data:
            lines.extend(["## Top Tags", ""])
            for item in data["tags"].get("distribution", [])[:10]:
                lines.append(f"- **{item['tag']}**: {item['count']} papers")
            lines.append("")

        if data.get("cooccurrence", {}).get("links"):
            links = sorted(data["cooccurrence"]["links"], key=lambda x: x["value"], reverse=True)
            lines.extend(["## Strongest Co-occurrences", ""])
            for link in links[:10]:
                lines.append(f"- {link['source']} + {link['target']}: {link['value']} papers")
            lines.append("")

        if data.get("predictions"):
            lines.extend([
                "## Trend Predictions",
                "",
                "| Direction | Score | Momentum | Growth | Papers |",
                "|-----------|-------|----------|--------|--------|",
            ])
            for p in data["predictions"]:
                lines.append(
                    f"| {p['direction']} | {p['score']} | {p['momentum']} | "
                    f"{p['growth_pct']:+d}% | {p['paper_count']} |"
                )
            lines.append("")

        if data.get("advice"):
            lines.extend(self._advice_markdown(data["advice"]))

        lines.extend([
            "---",
            "",
            "*Report generated by Research Trends*",
        ])

        return "\n".join(lines)

    def _advice_markdown(self, advice: Dict[str, Any]) -> List[str]:
        lines = [
            "## Research Advisor",
            "",
            f"Based on {advice['tag_paper_count']} matching papers.",
            "",
            "### Topic Suggestions",
            "",
        ]
        for s in advice.get("suggestions", []):
            lines.append(f"- **{s['title']}** ({s['confidence']} confidence): {s['reasoning']}")
        lines.extend(["", "### Method Gaps", ""])
        for g in advice.get("method_gaps", []):
            lines.append(f"- **{g['method']}** (gap {g['gap']:+d}): {g['opportunity']}")
        lines.extend(["", "### Venue Strategy", ""])
        for v in advice.get("venue_strategy", []):
            lines.append(f"- **{v['venue']}**: {v['count']} papers, {v['avg_citations']} avg citations ({v['strength']})")
        lines.append("")
        return lines

    def _generate_html(self, data: Dict[str, Any]) -> str:
        """Generate HTML report."""
        markdown = self._generate_markdown(data)

        body: List[str] = []
        in_list = False
        in_table = False
        for line in markdown.split("\n"):
            is_item = line.startswith("- ")
            is_row = line.startswith("|")
            if in_list and not is_item:
                body.append("</ul>")
                in_list = False
            if in_table and not is_row:
                body.append("</table>")
                in_table = False
            if is_item and not in_list:
                body.append("<ul>")
                in_list = True

            text = re.sub(r"\*\*(.+?)\*\*", r"<strong>\1</strong>", html.escape(line, quote=False))
            if is_row:
                if TABLE_RULE.match(line):
                    continue
                # The first row of a table is its header.
                cell = "td" if in_table else "th"
                if not in_table:
                    body.append("<table>")
                    in_table = True
                cells = [c.strip() for c in text.strip().strip("|").split("|")]
                body.append("<tr>" + "".join(f"<{cell}>{c}</{cell}>" for c in cells) + "</tr>")
            elif line.startswith("### "):
                body.append(f"<h3>{text[4:]}</h3>")
            elif line.startswith("## "):
                body.append(f"<h2>{text[3:]}</h2>")
            elif line.startswith("# "):
                body.append(f"<h1>{text[2:]}</h1>")
            elif is_item:
                body.append(f"<li>{text[2:]}</li>")
            elif line == "---":
                body.append("<hr>")
            elif line:
                body.append(f"<p>{text}</p>")
        if in_list:
            body.append("</ul>")
        if in_table:
            body.append("</table>")

        content = "\n".join(body)
        return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Research Trends Report</title>
    <style>
        body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; }}
        h1, h2, h3 {{ color: #333; }}
        table {{ border-collapse: collapse; width: 100%; }}
        th, td {{ border: 1px solid #ddd; padding: 8px; text-align: left; }}
        th {{ background-color: #f5f5f5; }}
    </style>
</head>
<body>
{content}
</body>
</html>"""
