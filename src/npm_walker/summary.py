"""Human-readable Markdown summary of a tree walk report."""

from __future__ import annotations

from typing import Any


def _cell(value: object) -> str:
    return str(value).replace("|", "\\|")


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with totals and a table of discovered modules."""
    totals = report.get("totals", {})
    modules = report.get("modules", [])

    lines = []
    lines.append("# npm-walker Summary")
    lines.append("")
    lines.append(f"Root: `{report.get('root', '')}`")
    lines.append("")
    lines.append(
        f"Modules: {totals.get('modules', 0)} | Production: {totals.get('production', 0)}"
        f" | Development: {totals.get('development', 0)}"
        f" | Optional: {totals.get('optional', 0)} | Native: {totals.get('native', 0)}"
    )
    lines.append("")
    lines.append("| Package | Path | Relationship | Native |")
    lines.append("| --- | --- | --- | --- |")

    for module in modules:
        name = _cell(module.get("name") or "(unnamed)")
        path = _cell(module.get("path", ""))
        relationship = _cell(module.get("relationship", ""))
        native = _cell(module.get("nativeModuleType", "none"))
        lines.append(f"| {name} | {path} | {relationship} | {native} |")

    if not modules:
        lines.append("| (no modules found) | n/a | n/a | n/a |")

    return "\n".join(lines) + "\n"
