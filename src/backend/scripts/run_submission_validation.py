from __future__ import annotations

import argparse
import html as html_lib
import json
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def _ensure_backend_on_path() -> None:
    backend_dir = Path(__file__).resolve().parents[1]
    if str(backend_dir) not in sys.path:
        sys.path.insert(0, str(backend_dir))


def _write_json(report, out_path: Path) -> None:
    out_path.write_text(json.dumps(report.model_dump(mode="json", by_alias=True), indent=2))


def _write_markdown(report, out_path: Path) -> None:
    lines = [
        f"# Submission validation: {report.file_name}",
        "",
        f"Generated at: {report.generated_at.isoformat()}",
        "",
        f"- Sheet: {report.sheet_name}",
        f"- Rows loaded: {report.row_count}",
        f"- Rules passed: {report.summary.passed}/{report.summary.total}",
        f"- Total findings: {report.summary.issues}",
    ]
    for res in report.results:
        lines.append("")
        lines.append(f"## {res.category.value}")
        lines.append(f"Rules passed: {res.passed_rules}/{res.total_rules}")
        if not res.issues:
            lines.append("")
            lines.append("No findings detected for this category.")
            continue
        for issue in res.issues:
            lines.append("")
            lines.append(f"### {issue.rule_id}: {issue.rule_name}")
            lines.append(f"- {issue.message}")
            lines.append(f"- Severity: {issue.severity.value.upper()}")
            lines.append(f"- Rows: {', '.join(str(i) for i in issue.row_indexes)}")
    out_path.write_text("\n".join(lines) + "\n")


def _write_html(report, out_path: Path) -> None:
    def _escape(value: object) -> str:
        return html_lib.escape(str(value))

    lines: list[str] = ["<!doctype html>", "<html><head><meta charset='utf-8'>"]
    lines.append(f"<title>Submission validation: {_escape(report.file_name)}</title>")
    lines.append("<style>")
    lines.append("body{font-family:Arial,sans-serif;margin:20px;color:#111;background:#fff;}")
    lines.append("h1,h2,h3{margin:0 0 8px 0;}")
    lines.append(".meta{color:#444;margin-bottom:16px;font-size:12px;}")
    lines.append(".card{padding:12px;border:1px solid #e5e5e5;border-radius:6px;margin-bottom:12px;}")
    lines.append(".issue{padding:8px 10px;border:1px solid #e5e5e5;border-radius:6px;margin-top:8px;background:#fafafa;}")
    lines.append(".severity{display:inline-block;font-weight:600;padding:1px 6px;border-radius:3px;}")
    lines.append(".severity-error{background:#f4cccc;}")
    lines.append(".severity-warning{background:#fff2cc;}")
    lines.append(".good{color:#2d6a2d;}")
    lines.append("</style></head><body>")
    lines.append(f"<h1>Submission validation: {_escape(report.file_name)}</h1>")
    lines.append(
        "<div class='meta'>"
        f"Sheet: <strong>{_escape(report.sheet_name)}</strong> | "
        f"Rows loaded: <strong>{report.row_count}</strong> | "
        f"Rules passed: {report.summary.passed}/{report.summary.total} | "
        f"Total findings: {report.summary.issues} | "
        f"Generated at: {_escape(report.generated_at.isoformat())}"
        "</div>"
    )
    for res in report.results:
        lines.append("<section class='card'>")
        lines.append(f"<h2>{_escape(res.category.value)}</h2>")
        lines.append(f"<p>Rules passed: {res.passed_rules}/{res.total_rules}</p>")
        if not res.issues:
            lines.append("<p class='good'>No findings detected for this category.</p>")
        for issue in res.issues:
            severity = issue.severity.value
            rows = ", ".join(str(i) for i in issue.row_indexes)
            lines.append("<div class='issue'>")
            lines.append(f"<strong>{_escape(issue.rule_id)}: {_escape(issue.rule_name)}</strong>")
            lines.append(f"<p>{_escape(issue.message)}</p>")
            lines.append(
                f"<small><span class='severity severity-{severity}'>{severity.upper()}</span>"
                f" | Rows: {_escape(rows)}</small>"
            )
            lines.append("</div>")
        lines.append("</section>")
    lines.append("</body></html>")
    out_path.write_text("\n".join(lines))


def write_outputs(report, output_dir: Path, base_name: str) -> dict[str, Path]:
    output_dir.mkdir(parents=True, exist_ok=True)
    outputs = {
        "json": output_dir / f"{base_name}_validation.json",
        "md": output_dir / f"{base_name}_validation.md",
        "html": output_dir / f"{base_name}_validation.html",
    }
    _write_json(report, outputs["json"])
    _write_markdown(report, outputs["md"])
    _write_html(report, outputs["html"])
    return outputs


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Validate a register submission file and write JSON/MD/HTML reports."
    )
    parser.add_argument("--file", required=True, help="Submission file (.xlsx, .xlsm, .xls or .csv).")
    parser.add_argument(
        "--config",
        default=None,
        help="YAML/JSON settings file (defaults to $VALIDATION_CONFIG_PATH, then built-in defaults).",
    )
    parser.add_argument("--sheet", default=None, help="Sheet to validate (defaults to the first sheet).")
    parser.add_argument(
        "--category",
        action="append",
        default=None,
        help="Category to run; repeat to select several (defaults to all).",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Output directory for report files (defaults to the input file's directory).",
    )
    parser.add_argument(
        "--fail-on-issues",
        action="store_true",
        help="Exit with status 1 when any finding is reported.",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO).")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    _ensure_backend_on_path()
    from adapters.workbook.parser import WorkbookParseError
    from common.validation_engine.config import SettingsError, load_settings
    from common.validation_engine.models import ValidationCategory
    from pipelines.submission import validate_file

    try:
        settings = load_settings(args.config)
    except SettingsError as exc:
        logger.error("%s", exc)
        return 2
    if args.sheet:
        settings = settings.model_copy(update={"sheet_name": args.sheet})

    try:
        categories = [ValidationCategory(c) for c in args.category] if args.category else None
    except ValueError as exc:
        parser.error(str(exc))

    input_path = Path(args.file).resolve()
    try:
        report = validate_file(input_path, settings, categories=categories)
    except WorkbookParseError as exc:
        logger.error("%s", exc)
        return 2

    output_dir = Path(args.output_dir).resolve() if args.output_dir else input_path.parent
    outputs = write_outputs(report, output_dir, input_path.stem)
    for kind, path in outputs.items():
        logger.info("Wrote %s report: %s", kind, path)

    logger.info(
        "Rules passed: %d/%d | Total findings: %d",
        report.summary.passed,
        report.summary.total,
        report.summary.issues,
    )
    if args.fail_on_issues and report.summary.issues:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
