"""CLI - Command line interface for Resume Builder scoring."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from .config import load_raw_config
from .config_validator import Severity, has_errors, validate_config
from .domain.ats_scorer import SECTION_CEILINGS, SECTION_TITLES, calculate_ats_score, score_label, section_rating
from .storage import ResumeStore, StoreError
from .tools import ToolResult, create_tools

console = Console()
logger = logging.getLogger(__name__)

LABEL_STYLES = {
    "Excellent": "green",
    "Good": "blue",
    "Fair": "yellow",
    "Needs Work": "red",
}

RATING_STYLES = {
    "strong": "green",
    "good": "blue",
    "fair": "yellow",
    "weak": "red",
}


def render_score(data: Dict[str, Any]) -> None:
    """Print an ATS score dict (``ATSScore.to_dict()`` shape) with colours."""
    total = data["totalScore"]
    label = score_label(total)
    style = LABEL_STYLES[label]
    console.print(
        Panel(
            f"[bold {style}]{total}/100[/]  Grade: [bold]{data['grade']}[/]  ({label})",
            title="ATS Optimization Score",
            border_style=style,
        )
    )

    table = Table(title="Score Breakdown", show_header=True, header_style="bold cyan")
    table.add_column("Section", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Max", justify="right", style="dim")
    breakdown = data["breakdown"]
    for (section, ceiling), score in zip(SECTION_CEILINGS.items(), breakdown.values()):
        rating_style = RATING_STYLES[section_rating(score, ceiling)]
        table.add_row(SECTION_TITLES[section], f"[{rating_style}]{score}[/]", str(ceiling))
    console.print(table)

    feedback = data["feedback"]
    if feedback:
        console.print(f"\n[bold]{feedback[0]}[/]")
        for i, item in enumerate(feedback[1:], 1):
            console.print(f"  {i}. {item}")


def _print_result(result: ToolResult, as_json: bool, renderer=None) -> int:
    if not result.success:
        console.print(f"❌ {result.to_message()}", style="red", markup=False)
        return 1
    if as_json:
        console.print_json(json.dumps(result.data))
    elif renderer is not None:
        renderer(result.data)
    else:
        console.print(Markdown(result.output))
    return 0


def _cmd_score(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    tools = create_tools(args.workspace)
    result = asyncio.run(tools["ats_score"].execute(path=args.path))
    return _print_result(result, _wants_json(args, config), render_score)


def _cmd_quality(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    texts: List[str] = list(args.text)
    if args.file:
        path = Path(args.file)
        if not path.is_absolute():
            path = Path(args.workspace) / path
        if not path.exists():
            console.print(f"❌ File not found: {args.file}", style="red", markup=False)
            return 1
        texts.extend(path.read_text(encoding="utf-8").splitlines())

    tools = create_tools(args.workspace)
    result = asyncio.run(tools["content_quality"].execute(texts=texts))
    return _print_result(result, _wants_json(args, config))


def _cmd_store(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    store = ResumeStore(Path(args.workspace) / config["store_path"])

    if args.action == "clear":
        store.clear()
        console.print(f"🗑️ Cleared {store.path}", style="green")
        return 0

    try:
        snapshot = store.load_snapshot()
    except StoreError as e:
        console.print(f"❌ {e}", style="red", markup=False)
        return 1

    data = calculate_ats_score(snapshot).to_dict()
    if _wants_json(args, config):
        console.print_json(json.dumps(data))
    else:
        render_score(data)
    return 0


def _wants_json(args: argparse.Namespace, config: Dict[str, Any]) -> bool:
    return args.json or config.get("report", {}).get("format") == "json"


def _configure_logging(config: Dict[str, Any], verbose: bool) -> None:
    level = "DEBUG" if verbose else str(config.get("logging", {}).get("level", "WARNING")).upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    # --json is accepted before or after the subcommand.
    output = argparse.ArgumentParser(add_help=False)
    output.add_argument(
        "--json",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Print raw JSON instead of a report",
    )

    parser = argparse.ArgumentParser(
        prog="resume-builder",
        description="Resume Builder - rule-based ATS scoring for resume snapshots",
    )
    parser.add_argument(
        "--workspace",
        "-w",
        default=None,
        help="Workspace directory for resume files (default: workspace_dir from config)",
    )
    parser.add_argument(
        "--config",
        "-c",
        default="config/config.local.yaml",
        help="Path to configuration file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Verbose output (debug logging)",
    )
    parser.add_argument("--json", action="store_true", help="Print raw JSON instead of a report")

    sub = parser.add_subparsers(dest="command", required=True)

    score = sub.add_parser("score", help="Score a resume snapshot or store file", parents=[output])
    score.add_argument("path", help="Path to the JSON file")
    score.set_defaults(handler=_cmd_score)

    quality = sub.add_parser("quality", help="Evaluate text for content quality", parents=[output])
    quality.add_argument("text", nargs="*", help="Text to evaluate; several values are scored together")
    quality.add_argument("--file", "-f", help="Read text from a file (one bullet per line)")
    quality.set_defaults(handler=_cmd_quality)

    store = sub.add_parser("store", help="Inspect or clear saved form state", parents=[output])
    store.add_argument("action", choices=["show", "clear"])
    store.set_defaults(handler=_cmd_store)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_raw_config(args.config)
    except ValueError as e:
        console.print(f"❌ {e}", style="red", markup=False)
        return 1

    if args.workspace is None:
        args.workspace = str(config.get("workspace_dir", "."))
    config["workspace_dir"] = args.workspace

    issues = validate_config(config)
    for issue in issues:
        icon = "❌" if issue.severity == Severity.ERROR else "⚠️"
        style = "red" if issue.severity == Severity.ERROR else "yellow"
        console.print(f"  {icon} [{issue.field}] {issue.message}", style=style, markup=False)
    if has_errors(issues):
        console.print("\n💡 Fix the errors above, then try again.", style="dim")
        return 1

    _configure_logging(config, args.verbose)
    logger.debug("Running %s in %s", args.command, args.workspace)
    return args.handler(args, config)


if __name__ == "__main__":
    raise SystemExit(main())
