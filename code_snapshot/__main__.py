import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import click
from rich.console import Console

from code_snapshot.config import ConfigRepository, SnapshotConfig
from code_snapshot.errors import SnapshotAppError
from code_snapshot.ignore.matcher import IgnoreMatcher
from code_snapshot.ignore.parser import load_rule_set
from code_snapshot.snapshot import SnapshotService
from code_snapshot.tui import SnapshotConsoleUI
from code_snapshot.tui.enums import CheckVerdict


def _path_option() -> Callable:
    return click.option(
        "-p",
        "--path",
        "root",
        type=click.Path(path_type=Path),
        default=Path("."),
        show_default=True,
        help="Root directory to scan.",
    )


def _self_path() -> Optional[Path]:
    if not sys.argv or not sys.argv[0]:
        return None
    return Path(sys.argv[0]).absolute()


def _load_config(obj: Dict[str, Any]) -> SnapshotConfig:
    try:
        return ConfigRepository(obj.get("config_path")).load()
    except SnapshotAppError as exc:
        raise click.ClickException(str(exc))


def _service(obj: Dict[str, Any], ui: SnapshotConsoleUI) -> SnapshotService:
    return SnapshotService(
        config=_load_config(obj),
        self_path=_self_path(),
        on_error_line=ui.render_read_error,
    )


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Config file (default: $XDG_CONFIG_HOME/code-snapshot/config.yaml).",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path]) -> None:
    """Dump a directory tree as fenced file blocks, honoring .gitignore."""
    ctx.obj = {"config_path": config_path}


@cli.command(help="Write every non-ignored file under the root as a fenced block.")
@_path_option()
@click.option(
    "--out",
    "out_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Write the snapshot to this file instead of stdout.",
)
@click.option("--summary", is_flag=True, default=False, help="Print a summary to stderr when done.")
@click.pass_obj
def dump(obj: Dict[str, Any], root: Path, out_path: Optional[Path], summary: bool) -> None:
    ui = SnapshotConsoleUI(Console())
    service = _service(obj, ui)

    try:
        report = service.run(root, out_path=out_path)
    except SnapshotAppError as exc:
        raise click.ClickException(str(exc))

    if out_path is not None:
        ui.render_written(out_path)
    if summary or service.config.summary:
        ui.render_summary(root.resolve(), report)


@cli.command(help="List the files a dump would include, without reading them.")
@_path_option()
@click.pass_obj
def plan(obj: Dict[str, Any], root: Path) -> None:
    ui = SnapshotConsoleUI(Console())
    service = _service(obj, ui)

    try:
        files = service.plan(root)
    except SnapshotAppError as exc:
        raise click.ClickException(str(exc))

    ui.render_plan(root.resolve(), files)


@cli.command(help="Show the compiled ignore rules for the root.")
@_path_option()
@click.pass_obj
def rules(obj: Dict[str, Any], root: Path) -> None:
    ui = SnapshotConsoleUI(Console())
    config = _load_config(obj)
    if not root.is_dir():
        raise click.ClickException(f"Directory not found: {root}")
    ui.render_rules(root / config.rules_file, load_rule_set(root, config.rules_file))


@cli.command(help="Report whether paths relative to the root are ignored.")
@_path_option()
@click.argument("paths", nargs=-1, required=True)
@click.pass_obj
def check(obj: Dict[str, Any], root: Path, paths: tuple[str, ...]) -> None:
    ui = SnapshotConsoleUI(Console())
    config = _load_config(obj)
    if not root.is_dir():
        raise click.ClickException(f"Directory not found: {root}")
    matcher = IgnoreMatcher(load_rule_set(root, config.rules_file))

    rows = []
    ignored_any = False
    for raw in paths:
        relative = raw.replace("\\", "/").lstrip("/")
        is_directory = relative.endswith("/") or (root / relative).is_dir()
        relative = relative.rstrip("/")
        rule = matcher.explain(relative, is_directory)
        if rule is None:
            verdict = CheckVerdict.UNMATCHED
        elif rule.negated:
            verdict = CheckVerdict.INCLUDED
        else:
            verdict = CheckVerdict.IGNORED
            ignored_any = True
        rows.append((relative, verdict, rule))

    ui.render_check(rows)
    if not ignored_any:
        raise click.exceptions.Exit(1)


def main() -> int:
    try:
        result = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
