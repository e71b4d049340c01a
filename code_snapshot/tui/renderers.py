from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from code_snapshot.ignore.models import Rule, RuleSet
from code_snapshot.tui.enums import VERDICT_STYLE, CheckVerdict, UIStyle
from code_snapshot.tui.sections import UISection
from code_snapshot.utils import compact_home_path
from code_snapshot.walker import WalkReport


class SnapshotConsoleUI:
    def __init__(self, console: Console | None = None, error_console: Console | None = None) -> None:
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    def render_read_error(self, line: str) -> None:
        self.error_console.print(escape(line), style=UIStyle.RED.value, highlight=False, soft_wrap=True)

    def render_written(self, out_path: Path) -> None:
        self.console.print(f"Output successfully written to: {escape(str(out_path))}", highlight=False, soft_wrap=True)

    def render_summary(self, root: Path, report: WalkReport) -> None:
        table = Table(show_header=False, box=None)
        table.add_row("[bold]root[/bold]", escape(compact_home_path(root)))
        table.add_row("[bold]emitted[/bold]", str(report.emitted))
        table.add_row("[bold]ignored[/bold]", str(report.ignored))
        table.add_row("[bold]skipped[/bold]", str(report.skipped))
        table.add_row("[bold]failed[/bold]", str(report.failed))
        style = UIStyle.GREEN.value if report.failed == 0 else UIStyle.RED.value
        self.error_console.print(UISection.wrap("snapshot", table, style=style))

    def render_plan(self, root: Path, files: list[Path]) -> None:
        if not files:
            self.console.print(UISection.note("files", "No files to snapshot.", style=UIStyle.DIM.value))
            return
        table = Table(show_header=True, header_style="bold", expand=True)
        table.add_column("File", overflow="fold")
        for path in files:
            table.add_row(escape(path.relative_to(root).as_posix()))
        self.console.print(
            UISection.wrap("files", table, style=UIStyle.BLUE.value, subtitle=f"{len(files)} file(s)")
        )

    def render_rules(self, rules_path: Path, rule_set: RuleSet) -> None:
        if not rule_set:
            self.console.print(
                UISection.note("rules", f"No rules in {escape(compact_home_path(rules_path))}", style=UIStyle.YELLOW.value)
            )
            return
        table = Table(show_header=True, header_style="bold", expand=True)
        table.add_column("#", width=4, justify="right")
        table.add_column("Pattern", overflow="fold")
        table.add_column("Negated", width=8)
        table.add_column("Dir only", width=8)
        table.add_column("Anchored", width=8)
        for index, rule in enumerate(rule_set, start=1):
            table.add_row(
                str(index),
                escape(rule.pattern),
                _flag(rule.negated),
                _flag(rule.dir_only),
                _flag(rule.anchored),
            )
        self.console.print(UISection.wrap("rules", table, subtitle=escape(compact_home_path(rules_path))))

    def render_check(self, rows: list[tuple[str, CheckVerdict, Optional[Rule]]]) -> None:
        table = Table(show_header=True, header_style="bold", expand=True)
        table.add_column("Path", overflow="fold")
        table.add_column("Verdict", width=10)
        table.add_column("Rule", overflow="fold")
        for path, verdict, rule in rows:
            style = VERDICT_STYLE[verdict]
            table.add_row(
                escape(path),
                f"[{style}]{verdict.value}[/{style}]",
                escape(rule.describe()) if rule is not None else "",
            )
        self.console.print(UISection.wrap("check", table))


def _flag(value: bool) -> str:
    return "yes" if value else ""
