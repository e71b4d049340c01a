from code_snapshot.tui.renderers import SnapshotConsoleUI

__all__ = ["SnapshotConsoleUI"]
