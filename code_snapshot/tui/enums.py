from enum import Enum


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    DIM = "dim"


class CheckVerdict(str, Enum):
    IGNORED = "ignored"
    INCLUDED = "included"
    UNMATCHED = "unmatched"


VERDICT_STYLE = {
    CheckVerdict.IGNORED: UIStyle.RED.value,
    CheckVerdict.INCLUDED: UIStyle.GREEN.value,
    CheckVerdict.UNMATCHED: UIStyle.DIM.value,
}
