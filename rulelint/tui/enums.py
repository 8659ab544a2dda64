from enum import Enum

from rulelint.reporter import LineTag


class UIStyle(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    DIM = "dim"
    BOLD = "bold"


LINE_TAG_STYLE = {
    LineTag.PLAIN: None,
    LineTag.WARNING: UIStyle.YELLOW.value,
    LineTag.ERROR: UIStyle.RED.value,
    LineTag.SUCCESS: UIStyle.GREEN.value,
    LineTag.DIM: UIStyle.DIM.value,
}
