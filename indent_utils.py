# indent_utils.py
from typing import List


def check_tab_size(tab_size: int) -> None:
    if tab_size < 1:
        raise ValueError(f"tab_size must be >= 1, got {tab_size}")


def measure(line: str, tab_size: int) -> int:
    """
    Ширина (в колонках) ведущих пробелов/табов строки `line`.
    Таб дотягивает ширину до следующего кратного tab_size.
    """
    check_tab_size(tab_size)
    width = 0
    for ch in line:
        if ch == " ":
            width += 1
        elif ch == "\t":
            width = (width // tab_size + 1) * tab_size
        else:
            break
    return width


def render(width: int, tab_size: int) -> str:
    """
    Минимальный отступ ширины `width`: сначала табы, потом пробелы.
    """
    check_tab_size(tab_size)
    tabs, spaces = divmod(width, tab_size)
    return "\t" * tabs + " " * spaces


def content(line: str) -> str:
    return line.lstrip()


def is_blank(line: str) -> bool:
    return not line.strip()


def line_widths(lines: List[str], tab_size: int) -> List[int]:
    # пустые строки наследуют ширину строки выше (0 в начале файла)
    widths: List[int] = []
    for i, line in enumerate(lines):
        if is_blank(line):
            widths.append(widths[i - 1] if i else 0)
        else:
            widths.append(measure(line, tab_size))
    return widths
