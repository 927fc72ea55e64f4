from typing import List, Tuple

from indent_utils import check_tab_size, content, line_widths, measure, render
from services.hierarchy import smart_widths


def fixed_reindent(lines: List[str], tab_size: int) -> List[str]:
    """
    Переписывает отступ каждой строки в канонический вид (табы, затем пробелы)
    той же ширины. Вложенность, заданная автором, не меняется.
    """
    return [render(measure(line, tab_size), tab_size) + content(line) for line in lines]


def smart_reindent(lines: List[str], tab_size: int = 1) -> List[str]:
    """
    Выводит вложенность из ширины отступов и рендерит её заново,
    по одному табу на уровень. Исходные ширины отбрасываются.
    """
    new_widths = smart_widths(line_widths(lines, tab_size))
    return [render(width, 1) + content(line) for width, line in zip(new_widths, lines)]


def is_changed(before: List[str], after: List[str]) -> bool:
    return any(old != new for old, new in zip(before, after))


def reindent_lines(lines: List[str], *, smart: bool, tab_size: int) -> Tuple[List[str], bool]:
    check_tab_size(tab_size)
    if smart:
        out = smart_reindent(lines, tab_size)
    else:
        out = fixed_reindent(lines, tab_size)
    return out, is_changed(lines, out)
