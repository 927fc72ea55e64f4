from typing import List, Optional

# родитель строк без объемлющей строки; ширина 0
ROOT = -1


def width_of(widths: List[int], index: int) -> int:
    return 0 if index == ROOT else widths[index]


def build_parents(widths: List[int]) -> List[int]:
    """
    Для каждой строки находит ближайшую предшествующую строку-родителя.

    Стек снизу вверх всегда хранит цепочку кандидатов со строго
    возрастающей шириной (ROOT + 0..n строк). Строка той же ширины,
    что и кандидат, забирает его место в стеке (цепочка соседей),
    а сам кандидат записывается как её родитель.
    """
    parents: List[int] = []
    stack: List[int] = [ROOT]
    for i, width in enumerate(widths):
        parent = stack.pop()
        while width_of(widths, parent) > width:
            parent = stack.pop()
        if width_of(widths, parent) < width:
            stack.append(parent)
        parents.append(parent)
        stack.append(i)
    return parents


def assign_depths(widths: List[int], parents: List[int]) -> List[int]:
    """
    Обход с последней строки к первой. Строка той же ширины, что и родитель,
    получает 0; остальные увеличивают счётчик родителя и берут его значение,
    поэтому ранние дети одного родителя оказываются глубже поздних.
    """
    # слот 0 для ROOT, слот p + 1 для строки p
    hits: List[int] = [0] * (len(widths) + 1)
    depths: List[int] = [0] * len(widths)
    for i in range(len(widths) - 1, -1, -1):
        parent = parents[i]
        if width_of(widths, parent) == widths[i]:
            depths[i] = 0
        else:
            hits[parent + 1] += 1
            depths[i] = hits[parent + 1]
    return depths


def resolve_widths(parents: List[int], depths: List[int]) -> List[int]:
    # прямой проход: новая ширина родителя известна раньше, чем у детей
    new_widths: List[int] = []
    for parent, depth in zip(parents, depths):
        new_widths.append(width_of(new_widths, parent) + depth)
    return new_widths


def smart_widths(widths: List[int], parents: Optional[List[int]] = None) -> List[int]:
    if parents is None:
        parents = build_parents(widths)
    return resolve_widths(parents, assign_depths(widths, parents))
