# file_utils.py
import os
import re
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, Iterable, List

from errors import MATCH, ReindentError

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def match_files(patterns: Iterable[str], home_directory: str, *, recursive: bool = False) -> List[Path]:
    """
    Ищет файлы по шаблонам имён относительно home_directory.
    - recursive=False: только верхний уровень (Path.glob)
    - recursive=True: во всех подкаталогах (Path.rglob)
    Дубликаты (по resolve()) убираются, результат отсортирован.
    """
    home = Path(home_directory)
    if not home.is_dir():
        raise ReindentError(f"home directory not found: {home}", stage=MATCH, path=str(home))

    found = set()
    for pattern in patterns:
        try:
            candidates = home.rglob(pattern) if recursive else home.glob(pattern)
            found.update(p.resolve() for p in candidates if p.is_file())
        except (NotImplementedError, ValueError) as e:
            raise ReindentError(f"bad pattern {pattern!r}: {e}", stage=MATCH) from None
    return sorted(found)


def read_text_lines(path: Path, encoding: str = "utf-8") -> Dict[str, Any]:
    with path.open("r", encoding=encoding, newline="") as f:
        text = f.read()

    m = _LINE_BREAK_RE.search(text)
    newline = m.group(0) if m else "\n"
    trailing_newline = bool(text) and text[-1] in "\r\n"

    lines = _LINE_BREAK_RE.split(text) if text else []
    if trailing_newline:
        lines.pop()
    return {"lines": lines, "newline": newline, "trailing_newline": trailing_newline}


def write_text_lines(
    path: Path,
    lines: List[str],
    *,
    newline: str = "\n",
    trailing_newline: bool = True,
    encoding: str = "utf-8",
) -> Path:
    """
    Перезаписывает файл целиком.
    - atomic write: сначала во временный файл (mkstemp, уникальное имя), затем os.replace()
    - чужие файлы рядом (например, name.part) не трогаются
    - права доступа исходного файла сохраняются
    """
    text = newline.join(lines)
    if lines and trailing_newline:
        text += newline

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=path.name + ".", suffix=".part")
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as f:
            f.write(text)
        if path.exists():
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    finally:
        tmp_path.unlink(missing_ok=True)
    return path
