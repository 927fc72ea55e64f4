import asyncio
from pathlib import Path
from typing import Any, Dict, List

from errors import READ, WRITE, fail, ok
from file_utils import read_text_lines, write_text_lines
from schemas_common import ReindentOptions
from services.reindent import reindent_lines


def _log(options: ReindentOptions, path: Path, stage: str) -> None:
    if options.verbose:
        print(f"[tabby] file={path} stage={stage}")


async def process_file(path: Path, options: ReindentOptions) -> Dict[str, Any]:
    """
    Одна задача на файл: чтение -> переотступ -> запись (только если изменился).
    Ошибки ввода-вывода не роняют соседние задачи, а возвращаются как fail().
    """
    _log(options, path, "reading")
    try:
        doc = await asyncio.to_thread(read_text_lines, path, options.encoding)
    except (OSError, UnicodeError) as exc:
        return fail(exc, stage=READ, path=str(path))

    _log(options, path, "processing")
    lines, changed = reindent_lines(doc["lines"], smart=options.smart, tab_size=options.tab_size)

    if changed:
        try:
            await asyncio.to_thread(
                write_text_lines,
                path,
                lines,
                newline=doc["newline"],
                trailing_newline=doc["trailing_newline"],
                encoding=options.encoding,
            )
        except (OSError, UnicodeError) as exc:
            return fail(exc, stage=WRITE, path=str(path))

    _log(options, path, "rewrote" if changed else "unchanged")
    return ok(path=str(path), changed=changed, lines=len(lines))


async def run_files(paths: List[Path], options: ReindentOptions) -> List[Dict[str, Any]]:
    tasks = [asyncio.create_task(process_file(p, options)) for p in paths]
    if not tasks:
        return []
    return list(await asyncio.gather(*tasks))
