import logging
import re
from pathlib import Path
from typing import Union

from quiz_readme.agents.utils.file_formats import read_raw_text, write_to_file
from quiz_readme.config.shared_constants import (
    QUESTIONS_END,
    QUESTIONS_START,
    TABLE_OF_CONTENTS_END,
    TABLE_OF_CONTENTS_START,
)
from quiz_readme.errors import SentinelNotFoundError

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def replace_region(text: str, start: str, end: str, block: str, newline: str = "\n") -> str:
    """Replace everything strictly between `start` and `end` with the block."""
    for marker in (start, end):
        count = text.count(marker)
        if count != 1:
            raise SentinelNotFoundError(f"Expected exactly one '{marker}', found {count}")

    pattern = re.compile(f"({re.escape(start)})(.*?)({re.escape(end)})", re.DOTALL)
    replacement = f"\n\n{block}\n\n".replace("\n", newline)

    updated, replaced = pattern.subn(
        lambda m: m.group(1) + replacement + m.group(3), text
    )
    if replaced != 1:
        raise SentinelNotFoundError(f"'{start}' must come before '{end}'")

    return updated


def detect_newline(text: str) -> str:
    return "\r\n" if "\r\n" in text else "\n"


def update_readme_text(text: str, table_of_contents: str, questions: str) -> str:
    """Generated blocks follow the line endings the README already uses."""
    newline = detect_newline(text)
    text = replace_region(text, TABLE_OF_CONTENTS_START, TABLE_OF_CONTENTS_END, table_of_contents, newline)
    return replace_region(text, QUESTIONS_START, QUESTIONS_END, questions, newline)


async def write_readme(
    readme_path: Union[str, Path],
    table_of_contents: str,
    questions: str,
) -> bool:
    """Rewrite the README's generated regions in place. Returns True if it changed."""
    readme = await read_raw_text(readme_path)
    updated = update_readme_text(readme, table_of_contents, questions)

    if updated == readme:
        logger.info(f"{readme_path} is already up to date")
        return False

    await write_to_file(readme_path, updated)
    return True
