import logging
from pathlib import Path
from typing import Any, Dict, Union

import aiofiles
import json5

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


async def read_text(filename: PathLike) -> str:
    """Asynchronously read a UTF-8 source file, dropping any BOM and normalizing line endings to LF."""
    async with aiofiles.open(filename, "r", encoding="utf-8-sig", newline="") as file:
        text = await file.read()
    return text.replace("\r\n", "\n")


async def read_raw_text(filename: PathLike) -> str:
    """Asynchronously read a UTF-8 file exactly as stored (BOM and line endings kept)."""
    async with aiofiles.open(filename, "r", encoding="utf-8", newline="") as file:
        return await file.read()


async def write_to_file(filename: PathLike, text: str) -> None:
    """Asynchronously write text to a file in UTF-8 encoding."""
    async with aiofiles.open(filename, "w", encoding="utf-8", newline="") as file:
        await file.write(text)
    logger.info(f"Text written to file: {filename}")


async def read_json(filename: PathLike) -> Dict[str, Any]:
    """Read a JSON (or JSON5) document. Parse errors propagate as ValueError."""
    text = await read_text(filename)
    try:
        return json5.loads(text)
    except ValueError as e:
        raise ValueError(f"Unable to parse {filename}: {e}") from e
