import asyncio
import logging
from pathlib import Path
from typing import List, Optional, Union
from urllib.parse import urlencode

import frontmatter
from jsonschema import validate, ValidationError

from quiz_readme.agents.utils.file_formats import read_json, read_text
from quiz_readme.agents.utils.markdown import absolutize_links, contains_heading, extract_tldr
from quiz_readme.config.shared_constants import (
    CONTENT_EXTENSION,
    DEFAULT_LOCALE,
    FEATURED_METADATA_SCHEMA,
    METADATA_FILENAME,
    METADATA_SCHEMA,
    QUIZ_PATH_PREFIX,
    QUIZ_QUERY,
    SITE_BASE_URL,
)
from quiz_readme.errors import ContentStructureError, CorpusConsistencyError
from quiz_readme.memory.question import QuestionItem, QuestionMetadata

logger = logging.getLogger(__name__)


def build_question_href(slug: str) -> str:
    return f"{SITE_BASE_URL}{QUIZ_PATH_PREFIX}{slug}?{urlencode(QUIZ_QUERY)}"


def _validate_metadata(metadata: QuestionMetadata, metadata_path: Path, schema: dict) -> None:
    """Validate metadata against a JSON schema"""
    try:
        validate(instance=metadata, schema=schema)
    except ValidationError as e:
        logger.error(f"Metadata validation failed for {metadata_path}: {e.message}")
        raise CorpusConsistencyError(f"{metadata_path}: {e.message}")


async def process_question(
    questions_dir: Union[str, Path],
    dir_name: str,
    locale: str = DEFAULT_LOCALE,
) -> Optional[QuestionItem]:
    """
    Load one question directory.

    Returns None when the question should be left out of the README
    (not featured, no title, no TL;DR). Raises when the corpus itself is
    inconsistent or the TL;DR excerpt swallowed a heading.
    """
    question_dir = Path(questions_dir) / dir_name
    metadata_path = question_dir / METADATA_FILENAME
    locale_path = question_dir / f"{locale}{CONTENT_EXTENSION}"

    metadata, markdown = await asyncio.gather(
        read_json(metadata_path),
        read_text(locale_path),
    )

    _validate_metadata(metadata, metadata_path, METADATA_SCHEMA)

    if metadata["slug"] != dir_name:
        raise CorpusConsistencyError(f"{dir_name} !== {metadata['slug']}")

    if not metadata.get("featured"):
        return None

    _validate_metadata(metadata, metadata_path, FEATURED_METADATA_SCHEMA)

    post = frontmatter.loads(markdown)
    title = post.get("title")
    if not title:
        logger.warning(f"{locale_path} does not have title")
        return None

    tldr = extract_tldr(markdown)
    if tldr is None:
        logger.info(f"{locale_path} has no TL;DR section, skipping")
        return None

    if contains_heading(tldr):
        raise ContentStructureError(f"{locale_path}'s TL;DR contains headings")

    return {
        "locale": locale,
        "metadata": metadata,
        "href": build_question_href(metadata["slug"]),
        "title": str(title),
        "title_slug": "",
        "content": absolutize_links(tldr).strip(),
    }


def read_questions_list(questions_dir: Union[str, Path]) -> List[str]:
    """Names of every question directory, in sorted order."""
    questions_dir = Path(questions_dir)
    if not questions_dir.is_dir():
        raise FileNotFoundError(f"Questions directory not found: {questions_dir}")

    return sorted(
        entry.name
        for entry in questions_dir.iterdir()
        if entry.is_dir() and not entry.name.startswith(".")
    )


async def process_question_list(
    questions_dir: Union[str, Path],
    dir_names: List[str],
    locale: str = DEFAULT_LOCALE,
) -> List[QuestionItem]:
    results = await asyncio.gather(
        *(process_question(questions_dir, name, locale) for name in dir_names)
    )

    skipped = sum(1 for item in results if item is None)
    if skipped:
        logger.info(f"Skipped {skipped} of {len(results)} questions")

    return [item for item in results if item is not None]
