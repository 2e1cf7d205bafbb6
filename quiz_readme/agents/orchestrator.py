import logging
from pathlib import Path
from typing import Any, Dict, Union

from quiz_readme.agents.formatter import (
    assign_title_slugs,
    format_questions,
    format_table_of_contents,
    sort_questions,
)
from quiz_readme.agents.loader import process_question_list, read_questions_list
from quiz_readme.agents.publisher import write_readme
from quiz_readme.agents.utils.slugger import Slugger
from quiz_readme.agents.utils.views import print_agent_output
from quiz_readme.config.shared_constants import DEFAULT_LOCALE

logger = logging.getLogger(__name__)


async def generate(
    questions_dir: Union[str, Path] = "questions",
    readme_path: Union[str, Path] = "README.md",
    locale: str = DEFAULT_LOCALE,
) -> Dict[str, Any]:
    """
    Rebuild the README's table of contents and question sections.

    Every question is loaded before the README is touched, so any fatal
    loader error leaves the file as it was.

    Returns:
        {"questions": number of questions written, "changed": bool}
    """
    dir_names = read_questions_list(questions_dir)
    print_agent_output(f"Loading {len(dir_names)} questions from {questions_dir}...", agent="LOADER")
    items = await process_question_list(questions_dir, dir_names, locale)

    print_agent_output(f"Formatting {len(items)} featured questions...", agent="FORMATTER")
    items = assign_title_slugs(sort_questions(items), Slugger())
    table_of_contents = format_table_of_contents(items)
    questions = format_questions(items)

    print_agent_output(f"Updating {readme_path}...", agent="PUBLISHER")
    changed = await write_readme(readme_path, table_of_contents, questions)

    logger.info(f"README generation finished: {len(items)} questions, changed={changed}")
    return {"questions": len(items), "changed": changed}
