from typing import List

from quiz_readme.agents.utils.slugger import Slugger
from quiz_readme.config.shared_constants import (
    BACK_TO_TOP,
    INDENT,
    PROMO_CALL_TO_ACTION,
    TOC_HEADER,
)
from quiz_readme.memory.question import QuestionItem


def sort_questions(items: List[QuestionItem]) -> List[QuestionItem]:
    """Ascending by ranking. Stable, so ties keep directory order."""
    return sorted(items, key=lambda item: item["metadata"]["ranking"])


def assign_title_slugs(items: List[QuestionItem], slugger: Slugger) -> List[QuestionItem]:
    """Give each item its anchor. Collisions are resolved in list order."""
    return [{**item, "title_slug": slugger.slug(item["title"])} for item in items]


def format_table_of_contents(items: List[QuestionItem]) -> str:
    lines = list(TOC_HEADER)
    lines.extend(
        f"| {index} | [{item['title']}](#{item['title_slug']}) |"
        for index, item in enumerate(items, 1)
    )
    return "\n".join(lines)


def _indent(text: str) -> str:
    return "\n".join(INDENT + line for line in text.split("\n"))


def format_question(item: QuestionItem, index: int) -> str:
    source_marker = (
        f"<!-- Update here: /questions/{item['metadata']['slug']}/{item['locale']}.mdx -->"
    )

    return (
        f"{index}. ### {item['title']}\n"
        f"\n"
        f"{INDENT}{source_marker}\n"
        f"\n"
        f"{_indent(item['content'])}\n"
        f"\n"
        f"{INDENT}{source_marker}\n"
        f"\n"
        f"{INDENT}<br>\n"
        f"\n"
        f"{INDENT}{PROMO_CALL_TO_ACTION}\n"
        f"\n"
        f"{INDENT}{BACK_TO_TOP}\n"
        f"{INDENT}<br>\n"
        f"{INDENT}<br>\n"
    )


def format_questions(items: List[QuestionItem]) -> str:
    return "\n".join(format_question(item, index) for index, item in enumerate(items, 1))
