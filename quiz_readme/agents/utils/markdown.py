import re
from typing import Any, Dict, Iterable, Optional

import mistune

from quiz_readme.config.shared_constants import SITE_BASE_URL

# First `## TL;DR` + blank line, up to the next line that is exactly `---`.
TLDR_PATTERN = re.compile(r"## TL;DR\n\n(.*?)^---$", re.DOTALL | re.MULTILINE)

RELATIVE_LINK_PATTERN = re.compile(r"\]\(/(?!/)")

_ast_parser = mistune.create_markdown(renderer=None)


def extract_tldr(markdown: str) -> Optional[str]:
    """Return the raw TL;DR span, or None when the document has none."""
    match = TLDR_PATTERN.search(markdown)
    if match is None:
        return None
    return match.group(1)


def _walk(tokens: Iterable[Dict[str, Any]]):
    for token in tokens:
        yield token
        children = token.get("children")
        if isinstance(children, list):
            yield from _walk(children)


def contains_heading(markdown: str) -> bool:
    """True when the text holds `###` or anything Markdown would render as a heading."""
    if "###" in markdown:
        return True
    return any(token.get("type") == "heading" for token in _walk(_ast_parser(markdown)))


def absolutize_links(markdown: str, base_url: str = SITE_BASE_URL) -> str:
    """Rewrite site-relative links `](/path)` to `](<base_url>/path)`."""
    prefix = "](" + base_url.rstrip("/") + "/"
    return RELATIVE_LINK_PATTERN.sub(lambda _: prefix, markdown)
