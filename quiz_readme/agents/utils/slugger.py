"""
GitHub-compatible heading slugs.

GitHub renders `## What is a Component?` with the anchor
`#what-is-a-component`, and repeated headings as `#foo`, `#foo-1`, `#foo-2`.
The table of contents links into the README's own headings, so the slugs
here must follow the same rules.
"""

import unicodedata
from typing import Dict

# Letters, marks, decimal and letter numbers. Other numbers (superscripts,
# vulgar fractions) are dropped, as GitHub does.
_KEPT_PREFIXES = ("L", "M")
_KEPT_CATEGORIES = ("Nd", "Nl", "Pc")


def _is_kept(char: str) -> bool:
    if char in (" ", "-"):
        return True
    category = unicodedata.category(char)
    return category.startswith(_KEPT_PREFIXES) or category in _KEPT_CATEGORIES


def slugify(text: str) -> str:
    """Stateless slug: lowercase, strip punctuation and symbols, spaces to hyphens."""
    text = text.lower()
    text = "".join(c for c in text if _is_kept(c))
    return text.replace(" ", "-")


class Slugger:
    """Issues unique slugs, suffixing `-1`, `-2`, ... on repeats in first-seen order."""

    def __init__(self):
        self.occurrences: Dict[str, int] = {}

    def slug(self, text: str) -> str:
        slug = slugify(text)
        original = slug

        while slug in self.occurrences:
            self.occurrences[original] += 1
            slug = f"{original}-{self.occurrences[original]}"

        self.occurrences[slug] = 0
        return slug

    def reset(self) -> None:
        self.occurrences.clear()
