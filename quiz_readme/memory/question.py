from typing import TypedDict, Union


class QuestionMetadata(TypedDict, total=False):
    slug: str
    featured: bool
    ranking: Union[int, float]
    published: bool


class QuestionFrontmatter(TypedDict, total=False):
    title: str


class QuestionItem(TypedDict):
    locale: str
    metadata: QuestionMetadata
    href: str
    title: str
    title_slug: str  # Filled in by the formatter's slugger
    content: str
