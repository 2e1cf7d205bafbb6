from .question import QuestionMetadata, QuestionFrontmatter, QuestionItem

__all__ = [
    "QuestionMetadata",
    "QuestionFrontmatter",
    "QuestionItem",
]
