SITE_BASE_URL = "https://www.greatfrontend.com"

QUIZ_PATH_PREFIX = "/questions/quiz/"

# Order matters: it is preserved in the generated query string.
QUIZ_QUERY = {
    "framework": "angular",
    "tab": "quiz",
}

DEFAULT_LOCALE = "en-US"
METADATA_FILENAME = "metadata.json"
CONTENT_EXTENSION = ".mdx"

TABLE_OF_CONTENTS_START = "<!-- TABLE_OF_CONTENTS:START -->"
TABLE_OF_CONTENTS_END = "<!-- TABLE_OF_CONTENTS:END -->"
QUESTIONS_START = "<!-- QUESTIONS:START -->"
QUESTIONS_END = "<!-- QUESTIONS:END -->"

TOC_HEADER = [
    "| No. | Questions |",
    "| --- | --------- |",
]

PROMO_CALL_TO_ACTION = (
    "> Try out [Angular coding questions]"
    "(https://www.greatfrontend.com/questions/angular-interview-questions?gnrs=github)"
    " on [GreatFrontEnd](https://www.greatfrontend.com?gnrs=github)."
)

BACK_TO_TOP = "[Back to top ↑](#table-of-contents)"

INDENT = "    "

# JSON Schema checked for every metadata.json
METADATA_SCHEMA = {
    "type": "object",
    "required": ["slug"],
    "properties": {
        "slug": {"type": "string", "minLength": 1},
    },
}

# Extra requirements once a question is featured
FEATURED_METADATA_SCHEMA = {
    "type": "object",
    "required": ["ranking"],
    "properties": {
        "ranking": {"type": "number"},
    },
}
