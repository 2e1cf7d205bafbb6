"""Shared pytest fixtures: a throwaway question store and README."""

import json

import pytest

README_TEMPLATE = """# Angular Interview Questions

Intro text that must survive.

## Table of Contents

<!-- TABLE_OF_CONTENTS:START -->
stale table
<!-- TABLE_OF_CONTENTS:END -->

## Questions

<!-- QUESTIONS:START -->
stale questions
<!-- QUESTIONS:END -->

Footer text that must survive.
"""


def make_content(title="What is Angular?", tldr="Angular is a framework.", body="Longer answer."):
    front = f"---\ntitle: {title}\n---\n\n" if title is not None else ""
    tldr_part = f"## TL;DR\n\n{tldr}\n\n---\n\n" if tldr is not None else ""
    return f"{front}{tldr_part}## Details\n\n{body}\n"


@pytest.fixture
def questions_dir(tmp_path):
    path = tmp_path / "questions"
    path.mkdir()
    return path


@pytest.fixture
def readme_path(tmp_path):
    path = tmp_path / "README.md"
    path.write_text(README_TEMPLATE, encoding="utf-8")
    return path


@pytest.fixture
def add_question(questions_dir):
    """Create `questions/<dir_name>/{metadata.json,en-US.mdx}`."""

    def _add(dir_name, content=None, slug=None, featured=True, ranking=1, locale="en-US", **extra):
        question_dir = questions_dir / dir_name
        question_dir.mkdir()
        metadata = {
            "slug": dir_name if slug is None else slug,
            "featured": featured,
            "ranking": ranking,
            "published": True,
            **extra,
        }
        (question_dir / "metadata.json").write_text(json.dumps(metadata, indent=2), encoding="utf-8")
        (question_dir / f"{locale}.mdx").write_text(
            make_content() if content is None else content, encoding="utf-8"
        )
        return question_dir

    return _add


@pytest.fixture(name="make_content")
def make_content_fixture():
    return make_content
