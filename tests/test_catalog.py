from __future__ import annotations

import pytest
from pydantic import ValidationError

from quizbank.schemas.question import QuestionSchema
from quizbank.services.catalog import QUESTIONS, TOPICS, load_catalog
from quizbank.services.seeding import topic_breakdown


def test_catalog_validates():
    catalog = load_catalog()

    assert len(catalog) == len(QUESTIONS) == 60


def test_topic_breakdown_covers_whole_catalog():
    breakdown = topic_breakdown(load_catalog())

    assert sum(breakdown.values()) == len(QUESTIONS)
    assert list(breakdown) == TOPICS
    assert breakdown == {
        "algebra": 15,
        "geometry": 15,
        "statistics": 10,
        "probability": 10,
        "number_systems": 10,
    }


def test_correct_answer_is_an_option_label():
    for q in load_catalog():
        assert q.correct_answer in {"A", "B", "C", "D"}
        assert getattr(q, f"option_{q.correct_answer.lower()}")


def test_catalog_has_no_duplicate_questions_per_topic():
    keys = [(q["topic"], q["question_text"]) for q in QUESTIONS]

    assert len(keys) == len(set(keys))


@pytest.mark.parametrize(
    "override",
    [
        {"correct_answer": "E"},
        {"topic": "calculus"},
        {"difficulty_level": 0},
        {"question_text": ""},
    ],
)
def test_question_schema_rejects_bad_entries(override):
    with pytest.raises(ValidationError):
        QuestionSchema(**{**QUESTIONS[0], **override})
