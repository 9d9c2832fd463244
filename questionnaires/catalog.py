"""
Question catalog lookup.

The catalog is built once from the static item bank and handed to the
scoring pipeline. It never changes after construction; `rebuild` returns a
new catalog instead of mutating this one.
"""
import json
import logging
from collections import Counter
from types import MappingProxyType
from typing import Any, Dict, Iterable, List

from questionnaires.answers import Answer, ResolvedAnswer
from questionnaires.questions import Category, Option, Question, QuestionType, parse_tag

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when the question bank cannot be loaded or is malformed."""


class QuestionCatalog:
    def __init__(self, questions: Iterable[Question] = ()):
        index: Dict[str, Question] = {}
        for q in questions:
            if q.id in index:
                raise CatalogError(f"Duplicate question id: {q.id}")
            index[q.id] = q
        self._questions = MappingProxyType(index)

    def __len__(self) -> int:
        return len(self._questions)

    def __contains__(self, question_id: str) -> bool:
        return question_id in self._questions

    def __iter__(self):
        return iter(self._questions.values())

    @property
    def questions(self):
        return self._questions

    def get(self, question_id: str) -> Question | None:
        return self._questions.get(question_id)

    def resolve(self, answer: Answer) -> ResolvedAnswer | None:
        question = self._questions.get(answer.question_id)
        if question is None:
            logger.debug("Skipping answer for unknown question %s", answer.question_id)
            return None

        option = question.option(answer.option_id)
        if option is None:
            logger.debug(
                "Skipping answer for unknown option %s on question %s",
                answer.option_id, answer.question_id,
            )
            return None

        return ResolvedAnswer(answer=answer, question=question, option=option)

    def rebuild(self, questions: Iterable[Question]) -> "QuestionCatalog":
        return QuestionCatalog(questions)

    def stats(self) -> dict:
        by_category = Counter(q.category.value for q in self)
        by_type = Counter(q.type.value for q in self)
        lite = sum(1 for q in self if q.is_lite)

        return {
            "total": len(self),
            "by_category": {c.value: by_category.get(c.value, 0) for c in Category},
            "by_type": {t.value: by_type.get(t.value, 0) for t in QuestionType},
            "lite": lite,
            "full": len(self),
        }

    @classmethod
    def from_dicts(cls, items: Iterable[Dict[str, Any]]) -> "QuestionCatalog":
        return cls(question_from_dict(item) for item in items)


def _option_from_dict(category: Category, question_id: str, item: Dict[str, Any]) -> Option:
    try:
        option_id = str(item["id"])
        value = int(item["value"])
    except (KeyError, TypeError, ValueError):
        raise CatalogError(f"Question {question_id}: malformed option {item!r}")

    tag = parse_tag(category, item.get("scores") or item.get("tags"))
    try:
        return Option(id=option_id, value=value, tag=tag)
    except ValueError as e:
        raise CatalogError(str(e))


def question_from_dict(item: Dict[str, Any]) -> Question:
    """
    Build a Question from its JSON form:

        {"id": "MS-001", "category": "motive_source", "subcategory": "achievement",
         "type": "likert", "weight": 1.0,
         "options": [{"id": "a", "value": 5, "scores": {"motive": "achievement"}}]}
    """
    if not isinstance(item, dict) or "id" not in item:
        raise CatalogError(f"Invalid question shape: {item!r}")

    question_id = str(item["id"])
    try:
        category = Category(item.get("category"))
    except ValueError:
        raise CatalogError(f"Question {question_id}: invalid category {item.get('category')!r}")

    try:
        q_type = QuestionType(item.get("type", QuestionType.CHOICE.value))
    except ValueError:
        raise CatalogError(f"Question {question_id}: invalid type {item.get('type')!r}")

    raw_options = item.get("options") or []
    if not raw_options:
        raise CatalogError(f"Question {question_id}: no options")

    metadata = item.get("metadata") or {}
    options = tuple(_option_from_dict(category, question_id, o) for o in raw_options)

    try:
        return Question(
            id=question_id,
            category=category,
            subcategory=item.get("subcategory") or None,
            type=q_type,
            options=options,
            weight=float(item.get("weight", 1.0)),
            social_desirability=bool(
                item.get("social_desirability", metadata.get("social_desirability", False))
            ),
            is_lite=bool(item.get("is_lite", metadata.get("is_lite", False))),
        )
    except (TypeError, ValueError) as e:
        raise CatalogError(str(e))


def load_catalog(path: str) -> QuestionCatalog:
    """Load a question bank from a JSON file (a list, or {"questions": [...]})."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Could not read question bank {path}: {e}")

    items: List[Dict[str, Any]] = data.get("questions", []) if isinstance(data, dict) else data
    if not isinstance(items, list):
        raise CatalogError(f"Question bank {path} must contain a list of questions")

    catalog = QuestionCatalog.from_dicts(items)
    logger.info("Loaded %d questions from %s", len(catalog), path)
    return catalog
