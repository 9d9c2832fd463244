import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Tuple

from questionnaires.answers import Answer, ResolvedAnswer
from questionnaires.catalog import QuestionCatalog

logger = logging.getLogger(__name__)


def _as_utc(ts: datetime) -> datetime:
    """Naive timestamps are taken to be UTC so mixed batches stay comparable."""
    return ts if ts.tzinfo else ts.replace(tzinfo=timezone.utc)


def _parse_timestamp(raw) -> datetime | None:
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return _as_utc(raw)
    try:
        return _as_utc(datetime.fromisoformat(str(raw).replace("Z", "+00:00")))
    except ValueError:
        raise ValueError(f"Invalid timestamp: {raw!r}")


def answer_from_dict(item: Dict[str, Any]) -> Answer:
    """
    Convert one raw answer payload to an Answer. Accepts snake_case keys and
    the camelCase keys used by the web client.
    """
    question_id = item.get("question_id", item.get("questionId"))
    option_id = item.get("option_id", item.get("optionId"))
    if question_id is None or option_id is None:
        raise ValueError(f"Invalid answer shape: {item}")

    value = item.get("value")
    if type(value) not in [int, float]:
        raise ValueError(f"Value must be numeric: {value}")

    response_time = item.get("response_time_ms", item.get("responseTimeMs"))
    if response_time is not None and type(response_time) not in [int, float]:
        raise ValueError(f"Response time must be numeric: {response_time}")

    return Answer(
        question_id=str(question_id),
        option_id=str(option_id),
        value=int(value),
        response_time_ms=float(response_time) if response_time is not None else None,
        timestamp=_parse_timestamp(item.get("timestamp")),
    )


def answers_from_dicts(items: Iterable[Dict[str, Any]]) -> List[Answer]:
    return [answer_from_dict(item) for item in items]


def ensure_chronological(answers: List[Answer]) -> Tuple[List[Answer], bool]:
    """
    Return the answers in submission order and whether they already were.

    Only a fully timestamped batch can be checked; out-of-order batches are
    stably sorted by timestamp so the fatigue analysis sees the real sequence.
    """
    if not answers or any(a.timestamp is None for a in answers):
        return list(answers), True

    in_order = all(
        _as_utc(prev.timestamp) <= _as_utc(cur.timestamp) for prev, cur in zip(answers, answers[1:])
    )
    if in_order:
        return list(answers), True

    logger.warning("Answers were not in chronological order; reordering %d answers by timestamp", len(answers))
    return sorted(answers, key=lambda a: _as_utc(a.timestamp)), False


def resolve_answers(answers: List[Answer], catalog: QuestionCatalog) -> Tuple[List[ResolvedAnswer], List[str]]:
    """
    Join answers with the catalog. Unknown questions or options are skipped
    and their question ids returned so the caller can report them.
    """
    resolved: List[ResolvedAnswer] = []
    skipped: List[str] = []

    for answer in answers:
        ra = catalog.resolve(answer)
        if ra is None:
            skipped.append(answer.question_id)
            continue
        resolved.append(ra)

    return resolved, skipped
