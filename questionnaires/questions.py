"""
Question bank types.

A question belongs to exactly one category, and the score tag on each of its
options is the tag variant for that category. Calculators only read the
variant they understand.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Union


class Category(str, Enum):
    MOTIVE_SOURCE = "motive_source"
    IGNITION = "ignition"
    DIRECTION = "direction"
    OPERATING = "operating"
    ENERGY = "energy"
    CONFLICT = "conflict"
    CONTEXT = "context"
    HIDDEN = "hidden"
    MATURITY = "maturity"
    VALIDATION = "validation"


class QuestionType(str, Enum):
    CHOICE = "choice"
    LIKERT = "likert"
    BIPOLAR = "bipolar"
    SCENARIO = "scenario"


@dataclass(frozen=True)
class MotiveTag:
    motive: str | None = None


@dataclass(frozen=True)
class IgnitionTag:
    ignition: str | None = None


@dataclass(frozen=True)
class DirectionTag:
    motive: str | None = None
    direction: str | None = None


@dataclass(frozen=True)
class OperatingTag:
    axis: str | None = None
    pole: str | None = None


@dataclass(frozen=True)
class EnergyTag:
    charge: str | None = None
    drain: str | None = None
    flow: str | None = None


@dataclass(frozen=True)
class ConflictTag:
    pole: str | None = None


@dataclass(frozen=True)
class ContextTag:
    context: str | None = None
    motive: str | None = None


@dataclass(frozen=True)
class HiddenTag:
    shadow: str | None = None
    projection: str | None = None
    compensation: str | None = None


@dataclass(frozen=True)
class MaturityTag:
    maturity: str | None = None


@dataclass(frozen=True)
class ValidationTag:
    check: str | None = None
    honesty: str | None = None


ScoreTag = Union[
    MotiveTag, IgnitionTag, DirectionTag, OperatingTag, EnergyTag,
    ConflictTag, ContextTag, HiddenTag, MaturityTag, ValidationTag,
]

TAG_TYPES: dict[Category, type] = {
    Category.MOTIVE_SOURCE: MotiveTag,
    Category.IGNITION: IgnitionTag,
    Category.DIRECTION: DirectionTag,
    Category.OPERATING: OperatingTag,
    Category.ENERGY: EnergyTag,
    Category.CONFLICT: ConflictTag,
    Category.CONTEXT: ContextTag,
    Category.HIDDEN: HiddenTag,
    Category.MATURITY: MaturityTag,
    Category.VALIDATION: ValidationTag,
}

# Older banks call the energy charge source "source"
_TAG_ALIASES = {"source": "charge"}


def parse_tag(category: Category, raw: dict[str, Any] | None) -> ScoreTag:
    """
    Build the category's tag variant from a free-form key/value bundle.
    Keys the variant does not know about are ignored.
    """
    tag_cls = TAG_TYPES[category]
    raw = dict(raw or {})
    for alias, name in _TAG_ALIASES.items():
        if alias in raw and name not in raw:
            raw[name] = raw[alias]

    kwargs = {}
    for f in fields(tag_cls):
        value = raw.get(f.name)
        if value is not None and value != "":
            kwargs[f.name] = str(value)
    return tag_cls(**kwargs)


@dataclass(frozen=True)
class Option:
    id: str
    value: int
    tag: ScoreTag

    def __post_init__(self):
        if not 1 <= self.value <= 5:
            raise ValueError(f"Option {self.id}: value must be on the 1-5 scale, got {self.value}")


@dataclass(frozen=True)
class Question:
    id: str
    category: Category
    options: tuple[Option, ...]
    subcategory: str | None = None
    type: QuestionType = QuestionType.CHOICE
    weight: float = 1.0
    social_desirability: bool = False
    is_lite: bool = False

    # option lookup built once per question
    _by_id: dict[str, Option] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        expected = TAG_TYPES[self.category]
        for option in self.options:
            if not isinstance(option.tag, expected):
                raise ValueError(
                    f"Question {self.id}: option {option.id} carries "
                    f"{type(option.tag).__name__}, expected {expected.__name__}"
                )
        object.__setattr__(self, "_by_id", {o.id: o for o in self.options})

    def option(self, option_id: str) -> Option | None:
        return self._by_id.get(option_id)
