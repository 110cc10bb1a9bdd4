"""Range functions -- the level bounds an effect accepts at each of its levels.

Every variant is a small frozen Pydantic model tagged by ``kind`` so that a
whole effect table serialises cleanly to/from JSON.  Calling a variant as
``bound(record, level)`` returns the integer bound for that effect level.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Literal, Union

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from .effects import EffectRecord


class _RangeBase(BaseModel):
    model_config = {"frozen": True}

    def evaluate(self, record: EffectRecord, level: int) -> int:
        raise NotImplementedError

    def __call__(self, record: EffectRecord, level: int) -> int:
        return self.evaluate(record, level)


class Constant(_RangeBase):
    """Always ``value``, whatever the level."""

    kind: Literal["constant"] = "constant"
    value: int

    def evaluate(self, record: EffectRecord, level: int) -> int:
        return self.value


class Multiply(_RangeBase):
    """``value * level``."""

    kind: Literal["multiply"] = "multiply"
    value: int

    def evaluate(self, record: EffectRecord, level: int) -> int:
        return self.value * level


class Adjusted(_RangeBase):
    """``min + (level - 1) * step`` -- starts at ``min`` for level 1."""

    kind: Literal["adjusted"] = "adjusted"
    min: int
    step: int

    def evaluate(self, record: EffectRecord, level: int) -> int:
        return self.min + (level - 1) * self.step


class Basic(_RangeBase):
    """``min + level * step``."""

    kind: Literal["basic"] = "basic"
    min: int
    step: int

    def evaluate(self, record: EffectRecord, level: int) -> int:
        return self.min + level * self.step


class AddToMin(_RangeBase):
    """The record's own minimum bound for the level, plus ``value``.

    Only valid as a maximum bound: used as a minimum it would call itself.
    """

    kind: Literal["add_to_min"] = "add_to_min"
    value: int

    def evaluate(self, record: EffectRecord, level: int) -> int:
        return record.minimum_level(level) + self.value


class AddToDefault(_RangeBase):
    """``1 + level * 10 + value``."""

    kind: Literal["add_to_default"] = "add_to_default"
    value: int

    def evaluate(self, record: EffectRecord, level: int) -> int:
        return 1 + level * 10 + self.value


RangeFunction = Annotated[
    Union[Constant, Multiply, Adjusted, Basic, AddToMin, AddToDefault],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def constant(value: int) -> Constant:
    return Constant(value=value)


def multiply(value: int) -> Multiply:
    return Multiply(value=value)


def adjusted(min: int, step: int) -> Adjusted:
    return Adjusted(min=min, step=step)


def basic(min: int, step: int) -> Basic:
    return Basic(min=min, step=step)


def add_to_min(value: int) -> AddToMin:
    return AddToMin(value=value)


def add_to_default(value: int) -> AddToDefault:
    return AddToDefault(value=value)
