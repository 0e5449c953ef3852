"""Topic names, topic modes and per-topic configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import IntEnum
from typing import Any, Callable


class TopicError(Exception):
    """Base class for topic related errors."""

    default_message = "topic error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidTopicError(TopicError):
    """The topic name is invalid."""

    default_message = "invalid topic name"


class TopicExistsError(TopicError):
    """The topic already exists."""

    default_message = "topic already exists"


class UnknownTopicError(TopicError):
    """The topic does not exist."""

    default_message = "unknown topic"


class Topic(str):
    """A topic name; behaves exactly like the string it wraps."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Topic({str.__repr__(self)})"


class TopicMode(IntEnum):
    """Default delivery mode of a topic."""

    CORE = 0
    JETSTREAM = 1

    def __str__(self) -> str:
        return _MODE_NAMES.get(self.value, "unknown")


_MODE_NAMES = {0: "core", 1: "jetstream"}


class Retention(IntEnum):
    """How long messages on a topic are kept."""

    EPHEMERAL = 0
    DURABLE = 1


class DiscardPolicy(IntEnum):
    """Which messages are discarded when a persisted topic is full."""

    OLD = 0
    NEW = 1


TopicOption = Callable[["TopicOptions"], Any]


@dataclass
class TopicOptions:
    """Configuration of a single topic."""

    mode: TopicMode = TopicMode.CORE
    retention: Retention = Retention.EPHEMERAL
    max_bytes: int = 0
    max_msgs: int = 0
    max_age: timedelta = field(default_factory=timedelta)
    replicas: int = 0
    discard_policy: DiscardPolicy = DiscardPolicy.OLD
    subject_override: str = ""
    codec: Any = None

    def apply(self, *args: TopicOption) -> "TopicOptions":
        """Apply option callables in order and return these options."""
        for option in args:
            option(self)
        return self