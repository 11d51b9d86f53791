#!/usr/bin/env python3
"""
Learner Events - explicit in-process event dispatch.

Callers build a typed event and hand it to an EventDispatcher, either
publishing it immediately or queueing it and draining later:

    dispatcher = EventDispatcher()
    register_badge_listener(dispatcher, lambda: evaluator)

    dispatcher.publish(LessonCompleted(learner_id=42, lesson_id=7))
"""

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Deque, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)


class EventType(str, Enum):
    LESSON_COMPLETED = "lesson_completed"
    COURSE_COMPLETED = "course_completed"
    CERTIFICATE_SHARED = "certificate_shared"
    QUIZ_ATTEMPTED = "quiz_attempted"


@dataclass(frozen=True)
class LearnerEvent:
    learner_id: Any

    event_type = None  # set by subclasses


@dataclass(frozen=True)
class LessonCompleted(LearnerEvent):
    lesson_id: Optional[Any] = None

    event_type = EventType.LESSON_COMPLETED


@dataclass(frozen=True)
class CourseCompleted(LearnerEvent):
    course_id: Optional[Any] = None

    event_type = EventType.COURSE_COMPLETED


@dataclass(frozen=True)
class CertificateShared(LearnerEvent):
    certificate_id: Optional[Any] = None
    platform: str = "linkedin"

    event_type = EventType.CERTIFICATE_SHARED


@dataclass(frozen=True)
class QuizAttempted(LearnerEvent):
    quiz_id: Optional[Any] = None
    score: Optional[float] = None
    is_correct: bool = False

    event_type = EventType.QUIZ_ATTEMPTED


Handler = Callable[[LearnerEvent], Any]


class EventDispatcher:
    """
    Synchronous publish/subscribe keyed by EventType.

    Handlers run in subscription order on the publishing thread. An
    exception raised by a handler propagates to the publisher and stops
    the remaining handlers for that event.
    """

    def __init__(self):
        self._handlers: Dict[EventType, List[Handler]] = {}
        self._queue: Deque[LearnerEvent] = deque()

    def subscribe(self, event_type: EventType, handler: Handler) -> None:
        self._handlers.setdefault(EventType(event_type), []).append(handler)

    def handlers_for(self, event_type: EventType) -> List[Handler]:
        return list(self._handlers.get(EventType(event_type), []))

    def publish(self, event: LearnerEvent) -> List[Any]:
        if event.event_type is None:
            raise ValueError(f"{type(event).__name__} has no event_type")
        handlers = self.handlers_for(event.event_type)
        if not handlers:
            logger.debug(f"No handlers for {event.event_type.value}")
            return []
        return [handler(event) for handler in handlers]

    def enqueue(self, event: LearnerEvent) -> None:
        self._queue.append(event)

    def pending(self) -> int:
        return len(self._queue)

    def drain(self) -> int:
        """
        Publish queued events in FIFO order. Returns the number published.

        If a handler raises, the failing event goes back to the head of the
        queue with everything behind it still pending, and the error
        propagates. Handlers that already ran for that event will run again
        on the next drain.
        """
        published = 0
        while self._queue:
            event = self._queue.popleft()
            try:
                self.publish(event)
            except Exception:
                self._queue.appendleft(event)
                logger.warning(
                    f"{type(event).__name__} for learner {event.learner_id} failed; "
                    f"{len(self._queue)} event(s) left queued"
                )
                raise
            published += 1
        return published


BADGE_TRIGGERS = (
    EventType.LESSON_COMPLETED,
    EventType.COURSE_COMPLETED,
    EventType.CERTIFICATE_SHARED,
    EventType.QUIZ_ATTEMPTED,
)


def register_badge_listener(dispatcher: EventDispatcher, evaluator_factory: Callable[[], Any]) -> None:
    """
    Re-evaluate badges for the event's learner on every badge trigger.

    ``evaluator_factory`` returns a BadgeEvaluator, so callers can bind it
    to a fresh unit of work per event.
    """
    def award_badges(event: LearnerEvent):
        return evaluator_factory().evaluate(event.learner_id)

    for event_type in BADGE_TRIGGERS:
        dispatcher.subscribe(event_type, award_badges)


def register_point_listener(dispatcher: EventDispatcher, point_service_factory: Callable[[], Any]) -> None:
    """Award lesson points on LessonCompleted and quiz points on correct QuizAttempted events."""
    def lesson_points(event: LessonCompleted):
        return point_service_factory().lesson_completed(event.learner_id)

    def quiz_points(event: QuizAttempted):
        if not event.is_correct:
            return None
        return point_service_factory().quiz_correct(event.learner_id)

    dispatcher.subscribe(EventType.LESSON_COMPLETED, lesson_points)
    dispatcher.subscribe(EventType.QUIZ_ATTEMPTED, quiz_points)
