from __future__ import annotations

import logging

from typing import Callable


__all__ = (
    "Subscriber",
    "SubscriberRegistry",
    "Unsubscribe"
)


_logger = logging.getLogger(__name__)


Subscriber = Callable[[], None]
Unsubscribe = Callable[[], None]


class _Registration:
    __slots__ = ("subscriber",)

    def __init__(self, subscriber: Subscriber) -> None:
        self.subscriber = subscriber


class SubscriberRegistry:
    """Ordered set of subscriber registrations.

    Registering the same callable twice yields two independent
    registrations. Notification walks a snapshot, so registrations added or
    removed while a pass is running take effect from the next pass.
    """

    _registrations: list[_Registration]

    def __init__(self) -> None:
        self._registrations = []

    def __len__(self) -> int:
        return len(self._registrations)

    def add(self, subscriber: Subscriber) -> Unsubscribe:
        registration = _Registration(subscriber)
        self._registrations.append(registration)

        _logger.debug("Subscribed %r", subscriber)

        def unsubscribe() -> None:
            for index, current in enumerate(self._registrations):
                if current is registration:
                    del self._registrations[index]
                    _logger.debug("Unsubscribed %r", subscriber)
                    return

        return unsubscribe

    def snapshot(self) -> tuple[Subscriber, ...]:
        return tuple(
            registration.subscriber for registration in self._registrations
        )
