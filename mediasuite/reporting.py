"""Event reporters.

Components never print. They emit PipelineEvent objects into an injected
reporter; the default one turns events into loguru lines, tests collect them.
"""

from __future__ import annotations

from typing import Any, Protocol

from loguru import logger

from mediasuite.models.events import EventKind, PipelineEvent


class Reporter(Protocol):
    def emit(self, event: PipelineEvent) -> None:
        ...


class LogReporter:
    def emit(self, event: PipelineEvent) -> None:
        log = logger.bind(component=event.component, kind=event.kind)
        if event.kind == "io_error":
            log.warning(event.message)
        else:
            log.info(event.message)


class MemoryReporter:
    def __init__(self) -> None:
        self.events: list[PipelineEvent] = []

    def emit(self, event: PipelineEvent) -> None:
        self.events.append(event)

    def of_kind(self, kind: EventKind) -> list[PipelineEvent]:
        return [event for event in self.events if event.kind == kind]


def report(
    reporter: Reporter,
    kind: EventKind,
    component: str,
    message: str,
    **data: Any,
) -> None:
    reporter.emit(
        PipelineEvent(kind=kind, component=component, message=message, data=data)
    )
