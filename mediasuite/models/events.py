from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

EventKind = Literal[
    "pipeline_started",
    "pipeline_finished",
    "renderer_started",
    "renderer_stopped",
    "render",
    "plugin",
    "io_error",
]


class PipelineEvent(BaseModel):
    kind: EventKind
    component: str
    message: str
    data: dict[str, Any] = Field(default_factory=dict)
