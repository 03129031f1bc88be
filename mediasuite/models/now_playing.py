from __future__ import annotations

from pydantic import BaseModel


class NowPlaying(BaseModel):
    title: str
    source: str
    renderer: str
    chunks_rendered: int = 0
