from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

FILE_CHUNK_SIZE = 1024
FETCH_CHUNK_SIZE = 2048


class PluginSettings(BaseModel):
    watermark_text: str
    subtitle_lines: list[str]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MEDIASUITE_",
        case_sensitive=False,
        env_ignore_empty=True,
    )

    log_level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: Path | None = None

    file_chunk_size: int = Field(default=FILE_CHUNK_SIZE, gt=0)
    fetch_chunk_size: int = Field(default=FETCH_CHUNK_SIZE, gt=0)

    # Demo playlist
    demo_file: Path = Path("example.mp3")
    hls_segments: list[str] = Field(default_factory=lambda: ["seg1", "seg2"])
    remote_payload: str = "RemoteStreamData"

    # Plugin settings (flat env vars with prefix)
    watermark_text: str = "© Doona Studio"
    subtitle_lines: list[str] = Field(
        default_factory=lambda: ["Hello!", "Enjoy the show!"]
    )

    @field_validator("subtitle_lines")
    @classmethod
    def _non_empty_lines(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("subtitle_lines must contain at least one line")
        return value

    def plugins(self) -> PluginSettings:
        return PluginSettings(
            watermark_text=self.watermark_text,
            subtitle_lines=list(self.subtitle_lines),
        )
