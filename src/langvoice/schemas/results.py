from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class ToolResult(BaseModel):
    model_config = ConfigDict(extra="allow")

    success: bool
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)


class SpeechResult(ToolResult):
    message: Optional[str] = None
    audio_base64: Optional[str] = None
    audio_base64_preview: Optional[str] = None
    duration: Optional[float] = None
    generation_time: Optional[float] = None
    characters_processed: Optional[int] = None
    output_file: Optional[str] = None


class VoiceSummary(BaseModel):
    id: str
    name: str


class VoicesResult(ToolResult):
    voices: Optional[List[VoiceSummary]] = None
    count: Optional[int] = None


class LanguageSummary(BaseModel):
    id: str
    name: str


class LanguagesResult(ToolResult):
    languages: Optional[List[LanguageSummary]] = None
    count: Optional[int] = None
