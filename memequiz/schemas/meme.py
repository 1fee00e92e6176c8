"""Meme listing schemas."""

from pydantic import BaseModel


class CaptionResponse(BaseModel):
    id: int
    text: str
    correct: bool


class MemeResponse(BaseModel):
    id: int
    url: str
    captions: list[CaptionResponse]
