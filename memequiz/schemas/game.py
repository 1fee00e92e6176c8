"""Game request/response schemas."""

from pydantic import BaseModel, Field


class GameCreate(BaseModel):
    score: int


class GameResponse(BaseModel):
    id: int
    user_id: int
    score: int
    date_played: str

    model_config = {"from_attributes": True}


class GameCountResponse(BaseModel):
    # Exposed as gameCount, which is what the game client reads
    game_count: int = Field(alias="gameCount")

    model_config = {"populate_by_name": True}
