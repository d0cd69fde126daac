from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

class Player(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: int
    name: str
    breed: str = ""
    image_url: str = Field(default="", alias="imageUrl")
    status: str = ""  # "bench" / "field" on the hosted API
    team_id: Optional[int] = Field(default=None, alias="teamId")
    team_name: Optional[str] = Field(default=None, alias="teamName")

class NewPlayer(BaseModel):
    """Fields collected by the invite form; all required and non-blank."""
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(min_length=1)
    breed: str = Field(min_length=1)
    description: str = Field(min_length=1)
    image_url: str = Field(min_length=1, alias="imageUrl")

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)

class RosterSnapshot(BaseModel):
    players: List[Player] = []
    selected: Optional[Player] = None

    @field_validator("players", mode="before")
    @classmethod
    def _copy_players(cls, v):
        # never alias the store's list
        return list(v or [])
