from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

from core.board import BOARD_SIZE, MAX_CAPTURE_LOOKAHEAD


class CoordinateModel(BaseModel):
    row: int = Field(..., ge=0, lt=BOARD_SIZE)
    col: int = Field(..., ge=0, lt=BOARD_SIZE)


class MoveRequest(BaseModel):
    start: Optional[CoordinateModel] = None
    end: Optional[CoordinateModel] = None
    notation: Optional[str] = Field(
        default=None, max_length=16, description="Console notation such as 3a-4b."
    )

    @model_validator(mode="after")
    def require_one_form(self) -> "MoveRequest":
        has_coords = self.start is not None and self.end is not None
        if has_coords == (self.notation is not None):
            raise ValueError("Provide either start and end coordinates or notation.")
        return self


class PlayerConfigPayload(BaseModel):
    type: Optional[Literal["human", "computer"]] = None
    seed: Optional[int] = None


class ConfigRequest(BaseModel):
    x: Optional[PlayerConfigPayload] = None
    o: Optional[PlayerConfigPayload] = None


class ResetRequest(BaseModel):
    captureLookahead: Optional[int] = Field(default=None, ge=0, le=MAX_CAPTURE_LOOKAHEAD)


class ComputerMoveRequest(BaseModel):
    side: Optional[Literal["x", "o"]] = None
    seed: Optional[int] = None
