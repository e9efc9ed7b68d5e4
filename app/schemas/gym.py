from typing import Annotated
from pydantic import Field
from app.schemas.common import CamelModel, Count, DateStr, Flag, Number, SessionRead

class GymSet(CamelModel):
    weight: Number = 0
    reps: Count = 0
    is_warmup: Flag = False
    is_failure: Flag = False
    is_drop_set: Flag = False
    completed: Flag = False

class GymExercise(CamelModel):
    id: str = ""
    name: str = ""
    sets: list[GymSet] = Field(default_factory=list)
    notes: str = ""
    linked_to: str | None = None  # id of the exercise this one is supersetted with

class GymSessionInput(CamelModel):
    date: DateStr
    name: str = ""
    bodyweight: Annotated[float, Field(ge=0, strict=True)] = 0
    training_block: str | None = None
    exercises: list[GymExercise] = Field(default_factory=list)

class GymSession(GymSessionInput, SessionRead):
    pass
