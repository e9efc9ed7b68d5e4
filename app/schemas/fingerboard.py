from pydantic import Field
from app.schemas.common import CamelModel, Count, DateStr, Number, SessionRead

class HangSet(CamelModel):
    weight: Number = 0  # added (or assisted, when negative) load
    reps: Count = 0

class FingerboardExercise(CamelModel):
    id: str = ""
    name: str = ""
    grip_type: str = ""
    sets: Count = 0
    details: list[HangSet] = Field(default_factory=list)
    notes: str = ""

class FingerboardSessionInput(CamelModel):
    date: DateStr
    location: str = ""  # usually "Home"
    exercises: list[FingerboardExercise] = Field(default_factory=list)

class FingerboardSession(FingerboardSessionInput, SessionRead):
    pass
