from typing import Annotated
from pydantic import Field
from app.schemas.common import CamelModel, Count, DateStr, Flag, LoadScore, SessionRead

class CompetitionClimbResult(CamelModel):
    name: str = ""      # problem number
    status: str = ""    # Flash, Top, Zone, Attempt
    attempt_count: Count = 0
    notes: str = ""

class CompetitionRound(CamelModel):
    name: str = ""      # Qualifiers, Semis, Finals
    position: Annotated[int, Field(ge=1, strict=True)] | None = None
    climbs: list[CompetitionClimbResult] = Field(default_factory=list)

class CompetitionSessionInput(CamelModel):
    date: DateStr
    venue: str = ""
    custom_venue: str = ""
    type: str = ""      # Bouldering, Lead, Speed
    finger_load: LoadScore | None = None
    shoulder_load: LoadScore | None = None
    forearm_load: LoadScore | None = None
    rounds: list[CompetitionRound] = Field(default_factory=list)
    is_simulation: Flag | None = None

class CompetitionSession(CompetitionSessionInput, SessionRead):
    pass
