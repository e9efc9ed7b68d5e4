from pydantic import Field
from app.schemas.common import (
    CamelModel, ClimbEntry, DateStr, GripLoad, LegacyClassificationMixin, LoadScore, SessionRead,
)

class OutdoorSessionInput(CamelModel):
    date: DateStr
    area: str = ""
    crag: str = ""
    sector: str = ""
    climbing_type: str = ""
    training_types: list[str] = Field(default_factory=list)
    difficulty: str = ""
    categories: list[str] = Field(default_factory=list)
    energy_systems: list[str] = Field(default_factory=list)
    technique_focuses: list[str] = Field(default_factory=list)
    finger_load: LoadScore = 0
    shoulder_load: LoadScore = 0
    forearm_load: LoadScore = 0
    grip_load: GripLoad | None = None
    climbs: list[ClimbEntry] = Field(default_factory=list)

class OutdoorSession(LegacyClassificationMixin, OutdoorSessionInput, SessionRead):
    pass
