from typing import Annotated, Any
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

# JSON and Firestore documents use camelCase; Python attributes stay snake_case
class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

# JSON strings are not numbers or booleans here
LoadScore = Annotated[int, Field(ge=0, strict=True)]
Count = Annotated[int, Field(ge=0, strict=True)]
Number = Annotated[float, Field(strict=True)]
Flag = Annotated[bool, Field(strict=True)]
DateStr = Annotated[str, Field(min_length=1, max_length=32)]

class ClimbEntry(CamelModel):
    is_sport: Flag = False
    name: str = ""
    grade: str = ""
    attempt_type: str = ""
    attempts_num: Count = 0
    notes: str = ""

class GripLoad(CamelModel):
    open: LoadScore = 0
    crimp: LoadScore = 0
    pinch: LoadScore = 0
    sloper: LoadScore = 0
    jug: LoadScore = 0

class SessionRead(CamelModel):
    """Server-owned fields every stored session carries."""
    id: str
    created_at: datetime
    updated_at: datetime


# Older documents stored one string per classification; newer ones store lists
LEGACY_CLASSIFICATION_FIELDS = {
    "sessionType": "trainingTypes",
    "trainingType": "trainingTypes",
    "category": "categories",
    "energySystem": "energySystems",
    "techniqueFocus": "techniqueFocuses",
    "wallAngle": "wallAngles",
}

class LegacyClassificationMixin(CamelModel):
    @model_validator(mode="before")
    @classmethod
    def lift_legacy_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        lifted = dict(data)
        for old, new in LEGACY_CLASSIFICATION_FIELDS.items():
            value = lifted.get(old)
            if new in lifted or not value:
                continue
            if new in cls.field_aliases():
                lifted[new] = value if isinstance(value, list) else [value]
        return lifted

    @classmethod
    def field_aliases(cls) -> set[str]:
        return {f.alias or name for name, f in cls.model_fields.items()}
