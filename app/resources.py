from dataclasses import dataclass

from app.repositories.base import DocumentRepository
from app.repositories.sessions import (
    CompetitionSessionRepository,
    FingerboardSessionRepository,
    GymSessionRepository,
    IndoorSessionRepository,
    OutdoorSessionRepository,
)

@dataclass(slots=True, frozen=True)
class Resource:
    prefix: str
    tag: str
    noun: str  # used in error messages
    repository: type[DocumentRepository]

# Dispatch order; prefixes are distinct literal segments
RESOURCES: tuple[Resource, ...] = (
    Resource("/indoor_sessions", "indoor_sessions", "indoor session", IndoorSessionRepository),
    Resource("/outdoor_sessions", "outdoor_sessions", "outdoor session", OutdoorSessionRepository),
    Resource("/fingerboard_sessions", "fingerboard_sessions", "fingerboard session", FingerboardSessionRepository),
    Resource("/competition_sessions", "competition_sessions", "competition session", CompetitionSessionRepository),
    Resource("/gym_sessions", "gym_sessions", "gym session", GymSessionRepository),
)
