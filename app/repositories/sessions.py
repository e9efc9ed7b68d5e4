from app.repositories.base import DocumentRepository
from app.schemas import (
    CompetitionSession, CompetitionSessionInput,
    FingerboardSession, FingerboardSessionInput,
    GymSession, GymSessionInput,
    IndoorSession, IndoorSessionInput,
    OutdoorSession, OutdoorSessionInput,
)
from app.store import (
    COMPETITION_COLLECTION, FINGERBOARD_COLLECTION, GYM_COLLECTION,
    INDOOR_COLLECTION, OUTDOOR_COLLECTION,
)

class IndoorSessionRepository(DocumentRepository[IndoorSession, IndoorSessionInput]):
    collection_name = INDOOR_COLLECTION
    record_model = IndoorSession
    input_model = IndoorSessionInput

class OutdoorSessionRepository(DocumentRepository[OutdoorSession, OutdoorSessionInput]):
    collection_name = OUTDOOR_COLLECTION
    record_model = OutdoorSession
    input_model = OutdoorSessionInput

class FingerboardSessionRepository(DocumentRepository[FingerboardSession, FingerboardSessionInput]):
    collection_name = FINGERBOARD_COLLECTION
    record_model = FingerboardSession
    input_model = FingerboardSessionInput

class CompetitionSessionRepository(DocumentRepository[CompetitionSession, CompetitionSessionInput]):
    collection_name = COMPETITION_COLLECTION
    record_model = CompetitionSession
    input_model = CompetitionSessionInput

class GymSessionRepository(DocumentRepository[GymSession, GymSessionInput]):
    collection_name = GYM_COLLECTION
    record_model = GymSession
    input_model = GymSessionInput
