from app.schemas.indoor import IndoorSession, IndoorSessionInput
from app.schemas.outdoor import OutdoorSession, OutdoorSessionInput
from app.schemas.fingerboard import FingerboardSession, FingerboardSessionInput
from app.schemas.competition import CompetitionSession, CompetitionSessionInput
from app.schemas.gym import GymSession, GymSessionInput
