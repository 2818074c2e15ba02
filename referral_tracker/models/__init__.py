from .user import User
from .candidate import Candidate, CandidateStatus, CANDIDATE_STATUSES
# base and mixins are imported by the above as needed
