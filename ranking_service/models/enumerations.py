from enum import Enum

class SubmissionStatus(str, Enum):
    PENDING = "pending"                  # No placement assigned yet
    QUARTERFINALIST = "quarterfinalist"
    SEMIFINALIST = "semifinalist"
    FINALIST = "finalist"
    WINNER = "winner"

class PrestigeTier(str, Enum):
    STANDARD = "standard"
    NOTABLE = "notable"
    ELITE = "elite"
    PREMIER = "premier"

class VerificationState(str, Enum):
    PENDING = "pending"      # Self-reported, unconfirmed
    VERIFIED = "verified"    # Confirmed by organizer or admin
    REJECTED = "rejected"    # Invalidated, never counts

class TierDesignation(str, Enum):
    TOP_1 = "top_1"
    TOP_2 = "top_2"
    TOP_10 = "top_10"
    TOP_25 = "top_25"

class FlagReason(str, Enum):
    DUPLICATE_SUBMISSION = "duplicate_submission"
