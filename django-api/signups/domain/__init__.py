from signups.domain.models import (
    CheckInOutcome,
    CheckInStatus,
    ConfirmPrompt,
    GameDay,
    Idle,
    NewSignup,
    Prompt,
    PromptAction,
    Signup,
    SignupState,
)
from signups.domain.value_objects import GameDate

__all__ = [
    "CheckInOutcome",
    "CheckInStatus",
    "ConfirmPrompt",
    "GameDay",
    "Idle",
    "NewSignup",
    "Prompt",
    "PromptAction",
    "Signup",
    "SignupState",
    "GameDate",
]
