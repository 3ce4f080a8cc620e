"""
ChatService - Scripted sergeant assistant

Keyword rules, checked in order (first match wins):
1. bmi / imc          -> BMI report (or ask for weight and height)
2. weight / lose      -> calorie-deficit advice
3. muscle             -> surplus and training advice
4. routine            -> base routine
5. anything else      -> acknowledgment
"""

import logging
from typing import Callable, List, Optional, Tuple

from hardman.models.mission import ChatMessage
from hardman.models.profile import Profile
from hardman.models.settings import BmiAssessment
from hardman.utils.bmi import classify_bmi
from hardman.utils.observable import Observable
from hardman.utils.voice import Speaker

logger = logging.getLogger(__name__)

GREETING = "Report your status, soldier!"
BMI_MISSING_REPLY = "Complete your weight and height to calculate your BMI."
DEFAULT_REPLY = "Received."

KEYWORD_REPLIES: List[Tuple[Tuple[str, ...], str]] = [
    (
        ("weight", "lose", "peso", "bajar"),
        "To lose weight: calorie deficit, a firm daily pace and protein in every meal.",
    ),
    (
        ("muscle", "músculo", "musculo"),
        "To gain muscle: slight surplus, progressive loads and disciplined rest.",
    ),
    (
        ("routine", "rutina"),
        "Base routine: push-ups, squats, planks and a brisk walk. No excuses!",
    ),
]
BMI_KEYWORDS = ("bmi", "imc")


def generate_reply(message: str, profile: Profile, bmi: Optional[float]) -> str:
    """
    Pick the assistant's canned reply for a user message

    Args:
        message: Free text typed by the user
        profile: Current profile. No rule reads it yet; it is part of the
            reply contract so profile-aware rules can be added without
            touching callers
        bmi: Current BMI value, or None when undetermined

    Returns:
        Reply text (never empty)
    """
    lower = message.lower()

    if any(k in lower for k in BMI_KEYWORDS):
        if bmi is None:
            return BMI_MISSING_REPLY
        return f"Your BMI is {bmi:.1f}. {classify_bmi(bmi)}."

    for keywords, reply in KEYWORD_REPLIES:
        if any(k in lower for k in keywords):
            return reply

    return DEFAULT_REPLY


class ChatService(Observable):
    """Session transcript plus spoken replies"""

    def __init__(
        self,
        speaker: Speaker,
        profile_provider: Callable[[], Profile],
        bmi_provider: Callable[[], BmiAssessment],
    ):
        super().__init__()
        self.speaker = speaker
        self._profile_provider = profile_provider
        self._bmi_provider = bmi_provider
        self._transcript: List[ChatMessage] = [ChatMessage(role="assistant", text=GREETING)]

    @property
    def transcript(self) -> List[ChatMessage]:
        return list(self._transcript)

    def send(self, message: str) -> Optional[ChatMessage]:
        """
        Answer a user message

        Appends the user message and the reply, speaks the reply and
        notifies subscribers. Blank messages are ignored.

        Returns:
            The assistant message, or None for blank input
        """
        text = (message or "").strip()
        if not text:
            return None

        reply_text = generate_reply(text, self._profile_provider(), self._bmi_provider().value)
        reply = ChatMessage(role="assistant", text=reply_text)
        self._transcript.append(ChatMessage(role="user", text=text))
        self._transcript.append(reply)
        logger.debug(f"Chat reply: {reply_text}")

        self._notify()
        self.speaker.say(reply_text)
        return reply
