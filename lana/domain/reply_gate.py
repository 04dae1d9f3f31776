"""
Reply gate — decides whether a classified message may be answered
automatically.  Pure code, no I/O: AI → data → code.

Evaluated in order, first match wins:
  1. auto-reply disabled by the host           → no
  2. high urgency or a complaint (escalation)  → no
  3. business hours + question/greeting/information → yes
  4. outside business hours + request (acknowledgment) → yes
  5. anything else, including "other"         → no
"""

import re
from dataclasses import dataclass
from datetime import datetime

from lana.domain.intent import MessageIntent

_HHMM = re.compile(r"^(\d{1,2}):(\d{2})$")

BUSINESS_HOURS_CATEGORIES = ("question", "greeting", "information")
AFTER_HOURS_CATEGORIES = ("request",)


def business_hour(value: str) -> int:
    """Hour component of an "HH:MM" string.  Minutes are ignored by the gate."""
    m = _HHMM.match(value.strip())
    if not m or int(m.group(1)) > 23 or int(m.group(2)) > 59:
        raise ValueError(f"Invalid business hours time: {value!r} (expected HH:MM)")
    return int(m.group(1))


@dataclass(frozen=True)
class HostAutoReplySettings:
    """Auto-reply configuration owned by the host's account."""
    auto_reply_enabled: bool
    business_hours_start: str = "09:00"
    business_hours_end: str = "21:00"
    response_delay_minutes: int = 0   # informational, passed along to the sender

    def __post_init__(self):
        business_hour(self.business_hours_start)
        business_hour(self.business_hours_end)
        if self.response_delay_minutes < 0:
            raise ValueError("response_delay_minutes must be >= 0")


def is_business_hours(settings: HostAutoReplySettings, now: datetime) -> bool:
    """True iff now.hour is in [start_hour, end_hour).  No midnight wrap."""
    start = business_hour(settings.business_hours_start)
    end = business_hour(settings.business_hours_end)
    return start <= now.hour < end


def should_auto_reply(
    intent: MessageIntent,
    settings: HostAutoReplySettings,
    now: datetime | None = None,
) -> bool:
    """Decide whether this message may be answered without the host."""
    if not settings.auto_reply_enabled:
        return False

    # Escalation always wins
    if intent.urgency == "high" or intent.category == "complaint":
        return False

    # server local clock
    in_hours = is_business_hours(settings, now or datetime.now())

    if in_hours and intent.category in BUSINESS_HOURS_CATEGORIES:
        return True

    if not in_hours and intent.category in AFTER_HOURS_CATEGORIES:
        return True

    return False


def denial_reason(
    intent: MessageIntent,
    settings: HostAutoReplySettings | None,
) -> str:
    """Short label explaining why should_auto_reply() said no."""
    if settings is None or not settings.auto_reply_enabled:
        return "disabled"
    if intent.urgency == "high" or intent.category == "complaint":
        return "escalated"
    return "outside_policy"
