"""
Analyzer settings, read from the environment (.env supported)
"""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

from analytics.metrics import EngagementThresholds
from analytics.recommendations import MESSAGES

load_dotenv()


@dataclass(frozen=True)
class Settings:
    thresholds: EngagementThresholds = field(default_factory=EngagementThresholds)
    top_posting_times: int = 5
    language: str = 'en'


def _read_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(
            f"Invalid value for {name}: {raw!r}\n"
            f"Fix {name} in your .env file."
        ) from None


def load_settings() -> Settings:
    """Build Settings from ENGAGEMENT_*, TOP_POSTING_TIMES and RECOMMENDATION_LANGUAGE."""
    defaults = EngagementThresholds()
    thresholds = EngagementThresholds(
        high=_read_number('ENGAGEMENT_HIGH', defaults.high, float),
        medium=_read_number('ENGAGEMENT_MEDIUM', defaults.medium, float),
        low=_read_number('ENGAGEMENT_LOW', defaults.low, float),
    )
    if not thresholds.low <= thresholds.medium <= thresholds.high:
        raise ValueError(
            "Engagement thresholds must satisfy LOW <= MEDIUM <= HIGH.\n"
            "Check ENGAGEMENT_LOW, ENGAGEMENT_MEDIUM and ENGAGEMENT_HIGH in .env."
        )

    top_posting_times = _read_number('TOP_POSTING_TIMES', 5, int)
    if top_posting_times < 1:
        raise ValueError("TOP_POSTING_TIMES must be at least 1.")

    language = os.getenv('RECOMMENDATION_LANGUAGE', 'en').strip().lower() or 'en'
    if language not in MESSAGES:
        raise ValueError(
            f"Unsupported RECOMMENDATION_LANGUAGE: {language!r}\n"
            f"Set RECOMMENDATION_LANGUAGE in .env to one of: {', '.join(MESSAGES)}"
        )

    return Settings(
        thresholds=thresholds,
        top_posting_times=top_posting_times,
        language=language,
    )
