"""
Engagement metrics: per-video engagement rate, tiers and ranking scores
"""

import math
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class EngagementThresholds:
    """Engagement-rate tiers (ratios, not percentages)."""
    high: float = 0.15    # 15% and above
    medium: float = 0.08  # 8-15%
    low: float = 0.03     # below 3%


DEFAULT_THRESHOLDS = EngagementThresholds()


def calculate_engagement_rate(video: Dict) -> float:
    stats = video['stats']
    views = stats['views']
    if views == 0:
        return 0.0
    return (stats['likes'] + stats['comments'] + stats['shares']) / views


def performance_score(avg_engagement: float, total_views: int) -> float:
    """
    Rank score rewarding both engagement quality and reach:
    avg_engagement * log10(total_views).

    A group without any views scores -inf so it always ranks last.
    """
    if total_views <= 0:
        return float('-inf')
    return avg_engagement * math.log10(total_views)


def classify_engagement(rate: float, thresholds: EngagementThresholds = DEFAULT_THRESHOLDS) -> str:
    """Classify an engagement rate into high / medium / average / low."""
    if rate >= thresholds.high:
        return 'high'
    if rate >= thresholds.medium:
        return 'medium'
    if rate >= thresholds.low:
        return 'average'
    return 'low'
