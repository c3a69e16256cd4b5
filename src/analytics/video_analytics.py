"""
Video Analytics - Group a batch of videos by duration, posting slot,
hashtag and music, and rank the groups by engagement.

Every ranking is a stable descending sort: groups with equal scores keep
the order in which they were first seen in the input.
"""

import logging
import math
from collections import defaultdict
from datetime import datetime
from typing import Dict, Hashable, Iterable, List, Tuple

from analytics.metrics import calculate_engagement_rate, performance_score

logger = logging.getLogger(__name__)

DEFAULT_POSTING_TIMES_LIMIT = 5


def _new_group() -> Dict:
    return {
        'count': 0,
        'total_engagement': 0.0,
        'total_views': 0,
        'videos': [],
    }


def _accumulate(groups: Dict, key: Hashable, video: Dict) -> None:
    group = groups[key]
    group['count'] += 1
    group['total_engagement'] += calculate_engagement_rate(video)
    group['total_views'] += video['stats']['views']
    group['videos'].append(video.get('id'))


def analyze_duration(videos: List[Dict]) -> Dict:
    """
    Find the whole-second duration with the best average engagement.

    Returns:
        {'duration', 'avg_engagement', 'sample_size'}, or the placeholder
        {'duration': 0, 'avg_engagement': 0.0} when no group has a positive
        average (including an empty batch).
    """
    groups = defaultdict(_new_group)
    for video in videos:
        _accumulate(groups, math.floor(video['duration']), video)

    logger.debug("Duration: %d groups", len(groups))

    best = {'duration': 0, 'avg_engagement': 0.0}
    for duration, data in groups.items():
        avg_engagement = data['total_engagement'] / data['count']
        # strict '>' keeps the first-seen group on ties
        if avg_engagement > best['avg_engagement']:
            best = {
                'duration': duration,
                'avg_engagement': avg_engagement,
                'sample_size': data['count'],
            }
    return best


def to_local_datetime(create_time) -> datetime:
    """
    Normalize a post timestamp to a naive local datetime.

    Accepts a datetime (aware ones are converted to local time, naive ones
    are taken as local), epoch seconds, or an ISO-8601 string.
    """
    if isinstance(create_time, str):
        create_time = datetime.fromisoformat(create_time.replace('Z', '+00:00'))
    elif isinstance(create_time, (int, float)):
        return datetime.fromtimestamp(create_time)

    if create_time.tzinfo is not None:
        return create_time.astimezone().replace(tzinfo=None)
    return create_time


def time_slot(create_time) -> Tuple[int, int]:
    """(day, hour) with day 0=Sunday .. 6=Saturday."""
    posted = to_local_datetime(create_time)
    return (posted.weekday() + 1) % 7, posted.hour


def analyze_posting_times(videos: List[Dict], limit: int = DEFAULT_POSTING_TIMES_LIMIT) -> List[Dict]:
    """Return up to `limit` (day, hour) slots ranked by average engagement."""
    groups = defaultdict(_new_group)
    for video in videos:
        _accumulate(groups, time_slot(video['create_time']), video)

    logger.debug("Posting times: %d slots", len(groups))

    slots = [
        {
            'day': day,
            'hour': hour,
            'count': data['count'],
            'total_engagement': data['total_engagement'],
            'avg_engagement': data['total_engagement'] / data['count'],
        }
        for (day, hour), data in groups.items()
    ]
    slots.sort(key=lambda s: s['avg_engagement'], reverse=True)
    return slots[:limit]


def _rank_by_performance(groups: Dict, key_name: str) -> List[Dict]:
    ranked = []
    for key, data in groups.items():
        avg_engagement = data['total_engagement'] / data['count']
        ranked.append({
            key_name: key,
            'avg_engagement': avg_engagement,
            'total_views': data['total_views'],
            'use_count': data['count'],
            'performance_score': performance_score(avg_engagement, data['total_views']),
        })
    ranked.sort(key=lambda r: r['performance_score'], reverse=True)
    return ranked


def analyze_hashtags(videos: List[Dict]) -> List[Dict]:
    """
    Rank every hashtag by performance score.

    A tag repeated within one video's tag list counts once per occurrence.
    """
    groups = defaultdict(_new_group)
    for video in videos:
        tags: Iterable[str] = video.get('hashtags') or []
        for tag in tags:
            _accumulate(groups, tag, video)

    logger.debug("Hashtags: %d distinct tags", len(groups))
    return _rank_by_performance(groups, 'tag')


def analyze_music(videos: List[Dict]) -> List[Dict]:
    """Rank every music track by performance score."""
    groups = defaultdict(_new_group)
    for video in videos:
        _accumulate(groups, video.get('music'), video)

    logger.debug("Music: %d distinct tracks", len(groups))
    return _rank_by_performance(groups, 'music')
