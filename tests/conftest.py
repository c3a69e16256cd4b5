"""Shared fixtures for analytics tests."""

from datetime import datetime

import pytest


@pytest.fixture
def make_video():
    """Factory for video records with sensible defaults."""
    counter = {'n': 0}

    def _make(views=100, likes=10, comments=5, shares=5, duration=15.0,
              create_time=datetime(2024, 1, 1, 14, 0), hashtags=None, music='trackX',
              video_id=None):
        counter['n'] += 1
        return {
            'id': video_id or f"v{counter['n']}",
            'stats': {'views': views, 'likes': likes, 'comments': comments, 'shares': shares},
            'duration': duration,
            'create_time': create_time,
            'hashtags': list(hashtags) if hashtags is not None else [],
            'music': music,
        }

    return _make
