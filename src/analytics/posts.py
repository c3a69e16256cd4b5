"""
Convert scraped TikTok posts (flat dicts with video_id, views, likes,
comments, shares, created_at, caption, audio_title) into the video
records expected by the analyzers.
"""

import re
from typing import Dict, List

HASHTAG_PATTERN = re.compile(r'#(\w+)', re.UNICODE)


def extract_hashtags(caption: str) -> List[str]:
    """Hashtags in caption order, lowercased, repeats kept."""
    return [tag.lower() for tag in HASHTAG_PATTERN.findall(caption or '')]


def _hashtags(post: Dict) -> List[str]:
    if post.get('hashtags') is not None:
        return list(post['hashtags'])
    return extract_hashtags(post.get('caption', ''))


def video_from_post(post: Dict) -> Dict:
    return {
        'id': post.get('video_id', ''),
        'stats': {
            'views': post.get('views', 0) or 0,
            'likes': post.get('likes', 0) or 0,
            'comments': post.get('comments', 0) or 0,
            'shares': post.get('shares', 0) or 0,
        },
        'duration': post.get('duration', 0) or 0,
        'create_time': post.get('created_at'),
        'hashtags': _hashtags(post),
        'music': post.get('audio_title') or 'Original Sound',
    }


def videos_from_posts(posts: List[Dict]) -> List[Dict]:
    return [video_from_post(p) for p in posts]
