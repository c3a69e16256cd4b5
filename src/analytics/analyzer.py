"""
TikTok batch analyzer - runs every aggregation over one batch of videos
and builds recommendations from the results.
"""

import logging
from collections import Counter
from typing import Dict, List, Optional

from analytics.metrics import calculate_engagement_rate, classify_engagement
from analytics.recommendations import generate_recommendations
from analytics.video_analytics import (
    analyze_duration,
    analyze_hashtags,
    analyze_music,
    analyze_posting_times,
)
from config.settings import Settings, load_settings

logger = logging.getLogger(__name__)


class TikTokAnalyzer:
    """
    Engagement analysis over an in-memory batch of videos.

    The analyzers are independent single-pass scans, run sequentially.
    Input videos are never modified, so repeated runs give identical output.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or load_settings()

    def calculate_engagement_rate(self, video: Dict) -> float:
        return calculate_engagement_rate(video)

    def analyze_duration(self, videos: List[Dict]) -> Dict:
        return analyze_duration(videos)

    def analyze_posting_times(self, videos: List[Dict]) -> List[Dict]:
        return analyze_posting_times(videos, limit=self.settings.top_posting_times)

    def analyze_hashtags(self, videos: List[Dict]) -> List[Dict]:
        return analyze_hashtags(videos)

    def analyze_music(self, videos: List[Dict]) -> List[Dict]:
        return analyze_music(videos)

    def generate_recommendations(self, analysis_results: Dict) -> Dict:
        return generate_recommendations(analysis_results, language=self.settings.language)

    def classify_videos(self, videos: List[Dict]) -> Dict[str, int]:
        """Count videos per engagement tier (high / medium / average / low)."""
        tiers = Counter(
            classify_engagement(calculate_engagement_rate(v), self.settings.thresholds)
            for v in videos
        )
        return {tier: tiers.get(tier, 0) for tier in ('high', 'medium', 'average', 'low')}

    def analyze_video_batch(self, videos: List[Dict]) -> Dict:
        """
        Main method: analyze a full batch of videos.

        Returns:
            {'analysis_results': {optimal_duration, best_posting_times,
             top_hashtags, top_music}, 'recommendations': {...}}
        """
        logger.info("📊 Analyzing %d videos...", len(videos))
        if not videos:
            logger.warning("⚠️ Empty batch, returning placeholder results")

        analysis_results = {
            'optimal_duration': self.analyze_duration(videos),
            'best_posting_times': self.analyze_posting_times(videos),
            'top_hashtags': self.analyze_hashtags(videos),
            'top_music': self.analyze_music(videos),
        }
        logger.info(
            "  ✓ %d posting slots, %d hashtags, %d tracks",
            len(analysis_results['best_posting_times']),
            len(analysis_results['top_hashtags']),
            len(analysis_results['top_music']),
        )

        recommendations = self.generate_recommendations(analysis_results)
        logger.info("✅ Analysis complete")

        return {
            'analysis_results': analysis_results,
            'recommendations': recommendations,
        }


def analyze_video_batch(videos: List[Dict], settings: Optional[Settings] = None) -> Dict:
    """Analyze a batch with a one-off TikTokAnalyzer."""
    return TikTokAnalyzer(settings).analyze_video_batch(videos)
