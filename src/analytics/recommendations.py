"""
Turn aggregated analysis results into human-readable recommendations
"""

from typing import Dict

# Indexed by day of week, 0 = Sunday
DAY_NAMES = {
    'en': ['Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday'],
    'fr': ['dimanche', 'lundi', 'mardi', 'mercredi', 'jeudi', 'vendredi', 'samedi'],
}

MESSAGES = {
    'en': {
        'timing': "Post your videos on {slot}",
        'timing_empty': "Not enough data yet to recommend a posting time",
        'slot': "{day} at {hour}:00",
        'duration': "Aim for {duration} seconds for optimal engagement",
        'duration_empty': "Not enough engagement data yet to recommend a duration",
        'hashtags': "Use a combination of these high-performing hashtags",
        'music': "These tracks generated the most engagement",
    },
    'fr': {
        'timing': "Postez vos vidéos {slot}",
        'timing_empty': "Pas encore assez de données pour recommander un horaire",
        'slot': "{day} à {hour}h00",
        'duration': "Visez une durée de {duration} secondes pour un engagement optimal",
        'duration_empty': "Pas encore assez de données pour recommander une durée",
        'hashtags': "Utilisez une combinaison de ces hashtags performants",
        'music': "Ces musiques ont généré le plus d'engagement",
    },
}


def _messages(language: str) -> Dict[str, str]:
    if language not in MESSAGES:
        raise ValueError(
            f"Unsupported recommendation language: {language!r}\n"
            f"Set RECOMMENDATION_LANGUAGE to one of: {', '.join(MESSAGES)}"
        )
    return MESSAGES[language]


def format_time_recommendation(time_slot: Dict, language: str = 'en') -> str:
    """Format a {'day', 'hour'} slot, e.g. 'Monday at 14:00'."""
    template = _messages(language)['slot']
    day = DAY_NAMES[language][time_slot['day']]
    return template.format(day=day, hour=time_slot['hour'])


def generate_recommendations(analysis_results: Dict, language: str = 'en') -> Dict:
    """
    Build the recommendation bundle from analyze_* results.

    Returns dict with: timing, duration, hashtags, music
    """
    messages = _messages(language)
    posting_times = analysis_results['best_posting_times']
    optimal = analysis_results['optimal_duration']

    if posting_times:
        timing = messages['timing'].format(
            slot=format_time_recommendation(posting_times[0], language)
        )
    else:
        timing = messages['timing_empty']

    if 'sample_size' in optimal:
        duration = messages['duration'].format(duration=optimal['duration'])
    else:
        duration = messages['duration_empty']

    return {
        'timing': {
            'best_times': posting_times[:3],
            'recommendation': timing,
        },
        'duration': {
            'optimal': optimal,
            'recommendation': duration,
        },
        'hashtags': {
            'recommended': analysis_results['top_hashtags'][:5],
            'recommendation': messages['hashtags'],
        },
        'music': {
            'trending': analysis_results['top_music'][:3],
            'recommendation': messages['music'],
        },
    }
