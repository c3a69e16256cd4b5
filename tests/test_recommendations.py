"""Tests for the recommendation builder."""

import pytest

from analytics.recommendations import format_time_recommendation, generate_recommendations


def _results(**overrides):
    results = {
        'optimal_duration': {'duration': 15, 'avg_engagement': 0.2, 'sample_size': 1},
        'best_posting_times': [
            {'day': 1, 'hour': 14, 'count': 1, 'total_engagement': 0.2, 'avg_engagement': 0.2},
        ],
        'top_hashtags': [{'tag': f't{i}'} for i in range(8)],
        'top_music': [{'music': f'm{i}'} for i in range(6)],
    }
    results.update(overrides)
    return results


def test_format_time_recommendation() -> None:
    assert format_time_recommendation({'day': 0, 'hour': 9}) == "Sunday at 9:00"
    assert format_time_recommendation({'day': 1, 'hour': 14}, language='fr') == "lundi à 14h00"


def test_generate_recommendations_truncates_lists() -> None:
    slots = [{'day': d, 'hour': 10} for d in range(5)]
    recs = generate_recommendations(_results(best_posting_times=slots))
    assert len(recs['timing']['best_times']) == 3
    assert [h['tag'] for h in recs['hashtags']['recommended']] == ['t0', 't1', 't2', 't3', 't4']
    assert [m['music'] for m in recs['music']['trending']] == ['m0', 'm1', 'm2']


def test_generate_recommendations_sentences() -> None:
    recs = generate_recommendations(_results())
    assert recs['timing']['recommendation'] == "Post your videos on Monday at 14:00"
    assert recs['duration']['recommendation'] == "Aim for 15 seconds for optimal engagement"
    assert recs['duration']['optimal']['duration'] == 15
    assert recs['hashtags']['recommendation']
    assert recs['music']['recommendation']


def test_generate_recommendations_french() -> None:
    recs = generate_recommendations(_results(), language='fr')
    assert recs['timing']['recommendation'] == "Postez vos vidéos lundi à 14h00"
    assert recs['duration']['recommendation'].startswith("Visez une durée de 15 secondes")


def test_generate_recommendations_empty_results() -> None:
    """Empty analysis gives placeholders instead of failing."""
    recs = generate_recommendations({
        'optimal_duration': {'duration': 0, 'avg_engagement': 0.0},
        'best_posting_times': [],
        'top_hashtags': [],
        'top_music': [],
    })
    assert recs['timing']['best_times'] == []
    assert "Not enough data" in recs['timing']['recommendation']
    assert "Not enough" in recs['duration']['recommendation']
    assert recs['hashtags']['recommended'] == []
    assert recs['music']['trending'] == []


def test_unknown_language_raises() -> None:
    with pytest.raises(ValueError, match="Unsupported recommendation language"):
        generate_recommendations(_results(), language='xx')
    with pytest.raises(ValueError):
        format_time_recommendation({'day': 1, 'hour': 14}, language='xx')
