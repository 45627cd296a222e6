import json

import pytest

from pregnancy_reports.modules.data_loader import load_myths
from pregnancy_reports.modules.myth_classifier import (
    classify_user_query,
    get_myth_stats,
    get_myths_by_region,
    get_myths_for_week,
    get_popular_myths_by_week_range,
    get_related_myths,
    get_trending_myths,
    search_myths,
)


def _ids(myths):
    return [m.id for m in myths]


class TestLoadMyths:
    def test_sample_dataset(self, myths):
        assert len(myths) == 13
        assert myths[0].id == "w1-1"
        assert myths[0].sources

    def test_packaged_dataset(self):
        packaged = load_myths()
        assert len(packaged) == 143
        assert len({m.id for m in packaged}) == 143
        assert {m.week for m in packaged} == set(range(1, 43))
        assert get_myth_stats(packaged)["by_risk"] == {"Low": 125, "Medium": 14, "High": 4}

    def test_missing_file_gives_empty_list(self, tmp_path):
        assert load_myths(str(tmp_path / "absent.json")) == []

    def test_malformed_json_gives_empty_list(self, tmp_path):
        path = tmp_path / "myths.json"
        path.write_text("{not json")
        assert load_myths(str(path)) == []

    def test_invalid_records_are_skipped(self, tmp_path, myths):
        good = myths[0].model_dump()
        bad = dict(good, id="bad-1", category="Astrology")
        path = tmp_path / "myths.json"
        path.write_text(json.dumps([good, bad]))

        assert _ids(load_myths(str(path))) == ["w1-1"]


class TestClassifyUserQuery:
    def test_nutrition_question(self, myths):
        result = classify_user_query("Is it safe to eat papaya?", myths)

        assert result.category == "Nutrition"
        assert result.region_hint == "South Asia"
        # Nutrition 2 hits, General 1 hit
        assert result.confidence == pytest.approx(0.3 + 0.7 * 2 / 3)
        assert _ids(result.matched_myths) == ["w1-1", "w4-1", "w5-1", "w33-1", "w35-1"]

    def test_prefers_same_week(self, myths):
        result = classify_user_query("Is it safe to eat papaya?", myths, current_week=5)
        assert _ids(result.matched_myths) == ["w5-1"]

    def test_falls_back_to_nearby_weeks(self, myths):
        result = classify_user_query("Is it safe to eat papaya?", myths, current_week=30)
        assert _ids(result.matched_myths) == ["w33-1"]

    def test_keeps_all_when_nothing_nearby(self, myths):
        result = classify_user_query("Is it safe to eat papaya?", myths, current_week=20)
        assert len(result.matched_myths) == 5

    def test_text_search_beats_category(self, myths):
        result = classify_user_query("morning sickness", myths)
        assert result.category == "Body Changes"
        assert result.confidence == pytest.approx(1.0)
        assert _ids(result.matched_myths) == ["w4-2", "w6-2"]

    def test_no_keywords(self, myths):
        result = classify_user_query("xyz", myths)
        assert result.confidence == 0.5
        assert result.category == "Nutrition"
        assert result.region_hint == "Global"

    def test_tie_keeps_first_category(self, myths):
        assert classify_user_query("sleep and exercise", myths).category == "Activity"

    def test_empty_dataset(self):
        result = classify_user_query("Is it safe to eat papaya?", [])
        assert result.matched_myths == []


def test_search_is_case_insensitive(myths):
    assert _ids(search_myths(myths, "MORNING SICKNESS")) == ["w4-2", "w6-2"]


def test_related_myths_share_category_or_region(myths):
    myth = next(m for m in myths if m.id == "w4-3")
    assert _ids(get_related_myths(myth, myths)) == ["w1-2", "w33-1"]


def test_trending_myths(myths):
    assert _ids(get_trending_myths(myths)) == ["w33-1", "w35-1", "w4-1", "w4-3", "w5-3"]


def test_week_range(myths):
    assert len(get_popular_myths_by_week_range(myths, 4, 6)) == 6


def test_by_region(myths):
    assert _ids(get_myths_by_region(myths, "East Asia")) == ["w5-1"]


def test_stats(myths):
    stats = get_myth_stats(myths)
    assert stats["total"] == 13
    assert stats["by_risk"] == {"Low": 7, "Medium": 4, "High": 2}
    assert stats["by_category"]["Nutrition"] == 5
    assert stats["by_region"]["Middle East"] == 0


def test_for_week(myths):
    assert _ids(get_myths_for_week(myths, 4)) == ["w4-1", "w4-2", "w4-3"]
    assert get_myths_for_week(myths, 41) == []


def test_packaged_dataset_narrows_to_current_week():
    result = classify_user_query("Is it safe to eat papaya?", load_myths(), current_week=30)
    assert result.category == "Nutrition"
    assert _ids(result.matched_myths) == ["w30-1"]
