import random
import pytest

from farmadvisor.engine.crops import CROPS
from farmadvisor.engine.numbers import round_half_up
from farmadvisor.engine.scorer import is_eligible, match_percentage, recommend, to_items
from farmadvisor.engine.loader import soil_types
from farmadvisor.schema import CropRecord


def _zero():
    return 0.0


def _crop(name, season="Kharif", soils=("Loamy Soil",)):
    return CropRecord(
        name=name,
        season=season,
        soil_types=list(soils),
        water_requirement="Medium",
        duration=100,
        expected_yield=10,
        estimated_income=20000,
    )


def test_same_season_scores_seventy_without_other_factors():
    assert match_percentage(_crop("A"), "Loamy Soil", "Kharif", _zero) == 70


def test_annual_crop_scores_sixty_without_other_factors():
    assert match_percentage(_crop("A", season="Annual"), "Loamy Soil", "Rabi", _zero) == 60


def test_score_never_exceeds_hundred():
    assert match_percentage(_crop("A"), "Loamy Soil", "Kharif", lambda: 0.99999) == 100
    assert match_percentage(_crop("A"), "Loamy Soil", "Kharif", lambda: 5.0) == 100


def test_other_factors_add_up_to_thirty_points():
    assert match_percentage(_crop("A"), "Loamy Soil", "Kharif", lambda: 0.5) == 85


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(70.5) == 71
    assert round_half_up(70.49) == 70


def test_recommend_top_three_keep_catalog_order_on_ties():
    items = recommend("Loamy Soil", "Kharif", 1, CROPS, _zero)
    assert [c.name for c in items] == ["Soybean", "Maize", "Rice"]
    assert all(c.match_percentage == 70 for c in items)


def test_recommend_ties_are_stable_for_custom_catalog():
    catalog = [_crop("A"), _crop("B"), _crop("C"), _crop("D")]
    items = recommend("Loamy Soil", "Kharif", 1, catalog, _zero)
    assert [c.name for c in items] == ["A", "B", "C"]


def test_recommend_ranks_by_score():
    catalog = [_crop("Annual", season="Annual"), _crop("Seasonal")]
    items = recommend("Loamy Soil", "Kharif", 1, catalog, _zero)
    assert [(c.name, c.match_percentage) for c in items] == [("Seasonal", 70), ("Annual", 60)]


def test_recommend_only_annual_crops_when_season_has_none():
    items = recommend("Clay Soil", "Zaid", 1, CROPS, _zero)
    assert [c.name for c in items] == ["Sugarcane"]
    assert items[0].match_percentage == 60


def test_recommend_unknown_soil_returns_empty():
    assert recommend("Peat Soil", "Kharif", 1, CROPS, _zero) == []
    assert recommend("Loamy Soil", "Kharif", 1, [], _zero) == []


def test_ineligible_crops_are_never_scored():
    calls = []

    def rand():
        calls.append(1)
        return 0.0

    catalog = [_crop("Wrong soil", soils=("Red Soil",)), _crop("Wrong season", season="Rabi"), _crop("Fits")]
    items = recommend("Loamy Soil", "Kharif", 1, catalog, rand)
    assert [c.name for c in items] == ["Fits"]
    assert len(calls) == 1


@pytest.mark.parametrize("season", ["Kharif", "Rabi", "Zaid"])
def test_recommend_properties_hold_for_every_soil(season):
    rand = random.Random(1234).random
    for soil in soil_types(CROPS):
        items = recommend(soil, season, 3, CROPS, rand)
        assert len(items) <= 3
        scores = [c.match_percentage for c in items]
        assert scores == sorted(scores, reverse=True)
        for c in items:
            assert soil in c.soil_types
            assert c.season in (season, "Annual")
            assert 0 <= c.match_percentage <= 100


def test_recommend_is_repeatable_with_same_random_source():
    first = recommend("Sandy Loam", "Rabi", 2, CROPS, random.Random(7).random)
    second = recommend("Sandy Loam", "Rabi", 2, CROPS, random.Random(7).random)
    assert first == second


def test_farm_size_does_not_change_ranking():
    small = recommend("Red Soil", "Kharif", 0.5, CROPS, _zero)
    large = recommend("Red Soil", "Kharif", 50, CROPS, _zero)
    assert small == large


def test_is_eligible():
    assert is_eligible(_crop("A"), "Loamy Soil", "Kharif")
    assert is_eligible(_crop("A", season="Annual"), "Loamy Soil", "Zaid")
    assert not is_eligible(_crop("A"), "Loamy Soil", "Rabi")
    assert not is_eligible(_crop("A"), "Red Soil", "Kharif")


def test_to_items_projects_income_over_farm_size():
    items = to_items(recommend("Loamy Soil", "Kharif", 2, CROPS, _zero), 2)
    soybean = items[0]
    assert soybean["crop"] == "Soybean"
    assert soybean["match_percentage"] == 70
    assert soybean["duration_days"] == 100
    assert soybean["projected_income"] == 90000
    assert soybean["fertilizers"] == ["DAP", "Urea", "Potash"]
