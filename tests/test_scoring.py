import pytest

from services.scoring import (
    amenity_score,
    building_score,
    clamp,
    expected_price_per_sqm,
    label_for,
    location_score,
    market_volatility_factor,
    price_band_delta,
    price_score,
    regional_growth_factor,
    size_efficiency,
)


def test_expected_price_per_sqm():
    assert expected_price_per_sqm("Toshkent Shahri", "sale") == 1128
    assert expected_price_per_sqm("Toshkent Shahri", "rent") == 8.3
    assert expected_price_per_sqm("Toshkent Viloyati", "sale") == 650
    assert expected_price_per_sqm("Samarqand Viloyati", "sale") == 750
    assert expected_price_per_sqm("Farg'ona Viloyati", "rent") == 2.5
    assert expected_price_per_sqm("Nukus", "sale") == 550
    assert expected_price_per_sqm("Qoraqalpog'iston Respublikasi", "sale") == 333
    assert expected_price_per_sqm("Denov", "sale") == 450
    assert expected_price_per_sqm("Denov", "rent") == 3.2


def test_expected_price_is_case_insensitive():
    assert expected_price_per_sqm("TOSHKENT SHAHRI", "sale") == 1128
    assert expected_price_per_sqm("toshkent shahri, Yunusobod", "rent") == 8.3


def test_location_score_capital_districts():
    assert location_score("Toshkent Shahri", "Chilonzor") == 10
    assert location_score("Toshkent Shahri", "Sergeli") == pytest.approx(8.6)
    assert location_score("Toshkent Shahri", "Noma'lum") == pytest.approx(9.8)


def test_location_score_regional_districts():
    assert location_score("Samarqand", "Registon") == pytest.approx(9.3)
    assert location_score("Samarqand", "Boshqa") == pytest.approx(8.5)
    assert location_score("Andijon", "Markaz") == pytest.approx(7.8)
    assert location_score("Namangan Viloyati", "City center") == pytest.approx(7.8)
    assert location_score("Qoraqalpog'iston Respublikasi", "Nukus") == pytest.approx(4.8)


def test_location_score_district_bonus_only_in_its_city():
    assert location_score("Toshkent Viloyati", "Chilonzor") == pytest.approx(7.5)


def test_location_score_is_pure():
    assert location_score("Buxoro", "Lyabi Hauz") == location_score("Buxoro", "Lyabi Hauz")


def test_regional_growth_factor():
    assert regional_growth_factor("Xorazm Viloyati") == 0.8
    assert regional_growth_factor("Sirdaryo Viloyati") == -0.4
    assert regional_growth_factor("Toshkent Shahri") == 0.3
    # the stable-market "jizzax" rule comes first
    assert regional_growth_factor("Jizzax Viloyati") == 0.1
    assert regional_growth_factor("Farg'ona Viloyati") == 0.1


def test_market_volatility_factor():
    assert market_volatility_factor("Toshkent Shahri", "rent") == 0.3
    assert market_volatility_factor("Toshkent Shahri", "sale") == 0.2
    assert market_volatility_factor("Sirdaryo Viloyati", "sale") == -0.3
    assert market_volatility_factor("Farg'ona Viloyati", "rent") == 0.0


def test_price_bands():
    assert price_band_delta(0.5) == 3.5
    assert price_band_delta(1.0) == 0.2
    assert price_band_delta(1.3) == -2.5
    assert price_band_delta(5.0) == -5.5

    assert price_score(0.5) == 9.5
    assert price_score(1.0) == 5.5
    assert price_score(5.0) == 1.0


def test_price_score_never_rises_with_ratio():
    ratios = [r / 100 for r in range(30, 400, 5)]
    scores = [price_score(r) for r in ratios]
    assert scores == sorted(scores, reverse=True)


def test_size_efficiency_bands():
    assert size_efficiency(75, 3) == 9
    assert size_efficiency(60, 3) == 8
    assert size_efficiency(45, 3) == 7
    assert size_efficiency(36, 3) == 6
    assert size_efficiency(30, 3) == 5
    assert size_efficiency(24, 3) == 4
    assert size_efficiency(21, 3) == 3


def test_size_efficiency_without_rooms():
    assert size_efficiency(100, 0) == 3
    assert size_efficiency(10, 0) == 3


def test_size_efficiency_is_non_decreasing():
    scores = [size_efficiency(size, 2) for size in range(1, 120)]
    assert scores == sorted(scores)


def test_amenity_score():
    assert amenity_score("") == 5
    assert amenity_score("Zamonaviy, konditsioner, metroga yaqin") == pytest.approx(7.8)
    assert amenity_score("Eski, shovqinli va iflos") == pytest.approx(3.0)


def test_amenity_score_is_clamped():
    text = "modern ac wifi balcony parking elevator security gym pool furnished metro"
    assert amenity_score(text) == 10


def test_building_score():
    assert building_score("apartment", "good", 1985, 7, 12, current_year=2026) == pytest.approx(7.0)
    assert building_score("studio", "good", 2012, 13, 16, current_year=2026) == pytest.approx(6.4)


def test_building_score_modern_bonus_needs_height():
    low_rise = building_score("studio", "good", 2012, 2, 3, current_year=2026)
    mid_rise = building_score("studio", "good", 2012, 2, 5, current_year=2026)
    assert low_rise == pytest.approx(8.3)
    assert mid_rise == pytest.approx(9.4)


def test_building_score_prefers_middle_floors():
    ground = building_score("apartment", "good", 1985, 1, 12, current_year=2026)
    middle = building_score("apartment", "good", 1985, 4, 12, current_year=2026)
    assert ground == pytest.approx(5.0)
    assert middle == pytest.approx(7.5)


def test_building_score_is_clamped():
    assert building_score("penthouse", "new", 2025, 4, 5, current_year=2026) == 10
    assert building_score("studio", "needs_renovation", 1960, 1, 20, current_year=2026) == 1


def test_label_for():
    assert label_for(9.0) == "Underpriced"
    assert label_for(6.5) == "Underpriced"
    assert label_for(6.4) == "Fair"
    assert label_for(4.0) == "Fair"
    assert label_for(3.9) == "Overpriced"
    assert label_for(1.0) == "Overpriced"


def test_clamp():
    assert clamp(11.3) == 10
    assert clamp(-2) == 1
    assert clamp(5.5) == 5.5
