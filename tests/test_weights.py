import pytest

from spine_vec.domain.config import WeightModelConfig
from spine_vec.domain.levels import (
    ALL_LEVELS, CERVICAL_LEVELS, THORACIC_LEVELS, LUMBAR_LEVELS, VALID_LEVELS,
)
from spine_vec.engine.weights import compute_region_weight_shares, region_totals


def test_shares_cover_every_level():
    shares = compute_region_weight_shares()
    assert set(shares) == set(VALID_LEVELS)
    assert len(shares) == 25


def test_cervical_single_shares_sum_to_cervical_total():
    shares = compute_region_weight_shares()
    total = sum(shares[l].single_level_share for l in CERVICAL_LEVELS)
    assert total == pytest.approx(4.0)


def test_thoracolumbar_single_shares_sum_to_trunk_total():
    shares = compute_region_weight_shares()
    total = sum(shares[l].single_level_share for l in THORACIC_LEVELS + LUMBAR_LEVELS)
    assert total == pytest.approx(54.0)
    assert region_totals()["thoracic+lumbar"] == pytest.approx(54.0)


def test_cumulative_share_is_non_decreasing_cranial_to_caudal():
    shares = compute_region_weight_shares()
    cum = [shares[l].cumulative_share for l in ALL_LEVELS]
    assert all(b >= a - 1e-12 for a, b in zip(cum, cum[1:]))
    # cabeza + cervical + tronco
    assert cum[-1] == pytest.approx(65.0)
    assert shares["C1"].cumulative_share == pytest.approx(7.0 + 4.0 / 7.0)


def test_single_share_follows_relative_weight():
    shares = compute_region_weight_shares()
    # L4 (2.6) > L3 (2.3); en cervical todos iguales
    assert shares["L4"].single_level_share > shares["L3"].single_level_share
    assert shares["C3"].single_level_share == pytest.approx(4.0 / 7.0)


def test_custom_config_changes_totals():
    cfg = WeightModelConfig(head_contribution=8.0, cervical_contribution=5.0, total_supported_weight=70.0)
    shares = compute_region_weight_shares(cfg)
    assert sum(shares[l].single_level_share for l in CERVICAL_LEVELS) == pytest.approx(5.0)
    assert sum(shares[l].single_level_share for l in THORACIC_LEVELS + LUMBAR_LEVELS) == pytest.approx(57.0)


def test_shares_table_is_read_only():
    shares = compute_region_weight_shares()
    with pytest.raises(TypeError):
        shares["C1"] = None
