"""
Tests for security scoring.

These tests verify:
1. Each component follows its point rules and floor
2. Final scores are bounded and deterministic
3. Security-relevant changes move the score in the right direction
4. Breakdown and observer agree with the score
"""

import pytest

from wifi_grader.core.domain.models import NetworkObservation, SecurityProtocol
from wifi_grader.core.services.components import (
    ADVANCED_FLOOR,
    COMPONENTS,
    compute_advanced_score,
    compute_authentication_score,
    compute_channel_score,
    compute_configuration_score,
    compute_encryption_score,
    compute_feature_score,
    compute_vendor_score,
)
from wifi_grader.core.services.scoring import ScoreCalculator, clamp_score


# =============================================================================
# TEST FIXTURES
# =============================================================================

def make_observation(**overrides) -> NetworkObservation:
    """
    Baseline WPA2-Personal network on 5 GHz channel 36, 80 MHz wide, -60 dBm.

    Baseline score: 28 + 2.25 + 2.7 + 0 + 0.5 + 0 + 0 = 33.45 -> 33
    """
    fields = dict(
        ssid="HomeNet",
        bssid="AA:BB:CC:DD:EE:01",
        security=SecurityProtocol.WPA2_PERSONAL,
        signal_strength=-60,
        frequency=5180,
        channel_width=80,
    )
    fields.update(overrides)
    return NetworkObservation(**fields)


BASELINE_SCORE = 33


# =============================================================================
# COMPONENT TESTS
# =============================================================================

class TestEncryptionComponent:
    """Test fixed points per protocol."""

    @pytest.mark.parametrize("protocol,points", [
        (SecurityProtocol.OPEN, 15),
        (SecurityProtocol.WEP, 25),
        (SecurityProtocol.WPA, 50),
        (SecurityProtocol.WPA2_PERSONAL, 80),
        (SecurityProtocol.WPA2_ENTERPRISE, 95),
        (SecurityProtocol.WPA3_PERSONAL, 100),
        (SecurityProtocol.WPA3_ENTERPRISE, 110),
        (SecurityProtocol.UNKNOWN, 35),
    ])
    def test_protocol_points(self, protocol, points):
        result = compute_encryption_score(make_observation(security=protocol))
        assert result.raw_value == points
        assert result.weight == 0.35

    def test_unrecognized_label_scores_as_unknown(self):
        result = compute_encryption_score(make_observation(security="WPA9-Quantum-Mesh"))
        assert result.raw_value == 35


class TestAuthenticationComponent:
    """Test enterprise bonus and guest penalty."""

    def test_personal(self):
        assert compute_authentication_score(make_observation()).raw_value == 15

    def test_enterprise(self):
        assert compute_authentication_score(make_observation(is_enterprise=True)).raw_value == 30

    def test_guest_personal_floors_at_zero(self):
        result = compute_authentication_score(make_observation(is_guest_network=True))
        assert result.raw_value == 0

    def test_guest_enterprise(self):
        result = compute_authentication_score(
            make_observation(is_enterprise=True, is_guest_network=True)
        )
        assert result.raw_value == 15


class TestChannelComponent:
    """Test band, width and congestion rules."""

    def test_congested_2_4_ghz_channel(self):
        result = compute_channel_score(make_observation(frequency=2437, channel_width=20))
        # 15 + 8 - 2
        assert result.raw_value == 21
        assert "congested" in result.reason

    def test_5_ghz_40_mhz(self):
        result = compute_channel_score(make_observation(frequency=5180, channel_width=40))
        assert result.raw_value == 30

    def test_6_ghz_wide(self):
        result = compute_channel_score(make_observation(frequency=6115, channel_width=160))
        assert result.raw_value == 32

    def test_no_band_no_standard_width(self):
        result = compute_channel_score(make_observation(frequency=0, channel_width=30))
        assert result.raw_value == 0


class TestFeatureComponent:
    """Test PMF, OWE, WPS and hidden SSID rules."""

    def test_no_features(self):
        assert compute_feature_score(make_observation()).raw_value == 0

    def test_pmf_and_owe(self):
        result = compute_feature_score(make_observation(supports_pmf=True, supports_owe=True))
        assert result.raw_value == 35

    def test_penalties_floor_at_zero(self):
        result = compute_feature_score(make_observation(supports_wps=True, is_hidden=True))
        assert result.raw_value == 0

    def test_pmf_with_wps(self):
        result = compute_feature_score(make_observation(supports_pmf=True, supports_wps=True))
        assert result.raw_value == 10


class TestConfigurationComponent:
    """Test signal band, data rate and enterprise bonus."""

    @pytest.mark.parametrize("rssi,points", [
        (-20, 0),
        (-45, 2),
        (-65, 5),
        (-85, 8),
    ])
    def test_signal_bands(self, rssi, points):
        result = compute_configuration_score(make_observation(signal_strength=rssi))
        assert result.raw_value == points

    def test_very_strong_signal_offsets_rate_bonus(self):
        result = compute_configuration_score(
            make_observation(signal_strength=-20, max_data_rate=1200)
        )
        assert result.raw_value == 0

    def test_rate_and_enterprise(self):
        result = compute_configuration_score(
            make_observation(signal_strength=-65, max_data_rate=300, is_enterprise=True)
        )
        # 5 + 3 + 5
        assert result.raw_value == 13


class TestVendorComponent:
    """Test case-insensitive vendor tiers."""

    @pytest.mark.parametrize("vendor,points", [
        ("", 0),
        ("CISCO Meraki", 5),
        ("Ubiquiti Networks", 5),
        ("TP-Link", 2),
        ("netgear", 2),
        ("D-Link", 0),
        ("Acme Radios", 0),
    ])
    def test_vendor_points(self, vendor, points):
        assert compute_vendor_score(make_observation(vendor=vendor)).raw_value == points


class TestAdvancedComponent:
    """Test threat indicators and the negative floor."""

    def test_no_threats(self):
        assert compute_advanced_score(make_observation()).raw_value == 0

    def test_all_threats_floor(self):
        result = compute_advanced_score(make_observation(
            is_rogue_ap=True,
            is_evil_twin=True,
            is_typo_squatting=True,
            has_anomalous_behavior=True,
            beacon_interval=20,
            responds_to_probes=True,
        ))
        assert result.raw_value == ADVANCED_FLOOR

    def test_long_beacon_bonus(self):
        assert compute_advanced_score(make_observation(beacon_interval=300)).raw_value == 2

    def test_evil_twin_and_probes(self):
        result = compute_advanced_score(make_observation(is_evil_twin=True, responds_to_probes=True))
        assert result.raw_value == -23
        assert "evil twin" in result.reason


# =============================================================================
# CALCULATOR TESTS
# =============================================================================

class TestScoreCalculator:
    """Test the final score."""

    def test_baseline_score(self):
        assert ScoreCalculator().score(make_observation()) == BASELINE_SCORE

    def test_callable(self):
        calculator = ScoreCalculator()
        observation = make_observation()
        assert calculator(observation) == calculator.score(observation)

    def test_open_network(self):
        observation = make_observation(
            security=SecurityProtocol.OPEN,
            frequency=2437,
            channel_width=20,
            signal_strength=-75,
        )
        # 5.25 + 2.25 + 2.1 + 0 + 0.8 = 10.4
        assert ScoreCalculator().score(observation) == 10

    def test_best_configuration_tops_out_below_excellent(self):
        observation = make_observation(
            security=SecurityProtocol.WPA3_ENTERPRISE,
            is_enterprise=True,
            supports_pmf=True,
            supports_owe=True,
            frequency=6115,
            channel_width=20,
            signal_strength=-80,
            max_data_rate=1200,
            vendor="Cisco",
            beacon_interval=300,
        )
        # 38.5 + 4.5 + 3.8 + 7 + 1.8 + 0.25 + 0.1 = 55.95
        assert ScoreCalculator().score(observation) == 56

    def test_worst_configuration_is_bounded(self):
        observation = make_observation(
            security=SecurityProtocol.OPEN,
            is_guest_network=True,
            is_hidden=True,
            supports_wps=True,
            frequency=0,
            channel_width=30,
            signal_strength=-20,
            is_rogue_ap=True,
            is_evil_twin=True,
            is_typo_squatting=True,
            has_anomalous_behavior=True,
            beacon_interval=10,
            responds_to_probes=True,
        )
        # 5.25 + 0 + 0 + 0 + 0 + 0 - 1.5 = 3.75
        assert ScoreCalculator().score(observation) == 4

    @pytest.mark.parametrize("protocol", list(SecurityProtocol))
    def test_scores_in_range(self, protocol):
        score = ScoreCalculator().score(make_observation(security=protocol))
        assert 0 <= score <= 100

    def test_deterministic(self):
        calculator = ScoreCalculator()
        observation = make_observation(supports_pmf=True, vendor="Aruba")
        assert len({calculator.score(observation) for _ in range(10)}) == 1
        assert ScoreCalculator().score(observation) == calculator.score(observation)

    def test_does_not_depend_on_identity(self):
        calculator = ScoreCalculator()
        assert calculator.score(make_observation(ssid="A", bssid="1")) == \
            calculator.score(make_observation(ssid="B", bssid="2"))


class TestClampScore:
    """Test clamping and half-up rounding."""

    @pytest.mark.parametrize("value,expected", [
        (-12.0, 0),
        (0.0, 0),
        (33.45, 33),
        (33.5, 34),
        (34.5, 35),
        (99.6, 100),
        (140.0, 100),
    ])
    def test_clamp(self, value, expected):
        assert clamp_score(value) == expected


class TestMonotonicity:
    """Each security improvement raises the score; each weakness lowers it."""

    def test_enterprise_raises(self):
        assert ScoreCalculator().score(make_observation(is_enterprise=True)) > BASELINE_SCORE

    def test_pmf_raises(self):
        assert ScoreCalculator().score(make_observation(supports_pmf=True)) > BASELINE_SCORE

    def test_wps_lowers(self):
        calculator = ScoreCalculator()
        with_pmf = calculator.score(make_observation(supports_pmf=True))
        with_wps = calculator.score(make_observation(supports_pmf=True, supports_wps=True))
        assert with_wps < with_pmf

    def test_guest_lowers(self):
        assert ScoreCalculator().score(make_observation(is_guest_network=True)) < BASELINE_SCORE

    def test_rogue_lowers(self):
        assert ScoreCalculator().score(make_observation(is_rogue_ap=True)) < BASELINE_SCORE

    def test_band_ordering(self):
        calculator = ScoreCalculator()
        scores = [
            calculator.score(make_observation(frequency=frequency, channel_width=20))
            for frequency in (2437, 5180, 6115)
        ]
        # 32.85, 34.05, 34.55
        assert scores == [33, 34, 35]
        assert scores == sorted(scores)


class TestScoreBreakdown:
    """Test the breakdown view of a score."""

    def test_has_every_component(self):
        breakdown = ScoreCalculator().breakdown(make_observation())
        assert len(breakdown.components) == len(COMPONENTS)
        assert [c.name for c in breakdown.components] == [
            "encryption", "authentication", "channel", "feature",
            "configuration", "vendor", "advanced",
        ]

    def test_total_matches_score(self):
        breakdown = ScoreCalculator().breakdown(make_observation())
        assert breakdown.weighted_total == pytest.approx(33.45)
        assert breakdown.score == BASELINE_SCORE

    def test_get_component(self):
        breakdown = ScoreCalculator().breakdown(make_observation())
        assert breakdown.get("encryption").raw_value == 80
        assert breakdown.get("missing") is None

    def test_negative_contributors(self):
        breakdown = ScoreCalculator().breakdown(make_observation(is_rogue_ap=True))
        negatives = breakdown.get_negative_contributors()
        assert [c.name for c in negatives] == ["advanced"]
        assert negatives[0].contribution == pytest.approx(-1.25)


class TestObserver:
    """Test the injected observer."""

    def test_observer_sees_every_computation(self):
        seen = []
        calculator = ScoreCalculator(observer=lambda obs, breakdown: seen.append((obs.ssid, breakdown.score)))
        calculator.score(make_observation(ssid="one"))
        calculator.score(make_observation(ssid="two"))
        assert seen == [("one", BASELINE_SCORE), ("two", BASELINE_SCORE)]

    def test_calculators_are_independent(self):
        seen = []
        ScoreCalculator(observer=lambda obs, breakdown: seen.append(obs.ssid))
        ScoreCalculator().score(make_observation())
        assert seen == []


# =============================================================================
# RUN TESTS
# =============================================================================

if __name__ == "__main__":
    pytest.main([__file__, "-v"])
