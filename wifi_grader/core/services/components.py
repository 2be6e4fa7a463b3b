"""
Security scoring components for WiFi Grader.

Each component is independently computable from a NetworkObservation and is
clamped at its own floor before weighting:

    - Encryption (35%):      fixed points per protocol tag, 15 to 110
    - Authentication (15%):  enterprise vs personal, guest penalty
    - Channel (10%):         frequency band, channel width, 2.4 GHz congestion
    - Feature (20%):         PMF, OWE, WPS, hidden SSID
    - Configuration (10%):   signal strength band, data rate, enterprise bonus
    - Vendor (5%):           vendor reputation tiers
    - Advanced (5%):         threat indicators, the only component allowed below 0
"""

from __future__ import annotations

from dataclasses import dataclass

from wifi_grader.core.domain.models import NetworkObservation, SecurityProtocol


@dataclass(frozen=True)
class SubScore:
    """
    One weighted component of the security score.

    raw_value is the component value after its floor is applied,
    contribution is raw_value * weight.
    """
    name: str
    raw_value: int
    weight: float
    reason: str

    @property
    def contribution(self) -> float:
        return self.raw_value * self.weight


# =============================================================================
# WEIGHTS
# =============================================================================

ENCRYPTION_WEIGHT = 0.35
AUTHENTICATION_WEIGHT = 0.15
CHANNEL_WEIGHT = 0.10
FEATURE_WEIGHT = 0.20
CONFIGURATION_WEIGHT = 0.10
VENDOR_WEIGHT = 0.05
ADVANCED_WEIGHT = 0.05

ADVANCED_FLOOR = -30


# =============================================================================
# ENCRYPTION
# =============================================================================

ENCRYPTION_SCORES = {
    SecurityProtocol.OPEN: 15,
    SecurityProtocol.WEP: 25,
    SecurityProtocol.WPA: 50,
    SecurityProtocol.WPA2_PERSONAL: 80,
    SecurityProtocol.WPA2_ENTERPRISE: 95,
    SecurityProtocol.WPA3_PERSONAL: 100,
    SecurityProtocol.WPA3_ENTERPRISE: 110,
    SecurityProtocol.UNKNOWN: 35,
}


def compute_encryption_score(observation: NetworkObservation) -> SubScore:
    """Fixed points per protocol; unrecognized protocols score as UNKNOWN."""
    points = ENCRYPTION_SCORES.get(observation.security, ENCRYPTION_SCORES[SecurityProtocol.UNKNOWN])
    return SubScore(
        name="encryption",
        raw_value=points,
        weight=ENCRYPTION_WEIGHT,
        reason=f"{observation.security.display_name} encryption ({points} points)",
    )


# =============================================================================
# AUTHENTICATION
# =============================================================================

def compute_authentication_score(observation: NetworkObservation) -> SubScore:
    points = 30 if observation.is_enterprise else 15
    notes = ["enterprise authentication" if observation.is_enterprise else "personal authentication"]

    if observation.is_guest_network:
        points -= 15
        notes.append("guest network")

    points = max(0, points)
    return SubScore(
        name="authentication",
        raw_value=points,
        weight=AUTHENTICATION_WEIGHT,
        reason=f"{', '.join(notes).capitalize()} ({points} points)",
    )


# =============================================================================
# CHANNEL
# =============================================================================

def compute_channel_score(observation: NetworkObservation) -> SubScore:
    """
    Band bonus plus channel width bonus.

    - >= 6000 MHz: +30, >= 5000 MHz: +25, >= 2400 MHz: +15
    - 20 MHz: +8, 40 MHz: +5, >= 80 MHz: +2
    - channels 1-11: -2 (congested 2.4 GHz channels)
    """
    points = 0
    frequency = observation.frequency

    if frequency >= 6000:
        points += 30
    elif frequency >= 5000:
        points += 25
    elif frequency >= 2400:
        points += 15

    width = observation.channel_width
    if width == 20:
        points += 8
    elif width == 40:
        points += 5
    elif width >= 80:
        points += 2

    congested = 1 <= observation.channel <= 11
    if congested:
        points -= 2

    points = max(0, points)
    reason = f"{frequency} MHz, {width} MHz wide"
    if congested:
        reason += f", congested channel {observation.channel}"
    return SubScore(
        name="channel",
        raw_value=points,
        weight=CHANNEL_WEIGHT,
        reason=f"{reason} ({points} points)",
    )


# =============================================================================
# FEATURE
# =============================================================================

def compute_feature_score(observation: NetworkObservation) -> SubScore:
    points = 0
    notes = []

    if observation.supports_pmf:
        points += 20
        notes.append("PMF")
    if observation.supports_owe:
        points += 15
        notes.append("OWE")
    if observation.supports_wps:
        points -= 10
        notes.append("WPS enabled")
    if observation.is_hidden:
        points -= 5
        notes.append("hidden SSID")

    points = max(0, points)
    summary = ", ".join(notes) if notes else "No notable security features"
    return SubScore(
        name="feature",
        raw_value=points,
        weight=FEATURE_WEIGHT,
        reason=f"{summary} ({points} points)",
    )


# =============================================================================
# CONFIGURATION
# =============================================================================

def compute_configuration_score(observation: NetworkObservation) -> SubScore:
    """
    Signal band, data rate and enterprise bonus.

    A very strong signal (>= -30 dBm) is penalized: the access point
    is close enough to widen the attack surface.
    """
    rssi = observation.signal_strength
    if rssi >= -30:
        points = -5
    elif rssi >= -50:
        points = 2
    elif rssi >= -70:
        points = 5
    else:
        points = 8

    rate = observation.max_data_rate
    if rate >= 1000:
        points += 5
    elif rate >= 100:
        points += 3

    if observation.is_enterprise:
        points += 5

    points = max(0, points)
    return SubScore(
        name="configuration",
        raw_value=points,
        weight=CONFIGURATION_WEIGHT,
        reason=f"Signal {rssi} dBm, {rate} Mbps ({points} points)",
    )


# =============================================================================
# VENDOR
# =============================================================================

ENTERPRISE_VENDORS = ("cisco", "aruba", "ruckus", "ubiquiti")
CONSUMER_VENDORS = ("asus", "netgear", "tp-link")
ISSUE_HISTORY_VENDORS = ("d-link", "linksys")


def compute_vendor_score(observation: NetworkObservation) -> SubScore:
    """
    Case-insensitive substring match against three reputation tiers.

    Empty or unmatched vendors are neutral. The issue-history tier is
    floored back to 0, so it only differs from neutral in the reason.
    """
    vendor = observation.vendor.lower()

    if not vendor:
        points, tier = 0, "no vendor information"
    elif any(name in vendor for name in ENTERPRISE_VENDORS):
        points, tier = 5, "enterprise-grade vendor"
    elif any(name in vendor for name in CONSUMER_VENDORS):
        points, tier = 2, "reputable consumer vendor"
    elif any(name in vendor for name in ISSUE_HISTORY_VENDORS):
        points, tier = -2, "vendor with security issue history"
    else:
        points, tier = 0, "unrated vendor"

    points = max(0, points)
    return SubScore(
        name="vendor",
        raw_value=points,
        weight=VENDOR_WEIGHT,
        reason=f"{tier.capitalize()} ({points} points)",
    )


# =============================================================================
# ADVANCED (THREATS)
# =============================================================================

def compute_advanced_score(observation: NetworkObservation) -> SubScore:
    points = 0
    notes = []

    if observation.is_rogue_ap:
        points -= 25
        notes.append("rogue AP")
    if observation.is_evil_twin:
        points -= 20
        notes.append("evil twin")
    if observation.is_typo_squatting:
        points -= 15
        notes.append("typo-squatting SSID")
    if observation.has_anomalous_behavior:
        points -= 10
        notes.append("anomalous behaviour")

    if observation.beacon_interval < 50:
        points -= 5
        notes.append(f"short beacon interval ({observation.beacon_interval} ms)")
    elif observation.beacon_interval > 200:
        points += 2
        notes.append(f"long beacon interval ({observation.beacon_interval} ms)")

    if observation.responds_to_probes:
        points -= 3
        notes.append("responds to all probes")

    points = max(ADVANCED_FLOOR, points)
    summary = ", ".join(notes) if notes else "No threat indicators"
    return SubScore(
        name="advanced",
        raw_value=points,
        weight=ADVANCED_WEIGHT,
        reason=f"{summary} ({points} points)",
    )


COMPONENTS = (
    compute_encryption_score,
    compute_authentication_score,
    compute_channel_score,
    compute_feature_score,
    compute_configuration_score,
    compute_vendor_score,
    compute_advanced_score,
)
