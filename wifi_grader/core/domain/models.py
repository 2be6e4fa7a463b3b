"""Domain models for WiFi Grader."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SecurityProtocol(str, Enum):
    """Security protocol advertised by a wireless network."""
    OPEN = "open"
    WEP = "WEP"
    WPA = "WPA"
    WPA2_PERSONAL = "WPA2-personal"
    WPA2_ENTERPRISE = "WPA2-enterprise"
    WPA3_PERSONAL = "WPA3-personal"
    WPA3_ENTERPRISE = "WPA3-enterprise"
    UNKNOWN = "unknown"

    @property
    def display_name(self) -> str:
        return _PROTOCOL_DISPLAY_NAMES[self]

    @property
    def is_enterprise(self) -> bool:
        return self in (SecurityProtocol.WPA2_ENTERPRISE, SecurityProtocol.WPA3_ENTERPRISE)

    @classmethod
    def parse(cls, label: Any) -> "SecurityProtocol":
        """Map a free-text protocol label to a member.

        Exact values and display names match first. Otherwise the label is
        split into tokens and every token must be a known protocol or
        qualifier word, so "WPA2 EAP" or "WPA-PSK" parse while "WPA9-Mesh"
        does not. Anything unrecognized is UNKNOWN.
        """
        if isinstance(label, cls):
            return label
        if label is None:
            return cls.UNKNOWN

        lowered = str(label).strip().lower()
        for member in cls:
            if lowered in (member.value.lower(), member.display_name.lower()):
                return member
        if lowered in _OPEN_ALIASES:
            return cls.OPEN

        tokens = [token for token in _LABEL_SEPARATORS.split(lowered) if token]
        if not tokens or any(
            token not in _PROTOCOL_TOKENS and token not in _QUALIFIER_TOKENS
            for token in tokens
        ):
            return cls.UNKNOWN

        families = [_PROTOCOL_TOKENS[token] for token in tokens if token in _PROTOCOL_TOKENS]
        if not families:
            return cls.UNKNOWN

        # Transition labels such as "WPA2/WPA3" take the strongest family
        family = max(families, key=_FAMILY_ORDER.index)
        enterprise = any(token in _ENTERPRISE_TOKENS for token in tokens)
        if family == "wpa3":
            return cls.WPA3_ENTERPRISE if enterprise else cls.WPA3_PERSONAL
        if family == "wpa2":
            return cls.WPA2_ENTERPRISE if enterprise else cls.WPA2_PERSONAL
        if family == "wpa":
            return cls.WPA
        return cls.WEP


_PROTOCOL_DISPLAY_NAMES = {
    SecurityProtocol.OPEN: "Open",
    SecurityProtocol.WEP: "WEP",
    SecurityProtocol.WPA: "WPA",
    SecurityProtocol.WPA2_PERSONAL: "WPA2-Personal",
    SecurityProtocol.WPA2_ENTERPRISE: "WPA2-Enterprise",
    SecurityProtocol.WPA3_PERSONAL: "WPA3-Personal",
    SecurityProtocol.WPA3_ENTERPRISE: "WPA3-Enterprise",
    SecurityProtocol.UNKNOWN: "Unknown",
}

_OPEN_ALIASES = frozenset({"none", "--", "unsecured", "no security"})
_LABEL_SEPARATORS = re.compile(r"[\s_/+,()-]+")
_PROTOCOL_TOKENS = {
    "wep": "wep",
    "wpa": "wpa",
    "wpa1": "wpa",
    "wpa2": "wpa2",
    "rsn": "wpa2",
    "wpa3": "wpa3",
    "sae": "wpa3",
}
_FAMILY_ORDER = ("wep", "wpa", "wpa2", "wpa3")
_ENTERPRISE_TOKENS = frozenset({"enterprise", "eap", "802.1x"})
_QUALIFIER_TOKENS = _ENTERPRISE_TOKENS | {
    "psk", "personal", "tkip", "aes", "ccmp", "mixed", "transition", "mode",
}


class SecurityGrade(str, Enum):
    """Ordinal security grade, worst to best."""
    VERY_BAD = "Very Bad"
    BAD = "Bad"
    OKAY = "Okay"
    GOOD = "Good"
    EXCELLENT = "Excellent"

    @property
    def level(self) -> int:
        """Position of the grade on the ordinal scale (0 = Very Bad)."""
        return list(SecurityGrade).index(self)


class RiskLevel(str, Enum):
    """Coarse risk level used by network assessments."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


def frequency_to_channel(frequency: int) -> int:
    """Derive the 802.11 channel number from a centre frequency in MHz.

    Returns 0 when the frequency is outside the 2.4, 5 and 6 GHz bands.
    """
    if 2412 <= frequency <= 2484:
        if frequency == 2484:
            return 14
        return (frequency - 2412) // 5 + 1
    if 5170 <= frequency <= 5825:
        return (frequency - 5170) // 5 + 34
    if 5955 <= frequency <= 7115:
        return (frequency - 5950) // 5
    return 0


class NetworkObservation(BaseModel):
    """A single observed wireless network.

    Immutable value object produced by an acquisition collaborator and
    consumed read-only by the scoring core.
    """

    model_config = ConfigDict(frozen=True)

    # Identity
    ssid: str = Field("", description="Network name, opaque")
    bssid: str = Field("", description="Access point MAC address, opaque")

    # Security
    security: SecurityProtocol = Field(SecurityProtocol.UNKNOWN, description="Security protocol tag")
    is_enterprise: bool = Field(False, description="Enterprise (802.1X) authentication")
    supports_wps: bool = Field(False, description="Wi-Fi Protected Setup enabled")
    supports_pmf: bool = Field(False, description="Protected Management Frames supported")
    supports_owe: bool = Field(False, description="Opportunistic Wireless Encryption supported")
    is_hidden: bool = Field(False, description="SSID is not broadcast")
    is_guest_network: bool = Field(False, description="SSID matches guest network patterns")

    # Radio
    signal_strength: int = Field(0, description="RSSI in dBm")
    frequency: int = Field(0, ge=0, description="Centre frequency in MHz")
    channel: int = Field(0, ge=0, description="Channel number, derived from frequency if absent")
    channel_width: int = Field(20, ge=0, description="Channel width in MHz")
    max_data_rate: int = Field(0, ge=0, description="Maximum data rate in Mbps")
    vendor: str = Field("", description="Access point vendor label")
    capabilities: str = Field("", description="Raw capability text")

    # Threat indicators
    is_rogue_ap: bool = Field(False, description="Potential rogue access point")
    is_evil_twin: bool = Field(False, description="Same SSID seen from a different BSSID")
    is_typo_squatting: bool = Field(False, description="SSID very similar to a known network")
    has_anomalous_behavior: bool = Field(False, description="Unusual network behaviour observed")
    beacon_interval: int = Field(100, ge=0, description="Beacon interval in ms")
    responds_to_probes: bool = Field(False, description="Answers every probe request")

    @model_validator(mode="before")
    @classmethod
    def derive_channel(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("channel"):
            return data
        try:
            frequency = int(data.get("frequency") or 0)
        except (TypeError, ValueError):
            return data
        if frequency > 0:
            data = dict(data)
            data["channel"] = frequency_to_channel(frequency)
        return data

    @field_validator("security", mode="before")
    @classmethod
    def coerce_security(cls, v):
        return SecurityProtocol.parse(v)

    @field_validator("ssid", "bssid", "vendor", "capabilities", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v

    @property
    def band(self) -> str:
        """Frequency band label."""
        if self.frequency >= 5925:
            return "6 GHz"
        if self.frequency >= 5000:
            return "5 GHz"
        if self.frequency >= 2400:
            return "2.4 GHz"
        return "unknown"


class GradedNetwork(BaseModel):
    """An observation together with its score, grade and rank position."""

    model_config = ConfigDict(frozen=True)

    rank: int = Field(..., ge=1, description="1-based position in the ranking")
    observation: NetworkObservation
    score: int = Field(..., ge=0, le=100, description="Security score 0-100")
    grade: SecurityGrade


class NetworkAssessment(BaseModel):
    """Structured security, performance and threat analysis of one network."""

    model_config = ConfigDict(frozen=True)

    ssid: str
    bssid: str
    protocol: str
    score: int = Field(..., ge=0, le=100)
    grade: SecurityGrade
    risk_level: RiskLevel
    band: str
    signal_quality: str
    features: dict = Field(default_factory=dict, description="Security feature flags")
    threats: List[str] = Field(default_factory=list, description="Detected threat indicators")
    protocol_risks: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
