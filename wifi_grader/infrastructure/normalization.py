"""
Normalization of raw network records into observation fields.

Acquisition adapters hand over loosely structured dictionaries; the helpers
here fill in the derived fields a record leaves out (channel, width, rate,
guest flag, vendor, capability flags) before validation.
"""

import re
from typing import Any, Dict

from wifi_grader.core.domain.models import SecurityProtocol, frequency_to_channel

GUEST_PATTERNS = (
    "guest", "visitor", "public", "hotel", "cafe", "restaurant",
    "airport", "mall", "library", "university", "college",
    "temporary", "temp", "test", "demo", "free", "open",
)

# Common OUIs; anything else is reported as Unknown
VENDOR_OUIS = {
    "00:1A:11": "Google",
    "00:1B:63": "Apple",
    "00:1C:C0": "Cisco",
    "00:1D:7E": "Netgear",
    "00:1E:40": "Asus",
    "00:1F:3A": "Dell",
    "00:1F:3B": "HP",
}

UNKNOWN_VENDOR = "Unknown"

# Whole-word matches only
PMF_PATTERN = re.compile(r"\b(pmf|protected)\b", re.IGNORECASE)
OWE_PATTERN = re.compile(r"\b(owe|opportunistic)\b", re.IGNORECASE)
WPS_PATTERN = re.compile(r"\bwps\b", re.IGNORECASE)


def normalize_security_label(label: Any) -> SecurityProtocol:
    """Map a free-text security label to a protocol tag."""
    return SecurityProtocol.parse(label)


def channel_to_frequency(channel: int) -> int:
    """Centre frequency in MHz for a 2.4 or 5 GHz channel, 0 when unknown."""
    if 1 <= channel <= 13:
        return 2407 + channel * 5
    if channel == 14:
        return 2484
    if 34 <= channel <= 165:
        return 5000 + channel * 5
    return 0


def estimate_channel_width(frequency: int) -> int:
    """Rough channel width in MHz: 80 on 5 GHz and above, 20 otherwise."""
    return 80 if frequency >= 5000 else 20


def estimate_data_rate(frequency: int, channel_width: int) -> int:
    """Rough maximum data rate in Mbps from band and channel width."""
    if frequency >= 6000:
        return channel_width * 8
    if frequency >= 5000:
        return channel_width * 6
    return channel_width * 4


def detect_guest_network(ssid: str) -> bool:
    lowered = (ssid or "").lower()
    return any(pattern in lowered for pattern in GUEST_PATTERNS)


def lookup_vendor(bssid: str) -> str:
    """Vendor name from the BSSID OUI prefix."""
    if not bssid or len(bssid) < 8:
        return ""
    oui = bssid[:8].upper().replace("-", ":")
    return VENDOR_OUIS.get(oui, UNKNOWN_VENDOR)


def _has_marker(capabilities: str, pattern) -> bool:
    return bool(pattern.search(capabilities or ""))


def check_pmf(capabilities: str) -> bool:
    return _has_marker(capabilities, PMF_PATTERN)


def check_owe(capabilities: str) -> bool:
    return _has_marker(capabilities, OWE_PATTERN)


def check_wps(capabilities: str) -> bool:
    return _has_marker(capabilities, WPS_PATTERN)


def _to_int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def normalize_record(record: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of a raw record with derived fields filled in.

    Fields present in the record are kept as given; only absent ones are
    derived. Invalid values are left for model validation to reject.
    """
    normalized = dict(record)

    protocol = normalize_security_label(normalized.get("security"))
    normalized["security"] = protocol

    ssid = normalized.get("ssid") or ""
    bssid = normalized.get("bssid") or ""
    capabilities = normalized.get("capabilities") or ""

    frequency = _to_int(normalized.get("frequency"))
    channel = _to_int(normalized.get("channel"))
    if not frequency and channel:
        frequency = channel_to_frequency(channel)
        normalized["frequency"] = frequency
    if not channel and frequency:
        normalized["channel"] = frequency_to_channel(frequency)

    if "channel_width" not in normalized and frequency:
        normalized["channel_width"] = estimate_channel_width(frequency)
    if "max_data_rate" not in normalized and frequency:
        normalized["max_data_rate"] = estimate_data_rate(
            frequency, _to_int(normalized.get("channel_width")) or 20
        )

    normalized.setdefault("is_enterprise", protocol.is_enterprise)
    normalized.setdefault("is_hidden", not ssid)
    normalized.setdefault("is_guest_network", detect_guest_network(ssid))
    if not normalized.get("vendor"):
        normalized["vendor"] = lookup_vendor(bssid)

    normalized.setdefault("supports_pmf", check_pmf(capabilities))
    normalized.setdefault("supports_owe", check_owe(capabilities))
    normalized.setdefault("supports_wps", check_wps(capabilities))

    return normalized
