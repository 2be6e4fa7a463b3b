"""
Per-network security, performance and threat assessment.

Produces structured data for a single observation; presentation is left to
the caller.
"""

from __future__ import annotations

from typing import Optional

from wifi_grader.core.domain.models import NetworkAssessment, NetworkObservation, SecurityProtocol
from wifi_grader.core.services.grading import compute_grade, compute_risk_level
from wifi_grader.core.services.scoring import ScoreCalculator

SIGNAL_QUALITY_THRESHOLDS = (
    (-50, "excellent"),
    (-60, "good"),
    (-70, "fair"),
    (-80, "poor"),
)

PROTOCOL_RISKS = {
    SecurityProtocol.OPEN: "Open network: no encryption, traffic is visible to anyone nearby",
    SecurityProtocol.WEP: "WEP: broken encryption, easily cracked",
    SecurityProtocol.WPA: "WPA: weak encryption, vulnerable to known attacks",
}


def signal_quality(signal_strength: int) -> str:
    for threshold, label in SIGNAL_QUALITY_THRESHOLDS:
        if signal_strength >= threshold:
            return label
    return "very poor"


def detect_threats(observation: NetworkObservation) -> list[str]:
    threats = []
    if observation.is_rogue_ap:
        threats.append("rogue access point")
    if observation.is_evil_twin:
        threats.append("evil twin")
    if observation.is_typo_squatting:
        threats.append("typo-squatting SSID")
    if observation.has_anomalous_behavior:
        threats.append("anomalous behaviour")
    return threats


def build_recommendations(observation: NetworkObservation, threats: list[str]) -> list[str]:
    recommendations = []

    if threats:
        recommendations.append("Do not connect: threat indicators detected")

    if observation.security == SecurityProtocol.OPEN:
        recommendations.append("Never connect to this network; all traffic is visible to anyone nearby")
    elif observation.security == SecurityProtocol.WEP:
        recommendations.append("Avoid this network; its encryption is broken")
    elif observation.security == SecurityProtocol.WPA:
        recommendations.append("Upgrade the access point to WPA2 or WPA3")

    if observation.supports_wps:
        recommendations.append("Disable WPS on the access point")
    if not observation.supports_pmf and observation.security not in (SecurityProtocol.OPEN, SecurityProtocol.WEP):
        recommendations.append("Enable Protected Management Frames (PMF)")
    if 0 < observation.frequency < 5000:
        recommendations.append("2.4 GHz networks are slower and more congested; prefer 5 or 6 GHz")
    if observation.is_enterprise:
        recommendations.append("Enterprise authentication in use")

    return recommendations


def assess_network(
    observation: NetworkObservation,
    score: Optional[int] = None,
) -> NetworkAssessment:
    """Assess one network. The score is computed when not supplied."""
    if score is None:
        score = ScoreCalculator().score(observation)

    threats = detect_threats(observation)
    protocol_risks = []
    if observation.security in PROTOCOL_RISKS:
        protocol_risks.append(PROTOCOL_RISKS[observation.security])
    if observation.supports_wps:
        protocol_risks.append("WPS enabled: PIN brute-force exposure")

    return NetworkAssessment(
        ssid=observation.ssid,
        bssid=observation.bssid,
        protocol=observation.security.display_name,
        score=score,
        grade=compute_grade(score),
        risk_level=compute_risk_level(score),
        band=observation.band,
        signal_quality=signal_quality(observation.signal_strength),
        features={
            "pmf": observation.supports_pmf,
            "owe": observation.supports_owe,
            "wps": observation.supports_wps,
            "enterprise": observation.is_enterprise,
        },
        threats=threats,
        protocol_risks=protocol_risks,
        recommendations=build_recommendations(observation, threats),
    )
