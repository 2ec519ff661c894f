"""
Risk assessment module for the Fire Risk Monitor.

This module defines the RiskLevel and RiskFactor enumerations and the
RiskAssessment dataclass returned by the FireRiskClassifier. A RiskAssessment
records both the overall categorical level and exactly which of the four
risk predicates (temperature, humidity, wind, air quality) were triggered.
"""

from dataclasses import dataclass, field
from enum import Enum


class RiskLevel(Enum):
    """
    Categorical fire risk level.
    
    Each level carries the status label and indicator colour shown to the
    user.
    """
    
    NORMAL = ("Normal", "Normal Conditions", "green")
    MODERATE = ("Moderate", "Moderate Risk", "yellow")
    HIGH = ("High", "High Fire Risk", "orange")
    CRITICAL = ("Critical", "CRITICAL FIRE RISK!", "red")
    
    def __init__(self, short_name: str, label: str, color: str):
        self.short_name = short_name
        self.label = label
        self.color = color


class RiskFactor(Enum):
    """One of the four independent conditions that contribute to fire risk."""
    
    TEMPERATURE = "Temperature"
    HUMIDITY = "Humidity"
    WIND = "Wind"
    AIR_QUALITY = "AirQuality"


@dataclass(frozen=True)
class RiskAssessment:
    """
    Result of classifying one set of readings against the current thresholds.
    
    Attributes:
        level: Overall fire risk level
        triggered_factors: The risk factors whose predicate held
    """
    
    level: RiskLevel
    triggered_factors: frozenset[RiskFactor] = field(default_factory=frozenset)
    
    @property
    def risk_factor_count(self) -> int:
        """Number of triggered risk factors (0-4)."""
        return len(self.triggered_factors)
    
    @property
    def is_critical(self) -> bool:
        return self.level is RiskLevel.CRITICAL
    
    def to_dict(self) -> dict[str, object]:
        """
        Converts the assessment to a serializable dictionary.
        
        Factors are listed in declaration order so the output is stable.
        """
        return {
            "level": self.level.short_name,
            "triggered_factors": [
                factor.value for factor in RiskFactor if factor in self.triggered_factors
            ],
        }
