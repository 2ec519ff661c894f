"""
Fire risk classifier module for the Fire Risk Monitor.

This module contains the FireRiskClassifier class which is a pure classifier
for fire risk. It evaluates four independent conditions (heat, dryness, wind
and fine particulate pollution) against the configured thresholds, counts how
many hold, and maps that count to a categorical RiskLevel. It performs no I/O;
raising alerts for critical results is the caller's job.
"""

from .air_quality_reading import AirQualityReading
from .risk_assessment import RiskAssessment, RiskFactor, RiskLevel
from .risk_thresholds import RiskThresholds
from .weather_reading import WeatherReading


class FireRiskClassifier:
    """
    Pure classifier mapping readings and thresholds to a RiskAssessment.
    
    Risk factor count to level mapping, checked from the top:
    - 3 or more factors: CRITICAL
    - 2 factors: HIGH
    - 1 factor: MODERATE
    - no factors: NORMAL
    """
    
    CRITICAL_FACTOR_COUNT = 3
    HIGH_FACTOR_COUNT = 2
    MODERATE_FACTOR_COUNT = 1
    
    def triggered_factors(
        self,
        weather: WeatherReading,
        air_quality: AirQualityReading,
        thresholds: RiskThresholds
    ) -> frozenset[RiskFactor]:
        """
        Evaluates the four risk predicates.
        
        Temperature, wind and PM2.5 are risks when they EXCEED their
        threshold. Humidity is inverted: dry air (humidity BELOW the
        threshold) is the risk.
        
        Args:
            weather: Current weather reading
            air_quality: Current air quality reading
            thresholds: Thresholds in effect
        
        Returns:
            The set of risk factors whose predicate holds
        """
        factors = set()
        
        if weather.temperature_c > thresholds.temperature_threshold_c:
            factors.add(RiskFactor.TEMPERATURE)
        
        # Low humidity is the fire risk
        if weather.humidity_pct < thresholds.humidity_threshold_pct:
            factors.add(RiskFactor.HUMIDITY)
        
        if weather.wind_speed_ms > thresholds.wind_threshold_ms:
            factors.add(RiskFactor.WIND)
        
        if air_quality.pm25 > thresholds.pm25_threshold:
            factors.add(RiskFactor.AIR_QUALITY)
        
        return frozenset(factors)
    
    def level_for_count(self, risk_factors: int) -> RiskLevel:
        """
        Maps a number of triggered risk factors to a RiskLevel.
        
        Args:
            risk_factors: Count of triggered factors (0-4)
        
        Returns:
            The corresponding RiskLevel
        """
        if risk_factors >= self.CRITICAL_FACTOR_COUNT:
            return RiskLevel.CRITICAL
        elif risk_factors >= self.HIGH_FACTOR_COUNT:
            return RiskLevel.HIGH
        elif risk_factors >= self.MODERATE_FACTOR_COUNT:
            return RiskLevel.MODERATE
        else:
            return RiskLevel.NORMAL
    
    def classify(
        self,
        weather: WeatherReading,
        air_quality: AirQualityReading,
        thresholds: RiskThresholds
    ) -> RiskAssessment:
        """
        Classifies the fire risk for one set of readings.
        
        Args:
            weather: Current weather reading
            air_quality: Current air quality reading for the same location
            thresholds: Thresholds in effect
        
        Returns:
            RiskAssessment with the overall level and the triggered factors
        """
        factors = self.triggered_factors(weather, air_quality, thresholds)
        return RiskAssessment(level=self.level_for_count(len(factors)), triggered_factors=factors)


_default_classifier = FireRiskClassifier()


def classify(
    weather: WeatherReading,
    air_quality: AirQualityReading,
    thresholds: RiskThresholds
) -> RiskAssessment:
    """Module-level shortcut for FireRiskClassifier().classify()."""
    return _default_classifier.classify(weather, air_quality, thresholds)
