"""
Risk threshold configuration module for the Fire Risk Monitor.

This module contains the RiskThresholds dataclass holding the user-adjustable
limits used by the classifier, and the ThresholdSettings holder through which
those limits are edited. Edits arrive as raw text from the settings form;
either all four values parse and are applied together, or nothing changes.
"""

import logging
import math
import threading
from dataclasses import dataclass, replace
from typing import Optional

from .errors import InvalidInput

logger = logging.getLogger(__name__)


# Defaults carried over from the original desktop application
DEFAULT_TEMPERATURE_THRESHOLD_C = 35.0
DEFAULT_HUMIDITY_THRESHOLD_PCT = 35.0
DEFAULT_WIND_THRESHOLD_MS = 15.0
DEFAULT_PM25_THRESHOLD = 50.0


@dataclass
class RiskThresholds:
    """
    User-editable limits used by the fire risk classifier.
    
    No ordering or positivity constraint is enforced: any finite number the
    user supplies is accepted.
    
    Attributes:
        temperature_threshold_c: Temperature above which heat is a risk factor (°C)
        humidity_threshold_pct: Humidity below which dryness is a risk factor (%)
        wind_threshold_ms: Wind speed above which wind is a risk factor (m/s)
        pm25_threshold: PM2.5 concentration above which air quality is a risk factor (µg/m³)
    """
    
    temperature_threshold_c: float = DEFAULT_TEMPERATURE_THRESHOLD_C
    humidity_threshold_pct: float = DEFAULT_HUMIDITY_THRESHOLD_PCT
    wind_threshold_ms: float = DEFAULT_WIND_THRESHOLD_MS
    pm25_threshold: float = DEFAULT_PM25_THRESHOLD
    
    def to_dict(self) -> dict[str, float]:
        return {
            "temperature_threshold_c": self.temperature_threshold_c,
            "humidity_threshold_pct": self.humidity_threshold_pct,
            "wind_threshold_ms": self.wind_threshold_ms,
            "pm25_threshold": self.pm25_threshold,
        }


def _parse_threshold(text: str) -> float:
    """
    Parses a single threshold value entered by the user.
    
    Raises:
        ValueError: If the text is not a finite floating-point number
    """
    value = float(str(text).strip())
    if not math.isfinite(value):
        raise ValueError(f"non-finite value: {text!r}")
    return value


class ThresholdSettings:
    """
    Holder for the thresholds in effect for the running process.
    
    The thresholds are only changed through update_thresholds() (or reset()),
    and always as a whole: a rejected update leaves every value untouched.
    """
    
    def __init__(self, thresholds: Optional[RiskThresholds] = None):
        self._thresholds = thresholds if thresholds is not None else RiskThresholds()
        self._lock = threading.Lock()
    
    @property
    def current(self) -> RiskThresholds:
        """Returns a snapshot copy of the thresholds currently in effect."""
        with self._lock:
            return replace(self._thresholds)
    
    def update_thresholds(
        self,
        temperature: str,
        humidity: str,
        wind: str,
        pm25: str
    ) -> RiskThresholds:
        """
        Replaces all four thresholds with values parsed from user input.
        
        Each field is parsed independently as a float. If any field fails,
        the whole update is rejected and the previous configuration remains
        in effect.
        
        Args:
            temperature: Temperature threshold text (°C)
            humidity: Humidity threshold text (%)
            wind: Wind speed threshold text (m/s)
            pm25: PM2.5 threshold text (µg/m³)
        
        Returns:
            A snapshot of the newly applied thresholds
        
        Raises:
            InvalidInput: If one or more fields is not a finite number
        """
        raw_values = {
            "temperature": temperature,
            "humidity": humidity,
            "wind": wind,
            "pm25": pm25,
        }
        
        parsed: dict[str, float] = {}
        failed: list[str] = []
        for name, text in raw_values.items():
            try:
                parsed[name] = _parse_threshold(text)
            except (TypeError, ValueError):
                failed.append(name)
        
        if failed:
            logger.warning("Rejected threshold update, invalid fields: %s", ", ".join(failed))
            raise InvalidInput(
                f"Invalid input values for: {', '.join(failed)}",
                fields=tuple(failed)
            )
        
        new_thresholds = RiskThresholds(
            temperature_threshold_c=parsed["temperature"],
            humidity_threshold_pct=parsed["humidity"],
            wind_threshold_ms=parsed["wind"],
            pm25_threshold=parsed["pm25"],
        )
        with self._lock:
            self._thresholds = new_thresholds
        
        logger.info("Thresholds updated: %s", new_thresholds.to_dict())
        return replace(new_thresholds)
    
    def reset(self) -> RiskThresholds:
        """Restores the default thresholds."""
        with self._lock:
            self._thresholds = RiskThresholds()
            return replace(self._thresholds)
