"""
Fire risk monitor module for the Fire Risk Monitor.

This module contains the FireRiskMonitor class, the orchestrator and
application state of the system. It runs the fetch, parse, classify, display
and log cycle for a location, owns the threshold settings and the history
log, tracks the status indicator, and raises the critical-risk alert. Both
the periodic scheduler and the manual "search" trigger go through
run_cycle(), which only ever lets one cycle run at a time.
"""

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from .air_quality_reading import AirQualityReading
from .display import ReadingLabels, format_readings, format_triggered_factors
from .errors import FireRiskError
from .fire_risk_classifier import FireRiskClassifier
from .history_log import HistoryEntry, HistoryLog
from .openweather_client import OpenWeatherClient
from .risk_assessment import RiskAssessment
from .risk_thresholds import RiskThresholds, ThresholdSettings
from .weather_reading import WeatherReading

logger = logging.getLogger(__name__)


class MonitorStatus(Enum):
    """State of the status indicator."""
    
    INITIALIZING = "initializing"
    OK = "ok"
    ERROR = "error"


@dataclass(frozen=True)
class CycleResult:
    """
    Everything produced by one successful poll cycle.
    
    Attributes:
        location: Location that was searched
        weather: Parsed weather reading
        air_quality: Parsed air quality reading
        assessment: Fire risk classification
        history_entry: Entry appended to the history log
        labels: Formatted reading labels for display
    """
    
    location: str
    weather: WeatherReading
    air_quality: AirQualityReading
    assessment: RiskAssessment
    history_entry: HistoryEntry
    labels: ReadingLabels


class FireRiskMonitor:
    """
    Application state and orchestrator for fire risk monitoring.
    
    Owns the thresholds, the history log and the last displayed result. A
    failed cycle never touches any of them; it only flips the status to
    ERROR and records the message until the next successful cycle.
    
    The classifier performs no I/O. When a cycle classifies as CRITICAL the
    monitor calls the on_critical callback exactly once for that cycle.
    """
    
    def __init__(
        self,
        client: Optional[OpenWeatherClient] = None,
        classifier: Optional[FireRiskClassifier] = None,
        settings: Optional[ThresholdSettings] = None,
        history: Optional[HistoryLog] = None,
        on_critical: Optional[Callable[[CycleResult], None]] = None,
        clock: Callable[[], datetime] = datetime.now
    ):
        """
        Initialize the monitor.
        
        Args:
            client: API client; a default OpenWeatherClient is created if None
            classifier: Risk classifier; defaults to FireRiskClassifier()
            settings: Threshold settings; defaults to the built-in thresholds
            history: History log; a new empty log is created if None
            on_critical: Alert hook called once per CRITICAL cycle
            clock: Source of history timestamps
        """
        self.client = client if client is not None else OpenWeatherClient()
        self.classifier = classifier if classifier is not None else FireRiskClassifier()
        self.settings = settings if settings is not None else ThresholdSettings()
        self.history = history if history is not None else HistoryLog()
        self.on_critical = on_critical
        self._clock = clock
        
        self._cycle_lock = threading.Lock()
        self._status = MonitorStatus.INITIALIZING
        self._last_result: Optional[CycleResult] = None
        self._last_error: Optional[str] = None
    
    @property
    def status(self) -> MonitorStatus:
        return self._status
    
    @property
    def last_result(self) -> Optional[CycleResult]:
        """Result of the most recent successful cycle, or None."""
        return self._last_result
    
    @property
    def last_error(self) -> Optional[str]:
        """Message of the most recent failure, cleared by the next success."""
        return self._last_error
    
    @property
    def thresholds(self) -> RiskThresholds:
        """Snapshot of the thresholds currently in effect."""
        return self.settings.current
    
    def update_thresholds(
        self,
        temperature: str,
        humidity: str,
        wind: str,
        pm25: str
    ) -> RiskThresholds:
        """
        Applies a threshold edit from the settings form.
        
        Waits for any running cycle so a cycle never sees half an update.
        
        Raises:
            InvalidInput: If any of the four values is not a number; the
                previous thresholds remain in effect
        """
        with self._cycle_lock:
            return self.settings.update_thresholds(temperature, humidity, wind, pm25)
    
    def run_cycle(self, location: str) -> CycleResult:
        """
        Runs one fetch, classify, display and log cycle for a location.
        
        Steps:
        1. Fetch and parse the current weather for the location
        2. Fetch and parse air quality at the weather coordinates
        3. Classify against the thresholds in effect
        4. Record the result for display and append a history entry
        5. Call the alert hook if the result is CRITICAL
        
        Cycles are serialized: a trigger arriving while another cycle runs
        waits for it to finish.
        
        Args:
            location: Location name to search
        
        Returns:
            The CycleResult of this cycle
        
        Raises:
            FireRiskError: Any ApiRequestFailed, MalformedResponse,
                EmptyResult or InvalidInput from the cycle. The status is
                set to ERROR and all previously displayed data is kept.
        """
        with self._cycle_lock:
            try:
                result = self._run_cycle_locked(location)
            except FireRiskError as e:
                self._status = MonitorStatus.ERROR
                self._last_error = str(e)
                logger.error("Poll cycle for %r failed: %s", location, e)
                raise
        
        # Alert outside the lock so the hook may call back into the monitor
        if result.assessment.is_critical and self.on_critical is not None:
            self.on_critical(result)
        
        return result
    
    def _run_cycle_locked(self, location: str) -> CycleResult:
        location = (location or "").strip()
        
        weather = self.client.fetch_weather(location)
        air_quality = self.client.fetch_air_quality(weather.latitude, weather.longitude)
        assessment = self.classifier.classify(weather, air_quality, self.settings.current)
        
        # Only touch shared state once every step above has succeeded
        history_entry = self.history.append(weather, air_quality, timestamp=self._clock())
        result = CycleResult(
            location=location,
            weather=weather,
            air_quality=air_quality,
            assessment=assessment,
            history_entry=history_entry,
            labels=format_readings(weather, air_quality),
        )
        self._last_result = result
        self._status = MonitorStatus.OK
        self._last_error = None
        
        factors = format_triggered_factors(assessment)
        if assessment.is_critical:
            logger.warning(
                "CRITICAL fire risk at %r (factors: %s)", location, factors
            )
        else:
            logger.info(
                "Fire risk at %r: %s (factors: %s)", location, assessment.level.short_name, factors
            )
        
        return result
