"""
History log module for the Fire Risk Monitor.

This module defines the HistoryEntry dataclass, a single record of one
successful poll cycle, and the HistoryLog class, an append-only in-memory
sequence of those records. Entries are kept in insertion order for the
lifetime of the process and are never removed or modified.
"""

import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, Optional

from .air_quality_reading import AirQualityReading
from .weather_reading import WeatherReading


@dataclass(frozen=True)
class HistoryEntry:
    """
    Represents one observation in the history log.
    
    Attributes:
        timestamp: When the observation was recorded (local time)
        temperature_c: Temperature in degrees Celsius
        humidity_pct: Relative humidity in percent
        aqi_index: Air quality index
    """
    
    timestamp: datetime
    temperature_c: float
    humidity_pct: int
    aqi_index: int
    
    def to_display_string(self) -> str:
        """
        Formats the entry as a single history line.
        
        Example: "[2024-07-01T14:05:09] Temp: 40.0°C, Humidity: 20%, AQI: 3"
        """
        return (
            f"[{self.timestamp.isoformat(timespec='seconds')}] "
            f"Temp: {self.temperature_c:.1f}°C, "
            f"Humidity: {self.humidity_pct}%, "
            f"AQI: {self.aqi_index}"
        )
    
    def to_dict(self) -> dict[str, object]:
        """
        Converts the entry to a serializable dictionary.
        
        Useful for tabular display or JSON output.
        """
        return {
            "timestamp": self.timestamp.isoformat(timespec="seconds"),
            "temperature_c": self.temperature_c,
            "humidity_pct": self.humidity_pct,
            "aqi_index": self.aqi_index,
        }


class HistoryLog:
    """
    Append-only, insertion-ordered log of observations.
    
    Growth is unbounded; nothing is ever evicted.
    """
    
    def __init__(self):
        self._entries: list[HistoryEntry] = []
        self._lock = threading.Lock()
    
    def append(
        self,
        weather: WeatherReading,
        air_quality: AirQualityReading,
        timestamp: Optional[datetime] = None
    ) -> HistoryEntry:
        """
        Records a new observation at the end of the log.
        
        Args:
            weather: Weather reading of the cycle
            air_quality: Air quality reading of the cycle
            timestamp: Observation time; defaults to now
        
        Returns:
            The entry that was appended
        """
        entry = HistoryEntry(
            timestamp=timestamp if timestamp is not None else datetime.now(),
            temperature_c=weather.temperature_c,
            humidity_pct=weather.humidity_pct,
            aqi_index=air_quality.aqi_index,
        )
        with self._lock:
            self._entries.append(entry)
        return entry
    
    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        """Snapshot of all entries in chronological order."""
        with self._lock:
            return tuple(self._entries)
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
    
    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self.entries)
    
    def as_text(self) -> str:
        """Returns every entry as a display line, oldest first, one per line."""
        return "\n".join(entry.to_display_string() for entry in self.entries)
    
    def to_records(self) -> list[dict[str, object]]:
        return [entry.to_dict() for entry in self.entries]
