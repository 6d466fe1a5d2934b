from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Optional, Tuple

class LocationAccuracy(str, Enum):
    HIGH = "high"      # < 10 meters
    MEDIUM = "medium"  # 10-50 meters
    LOW = "low"        # > 50 meters
    UNKNOWN = "unknown"

class PermissionStatus(str, Enum):
    GRANTED = "granted"
    DENIED = "denied"
    UNDETERMINED = "undetermined"

class MarkerColor(str, Enum):
    RED = "red"      # Search results
    GREEN = "green"  # Campus
    BLUE = "blue"    # User

@dataclass
class Position:
    """A single fix from the location provider"""
    latitude: float
    longitude: float
    accuracy: Optional[float] = None
    timestamp: Optional[datetime] = None

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now(timezone.utc)

    @property
    def accuracy_level(self) -> LocationAccuracy:
        """Determine accuracy level based on accuracy value"""
        if self.accuracy is None:
            return LocationAccuracy.UNKNOWN
        elif self.accuracy < 10:
            return LocationAccuracy.HIGH
        elif self.accuracy < 50:
            return LocationAccuracy.MEDIUM
        else:
            return LocationAccuracy.LOW

    def to_dict(self) -> Dict:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "accuracy": self.accuracy,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "accuracy_level": self.accuracy_level.value
        }

@dataclass(frozen=True)
class WatchOptions:
    accuracy: LocationAccuracy = LocationAccuracy.HIGH
    time_interval_ms: int = 1000
    distance_interval_m: float = 1

@dataclass(frozen=True)
class Region:
    """Map camera: center plus zoom deltas"""
    latitude: float
    longitude: float
    latitude_delta: float
    longitude_delta: float

@dataclass(frozen=True)
class MapMarker:
    coordinate: Tuple[float, float]  # (latitude, longitude)
    title: str
    subtitle: Optional[str] = None
    color: MarkerColor = MarkerColor.RED
    key: Optional[str] = field(default=None, compare=False)
