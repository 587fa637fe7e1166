"""
Snapshot Schemas

Pydantic models for the records and the snapshot document exchanged
between the generator and the dashboard.
"""

from datetime import date as Date, datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


RISK_LEVELS = (1, 2, 3, 4, 5)

StatsStatus = Literal['normal', 'warning', 'alert', 'no_data', 'error', 'demo']


class Coordinates(BaseModel):
    lat: float
    lng: float


class WeatherConditions(BaseModel):
    """Weather readings for a zone, or an `error` marker when unavailable."""
    temperature: Optional[float] = None
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None
    precipitations: Optional[float] = None
    error: Optional[str] = None

    @property
    def available(self):
        return self.error is None


class ZoneRecord(BaseModel):
    """One risk assessment for one zone at one point in time."""
    model_config = ConfigDict(frozen=True, extra='ignore')

    id: Optional[int] = None
    zone_name: str
    risk_level: int = Field(..., ge=1, le=5)
    risk_color: str
    risk_label: str
    weather_conditions: WeatherConditions
    alerts: List[str] = Field(..., min_length=1)
    recommendations: List[str] = Field(..., min_length=1)
    data_sources: List[str] = Field(default_factory=list)
    date: Optional[Date] = None
    update_time: str
    coordinates: Optional[Coordinates] = None

    def to_row(self):
        """Serialize for a store insert (the store assigns `id`)."""
        return self.model_dump(mode='json', exclude={'id'}, exclude_none=True)


class Stats(BaseModel):
    total_zones: int = 0
    high_risk_zones: int = 0
    average_risk: str = '0.0'
    risk_distribution: Dict[str, int] = Field(
        default_factory=lambda: {str(level): 0 for level in RISK_LEVELS})
    status: StatsStatus = 'no_data'


class Meta(BaseModel):
    generated_at: datetime
    generated_by: str
    date: Date
    last_update: Optional[str] = None
    total_records: Optional[int] = None
    data_source: Optional[str] = None
    version: Optional[str] = None
    error: Optional[bool] = None


class Snapshot(BaseModel):
    """The generated JSON document consumed by the dashboard."""
    success: bool
    message: str
    data: List[ZoneRecord] = Field(default_factory=list)
    stats: Stats
    meta: Meta

    @model_validator(mode='after')
    def _failed_snapshot_has_no_data(self):
        if not self.success and self.data:
            raise ValueError('a failed snapshot cannot carry zone records')
        return self

    def to_document(self):
        return self.model_dump(mode='json', exclude_none=True)
