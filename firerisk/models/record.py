"""
Fire Risk Record Model
"""

from firerisk.extensions import db
from firerisk.schemas import ZoneRecord


class FireRiskRecord(db.Model):
    """One persisted zone assessment; rows are only ever inserted."""
    __tablename__ = 'fire_risk_data'
    
    id = db.Column(db.Integer, primary_key=True)
    zone_name = db.Column(db.String(100), nullable=False)
    risk_level = db.Column(db.Integer, nullable=False)
    risk_color = db.Column(db.String(20), nullable=False)
    risk_label = db.Column(db.String(50), nullable=False)
    weather_conditions = db.Column(db.JSON, nullable=False)
    alerts = db.Column(db.JSON, nullable=False)
    recommendations = db.Column(db.JSON, nullable=False)
    data_sources = db.Column(db.JSON)
    date = db.Column(db.Date, index=True)
    update_time = db.Column(db.String(8), nullable=False)
    coordinates = db.Column(db.JSON)
    created_at = db.Column(db.DateTime, default=db.func.current_timestamp())
    
    @classmethod
    def from_record(cls, record):
        return cls(**record.model_dump(exclude={'id'}, exclude_none=True))
    
    def to_record(self):
        return ZoneRecord(
            id=self.id,
            zone_name=self.zone_name,
            risk_level=self.risk_level,
            risk_color=self.risk_color,
            risk_label=self.risk_label,
            weather_conditions=self.weather_conditions,
            alerts=self.alerts,
            recommendations=self.recommendations,
            data_sources=self.data_sources or [],
            date=self.date,
            update_time=self.update_time,
            coordinates=self.coordinates
        )
    
    def __repr__(self):
        return f'<FireRiskRecord {self.zone_name} {self.date} level:{self.risk_level}>'
