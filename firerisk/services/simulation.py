"""
Fire Risk Simulation Service

Synthesizes weather-derived risk records for the monitored zones.
"""

import random

from firerisk.schemas import ZoneRecord
from firerisk.services.risk import (
    get_risk_color, get_risk_label, generate_alerts, generate_recommendations
)
from firerisk.services.zones import get_zone_coordinates, DEFAULT_COORDINATES


DATA_SOURCES = ['Préfecture', 'Météo France', 'Géorisques']

DEFAULT_SOURCES = ['Système par défaut']
UNAVAILABLE_WEATHER = 'Données indisponibles'
COLLECTION_ERROR_ALERT = 'Erreur collecte données'
COLLECTION_ERROR_RECOMMENDATION = 'Vérifier sources données'
DEFAULT_RISK_LEVEL = 2
# Degraded records keep the historical orange/Modéré marking, not the level-2 colors
DEFAULT_RISK_COLOR = 'orange'
DEFAULT_RISK_LABEL = 'Modéré'


def synthesize_zone_record(zone_name, day, update_time, rng=None):
    """
    Simulate a risk assessment for one zone.
    
    Args:
        zone_name: Name of the zone
        day: Calendar day of the assessment
        update_time: Wall-clock time string (HH:MM:SS)
        rng: Optional random.Random instance (defaults to the module RNG)
    """
    rng = rng or random
    
    risk_level = rng.randint(1, 5)
    temperature = rng.randint(25, 39)
    humidity = rng.randint(20, 59)
    wind_speed = rng.randint(5, 34)
    precipitations = round(rng.uniform(0, 10), 1)
    
    return ZoneRecord(
        zone_name=zone_name,
        risk_level=risk_level,
        risk_color=get_risk_color(risk_level),
        risk_label=get_risk_label(risk_level),
        weather_conditions={
            'temperature': temperature,
            'humidity': humidity,
            'wind_speed': wind_speed,
            'precipitations': precipitations
        },
        alerts=generate_alerts(risk_level, temperature, humidity, wind_speed),
        recommendations=generate_recommendations(risk_level),
        data_sources=list(DATA_SOURCES),
        date=day,
        update_time=update_time,
        coordinates=get_zone_coordinates(zone_name)
    )


def default_zone_record(zone_name, day, update_time):
    """Degraded record used in place of a zone whose collection failed."""
    return ZoneRecord(
        zone_name=zone_name,
        risk_level=DEFAULT_RISK_LEVEL,
        risk_color=DEFAULT_RISK_COLOR,
        risk_label=DEFAULT_RISK_LABEL,
        weather_conditions={'error': UNAVAILABLE_WEATHER},
        alerts=[COLLECTION_ERROR_ALERT],
        recommendations=[COLLECTION_ERROR_RECOMMENDATION],
        data_sources=list(DEFAULT_SOURCES),
        date=day,
        update_time=update_time,
        coordinates=dict(DEFAULT_COORDINATES)
    )
