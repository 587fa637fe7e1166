"""
Services Package

Exports all services for easy importing.
"""

from firerisk.services.risk import get_risk_color, get_risk_label, generate_alerts, generate_recommendations
from firerisk.services.zones import ZONES, get_zone_coordinates
from firerisk.services.simulation import synthesize_zone_record, default_zone_record
from firerisk.services.stats import calculate_stats, empty_stats
from firerisk.services.store import StoreError, SupabaseStore, SQLAlchemyStore, get_store
from firerisk.services.collector import FireDataCollector, run_collector
from firerisk.services.snapshot import SnapshotGenerator, run_generator

__all__ = [
    'get_risk_color',
    'get_risk_label',
    'generate_alerts',
    'generate_recommendations',
    'ZONES',
    'get_zone_coordinates',
    'synthesize_zone_record',
    'default_zone_record',
    'calculate_stats',
    'empty_stats',
    'StoreError',
    'SupabaseStore',
    'SQLAlchemyStore',
    'get_store',
    'FireDataCollector',
    'run_collector',
    'SnapshotGenerator',
    'run_generator'
]
