"""
Fire Data Collector

Synthesizes one record per zone and appends it to the store. Zones are
processed one at a time with a pause between each step so the store is
never hit in parallel.
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from firerisk.schemas import ZoneRecord
from firerisk.services.simulation import synthesize_zone_record, default_zone_record
from firerisk.services.store import StoreError, get_store
from firerisk.services.zones import ZONES

logger = logging.getLogger(__name__)


@dataclass
class ZoneResult:
    """Outcome of collecting one zone; `record` is the default one on failure."""
    zone_name: str
    record: ZoneRecord
    ok: bool = True
    reason: Optional[str] = None


@dataclass
class InsertResult:
    zone_name: str
    ok: bool = True
    reason: Optional[str] = None


@dataclass
class CollectionReport:
    zones: List[ZoneResult] = field(default_factory=list)
    inserts: List[InsertResult] = field(default_factory=list)

    @property
    def records(self):
        return [result.record for result in self.zones]

    @property
    def degraded_count(self):
        return sum(1 for result in self.zones if not result.ok)

    @property
    def saved_count(self):
        return sum(1 for result in self.inserts if result.ok)

    @property
    def failed_inserts(self):
        return [result for result in self.inserts if not result.ok]

    @property
    def all_succeeded(self):
        return self.degraded_count == 0 and not self.failed_inserts


class FireDataCollector:
    """Connect, collect every zone, then persist the records one by one."""
    
    def __init__(self, store, zones=None, zone_delay=0.5, insert_delay=0.2,
                 synthesize=synthesize_zone_record, sleep=time.sleep, now=None):
        self.store = store
        self.zones = list(zones if zones is not None else ZONES)
        self.zone_delay = zone_delay
        self.insert_delay = insert_delay
        self.synthesize = synthesize
        self.sleep = sleep
        
        now = now or datetime.now(timezone.utc)
        self.current_date = now.date()
        self.current_time = now.astimezone().strftime('%H:%M:%S')
    
    def run(self):
        """Run a full collection. StoreError from the connection check propagates."""
        logger.info('Starting fire data collection for %s at %s', self.current_date, self.current_time)
        
        self.check_connection()
        report = CollectionReport()
        report.zones = self.collect_all_zones()
        report.inserts = self.save_records(report.records)
        
        if report.all_succeeded:
            logger.info('Collection finished: %d/%d records saved', report.saved_count, len(report.zones))
        else:
            logger.warning('Collection finished with %d degraded zone(s) and %d failed insert(s); %d/%d records saved',
                           report.degraded_count, len(report.failed_inserts),
                           report.saved_count, len(report.zones))
        return report
    
    def check_connection(self):
        logger.info('Checking store connection...')
        self.store.probe()
        logger.info('Store connection OK')
    
    def collect_all_zones(self):
        logger.info('Collecting data for %d zones...', len(self.zones))
        results = []
        
        for i, zone_name in enumerate(self.zones):
            results.append(self.collect_zone(zone_name))
            if i < len(self.zones) - 1:
                self.sleep(self.zone_delay)
        
        return results
    
    def collect_zone(self, zone_name):
        """Collect one zone. Never raises; failures yield the default record."""
        try:
            record = self.synthesize(zone_name, self.current_date, self.current_time)
        except Exception as e:
            logger.error('Collection failed for zone %s: %s', zone_name, e)
            return ZoneResult(
                zone_name=zone_name,
                record=default_zone_record(zone_name, self.current_date, self.current_time),
                ok=False,
                reason=str(e)
            )
        
        logger.info('%s: risk %d/5 (%s)', zone_name, record.risk_level, record.risk_label)
        return ZoneResult(zone_name=zone_name, record=record)
    
    def save_records(self, records):
        logger.info('Saving %d records...', len(records))
        results = []
        
        for i, record in enumerate(records):
            try:
                self.store.insert(record)
            except StoreError as e:
                logger.error('Failed to save %s: %s', record.zone_name, e)
                results.append(InsertResult(zone_name=record.zone_name, ok=False, reason=str(e)))
            else:
                logger.info('%s saved', record.zone_name)
                results.append(InsertResult(zone_name=record.zone_name))
            
            if i < len(records) - 1:
                self.sleep(self.insert_delay)
        
        return results


def run_collector(config, store=None):
    """Run the collector with the given Flask config. Returns a process exit code."""
    store = store or get_store(config)
    collector = FireDataCollector(
        store,
        zone_delay=config.get('ZONE_DELAY', 0.5),
        insert_delay=config.get('INSERT_DELAY', 0.2)
    )
    try:
        collector.run()
    except StoreError as e:
        logger.error('Collection aborted: %s', e)
        return 1
    return 0
