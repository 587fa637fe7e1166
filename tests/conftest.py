from datetime import date, datetime, timezone

import pytest

from firerisk import create_app
from firerisk.config import TestConfig
from firerisk.schemas import ZoneRecord
from firerisk.services.risk import get_risk_color, get_risk_label, generate_recommendations
from firerisk.services.store import StoreError


TODAY = date(2026, 7, 14)
NOW = datetime(2026, 7, 14, 10, 30, 15, 123000, tzinfo=timezone.utc)


def make_record(zone_name='Var Est', risk_level=3, update_time='12:00:00', day=TODAY):
    return ZoneRecord(
        zone_name=zone_name,
        risk_level=risk_level,
        risk_color=get_risk_color(risk_level),
        risk_label=get_risk_label(risk_level),
        weather_conditions={'temperature': 30, 'humidity': 40, 'wind_speed': 12, 'precipitations': 1.5},
        alerts=['✅ Aucune alerte'],
        recommendations=generate_recommendations(risk_level),
        data_sources=['Préfecture'],
        date=day,
        update_time=update_time,
        coordinates={'lat': 43.1, 'lng': 6.7}
    )


class FakeStore:
    """In-memory store recording every call."""
    name = 'fake'

    def __init__(self, records=None, probe_error=None, fetch_error=None, failing_zones=()):
        self.records = list(records or [])
        self.inserted = []
        self.probe_error = probe_error
        self.fetch_error = fetch_error
        self.failing_zones = set(failing_zones)
        self.probes = 0

    def probe(self):
        self.probes += 1
        if self.probe_error:
            raise StoreError(self.probe_error)

    def fetch_day(self, day):
        if self.fetch_error:
            raise StoreError(self.fetch_error)
        rows = [r for r in self.records if r.date == day]
        return sorted(rows, key=lambda r: r.update_time, reverse=True)

    def insert(self, record):
        if record.zone_name in self.failing_zones:
            raise StoreError(f'insert refused for {record.zone_name}')
        self.inserted.append(record)


@pytest.fixture()
def app(tmp_path):
    app = create_app(TestConfig)
    app.config['DATA_DIR'] = str(tmp_path / 'data')
    with app.app_context():
        yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def fake_store():
    return FakeStore()
