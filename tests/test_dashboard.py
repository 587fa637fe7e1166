import json

import pytest
import requests

from firerisk.dashboard import services
from firerisk.dashboard.services import (
    DEMO_RECORDS, SnapshotUnavailable, fetch_snapshot, load_dashboard, read_snapshot_file
)
from firerisk.services.snapshot import SnapshotGenerator

from conftest import FakeStore, NOW, make_record


def snapshot_payload(records):
    generator = SnapshotGenerator(FakeStore(records=records), '.', now=lambda: NOW)
    return generator.build_snapshot(records).to_document()


def failing_fetch():
    raise SnapshotUnavailable('Fichier JSON non trouvé: 404')


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self.ok = status_code < 400
        self._payload = payload

    def json(self):
        if self._payload is None:
            raise ValueError('Expecting value')
        return self._payload


def test_live_snapshot_is_rendered():
    records = [make_record('Gard', 5, '12:00:01'), make_record('Var Est', 2, '12:00:00')]
    view = load_dashboard(lambda: snapshot_payload(records))

    assert view.state == 'rendered'
    assert view.status == 'operational'
    assert [r.zone_name for r in view.records] == ['Gard', 'Var Est']
    assert view.stats.total_zones == 2
    assert view.meta.generated_at == NOW
    assert view.last_update == '12:00:01'
    assert view.error is None


def test_empty_data_shows_no_data_view():
    view = load_dashboard(lambda: snapshot_payload([]))

    assert view.state == 'no_data'
    assert view.status == 'no_data'
    assert view.records == []
    assert view.error is None
    assert view.last_update == 'Aucune donnée'


def test_network_failure_falls_back_to_demo():
    view = load_dashboard(failing_fetch)

    assert view.state == 'demo_fallback'
    assert view.status == 'error'
    assert view.records == DEMO_RECORDS
    assert len(view.records) == 3
    assert view.error == 'Fichier JSON non trouvé: 404'
    assert view.stats.total_zones == 3
    assert view.stats.high_risk_zones == 1
    assert view.stats.average_risk == '3.0'
    assert view.stats.status == 'demo'


@pytest.mark.parametrize('payload', [
    [],
    'not a snapshot',
    {'success': True},
    {'success': False, 'data': [{'zone_name': 'Gard'}]},
    {'success': True, 'data': [{'zone_name': 'Gard', 'risk_level': 9}]},
])
def test_malformed_snapshot_falls_back_to_demo(payload):
    view = load_dashboard(lambda: payload)
    assert view.state == 'demo_fallback'
    assert view.status == 'error'
    assert view.error == 'Structure JSON invalide'
    assert view.records == DEMO_RECORDS


def test_record_with_empty_alerts_is_rejected():
    payload = snapshot_payload([make_record()])
    payload['data'][0]['alerts'] = []
    assert load_dashboard(lambda: payload).state == 'demo_fallback'


def test_fetch_snapshot_busts_cache(monkeypatch):
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append((url, params, timeout))
        return FakeResponse(payload={'success': True, 'data': []})

    monkeypatch.setattr(services.requests, 'get', fake_get)
    monkeypatch.setattr(services.time, 'time', lambda: 1700000000.5)

    assert fetch_snapshot('https://example.org/data/fire-data.json', timeout=3) == {'success': True, 'data': []}
    assert calls == [('https://example.org/data/fire-data.json', {'t': 1700000000500}, 3)]


def test_fetch_snapshot_http_error(monkeypatch):
    monkeypatch.setattr(services.requests, 'get', lambda url, **kwargs: FakeResponse(status_code=404))
    with pytest.raises(SnapshotUnavailable, match='404'):
        fetch_snapshot('https://example.org/data/fire-data.json')


def test_fetch_snapshot_invalid_json(monkeypatch):
    monkeypatch.setattr(services.requests, 'get', lambda url, **kwargs: FakeResponse(payload=None))
    with pytest.raises(SnapshotUnavailable):
        fetch_snapshot('https://example.org/data/fire-data.json')


def test_fetch_snapshot_network_error(monkeypatch):
    def boom(url, **kwargs):
        raise requests.exceptions.ConnectionError('offline')

    monkeypatch.setattr(services.requests, 'get', boom)
    view = load_dashboard(lambda: fetch_snapshot('https://example.org/data/fire-data.json'))
    assert view.state == 'demo_fallback'
    assert 'offline' in view.error


def test_read_snapshot_file(tmp_path):
    with pytest.raises(SnapshotUnavailable):
        read_snapshot_file(tmp_path / 'missing.json')

    broken = tmp_path / 'broken.json'
    broken.write_text('{not json', encoding='utf-8')
    with pytest.raises(SnapshotUnavailable):
        read_snapshot_file(broken)

    good = tmp_path / 'fire-data.json'
    good.write_text(json.dumps({'success': True, 'data': []}), encoding='utf-8')
    assert read_snapshot_file(good) == {'success': True, 'data': []}
