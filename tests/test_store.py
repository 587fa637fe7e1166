from datetime import timedelta

import pytest
import requests

from firerisk.services.collector import FireDataCollector
from firerisk.services.store import SQLAlchemyStore, SupabaseStore, StoreError, get_store

from conftest import TODAY, make_record


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=''):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError('no json')
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.headers = {}
        self.calls = []
        self.response = response or FakeResponse(payload=[])
        self.error = error

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error:
            raise self.error
        return self.response


def test_sql_store_round_trip_filters_and_orders(app):
    store = SQLAlchemyStore()
    store.probe()
    store.insert(make_record('Var Est', 2, '09:00:00'))
    store.insert(make_record('Gard', 5, '17:30:00'))
    store.insert(make_record('Vaucluse', 4, '12:00:00'))
    store.insert(make_record('Hérault', 1, '12:00:00', day=TODAY - timedelta(days=1)))

    records = store.fetch_day(TODAY)

    assert [r.zone_name for r in records] == ['Gard', 'Vaucluse', 'Var Est']
    assert all(r.id is not None for r in records)
    first = records[0]
    assert first.risk_label == 'Très élevé'
    assert first.weather_conditions.precipitations == 1.5
    assert first.coordinates.lat == 43.1


def test_sql_store_empty_day(app):
    assert SQLAlchemyStore().fetch_day(TODAY) == []


def test_supabase_requests():
    session = FakeSession()
    store = SupabaseStore('https://example.supabase.co/', 'anon-key', session=session)

    store.probe()
    store.fetch_day(TODAY)
    store.insert(make_record())

    assert session.headers['apikey'] == 'anon-key'
    assert session.headers['Authorization'] == 'Bearer anon-key'

    method, url, kwargs = session.calls[0]
    assert (method, url) == ('GET', 'https://example.supabase.co/rest/v1/fire_risk_data')
    assert kwargs['params'] == {'select': 'id', 'limit': 1}

    _, _, kwargs = session.calls[1]
    assert kwargs['params'] == {'select': '*', 'date': 'eq.2026-07-14', 'order': 'update_time.desc'}

    method, _, kwargs = session.calls[2]
    assert method == 'POST'
    row = kwargs['json'][0]
    assert row['zone_name'] == 'Var Est'
    assert row['date'] == '2026-07-14'
    assert 'id' not in row


def test_supabase_parses_rows():
    row = make_record('Gard', 5).model_dump(mode='json')
    row['id'] = 12
    row['created_at'] = '2026-07-14T10:00:00+00:00'
    store = SupabaseStore('https://x.supabase.co', 'k', session=FakeSession(FakeResponse(payload=[row])))

    records = store.fetch_day(TODAY)

    assert len(records) == 1
    assert records[0].id == 12
    assert records[0].date == TODAY


def test_supabase_error_status_raises():
    session = FakeSession(FakeResponse(status_code=401, payload={'message': 'Invalid API key'}))
    store = SupabaseStore('https://x.supabase.co', 'bad', session=session)
    with pytest.raises(StoreError, match='Invalid API key'):
        store.probe()


def test_supabase_network_error_raises():
    session = FakeSession(error=requests.exceptions.ConnectionError('refused'))
    store = SupabaseStore('https://x.supabase.co', 'k', session=session)
    with pytest.raises(StoreError):
        store.insert(make_record())


def test_supabase_malformed_rows_raise():
    session = FakeSession(FakeResponse(payload=[{'zone_name': 'Gard'}]))
    store = SupabaseStore('https://x.supabase.co', 'k', session=session)
    with pytest.raises(StoreError):
        store.fetch_day(TODAY)


def test_get_store_picks_backend(app):
    assert isinstance(get_store(app.config), SQLAlchemyStore)

    config = {'SUPABASE_URL': 'https://x.supabase.co', 'SUPABASE_ANON_KEY': 'k'}
    assert isinstance(get_store(config), SupabaseStore)


@pytest.mark.parametrize('payload', [['bad row'], 'bad row', None])
def test_supabase_error_body_that_is_not_an_object(payload):
    response = FakeResponse(status_code=400, payload=payload, text='bad request')
    store = SupabaseStore('https://x.supabase.co', 'k', session=FakeSession(response))
    with pytest.raises(StoreError, match='Supabase error 400: bad request'):
        store.insert(make_record())


class RejectingInsertSession(FakeSession):
    """Reads succeed, every insert gets a 400 with a list body."""

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if method == 'POST':
            return FakeResponse(status_code=400, payload=['bad row'], text='bad row')
        return FakeResponse(payload=[])


def test_collector_survives_rejected_inserts():
    store = SupabaseStore('https://x.supabase.co', 'k', session=RejectingInsertSession())
    report = FireDataCollector(store, sleep=lambda seconds: None).run()

    assert len(report.zones) == 10
    assert report.saved_count == 0
    assert len(report.failed_inserts) == 10
    assert report.failed_inserts[0].reason == 'Supabase error 400: bad row'
