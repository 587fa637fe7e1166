"""
Fire Risk Store

Row-oriented access to the `fire_risk_data` table. Two backends share the
same three operations: a Supabase REST backend for the deployed collector
and a SQLAlchemy backend for local runs and tests.
"""

import logging

import requests
from sqlalchemy.exc import SQLAlchemyError

from firerisk.extensions import db
from firerisk.models import FireRiskRecord
from firerisk.schemas import ZoneRecord

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """The store could not be reached or refused an operation."""


class SupabaseStore:
    """Store backed by the Supabase (PostgREST) REST API."""
    name = 'supabase'
    
    def __init__(self, base_url, api_key, table='fire_risk_data', session=None, timeout=10):
        if not base_url or not api_key:
            raise StoreError('Supabase URL and key are required')
        self.endpoint = f"{base_url.rstrip('/')}/rest/v1/{table}"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'apikey': api_key,
            'Authorization': f'Bearer {api_key}',
            'Content-Type': 'application/json'
        })
    
    def _request(self, method, params=None, json=None, headers=None):
        try:
            resp = self.session.request(method, self.endpoint, params=params, json=json,
                                        headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise StoreError(f'Supabase request failed: {e}') from e
        
        if resp.status_code >= 400:
            try:
                body = resp.json()
            except ValueError:
                body = None
            message = (body.get('message') if isinstance(body, dict) else None) or resp.text
            raise StoreError(f'Supabase error {resp.status_code}: {message}')
        return resp
    
    def probe(self):
        """Single-row existence read; raises StoreError when unreachable."""
        self._request('GET', params={'select': 'id', 'limit': 1})
    
    def fetch_day(self, day):
        resp = self._request('GET', params={
            'select': '*',
            'date': f'eq.{day.isoformat()}',
            'order': 'update_time.desc'
        })
        try:
            rows = resp.json() or []
            return [ZoneRecord.model_validate(row) for row in rows]
        except ValueError as e:
            raise StoreError(f'Unexpected Supabase payload: {e}') from e
    
    def insert(self, record):
        self._request('POST', json=[record.to_row()], headers={'Prefer': 'return=minimal'})


class SQLAlchemyStore:
    """Store backed by the application's SQLAlchemy database."""
    name = 'database'
    
    def __init__(self, session=None):
        self.session = session or db.session
    
    def probe(self):
        try:
            self.session.execute(db.select(FireRiskRecord.id).limit(1)).first()
        except SQLAlchemyError as e:
            raise StoreError(f'Database connection failed: {e}') from e
    
    def fetch_day(self, day):
        try:
            rows = self.session.execute(
                db.select(FireRiskRecord)
                .filter_by(date=day)
                .order_by(FireRiskRecord.update_time.desc(), FireRiskRecord.id.desc())
            ).scalars().all()
        except SQLAlchemyError as e:
            raise StoreError(f'Database query failed: {e}') from e
        return [row.to_record() for row in rows]
    
    def insert(self, record):
        try:
            self.session.add(FireRiskRecord.from_record(record))
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError(f'Database insert failed: {e}') from e


def get_store(config):
    """Pick the store backend from a Flask config mapping."""
    url = config.get('SUPABASE_URL')
    key = config.get('SUPABASE_ANON_KEY')
    if url and key:
        logger.info('Using Supabase store at %s', url)
        return SupabaseStore(url, key, table=config.get('SUPABASE_TABLE', 'fire_risk_data'))
    
    logger.info('Supabase not configured, using SQL store')
    return SQLAlchemyStore()
