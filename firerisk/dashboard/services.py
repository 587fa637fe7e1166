"""
Dashboard Services

Loads the generated snapshot and turns it into what the dashboard shows:
live records, a "no data yet" notice, or demonstration records when the
snapshot cannot be used.
"""

import json
import logging
import os
import time
from dataclasses import dataclass, field
from typing import List, Optional

import requests
from pydantic import ValidationError

from firerisk.schemas import Meta, Snapshot, Stats, ZoneRecord
from firerisk.services.stats import calculate_stats

logger = logging.getLogger(__name__)


STATUS_MESSAGES = {
    'operational': '🟢 Opérationnel - Données à jour',
    'no_data': '🟡 En attente - Prochaine mise à jour programmée',
    'error': '🔴 Erreur - Données de démonstration affichées',
    'demo': '🎭 Mode démonstration'
}

NO_DATA_MESSAGE = "Les données pour aujourd'hui n'ont pas encore été collectées."
NEXT_UPDATES = '9h, 12h ou 17h30'

DEMO_RECORDS = [
    ZoneRecord(
        zone_name='Var Est',
        risk_level=3,
        risk_color='orange',
        risk_label='Modéré',
        weather_conditions={'temperature': 28, 'humidity': 45, 'wind_speed': 15},
        alerts=['Prudence recommandée'],
        recommendations=['Éviter feux ouverts'],
        data_sources=['Démonstration'],
        update_time='12:00:00'
    ),
    ZoneRecord(
        zone_name='Var Ouest',
        risk_level=4,
        risk_color='red',
        risk_label='Élevé',
        weather_conditions={'temperature': 32, 'humidity': 35, 'wind_speed': 20},
        alerts=['🚨 Risque incendie élevé'],
        recommendations=['Interdiction feux', 'Surveillance renforcée'],
        data_sources=['Démonstration'],
        update_time='12:00:00'
    ),
    ZoneRecord(
        zone_name='Bouches-du-Rhône',
        risk_level=2,
        risk_color='yellow',
        risk_label='Faible',
        weather_conditions={'temperature': 26, 'humidity': 55, 'wind_speed': 10},
        alerts=['✅ Aucune alerte'],
        recommendations=['Surveillance habituelle'],
        data_sources=['Démonstration'],
        update_time='12:00:00'
    )
]


class SnapshotUnavailable(Exception):
    """The snapshot could not be fetched or is not valid JSON."""


@dataclass
class DashboardView:
    """Presentation state after one refresh."""
    state: str
    status: str
    records: List[ZoneRecord] = field(default_factory=list)
    stats: Stats = field(default_factory=Stats)
    meta: Optional[Meta] = None
    error: Optional[str] = None

    @property
    def status_message(self):
        return STATUS_MESSAGES.get(self.status, '⚪ Statut inconnu')

    @property
    def last_update(self):
        if self.records:
            return self.records[0].update_time or 'Inconnue'
        return 'Aucune donnée'

    def to_dict(self):
        return {
            'state': self.state,
            'status': self.status,
            'status_message': self.status_message,
            'error': self.error,
            'last_update': self.last_update,
            'data': [record.model_dump(mode='json', exclude_none=True) for record in self.records],
            'stats': self.stats.model_dump(mode='json'),
            'meta': self.meta.model_dump(mode='json', exclude_none=True) if self.meta else None
        }


def fetch_snapshot(url, session=None, timeout=10):
    """GET the snapshot with a cache-busting `t` parameter and decode it."""
    http = session or requests
    try:
        resp = http.get(url, params={'t': int(time.time() * 1000)}, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise SnapshotUnavailable(f'Snapshot request failed: {e}') from e
    
    if not resp.ok:
        raise SnapshotUnavailable(f'Fichier JSON non trouvé: {resp.status_code}')
    try:
        return resp.json()
    except ValueError as e:
        raise SnapshotUnavailable('Réponse JSON invalide') from e


def read_snapshot_file(path):
    """Same contract as fetch_snapshot for a snapshot on local disk."""
    try:
        with open(path, encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise SnapshotUnavailable('Fichier JSON non trouvé: 404') from e
    except (OSError, ValueError) as e:
        raise SnapshotUnavailable(f'Lecture du fichier JSON impossible: {e}') from e


def demo_view(status='demo', error=None):
    stats = calculate_stats(DEMO_RECORDS).model_copy(update={'status': 'demo'})
    return DashboardView(state='demo_fallback', status=status, records=list(DEMO_RECORDS),
                         stats=stats, error=error)


def interpret_snapshot(payload):
    """Map a decoded snapshot payload to a view. Malformed input yields the demo fallback."""
    if isinstance(payload, dict) and payload.get('data') == []:
        logger.info('No data available for today')
        return DashboardView(state='no_data', status='no_data')
    
    if not isinstance(payload, dict) or not payload.get('success') or not payload.get('data'):
        return demo_view(status='error', error='Structure JSON invalide')
    
    try:
        snapshot = Snapshot.model_validate(payload)
    except ValidationError as e:
        logger.warning('Snapshot failed validation: %s', e)
        return demo_view(status='error', error='Structure JSON invalide')
    
    logger.info('Loaded %d zones', len(snapshot.data))
    return DashboardView(state='rendered', status='operational', records=list(snapshot.data),
                         stats=snapshot.stats, meta=snapshot.meta)


def load_dashboard(fetch):
    """Run one refresh: fetch the snapshot and build the view.
    
    Safe to call repeatedly and concurrently; it holds no state between
    calls. Failures never propagate, they produce the demo fallback with the
    error message for the status banner.
    """
    try:
        payload = fetch()
    except SnapshotUnavailable as e:
        logger.error('Snapshot load failed: %s', e)
        return demo_view(status='error', error=str(e))
    return interpret_snapshot(payload)


def snapshot_loader(config):
    """Build the fetch callable for the configured snapshot source."""
    url = config.get('SNAPSHOT_URL')
    if url:
        timeout = config.get('SNAPSHOT_FETCH_TIMEOUT', 10)
        return lambda: fetch_snapshot(url, timeout=timeout)
    
    path = os.path.join(config['DATA_DIR'], config.get('SNAPSHOT_FILENAME', 'fire-data.json'))
    return lambda: read_snapshot_file(path)


def get_dashboard_view(config):
    if config.get('DEMO_MODE'):
        return demo_view()
    return load_dashboard(snapshot_loader(config))
