"""
Static Snapshot Generator

Reads today's records from the store and writes them, with statistics, to
the JSON file served to the dashboard. A timestamped backup copy is kept
for every successful run.
"""

import json
import logging
import os
import tempfile
from datetime import datetime, timezone

from firerisk.schemas import Meta, Snapshot
from firerisk.services.stats import calculate_stats, empty_stats
from firerisk.services.store import get_store

logger = logging.getLogger(__name__)

GENERATED_BY = 'Scheduled generator'
SNAPSHOT_VERSION = '1.0.0'
SUCCESS_MESSAGE = 'Données générées automatiquement'
FALLBACK_MESSAGE = 'Données indisponibles - Fichier de secours'


def backup_filename(generated_at):
    """`backup-<ISO timestamp>.json` with `:` and `.` replaced by `-`."""
    stamp = generated_at.astimezone(timezone.utc).strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + 'Z'
    return 'backup-' + stamp.replace(':', '-').replace('.', '-') + '.json'


def write_json_atomic(path, document):
    """Write JSON to a temp file in the same directory, then replace `path`."""
    directory = os.path.dirname(path) or '.'
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix='.tmp-', suffix='.json')
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            json.dump(document, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise


def read_snapshot(path):
    with open(path, encoding='utf-8') as f:
        return Snapshot.model_validate(json.load(f))


class SnapshotGenerator:
    """Builds the current-day snapshot file, or a fallback file on failure."""
    
    def __init__(self, store, data_dir, filename='fire-data.json', now=None):
        self.store = store
        self.data_dir = data_dir
        self.filename = filename
        self._now = now or (lambda: datetime.now(timezone.utc))
        self.current_date = self._now().date()
    
    @property
    def current_path(self):
        return os.path.join(self.data_dir, self.filename)
    
    def run(self):
        """Generate the snapshot. Returns 0 on success, 1 after writing the fallback."""
        logger.info('Generating static JSON for %s', self.current_date)
        try:
            self.ensure_directories()
            records = self.store.fetch_day(self.current_date)
            logger.info('Fetched %d records', len(records))
            snapshot = self.build_snapshot(records)
            self.save_current(snapshot)
            self.save_backup(snapshot)
        except Exception as e:
            logger.exception('Snapshot generation failed: %s', e)
            self.generate_fallback()
            return 1
        
        logger.info('Static JSON generation finished')
        return 0
    
    def ensure_directories(self):
        os.makedirs(self.data_dir, exist_ok=True)
    
    def build_snapshot(self, records):
        stats = calculate_stats(records)
        generated_at = self._now()
        last_update = records[0].update_time if records else \
            generated_at.astimezone().strftime('%H:%M:%S')
        
        logger.debug('Computed stats: %s', stats.model_dump())
        return Snapshot(
            success=True,
            message=SUCCESS_MESSAGE,
            data=records,
            stats=stats,
            meta=Meta(
                generated_at=generated_at,
                generated_by=GENERATED_BY,
                date=self.current_date,
                last_update=last_update,
                total_records=len(records),
                data_source=getattr(self.store, 'name', 'unknown'),
                version=SNAPSHOT_VERSION
            )
        )
    
    def save_current(self, snapshot):
        path = self.current_path
        write_json_atomic(path, snapshot.to_document())
        size_kb = os.path.getsize(path) / 1024
        logger.info('Saved %s (%.2f KB)', path, size_kb)
        return path
    
    def save_backup(self, snapshot):
        """Write a uniquely named backup copy; an existing name is never reused."""
        base = backup_filename(snapshot.meta.generated_at)
        stem, ext = os.path.splitext(base)
        candidate, n = base, 1
        while True:
            path = os.path.join(self.data_dir, candidate)
            try:
                with open(path, 'x', encoding='utf-8') as f:
                    json.dump(snapshot.to_document(), f, indent=2, ensure_ascii=False)
            except FileExistsError:
                candidate = f'{stem}-{n}{ext}'
                n += 1
                continue
            logger.info('Backup saved: %s', path)
            return path
    
    def generate_fallback(self):
        """Overwrite the current file with an error snapshot carrying no data."""
        logger.warning('Writing fallback snapshot')
        fallback = Snapshot(
            success=False,
            message=FALLBACK_MESSAGE,
            data=[],
            stats=empty_stats('error'),
            meta=Meta(
                generated_at=self._now(),
                generated_by=f'{GENERATED_BY} (Fallback)',
                date=self.current_date,
                error=True
            )
        )
        self.ensure_directories()
        return self.save_current(fallback)


def run_generator(config, store=None):
    """Run the generator with the given Flask config. Returns a process exit code."""
    store = store or get_store(config)
    generator = SnapshotGenerator(
        store,
        config['DATA_DIR'],
        filename=config.get('SNAPSHOT_FILENAME', 'fire-data.json')
    )
    return generator.run()
