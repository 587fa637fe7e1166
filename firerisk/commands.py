"""
Process entry points for the scheduled jobs.

Both return the process exit code: 0 on success, 1 on a fatal failure.
"""

import sys

from firerisk import create_app
from firerisk.logging_setup import setup_logging
from firerisk.services.collector import run_collector
from firerisk.services.snapshot import run_generator


def _run(job):
    app = create_app()
    setup_logging(app.config['LOG_LEVEL'])
    with app.app_context():
        return job(app.config)


def collect():
    """Synthesize and store one record per zone."""
    return _run(run_collector)


def generate():
    """Snapshot today's records into the static JSON file."""
    return _run(run_generator)


def collect_main():
    sys.exit(collect())


def generate_main():
    sys.exit(generate())
