import logging
import sys


def setup_logging(level='INFO', name='firerisk'):
    """Attach a stdout handler to the package logger.

    The collector and generator run as scheduled jobs whose stdout is the
    only place their progress ends up.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate logs if setup is called multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter('%(asctime)s - [%(levelname)s] - %(name)s - %(message)s')
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    return logger
