import logging
import sys


def get_log(name, level=None):
    logger = logging.getLogger('intlist.' + name)
    if level is not None:
        logger.setLevel(level)
    return logger


def setup_log(level=logging.INFO):
    logging.basicConfig()
    log = logging.getLogger()
    log.handlers = []
    handler = logging.StreamHandler(stream=sys.stderr)
    formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y.%m.%d %I:%M:%S %p'
        )
    handler.setFormatter(formatter)
    log.addHandler(handler)
    log.setLevel(level)
