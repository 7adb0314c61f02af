import logging

from .config import loadConfig, setupLogging
from .UI import UI

log = logging.getLogger(__name__)

def main() -> None:
    config = loadConfig()
    setupLogging(config)
    log.info('Starting with refresh every %s s', config.refresh_interval)
    UI(config=config).run()

if __name__ == '__main__':
    main()
