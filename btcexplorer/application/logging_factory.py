import logging
import sys
from btcexplorer.application import settings


class LoggingFactory:  # pragma: no cover
    def __init__(self, loglevel=logging.DEBUG, logfile=None, stdout=False):
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        root = logging.getLogger()
        root.setLevel(level=loglevel)

        file_logger = logfile and logging.FileHandler(logfile)
        stdout_logger = stdout and logging.StreamHandler(sys.stdout)

        stdout_logger and stdout_logger.setLevel(loglevel)
        stdout_logger and stdout_logger.setFormatter(formatter)
        stdout_logger and root.addHandler(stdout_logger)

        file_logger and file_logger.setLevel(loglevel)
        file_logger and file_logger.setFormatter(formatter)
        file_logger and root.addHandler(file_logger)

    @property
    def root(self):
        return logging.getLogger('root')

    @property
    def third_party(self):
        return logging.getLogger('third_party')

    @property
    def ratelimit(self):
        return logging.getLogger('ratelimit')


if settings.TESTING:
    Logger = LoggingFactory(
        logfile=None,
        loglevel=logging.DEBUG,
        stdout=True
    )  # type: LoggingFactory

elif settings.DEBUG:  # pragma: no cover
    logging.getLogger('third_party').setLevel(logging.DEBUG)
    logging.getLogger('asyncio').setLevel(logging.INFO)
    logging.getLogger('ratelimit').setLevel(logging.DEBUG)
    Logger = LoggingFactory(
        logfile=settings.LOGFILE,
        loglevel=logging.DEBUG,
        stdout=True
    )  # type: LoggingFactory

else:  # pragma: no cover
    logging.getLogger('aiohttp.access').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.CRITICAL)
    logging.getLogger('ratelimit').setLevel(logging.INFO)
    Logger = LoggingFactory(
        logfile=settings.LOGFILE,
        loglevel=logging.INFO
    )  # type: LoggingFactory
