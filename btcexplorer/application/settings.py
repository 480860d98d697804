from enum import Enum
import os

from btcexplorer import __version__


class Network(Enum):
    BITCOIN = 1
    BITCOIN_TESTNET = 2


TESTING = os.getenv('TESTING')

# application
DEBUG = bool(os.getenv('BTCEXPLORER_DEBUG'))
NETWORK = Network.BITCOIN
DEFAULT_PROVIDER = 'blockcypher'

# http
HTTP_TIMEOUT = 15
USER_AGENT = 'btcexplorer/%s' % __version__

# rate limits, seconds
RATE_LIMIT_MARGIN = 0.2
BLOCKCYPHER_DURATION_PER_CALL = 0.34
CHAINSO_DURATION_PER_CALL = 1
INSIGHT_DURATION_PER_CALL = 0.5

# third-party secrets
BLOCKCYPHER_API_TOKEN = os.getenv('BLOCKCYPHER_API_TOKEN')

# files
LOGFILE = os.getenv('BTCEXPLORER_LOGFILE')
