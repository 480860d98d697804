class BTCExplorerException(Exception):
    pass


class HTTPClientException(BTCExplorerException):
    pass


class DeserializationException(BTCExplorerException):
    pass


class ConfigurationException(BTCExplorerException):
    pass
