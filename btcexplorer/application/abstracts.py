import abc
from typing import Dict
import time


class RecordDeserializer(metaclass=abc.ABCMeta):
    @abc.abstractmethod
    def deserialize(self, data: Dict):
        pass  # pragma: no cover


class BTCExplorer(metaclass=abc.ABCMeta):
    errors_ttl = 5
    max_errors_before_downtime = 1
    throttling_error_codes = ()

    def __init__(self):
        self.errors = []

    @abc.abstractmethod
    async def getaddress(self, address: str):
        pass  # pragma: no cover

    @abc.abstractmethod
    async def gettransaction(self, txid: str):
        pass  # pragma: no cover

    def _increase_errors(self):
        now = int(time.time())
        self.errors.append(now)

    @property
    def available(self):
        now = int(time.time())
        self.errors = [error for error in self.errors if error > now - self.errors_ttl]
        return bool(len(self.errors) < self.max_errors_before_downtime)
