from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple
from urllib.parse import urlencode

from aiohttp import ClientResponseError
from btcexplorer.application import exceptions, settings
from btcexplorer.application.abstracts import BTCExplorer, RecordDeserializer
from btcexplorer.application.logging_factory import Logger
from btcexplorer.application.ratelimit import RateLimitAvoider
from btcexplorer.services.http_client import HTTPClient, RequestConfig
from btcexplorer.services.record_types import BTCAddress, BTCTransaction
from btcexplorer.services.response_transformer import RecordResponseTransformer


@dataclass(frozen=True)
class ExplorerVariant:
    """
    Everything a provider needs to be queried: endpoints, quota and the
    factories of the deserializers understanding its payloads.
    """
    name: str
    baseurl: str
    address_path: str
    transaction_path: str
    create_address_deserializer: Callable[[], RecordDeserializer]
    create_transaction_deserializer: Callable[[], RecordDeserializer]
    duration_per_call: float = 1
    default_params: Dict[str, str] = field(default_factory=dict)
    api_token_param: Optional[str] = None
    throttling_error_codes: Tuple[int, ...] = ()


class RateLimitedExplorer(BTCExplorer):
    def __init__(self, duration_per_call, variant: ExplorerVariant, httpclient=HTTPClient,
                 api_token=None, margin=settings.RATE_LIMIT_MARGIN):
        super().__init__()
        response_transformer = RecordResponseTransformer(
            variant.create_address_deserializer(),
            variant.create_transaction_deserializer()
        )
        self.request_config = RequestConfig(
            response_transformer=response_transformer,
            headers={'user-agent': settings.USER_AGENT}
        )
        self._rate_limit_avoider = RateLimitAvoider(duration_per_call, margin)
        self.variant = variant
        self.client = httpclient(baseurl=variant.baseurl)
        self.api_token = api_token
        self.throttling_error_codes = variant.throttling_error_codes

    @property
    def rate_limit_avoider(self) -> RateLimitAvoider:
        return self._rate_limit_avoider

    def _build_path(self, template: str, **values) -> str:
        path = template.format(**values)
        params = dict(self.variant.default_params)
        if self.api_token and self.variant.api_token_param:
            params[self.variant.api_token_param] = self.api_token
        if not params:
            return path
        return path + ('&' if '?' in path else '?') + urlencode(params)

    async def get(self, path, record_type=None):
        await self.rate_limit_avoider.acquire()
        try:
            return await self.client.get(path, record_type=record_type, config=self.request_config)
        except exceptions.HTTPClientException as e:
            cause = e.__cause__
            if isinstance(cause, ClientResponseError) and cause.status in self.throttling_error_codes:
                Logger.third_party.warning('throttling %s' % self.variant.name)
            else:
                Logger.third_party.error('Error on %s: %s' % (self.variant.name, cause))
            self._increase_errors()

    async def getaddress(self, address: str):
        return await self.get(self._build_path(self.variant.address_path, address=address), record_type=BTCAddress)

    async def gettransaction(self, txid: str):
        return await self.get(self._build_path(self.variant.transaction_path, txid=txid), record_type=BTCTransaction)

    async def getaddresses(self, *addresses: str):
        return [await self.getaddress(address) for address in addresses]

    async def gettransactions(self, *txids: str):
        return [await self.gettransaction(txid) for txid in txids]
