import asyncio
from dataclasses import dataclass, field
from typing import Dict, Optional

import aiohttp
import async_timeout
from btcexplorer.application import exceptions, settings
from btcexplorer.application.logging_factory import Logger


@dataclass
class RequestConfig:
    response_transformer: Optional[object] = None
    timeout: float = settings.HTTP_TIMEOUT
    headers: Dict[str, str] = field(default_factory=dict)

    def transform(self, data, record_type=None):
        if self.response_transformer is None:
            return data
        return self.response_transformer.transform(data, record_type)


class HTTPClient:
    def __init__(self, baseurl):
        self.baseurl = baseurl

    async def get(self, *a, record_type=None, config: RequestConfig = None, json_response=True, **kw):
        config = config or RequestConfig()
        url = self.baseurl + a[0]
        try:
            async with async_timeout.timeout(config.timeout):
                async with aiohttp.ClientSession() as session:
                    header = dict(config.headers)
                    header['content-type'] = json_response and 'application/json' or 'text/html'
                    response = await session.get(url, headers=header, **kw)
                    response.raise_for_status()
                    res = await response.json() if json_response else await response.read()
        except (aiohttp.ClientResponseError, asyncio.TimeoutError, aiohttp.ClientError, ValueError) as e:
            Logger.third_party.exception('Exception on call: %s' % url)
            raise exceptions.HTTPClientException from e
        if not json_response:
            return res
        return config.transform(res, record_type)
