import asyncio
import json
import unittest
from unittest.mock import AsyncMock, MagicMock, Mock, patch

import aiohttp

from btcexplorer.application import exceptions
from btcexplorer.services.http_client import HTTPClient, RequestConfig
from btcexplorer.services.record_types import BTCAddress


class TestHTTPClient(unittest.TestCase):
    def setUp(self):
        self.loop = asyncio.new_event_loop()
        self.sut = HTTPClient('https://explorer.test/api/')
        self.response = Mock()
        self.response.json = AsyncMock(return_value={'addrStr': '1abc'})
        self.response.read = AsyncMock(return_value=b'raw')
        self.session = MagicMock()
        self.session.get = AsyncMock(return_value=self.response)
        patcher = patch('btcexplorer.services.http_client.aiohttp.ClientSession')
        self.client_session = patcher.start()
        self.client_session.return_value.__aenter__.return_value = self.session
        self.addCleanup(patcher.stop)

    def tearDown(self):
        self.loop.close()

    def test_get_json(self):
        res = self.loop.run_until_complete(self.sut.get('addr/1abc'))
        self.assertEqual(res, {'addrStr': '1abc'})
        Mock.assert_called_once_with(
            self.session.get,
            'https://explorer.test/api/addr/1abc',
            headers={'content-type': 'application/json'}
        )

    def test_get_raw(self):
        res = self.loop.run_until_complete(self.sut.get('rawtx/ff', json_response=False))
        self.assertEqual(res, b'raw')
        Mock.assert_called_once_with(
            self.session.get,
            'https://explorer.test/api/rawtx/ff',
            headers={'content-type': 'text/html'}
        )

    def test_get_applies_the_config(self):
        transformer = Mock()
        transformer.transform.return_value = 'record'
        config = RequestConfig(response_transformer=transformer, headers={'user-agent': 'btcexplorer'})
        res = self.loop.run_until_complete(self.sut.get('addr/1abc', record_type=BTCAddress, config=config))
        self.assertEqual(res, 'record')
        Mock.assert_called_once_with(transformer.transform, {'addrStr': '1abc'}, BTCAddress)
        Mock.assert_called_once_with(
            self.session.get,
            'https://explorer.test/api/addr/1abc',
            headers={'user-agent': 'btcexplorer', 'content-type': 'application/json'}
        )
        self.assertEqual(config.headers, {'user-agent': 'btcexplorer'})

    def test_http_error(self):
        error = aiohttp.ClientResponseError(Mock(), (), status=404)
        self.response.raise_for_status.side_effect = error
        with self.assertRaises(exceptions.HTTPClientException) as ctx:
            self.loop.run_until_complete(self.sut.get('addr/1abc'))
        self.assertIs(ctx.exception.__cause__, error)

    def test_invalid_json(self):
        self.response.json = AsyncMock(side_effect=json.JSONDecodeError('Expecting value', '<html>busy</html>', 0))
        with self.assertRaises(exceptions.HTTPClientException) as ctx:
            self.loop.run_until_complete(self.sut.get('addr/1abc'))
        self.assertIsInstance(ctx.exception.__cause__, json.JSONDecodeError)

    def test_connection_error(self):
        self.session.get.side_effect = aiohttp.ClientConnectionError
        with self.assertRaises(exceptions.HTTPClientException) as ctx:
            self.loop.run_until_complete(self.sut.get('addr/1abc'))
        self.assertIsInstance(ctx.exception.__cause__, aiohttp.ClientConnectionError)

    def test_timeout(self):
        async def slow(*a, **kw):
            await asyncio.sleep(1)

        self.session.get.side_effect = slow
        with self.assertRaises(exceptions.HTTPClientException) as ctx:
            self.loop.run_until_complete(self.sut.get('addr/1abc', config=RequestConfig(timeout=0.01)))
        self.assertIsInstance(ctx.exception.__cause__, asyncio.TimeoutError)
