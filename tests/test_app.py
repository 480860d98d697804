import asyncio
import logging
import unittest
from unittest.mock import Mock, patch

from btcexplorer import app
from btcexplorer.application import settings
from btcexplorer.services.record_types import BTCAddress
from tests.utils import async_coro


class TestApp(unittest.TestCase):
    def setUp(self):
        self.loop = asyncio.new_event_loop()
        self.explorer = Mock()

    def tearDown(self):
        self.loop.close()

    def test_parse_args(self):
        args = app.parser.parse_args(['--provider', 'chainso', '--network', 'bitcoin.testnet', 'address', '1a', '1b'])
        self.assertEqual(args.provider, 'chainso')
        self.assertEqual(args.network, 'bitcoin.testnet')
        self.assertEqual(args.command, 'address')
        self.assertEqual(args.values, ['1a', '1b'])
        self.assertIsNone(args.duration_per_call)

    def test_unknown_provider(self):
        with self.assertRaises(SystemExit):
            app.parser.parse_args(['--provider', 'nope', 'address', '1a'])

    def test_run_addresses(self):
        self.explorer.getaddresses.return_value = async_coro([BTCAddress(address='1a', balance=10), None])
        args = app.parser.parse_args(['--duration-per-call', '2', 'address', '1a', '1b'])
        with patch('btcexplorer.app.build_explorer', Mock(return_value=self.explorer)) as build_explorer:
            res = self.loop.run_until_complete(app.run(args))
        Mock.assert_called_once_with(
            build_explorer,
            provider=settings.DEFAULT_PROVIDER,
            network=settings.Network.BITCOIN,
            api_token=None,
            duration_per_call=2.0
        )
        Mock.assert_called_once_with(self.explorer.getaddresses, '1a', '1b')
        self.assertEqual(res[0]['address'], '1a')
        self.assertEqual(res[0]['balance'], 10)
        self.assertIsNone(res[1])

    def test_run_transactions(self):
        self.explorer.gettransactions.return_value = async_coro([])
        args = app.parser.parse_args(['transaction', 'ff'])
        with patch('btcexplorer.app.build_explorer', Mock(return_value=self.explorer)):
            res = self.loop.run_until_complete(app.run(args))
        self.assertEqual(res, [])
        Mock.assert_called_once_with(self.explorer.gettransactions, 'ff')

    def test_enable_debug_logging(self):
        for name in ('ratelimit', 'third_party'):
            self.addCleanup(logging.getLogger(name).setLevel, logging.getLogger(name).level)
        with patch('btcexplorer.app.LoggingFactory') as logging_factory:
            app.enable_debug_logging()
        Mock.assert_called_once_with(logging_factory, loglevel=logging.DEBUG, stdout=True)
        self.assertEqual(logging.getLogger('ratelimit').level, logging.DEBUG)
        self.assertEqual(logging.getLogger('third_party').level, logging.DEBUG)
