#!/usr/bin/env python3
import argparse
import asyncio
import dataclasses
import json
import logging

from btcexplorer.application import settings
from btcexplorer.application.logging_factory import LoggingFactory
from btcexplorer.services.explorers import VARIANTS, build_explorer

NETWORKS = {
    'bitcoin.mainnet': settings.Network.BITCOIN,
    'bitcoin.testnet': settings.Network.BITCOIN_TESTNET
}

parser = argparse.ArgumentParser(
    description="Rate limited Bitcoin explorer client",
    formatter_class=argparse.ArgumentDefaultsHelpFormatter
)
parser.add_argument(
    '--provider',
    action='store', dest='provider', default=settings.DEFAULT_PROVIDER,
    choices=sorted(VARIANTS),
    help='Explorer to query'
)
parser.add_argument(
    '--network',
    action='store', dest='network', default='bitcoin.mainnet',
    choices=sorted(NETWORKS),
    help=''
)
parser.add_argument(
    '--api-token',
    action='store', dest='api_token', default=None,
    help='Provider API token (blockcypher reads BLOCKCYPHER_API_TOKEN if not provided)'
)
parser.add_argument(
    '--duration-per-call',
    action='store', dest='duration_per_call', default=None, type=float,
    help='Seconds between calls, the provider default if not set'
)
parser.add_argument(
    '--debug',
    action='store_true', dest='debug', default=settings.DEBUG,
    help='Enable debug mode'
)
parser.add_argument(
    'command',
    choices=['address', 'transaction'],
    help='What to fetch'
)
parser.add_argument(
    'values',
    nargs='+',
    help='Addresses or transaction ids'
)


def _as_dict(record):
    return record and dataclasses.asdict(record)


async def run(args):
    explorer = build_explorer(
        provider=args.provider,
        network=NETWORKS[args.network],
        api_token=args.api_token,
        duration_per_call=args.duration_per_call
    )
    if args.command == 'address':
        records = await explorer.getaddresses(*args.values)
    else:
        records = await explorer.gettransactions(*args.values)
    return [_as_dict(record) for record in records]


def enable_debug_logging():
    logging.getLogger('ratelimit').setLevel(logging.DEBUG)
    logging.getLogger('third_party').setLevel(logging.DEBUG)
    LoggingFactory(loglevel=logging.DEBUG, stdout=True)


def main(argv=None):  # pragma: no cover
    args = parser.parse_args(argv)
    if args.debug and not settings.DEBUG:
        enable_debug_logging()
    print(json.dumps(asyncio.run(run(args)), indent=2))


if __name__ == '__main__':  # pragma: no cover
    main()
