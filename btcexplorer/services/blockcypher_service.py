from typing import Dict

from btcexplorer.application import exceptions, settings
from btcexplorer.application.abstracts import RecordDeserializer
from btcexplorer.application.tools import iso_to_epoch, normalize_hex
from btcexplorer.services.rate_limited_explorer import ExplorerVariant
from btcexplorer.services.record_types import BTCAddress, BTCTransaction, BTCTxOut


class BlockCypherAddressDeserializer(RecordDeserializer):
    def deserialize(self, data: Dict):
        txids = []
        for txref in data.get('unconfirmed_txrefs', []) + data.get('txrefs', []):
            txref['tx_hash'] not in txids and txids.append(txref['tx_hash'])
        return BTCAddress(
            address=data['address'],
            balance=int(data['balance']),
            total_received=int(data['total_received']),
            total_sent=int(data['total_sent']),
            transaction_count=int(data['n_tx']),
            txids=txids,
            source='blockcypher'
        )


class BlockCypherTransactionDeserializer(RecordDeserializer):
    @staticmethod
    def _format_txout(output: Dict):
        return BTCTxOut(
            value_satoshi=int(output['value']),
            script_hex=output.get('script'),
            addresses=output.get('addresses') or [],
            spent=bool(output.get('spent_by', False))
        )

    def deserialize(self, data: Dict):
        blockheight = data.get('block_height')
        return BTCTransaction(
            txid=data['hash'],
            blockhash=data.get('block_hash'),
            blockheight=blockheight if blockheight is not None and blockheight >= 0 else None,
            confirmations=data.get('confirmations', 0),
            fee=data.get('fees'),
            size=data.get('size'),
            time=iso_to_epoch(data.get('confirmed')),
            rawtx=normalize_hex(data.get('hex')),
            outputs=[self._format_txout(output) for output in data.get('outputs', [])],
            source='blockcypher'
        )


def variant(coin=settings.NETWORK):
    try:
        coin_url = {
            settings.Network.BITCOIN: 'btc/main/',
            settings.Network.BITCOIN_TESTNET: 'btc/test3/'
        }[coin]
    except KeyError:
        raise exceptions.ConfigurationException('blockcypher does not support %s' % coin)
    return ExplorerVariant(
        name='blockcypher',
        baseurl='https://api.blockcypher.com/v1/' + coin_url,
        address_path='addrs/{address}',
        transaction_path='txs/{txid}?includeHex=true',
        create_address_deserializer=BlockCypherAddressDeserializer,
        create_transaction_deserializer=BlockCypherTransactionDeserializer,
        duration_per_call=settings.BLOCKCYPHER_DURATION_PER_CALL,
        default_params={'limit': '50'},
        api_token_param='token',
        throttling_error_codes=(429, )
    )
