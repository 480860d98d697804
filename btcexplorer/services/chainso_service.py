from typing import Dict

from btcexplorer.application import exceptions, settings
from btcexplorer.application.abstracts import RecordDeserializer
from btcexplorer.application.tools import btc_to_satoshi, normalize_hex
from btcexplorer.services.rate_limited_explorer import ExplorerVariant
from btcexplorer.services.record_types import BTCAddress, BTCTransaction, BTCTxOut


class ChainSoDeserializer(RecordDeserializer):
    """
    chain.so wraps every payload as {"status": ..., "data": {...}}
    """
    @staticmethod
    def _unwrap(data: Dict) -> Dict:
        if data.get('status') != 'success':
            raise ValueError('chain.so status: %s' % data.get('status'))
        return data['data']

    def deserialize(self, data: Dict):
        return self._format(self._unwrap(data))

    def _format(self, data: Dict):
        raise NotImplementedError  # pragma: no cover


class ChainSoAddressDeserializer(ChainSoDeserializer):
    def _format(self, data: Dict):
        balance = btc_to_satoshi(data['balance'])
        received = btc_to_satoshi(data['received_value'])
        return BTCAddress(
            address=data['address'],
            balance=balance,
            total_received=received,
            total_sent=received - balance,
            transaction_count=int(data['total_txs']),
            txids=[tx['txid'] for tx in data.get('txs', [])],
            source='chainso'
        )


class ChainSoTransactionDeserializer(ChainSoDeserializer):
    @staticmethod
    def _format_txout(output: Dict):
        address = output.get('address')
        return BTCTxOut(
            value_satoshi=btc_to_satoshi(output['value']),
            script_hex=output.get('script_hex'),
            addresses=[address] if address else [],
            spent=None if 'spent' not in output else bool(output['spent'])
        )

    def _format(self, data: Dict):
        fee = data.get('fee')
        return BTCTransaction(
            txid=data['txid'],
            blockhash=data.get('blockhash'),
            blockheight=data.get('block_no'),
            confirmations=data.get('confirmations', 0),
            fee=btc_to_satoshi(fee) if fee is not None else None,
            size=data.get('size'),
            time=data.get('time'),
            rawtx=normalize_hex(data.get('tx_hex')),
            outputs=[self._format_txout(output) for output in data.get('outputs', [])],
            source='chainso'
        )


def variant(coin=settings.NETWORK):
    try:
        coin_url = {
            settings.Network.BITCOIN: 'BTC/',
            settings.Network.BITCOIN_TESTNET: 'BTCTEST/'
        }[coin]
    except KeyError:
        raise exceptions.ConfigurationException('chain.so does not support %s' % coin)
    return ExplorerVariant(
        name='chainso',
        baseurl='https://chain.so/api/v2/',
        address_path='address/' + coin_url + '{address}',
        transaction_path='get_tx/' + coin_url + '{txid}',
        create_address_deserializer=ChainSoAddressDeserializer,
        create_transaction_deserializer=ChainSoTransactionDeserializer,
        duration_per_call=settings.CHAINSO_DURATION_PER_CALL,
        throttling_error_codes=(429, )
    )
