from btcexplorer.application import exceptions
from btcexplorer.application.abstracts import RecordDeserializer
from btcexplorer.application.logging_factory import Logger
from btcexplorer.services.record_types import BTCAddress, BTCTransaction


class RecordResponseTransformer:
    """
    Turns decoded JSON payloads into records.

    Requests for BTCAddress and BTCTransaction go through the matching
    deserializer, anything else is returned untouched.
    """
    def __init__(self, address_deserializer: RecordDeserializer, transaction_deserializer: RecordDeserializer):
        self._deserializers = {
            BTCAddress: address_deserializer,
            BTCTransaction: transaction_deserializer
        }

    def transform(self, data, record_type=None):
        deserializer = self._deserializers.get(record_type)
        if deserializer is None or data is None:
            return data
        try:
            return deserializer.deserialize(data)
        except (KeyError, IndexError, TypeError, ValueError, ArithmeticError) as e:
            Logger.third_party.error(
                'Cannot deserialize %s with %s: %r', record_type.__name__, deserializer.__class__.__name__, e
            )
            raise exceptions.DeserializationException(
                'Malformed %s payload' % record_type.__name__
            ) from e
