from btcexplorer.application import exceptions, settings
from btcexplorer.services import blockcypher_service, chainso_service, insight_service
from btcexplorer.services.http_client import HTTPClient
from btcexplorer.services.rate_limited_explorer import RateLimitedExplorer

VARIANTS = {
    'blockcypher': blockcypher_service.variant,
    'chainso': chainso_service.variant,
    'insight': insight_service.variant,
}


def get_variant(provider: str, network=settings.NETWORK):
    try:
        variant_factory = VARIANTS[provider]
    except KeyError:
        raise exceptions.ConfigurationException(
            'Unknown provider: %s (available: %s)' % (provider, ', '.join(sorted(VARIANTS)))
        )
    return variant_factory(network)


def build_explorer(provider=settings.DEFAULT_PROVIDER, network=settings.NETWORK, api_token=None,
                   duration_per_call=None, httpclient=HTTPClient) -> RateLimitedExplorer:
    variant = get_variant(provider, network)
    if api_token is None and provider == 'blockcypher':
        api_token = settings.BLOCKCYPHER_API_TOKEN
    return RateLimitedExplorer(
        variant.duration_per_call if duration_per_call is None else duration_per_call,
        variant,
        httpclient=httpclient,
        api_token=api_token
    )
