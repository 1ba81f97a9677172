"""Infrastructure API module."""
from .request_gateway import GatewayClosedError, RequestGateway
from .opendota_client import OpenDotaClient

__all__ = [
    'GatewayClosedError',
    'RequestGateway',
    'OpenDotaClient',
]
