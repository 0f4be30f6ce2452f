from prscope.core.ports.http_gateway import HttpGateway
from prscope.core.ports.logger import Logger

__all__ = [
    "HttpGateway",
    "Logger",
]
