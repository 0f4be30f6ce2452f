from tests.fakes.gateway import API_URL, FakeGateway, make_page
from tests.fakes.http import FakeSession, RecordedRequest, make_response
from tests.fakes.logger import FakeLogger

__all__ = [
    "API_URL",
    "FakeGateway",
    "FakeLogger",
    "FakeSession",
    "RecordedRequest",
    "make_page",
    "make_response",
]
