from typing import Protocol, runtime_checkable

from prscope.core.schema.pr import Page


@runtime_checkable
class HttpGateway(Protocol):
    def user_url(self, owner: str) -> str: ...

    def repo_url(self, owner: str, repo: str) -> str: ...

    def pulls_url(self, owner: str, repo: str) -> str: ...

    def check_exists(self, url: str) -> int:
        """Issue a HEAD request and return the status code."""
        ...

    def fetch_page(self, url: str) -> Page:
        """Issue a GET request and return the records with the response headers."""
        ...
