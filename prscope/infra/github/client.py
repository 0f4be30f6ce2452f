from http import HTTPStatus
from typing import Dict, Optional
from urllib.parse import urlsplit

import requests

from prscope.config.settings import DEFAULT_API_URL
from prscope.core.ports.http_gateway import HttpGateway
from prscope.core.schema.pr import Page

API_VERSION = '2022-11-28'
PULLS_PARAMS = {'state': 'all', 'per_page': 100}


class GitHubHttpClient(HttpGateway):
    """requests-backed gateway.

    One instance serves a single query: its session is shared by the owner
    probe, repo probe and page fetch threads of that query and is closed
    afterwards. Build a new client per query rather than sharing one across
    concurrent queries.
    """

    def __init__(
        self,
        token: Optional[str],
        *,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._token = token
        self._api_url = api_url.rstrip('/')
        self._timeout = timeout
        self._session = session or requests.Session()

    def user_url(self, owner: str) -> str:
        return f'{self._api_url}/users/{owner}'

    def repo_url(self, owner: str, repo: str) -> str:
        return f'{self._api_url}/repos/{owner}/{repo}'

    def pulls_url(self, owner: str, repo: str) -> str:
        return f'{self.repo_url(owner, repo)}/pulls'

    def check_exists(self, url: str) -> int:
        response = self._session.head(
            url,
            headers=self._headers(),
            timeout=self._timeout,
        )
        if response.status_code != HTTPStatus.NOT_FOUND:
            response.raise_for_status()
        return response.status_code

    def fetch_page(self, url: str) -> Page:
        # "next" links already carry state, per_page and page.
        params = None if urlsplit(url).query else PULLS_PARAMS
        response = self._session.get(
            url,
            params=params,
            headers=self._headers(no_cache=True),
            timeout=self._timeout,
        )
        response.raise_for_status()
        return Page(records=list(response.json()), headers=response.headers)

    def _headers(self, no_cache: bool = False) -> Dict[str, str]:
        headers = {
            'Accept': 'application/vnd.github+json',
            'X-GitHub-Api-Version': API_VERSION,
        }
        if self._token:
            headers['Authorization'] = f'Bearer {self._token}'
            if no_cache:
                headers['Cache-Control'] = 'no-cache'
        return headers

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> 'GitHubHttpClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        self.close()
