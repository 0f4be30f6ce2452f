import pytest
import requests

from prscope.infra.github.client import GitHubHttpClient
from tests.fakes import FakeSession, make_response

API_URL = "https://api.test"


def _client(session: FakeSession, token: str | None = "secret") -> GitHubHttpClient:
    return GitHubHttpClient(token, api_url=f"{API_URL}/", timeout=7.5, session=session)


class TestGitHubHttpClientUrls:
    def test_builds_endpoint_urls(self) -> None:
        client = _client(FakeSession())

        assert client.user_url("octocat") == f"{API_URL}/users/octocat"
        assert client.repo_url("octocat", "Hello-World") == (
            f"{API_URL}/repos/octocat/Hello-World"
        )
        assert client.pulls_url("octocat", "Hello-World") == (
            f"{API_URL}/repos/octocat/Hello-World/pulls"
        )


class TestGitHubHttpClientCheckExists:
    def test_sends_bearer_token_when_configured(self) -> None:
        session = FakeSession(responses=[make_response(200)])
        client = _client(session)

        status = client.check_exists(f"{API_URL}/users/octocat")

        assert status == 200
        request = session.requests[0]
        assert request.method == "HEAD"
        assert request.headers["Authorization"] == "Bearer secret"
        assert "Cache-Control" not in request.headers
        assert request.timeout == 7.5

    def test_omits_authorization_without_token(self) -> None:
        session = FakeSession(responses=[make_response(200)])
        client = _client(session, token=None)

        client.check_exists(f"{API_URL}/users/octocat")

        assert "Authorization" not in session.requests[0].headers

    def test_returns_404_status_instead_of_raising(self) -> None:
        session = FakeSession(responses=[make_response(404)])
        client = _client(session)

        assert client.check_exists(f"{API_URL}/users/ghost") == 404

    def test_raises_for_other_error_statuses(self) -> None:
        session = FakeSession(responses=[make_response(500)])
        client = _client(session)

        with pytest.raises(requests.HTTPError):
            client.check_exists(f"{API_URL}/users/octocat")

    def test_transport_errors_propagate(self) -> None:
        error = requests.ConnectionError("name resolution failed")
        session = FakeSession(responses=[error])
        client = _client(session)

        with pytest.raises(requests.ConnectionError) as exc_info:
            client.check_exists(f"{API_URL}/users/octocat")

        assert exc_info.value is error


class TestGitHubHttpClientFetchPage:
    def test_requests_all_states_with_max_page_size(self) -> None:
        session = FakeSession(
            responses=[
                make_response(
                    200,
                    json_body=[{"id": 1}, {"id": 2}],
                    headers={"Link": '<https://api.test/next>; rel="next"'},
                )
            ]
        )
        client = _client(session)

        page = client.fetch_page(f"{API_URL}/repos/octocat/Hello-World/pulls")

        assert page.records == [{"id": 1}, {"id": 2}]
        assert page.headers["link"] == '<https://api.test/next>; rel="next"'
        request = session.requests[0]
        assert request.method == "GET"
        assert request.params == {"state": "all", "per_page": 100}
        assert request.headers["Authorization"] == "Bearer secret"
        assert request.headers["Cache-Control"] == "no-cache"
        assert request.headers["Accept"] == "application/vnd.github+json"

    def test_no_cache_header_requires_token(self) -> None:
        session = FakeSession(responses=[make_response(200, json_body=[])])
        client = _client(session, token=None)

        client.fetch_page(f"{API_URL}/repos/octocat/Hello-World/pulls")

        headers = session.requests[0].headers
        assert "Authorization" not in headers
        assert "Cache-Control" not in headers

    def test_next_links_keep_their_own_query(self) -> None:
        session = FakeSession(responses=[make_response(200, json_body=[])])
        client = _client(session)
        next_url = f"{API_URL}/repos/octocat/Hello-World/pulls?state=all&per_page=100&page=2"

        client.fetch_page(next_url)

        assert session.requests[0].url == next_url
        assert session.requests[0].params is None

    def test_raises_for_error_status(self) -> None:
        session = FakeSession(responses=[make_response(403, json_body={"message": "rate limited"})])
        client = _client(session)

        with pytest.raises(requests.HTTPError):
            client.fetch_page(f"{API_URL}/repos/octocat/Hello-World/pulls")


class TestGitHubHttpClientLifecycle:
    def test_context_manager_closes_session(self) -> None:
        session = FakeSession()

        with _client(session) as client:
            assert isinstance(client, GitHubHttpClient)

        assert session.closed is True
