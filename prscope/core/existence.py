from http import HTTPStatus

from prscope.core.exceptions import OwnerNotFoundError, RepoNotFoundError
from prscope.core.ports.http_gateway import HttpGateway
from prscope.core.ports.logger import Logger
from prscope.core.validation import validate_non_empty_string


class ExistenceChecker:
    def __init__(self, gateway: HttpGateway, logger: Logger) -> None:
        self._gateway = gateway
        self._logger = logger

    def owner_exists(self, owner: str) -> bool:
        validate_non_empty_string(owner, "owner")

        status = self._gateway.check_exists(self._gateway.user_url(owner))
        self._logger.debug("Owner probe", owner=owner, status=status)
        if status == HTTPStatus.NOT_FOUND:
            raise OwnerNotFoundError(owner)
        return status == HTTPStatus.OK

    def repo_exists(self, owner: str, repo: str) -> bool:
        validate_non_empty_string(owner, "owner")
        validate_non_empty_string(repo, "repo")

        status = self._gateway.check_exists(self._gateway.repo_url(owner, repo))
        self._logger.debug("Repository probe", owner=owner, repo=repo, status=status)
        if status == HTTPStatus.NOT_FOUND:
            raise RepoNotFoundError(owner, repo)
        return status == HTTPStatus.OK
