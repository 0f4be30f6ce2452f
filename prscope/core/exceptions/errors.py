class PRScopeError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(PRScopeError):
    pass


class ValidationError(PRScopeError):
    pass


class IdentifierTypeError(ValidationError, TypeError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Expected a string but received: {type(value).__name__}"
        )


class EmptyValueError(ValidationError, ValueError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Expected a non-empty string for {name} but received an empty string"
        )


class InvalidDateError(ValidationError, ValueError):
    def __init__(self, message: str, value: object) -> None:
        self.value = value
        super().__init__(message)


class DateRangeOrderError(ValidationError, ValueError):
    def __init__(self, start_date: str, end_date: str) -> None:
        self.start_date = start_date
        self.end_date = end_date
        super().__init__(
            f"End date {end_date} cannot be before start date {start_date}"
        )


class SourceNotFoundError(PRScopeError):
    def __init__(self, message: str, resource: str) -> None:
        self.resource = resource
        super().__init__(message)


class OwnerNotFoundError(SourceNotFoundError):
    def __init__(self, owner: str) -> None:
        self.owner = owner
        super().__init__(f"repository owner {owner} not found", owner)


class RepoNotFoundError(SourceNotFoundError):
    def __init__(self, owner: str, repo: str) -> None:
        self.owner = owner
        self.repo = repo
        super().__init__(
            f"repository {repo} for owner {owner} not found",
            f"{owner}/{repo}",
        )
