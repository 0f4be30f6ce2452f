from prscope.infra.github.client import GitHubHttpClient

__all__ = ['GitHubHttpClient']
