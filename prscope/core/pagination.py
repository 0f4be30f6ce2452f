import re
from typing import Dict, List, Mapping, Optional

from prscope.core.ports.http_gateway import HttpGateway
from prscope.core.ports.logger import Logger
from prscope.core.schema.pr import PullRequestRecord

_URL_PATTERN = re.compile(r"<(.*)>")
_REL_PATTERN = re.compile(r'rel="([^"]*)"')


def parse_link_header(header: Optional[str]) -> Dict[str, str]:
    """Parse an RFC 8288 style ``Link`` header into ``{rel: url}``.

    Segments without a ``;`` separator or without a ``rel="..."`` parameter
    are skipped rather than failing the whole header. Callers treat a missing
    ``next`` relation as the end of pagination, so a malformed header simply
    stops paging.
    """
    links: Dict[str, str] = {}
    if not header or not header.strip():
        return links

    for segment in header.split(","):
        url_part, separator, rel_part = segment.partition(";")
        if not separator:
            continue
        rel_match = _REL_PATTERN.search(rel_part)
        if rel_match is None:
            continue
        url = _URL_PATTERN.sub(r"\1", url_part).strip()
        rel = rel_match.group(1).strip()
        if url and rel:
            links[rel] = url
    return links


def _link_header(headers: Mapping[str, str]) -> Optional[str]:
    # requests returns a case-insensitive mapping, plain dicts are not.
    value = headers.get("Link")
    if value is not None:
        return value
    for key, header_value in headers.items():
        if key.lower() == "link":
            return header_value
    return None


class PageAggregator:
    def __init__(self, gateway: HttpGateway, logger: Logger) -> None:
        self._gateway = gateway
        self._logger = logger

    def fetch_all_pages(self, owner: str, repo: str) -> List[PullRequestRecord]:
        records: List[PullRequestRecord] = []
        next_url: Optional[str] = self._gateway.pulls_url(owner, repo)
        page_count = 0

        while next_url:
            page = self._gateway.fetch_page(next_url)
            page_count += 1
            records.extend(page.records)
            self._logger.debug(
                "Fetched pull request page",
                url=next_url,
                page=page_count,
                records=len(page.records),
            )
            next_url = parse_link_header(_link_header(page.headers)).get("next")

        self._logger.info(
            "Pull requests aggregated",
            owner=owner,
            repo=repo,
            pages=page_count,
            total=len(records),
        )
        return records
