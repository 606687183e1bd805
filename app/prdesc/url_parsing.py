from __future__ import annotations

import re

from .errors import InvalidInputError
from .models import CompareTarget, PullRequestTarget, TargetReference

PR_URL_REGEX = re.compile(r"^https?://([^/]+)/([^/]+)/([^/]+)/pull/(\d+)")
COMPARE_URL_REGEX = re.compile(r"^https?://([^/]+)/([^/]+)/([^/]+)/compare/([^?#]+)")

DEFAULT_BASE_BRANCH = "main"


def parse_github_url(url: str) -> TargetReference:
    """Classify ``url`` as a pull request or a compare link.

    Accepted shapes::

        https://github.com/owner/repo/pull/123
        https://github.com/owner/repo/compare/base...head
        https://github.com/owner/repo/compare/head

    A compare link naming a single branch is compared against ``main``.
    """
    if not url or not isinstance(url, str):
        raise InvalidInputError("GitHub URL is required and must be a string")
    url = url.strip()

    pr_match = PR_URL_REGEX.match(url)
    if pr_match:
        host, owner, repo, number_str = pr_match.groups()
        if not owner or not repo or not number_str:
            raise InvalidInputError("Failed to extract owner, repo, or pull number from URL")
        number = int(number_str)
        if number <= 0:
            raise InvalidInputError("Invalid pull number in URL")
        return PullRequestTarget(owner=owner, repo=repo, number=number, host=host)

    compare_match = COMPARE_URL_REGEX.match(url)
    if compare_match:
        host, owner, repo, comparison = compare_match.groups()
        if not owner or not repo or not comparison:
            raise InvalidInputError("Failed to extract owner, repo, or comparison from URL")
        parts = comparison.split("...")
        if len(parts) == 2:
            base, head = parts
        elif len(parts) == 1:
            base, head = DEFAULT_BASE_BRANCH, parts[0]
        else:
            raise InvalidInputError("Invalid comparison format in URL")
        if not base or not head:
            raise InvalidInputError("Invalid comparison format in URL")
        return CompareTarget(owner=owner, repo=repo, base=base, head=head, host=host)

    raise InvalidInputError(
        "Invalid GitHub URL. Expected format: https://github.com/owner/repo/pull/123 "
        "or https://github.com/owner/repo/compare/base...head"
    )
