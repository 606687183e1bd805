from __future__ import annotations

from typing import Iterable, List, Tuple

import requests
from github import Auth, Github, GithubException

from .config import DEFAULT_GITHUB_API_URL
from .errors import RemoteAPIError
from .models import CompareTarget, FileChange, PullRequestInfo, PullRequestTarget


def get_github_client(token: str, base_url: str = DEFAULT_GITHUB_API_URL) -> Github:
    return Github(auth=Auth.Token(token), base_url=base_url)


def _remote_error(e: Exception) -> RemoteAPIError:
    if isinstance(e, GithubException):
        message = None
        if isinstance(e.data, dict):
            message = e.data.get("message")
        return RemoteAPIError(message or str(e), service="github", status=e.status)
    return RemoteAPIError(str(e), service="github")


def _to_file_changes(files: Iterable) -> List[FileChange]:
    return [
        FileChange(
            filename=f.filename,
            status=f.status,
            additions=f.additions,
            deletions=f.deletions,
            changes=f.changes,
            patch=getattr(f, "patch", None),
        )
        for f in files
    ]


def fetch_pull_request(gh: Github, target: PullRequestTarget) -> Tuple[PullRequestInfo, List[FileChange]]:
    print(f"📦 Fetching GitHub PR {target.full_name}#{target.number} …")
    try:
        repo = gh.get_repo(target.full_name, lazy=True)
        pr = repo.get_pull(target.number)
        files = _to_file_changes(pr.get_files())
        info = PullRequestInfo(
            title=pr.title,
            body=pr.body,
            html_url=pr.html_url,
            base_ref=pr.base.ref if pr.base else None,
            head_ref=pr.head.ref if pr.head else None,
            pull=pr,
        )
    except (GithubException, requests.RequestException) as e:
        raise _remote_error(e) from e
    print(f"   ✅ PR: {info.title}")
    print(f"   📁 Found {len(files)} changed file(s)")
    return info, files


def fetch_comparison(gh: Github, target: CompareTarget) -> List[FileChange]:
    print(f"📦 Fetching comparison {target.full_name} {target.basehead} …")
    try:
        repo = gh.get_repo(target.full_name, lazy=True)
        comparison = repo.compare(target.base, target.head)
        files = _to_file_changes(comparison.files or [])
    except (GithubException, requests.RequestException) as e:
        raise _remote_error(e) from e
    print(f"   📁 Found {len(files)} changed file(s)")
    return files


def update_pr_description(gh: Github, target: PullRequestTarget, description: str, pull=None) -> None:
    """Overwrite the PR body; a concurrent edit made since the read is lost.

    Pass the ``PullRequest`` already fetched as ``pull`` to skip re-reading it.
    """
    print(f"✍️  Updating description of {target.full_name}#{target.number} …")
    try:
        pr = pull
        if pr is None:
            pr = gh.get_repo(target.full_name, lazy=True).get_pull(target.number)
        pr.edit(body=description)
    except (GithubException, requests.RequestException) as e:
        raise _remote_error(e) from e
    print("   ✅ PR description updated")
