from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union


@dataclass(frozen=True)
class PullRequestTarget:
    owner: str
    repo: str
    number: int
    kind: str = "pull-request"
    host: str = "github.com"

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True)
class CompareTarget:
    owner: str
    repo: str
    base: str
    head: str
    kind: str = "compare"
    host: str = "github.com"

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def basehead(self) -> str:
        return f"{self.base}...{self.head}"

    @property
    def html_url(self) -> str:
        return f"https://{self.host}/{self.full_name}/compare/{self.basehead}"


TargetReference = Union[PullRequestTarget, CompareTarget]


@dataclass
class FileChange:
    """One changed file as reported by GitHub, in the host's order."""

    filename: str
    status: str
    additions: int
    deletions: int
    changes: int
    patch: Optional[str] = None


@dataclass
class PullRequestInfo:
    title: str
    body: Optional[str]
    html_url: str
    base_ref: Optional[str] = None
    head_ref: Optional[str] = None
    # PyGithub PullRequest the metadata was read from, reused for the write.
    pull: Any = field(default=None, repr=False, compare=False)


@dataclass
class ExistingPRContext:
    current_title: Optional[str] = None
    current_body: Optional[str] = None
    base_ref: Optional[str] = None
    head_ref: Optional[str] = None


@dataclass
class GeneratedContent:
    title: str
    description: str
