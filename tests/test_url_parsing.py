"""Tests for GitHub URL classification."""

import pytest

from prdesc.errors import InvalidInputError
from prdesc.models import CompareTarget, PullRequestTarget
from prdesc.url_parsing import parse_github_url


class TestPullRequestUrls:
    def test_parses_owner_repo_and_number(self):
        target = parse_github_url("https://github.com/acme/widgets/pull/42")
        assert target == PullRequestTarget(owner="acme", repo="widgets", number=42)
        assert target.kind == "pull-request"

    def test_trailing_path_is_ignored(self):
        target = parse_github_url("https://github.com/acme/widgets/pull/7/files")
        assert target.number == 7

    def test_other_host(self):
        target = parse_github_url("https://github.example.com/team/app/pull/3")
        assert target == PullRequestTarget(owner="team", repo="app", number=3, host="github.example.com")

    def test_zero_is_rejected(self):
        with pytest.raises(InvalidInputError, match="Invalid pull number"):
            parse_github_url("https://github.com/acme/widgets/pull/0")

    def test_non_numeric_is_rejected(self):
        with pytest.raises(InvalidInputError, match="Expected format"):
            parse_github_url("https://github.com/acme/widgets/pull/abc")


class TestCompareUrls:
    def test_base_and_head(self):
        target = parse_github_url("https://github.com/acme/widgets/compare/develop...feature-x")
        assert target == CompareTarget(owner="acme", repo="widgets", base="develop", head="feature-x")
        assert target.kind == "compare"
        assert target.basehead == "develop...feature-x"

    def test_single_branch_defaults_base_to_main(self):
        target = parse_github_url("https://github.com/acme/widgets/compare/feature-x")
        assert (target.base, target.head) == ("main", "feature-x")

    def test_keeps_host_for_links(self):
        target = parse_github_url("https://ghe.corp.example/team/app/compare/main...dev?expand=1")
        assert target.host == "ghe.corp.example"
        assert target.html_url == "https://ghe.corp.example/team/app/compare/main...dev"

    def test_branch_names_with_slashes(self):
        target = parse_github_url("https://github.com/acme/widgets/compare/release/1.0...feature/login")
        assert (target.base, target.head) == ("release/1.0", "feature/login")

    @pytest.mark.parametrize("suffix", ["?expand=1", "#files_bucket", "?x=1#frag"])
    def test_query_and_fragment_are_stripped(self, suffix):
        target = parse_github_url(f"https://github.com/acme/widgets/compare/main...dev{suffix}")
        assert (target.base, target.head) == ("main", "dev")

    def test_three_way_comparison_is_rejected(self):
        with pytest.raises(InvalidInputError, match="Invalid comparison format"):
            parse_github_url("https://github.com/acme/widgets/compare/a...b...c")

    def test_empty_side_is_rejected(self):
        with pytest.raises(InvalidInputError):
            parse_github_url("https://github.com/acme/widgets/compare/...dev")


class TestInvalidInput:
    @pytest.mark.parametrize("url", ["", None])
    def test_missing_url(self, url):
        with pytest.raises(InvalidInputError, match="required"):
            parse_github_url(url)

    @pytest.mark.parametrize("url", [
        "https://github.com/acme/widgets",
        "https://github.com/acme/widgets/issues/12",
        "not a url",
    ])
    def test_unrecognized_shapes(self, url):
        with pytest.raises(InvalidInputError) as exc:
            parse_github_url(url)
        assert "/pull/123" in str(exc.value)
        assert "/compare/base...head" in str(exc.value)
