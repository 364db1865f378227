import pytest

from repo_campaign.domain.errors import ParseError
from repo_campaign.domain.repos_manifest import parse_repo_line, parse_repos_lines


def test_parse_two_segment_line():
    repo = parse_repo_line("org/repo", "repos.txt")

    assert repo.host == ""
    assert repo.org_name == "org"
    assert repo.repo_name == "repo"
    assert repo.branch_name == ""
    assert repo.full_repo_name == "org/repo"


def test_parse_three_segment_line_keeps_host():
    repo = parse_repo_line("github.example.com/org/repo", "repos.txt")

    assert repo.host == "github.example.com"
    assert repo.org_name == "org"
    assert repo.repo_name == "repo"
    assert repo.branch_name == ""
    assert repo.full_repo_name == "github.example.com/org/repo"


def test_parse_branch_suffix():
    repo = parse_repo_line("org/repo@feature", "repos.txt")

    assert repo.repo_name == "repo"
    assert repo.branch_name == "feature"
    assert repo.full_repo_name == "org/repo"


def test_parse_branch_suffix_with_host():
    repo = parse_repo_line("host/org/repo@dev", "repos.txt")

    assert repo.host == "host"
    assert repo.full_repo_name == "host/org/repo"
    assert repo.visible_name == "host/org/repo@dev"


def test_parse_empty_branch_suffix_means_default_branch():
    repo = parse_repo_line("org/repo@", "repos.txt")

    assert repo.repo_name == "repo"
    assert repo.branch_name == ""
    assert repo.full_repo_name == "org/repo"


@pytest.mark.parametrize("line", ["repo", "a/b/c/d", "org/repo@a@b", "org/", "/repo", "org/@dev"])
def test_parse_rejects_malformed_lines(line):
    with pytest.raises(ParseError) as excinfo:
        parse_repo_line(line, "repos.txt")

    assert excinfo.value.line == line
    assert excinfo.value.filename == "repos.txt"
    assert line in str(excinfo.value)


def test_parse_lines_skips_comments_and_blank_lines():
    repos = parse_repos_lines(["# header", "", "org/one", "#org/skipped", "org/two"], "repos.txt")

    assert [repo.full_repo_name for repo in repos] == ["org/one", "org/two"]


def test_parse_lines_dedups_by_first_occurrence():
    repos = parse_repos_lines(["org/a", "org/b", "org/a", "org/c"], "repos.txt")

    assert [repo.repo_name for repo in repos] == ["a", "b", "c"]


def test_parse_lines_dedup_uses_raw_text():
    repos = parse_repos_lines(["org/a", "org/a "], "repos.txt")

    assert len(repos) == 2
    assert repos[1].repo_name == "a "


def test_parse_lines_same_repo_different_branch_are_distinct():
    repos = parse_repos_lines(["org/a", "org/a@dev"], "repos.txt")

    assert [repo.visible_name for repo in repos] == ["org/a", "org/a@dev"]


def test_parse_lines_aborts_on_first_bad_line():
    with pytest.raises(ParseError) as excinfo:
        parse_repos_lines(["org/ok", "a/b/c/d", "org/never"], "custom.txt")

    assert excinfo.value.line == "a/b/c/d"
    assert excinfo.value.filename == "custom.txt"


def test_parse_lines_empty_manifest():
    assert parse_repos_lines([], "repos.txt") == []
    assert parse_repos_lines(["# only comments", ""], "repos.txt") == []


def test_parse_three_segment_line_with_empty_host():
    repo = parse_repo_line("/org/repo", "repos.txt")

    assert repo.host == ""
    assert repo.org_name == "org"
    assert repo.repo_name == "repo"
    assert repo.full_repo_name == "/org/repo"
