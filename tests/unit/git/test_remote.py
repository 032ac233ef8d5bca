"""Tests for remote URL normalization."""

import pytest

from gopen.git.remote import convert_to_https


@pytest.mark.unit
class TestConvertToHttps:
    """Tests for convert_to_https."""

    def test_ssh_shorthand(self) -> None:
        assert convert_to_https("git@github.com:user/repo.git") == "https://github.com/user/repo"

    def test_ssh_shorthand_nested_groups(self) -> None:
        assert convert_to_https("git@gitlab.com:group/sub/repo.git") == "https://gitlab.com/group/sub/repo"

    def test_ssh_shorthand_bitbucket(self) -> None:
        assert convert_to_https("git@bitbucket.org:user/repo.git") == "https://bitbucket.org/user/repo"

    def test_ssh_scheme(self) -> None:
        assert convert_to_https("ssh://git@github.com/user/repo.git") == "https://github.com/user/repo"

    def test_git_scheme(self) -> None:
        assert convert_to_https("git://github.com/user/repo.git") == "https://github.com/user/repo"

    def test_https_passthrough(self) -> None:
        assert convert_to_https("https://github.com/user/repo") == "https://github.com/user/repo"

    def test_https_strips_git_suffix(self) -> None:
        assert convert_to_https("https://github.com/user/repo.git") == "https://github.com/user/repo"

    def test_surrounding_whitespace(self) -> None:
        assert convert_to_https("  git@github.com:user/repo.git\n") == "https://github.com/user/repo"
