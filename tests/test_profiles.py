"""Unit tests for shellvars.profiles."""

from pathlib import Path
from unittest.mock import patch

from shellvars.profiles import find_profiles, profile_candidates, shell_name


class TestShellName:
    def test_absolute_path(self):
        assert shell_name("/bin/zsh") == "zsh"

    def test_bare_name(self):
        assert shell_name("bash") == "bash"


class TestProfileCandidates:
    def test_bash_candidates_in_precedence_order(self, tmp_path):
        assert profile_candidates("bash", tmp_path) == [
            tmp_path / ".bash_profile",
            tmp_path / ".bash_login",
            tmp_path / ".profile",
            tmp_path / ".bashrc",
        ]

    def test_shell_name_replaces_bash_token(self, tmp_path):
        assert profile_candidates("zsh", tmp_path) == [
            tmp_path / ".zsh_profile",
            tmp_path / ".zsh_login",
            tmp_path / ".profile",
            tmp_path / ".zshrc",
        ]

    def test_defaults_to_user_home(self):
        with patch("shellvars.profiles.Path.home", return_value=Path("/home/user")):
            candidates = profile_candidates("bash")
        assert candidates[0] == Path("/home/user/.bash_profile")


class TestFindProfiles:
    def test_returns_only_existing_files_in_order(self, tmp_path):
        (tmp_path / ".bashrc").write_text("export A=1\n", encoding="utf-8")
        (tmp_path / ".bash_profile").write_text("export B=2\n", encoding="utf-8")

        assert find_profiles("bash", tmp_path) == [
            tmp_path / ".bash_profile",
            tmp_path / ".bashrc",
        ]

    def test_no_profiles_is_empty_not_an_error(self, tmp_path):
        assert find_profiles("bash", tmp_path) == []

    def test_directories_are_not_profiles(self, tmp_path):
        (tmp_path / ".profile").mkdir()
        assert find_profiles("bash", tmp_path) == []

    def test_probes_filesystem_on_every_call(self, tmp_path):
        assert find_profiles("zsh", tmp_path) == []
        (tmp_path / ".zshrc").write_text("", encoding="utf-8")
        assert find_profiles("zsh", tmp_path) == [tmp_path / ".zshrc"]
