"""Unit tests for shellvars.paths."""

import os
from unittest.mock import patch

from shellvars.paths import augment_path, read_path_list


class TestReadPathList:
    def test_trims_entries_and_drops_blank_lines(self, tmp_path):
        path_list = tmp_path / "paths"
        path_list.write_text("/usr/local/bin\n  /usr/bin  \n\n/bin\n", encoding="utf-8")
        assert read_path_list(path_list) == ["/usr/local/bin", "/usr/bin", "/bin"]


class TestAugmentPath:
    def test_appends_entries_to_existing_path(self, tmp_path):
        path_list = tmp_path / "paths"
        path_list.write_text("/usr/local/bin\n/usr/bin\n", encoding="utf-8")

        result = augment_path({"PATH": "/home/user/bin"}, path_list)

        assert result["PATH"] == os.pathsep.join(["/home/user/bin", "/usr/local/bin", "/usr/bin"])

    def test_sets_path_when_absent(self, tmp_path):
        path_list = tmp_path / "paths"
        path_list.write_text("/usr/bin\n/bin", encoding="utf-8")

        assert augment_path({"HOME": "/home/user"}, path_list) == {
            "HOME": "/home/user",
            "PATH": os.pathsep.join(["/usr/bin", "/bin"]),
        }

    def test_sets_path_when_empty(self, tmp_path):
        path_list = tmp_path / "paths"
        path_list.write_text("/usr/bin\n", encoding="utf-8")

        assert augment_path({"PATH": ""}, path_list)["PATH"] == "/usr/bin"

    def test_missing_file_leaves_env_unchanged(self, tmp_path):
        env = {"PATH": "/bin"}
        assert augment_path(env, tmp_path / "missing") == env

    def test_empty_file_leaves_env_unchanged(self, tmp_path):
        path_list = tmp_path / "paths"
        path_list.write_text("\n  \n", encoding="utf-8")
        assert augment_path({"PATH": "/bin"}, path_list) == {"PATH": "/bin"}

    def test_does_not_mutate_input(self, tmp_path):
        path_list = tmp_path / "paths"
        path_list.write_text("/usr/bin\n", encoding="utf-8")
        env = {"PATH": "/bin"}

        result = augment_path(env, path_list)

        assert env == {"PATH": "/bin"}
        assert result is not env

    def test_unreadable_file_is_logged_and_skipped(self, tmp_path, caplog):
        path_list = tmp_path / "paths"
        path_list.write_text("/usr/bin\n", encoding="utf-8")

        with patch("shellvars.paths.read_path_list", side_effect=PermissionError("denied")):
            assert augment_path({"PATH": "/bin"}, path_list) == {"PATH": "/bin"}
        assert "denied" in caplog.text

    def test_defaults_to_system_path_list(self, tmp_path):
        path_list = tmp_path / "paths"
        path_list.write_text("/opt/bin\n", encoding="utf-8")

        with patch("shellvars.paths.PATH_LIST_FILE", str(path_list)):
            assert augment_path({})["PATH"] == "/opt/bin"
