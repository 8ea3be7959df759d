"""Tests for issue_hooks/cli/install.py."""

import os
import sys
from unittest.mock import Mock, patch

import pytest
from click.testing import CliRunner

from issue_hooks.cli.install import HOOK_MARKER, HookInstaller, install_command, is_managed_hook, render_shim
from issue_hooks.enums import HookName
from issue_hooks.exceptions import HookInstallError
from issue_hooks.git.exceptions import NotGitRepositoryError


@pytest.fixture
def hooks_dir(tmp_path):
    return tmp_path / ".git" / "hooks"


@pytest.fixture
def repository(hooks_dir):
    repository = Mock()
    repository.hooks_dir.return_value = hooks_dir
    return repository


class TestRenderShim:
    """Tests for the generated hook scripts."""

    def test_contents(self):
        """Test the shim runs the module for its hook."""
        shim = render_shim(HookName.PREPARE_COMMIT_MSG, python="/opt/venv/bin/python")

        assert shim.startswith("#!/bin/sh\n")
        assert HOOK_MARKER in shim
        assert 'exec /opt/venv/bin/python -m issue_hooks run prepare-commit-msg "$@"' in shim

    def test_quotes_interpreter_path(self):
        """Test interpreter paths with spaces are quoted."""
        shim = render_shim(HookName.COMMIT_MSG, python="/Users/me/My Envs/bin/python")

        assert "exec '/Users/me/My Envs/bin/python' -m issue_hooks run commit-msg" in shim

    def test_defaults_to_current_interpreter(self):
        """Test sys.executable is used when no interpreter is given."""
        with patch.object(sys, "executable", "/usr/bin/python3"):
            assert "exec /usr/bin/python3 -m issue_hooks" in render_shim(HookName.COMMIT_MSG)


class TestIsManagedHook:
    """Tests for is_managed_hook."""

    def test_managed(self, tmp_path):
        """Test a shim written by this tool is recognised."""
        path = tmp_path / "commit-msg"
        path.write_text(render_shim(HookName.COMMIT_MSG))

        assert is_managed_hook(path)

    def test_foreign(self, tmp_path):
        """Test other hooks are not."""
        path = tmp_path / "commit-msg"
        path.write_text("#!/bin/sh\nnpx commitlint --edit \"$1\"\n")

        assert not is_managed_hook(path)

    def test_missing(self, tmp_path):
        """Test a missing file is not managed."""
        assert not is_managed_hook(tmp_path / "commit-msg")


class TestHookInstaller:
    """Tests for HookInstaller."""

    def test_installs_all_hooks(self, repository, hooks_dir):
        """Test one executable shim per hook."""
        written = HookInstaller(repository).install()

        assert written == [hooks_dir / "commit-msg", hooks_dir / "prepare-commit-msg"]
        for path in written:
            assert is_managed_hook(path)
            assert os.access(path, os.X_OK)

    def test_refreshes_own_hooks(self, repository, hooks_dir):
        """Test reinstalling over managed shims needs no --force."""
        HookInstaller(repository).install()
        (hooks_dir / "commit-msg").write_text(f"#!/bin/sh\n{HOOK_MARKER}\nold\n")

        HookInstaller(repository).install()

        assert "old" not in (hooks_dir / "commit-msg").read_text()

    def test_refuses_foreign_hook(self, repository, hooks_dir):
        """Test an existing foreign hook blocks the whole install."""
        hooks_dir.mkdir(parents=True)
        foreign = hooks_dir / "prepare-commit-msg"
        foreign.write_text("#!/bin/sh\necho mine\n")

        with pytest.raises(HookInstallError) as exc_info:
            HookInstaller(repository).install()

        assert exc_info.value.path == str(foreign)
        assert "--force" in exc_info.value.message
        assert foreign.read_text() == "#!/bin/sh\necho mine\n"
        assert not (hooks_dir / "commit-msg").exists()

    def test_force_replaces_foreign_hook(self, repository, hooks_dir):
        """Test --force overwrites foreign hooks."""
        hooks_dir.mkdir(parents=True)
        (hooks_dir / "commit-msg").write_text("#!/bin/sh\necho mine\n")

        HookInstaller(repository, force=True).install()

        assert is_managed_hook(hooks_dir / "commit-msg")

    def test_write_failure(self, repository, hooks_dir):
        """Test OS errors become HookInstallError."""
        with patch("pathlib.Path.write_text", side_effect=PermissionError("denied")):
            with pytest.raises(HookInstallError, match="Cannot write commit-msg hook"):
                HookInstaller(repository).install()


class TestInstallCommand:
    """Tests for the install CLI command."""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    def test_install(self, runner, repository, hooks_dir, tmp_path):
        """Test installed paths are reported."""
        with patch("issue_hooks.cli.install.GitRepository", return_value=repository) as mock_repository:
            result = runner.invoke(install_command, ["--repo-path", str(tmp_path)])

        assert result.exit_code == 0
        assert f"Installed {hooks_dir / 'commit-msg'}" in result.output
        assert f"Installed {hooks_dir / 'prepare-commit-msg'}" in result.output
        mock_repository.assert_called_once_with(tmp_path)

    def test_foreign_hook(self, runner, repository, hooks_dir, tmp_path):
        """Test refusal exits 1 with the reason."""
        hooks_dir.mkdir(parents=True)
        (hooks_dir / "commit-msg").write_text("#!/bin/sh\n")

        with patch("issue_hooks.cli.install.GitRepository", return_value=repository):
            result = runner.invoke(install_command, ["--repo-path", str(tmp_path)])

        assert result.exit_code == 1
        assert "Error: A commit-msg hook already exists" in result.output

    def test_not_a_repository(self, runner, repository, tmp_path):
        """Test the hint is shown outside a repository."""
        repository.hooks_dir.side_effect = NotGitRepositoryError(str(tmp_path))

        with patch("issue_hooks.cli.install.GitRepository", return_value=repository):
            result = runner.invoke(install_command, ["--repo-path", str(tmp_path)])

        assert result.exit_code == 1
        assert "Not a Git repository" in result.output
        assert "git init" in result.output
