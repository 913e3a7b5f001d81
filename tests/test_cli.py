"""Tests for prompt collection and the CLI driver."""

import pytest
from pathlib import Path
from unittest.mock import patch

from ghpush.cli.main import main
from ghpush.cli.prompts import collect_session
from ghpush.core.config import Settings
from ghpush.core.errors import EmptyInput, NoFilesSpecified, RepoCreationFailed
from ghpush.core.workflow import Outcome

ANSWERS = [
    "octocat",      # username
    "tok123",       # token
    "demo",         # repository name
    "A demo",       # description
    "2",            # visibility
    "/tmp/demo",    # local path
    "n",            # README
    "first",        # commit message
    "main",         # branch
    "1",            # file selection
]


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GHPUSH_LOG_DIR", str(tmp_path / "logs"))
    return tmp_path


def _log_text(workdir):
    return "".join(p.read_text() for p in (workdir / "logs").glob("ghpush_*.log"))


class TestCollectSession:
    """Test the interactive prompt flow."""

    @patch("ghpush.cli.prompts.Prompt.ask", side_effect=ANSWERS)
    def test_full_answers(self, _ask):
        s = collect_session(Settings(), console=None)
        assert s.username == "octocat"
        assert s.token.get_secret_value() == "tok123"
        assert s.private is True
        assert s.local_path == Path("/tmp/demo")
        assert s.create_readme is False
        assert s.stage_all is True and s.files == ()

    @patch("ghpush.cli.prompts.Prompt.ask")
    def test_explicit_files(self, ask):
        ask.side_effect = ANSWERS[:-1] + ["2", "a.txt  src/b.py"]
        s = collect_session(Settings())
        assert s.stage_all is False
        assert s.files == ("a.txt", "src/b.py")

    @patch("ghpush.cli.prompts.Prompt.ask")
    def test_empty_file_list(self, ask):
        ask.side_effect = ANSWERS[:-1] + ["2", "   "]
        with pytest.raises(NoFilesSpecified):
            collect_session(Settings())

    @pytest.mark.parametrize("index,field", [(0, "Username"), (1, "Token"), (2, "Repository name")])
    def test_empty_required_answer(self, index, field):
        answers = list(ANSWERS)
        answers[index] = "  "
        with patch("ghpush.cli.prompts.Prompt.ask", side_effect=answers) as ask:
            with pytest.raises(EmptyInput) as exc:
                collect_session(Settings())
        assert exc.value.field == field
        assert ask.call_count == index + 1

    @patch("ghpush.cli.prompts.Prompt.ask")
    def test_readme_answer_ignores_case(self, ask):
        ask.side_effect = ANSWERS[:6] + ["Y"] + ANSWERS[7:]
        s = collect_session(Settings())
        assert s.create_readme is True
        assert ask.call_args_list[6].kwargs["case_sensitive"] is False

    @patch("ghpush.cli.prompts.Prompt.ask")
    def test_defaults_fill_blank_optional_answers(self, ask):
        ask.side_effect = ANSWERS[:7] + ["", "", "1"]
        s = collect_session(Settings(default_branch="trunk", default_commit_message="hello"))
        assert s.branch == "trunk"
        assert s.commit_message == "hello"


class TestMain:
    """Test exit codes, logging and error reporting."""

    @patch("ghpush.cli.main.ensure_git")
    @patch("httpx.Client")
    def test_empty_username_exits_before_any_mutation(self, mock_client, _git, workdir):
        answers = [""] + ANSWERS[1:]
        with patch("ghpush.cli.prompts.Prompt.ask", side_effect=answers):
            code = main([])
        assert code == 1
        mock_client.assert_not_called()
        assert "EmptyInput" in _log_text(workdir)

    @patch("ghpush.cli.main.run", return_value=Outcome.NOTHING_TO_COMMIT)
    @patch("ghpush.cli.main.ensure_git")
    @patch("ghpush.cli.prompts.Prompt.ask", side_effect=ANSWERS)
    def test_nothing_to_commit_exits_zero(self, _ask, _git, _run, workdir):
        assert main([]) == 0
        assert "nothing-to-commit" in _log_text(workdir)

    @patch("ghpush.cli.main.ensure_git")
    @patch("ghpush.cli.prompts.Prompt.ask", side_effect=ANSWERS)
    def test_failure_is_logged_without_token(self, _ask, _git, workdir):
        err = RepoCreationFailed("could not create with tok123")
        with patch("ghpush.cli.main.run", side_effect=err):
            assert main([]) == 1
        text = _log_text(workdir)
        assert "RepoCreationFailed" in text
        assert "tok123" not in text

    @patch("ghpush.cli.main.ensure_git")
    @patch("ghpush.cli.prompts.Prompt.ask", side_effect=KeyboardInterrupt)
    def test_interrupt(self, _ask, _git, workdir):
        assert main([]) == 1
        assert "UnexpectedTermination" in _log_text(workdir)

    @patch("ghpush.cli.main.ensure_git", side_effect=ValueError("weird"))
    def test_unexpected_exception(self, _git, workdir):
        assert main([]) == 1
        assert "UnexpectedTermination" in _log_text(workdir)

    @patch("ghpush.cli.main.ensure_git")
    def test_malformed_config_exits_one(self, git, workdir, capsys):
        """A broken config.toml is reported, not raised as a traceback."""
        (workdir / "config.toml").write_text("[github\n")
        assert main([]) == 1
        git.assert_not_called()
        assert "Unexpected error" in capsys.readouterr().err

    @patch("ghpush.cli.main.ensure_git")
    def test_unwritable_log_dir_exits_one(self, git, workdir, monkeypatch):
        (workdir / "blocker").write_text("not a directory")
        monkeypatch.setenv("GHPUSH_LOG_DIR", str(workdir / "blocker" / "logs"))
        assert main([]) == 1
        git.assert_not_called()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
