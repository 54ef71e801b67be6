# tests/core/test_directory_commands.py
import os

import pytest

from telosys_shell.core.commands.directory_commands import CdCommand, HomeCommand, PwdCommand
from telosys_shell.core.context.shell_context import ShellContext


class StubConfig:
    def get_nested(self, key_path, default=None):
        return default


@pytest.fixture
def workspace(tmp_path):
    (tmp_path / "projects" / "demo").mkdir(parents=True)
    (tmp_path / "file.txt").write_text("x")
    return tmp_path.resolve()


@pytest.fixture
def ctx(workspace):
    return ShellContext(config=StubConfig(), install_location="/opt", os_name="Linux",
                        original_directory=str(workspace))


def test_pwd(ctx, workspace, capsys):
    assert PwdCommand().execute(["pwd"], ctx) is None
    assert capsys.readouterr().out.strip() == str(workspace)


def test_cd_relative_and_parent(ctx, workspace):
    cd = CdCommand()
    assert cd.execute(["cd", "projects/demo"], ctx) is None
    assert ctx.current_directory == str(workspace / "projects" / "demo")
    assert cd.execute(["cd", ".."], ctx) is None
    assert ctx.current_directory == str(workspace / "projects")


def test_cd_does_not_change_process_directory(ctx, workspace, monkeypatch):
    monkeypatch.chdir(workspace)
    CdCommand().execute(["cd", "projects"], ctx)
    assert os.getcwd() == str(workspace)


def test_cd_unknown_directory(ctx, workspace):
    error = CdCommand().execute(["cd", "missing"], ctx)
    assert error.startswith("Directory not found")
    assert ctx.current_directory == str(workspace)


def test_cd_to_a_file_is_refused(ctx):
    assert CdCommand().execute(["cd", "file.txt"], ctx).startswith("Directory not found")


def test_cd_without_argument_goes_home(ctx, workspace):
    ctx.set_home_directory(str(workspace / "projects"))
    ctx.current_directory = str(workspace / "projects" / "demo")
    assert CdCommand().execute(["cd"], ctx) is None
    assert ctx.current_directory == str(workspace / "projects")


def test_cd_without_argument_and_no_home_is_noop(ctx, workspace):
    CdCommand().execute(["cd"], ctx)
    assert ctx.current_directory == str(workspace)


def test_cd_usage(ctx):
    assert CdCommand().execute(["cd", "a", "b"], ctx) == "Usage : cd [directory]"


def test_home_not_defined(ctx, capsys):
    assert HomeCommand().execute(["h"], ctx) is None
    assert "Home not defined" in capsys.readouterr().out


def test_home_dot_uses_current_directory(ctx, workspace):
    ctx.current_directory = str(workspace / "projects")
    assert HomeCommand().execute(["h", "."], ctx) is None
    assert ctx.home_directory == str(workspace / "projects")


def test_home_with_directory_moves_current_directory(ctx, workspace):
    assert HomeCommand().execute(["h", "projects/demo"], ctx) is None
    assert ctx.home_directory == str(workspace / "projects" / "demo")
    assert ctx.current_directory == ctx.home_directory


def test_home_with_unknown_directory_keeps_previous_home(ctx, workspace):
    ctx.set_home_directory(str(workspace))
    assert HomeCommand().execute(["h", "missing"], ctx).startswith("Directory not found")
    assert ctx.home_directory == str(workspace)
