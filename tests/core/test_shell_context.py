# tests/core/test_shell_context.py
import pytest

from telosys_shell.core.context.shell_context import (
    DEFAULT_GITHUB_STORE,
    ShellContext,
    default_editor_command,
)


class StubConfig:
    def __init__(self, values=None):
        self.values = values or {}

    def get_nested(self, key_path, default=None):
        return self.values.get(key_path, default)


class FakePromptSession:
    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def prompt(self, text):
        self.prompts.append(text)
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer


@pytest.fixture
def ctx(tmp_path):
    return ShellContext(
        config=StubConfig(),
        install_location="/opt/telosys",
        os_name="Linux",
        original_directory=str(tmp_path),
    )


def test_initial_state(ctx, tmp_path):
    assert ctx.original_directory == str(tmp_path)
    assert ctx.current_directory == str(tmp_path)
    assert ctx.home_directory is None
    assert ctx.current_model is None
    assert ctx.current_bundle is None
    assert ctx.current_github_store == DEFAULT_GITHUB_STORE
    assert ctx.install_location == "/opt/telosys"
    assert ctx.os_name == "Linux"


def test_reset_to_home_is_noop_when_home_undefined(ctx):
    ctx.current_directory = "/some/where"
    ctx.reset_current_directory_to_home_if_defined()
    assert ctx.current_directory == "/some/where"


def test_reset_to_home_when_defined(ctx):
    ctx.set_home_directory("/home/project")
    ctx.current_directory = "/some/where"
    ctx.reset_current_directory_to_home_if_defined()
    assert ctx.current_directory == "/home/project"
    ctx.reset_current_directory_to_home_if_defined()
    assert ctx.current_directory == "/home/project"


def test_set_home_without_argument_uses_current_directory(ctx):
    ctx.current_directory = "/work/dir"
    ctx.set_home_directory()
    assert ctx.home_directory == "/work/dir"


def test_set_home_does_not_validate_path(ctx):
    ctx.set_home_directory("/does/not/exist")
    assert ctx.home_directory == "/does/not/exist"


def test_selections_are_plain_values(ctx):
    ctx.current_model = "Unknown.model"
    ctx.current_bundle = "unknown-bundle"
    ctx.current_github_store = "my-store"
    assert ctx.current_model == "Unknown.model"
    assert ctx.current_bundle == "unknown-bundle"
    assert ctx.current_github_store == "my-store"


@pytest.mark.parametrize("os_name, expected", [
    ("Windows", "notepad.exe $FILE"),
    ("Windows 10", "notepad.exe $FILE"),
    ("Darwin", "open -t $FILE"),
    ("Mac OS X", "open -t $FILE"),
    ("Linux", "vi $FILE"),
])
def test_default_editor_command(os_name, expected):
    assert default_editor_command(os_name) == expected


def test_editor_command_from_configuration(tmp_path):
    config = StubConfig({"editor.command": "code $FILE"})
    ctx = ShellContext(config=config, install_location="/opt", os_name="Linux", original_directory=str(tmp_path))
    assert ctx.editor_command == "code $FILE"


def test_editor_command_is_resolved_once(tmp_path):
    config = StubConfig({"editor.command": "code $FILE"})
    ctx = ShellContext(config=config, install_location="/opt", os_name="Linux", original_directory=str(tmp_path))
    config.values["editor.command"] = "emacs $FILE"
    assert ctx.editor_command == "code $FILE"


def test_editor_command_cannot_be_assigned(ctx):
    with pytest.raises(AttributeError):
        ctx.editor_command = "nano $FILE"


def test_independent_instances(tmp_path):
    a = ShellContext(config=StubConfig(), install_location="/opt", os_name="Linux", original_directory=str(tmp_path))
    b = ShellContext(config=StubConfig(), install_location="/opt", os_name="Linux", original_directory=str(tmp_path))
    a.current_model = "A"
    assert b.current_model is None


@pytest.mark.parametrize("answer, expected", [
    ("y", True), ("Yes", True), ("  yes please ", True), ("n", False), ("", False), ("ok", False),
])
def test_confirm(ctx, answer, expected):
    ctx.prompt_session = FakePromptSession([answer])
    assert ctx.confirm("Continue") is expected
    assert ctx.prompt_session.prompts == ["Continue [y/n] ? "]


def test_confirm_end_of_input_is_a_no(ctx):
    ctx.prompt_session = FakePromptSession([EOFError()])
    assert ctx.confirm("Continue") is False


def test_read_line_falls_back_to_input(ctx, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt="": "  value  ")
    assert ctx.read_line("> ") == "value"
