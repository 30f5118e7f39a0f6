import pytest

from imgview.commands import (
    Command,
    CommandArgs,
    CommandGroup,
    CommandManager,
    CommandRequest,
    CommandResult,
)


def test_args_from_string():
    args = CommandArgs.from_string("type=zoom;val=0.5")
    assert args.args == [("type", "zoom"), ("val", "0.5")]
    assert args.get("val") == "0.5"


def test_missing_arg_is_empty():
    assert CommandArgs.from_string("a=1").get("b") == ""


def test_empty_string_has_no_args():
    assert CommandArgs.from_string("").args == []


def test_malformed_pair_raises():
    with pytest.raises(ValueError):
        CommandArgs.from_string("a=1;broken")


def test_first_duplicate_wins():
    assert CommandArgs.from_string("k=first;k=second").get("k") == "first"


def _echo(request, result):
    result.value = request.display_name + ":" + request.args.get("amount")


def test_execute_registered_command():
    manager = CommandManager()
    manager.add_command(Command("cmd_zoom", _echo))
    result = CommandResult()
    request = CommandRequest("Zoom", "cmd_zoom", CommandArgs.from_string("amount=2"))
    assert manager.execute_command(request, result) is True
    assert result.value == "Zoom:2"


def test_execute_unknown_command():
    result = CommandResult()
    assert CommandManager().execute_command(CommandRequest("x", "nope"), result) is False
    assert result.value == ""


def test_group_builds_request():
    manager = CommandManager()
    manager.add_command_group(CommandGroup("g1", "Zoom in", "cmd_zoom", "amount=3"))
    request = manager.get_command_request_group("g1")
    assert request.display_name == "Zoom in"
    assert request.command_name == "cmd_zoom"
    assert request.args.get("amount") == "3"


def test_unknown_group_gives_empty_request():
    assert CommandManager().get_command_request_group("missing") == CommandRequest()


def test_first_group_and_command_are_kept():
    manager = CommandManager()
    manager.add_command_group(CommandGroup("g", "first", "c"))
    manager.add_command_group(CommandGroup("g", "second", "c"))
    assert manager.command_groups()["g"].display_name == "first"

    calls = []
    manager.add_command(Command("c", lambda req, res: calls.append("one")))
    manager.add_command(Command("c", lambda req, res: calls.append("two")))
    manager.execute_command(CommandRequest("", "c"), CommandResult())
    assert calls == ["one"]


def test_command_groups_is_read_only():
    manager = CommandManager()
    manager.add_command_group(CommandGroup("b", "B", "cb"))
    manager.add_command_group(CommandGroup("a", "A", "ca"))
    groups = manager.command_groups()
    assert list(groups) == ["a", "b"]
    with pytest.raises(TypeError):
        groups["c"] = CommandGroup("c", "C", "cc")