"""Named commands, predefined command groups and their arguments."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Tuple


@dataclass(frozen=True)
class CommandGroup:
    """A predefined invocation of a command with fixed arguments."""

    group_id: str
    display_name: str
    command_name: str
    arguments: str = ""


@dataclass
class CommandArgs:
    """Ordered ``key=value`` arguments of a command."""

    args: List[Tuple[str, str]] = field(default_factory=list)

    @classmethod
    def from_string(cls, text: str) -> CommandArgs:
        """Parse ``"key=value;key=value"``."""
        args = []
        for pair in text.split(";"):
            if not pair:
                continue
            parts = pair.split("=")
            if len(parts) < 2:
                raise ValueError(f"malformed command argument {pair!r}")
            args.append((parts[0], parts[1]))
        return cls(args)

    def get(self, name: str) -> str:
        """Value of the first argument called ``name``, or an empty string."""
        return next((value for key, value in self.args if key == name), "")


@dataclass
class CommandRequest:
    display_name: str = ""
    command_name: str = ""
    args: CommandArgs = field(default_factory=CommandArgs)


@dataclass
class CommandResult:
    value: str = ""


CommandCallback = Callable[[CommandRequest, CommandResult], None]


@dataclass
class Command:
    name: str
    callback: CommandCallback

    def execute(self, request: CommandRequest, result: CommandResult) -> None:
        self.callback(request, result)


class CommandManager:
    """Registry of commands and predefined command groups."""

    def __init__(self) -> None:
        self._groups: Dict[str, CommandGroup] = {}
        self._commands: Dict[str, Command] = {}

    def get_command_request_group(self, group_id: str) -> CommandRequest:
        """Build the request for a group, or an empty request if unknown."""
        group = self._groups.get(group_id)
        if group is None:
            return CommandRequest()
        return CommandRequest(
            group.display_name, group.command_name, CommandArgs.from_string(group.arguments)
        )

    def execute_command(self, request: CommandRequest, result: CommandResult) -> bool:
        """Run the named command; False if no such command is registered."""
        command = self._commands.get(request.command_name)
        if command is None:
            return False
        command.execute(request, result)
        return True

    def add_command_group(self, group: CommandGroup) -> None:
        """Register a group; an existing group with the same id is kept."""
        self._groups.setdefault(group.group_id, group)

    def add_command(self, command: Command) -> None:
        """Register a command; an existing command with the same name is kept."""
        self._commands.setdefault(command.name, command)

    def command_groups(self) -> Mapping[str, CommandGroup]:
        """Read-only view of the predefined groups, sorted by id."""
        return MappingProxyType(dict(sorted(self._groups.items())))