"""Capability bundle handed to the switcher instead of host-global service locators."""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Callable, Protocol, TextIO

from switcher.catalog.loader import CatalogProvider
from switcher.gateway import ActionGateway

CommandHandler = Callable[[str, str], object]


class Notifier(Protocol):
    """User-facing message channel (the game's chat log)."""

    def print(self, message: str) -> None: ...

    def print_error(self, message: str) -> None: ...


class CommandSink(Protocol):
    """The host's command table."""

    def contains(self, command: str) -> bool: ...

    def add_handler(self, command: str, handler: CommandHandler, help_message: str = "", show_in_help: bool = True) -> None: ...

    def remove_handler(self, command: str) -> None: ...


@dataclass
class ConsoleNotifier:
    out: TextIO = field(default_factory=lambda: sys.stdout)
    err: TextIO = field(default_factory=lambda: sys.stderr)

    def print(self, message: str) -> None:
        print(message, file=self.out)

    def print_error(self, message: str) -> None:
        print(message, file=self.err)


@dataclass(frozen=True)
class CommandInfo:
    handler: CommandHandler
    help_message: str = ""
    show_in_help: bool = True


class InMemoryCommandSink:
    """Command table with host-like dispatch: exact, case-sensitive command lookup."""

    def __init__(self) -> None:
        self.commands: dict[str, CommandInfo] = {}

    def contains(self, command: str) -> bool:
        return command in self.commands

    def add_handler(self, command: str, handler: CommandHandler, help_message: str = "", show_in_help: bool = True) -> None:
        if command in self.commands:
            raise ValueError(f"Command already registered: {command}")
        self.commands[command] = CommandInfo(handler=handler, help_message=help_message, show_in_help=show_in_help)

    def remove_handler(self, command: str) -> None:
        self.commands.pop(command, None)

    def dispatch(self, line: str) -> object:
        """Run a typed chat line such as ``"/pj knight"``. Returns the handler's result.

        Raises:
            KeyError: no handler owns the command.
        """
        parts = (line or "").split(None, 1)
        command = parts[0] if parts else ""
        arguments = parts[1] if len(parts) > 1 else ""
        info = self.commands.get(command)
        if info is None:
            raise KeyError(command)
        return info.handler(command, arguments.strip())


@dataclass
class Services:
    notifier: Notifier
    catalogs: CatalogProvider
    commands: CommandSink
    gateway: ActionGateway
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("switcher"))
