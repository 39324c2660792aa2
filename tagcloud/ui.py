"""Tag cloud console user interface."""

import sys
from abc import ABC, abstractmethod

from rich.console import Console
from rich.text import Text as RichElementText
from typing_extensions import override


class Interface(ABC):
    """User input/output interface."""

    @abstractmethod
    def print(self, text: str) -> None:
        """Simply print text message."""
        raise NotImplementedError()

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Return user input."""
        raise NotImplementedError()

    @abstractmethod
    def error(self, message: str) -> None:
        """Report error message to the error stream."""
        raise NotImplementedError()


class TerminalInterface(Interface):
    """Simple terminal interface without colors."""

    @override
    def print(self, text: str) -> None:
        print(text)

    @override
    def input(self, prompt: str) -> str:
        return input(prompt)

    @override
    def error(self, message: str) -> None:
        print(f"Error: {message}", file=sys.stderr)


class RichInterface(TerminalInterface):
    """Terminal interface with colors."""

    def __init__(self) -> None:
        self.console: Console = Console(highlight=False)
        self.error_console: Console = Console(stderr=True, highlight=False)

    @override
    def print(self, text: str) -> None:
        self.console.print(RichElementText(text))

    @override
    def error(self, message: str) -> None:
        self.error_console.print(
            RichElementText("Error: ", style="bold red").append(message)
        )


def get_interface(interface: str) -> Interface:
    """Get interface by its identifier."""

    match interface:
        case "terminal":
            return TerminalInterface()
        case "rich":
            return RichInterface()
        case _:
            raise ValueError(f"Unsupported interface: `{interface}`.")
