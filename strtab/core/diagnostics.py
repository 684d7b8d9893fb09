"""Fatal diagnostics for string table generation"""

from typing import NoReturn


class FatalError(RuntimeError):
    """Unrecoverable error that aborts the current generation run"""


def print_fatal_note(message: str) -> NoReturn:
    """Report a fatal note and abort generation

    Args:
        message: Diagnostic text

    Raises:
        FatalError: Always
    """
    raise FatalError(message.rstrip("\n"))
