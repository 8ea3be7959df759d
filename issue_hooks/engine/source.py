"""Protocol for the commit message source the dispatcher works against."""

from typing import Protocol


class MessageSource(Protocol):
    """Where a hook reads and writes its commit message.

    The production implementation reads the message file git hands to the
    hook and asks the repository for the checked-out branch. Tests pass a
    plain in-memory object instead.
    """

    def read_message(self) -> str:
        """Return the current commit message text.

        Raises:
            OSError: If the message cannot be read
        """
        ...

    def write_message(self, text: str) -> None:
        """Replace the commit message with ``text``.

        Raises:
            OSError: If the message cannot be written
        """
        ...

    def current_branch(self) -> str:
        """Return the name of the checked-out branch.

        Raises:
            GitOperationError: If the repository cannot be queried
        """
        ...
