"""Commit message files and the message source used by the hooks.

Git passes hooks the path of a file holding the commit message
(normally ``.git/COMMIT_EDITMSG``). The file is read and written as UTF-8
with newline translation disabled, so ``\\r\\n`` terminators survive a
rewrite unchanged. Bytes that are not valid UTF-8 are carried through as
surrogate escapes.
"""

import os
import tempfile
from pathlib import Path

import structlog

from issue_hooks.git.repository import GitRepository

log = structlog.get_logger(__name__)

ENCODING = "utf-8"
# Non-UTF-8 bytes (a latin-1 commitEncoding) round-trip unchanged
ERRORS = "surrogateescape"


class CommitMessageFile:
    """A commit message file on disk.

    Attributes:
        path: Location of the message file
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def read(self) -> str:
        """Return the file contents verbatim.

        Raises:
            OSError: If the file cannot be read
        """
        with open(self.path, encoding=ENCODING, errors=ERRORS, newline="") as f:
            return f.read()

    def write(self, text: str) -> None:
        """Replace the file contents atomically.

        The text is written to a temporary file in the same directory,
        which is then renamed over the message file. A failed write leaves
        the original message in place.

        Raises:
            OSError: If the file cannot be written
        """
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding=ENCODING, errors=ERRORS, newline="") as f:
                f.write(text)
            # Keep the permissions of the file being replaced
            if self.path.exists():
                tmp_path.chmod(self.path.stat().st_mode & 0o777)
            tmp_path.replace(self.path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

        log.debug("message_written", path=str(self.path), size=len(text))


class GitMessageSource:
    """MessageSource backed by a message file and the local repository."""

    def __init__(self, message_file: CommitMessageFile, repository: GitRepository) -> None:
        self.message_file = message_file
        self.repository = repository

    def read_message(self) -> str:
        return self.message_file.read()

    def write_message(self, text: str) -> None:
        self.message_file.write(text)

    def current_branch(self) -> str:
        return self.repository.current_branch()
