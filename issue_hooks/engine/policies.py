"""Commit message policies.

Two single-pass functions over the message text and the branch name:

    validate_message: reject messages that reference no issue at all
    prepare_message: append the branch's issue number to the subject line

Neither touches the file system; the dispatcher owns reading and writing
the message file.
"""

import re

import structlog

from issue_hooks.engine.extractor import extract_from_branch, extract_from_message, find_reference
from issue_hooks.exceptions import MissingReferenceError

log = structlog.get_logger(__name__)

# Trailing horizontal whitespace of the first line, up to its terminator
_SUBJECT_END = re.compile(r"[^\S\r\n]*(?=\r?\n|\Z)")


def validate_message(message: str, branch: str | None) -> str:
    """Require a commit to reference an issue.

    Args:
        message: Commit message text
        branch: Current branch name

    Returns:
        The reference that satisfied the check

    Raises:
        MissingReferenceError: If neither the message nor the branch
            carries a reference
    """
    reference = find_reference(message, branch)
    if reference is None:
        log.info("commit_rejected", branch=branch)
        raise MissingReferenceError()
    return reference


def prepare_message(message: str, branch: str | None) -> str | None:
    """Append the branch's issue reference to a draft commit message.

    The reference is inserted at the end of the subject line, before any
    trailing whitespace and before the line terminator. Everything after
    the subject line is kept as is.

    Args:
        message: Draft commit message text
        branch: Current branch name

    Returns:
        The rewritten message, or None when no change is needed (the
        message already references an issue, or the branch names none)

    Example:
        >>> prepare_message("Update docs\\n\\nLonger body.", "issue-42")
        'Update docs #42\\n\\nLonger body.'
        >>> prepare_message("Fix bug #7", "feature-99") is None
        True
    """
    if extract_from_message(message):
        return None

    reference = extract_from_branch(branch)
    if not reference:
        return None

    # Always matches: the lookahead accepts the end of the text
    end = _SUBJECT_END.search(message)
    position = end.start() if end else len(message)
    updated = f"{message[:position]} #{reference}{message[position:]}"

    log.info("message_prepared", reference=reference, branch=branch)
    return updated
