"""Issue reference extraction.

Finds issue numbers in commit messages (``Fix login #123``) and in branch
names that follow the ``issue-N`` / ``bug-N`` / ``feature-N`` convention.

Both patterns are compiled with ``re.ASCII`` so that only ``0-9`` count as
digits and word boundaries are judged against ASCII word characters.

Example:
    >>> from issue_hooks.engine.extractor import extract_from_branch, extract_from_message
    >>> extract_from_message("Fix login redirect #123, again")
    '123'
    >>> extract_from_message("Fix thing #123abc") is None
    True
    >>> extract_from_branch("feature-99-dark-mode")
    '99'
"""

import re

import structlog

log = structlog.get_logger(__name__)

# "#123" followed by a word boundary or the end of the text
MESSAGE_REFERENCE_PATTERN = re.compile(r"#(\d+)(?:\b|$)", re.ASCII)

# "issue-123", "bug-123" or "feature-123" anywhere in the branch name
BRANCH_REFERENCE_PATTERN = re.compile(r"(?:issue|bug|feature)-(\d+)", re.ASCII)


def extract_from_message(text: str | None) -> str | None:
    """Return the first issue number referenced in a commit message.

    Only the first ``#N`` in the whole text counts; later references are
    ignored.

    Args:
        text: Commit message text

    Returns:
        The digits of the reference, or None when the message has none
    """
    if not text:
        return None

    match = MESSAGE_REFERENCE_PATTERN.search(text)
    return match.group(1) if match else None


def extract_from_branch(name: str | None) -> str | None:
    """Return the issue number encoded in a branch name.

    Args:
        name: Branch name, e.g. ``issue-42`` or ``user/bug-7-crash``

    Returns:
        The digits following the first ``issue-``, ``bug-`` or ``feature-``
        token, or None when the branch follows no convention
    """
    if not name:
        return None

    match = BRANCH_REFERENCE_PATTERN.search(name)
    return match.group(1) if match else None


def find_reference(message: str | None, branch: str | None) -> str | None:
    """Resolve the issue reference for a commit.

    The message always wins; the branch is consulted only when the message
    carries no reference.

    Args:
        message: Commit message text
        branch: Current branch name

    Returns:
        The issue number, or None when neither source names one
    """
    reference = extract_from_message(message)
    if reference:
        log.debug("reference_found", source="message", reference=reference)
        return reference

    reference = extract_from_branch(branch)
    if reference:
        log.debug("reference_found", source="branch", reference=reference, branch=branch)
        return reference

    log.debug("reference_not_found", branch=branch)
    return None
