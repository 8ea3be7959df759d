"""Commit message engine.

Pure reference extraction and the two message policies, plus the
dispatcher that wires them to git hooks.

Key Components:
    - extractor: find ``#123`` in messages and ``issue-123`` in branch names
    - policies: validate_message / prepare_message
    - dispatcher: hook name to handler lookup table
"""

from issue_hooks.engine.dispatcher import HOOK_HANDLERS, dispatch
from issue_hooks.engine.extractor import extract_from_branch, extract_from_message, find_reference
from issue_hooks.engine.policies import prepare_message, validate_message
from issue_hooks.engine.source import MessageSource
from issue_hooks.engine.types import HookOutcome

__all__ = [
    "HOOK_HANDLERS",
    "HookOutcome",
    "MessageSource",
    "dispatch",
    "extract_from_branch",
    "extract_from_message",
    "find_reference",
    "prepare_message",
    "validate_message",
]
