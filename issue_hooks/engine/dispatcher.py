"""Hook dispatch.

Maps each supported git hook to a handler that reads from a
``MessageSource``, applies one policy and performs that hook's side effect:

    commit-msg          validate; a MissingReferenceError aborts the commit
    prepare-commit-msg  prepare; write the message back only when it changed

Supporting a new hook means adding a HookName member and one entry to
HOOK_HANDLERS.

Example:
    >>> from issue_hooks.engine.dispatcher import dispatch
    >>> from issue_hooks.enums import HookName
    >>> outcome = dispatch(HookName.PREPARE_COMMIT_MSG, source)
    >>> outcome.updated_message
    'Update docs #42'
"""

from collections.abc import Callable

import structlog

from issue_hooks.engine.extractor import find_reference
from issue_hooks.engine.policies import prepare_message, validate_message
from issue_hooks.engine.source import MessageSource
from issue_hooks.engine.types import HookOutcome
from issue_hooks.enums import HookName

log = structlog.get_logger(__name__)

HookHandler = Callable[[MessageSource], HookOutcome]


def run_commit_msg(source: MessageSource) -> HookOutcome:
    """Validate the commit message.

    Raises:
        MissingReferenceError: If no issue reference can be found
    """
    message = source.read_message()
    branch = source.current_branch()

    reference = validate_message(message, branch)

    return HookOutcome(hook=HookName.COMMIT_MSG, reference=reference)


def run_prepare_commit_msg(source: MessageSource) -> HookOutcome:
    """Append the branch's issue reference to the draft message if needed.

    Never fails for a missing reference; the message is simply left alone.
    """
    message = source.read_message()
    branch = source.current_branch()

    updated = prepare_message(message, branch)
    if updated is not None:
        source.write_message(updated)

    return HookOutcome(
        hook=HookName.PREPARE_COMMIT_MSG,
        reference=find_reference(updated if updated is not None else message, branch),
        updated_message=updated,
    )


HOOK_HANDLERS: dict[HookName, HookHandler] = {
    HookName.COMMIT_MSG: run_commit_msg,
    HookName.PREPARE_COMMIT_MSG: run_prepare_commit_msg,
}


def dispatch(hook: HookName, source: MessageSource) -> HookOutcome:
    """Run the handler registered for ``hook``.

    Args:
        hook: Hook being executed
        source: Message file and branch accessor

    Returns:
        HookOutcome describing what the hook decided

    Raises:
        MissingReferenceError: From commit-msg when the commit references
            no issue
        KeyError: If no handler is registered for ``hook``
    """
    handler = HOOK_HANDLERS[hook]
    log.debug("hook_dispatch", hook=str(hook))

    outcome = handler(source)

    log.debug(
        "hook_complete",
        hook=str(hook),
        reference=outcome.reference,
        changed=outcome.changed,
    )
    return outcome
