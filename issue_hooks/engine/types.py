"""Result types produced by the hook dispatcher."""

from dataclasses import dataclass

from issue_hooks.enums import HookName


@dataclass(frozen=True)
class HookOutcome:
    """What a hook run decided.

    Attributes:
        hook: Hook that ran
        reference: Issue number that satisfied the hook, if any
        updated_message: Message written back to the source, or None when
            the message was left untouched
    """

    hook: HookName
    reference: str | None = None
    updated_message: str | None = None

    @property
    def changed(self) -> bool:
        """Whether the hook rewrote the commit message."""
        return self.updated_message is not None
