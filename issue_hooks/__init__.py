"""issue-hooks: link every commit to an issue.

Git hooks that validate and prepare commit messages so each one carries a
``#123`` style issue reference, falling back to the number embedded in
``issue-123``, ``bug-123`` or ``feature-123`` branch names.
"""

__version__ = "0.1.0"
