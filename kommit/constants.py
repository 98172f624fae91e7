"""Constants for kommit.

Contains:
- PROG_NAME: Name of the executable, used for completion scripts
- COMPLETE_VAR: Environment variable of the shell completion protocol
- NO_SCOPE: Sentinel scope meaning "this commit has no scope"
- DEFAULT_TYPES: Commit types offered for completion
- DEFAULT_SCOPE_HISTORY_LIMIT / DEFAULT_MESSAGE_HISTORY_LIMIT: History depth
"""

PROG_NAME = "kommit"

NO_SCOPE = "-"

# Offered in this order, independent of history
DEFAULT_TYPES = [
    "feat",
    "refactor",
    "chore",
    "fix",
    "style",
    "perf",
    "test",
    "docs",
]

DEFAULT_SCOPE_HISTORY_LIMIT = 200
DEFAULT_MESSAGE_HISTORY_LIMIT = 10

# Environment variable the shell sets when asking for completions
COMPLETE_VAR = f"_{PROG_NAME}_COMPLETE".replace("-", "_").upper()
