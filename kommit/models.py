"""Data models for kommit.

Contains:
- CommitRecord: Pydantic model for a single conventional commit subject
"""

from pydantic import BaseModel, field_validator

from kommit.constants import NO_SCOPE


class CommitRecord(BaseModel):
    """A conventional commit subject split into its parts.

    Attributes:
        type: Commit type token (e.g., "feat").
        scope: Optional scope. Empty or "-" means no scope.
        message: Free-text description.
    """

    type: str
    scope: str = ""
    message: str

    @field_validator("type", "scope", "message")
    @classmethod
    def must_be_single_line(cls, v: str) -> str:
        """Reject values that would break the subject onto several lines."""
        if "\n" in v or "\r" in v:
            raise ValueError("must not contain a newline")
        return v

    @property
    def has_scope(self) -> bool:
        """True if the scope should appear in the rendered subject."""
        return self.scope not in ("", NO_SCOPE)

    def render(self) -> str:
        """Render the canonical subject line.

        Returns:
            "type(scope): message" when a scope is set, else "type: message".
        """
        if self.has_scope:
            return f"{self.type}({self.scope}): {self.message}"
        return f"{self.type}: {self.message}"

    def __str__(self) -> str:
        return self.render()
