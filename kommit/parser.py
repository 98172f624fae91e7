"""Parsing of git subject lines into commit records.

Contains:
- MalformedSubjectError: Raised when a line is not "head: message"
- try_parse_subject: Parse a line, returning None when it doesn't fit
- parse_subject: Parse a line, raising MalformedSubjectError when it doesn't fit
- parse_subjects: Parse many lines, dropping the ones that don't fit
"""

from typing import Iterable, Optional

from pydantic import ValidationError

from kommit.models import CommitRecord


class MalformedSubjectError(ValueError):
    """Raised when a subject line does not have the `head: message` shape."""

    pass


def _split_head(head: str) -> tuple[str, str]:
    """Split "type(scope)" into type and scope."""
    if "(" not in head:
        return head, ""

    parts = head.split("(")
    commit_type = parts[0]
    scope = parts[1].removesuffix(")")
    return commit_type, scope


def try_parse_subject(line: str) -> Optional[CommitRecord]:
    """Parse a subject line of the form `type(scope): message` or `type: message`.

    The line must contain exactly one colon. Type and scope are not
    checked against any list of known values.

    Args:
        line: A single commit subject line.

    Returns:
        The parsed CommitRecord, or None if the line has zero or several
        colons, or holds a line break a record can't.
    """
    parts = line.split(":")
    if len(parts) != 2:
        return None

    commit_type, scope = _split_head(parts[0])
    try:
        return CommitRecord(type=commit_type, scope=scope, message=parts[1].strip())
    except ValidationError:
        return None


def parse_subject(line: str) -> CommitRecord:
    """Parse a subject line, raising on lines that don't fit.

    Args:
        line: A single commit subject line.

    Returns:
        The parsed CommitRecord.

    Raises:
        MalformedSubjectError: If the line does not split into head and message.
    """
    record = try_parse_subject(line)
    if record is None:
        raise MalformedSubjectError(f"Failed to parse commit subject: {line!r}")
    return record


def parse_subjects(lines: Iterable[str]) -> list[CommitRecord]:
    """Parse subject lines in order, dropping lines that don't fit."""
    records = []
    for line in lines:
        record = try_parse_subject(line)
        if record is None:
            continue
        records.append(record)
    return records
