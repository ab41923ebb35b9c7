"""Parser for ``git status --porcelain=2 --branch`` reports."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

from git_status_line.constants import AHEAD_NONE, BEHIND_NONE, DETACHED_HEAD, UNCHANGED
from git_status_line.exceptions import MalformedReportError
from git_status_line.logging_config import get_logger
from git_status_line.models.status import Status, Upstream

logger = get_logger(__name__)


class LineTag(Enum):
    """Leading token of a porcelain v2 line."""
    HEADER = "#"
    ORDINARY = "1"
    RENAMED = "2"
    UNMERGED = "u"
    UNTRACKED = "?"
    IGNORED = "!"


class HeaderKey(Enum):
    """Keys of the ``# branch.*`` header lines."""
    OID = "branch.oid"
    HEAD = "branch.head"
    UPSTREAM = "branch.upstream"
    AB = "branch.ab"


@dataclass
class _StatusBuilder:
    """Mutable accumulator filled in while scanning a report."""
    object_id: Optional[str] = None
    head: Optional[str] = None
    upstream: Optional[str] = None
    ahead: bool = False
    behind: bool = False
    staged: bool = False
    unstaged: bool = False
    unmerged: bool = False
    untracked: bool = False
    ignored: bool = False

    def build(self) -> Status:
        if self.object_id is None:
            raise MalformedReportError("missing branch.oid header")

        branch_name = None if self.head == DETACHED_HEAD else self.head
        upstream = None
        if self.upstream is not None:
            upstream = Upstream(name=self.upstream, ahead=self.ahead, behind=self.behind)

        return Status(
            object_id=self.object_id,
            branch_name=branch_name,
            upstream=upstream,
            staged=self.staged,
            unstaged=self.unstaged,
            unmerged=self.unmerged,
            untracked=self.untracked,
            ignored=self.ignored,
        )


class _Line:
    """One report line split into its space-separated tokens."""

    def __init__(self, text: str, number: int):
        self.text = text
        self.number = number
        self.tokens: List[str] = text.split(" ")

    def token(self, index: int, what: str) -> str:
        """Return the token at ``index`` or fail naming the missing field."""
        if index >= len(self.tokens):
            raise self.error(f"missing {what}")
        return self.tokens[index]

    def error(self, message: str) -> MalformedReportError:
        return MalformedReportError(message, line=self.text, line_number=self.number)


def _parse_header(line: _Line, builder: _StatusBuilder) -> None:
    raw_key = line.token(1, "header key")
    try:
        key = HeaderKey(raw_key)
    except ValueError:
        raise line.error(f"unknown header key '{raw_key}'") from None

    value = line.token(2, f"{key.value} value")
    if key is HeaderKey.OID:
        builder.object_id = value
    elif key is HeaderKey.HEAD:
        builder.head = value
    elif key is HeaderKey.UPSTREAM:
        builder.upstream = value
    elif key is HeaderKey.AB:
        behind = line.token(3, "behind count")
        builder.ahead = value != AHEAD_NONE
        builder.behind = behind != BEHIND_NONE


def _parse_change(line: _Line, builder: _StatusBuilder) -> None:
    code = line.token(1, "change code")
    if len(code) < 2:
        raise line.error(f"change code '{code}' is too short")

    if code[0] != UNCHANGED:
        builder.staged = True
    if code[1] != UNCHANGED:
        builder.unstaged = True


def _parse_line(line: _Line, builder: _StatusBuilder) -> None:
    try:
        tag = LineTag(line.tokens[0])
    except ValueError:
        raise line.error(f"unknown line tag '{line.tokens[0]}'") from None

    if tag is LineTag.HEADER:
        _parse_header(line, builder)
    elif tag in (LineTag.ORDINARY, LineTag.RENAMED):
        _parse_change(line, builder)
    elif tag is LineTag.UNMERGED:
        builder.unmerged = True
    elif tag is LineTag.UNTRACKED:
        builder.untracked = True
    elif tag is LineTag.IGNORED:
        builder.ignored = True


def _report_lines(report: str) -> Iterator[str]:
    """Split on LF (and CRLF) only; paths may contain other Unicode line breaks."""
    for text in report.split("\n"):
        if text.endswith("\r"):
            text = text[:-1]
        yield text


def parse(report: str) -> Status:
    """
    Parse a porcelain v2 status report into a :class:`Status`.

    Args:
        report: Output of ``git status --porcelain=2 --branch``

    Returns:
        Status with ``merge_state`` unset

    Raises:
        MalformedReportError: On an unknown line tag or header key, a missing
            token, or a report without a ``branch.oid`` header
    """
    builder = _StatusBuilder()

    try:
        for number, text in enumerate(_report_lines(report), start=1):
            if text:
                _parse_line(_Line(text, number), builder)
        status = builder.build()
    except MalformedReportError as e:
        logger.debug(f"Rejecting status report: {e}")
        raise

    logger.debug(f"Parsed status: {status!r}")
    return status
