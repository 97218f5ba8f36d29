"""
Line-ending classification for raw byte streams.

Three conventions are recognized, longest match first:

- CRLF (0x0D 0x0A): two bytes, one logical ending
- LF (0x0A) alone
- CR (0x0D) alone, when not followed by LF

Both scan directions need exactly one byte of context. The forward scan
(reading a line) has to know whether a CR it just saw is followed by LF;
the backward scan (finding a line start) has to know whether the byte it
just stepped over was an LF, because a CR directly before that LF is the
first half of a CRLF and not an ending on its own. Each direction is
modelled as a two-state machine so the lookahead/lookback is explicit.
"""

from enum import Enum

from .constants import CR, LF


class LineEnding(Enum):
    """Line-ending sequence terminating a line."""
    NONE = b""      # Unterminated line at end of stream
    CR = b"\r"
    LF = b"\n"
    CRLF = b"\r\n"

    @property
    def byte_count(self) -> int:
        """Number of bytes the ending occupies in the stream."""
        return len(self.value)


class EndingState(Enum):
    """Forward scan state: has a CR been seen that may start a CRLF?"""
    NO_PENDING_CR = "no_pending_cr"
    PENDING_CR = "pending_cr"


class BoundaryState(Enum):
    """Backward scan state: was the byte just stepped over an LF?"""
    NO_PENDING_LF = "no_pending_lf"
    PENDING_LF = "pending_lf"


class ForwardEndingScanner:
    """
    Classifies line endings while reading a line front to back.

    Feed bytes one at a time with `feed()`. Once an ending is recognized,
    `ending` and `last_offset` are set and `done` becomes True. A pending
    CR is only resolved by the byte after it (or by `finish()` at end of
    stream).
    """

    def __init__(self):
        self.state = EndingState.NO_PENDING_CR
        self.ending = None
        self.last_offset = None
        self._cr_offset = None

    @property
    def done(self) -> bool:
        return self.ending is not None

    def feed(self, byte: int, offset: int) -> bool:
        """
        Consume the byte found at `offset`.

        Args:
            byte: Byte value read from the stream
            offset: Absolute offset of that byte

        Returns:
            True when the line ending has been fully recognized
        """
        if self.state is EndingState.PENDING_CR:
            if byte == LF:
                self._resolve(LineEnding.CRLF, offset)
            else:
                # CR CR is two separate endings (empty line between them),
                # CR followed by content is a lone CR ending.
                self._resolve(LineEnding.CR, self._cr_offset)
            return True

        if byte == LF:
            self._resolve(LineEnding.LF, offset)
            return True

        if byte == CR:
            self.state = EndingState.PENDING_CR
            self._cr_offset = offset

        return False

    def finish(self, length: int):
        """
        Resolve the line at end of stream.

        Args:
            length: Total stream length in bytes
        """
        if self.done:
            return

        if self.state is EndingState.PENDING_CR:
            self._resolve(LineEnding.CR, self._cr_offset)
        else:
            self._resolve(LineEnding.NONE, length - 1)

    def _resolve(self, ending: LineEnding, last_offset: int):
        self.ending = ending
        self.last_offset = last_offset
        self.state = EndingState.NO_PENDING_CR


def is_boundary_after(previous: int, state: BoundaryState) -> bool:
    """
    Tell whether the offset just after `previous` starts a line.

    Args:
        previous: Byte immediately before the candidate offset
        state: PENDING_LF when the byte at the candidate offset is LF

    Returns:
        True if `previous` is the final byte of a line ending
    """
    if previous == LF:
        return True

    if previous == CR:
        # CR directly before LF is the first half of CRLF
        return state is BoundaryState.NO_PENDING_LF

    return False


def boundary_state_for(byte) -> BoundaryState:
    """Backward scan state after stepping over `byte` (None at end of stream)."""
    return BoundaryState.PENDING_LF if byte == LF else BoundaryState.NO_PENDING_LF
