"""Translate how the child ended into the wrapper's own exit code."""

import signal
from dataclasses import dataclass

from ssh_wrap.errors import StatusUnextractable

EXITED = "exited"
KILLED = "killed"
WAIT_ERROR = "wait-error"

GENERIC_FAILURE = 1
SIGNAL_STATUS = 255


@dataclass(frozen=True)
class Outcome:
    kind: str
    code: int | None = None

    @property
    def is_clean(self) -> bool:
        return self.kind == EXITED and self.code == 0


def from_returncode(returncode: int) -> Outcome:
    """Map a Popen return code. Negative means killed by signal -returncode."""
    if returncode < 0:
        return Outcome(KILLED, -returncode)
    return Outcome(EXITED, returncode)


def _signal_status(signum: int) -> int:
    """Status for a signal death: the wait status reports -1, exited as 255."""
    if not hasattr(signal, "SIGKILL"):
        # No POSIX signals on this platform
        raise StatusUnextractable(f"signal {signum} has no status on this platform")
    return SIGNAL_STATUS


def _extract(outcome: Outcome) -> int:
    if outcome.kind == EXITED and outcome.code is not None:
        return outcome.code
    if outcome.kind == KILLED and outcome.code is not None:
        return _signal_status(outcome.code)
    raise StatusUnextractable(f"no exit status for outcome {outcome.kind}")


def exit_code(outcome: Outcome) -> int:
    """Return the code the wrapper should exit with.

    A clean exit returns 0 before any extraction is attempted. Anything else
    reuses the child's status where one can be derived, else 1.
    """
    if outcome.is_clean:
        return 0
    try:
        return _extract(outcome)
    except StatusUnextractable:
        return GENERIC_FAILURE
