"""Read the password, run the command, answer its prompt, mirror its exit."""

import sys
from typing import BinaryIO

from ssh_wrap import config, log, process, status, watcher
from ssh_wrap.errors import PipeSetupError, SecretReadError, SpawnError, WaitError
from ssh_wrap.secret import read_secret


def run(
    args: list[str],
    cmd: list[str] | None = None,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
) -> int:
    """Run the wrapped command with ``args`` appended. Returns the exit code.

    Setup failures (password read, pipe, spawn) return 1 before the
    command or the prompt watcher is started.
    """
    if stdin is None and sys.stdin is not None:
        stdin = sys.stdin.buffer
    if stdout is None and sys.stdout is not None:
        stdout = sys.stdout.buffer

    # The password must be complete before a prompt can appear
    try:
        secret = read_secret(stdin)
    except SecretReadError as e:
        log.error(str(e))
        return status.GENERIC_FAILURE

    if stdout is None:
        log.error("stdout is closed")
        return status.GENERIC_FAILURE

    command = (cmd or config.resolve_command()) + list(args)

    try:
        child = process.spawn(command, stdout)
    except (PipeSetupError, SpawnError) as e:
        log.error(str(e))
        return status.GENERIC_FAILURE

    watcher.start(child.scan, child.stdin, secret)

    try:
        outcome = status.from_returncode(child.wait())
    except WaitError as e:
        log.error(str(e))
        outcome = status.Outcome(status.WAIT_ERROR)

    code = status.exit_code(outcome)
    log.debug(f"child {outcome.kind} ({outcome.code}), exiting {code}")
    return code
