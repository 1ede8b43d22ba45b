"""Child process launch and stdout tee."""

import os
import subprocess
import threading
from typing import BinaryIO

from ssh_wrap import log
from ssh_wrap.errors import PipeSetupError, SpawnError, WaitError

CHUNK_SIZE = 4096


class Tee:
    """Write each chunk to ``primary`` then ``secondary``.

    The secondary is the prompt scanner's pipe. Once the scanner closes its
    end the tee drops it and keeps feeding the primary alone.
    """

    def __init__(self, primary: BinaryIO, secondary: BinaryIO | None):
        self.primary = primary
        self.secondary = secondary

    def write(self, data: bytes) -> int:
        self.primary.write(data)
        self.primary.flush()
        if self.secondary is not None:
            try:
                self.secondary.write(data)
                self.secondary.flush()
            except BrokenPipeError:
                self._detach()
        return len(data)

    def _detach(self) -> None:
        secondary, self.secondary = self.secondary, None
        try:
            secondary.close()
        except BrokenPipeError:
            # Buffered bytes nobody will read
            pass

    def close(self) -> None:
        if self.secondary is not None:
            self._detach()


class Child:
    """A running command whose stdout is pumped through a :class:`Tee`."""

    def __init__(self, proc: subprocess.Popen, tee: Tee, scan: BinaryIO):
        self.proc = proc
        self.tee = tee
        self.scan = scan
        self.error: OSError | None = None
        self._pump = threading.Thread(target=self._run_pump, name="stdout-tee")
        self._pump.start()

    @property
    def stdin(self) -> BinaryIO:
        return self.proc.stdin

    def _run_pump(self) -> None:
        stream = self.proc.stdout
        try:
            for chunk in iter(lambda: stream.read1(CHUNK_SIZE), b""):
                self.tee.write(chunk)
        except OSError as e:
            self.error = e
        finally:
            try:
                self.tee.close()
            finally:
                stream.close()

    def wait(self) -> int:
        """Wait for exit and for all output to be copied. Returns the return code.

        Raises WaitError if waiting fails, or if copying output failed on an
        otherwise clean exit.
        """
        try:
            returncode = self.proc.wait()
        except OSError as e:
            raise WaitError(f"wait failed: {e}") from e
        self._pump.join()
        if self.error is not None and returncode == 0:
            raise WaitError(f"copying output failed: {self.error}")
        return returncode


def spawn(args: list[str], stdout: BinaryIO) -> Child:
    """Start ``args`` with piped stdin/stdout and inherited stderr."""
    try:
        scan_r, scan_w = os.pipe()
    except OSError as e:
        raise PipeSetupError(f"cannot create output pipe: {e}") from e

    try:
        proc = subprocess.Popen(args, stdin=subprocess.PIPE, stdout=subprocess.PIPE)
    except OSError as e:
        os.close(scan_r)
        os.close(scan_w)
        raise SpawnError(f"cannot start {args[0]}: {e}") from e

    log.debug(f"started pid {proc.pid}: {' '.join(args)}")
    tee = Tee(stdout, os.fdopen(scan_w, "wb"))
    return Child(proc, tee, os.fdopen(scan_r, "rb", buffering=0))
