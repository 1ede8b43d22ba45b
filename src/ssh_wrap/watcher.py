"""One-shot prompt detection and password injection."""

import threading
from typing import BinaryIO, Iterator

from ssh_wrap import log

PROMPT = "password:"
CHUNK_SIZE = 4096
MAX_LINE = 64 * 1024


def matches(line: bytes) -> bool:
    """Case-insensitive substring test for the password prompt."""
    return PROMPT in line.decode("utf-8", errors="replace").lower()


def _lines(source: BinaryIO) -> Iterator[bytes]:
    """Yield each completed line, and the current partial line as it grows.

    Prompts are usually printed without a trailing newline, so the unfinished
    line is offered for matching after every read.
    """
    pending = b""
    for chunk in iter(lambda: source.read(CHUNK_SIZE), b""):
        pending += chunk
        *complete, pending = pending.split(b"\n")
        yield from complete
        if len(pending) > MAX_LINE:
            pending = pending[-MAX_LINE:]
        if pending:
            yield pending


def _close_quietly(stream) -> None:
    try:
        stream.close()
    except OSError as e:
        log.debug(f"close failed: {e}")


def watch(source: BinaryIO, sink: BinaryIO, secret: bytes) -> bool:
    """Scan ``source`` for the prompt and write ``secret`` to ``sink`` once.

    Returns True if the prompt was seen. Both streams are closed on every
    path. Write errors are swallowed: the child may already be gone.
    """
    try:
        for line in _lines(source):
            if matches(line):
                log.debug("password prompt detected")
                try:
                    sink.write(secret)
                    sink.flush()
                except OSError as e:
                    log.debug(f"password write failed: {e}")
                return True
        log.debug("output closed without a password prompt")
        return False
    except OSError as e:
        log.debug(f"prompt scan stopped: {e}")
        return False
    finally:
        _close_quietly(sink)
        _close_quietly(source)


def start(source: BinaryIO, sink: BinaryIO, secret: bytes) -> None:
    """Run :func:`watch` on a daemon thread. Nothing waits for it."""
    threading.Thread(
        target=watch,
        args=(source, sink, secret),
        name="prompt-watcher",
        daemon=True,
    ).start()
