"""Read the password from a stream, all of it, once."""

from typing import BinaryIO

from ssh_wrap.errors import SecretReadError


def read_secret(stream: BinaryIO | None) -> bytes:
    """Read ``stream`` to EOF and return the bytes untouched.

    No trimming: a trailing newline in the input is part of the secret.
    ``None`` is what Python leaves in sys.stdin when fd 0 was closed.
    """
    if stream is None:
        raise SecretReadError("cannot read password from stdin: stdin is closed")
    try:
        data = stream.read()
    except (OSError, ValueError) as e:
        raise SecretReadError(f"cannot read password from stdin: {e}") from e
    if data is None:
        raise SecretReadError("cannot read password from stdin: stream is non-blocking")
    return data
