"""Environment-driven configuration."""

import os

COMMAND_ENV = "SSH_WRAP_COMMAND"
DEFAULT_COMMAND = ["ssh"]


def resolve_command() -> list[str]:
    """Resolve the base command that forwarded arguments are appended to.

    Order: SSH_WRAP_COMMAND env → ssh.
    """
    env_cmd = os.environ.get(COMMAND_ENV)
    if env_cmd and env_cmd.split():
        return env_cmd.split()

    return list(DEFAULT_COMMAND)
