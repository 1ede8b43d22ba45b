"""Failure kinds. Each one ends the wrapper with a numeric exit code only."""


class WrapError(RuntimeError):
    pass


class SecretReadError(WrapError):
    pass


class PipeSetupError(WrapError):
    pass


class SpawnError(WrapError):
    pass


class WaitError(WrapError):
    pass


class StatusUnextractable(WrapError):
    pass
