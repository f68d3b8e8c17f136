"""Fatal engine errors.

None of these are retried: they describe broken shared state or a broken
input stream, and the engine reports them to the coordinator which tears the
game down.
"""


class EngineError(Exception):
    pass


class InputStreamFailure(EngineError):
    """Reading the next key event from the terminal failed."""


class LockPoisoned(EngineError):
    """A guarded value was left in an unknown state by a failed holder."""

    def __init__(self, name: str) -> None:
        super().__init__(f"lock {name!r} was poisoned by an earlier failure")
        self.name = name


class ChannelClosed(EngineError):
    """Send or receive on a channel whose peer has gone away."""


class InvalidSceneDowncast(EngineError):
    def __init__(self, obj: object, expected: type) -> None:
        super().__init__(
            f"{type(obj).__name__} is not a {expected.__name__}"
        )
        self.expected = expected
