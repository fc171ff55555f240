"""Test doubles for driving Aff chains by hand."""

from kungfu import Error, Ok, Result

from validaff import Aff


class Recorder:
    """Completion callback that remembers every outcome it receives."""

    def __init__(self):
        self.calls: list[Result] = []

    def __call__(self, outcome: Result) -> None:
        self.calls.append(outcome)

    @property
    def outcome(self) -> Result:
        """The single outcome; fails the test on zero or several calls."""
        assert len(self.calls) == 1, f"expected exactly one callback, got {self.calls!r}"
        return self.calls[0]


class Pending:
    """Leaf whose callback fires only when the test resolves it.

    Stands in for an externally scheduled computation (timer, I/O, ...).
    """

    def __init__(self, name: str = "pending", log: list[str] | None = None):
        self.name = name
        self.log = log if log is not None else []
        self.callbacks: list = []

    @property
    def aff(self) -> Aff:
        def acceptor(callback) -> None:
            self.log.append(f"{self.name}:start")
            self.callbacks.append(callback)

        return Aff(acceptor)

    @property
    def started(self) -> bool:
        return bool(self.callbacks)

    def succeed(self, value) -> None:
        self._resolve(Ok(value))

    def fail(self, error) -> None:
        self._resolve(Error(error))

    def _resolve(self, outcome: Result) -> None:
        callback = self.callbacks.pop(0)
        self.log.append(f"{self.name}:done")
        callback(outcome)


def recording(name: str, value, log: list[str]) -> Aff:
    """Synchronous leaf logging its start and completion."""

    def acceptor(callback) -> None:
        log.append(f"{name}:start")
        log.append(f"{name}:done")
        callback(Ok(value))

    return Aff(acceptor)
