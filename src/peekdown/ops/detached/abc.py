"""Best-effort task dispatch.

A best-effort task is a command that is started and then forgotten:

- dispatch() returns as soon as the process is spawned (or fails to spawn)
- the exit status is never collected or reported
- a failure is only observed indirectly, when the next launch finds the
  registration Stale and runs the flow again

Callers must never make a success/failure decision that depends on a
dispatched task. Anything that gates a decision belongs in a blocking call.
"""

from abc import ABC, abstractmethod


class DetachedLauncher(ABC):
    """Abstract interface for fire-and-forget process dispatch."""

    @abstractmethod
    def dispatch(self, cmd: list[str], description: str) -> None:
        """Start cmd detached from the current process and discard its outcome.

        Never raises. Spawn failures are logged and otherwise ignored.

        Args:
            cmd: Command and arguments to start
            description: Short human-readable purpose, used in logs
        """
        ...
