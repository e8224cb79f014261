"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Makes the writes of the current request durable.

    Repositories share one transaction per request. A use case commits
    through this port when a result must be durable before it is reported.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Commit everything written so far.

        Later writes start a new transaction.
        """
        pass
