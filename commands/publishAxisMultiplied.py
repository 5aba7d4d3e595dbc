from typing import Callable

from commands2 import Command
from ntcore import DoublePublisher


class PublishAxisMultiplied(Command):
    """
    Publishes an axis scaled by a tuning multiplier, every scheduler tick.
    Never finishes on its own, bind it with whileTrue.
    """

    def __init__(
        self,
        publisher: DoublePublisher,
        axis: Callable[[], float],
        multiplier: Callable[[], float] = lambda: 1.0,
    ) -> None:
        super().__init__()
        self._publisher = publisher
        self._axis = axis
        self._multiplier = multiplier

    def execute(self) -> None:
        self._publisher.set(self._multiplier() * self._axis())

    def isFinished(self) -> bool:
        return False
