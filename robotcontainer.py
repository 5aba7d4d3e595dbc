import logging

from commands2 import Command, WaitCommand
from commands2.button import Trigger

from ntcore import DoublePublisher, DoubleSubscriber, NetworkTable, NetworkTableInstance

from wpilib.interfaces import GenericHID

import constants
from commands.publishAxisMultiplied import PublishAxisMultiplied
from utils.tuning import TuningTable

logger = logging.getLogger(__name__)


class RobotContainer:
    """
    The container for the robot. Contains subsystems, OI devices, and commands.

    See for more info on tables/topics/publishers/subscribers:
    https://docs.wpilib.org/en/stable/docs/software/networktables/networktables-intro.html
    """

    _gamepad: GenericHID
    """
    The Logitech gamepad. Read through raw buttons and axes.
    """

    _axisTestTable: NetworkTable
    """
    Table for the axis test. Probably a per-subsystem item in a bigger robot,
    e.g. an elevator, arm, or shooter would get a table to itself.
    """

    _tuning: TuningTable
    """
    Tuning values in the axis test table.
    Holds the seeding publishers, so it lives as long as the container.
    """

    _axis0Pub: DoublePublisher
    """
    Publisher for the scaled axis.
    No default value, it is only read by a human.
    """

    _multGetter: DoubleSubscriber
    """
    Subscriber for the axis multiplier tuning constant.
    Only the entry name is a string, after that the object reference is used,
    so a typo shows up as a missing attribute instead of a silently new entry.
    """

    def __init__(self, ntInstance: NetworkTableInstance | None = None) -> None:
        if ntInstance is None:
            ntInstance = NetworkTableInstance.getDefault()

        self._gamepad = GenericHID(constants.kGamepadPort)

        self._axisTestTable = ntInstance.getTable(constants.kAxisTestTable)
        self._tuning = TuningTable(self._axisTestTable)

        self._axis0Pub = self._axisTestTable.getDoubleTopic(
            constants.kAxisOutputTopic
        ).publish()

        # the robot starts before a human has a chance to enter the constants,
        # so every tuning value is seeded with a default
        self._multGetter = self._tuning.subscribeWithDefault(
            constants.kMultiplierTopic, constants.kDefaultMultiplier
        )

        self.configureBindings()

    def configureBindings(self) -> None:
        publishButton = Trigger(
            lambda: self._gamepad.getRawButton(constants.kPublishButton)
        )

        publishButton.whileTrue(
            PublishAxisMultiplied(
                self._axis0Pub,
                lambda: self._gamepad.getRawAxis(constants.kPublishAxis),
                self._multGetter.get,
            )
        )
        logger.info(
            "button %d publishes axis %d to %s/%s",
            constants.kPublishButton,
            constants.kPublishAxis,
            constants.kAxisTestTable,
            constants.kAxisOutputTopic,
        )

    def getAutonomousCommand(self) -> Command:
        # placeholder autonomous, does nothing
        return WaitCommand(0)
