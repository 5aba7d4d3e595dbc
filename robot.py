import logging

from commands2 import Command, CommandScheduler
from ntcore import NetworkTableInstance
from wpilib import (
    DriverStation,
    TimedRobot,
    run,
    DataLogManager,
)
import wpilib

from robotcontainer import RobotContainer

logger = logging.getLogger(__name__)


class Robot(TimedRobot):
    m_autonomousCommand: Command | None = None
    m_robotContainer: RobotContainer

    # Initialize Robot
    def robotInit(self):
        self.m_robotContainer = RobotContainer(NetworkTableInstance.getDefault())
        DataLogManager.start()
        DriverStation.startDataLog(DataLogManager.getLog())

    def robotPeriodic(self) -> None:
        try:
            CommandScheduler.getInstance().run()
        except Exception as e:
            logger.exception("command scheduler raised")
            wpilib.reportError(f"Got Error from Command Scheduler: {e}", True)

    # Autonomous Robot Functions
    def autonomousInit(self):
        self.m_autonomousCommand = self.m_robotContainer.getAutonomousCommand()

        if self.m_autonomousCommand is not None:
            CommandScheduler.getInstance().schedule(self.m_autonomousCommand)

    def autonomousPeriodic(self):
        pass

    def autonomousExit(self):
        if self.m_autonomousCommand is not None:
            self.m_autonomousCommand.cancel()

    # Teleop Robot Functions
    def teleopInit(self):
        # make sure autonomous stops when teleop starts
        if self.m_autonomousCommand is not None:
            self.m_autonomousCommand.cancel()

    def teleopPeriodic(self):
        pass

    # Test Robot Functions
    def testInit(self) -> None:
        CommandScheduler.getInstance().cancelAll()

    def testPeriodic(self):
        pass

    # Disabled Robot Functions
    def disabledInit(self):
        pass

    def disabledPeriodic(self) -> None:
        pass


# Start the Robot when Executing Code
if __name__ == "__main__":
    run(Robot)
