"""
Run with `robotpy test`, which sets up the simulated HAL these tests use.
"""

import pytest

from commands2 import CommandScheduler
from wpilib.simulation import DriverStationSim, GenericHIDSim

import constants
from robotcontainer import RobotContainer


@pytest.fixture
def scheduler():
    CommandScheduler.resetInstance()
    yield CommandScheduler.getInstance()
    CommandScheduler.getInstance().cancelAll()
    CommandScheduler.resetInstance()


@pytest.fixture
def gamepad():
    sim = GenericHIDSim(constants.kGamepadPort)
    yield sim
    sim.setRawButton(constants.kPublishButton, False)
    sim.setRawAxis(constants.kPublishAxis, 0.0)
    sim.notifyNewData()


def enable():
    DriverStationSim.setEnabled(True)
    DriverStationSim.notifyNewData()


def test_multiplier_is_seeded(ntInstance, table, scheduler):
    container = RobotContainer(ntInstance)

    assert table.getEntry("Multiplier").exists()
    assert table.getNumber("Multiplier", -1.0) == 1.0


def test_button_publishes_scaled_axis(ntInstance, table, scheduler, gamepad):
    container = RobotContainer(ntInstance)
    output = table.getDoubleTopic("Axis0Multiplied").subscribe(0.0)

    enable()
    gamepad.setRawButton(constants.kPublishButton, True)
    gamepad.setRawAxis(constants.kPublishAxis, 0.5)
    gamepad.notifyNewData()
    table.putNumber("Multiplier", 3.0)

    scheduler.run()
    scheduler.run()

    assert output.get() == 1.5


def test_released_button_stops_publishing(ntInstance, table, scheduler, gamepad):
    container = RobotContainer(ntInstance)
    output = table.getDoubleTopic("Axis0Multiplied").subscribe(0.0)

    enable()
    gamepad.setRawButton(constants.kPublishButton, True)
    gamepad.setRawAxis(constants.kPublishAxis, 0.5)
    gamepad.notifyNewData()
    scheduler.run()
    scheduler.run()
    assert output.get() == 0.5

    gamepad.setRawButton(constants.kPublishButton, False)
    gamepad.notifyNewData()
    scheduler.run()

    gamepad.setRawAxis(constants.kPublishAxis, 1.0)
    gamepad.notifyNewData()
    scheduler.run()
    assert output.get() == 0.5


def test_autonomous_finishes_immediately(ntInstance, scheduler):
    container = RobotContainer(ntInstance)
    command = container.getAutonomousCommand()

    command.initialize()
    assert command.isFinished()
