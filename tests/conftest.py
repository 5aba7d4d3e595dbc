import pytest

from ntcore import NetworkTableInstance


@pytest.fixture
def ntInstance():
    # a private instance, tests never touch NetworkTableInstance.getDefault()
    inst = NetworkTableInstance.create()
    yield inst
    NetworkTableInstance.destroy(inst)


@pytest.fixture
def table(ntInstance):
    return ntInstance.getTable("Axis0Test")
