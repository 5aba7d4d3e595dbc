import logging

from ntcore import DoublePublisher, DoubleSubscriber, NetworkTable

logger = logging.getLogger(__name__)


class TuningTable:
    """
    Tuning values that a human edits from the dashboard while the robot runs
    (kP, kF, offsets, multipliers...).

    A subscriber never creates or publishes its topic, so on its own a tuning
    value would not show up in the table until someone typed the name in by hand
    after every reboot. subscribeWithDefault publishes the entry once so the name
    is visible right away:

    1. setup code publishes an entry in the table (which makes the name visible)
    2. setup code sets that entry to a default value
    3. the programmer/tuner edits that value
    4. the program runs and gets the edited value, and uses it
    5. repeat steps 3-5
    """

    _table: NetworkTable
    """
    The table the tuning values live in. Owned by the caller.
    """

    _seedPublishers: dict[str, DoublePublisher]
    """
    Publishers used to seed each entry.
    Releasing the last publisher of a topic unpublishes it, which would remove the seeded entry.
    """

    def __init__(self, table: NetworkTable) -> None:
        self._table = table
        self._seedPublishers = {}

    def subscribeWithDefault(self, name: str, defaultValue: float) -> DoubleSubscriber:
        """
        Subscribe to a double entry, publishing it first so it exists in the table.

        An entry that already has a value keeps it: the value read back through the
        subscriber is what gets published.

        :param name: The entry name inside the table.
        :type name: str
        :param defaultValue: The value used when the table has no value yet.
        :type defaultValue: float
        :return: A subscriber to poll for the current value.
        :rtype: DoubleSubscriber
        """
        topic = self._table.getDoubleTopic(name)
        sub = topic.subscribe(defaultValue)  # this does NOT publish defaultValue

        # at this point, there may be no entry in the table with <name>
        pub = topic.publish()
        value = sub.get()
        pub.set(value)

        # now there will be an entry with <name>, either the existing value or <defaultValue>
        self._seedPublishers[name] = pub

        logger.debug("seeded %s/%s = %s", self._table.getPath(), name, value)
        return sub

    def getTable(self) -> NetworkTable:
        return self._table

    def close(self) -> None:
        """
        Release the seeding publishers. Entries nobody else publishes will disappear.
        """
        for pub in self._seedPublishers.values():
            pub.close()
        self._seedPublishers.clear()
