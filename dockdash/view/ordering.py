from typing import Iterable, List

from dockdash.models import ContainerRecord


def sort_containers(records: Iterable[ContainerRecord]) -> List[ContainerRecord]:
    """
    Orders the records newest start time first. Records started at the same time are ordered by id so the result only
    depends on the snapshot, not on the order it was iterated in.

    :param records: Any iterable of ContainerRecord, usually the values of a registry snapshot
    :return: A new list, the input is left untouched
    """
    by_id = sorted(records, key=lambda record: record.id)
    # sorted() is stable with reverse=True as well, so ties keep the id order
    return sorted(by_id, key=lambda record: record.started_at, reverse=True)
