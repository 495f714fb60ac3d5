import logging
from typing import Sequence

from dockdash.exceptions import UnhandledFieldKind
from dockdash.models import ContainerRecord, DisplayWindow, MetricsSeries
from dockdash.view.formatter import get_formatter


def clamp_offset(offset: int, total: int) -> int:
    """
    Keeps the offset inside `[0, total - 1]`. An empty set always gives 0.
    """
    if total == 0:
        return 0
    return min(max(offset, 0), total - 1)


def format_name_row(record: ContainerRecord, row_number: int) -> str:
    return f"({row_number}) {record.short_id} {record.display_name}"


def select_window(ordered: Sequence[ContainerRecord], offset: int, kind) -> DisplayWindow:
    """
    Cuts the visible rows out of an ordered container set. The window is the suffix starting at the clamped offset.
    Rows are numbered from `total` for the newest container down to 1 for the oldest, whatever the offset is.

    :param ordered: Containers in display order (see `sort_containers`)
    :param offset: Requested scroll offset, clamped to the set
    :param kind: The FieldKind shown in the info column. An unknown kind is logged once and gives empty values.
    :return: A DisplayWindow with equal length names and values
    """
    total = len(ordered)
    offset = clamp_offset(offset, total)

    try:
        formatter = get_formatter(kind)
    except UnhandledFieldKind as e:
        logging.error(f"WindowSelector - {e}")
        formatter = None

    names = []
    values = []
    for rank in range(offset, total):
        record = ordered[rank]
        names.append(format_name_row(record, total - rank))
        values.append(formatter(record) if formatter else "")

    return DisplayWindow(names=names, values=values, offset=offset, total=total)


def select_metrics(series: MetricsSeries, offset: int) -> MetricsSeries:
    """
    Returns the samples of the series from `offset` onwards. The same offset is used for the CPU and the memory series
    to keep both charts aligned.
    """
    return series.window(offset)
