from typing import Mapping

from dockdash.metrics import MetricsBuffer
from dockdash.models import ContainerRecord, DashboardView, FIELD_HEADERS, ViewState
from dockdash.view.ordering import sort_containers
from dockdash.view.window import select_metrics, select_window


def build_dashboard_view(snapshot: Mapping[str, ContainerRecord], metrics: MetricsBuffer,
                         state: ViewState) -> DashboardView:
    """
    Derives everything the presentation layer draws from one registry snapshot, the metrics buffer and the view
    state. Nothing passed in is modified, so the same inputs always give the same DashboardView.

    :param snapshot: Container id to ContainerRecord
    :param metrics: The rolling CPU and memory series
    :param state: Current offset and FieldKind
    :return: A DashboardView
    """
    ordered = sort_containers(snapshot.values())
    window = select_window(ordered, state.offset, state.field_kind)

    return DashboardView(
        names=window.names,
        values=window.values,
        column_header=FIELD_HEADERS.get(state.field_kind, ""),
        row_height=window.row_height,
        offset=window.offset,
        total=window.total,
        cpu_series=select_metrics(metrics.cpu, state.offset),
        mem_series=select_metrics(metrics.mem, state.offset),
    )


class DashboardViewModel:
    """
    Holds the state that outlives a refresh (the ViewState and the MetricsBuffer) and rebuilds the DashboardView from
    each new registry snapshot.
    """

    def __init__(self, metrics: MetricsBuffer, state: ViewState = None):
        self.metrics = metrics
        self.state = state if state is not None else ViewState()
        self.last_view: DashboardView = DashboardView()

    def refresh(self, snapshot: Mapping[str, ContainerRecord]) -> DashboardView:
        self.last_view = build_dashboard_view(snapshot, self.metrics, self.state)
        return self.last_view

    def scroll(self, delta: int) -> int:
        return self.state.scroll(delta, self.last_view.total)

    def next_field(self):
        return self.state.next_field()

    def previous_field(self):
        return self.state.previous_field()
