from rich.bar import Bar
from rich.console import Console
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dockdash.config import Config
from dockdash.models import DashboardView, MetricsSeries

HEADER_TEXT = " Dockdash - Interactive realtime container inspector"
CHART_HEIGHT = 8
HEADER_HEIGHT = 3
PERCENT_SCALE = 100


class DashboardScreen:
    def __init__(self, config: Config, console: Console = None):
        self.config = config
        self.console = console or Console()
        self.live = Live(console=self.console, auto_refresh=False)

    def init_screen(self):
        self.live.start(False)

    def render(self, view: DashboardView):
        self.live.update(self.build_layout(view), refresh=True)

    def stop(self):
        self.live.stop()

    def build_layout(self, view: DashboardView) -> Layout:
        layout = Layout()
        layout.split_column(
            Layout(name="header", size=HEADER_HEIGHT),
            Layout(name="cpu", size=CHART_HEIGHT),
            Layout(name="mem", size=CHART_HEIGHT),
            Layout(name="containers", size=view.row_height),
        )
        layout["containers"].split_row(Layout(name="names", ratio=3), Layout(name="info", ratio=9))

        layout["header"].update(Text(HEADER_TEXT, style=self.config.tui_header_style))
        layout["cpu"].update(self.prepare_chart("%CPU", view.cpu_series, self.config.cpu_bar_style))
        layout["mem"].update(self.prepare_chart("%MEM", view.mem_series, self.config.mem_bar_style))
        layout["names"].update(self.prepare_list("Name", view.names))
        layout["info"].update(self.prepare_list(view.column_header, view.values))
        return layout

    def prepare_chart(self, title: str, series: MetricsSeries, bar_style: str) -> Panel:
        grid = Table.grid(padding=(0, 1), expand=True)
        grid.add_column(no_wrap=True)
        grid.add_column(ratio=1)
        grid.add_column(justify="right", no_wrap=True)

        # The series is already windowed at the scroll offset, so draw from its front
        for sample in series.samples[:CHART_HEIGHT - 2]:
            value = min(max(sample.value, 0.0), PERCENT_SCALE)
            grid.add_row(sample.label, Bar(PERCENT_SCALE, 0, value, color=bar_style), format(sample.value, ".2f"))

        return Panel(grid, title=title, title_align="left", border_style=self.config.border_style)

    def prepare_list(self, title: str, items) -> Panel:
        table = Table.grid(expand=True)
        table.add_column(style=self.config.list_item_style, overflow="ellipsis", no_wrap=True)
        for item in items:
            table.add_row(Text(item))
        return Panel(table, title=title, title_align="left", border_style=self.config.border_style)
