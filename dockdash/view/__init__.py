from dockdash.view.formatter import format_field, get_formatter
from dockdash.view.ordering import sort_containers
from dockdash.view.view_model import DashboardViewModel, build_dashboard_view
from dockdash.view.window import clamp_offset, select_metrics, select_window
