import os

from dotenv import load_dotenv

from dockdash.exceptions import ConfigError
from dockdash.models import DEFAULT_MAX_SAMPLES, FieldKind


def _get_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {value!r}") from None


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from None


def _get_field_kind(name: str, default: FieldKind) -> FieldKind:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return FieldKind[value.strip().upper()]
    except KeyError:
        raise ConfigError(f"{name} must be one of {', '.join(kind.name for kind in FieldKind)}, got {value!r}") \
            from None


class Config:
    def __init__(self, docker_socket_url, client_list_all_containers, refresh_interval, max_metric_samples,
                 default_field, log_file, log_level, tui_header_style, list_item_style, border_style, cpu_bar_style,
                 mem_bar_style):
        # Docker daemon options
        self.docker_socket_url = docker_socket_url

        # Docker API Client options
        self.client_list_all_containers = client_list_all_containers

        # Dashboard options
        self.refresh_interval = refresh_interval
        self.max_metric_samples = max_metric_samples
        self.default_field = default_field

        # Logging options
        self.log_file = log_file
        self.log_level = log_level

        # TUI options
        self.tui_header_style = tui_header_style
        self.list_item_style = list_item_style
        self.border_style = border_style
        self.cpu_bar_style = cpu_bar_style
        self.mem_bar_style = mem_bar_style

        if self.refresh_interval <= 0:
            raise ConfigError(f"REFRESH_INTERVAL must be positive, got {self.refresh_interval}")
        if self.max_metric_samples <= 0:
            raise ConfigError(f"MAX_METRIC_SAMPLES must be positive, got {self.max_metric_samples}")

    @staticmethod
    def load_env_from_file(path: str = None):
        if path:
            load_dotenv(path)
        else:
            load_dotenv()

        config = {
            # Docker daemon options
            'docker_socket_url': os.getenv("DOCKER_SOCKET_URL", "unix://var/run/docker.sock"),

            # Docker API Client options
            'client_list_all_containers': os.getenv("DOCKER_API_LIST_ALL_CONTAINERS", False) == "True",

            # Dashboard options
            'refresh_interval': _get_float("REFRESH_INTERVAL", 1.0),
            'max_metric_samples': _get_int("MAX_METRIC_SAMPLES", DEFAULT_MAX_SAMPLES),
            'default_field': _get_field_kind("DEFAULT_FIELD", FieldKind.IMAGE),

            # Logging options
            'log_file': os.getenv("LOG_FILE", "dockdash.log"),
            'log_level': os.getenv("LOG_LEVEL", "INFO"),

            # TUI options
            'tui_header_style': os.getenv("TUI_HEADER_STYLE", "bold"),
            'list_item_style': os.getenv("LIST_ITEM_STYLE", "cyan"),
            'border_style': os.getenv("BORDER_STYLE", "black"),
            'cpu_bar_style': os.getenv("CPU_BAR_STYLE", "green"),
            'mem_bar_style': os.getenv("MEM_BAR_STYLE", "magenta"),
        }

        return Config(**config)
