import logging
import time

from dockdash.config import Config
from dockdash.docker_client import DockerDaemonClient
from dockdash.logger import configure_logging
from dockdash.metrics import MetricsBuffer
from dockdash.models import ViewState
from dockdash.outputs.screen import DashboardScreen
from dockdash.view.view_model import DashboardViewModel


class DockdashStandalone:
    """
    Refreshes the dashboard every `config.refresh_interval` seconds. Keyboard input is not handled here, the view
    state is only changed through `view_model`.
    """

    def __init__(self, config: Config = None):
        self.config = config or Config.load_env_from_file()
        self.screen = DashboardScreen(self.config)
        self.client = DockerDaemonClient(self.config)
        self.view_model = DashboardViewModel(MetricsBuffer(self.config.max_metric_samples),
                                             ViewState(field_kind=self.config.default_field))
        self.is_running = False

    def run(self, cycles: int = None) -> bool:
        """
        Connects to the daemon and renders until interrupted, or for `cycles` refreshes when given.

        :return: False if the daemon could not be reached
        """
        configure_logging(self.config)
        if not self.client.connect():
            return False

        self.is_running = True
        self.screen.init_screen()
        try:
            while self.is_running:
                self.refresh()
                if cycles is not None:
                    cycles -= 1
                    if cycles <= 0:
                        break
                time.sleep(self.config.refresh_interval)
        except KeyboardInterrupt:
            logging.info("DockdashStandalone - Interrupted")
        finally:
            self.shutdown()
        return True

    def refresh(self) -> None:
        snapshot = self.client.get_registry_snapshot()
        self.client.sample_metrics(self.view_model.metrics)
        self.screen.render(self.view_model.refresh(snapshot))

    def shutdown(self) -> None:
        self.is_running = False
        self.screen.stop()
        self.client.disconnect()
