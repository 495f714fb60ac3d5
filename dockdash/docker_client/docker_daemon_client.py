import concurrent.futures
import logging
from datetime import datetime
from typing import Dict, List, Optional

from docker import DockerClient
from docker.errors import DockerException
from docker.models.containers import Container

from dockdash.config import Config
from dockdash.docker_client.container_record import container_record_from_attrs
from dockdash.docker_client.container_stats import cpu_percent, memory_percent
from dockdash.exceptions import ClientNotConnected
from dockdash.metrics import MetricsBuffer
from dockdash.models import ContainerRecord

SAMPLE_LABEL_FORMAT = "%H:%M:%S"
MAX_STATS_WORKERS = 32


class DockerDaemonClient:
    """
    This class is a wrapper around DockerClient that provides registry snapshots of the containers and CPU / memory
    samples for the metrics buffer in the format the dashboard consumes.
    """

    def __init__(self, config: Config):
        self.__config = config
        self.__client: Optional[DockerClient] = None
        self.__containers: List[Container] = []

    def connect(self) -> bool:
        """
        Instantiates the DockerClient with the given config options.

        :return: A bool indicating if the DockerClient connection succeeded or not
        :raises: Exception - If the client was already initialized successfully.
        """
        if self.__client:
            raise Exception("DockerDaemonClient - Already connected to a daemon")

        try:
            self.__client = DockerClient(base_url=self.__config.docker_socket_url)
        except DockerException as e:
            self.__client = None
            logging.error(f"DockerDaemonClient - Failed establish connection to docker daemon ({e})")
            return False

        return True

    def disconnect(self) -> None:
        if self.__client:
            self.__client.close()
        self.__client = None
        self.__containers = []

    def is_connected(self) -> bool:
        return self.__client is not None

    def __get_client(self) -> DockerClient:
        if not self.__client:
            raise ClientNotConnected("DockerDaemonClient - Client not Initialized!")
        return self.__client

    def get_registry_snapshot(self) -> Dict[str, ContainerRecord]:
        """
        Lists the containers and converts them into ContainerRecords keyed by container id. Returns an empty snapshot
        if the daemon cannot be reached.

        :return: A dict of container id to ContainerRecord
        :raises ClientNotConnected: If DockerClient is not initialized
        """
        client = self.__get_client()

        try:
            self.__containers = client.containers.list(all=self.__config.client_list_all_containers) or []
        except DockerException as e:  # We might have lost connection
            logging.error(f"DockerDaemonClient - Failed to get containers list ({e})")
            self.__containers = []
            return {}

        snapshot = {}
        for container in self.__containers:
            try:
                record = container_record_from_attrs(container.attrs)
            except (KeyError, ValueError) as e:
                logging.error(f"DockerDaemonClient - Skipping container {container.name}, unreadable attrs ({e})")
                continue
            snapshot[record.id] = record

        return snapshot

    def __read_stats(self, container: Container) -> Optional[Dict]:
        """
        Reads one stats payload of the container. A container that went away since the snapshot is logged and skipped.
        """
        try:
            return container.stats(stream=False)
        except DockerException as e:
            logging.error(f"DockerDaemonClient - Failed to get stats for {container.name} ({e})")
            return None

    def sample_metrics(self, buffer: MetricsBuffer, now: datetime = None) -> bool:
        """
        Reads one stats payload for every running container of the last snapshot and records the summed CPU% and
        MEM% as one sample labelled with the wall-clock time. Stats are read on a thread pool since each read blocks
        for one sampling interval of the daemon.

        :param buffer: The MetricsBuffer to record the sample in
        :param now: Time used for the sample label, defaults to the current time
        :return: A bool indicating if a sample was recorded, False only when no running container could be read
        :raises ClientNotConnected: If DockerClient is not initialized
        """
        self.__get_client()

        running = [container for container in self.__containers if container.status == 'running']
        payloads = []
        if running:
            with concurrent.futures.ThreadPoolExecutor(min(len(running), MAX_STATS_WORKERS)) as executor:
                payloads = [stats for stats in executor.map(self.__read_stats, running) if stats is not None]
            if not payloads:
                return False

        total_cpu = sum(cpu_percent(stats) or 0.0 for stats in payloads)
        total_mem = sum(memory_percent(stats) or 0.0 for stats in payloads)

        label = (now or datetime.now()).strftime(SAMPLE_LABEL_FORMAT)
        buffer.record(label, total_cpu, total_mem)
        logging.debug(f"DockerDaemonClient - Sample {label}: cpu={total_cpu:.2f} mem={total_mem:.2f}")
        return True
