from dockdash.docker_client.docker_daemon_client import DockerDaemonClient
