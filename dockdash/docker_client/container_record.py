from datetime import datetime, timezone
from typing import Dict, List, Optional

from dockdash.models import ContainerRecord, PortBinding, PortMapping


def read_iso_timestamp(timestamp_str: str) -> datetime:
    """
    A utility method to convert Docker API's timestamp into datetime objects.
    Removes characters after the seconds as datetime doesnt accept nanoseconds. Docker reports UTC times.
    :param timestamp_str: ISO 8061 string timestamp
    :return: corresponding timezone aware datetime instance
    """
    # Hard coding to 19 chars as that filters out excess text
    timestamp_str = timestamp_str[:19]
    return datetime.fromisoformat(timestamp_str).replace(tzinfo=timezone.utc)


def _port_sort_key(port_spec: str):
    port, _, protocol = port_spec.partition("/")
    return (int(port) if port.isdigit() else 0, port, protocol)


def read_ports(ports: Optional[Dict]) -> List[PortMapping]:
    """
    Converts `NetworkSettings.Ports` (`{"80/tcp": [{"HostIp": .., "HostPort": ..}], "443/tcp": None}`) into port
    mappings ordered by port number, then protocol. The protocol suffix is dropped from the port.
    """
    mappings = []
    for port_spec in sorted(ports or {}, key=_port_sort_key):
        bindings = [PortBinding(host_ip=binding.get('HostIp', ''), host_port=binding.get('HostPort', ''))
                    for binding in ports[port_spec] or []]
        mappings.append(PortMapping(port=port_spec.partition("/")[0], bindings=bindings))
    return mappings


def read_volumes(attrs: Dict) -> Dict[str, str]:
    """
    Container path to host path, from the legacy `Volumes` map and the `Mounts` list of newer daemons
    """
    volumes = dict(attrs.get('Volumes') or {})
    for mount in attrs.get('Mounts') or []:
        if 'Destination' in mount:
            volumes[mount['Destination']] = mount.get('Source', '')
    return volumes


def read_entrypoint(entrypoint) -> List[str]:
    if not entrypoint:
        return []
    if isinstance(entrypoint, str):
        return [entrypoint]
    return list(entrypoint)


def container_record_from_attrs(attrs: Dict) -> ContainerRecord:
    """
    Builds a ContainerRecord out of a container's inspection payload (`Container.attrs` in the Docker SDK)

    :param attrs: The inspection dict of one container
    :return: A ContainerRecord
    :raises KeyError: if `Id` is missing from attrs
    """
    config = attrs.get('Config') or {}
    host_config = attrs.get('HostConfig') or {}
    network_settings = attrs.get('NetworkSettings') or {}
    state = attrs.get('State') or {}

    return ContainerRecord(
        id=attrs['Id'],
        name=attrs.get('Name', ''),
        image=config.get('Image', ''),
        ports=read_ports(network_settings.get('Ports')),
        binds=host_config.get('Binds') or [],
        path=attrs.get('Path', ''),
        args=attrs.get('Args') or [],
        env=config.get('Env') or [],
        entrypoint=read_entrypoint(config.get('Entrypoint')),
        volumes=read_volumes(attrs),
        started_at=read_iso_timestamp(state.get('StartedAt') or '0001-01-01T00:00:00Z'),
    )
