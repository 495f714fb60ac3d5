import logging
from datetime import timezone
from typing import Callable, Dict

from dockdash.exceptions import UnhandledFieldKind
from dockdash.models import ContainerRecord, FieldKind

# Ruby date layout, e.g. "Mon Jan 02 15:04:05 +0000 2006". Day and month names are always English.
WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
START_TIME_NUMERIC_FORMAT = "%d %H:%M:%S %z"
NO_BINDING = "N/A"

FieldFormatter = Callable[[ContainerRecord], str]


def format_image(record: ContainerRecord) -> str:
    return record.image


def format_ports(record: ContainerRecord) -> str:
    """
    One `port->HOST_IP:HOST_PORT` token per binding, or `port->N/A` for a port without any binding. The order of the
    record's ports and of each port's bindings is kept.
    """
    tokens = []
    for mapping in record.ports:
        if not mapping.bindings:
            tokens.append(f"{mapping.port}->{NO_BINDING}")
        for binding in mapping.bindings:
            tokens.append(f"{mapping.port}->{binding.host_ip}:{binding.host_port}")
    return ",".join(tokens)


def format_mounts(record: ContainerRecord) -> str:
    return ",".join(record.binds)


def format_command(record: ContainerRecord) -> str:
    # The separator is kept even without arguments
    return record.path + " " + " ".join(record.args)


def format_entrypoint(record: ContainerRecord) -> str:
    return " ".join(record.entrypoint)


def format_env(record: ContainerRecord) -> str:
    return ",".join(record.env)


def format_volumes(record: ContainerRecord) -> str:
    return ",".join(f"{internal}:{host}" for internal, host in sorted(record.volumes.items()))


def format_start_time(record: ContainerRecord) -> str:
    started_at = record.started_at
    if started_at.tzinfo is None:
        started_at = started_at.replace(tzinfo=timezone.utc)
    weekday = WEEKDAY_NAMES[started_at.weekday()]
    month = MONTH_NAMES[started_at.month - 1]
    return f"{weekday} {month} {started_at.strftime(START_TIME_NUMERIC_FORMAT)} {started_at.year:04d}"


FIELD_FORMATTERS: Dict[FieldKind, FieldFormatter] = {
    FieldKind.IMAGE: format_image,
    FieldKind.PORTS: format_ports,
    FieldKind.MOUNTS: format_mounts,
    FieldKind.COMMAND: format_command,
    FieldKind.ENTRYPOINT: format_entrypoint,
    FieldKind.ENV: format_env,
    FieldKind.VOLUMES: format_volumes,
    FieldKind.START_TIME: format_start_time,
}


def check_formatters(formatters: Dict[FieldKind, FieldFormatter] = FIELD_FORMATTERS) -> None:
    """
    Makes sure every FieldKind has a formatter, so a new kind cannot silently end up on the unhandled path.

    :raise RuntimeError: if a FieldKind is missing from `formatters`
    """
    missing = [kind.name for kind in FieldKind if kind not in formatters]
    if missing:
        raise RuntimeError(f"No formatter registered for field kinds: {', '.join(missing)}")


def get_formatter(kind) -> FieldFormatter:
    """
    Returns the formatting function for the given kind.

    :param kind: A FieldKind, or its integer value
    :raise UnhandledFieldKind: if `kind` is not one of the FieldKind values
    """
    try:
        return FIELD_FORMATTERS[FieldKind(kind)]
    except (ValueError, TypeError, KeyError):
        raise UnhandledFieldKind(kind) from None


def format_field(record: ContainerRecord, kind) -> str:
    """
    Formats one field of the record. An unknown kind is logged and formatted as an empty string.
    """
    try:
        formatter = get_formatter(kind)
    except UnhandledFieldKind as e:
        logging.error(f"FieldFormatter - {e}")
        return ""
    return formatter(record)


check_formatters()
