from datetime import datetime, timezone
from enum import IntEnum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

SHA_256_ID_PICK_SIZE = 12
DEFAULT_MAX_SAMPLES = 100


class FieldKind(IntEnum):
    IMAGE = 0
    PORTS = 1
    MOUNTS = 2
    COMMAND = 3
    ENTRYPOINT = 4
    ENV = 5
    VOLUMES = 6
    START_TIME = 7

    @property
    def header(self) -> str:
        return FIELD_HEADERS[self]


FIELD_HEADERS: Dict[FieldKind, str] = {
    FieldKind.IMAGE: "Image",
    FieldKind.PORTS: "Ports",
    FieldKind.MOUNTS: "Mounts",
    FieldKind.COMMAND: "Command",
    FieldKind.ENTRYPOINT: "Entrypoint",
    FieldKind.ENV: "Envs",
    FieldKind.VOLUMES: "Volumes",
    FieldKind.START_TIME: "Created At",
}

MIN_FIELD_KIND = min(FieldKind)
MAX_FIELD_KIND = max(FieldKind)


class PortBinding(BaseModel):
    model_config = ConfigDict(frozen=True)

    host_ip: str = ""
    host_port: str = ""


class PortMapping(BaseModel):
    model_config = ConfigDict(frozen=True)

    port: str
    bindings: List[PortBinding] = []


class ContainerRecord(BaseModel):
    """
    Snapshot of one container at sample time. Records are replaced wholesale on every registry refresh and are never
    mutated by the view layer.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    image: str = ""
    ports: List[PortMapping] = []
    binds: List[str] = []
    path: str = ""
    args: List[str] = []
    env: List[str] = []
    entrypoint: List[str] = []
    volumes: Dict[str, str] = {}
    started_at: datetime

    @field_validator("started_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Naive timestamps are read as UTC so that every record compares against every other
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)

    @property
    def short_id(self) -> str:
        return self.id[:SHA_256_ID_PICK_SIZE]

    @property
    def display_name(self) -> str:
        return self.name.lstrip("/")


class DisplayWindow(BaseModel):
    """
    The rows visible in the Name and info lists. `offset` is the clamped offset the window was cut at and `total` the
    size of the full ordered set, so `len(names) == len(values) == total - offset` when `total` is not zero.
    """
    model_config = ConfigDict(frozen=True)

    names: List[str] = []
    values: List[str] = []
    offset: int = 0
    total: int = 0

    @property
    def row_height(self) -> int:
        # Two extra rows for the list borders
        return len(self.names) + 2


class MetricsSample(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    value: float


class MetricsSeries(BaseModel):
    """
    A rolling, capped sequence of samples for one resource dimension. The oldest sample is dropped once `max_samples`
    is reached.
    """
    max_samples: int = Field(default=DEFAULT_MAX_SAMPLES, gt=0)
    samples: List[MetricsSample] = []

    def append(self, label: str, value: float) -> None:
        self.samples.append(MetricsSample(label=label, value=value))
        if len(self.samples) > self.max_samples:
            del self.samples[:len(self.samples) - self.max_samples]

    def window(self, offset: int) -> "MetricsSeries":
        return MetricsSeries(max_samples=self.max_samples, samples=self.samples[max(offset, 0):])

    @property
    def labels(self) -> List[str]:
        return [sample.label for sample in self.samples]

    @property
    def values(self) -> List[float]:
        return [sample.value for sample in self.samples]

    def __len__(self) -> int:
        return len(self.samples)


class ViewState(BaseModel):
    """
    User controlled state that outlives a single refresh. Mutated by input handling between refreshes only.
    """
    offset: int = 0
    field_kind: FieldKind = FieldKind.IMAGE

    def next_field(self) -> FieldKind:
        self.field_kind = FieldKind(MIN_FIELD_KIND + (self.field_kind - MIN_FIELD_KIND + 1) % len(FieldKind))
        return self.field_kind

    def previous_field(self) -> FieldKind:
        self.field_kind = FieldKind(MIN_FIELD_KIND + (self.field_kind - MIN_FIELD_KIND - 1) % len(FieldKind))
        return self.field_kind

    def scroll(self, delta: int, total: int) -> int:
        self.offset = min(max(self.offset + delta, 0), max(total - 1, 0))
        return self.offset

    def reset(self) -> None:
        self.offset = 0
        self.field_kind = FieldKind.IMAGE


class DashboardView(BaseModel):
    model_config = ConfigDict(frozen=True)

    names: List[str] = []
    values: List[str] = []
    column_header: str = ""
    row_height: int = 2
    offset: int = 0
    total: int = 0
    cpu_series: MetricsSeries = MetricsSeries()
    mem_series: MetricsSeries = MetricsSeries()
