from dockdash.models import DEFAULT_MAX_SAMPLES, MetricsSeries


class MetricsBuffer:
    """
    Rolling CPU% and MEM% series, appended to by metrics ingestion and read by the view model. Both series always hold
    the same number of samples.
    """

    def __init__(self, max_samples: int = DEFAULT_MAX_SAMPLES):
        self.max_samples = max_samples
        self.cpu = MetricsSeries(max_samples=max_samples)
        self.mem = MetricsSeries(max_samples=max_samples)

    def record(self, label: str, cpu_percent: float, mem_percent: float) -> None:
        self.cpu.append(label, cpu_percent)
        self.mem.append(label, mem_percent)

    def clear(self) -> None:
        self.cpu = MetricsSeries(max_samples=self.max_samples)
        self.mem = MetricsSeries(max_samples=self.max_samples)

    def __len__(self) -> int:
        return len(self.cpu)
