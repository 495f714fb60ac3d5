import logging
from typing import Dict, Optional


def cpu_percent(stats: Dict) -> Optional[float]:
    """
    Returns a container's CPU usage from one Docker stats payload
    :return: the CPU usage in percent, or None if the payload misses CPU details
    """
    try:
        cpu = {
            'system': stats['cpu_stats']['system_cpu_usage'],
            'total': stats['cpu_stats']['cpu_usage']['total_usage']
        }
        precpu = {
            'system': stats['precpu_stats']['system_cpu_usage'],
            'total': stats['precpu_stats']['cpu_usage']['total_usage']
        }

        cpu['count'] = stats['cpu_stats'].get('online_cpus')
        if cpu['count'] is None:
            cpu['count'] = len(stats['cpu_stats']['cpu_usage'].get('percpu_usage') or [])
    except (KeyError, TypeError) as e:
        logging.debug(f"ContainerStats - Failed to get CPU usage ({e})")
        return None

    # CPU usage % = cpu_delta / system_cpu_delta * number_of_cpus * 100
    cpu_delta = cpu['total'] - precpu['total']
    system_cpu_delta = cpu['system'] - precpu['system']
    if system_cpu_delta <= 0 or cpu_delta < 0:
        return 0.0
    return cpu_delta / system_cpu_delta * cpu['count'] * 100


def memory_percent(stats: Dict) -> Optional[float]:
    """
    Returns a container's memory usage, without the page cache, relative to its limit
    :return: the memory usage in percent, or None if the payload misses memory details
    """
    try:
        container_mem_stats = stats['memory_stats']
        usage = container_mem_stats['usage']
        limit = container_mem_stats['limit']
    except (KeyError, TypeError) as e:
        logging.debug(f"ContainerStats - Failed to get Memory stats ({e})")
        return None

    # cgroup v1 reports `cache`, cgroup v2 `inactive_file`
    details = container_mem_stats.get('stats') or {}
    cache = details.get('cache', details.get('inactive_file', 0))
    if not limit:
        return 0.0
    return max(usage - cache, 0) / limit * 100
