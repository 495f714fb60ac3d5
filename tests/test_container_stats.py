import unittest

from dockdash.docker_client.container_stats import cpu_percent, memory_percent


def make_stats(total=400, system=2000, pre_total=200, pre_system=1000, online_cpus=2):
    return {
        'cpu_stats': {
            'cpu_usage': {'total_usage': total, 'percpu_usage': [1, 1, 1, 1]},
            'system_cpu_usage': system,
            'online_cpus': online_cpus,
        },
        'precpu_stats': {
            'cpu_usage': {'total_usage': pre_total},
            'system_cpu_usage': pre_system,
        },
        'memory_stats': {
            'usage': 300,
            'limit': 1000,
            'stats': {'cache': 100},
        },
    }


class TestCpuPercent(unittest.TestCase):

    def test_usage(self):
        # 200 / 1000 * 2 cpus * 100
        self.assertAlmostEqual(cpu_percent(make_stats()), 40.0)

    def test_percpu_fallback(self):
        self.assertAlmostEqual(cpu_percent(make_stats(online_cpus=None)), 80.0)

    def test_no_system_delta(self):
        self.assertEqual(cpu_percent(make_stats(system=1000)), 0.0)

    def test_missing_details(self):
        self.assertIsNone(cpu_percent({'cpu_stats': {}}))
        self.assertIsNone(cpu_percent({}))


class TestMemoryPercent(unittest.TestCase):

    def test_usage_without_cache(self):
        self.assertAlmostEqual(memory_percent(make_stats()), 20.0)

    def test_cgroup_v2(self):
        stats = {'memory_stats': {'usage': 500, 'limit': 1000, 'stats': {'inactive_file': 250}}}
        self.assertAlmostEqual(memory_percent(stats), 25.0)

    def test_zero_limit(self):
        self.assertEqual(memory_percent({'memory_stats': {'usage': 5, 'limit': 0}}), 0.0)

    def test_missing_details(self):
        self.assertIsNone(memory_percent({'memory_stats': {}}))


if __name__ == "__main__":
    unittest.main()
