import locale
import unittest
from datetime import datetime, timedelta, timezone

from dockdash.exceptions import UnhandledFieldKind
from dockdash.models import FieldKind, PortBinding, PortMapping
from dockdash.view.formatter import FIELD_FORMATTERS, check_formatters, format_field, get_formatter
from tests.factories import make_record


class TestFieldFormatter(unittest.TestCase):

    def test_image(self):
        record = make_record(1, image="nginx:1.25")
        self.assertEqual(format_field(record, FieldKind.IMAGE), "nginx:1.25")

    def test_port_without_binding(self):
        record = make_record(1, ports=[PortMapping(port="80")])
        self.assertEqual(format_field(record, FieldKind.PORTS), "80->N/A")

    def test_port_with_bindings_keeps_binding_order(self):
        bindings = [PortBinding(host_ip="1.2.3.4", host_port="8080"), PortBinding(host_ip="0.0.0.0", host_port="8081")]
        record = make_record(1, ports=[PortMapping(port="80", bindings=bindings)])
        self.assertEqual(format_field(record, FieldKind.PORTS), "80->1.2.3.4:8080,80->0.0.0.0:8081")

    def test_several_ports(self):
        record = make_record(1, ports=[
            PortMapping(port="80", bindings=[PortBinding(host_ip="0.0.0.0", host_port="80")]),
            PortMapping(port="443"),
        ])
        self.assertEqual(format_field(record, FieldKind.PORTS), "80->0.0.0.0:80,443->N/A")

    def test_no_ports(self):
        self.assertEqual(format_field(make_record(1), FieldKind.PORTS), "")

    def test_mounts(self):
        record = make_record(1, binds=["/srv/data:/data", "/srv/logs:/logs:ro"])
        self.assertEqual(format_field(record, FieldKind.MOUNTS), "/srv/data:/data,/srv/logs:/logs:ro")

    def test_command(self):
        record = make_record(1, path="nginx", args=["-g", "daemon off;"])
        self.assertEqual(format_field(record, FieldKind.COMMAND), "nginx -g daemon off;")

    def test_command_without_args_keeps_separator(self):
        record = make_record(1, path="/bin/sh")
        self.assertEqual(format_field(record, FieldKind.COMMAND), "/bin/sh ")

    def test_entrypoint(self):
        record = make_record(1, entrypoint=["/docker-entrypoint.sh", "postgres"])
        self.assertEqual(format_field(record, FieldKind.ENTRYPOINT), "/docker-entrypoint.sh postgres")

    def test_env(self):
        record = make_record(1, env=["PATH=/usr/bin", "LANG=C.UTF-8"])
        self.assertEqual(format_field(record, FieldKind.ENV), "PATH=/usr/bin,LANG=C.UTF-8")

    def test_volumes_sorted_by_container_path(self):
        record = make_record(1, volumes={"/var/lib/mysql": "/srv/mysql", "/etc/mysql": "/srv/conf"})
        self.assertEqual(format_field(record, FieldKind.VOLUMES), "/etc/mysql:/srv/conf,/var/lib/mysql:/srv/mysql")

    def test_start_time(self):
        record = make_record(1, started_at=datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc))
        self.assertEqual(format_field(record, FieldKind.START_TIME), "Mon Jan 02 15:04:05 +0000 2006")

    def test_start_time_keeps_offset(self):
        started_at = datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone(timedelta(hours=-7)))
        record = make_record(1, started_at=started_at)
        self.assertEqual(format_field(record, FieldKind.START_TIME), "Mon Jan 02 15:04:05 -0700 2006")

    def test_start_time_ignores_locale(self):
        record = make_record(1, started_at=datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc))
        previous = locale.setlocale(locale.LC_TIME)
        try:
            locale.setlocale(locale.LC_TIME, "de_DE.UTF-8")
        except locale.Error:
            self.skipTest("de_DE.UTF-8 locale not available")
        try:
            self.assertEqual(format_field(record, FieldKind.START_TIME), "Mon Jan 02 15:04:05 +0000 2006")
        finally:
            locale.setlocale(locale.LC_TIME, previous)

    def test_start_time_year_padded(self):
        record = make_record(1, started_at=datetime(1, 1, 1, tzinfo=timezone.utc))
        self.assertEqual(format_field(record, FieldKind.START_TIME), "Mon Jan 01 00:00:00 +0000 0001")

    def test_integer_kind(self):
        record = make_record(1, image="redis")
        self.assertEqual(format_field(record, 0), "redis")

    def test_unhandled_kind_gives_empty_string(self):
        record = make_record(1)
        with self.assertLogs(level="ERROR"):
            self.assertEqual(format_field(record, 42), "")
        with self.assertLogs(level="ERROR"):
            self.assertEqual(format_field(record, "image"), "")

    def test_get_formatter_raises(self):
        with self.assertRaises(UnhandledFieldKind) as context:
            get_formatter(-1)
        self.assertEqual(context.exception.kind, -1)

    def test_every_kind_has_a_formatter(self):
        check_formatters()
        self.assertEqual(set(FIELD_FORMATTERS), set(FieldKind))

    def test_missing_formatter_detected(self):
        formatters = dict(FIELD_FORMATTERS)
        formatters.pop(FieldKind.VOLUMES)
        with self.assertRaises(RuntimeError):
            check_formatters(formatters)


if __name__ == "__main__":
    unittest.main()
