import datetime
from unittest import TestCase

from edgeopts import MobileEmulationDeviceSettings, \
    PerformanceLoggingPreferences, InvalidArgumentError
from edgeopts.mobile import encode_mobile_emulation
from edgeopts.perflog import encode_performance_logging


class MobileEmulationTestCase(TestCase):

    def test_device_name(self):
        self.assertEqual(encode_mobile_emulation("Pixel 2"),
                         {"deviceName": "Pixel 2"})

    def test_touch_enabled_is_omitted(self):
        settings = MobileEmulationDeviceSettings("UA", 360, 640, 2.0)
        self.assertEqual(encode_mobile_emulation(settings=settings), {
            "userAgent": "UA",
            "deviceMetrics": {"width": 360, "height": 640, "pixelRatio": 2.0},
        })

    def test_touch_disabled(self):
        settings = MobileEmulationDeviceSettings(
            "UA", enable_touch_events=False)
        metrics = encode_mobile_emulation(settings=settings)["deviceMetrics"]
        self.assertIs(metrics["touch"], False)

    def test_nothing(self):
        self.assertEqual(encode_mobile_emulation(), {})


class PerformanceLoggingTestCase(TestCase):

    def test_defaults(self):
        self.assertEqual(
            encode_performance_logging(PerformanceLoggingPreferences()),
            {"enableNetwork": True, "enablePage": True,
             "bufferUsageReportingInterval": 1000})

    def test_categories(self):
        prefs = PerformanceLoggingPreferences(False, False)
        prefs.add_tracing_category("devtools.timeline")
        prefs.add_tracing_categories("v8", "blink")
        self.assertEqual(encode_performance_logging(prefs), {
            "enableNetwork": False,
            "enablePage": False,
            "traceCategories": "devtools.timeline,v8,blink",
            "bufferUsageReportingInterval": 1000,
        })

    def test_interval(self):
        prefs = PerformanceLoggingPreferences(
            buffer_usage_reporting_interval=datetime.timedelta(seconds=2.5))
        self.assertEqual(
            encode_performance_logging(prefs)["bufferUsageReportingInterval"],
            2500)
        prefs.buffer_usage_reporting_interval = 750
        self.assertEqual(
            encode_performance_logging(prefs)["bufferUsageReportingInterval"],
            750)

    def test_bad_interval(self):
        prefs = PerformanceLoggingPreferences()
        with self.assertRaises(InvalidArgumentError):
            prefs.buffer_usage_reporting_interval = 0
        self.assertEqual(prefs.buffer_usage_reporting_interval,
                         datetime.timedelta(seconds=1))

    def test_empty_category(self):
        with self.assertRaises(InvalidArgumentError):
            PerformanceLoggingPreferences().add_tracing_category("")
