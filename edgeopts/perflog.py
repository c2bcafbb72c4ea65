import datetime

from .errors import InvalidArgumentError

DEFAULT_BUFFER_USAGE_REPORTING_INTERVAL = datetime.timedelta(milliseconds=1000)


class PerformanceLoggingPreferences(object):

    def __init__(self, is_collecting_network_events=True,
                 is_collecting_page_events=True,
                 buffer_usage_reporting_interval=None):
        """
        Preferences for the ``performance`` log of the driver.

        :param buffer_usage_reporting_interval: How often the browser
            reports on its trace buffer usage. Either a
            :class:`datetime.timedelta` or a number of milliseconds.
            Defaults to one second.
        """
        self.is_collecting_network_events = is_collecting_network_events
        self.is_collecting_page_events = is_collecting_page_events
        self._tracing_categories = []
        self._interval = DEFAULT_BUFFER_USAGE_REPORTING_INTERVAL
        if buffer_usage_reporting_interval is not None:
            self.buffer_usage_reporting_interval = \
                buffer_usage_reporting_interval

    @property
    def buffer_usage_reporting_interval(self):
        return self._interval

    @buffer_usage_reporting_interval.setter
    def buffer_usage_reporting_interval(self, value):
        if not isinstance(value, datetime.timedelta):
            value = datetime.timedelta(milliseconds=value)

        if value <= datetime.timedelta(0):
            raise InvalidArgumentError(
                "buffer usage reporting interval must be greater than zero")

        self._interval = value

    @property
    def tracing_categories(self):
        """
        The tracing categories, as a comma-separated string. Empty if
        none were added.
        """
        return ",".join(self._tracing_categories)

    def add_tracing_category(self, category):
        if not category:
            raise InvalidArgumentError(
                "category must not be None or empty")

        self.add_tracing_categories(category)

    def add_tracing_categories(self, *categories):
        self._tracing_categories.extend(categories)


def encode_performance_logging(prefs):
    """
    Produce the value of the ``perfLoggingPrefs`` option.

    :param prefs: The preferences to encode.
    :type prefs: :class:`PerformanceLoggingPreferences`
    :rtype: :class:`dict`
    """
    ret = {
        "enableNetwork": prefs.is_collecting_network_events,
        "enablePage": prefs.is_collecting_page_events,
    }

    categories = prefs.tracing_categories
    if categories:
        ret["traceCategories"] = categories

    interval = prefs.buffer_usage_reporting_interval
    ret["bufferUsageReportingInterval"] = \
        round(interval / datetime.timedelta(milliseconds=1))
    return ret
