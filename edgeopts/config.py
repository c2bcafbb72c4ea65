import collections

from .capabilities import Dialect
from .options import EdgeOptions

__all__ = ["ConfigTuple", "Config", "get_config", "forget"]


class ConfigTuple(collections.namedtuple(
        'ConfigTuple',
        ('platform', 'browser', 'version'))):

    def as_parameter(self, separator=","):
        return self.platform + separator + self.browser + separator \
            + self.version


configs = collections.OrderedDict()
_configs_by_platform = {}
_configs_by_browser = {}
_configs_by_version = {}

_BROWSER_ABBRS = {
    "ME": "EDGE",
    "LEGACY": "EDGE",
    "MSEDGE": "EDGECHROMIUM",
    "CHROMIUM": "EDGECHROMIUM",
}

_BROWSER_DIALECTS = {
    "EDGE": Dialect.LEGACY,
    "EDGECHROMIUM": Dialect.CHROMIUM,
}


def _normalize_browser(browser):
    if browser is None:
        return None

    browser = browser.upper()
    # Resolve abbreviation if it exists...
    return _BROWSER_ABBRS.get(browser, browser)


def _normalize_platform(platform):
    return platform.upper() if platform is not None else None


def _narrow(candidates, index, kind, value):
    """
    Intersect ``candidates`` with the configurations that ``index``
    holds for ``value``. A ``value`` of ``None`` does not narrow
    anything.

    :raises ValueError: If ``index`` has nothing for ``value``.
    """
    if value is None:
        return candidates

    if value not in index:
        raise ValueError("no configuration for {0}: {1}".format(kind, value))

    return index[value] if candidates is None else candidates & index[value]


def get_config(platform=None, browser=None, version=None):
    """
    Find the configuration matching the parameters. Parameters that are
    ``None`` match anything, but the result must be unique.

    :raises KeyError: If all parameters are given and nothing matches.
    :raises ValueError: If no configuration, or more than one, matches.
    """
    browser = _normalize_browser(browser)
    platform = _normalize_platform(platform)

    if platform is not None and browser is not None and version is not None:
        return configs[ConfigTuple(platform, browser, version)]

    ret = _narrow(None, _configs_by_browser, "browser", browser)
    ret = _narrow(ret, _configs_by_version, "version", version)
    ret = _narrow(ret, _configs_by_platform, "platform", platform)

    if not ret:
        raise ValueError("no configuration for the combination: {0}, {1}, {2}"
                         .format(platform, browser, version))
    elif len(ret) > 1:
        raise ValueError("the combination {0}, {1}, {2} is ambiguous"
                         .format(platform, browser, version))

    return next(iter(ret))


def forget():
    # pylint: disable=global-statement
    global configs, _configs_by_platform, _configs_by_browser, \
        _configs_by_version
    configs = collections.OrderedDict()
    _configs_by_platform = {}
    _configs_by_browser = {}
    _configs_by_version = {}


class Config(object):

    def __init__(self, platform, browser, version, options=None,
                 desired_capabilities=None, remote=False):
        """
        A named configuration: which Edge to run, where, and with what
        options. Creating a configuration registers it so that
        :func:`get_config` can find it. A configuration with the same
        platform, browser and version replaces the earlier one.

        :param browser: ``EDGE`` for Edge Legacy or ``EDGECHROMIUM``.
        :param options: The options of the browser. Defaults to empty
                        options.
        :type options: :class:`.EdgeOptions`
        :param desired_capabilities: Capabilities that override those
                                     rendered from ``options``.
        :type desired_capabilities: :class:`dict`
        :raises ValueError: If the browser is unknown.
        """
        if desired_capabilities is None:
            desired_capabilities = {}

        if options is None:
            options = EdgeOptions()

        browser = _normalize_browser(browser)
        platform = _normalize_platform(platform)

        if browser not in _BROWSER_DIALECTS:
            raise ValueError("unknown browser: {0}".format(browser))

        self.platform = platform
        self.browser = browser
        self.version = version
        self.remote = remote
        self.options = options
        self.desired_capabilities = desired_capabilities

        key = ConfigTuple(platform, browser, version)
        old = configs.get(key, None)

        ps = _configs_by_platform.setdefault(platform, set())
        bs = _configs_by_browser.setdefault(browser, set())
        vs = _configs_by_version.setdefault(version, set())

        if old:
            ps.discard(old)
            bs.discard(old)
            vs.discard(old)

        configs[key] = self
        ps.add(self)
        bs.add(self)
        vs.add(self)

    @property
    def dialect(self):
        return _BROWSER_DIALECTS[self.browser]

    def make_selenium_desired_capabilities(self):
        ret = self.options.to_capabilities(self.dialect)

        ret.update(self.desired_capabilities)
        ret["platformName"] = self.platform
        ret["browserVersion"] = self.version
        return ret

    def __str__(self):
        return "Edge configured for " + \
            ", ".join((self.platform, self.browser, self.version,
                       "Remote" if self.remote else "Local"))
