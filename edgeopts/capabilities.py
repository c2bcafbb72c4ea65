"""
Rendering of :class:`.EdgeOptions` as the capabilities passed when a
session is created.

Edge Legacy and Edge Chromium do not take the same capabilities. Edge
Legacy takes a handful of flat ``ms:`` capabilities. Edge Chromium
takes most of its options in a single ``ms:edgeOptions`` object,
modeled after ``goog:chromeOptions``. Each is rendered by its own
function, and :func:`render` picks one.
"""

import base64
import enum
import errno
import logging

from selenium import webdriver

from .errors import MissingResourceError
from .mobile import encode_mobile_emulation
from .perflog import encode_performance_logging
from .registry import EDGE_OPTIONS_CAPABILITY, LOGGING_PREFERENCES_CAPABILITY

logger = logging.getLogger(__name__)

DEFAULT_BROWSER_NAME = webdriver.DesiredCapabilities.EDGE["browserName"]
WEB_VIEW_BROWSER_NAME = "webview2"

USE_CHROMIUM_CAPABILITY = "ms:edgeChromium"
IN_PRIVATE_CAPABILITY = "ms:inPrivate"
START_PAGE_CAPABILITY = "ms:startPage"
EXTENSION_PATHS_CAPABILITY = "ms:extensionPaths"


class Dialect(enum.Enum):
    LEGACY = "legacy"
    CHROMIUM = "chromium"


def read_extension_file(path):
    """
    Read an extension file and encode it in base64.

    :raises MissingResourceError: If the file does not exist.
    """
    try:
        with open(path, 'rb') as ext_file:
            data = ext_file.read()
    except FileNotFoundError as ex:
        raise MissingResourceError(
            errno.ENOENT, "No extension found at the specified path",
            path) from ex

    return base64.b64encode(data).decode("ascii")


def resolve_extensions(options, resolver=read_extension_file):
    """
    :returns: The base64-encoded extensions followed by the extension
              files, which are read now.
    :rtype: :class:`list`
    """
    ret = options.encoded_extensions
    for path in options.extension_files:
        logger.debug("reading extension %s", path)
        ret.append(resolver(path))
    return ret


def _base_capabilities(options):
    caps = {"browserName": options.browser_name}
    strategy = options.page_load_strategy.value
    if strategy is not None:
        caps["pageLoadStrategy"] = strategy
    return caps


def build_edge_options(options, resolver=read_extension_file):
    """
    Build the value of the ``ms:edgeOptions`` capability. Only options
    that differ from their default are included.

    :param options: The options to render.
    :type options: :class:`.EdgeOptions`
    :param resolver: The function which turns the path of an extension
                     file into a base64 string.
    :rtype: :class:`dict`
    """
    ret = {}

    arguments = options.arguments
    if arguments:
        ret["args"] = arguments

    if options.binary_location:
        ret["binary"] = options.binary_location

    extensions = resolve_extensions(options, resolver)
    if extensions:
        ret["extensions"] = extensions

    local_state = options.local_state_preferences
    if local_state:
        ret["localState"] = local_state

    prefs = options.user_profile_preferences
    if prefs:
        ret["prefs"] = prefs

    if options.leave_browser_running:
        ret["detach"] = True

    if options.use_spec_compliant_protocol:
        ret["w3c"] = True

    if options.debugger_address:
        ret["debuggerAddress"] = options.debugger_address

    excluded = options.excluded_arguments
    if excluded:
        ret["excludeSwitches"] = excluded

    if options.minidump_path:
        ret["minidumpPath"] = options.minidump_path

    device_name = options.mobile_emulation_device_name
    device_settings = options.mobile_emulation_device_settings
    if device_name or device_settings is not None:
        ret["mobileEmulation"] = encode_mobile_emulation(device_name,
                                                         device_settings)

    if options.performance_logging_preferences is not None:
        ret["perfLoggingPrefs"] = encode_performance_logging(
            options.performance_logging_preferences)

    window_types = options.window_types
    if window_types:
        ret["windowTypes"] = window_types

    # Names owned by typed options are refused when additional options
    # are added, so these do not collide with the keys set above.
    ret.update(options.additional_edge_options)

    return ret


def render_legacy(options, resolver=read_extension_file):
    """
    Render the capabilities for Edge Legacy. The Chromium options are
    not included.
    """
    caps = _base_capabilities(options)
    caps[USE_CHROMIUM_CAPABILITY] = False

    if options.use_in_private_browsing:
        caps[IN_PRIVATE_CAPABILITY] = True

    if options.start_page:
        caps[START_PAGE_CAPABILITY] = options.start_page

    extension_paths = options.extension_paths
    if extension_paths:
        caps[EXTENSION_PATHS_CAPABILITY] = extension_paths

    caps.update(options.additional_capabilities)
    return caps


def render_chromium(options, resolver=read_extension_file):
    """
    Render the capabilities for Edge Chromium.

    Global additional capabilities are applied last and are not checked
    against ``ms:edgeOptions``: a global capability with that name
    replaces the options built here.
    """
    edge_options = build_edge_options(options, resolver)

    caps = _base_capabilities(options)
    caps[USE_CHROMIUM_CAPABILITY] = True
    caps[EDGE_OPTIONS_CAPABILITY] = edge_options

    logging_prefs = options.logging_preferences
    if logging_prefs:
        caps[LOGGING_PREFERENCES_CAPABILITY] = logging_prefs

    caps.update(options.additional_capabilities)
    return caps


_RENDERERS = {
    Dialect.LEGACY: render_legacy,
    Dialect.CHROMIUM: render_chromium,
}


def render(options, dialect=None, resolver=read_extension_file):
    """
    Render ``options`` as capabilities. The options are only read.

    :param options: The options to render.
    :type options: :class:`.EdgeOptions`
    :param dialect: The dialect to produce. Defaults to
                    :attr:`.Dialect.CHROMIUM` if
                    ``options.use_chromium`` is set, and
                    :attr:`.Dialect.LEGACY` otherwise.
    :type dialect: :class:`Dialect`
    :returns: A new dictionary.
    :raises MissingResourceError: If an extension file cannot be read.
    """
    if dialect is None:
        dialect = Dialect.CHROMIUM if options.use_chromium \
            else Dialect.LEGACY

    dialect = Dialect(dialect)
    caps = _RENDERERS[dialect](options, resolver)
    logger.debug("rendered %s capabilities: %s", dialect.value,
                 ", ".join(caps))
    return caps
