import base64
import binascii
import copy
import enum
import errno
import logging
import os

from . import capabilities
from .errors import InvalidArgumentError, MissingResourceError, \
    EncodingError, ReservedNameError
from .mobile import MobileEmulationDeviceSettings
from .registry import EDGE_CAPABILITIES

logger = logging.getLogger(__name__)

__all__ = ["EdgeOptions", "PageLoadStrategy", "LOG_LEVELS"]

LOG_LEVELS = ("ALL", "DEBUG", "INFO", "WARNING", "SEVERE", "OFF")


class PageLoadStrategy(enum.Enum):
    DEFAULT = None
    NORMAL = "normal"
    EAGER = "eager"
    NONE = "none"


def _check_not_empty(value, name):
    if not value:
        raise InvalidArgumentError(
            "{0} must not be None or empty".format(name))


def _check_items(values, name):
    if any(value is None for value in values):
        raise InvalidArgumentError(
            "{0} must not contain None".format(name))
    return list(values)


class EdgeOptions(object):
    """
    Accumulates the options for an Edge session and renders them as
    capabilities. Edge Legacy and Edge Chromium take very different
    capabilities, :attr:`use_chromium` selects which are produced.

    Instances are not meant to be mutated from multiple threads at
    once. Callers sharing an instance must synchronize access
    themselves.
    """

    known_capabilities = EDGE_CAPABILITIES

    def __init__(self):
        self.use_chromium = False
        self.use_in_private_browsing = False
        self.start_page = None
        self.binary_location = None
        self.leave_browser_running = False
        self.use_spec_compliant_protocol = False
        self.use_web_view = False
        self.debugger_address = None
        self.minidump_path = None
        self.performance_logging_preferences = None

        self._page_load_strategy = PageLoadStrategy.DEFAULT
        self._arguments = []
        self._excluded_arguments = []
        self._window_types = []
        self._extension_paths = []
        self._extension_files = []
        self._encoded_extensions = []
        self._user_profile_preferences = {}
        self._local_state_preferences = {}
        self._logging_preferences = {}
        self._mobile_emulation_device_name = None
        self._mobile_emulation_device_settings = None
        self._additional_capabilities = {}
        self._additional_edge_options = {}

    @property
    def browser_name(self):
        return capabilities.WEB_VIEW_BROWSER_NAME if self.use_web_view \
            else capabilities.DEFAULT_BROWSER_NAME

    @property
    def page_load_strategy(self):
        return self._page_load_strategy

    @page_load_strategy.setter
    def page_load_strategy(self, value):
        try:
            self._page_load_strategy = PageLoadStrategy(value)
        except ValueError:
            raise InvalidArgumentError(
                "unknown page load strategy: {!r}".format(value)) from None

    @property
    def arguments(self):
        return list(self._arguments)

    @property
    def excluded_arguments(self):
        return list(self._excluded_arguments)

    @property
    def window_types(self):
        return list(self._window_types)

    @property
    def extension_paths(self):
        return list(self._extension_paths)

    @property
    def extension_files(self):
        return list(self._extension_files)

    @property
    def encoded_extensions(self):
        return list(self._encoded_extensions)

    @property
    def extensions(self):
        """
        All extensions as base64 strings. The files added with
        :meth:`add_extensions` are read every time this property is
        accessed.

        :raises MissingResourceError: If an extension file has
                                      disappeared since it was added.
        """
        return capabilities.resolve_extensions(self)

    @property
    def user_profile_preferences(self):
        return dict(self._user_profile_preferences)

    @property
    def local_state_preferences(self):
        return dict(self._local_state_preferences)

    @property
    def logging_preferences(self):
        return dict(self._logging_preferences)

    @property
    def mobile_emulation_device_name(self):
        return self._mobile_emulation_device_name

    @property
    def mobile_emulation_device_settings(self):
        return copy.copy(self._mobile_emulation_device_settings)

    @property
    def additional_capabilities(self):
        return dict(self._additional_capabilities)

    @property
    def additional_edge_options(self):
        return dict(self._additional_edge_options)

    def add_argument(self, argument):
        """
        Add an argument to the ``msedge`` command line.
        """
        _check_not_empty(argument, "argument")
        self.add_arguments(argument)

    def add_arguments(self, *arguments):
        self._arguments.extend(_check_items(arguments, "arguments"))

    def add_excluded_argument(self, argument):
        """
        Exclude an argument from those ``msedgedriver`` passes by default
        to ``msedge``.
        """
        _check_not_empty(argument, "argument")
        self.add_excluded_arguments(argument)

    def add_excluded_arguments(self, *arguments):
        self._excluded_arguments.extend(
            _check_items(arguments, "arguments"))

    def add_window_type(self, window_type):
        """
        Add a type of window that is listed among the window handles,
        e.g. ``webview``.
        """
        _check_not_empty(window_type, "window_type")
        self.add_window_types(window_type)

    def add_window_types(self, *window_types):
        self._window_types.extend(_check_items(window_types,
                                                  "window_types"))

    def add_extension_path(self, path):
        """
        Add the path of an unpacked extension for Edge Legacy.
        """
        _check_not_empty(path, "path")
        self.add_extension_paths(path)

    def add_extension_paths(self, *paths):
        self._extension_paths.extend(_check_items(paths, "paths"))

    def add_extension(self, path):
        """
        Add a packed extension (``.crx``) to install in Edge Chromium.
        The file must exist now but it is only read when the
        capabilities are rendered.

        :param path: The path of the extension.
        :type path: :class:`str`
        :raises MissingResourceError: If there is no file at ``path``.
        """
        _check_not_empty(path, "path")
        self.add_extensions(path)

    def add_extensions(self, *paths):
        paths = _check_items(paths, "paths")
        for path in paths:
            if not os.path.isfile(path):
                raise MissingResourceError(
                    errno.ENOENT, "No extension found at the specified path",
                    path)

        self._extension_files.extend(paths)

    def add_encoded_extension(self, extension):
        """
        Add an extension, already encoded in base64, to install in Edge
        Chromium.

        :raises InvalidArgumentError: If ``extension`` is not a string.
        :raises EncodingError: If ``extension`` is not valid base64.
        """
        _check_not_empty(extension, "extension")
        self.add_encoded_extensions(extension)

    def add_encoded_extensions(self, *extensions):
        extensions = _check_items(extensions, "extensions")
        for extension in extensions:
            if not isinstance(extension, str):
                raise InvalidArgumentError(
                    "extensions must be strings, not {0}"
                    .format(type(extension).__name__))

            # We only decode to check that the string is well-formed.
            # Line breaks and other whitespace are allowed in the string.
            try:
                base64.b64decode("".join(extension.split()), validate=True)
            except (binascii.Error, ValueError, TypeError) as ex:
                raise EncodingError(
                    "Could not properly decode the base64 string") from ex

        self._encoded_extensions.extend(extensions)

    def add_user_profile_preference(self, name, value):
        """
        Set a preference of the user profile. An existing preference with
        the same name is overwritten.
        """
        self._user_profile_preferences[name] = value

    def add_local_state_preference(self, name, value):
        """
        Set a preference of the local state file of the user data
        directory. An existing preference with the same name is
        overwritten.
        """
        self._local_state_preferences[name] = value

    def set_logging_preference(self, log_type, level):
        """
        Set the level at which the log of type ``log_type`` is recorded.

        :param level: One of :data:`LOG_LEVELS`, case does not matter.
        """
        _check_not_empty(log_type, "log_type")
        level = str(level).upper()
        if level not in LOG_LEVELS:
            raise InvalidArgumentError(
                "unknown log level: {0}".format(level))

        self._logging_preferences[log_type] = level

    def enable_mobile_emulation(self, device):
        """
        Make Edge emulate a mobile device. A name chosen in the DevTools
        emulation panel and explicit settings are mutually exclusive:
        each call replaces what a previous call set. Calling with
        ``None`` turns emulation off.

        An unknown device name is not detected here. Edge reports it
        when the session starts. Settings are copied, so changing them
        after this call has no effect.

        :param device: A device name or explicit settings.
        :type device: :class:`str` or
                      :class:`.MobileEmulationDeviceSettings`
        :raises InvalidArgumentError: If the settings have no user agent,
                                      or if ``device`` is neither settings,
                                      a string nor ``None``.
        """
        if isinstance(device, MobileEmulationDeviceSettings):
            if not device.user_agent:
                raise InvalidArgumentError(
                    "Device settings must include a user agent string.")
            self._mobile_emulation_device_name = None
            self._mobile_emulation_device_settings = copy.copy(device)
        elif device is None or isinstance(device, str):
            self._mobile_emulation_device_settings = None
            self._mobile_emulation_device_name = device
        else:
            raise InvalidArgumentError(
                "device must be a name or MobileEmulationDeviceSettings, "
                "not {0}".format(type(device).__name__))

    def add_additional_capability(self, name, value, is_global=False):
        """
        Set a capability for which there is no typed option.

        By default the capability goes into the ``ms:edgeOptions``
        object, which is what new ``msedgedriver`` options need. Global
        capabilities go at the top level instead. Setting a name again
        in the same scope overwrites the previous value. The two scopes
        are independent.

        :param name: The name of the capability.
        :type name: :class:`str`
        :param value: The value of the capability.
        :param is_global: Whether to set a top-level capability.
        :type is_global: :class:`bool`
        :raises ReservedNameError: If the name is empty or belongs to a
                                   typed option.
        """
        if not name:
            raise ReservedNameError(
                "Capability name may not be None or an empty string.")

        known = self.known_capabilities
        if known.is_known(name):
            owner = known.owner_of(name)
            raise ReservedNameError(
                "There is already an option for the {0} capability. "
                "Please use the {1} instead.".format(name, owner),
                name=name, owner=owner)

        target = self._additional_capabilities if is_global else \
            self._additional_edge_options
        target[name] = value
        logger.debug("additional %s capability set: %s",
                     "global" if is_global else "edge", name)

    def to_capabilities(self, dialect=None):
        """
        Render these options as capabilities. The options are not
        modified and may be rendered any number of times.

        :param dialect: Force a dialect instead of the one selected by
                        :attr:`use_chromium`.
        :type dialect: :class:`.Dialect`
        :rtype: :class:`dict`
        """
        return capabilities.render(self, dialect)
