"""
The names of the capabilities which are managed by typed options.
Additional capabilities may not use these names.
"""

import collections.abc


class KnownCapabilities(collections.abc.Mapping):

    def __init__(self, owners, base=None):
        """
        :param owners: Maps capability names to a description of the
                       typed accessor which owns them.
        :type owners: :class:`dict`
        :param base: A registry whose names this one also recognizes.
                     Entries in ``owners`` take precedence.
        :type base: :class:`KnownCapabilities`
        """
        self._base = base
        self._owners = dict(owners)

    def __getitem__(self, name):
        try:
            return self._owners[name]
        except KeyError:
            if self._base is None:
                raise
            return self._base[name]

    def __iter__(self):
        yield from self._owners
        if self._base is not None:
            for name in self._base:
                if name not in self._owners:
                    yield name

    def __len__(self):
        return sum(1 for _ in self)

    def is_known(self, name):
        return name in self

    def owner_of(self, name):
        """
        :returns: The description of the accessor owning ``name``.
        :raises KeyError: If the name is not known.
        """
        return self[name]

    def names(self):
        return list(self)

    def extend(self, owners):
        """
        Create a registry which knows the names in ``owners`` in addition
        to those of this registry. This registry is not modified.
        """
        return KnownCapabilities(owners, base=self)


EDGE_OPTIONS_CAPABILITY = "ms:edgeOptions"
LOGGING_PREFERENCES_CAPABILITY = "goog:loggingPrefs"

DRIVER_CAPABILITIES = KnownCapabilities({
    "browserName": "use_web_view property",
    "pageLoadStrategy": "page_load_strategy property",
})

EDGE_CAPABILITIES = DRIVER_CAPABILITIES.extend({
    EDGE_OPTIONS_CAPABILITY: "current EdgeOptions class instance",
    LOGGING_PREFERENCES_CAPABILITY: "set_logging_preference method",
    "args": "add_arguments method",
    "binary": "binary_location property",
    "extensions": "add_extensions method",
    "localState": "add_local_state_preference method",
    "prefs": "add_user_profile_preference method",
    "detach": "leave_browser_running property",
    "debuggerAddress": "debugger_address property",
    "excludeSwitches": "add_excluded_argument method",
    "minidumpPath": "minidump_path property",
    "mobileEmulation": "enable_mobile_emulation method",
    "perfLoggingPrefs": "performance_logging_preferences property",
    "windowTypes": "add_window_types method",
    "w3c": "use_spec_compliant_protocol property",
})
