from edgeopts import Config, EdgeOptions, MobileEmulationDeviceSettings, \
    PerformanceLoggingPreferences

#
# This file gives you an overview of what edgeopts is able to work
# with. Load it with ``Builder("local_config.py", {...})``. Whatever is
# passed as the second argument is available here as ``builder_args``.
#

#
# Options for Edge Chromium. Edge Legacy ignores them.
#
OPTIONS = EdgeOptions()
OPTIONS.add_arguments("--headless", "--disable-gpu")
OPTIONS.add_excluded_argument("enable-automation")
OPTIONS.add_user_profile_preference("download.default_directory", "/tmp")
OPTIONS.binary_location = "/opt/microsoft/msedge/msedge"

# The file must exist now, but it is read when capabilities are built.
# OPTIONS.add_extension("/blah/extension.crx")

if builder_args.get("mobile"):
    OPTIONS.enable_mobile_emulation(MobileEmulationDeviceSettings(
        "Mozilla/5.0 (Linux; Android 10)", 360, 640, 3.0))

OPTIONS.performance_logging_preferences = PerformanceLoggingPreferences()
OPTIONS.set_logging_preference("performance", "ALL")

# Options msedgedriver knows but for which there is no typed option go
# in ms:edgeOptions...
OPTIONS.add_additional_capability("wdpAddress", "localhost:12345")
# ... unless they are global.
OPTIONS.add_additional_capability("acceptInsecureCerts", True,
                                  is_global=True)

#
# Options for Edge Legacy. Edge Chromium ignores them.
#
OPTIONS.use_in_private_browsing = True
OPTIONS.start_page = "https://example.com"

caps = {
    "unhandledPromptBehavior": "accept"
}

# The browser selects which of the two sets of options is rendered:
# "Edge" for Edge Legacy or "EdgeChromium".
CONFIG = Config("Windows 10", "EdgeChromium", "86", OPTIONS, caps,
                remote=True)
