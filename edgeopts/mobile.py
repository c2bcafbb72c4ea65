"""
Mobile emulation settings, and their encoding for the
``mobileEmulation`` option.
"""


class MobileEmulationDeviceSettings(object):

    def __init__(self, user_agent=None, width=0, height=0, pixel_ratio=0.0,
                 enable_touch_events=True):
        """
        Explicit metrics for a device that Edge should emulate.

        :param user_agent: The user agent string the browser reports.
                           It is required by
                           :meth:`EdgeOptions.enable_mobile_emulation`.
        :type user_agent: :class:`str`
        :param width: The width of the screen, in pixels.
        :type width: :class:`int`
        :param height: The height of the screen, in pixels.
        :type height: :class:`int`
        :param pixel_ratio: The device pixel ratio.
        :type pixel_ratio: :class:`float`
        :param enable_touch_events: Whether touch events are emulated.
        :type enable_touch_events: :class:`bool`
        """
        self.user_agent = user_agent
        self.width = width
        self.height = height
        self.pixel_ratio = pixel_ratio
        self.enable_touch_events = enable_touch_events

    def __repr__(self):
        return ("MobileEmulationDeviceSettings({!r}, {!r}, {!r}, {!r}, {!r})"
                .format(self.user_agent, self.width, self.height,
                        self.pixel_ratio, self.enable_touch_events))


def encode_mobile_emulation(device_name=None, settings=None):
    """
    Produce the value of the ``mobileEmulation`` option.

    A device name wins over explicit settings. The driver enables touch
    by default, so ``touch`` is only emitted when it must be turned off.

    :param device_name: The name of a device known to the DevTools
                        emulation panel.
    :param settings: Explicit settings.
    :type settings: :class:`MobileEmulationDeviceSettings`
    :returns: The encoded settings.
    :rtype: :class:`dict`
    """
    ret = {}
    if device_name:
        ret["deviceName"] = device_name
    elif settings is not None:
        ret["userAgent"] = settings.user_agent
        metrics = {
            "width": settings.width,
            "height": settings.height,
            "pixelRatio": settings.pixel_ratio,
        }
        if not settings.enable_touch_events:
            metrics["touch"] = settings.enable_touch_events
        ret["deviceMetrics"] = metrics

    return ret
