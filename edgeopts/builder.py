import logging

logger = logging.getLogger(__name__)

__all__ = ["Builder"]


class Builder(object):

    def __init__(self, config_path, options):
        """
        Initializes a configuration.

        :param config_path: The configuration file to use. Must be a valid
                            Python file which sets ``CONFIG`` to a
                            :class:`.Config`.
        :type config_path: :class:`str`
        :param options: A dictionary of key/value pairs with which the
                        global variable ``builder_args`` will be initialized
                        before the configuration is read.
        :raises ValueError: If the file does not set ``CONFIG``.
        """
        self.config_path = config_path

        self.local_conf = {
            'builder_args': options
        }
        logger.debug("loading configuration from %s", config_path)
        with open(self.config_path) as config_file:
            source = config_file.read()
        exec(compile(source, self.config_path, 'exec'), self.local_conf)

        self.config = self.local_conf.get("CONFIG")
        if self.config is None:
            raise ValueError("{0} does not set CONFIG".format(config_path))

        self.remote = self.config.remote
        logger.debug("%s", self.config)

    def __getattr__(self, name):
        # ``local_conf`` may not be set yet if __init__ failed early.
        local_conf = self.__dict__.get("local_conf", {})
        if name in local_conf:
            return local_conf[name]

        raise AttributeError("{!r} object has no attribute {!r}"
                             .format(self.__class__, name))

    def get_capabilities(self, desired_capabilities=None):
        """
        Creates the capabilities of a new session on the basis of the
        configuration file upon which this object was created.

        :param desired_capabilities: Capabilities that the caller
            desires to override. This have priority over those
            capabilities that are set by the configuration file passed
            to the builder.
        :type desired_capabilities: class:`dict`
        :returns: The capabilities.
        :rtype: :class:`dict`
        :raises MissingResourceError: If an extension file cannot be read.
        """
        override_caps = desired_capabilities or {}

        desired_capabilities = \
            self.config.make_selenium_desired_capabilities()
        desired_capabilities.update(override_caps)
        return desired_capabilities
