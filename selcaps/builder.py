import logging

from .driver import get_driver_class

logger = logging.getLogger(__name__)


class Builder(object):

    def __init__(self, config_path, options):
        """
        Initializes a configuration.

        :param config_path: The configuration file to use. Must be a valid
                            Python file.
        :type config_path: :class:`str`
        :param options: A dictionary of key/value pairs with which the
                        global variable ``builder_args`` will be initialized
                        before the configuration is read.
        """
        self.config_path = config_path

        self.local_conf = {
            'builder_args': options
        }
        with open(self.config_path) as config_file:
            exec(compile(config_file.read(), self.config_path, 'exec'),
                 self.local_conf)

        browser = self.local_conf.get("BROWSER", "SAFARI")
        if not isinstance(browser, str):
            raise ValueError("bad value for BROWSER: {0!r}".format(browser))

        self.driver_class = get_driver_class(browser)
        self.remote_url = self.local_conf.get("REMOTE_URL")

    def __getattr__(self, name):
        if name in self.local_conf:
            return self.local_conf[name]

        raise AttributeError("{!r} object has no attribute {!r}"
                             .format(self.__class__, name))

    def get_driver(self, **overrides):
        """
        Creates a driver on the basis of the configuration file upon
        which this object was created.

        :param overrides: Option fields that the caller desires to
            override. They have priority over the ``OPTIONS`` set by the
            configuration file.
        :returns: A driver.
        :raises selcaps.errors.ConflictError: When the configuration
                                              sets both ``OPTIONS`` and
                                              ``CAPABILITIES``.
        """
        options = self.local_conf.get("OPTIONS")
        capabilities = self.local_conf.get("CAPABILITIES")

        if overrides:
            options = options.replace(**overrides) if options is not None \
                else self.driver_class.kind.options_class(**overrides)

        service = None
        if self.remote_url is None:
            service = self.driver_class.service_class(
                executable_path=self.local_conf.get("DRIVER_PATH"),
                service_args=self.local_conf.get("SERVICE_ARGS"))

        logger.debug("building a %s", self.driver_class.__name__)
        return self.driver_class(options=options, capabilities=capabilities,
                                 service=service, url=self.remote_url)
