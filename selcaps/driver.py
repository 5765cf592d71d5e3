import logging

from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.remote.client_config import ClientConfig
from selenium.webdriver.remote.remote_connection import RemoteConnection
from selenium.webdriver.safari.service import Service as SafariService

from .capabilities import NormalizedCapabilities
from .config import DriverKind, get_kind
from .locator import find_driver_path
from .options import ChromeOptions, SafariOptions
from .resolver import CapabilityResolver
from .session import end_session, new_session

logger = logging.getLogger(__name__)

SAFARI = DriverKind("SAFARI", "safari", SafariOptions)
CHROME = DriverKind("CHROME", "chrome", ChromeOptions)


class Driver(object):
    kind = None
    service_class = None

    def __init__(self, options=None, capabilities=None, service=None,
                 url=None, locator=None, connection_factory=None,
                 notify=None):
        """
        Creates a driver and a session for it.

        The capabilities are resolved before anything else is done, so a
        bad combination of parameters never results in a service being
        started or a request being sent.

        :param options: The options of the driver. Must be an instance of
                        the options class of the driver's kind.
        :param capabilities: Deprecated. See
                             :meth:`selcaps.resolver.CapabilityResolver.resolve`.
        :param service: The service that runs the driver executable. A
                        default service is created if none is given. Not
                        used when ``url`` is given.
        :param url: The URL of an already running remote end.
        :type url: :class:`str`
        :param locator: Called with the options and the class of the
                        service when the service has no executable
                        path. Defaults to
                        :func:`selcaps.locator.find_driver_path`.
        :param connection_factory: Called with the URL of the remote end
                                   to create the connection. Defaults to
                                   :func:`connect`.
        :param notify: Receives deprecation warnings. See
                       :class:`selcaps.resolver.CapabilityResolver`.
        :raises selcaps.errors.ConflictError: When both ``options`` and
                                              ``capabilities`` are given.
        :raises TypeError: When ``options`` is of the wrong class.
        """
        resolver = CapabilityResolver(self.kind, self.__class__.__name__,
                                      notify)
        self.requested_capabilities = resolver.resolve(options, capabilities)

        self.service = None
        if url is None:
            service = service if service is not None \
                else self.service_class()
            if not service.path:
                locator = locator or find_driver_path
                service.path = locator(
                    options if options is not None
                    else self.kind.options_class(),
                    service.__class__)
            logger.debug("starting %s", service.path)
            service.start()
            self.service = service
            url = service.service_url

        self.url = url

        try:
            connection_factory = connection_factory or connect
            self.connection = connection_factory(url)
            self.session_id, caps = new_session(self.connection,
                                                self.requested_capabilities)
        except Exception:
            if self.service is not None:
                self.service.stop()
            raise

        self.capabilities = NormalizedCapabilities(caps)

    def quit(self):
        """
        Ends the session and stops the service, if one was started.
        """
        try:
            end_session(self.connection, self.session_id)
        finally:
            if self.service is not None:
                self.service.stop()
                self.service = None


def connect(url):
    """
    :returns: A connection to the remote end at ``url``.
    :rtype:
        :class:`selenium.webdriver.remote.remote_connection.RemoteConnection`
    """
    return RemoteConnection(client_config=ClientConfig(remote_server_addr=url))


class SafariDriver(Driver):
    kind = SAFARI
    service_class = SafariService


class ChromeDriver(Driver):
    kind = CHROME
    service_class = ChromeService


NAME_TO_CLASS = {cls.kind.name: cls for cls in (SafariDriver, ChromeDriver)}


def get_driver_class(name):
    kind = get_kind(name)
    try:
        return NAME_TO_CLASS[kind.name]
    except KeyError:
        raise ValueError("there is no driver for the kind named '{0}'"
                         .format(kind.name))
