import logging
import os

from selenium.common.exceptions import NoSuchDriverException
from selenium.webdriver.common.selenium_manager import SeleniumManager

logger = logging.getLogger(__name__)


def find_driver_path(options, service_class):
    """
    Finds the driver executable for the browser that ``options`` is
    meant for. This is used only when the service that runs the driver
    was not given an explicit path.

    :param options: The options of the driver to create.
    :type options: :class:`selcaps.options.Options`
    :param service_class: The class of the service that will run the
                          executable.
    :returns: The path of the executable.
    :rtype: :class:`str`
    :raises selenium.common.exceptions.NoSuchDriverException: When no
        usable executable can be found.
    """
    args = ["--browser", options.browser_name]
    if options.browser_version:
        args += ["--browser-version", str(options.browser_version)]

    binary = getattr(options, "binary", None)
    if binary:
        args += ["--browser-path", binary]

    # A W3C proxy object; the secure proxy is preferred.
    proxy = options.proxy or {}
    server = proxy.get("sslProxy") or proxy.get("httpProxy")
    if server:
        args += ["--proxy", server]

    logger.debug("looking up the driver for %s (%s)",
                 options.browser_name, service_class.__name__)
    try:
        path = SeleniumManager().binary_paths(args)["driver_path"]
    except Exception as ex:
        raise NoSuchDriverException(
            "unable to obtain a driver for " + options.browser_name) from ex

    if not os.path.isfile(path):
        raise NoSuchDriverException("the driver is not a file: " + path)

    if not os.access(path, os.X_OK):
        raise NoSuchDriverException("the driver is not executable: " + path)

    return path
