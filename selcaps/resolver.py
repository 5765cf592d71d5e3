import copy
import logging
import sys
import warnings

from .config import get_kind
from .errors import ConflictError, CapabilitiesDeprecationWarning
from .options import Options

logger = logging.getLogger(__name__)


def warn(warning):
    warnings.warn(warning, stacklevel=_caller_stacklevel())


def _caller_stacklevel():
    """
    :returns: The ``stacklevel`` that makes a warning issued by our
              caller point at the first frame outside this package.
    """
    prefix = __name__.split(".")[0] + "."
    frame = sys._getframe(1)  # pylint: disable=protected-access
    level = 1
    while frame is not None and \
            frame.f_globals.get("__name__", "").startswith(prefix):
        frame = frame.f_back
        level += 1
    return level


class CapabilityResolver(object):

    def __init__(self, kind, owner=None, notify=None):
        """
        Merges the sources of capabilities a driver may be given into the
        single document sent as ``alwaysMatch`` when creating a session.

        :param kind: The kind of driver for which to resolve.
        :type kind: :class:`selcaps.config.DriverKind`
        :param owner: The name used in messages to designate what is
                      being initialized. Defaults to the kind's name.
        :type owner: :class:`str`
        :param notify: Called with a
                       :class:`selcaps.errors.CapabilitiesDeprecationWarning`
                       when the deprecated ``capabilities`` parameter is
                       used. Defaults to issuing the warning with
                       :func:`warnings.warn`.
        """
        self.kind = kind
        self.owner = owner or kind.name
        self.notify = notify or warn

    def resolve(self, options=None, capabilities=None):
        """
        Produces the capabilities to request.

        :param options: The options of the driver.
        :type options: An instance of the kind's options class.
        :param capabilities: Deprecated. A map of capabilities, an
                             options object, the name of a driver kind,
                             an object with a ``to_capabilities`` method,
                             or a list of these to merge in order.
        :returns: A new dictionary of capabilities keyed by wire name.
        :rtype: :class:`dict`
        :raises selcaps.errors.ConflictError: When both ``options`` and
                                              ``capabilities`` are given.
        :raises TypeError: When ``options`` is of the wrong class, or
                           when a source of capabilities is not usable.
        """
        if capabilities is not None and not _is_empty(capabilities):
            if options is not None:
                raise ConflictError(
                    "Don't use both options and capabilities when "
                    "initializing {0}, prefer options".format(self.owner))

            if isinstance(capabilities, (list, tuple)):
                ret = {}
                for contributor in capabilities:
                    ret.update(self._contribution(contributor))
            else:
                ret = self._contribution(capabilities)

            self.notify(CapabilitiesDeprecationWarning(
                "The capabilities parameter for {0} is deprecated; use "
                "the options parameter with an instance of {1} instead"
                .format(self.owner, _qualname(self.kind.options_class))))
        else:
            if options is None:
                ret = self.kind.default_capabilities()
            elif not isinstance(options, self.kind.options_class):
                raise TypeError("options must be an instance of " +
                                _qualname(self.kind.options_class))
            else:
                ret = options.to_capabilities()

        logger.debug("resolved capabilities for %s: %r", self.owner, ret)
        return copy.deepcopy(ret)

    def _contribution(self, contributor):
        if isinstance(contributor, Options):
            return contributor.to_capabilities()

        if isinstance(contributor, str):
            if contributor.upper() == self.kind.name or \
               contributor.lower() == self.kind.browser_name:
                return self.kind.default_capabilities()
            return get_kind(contributor).default_capabilities()

        if isinstance(contributor, dict):
            return self.kind.keys.normalize(contributor)

        to_capabilities = getattr(contributor, "to_capabilities", None)
        if callable(to_capabilities):
            return dict(to_capabilities())

        raise TypeError("cannot get capabilities from an object of type " +
                        _qualname(type(contributor)))


def _is_empty(capabilities):
    return isinstance(capabilities, (dict, list, tuple, str)) and \
        len(capabilities) == 0


def _qualname(cls):
    return cls.__module__ + "." + cls.__name__
