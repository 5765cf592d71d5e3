from .capabilities import STANDARD_KEYS

kinds = {}
_kinds_by_browser = {}

_KIND_ABBRS = {
    "SF": "SAFARI",
    "CH": "CHROME",
}


def get_kind(name):
    """
    Gets a driver kind by name. The name is case-insensitive and may
    also be the browser name of the kind or an abbreviation.

    :param name: The name to look up.
    :type name: :class:`str`
    :returns: The kind.
    :rtype: :class:`DriverKind`
    :raises ValueError: When there is no such kind.
    """
    upper = name.upper()

    # Resolve abbreviation if it exists...
    upper = _KIND_ABBRS.get(upper, upper)

    ret = kinds.get(upper) or _kinds_by_browser.get(name.lower())
    if ret is None:
        raise ValueError("no driver kind named: " + upper)

    return ret


def forget():
    # pylint: disable=global-statement
    global kinds, _kinds_by_browser
    kinds = {}
    _kinds_by_browser = {}


class DriverKind(object):

    def __init__(self, name, browser_name, options_class):
        """
        Describes one kind of driver and registers it.

        :param name: The name of the kind. It is upper-cased.
        :type name: :class:`str`
        :param browser_name: The value of ``browserName`` for this kind.
        :type browser_name: :class:`str`
        :param options_class: The class of the options that drivers of
                              this kind accept.
        :type options_class: :class:`selcaps.options.Options` subclass
        """
        self.name = name.upper()
        self.browser_name = browser_name
        self.options_class = options_class

        # Built once; every resolution for this kind uses it.
        self.keys = STANDARD_KEYS.merged(options_class.CAPABILITIES)
        self.register()

    def register(self):
        old = kinds.get(self.name)
        if old is not None and \
           _kinds_by_browser.get(old.browser_name) is old:
            del _kinds_by_browser[old.browser_name]

        kinds[self.name] = self
        _kinds_by_browser[self.browser_name] = self

    def default_capabilities(self):
        return {"browserName": self.browser_name}

    def __str__(self):
        return "Driver kind " + self.name + " (" + self.browser_name + ")"
