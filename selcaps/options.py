"""
Typed options for the drivers that selcaps knows how to build.
"""
import copy

# Fields every kind of options accepts. The values are the W3C wire keys.
STANDARD_FIELDS = {
    "browser_name": "browserName",
    "browser_version": "browserVersion",
    "platform_name": "platformName",
    "accept_insecure_certs": "acceptInsecureCerts",
    "page_load_strategy": "pageLoadStrategy",
    "proxy": "proxy",
    "set_window_rect": "setWindowRect",
    "timeouts": "timeouts",
    "strict_file_interactability": "strictFileInteractability",
    "unhandled_prompt_behavior": "unhandledPromptBehavior",
    "web_socket_url": "webSocketUrl",
}


class Options(object):
    browser_name = None

    # Browser-specific fields, mapped to their vendor-prefixed wire keys.
    CAPABILITIES = {}

    # When set, the fields of NESTED are gathered in a single object
    # stored under this key instead of being set at the top level.
    NESTED_KEY = None
    NESTED = {}

    def __init__(self, **kwargs):
        """
        Creates a set of options. Only the fields known to the class may
        be passed. Values are copied, so changing a list or dictionary
        after passing it, or after reading it back, leaves the options
        untouched. A field that is not passed, or passed as ``None``, is
        unset and won't appear among the capabilities produced by
        :meth:`to_capabilities`.

        :raises TypeError: When an unknown field is passed.
        """
        fields = self.fields()
        values = {}
        for name, value in kwargs.items():
            if name == "browser_name" or name not in fields:
                raise TypeError("{0} does not accept the option: {1}"
                                .format(self.__class__.__name__, name))
            values[name] = copy.deepcopy(value)

        object.__setattr__(self, "_values", values)

    @classmethod
    def fields(cls):
        ret = set(STANDARD_FIELDS)
        ret.update(cls.CAPABILITIES)
        ret.update(cls.NESTED)
        return ret

    def __getattr__(self, name):
        if name in self.fields():
            return copy.deepcopy(self._values.get(name))

        raise AttributeError("{!r} object has no attribute {!r}"
                             .format(self.__class__, name))

    def __setattr__(self, name, value):
        raise AttributeError("{0} instances are immutable; use replace()"
                             .format(self.__class__.__name__))

    def __eq__(self, other):
        return type(self) is type(other) and self._values == other._values

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self), tuple(sorted(self._values))))

    def __repr__(self):
        return "{0}({1})".format(
            self.__class__.__name__,
            ", ".join("{0}={1!r}".format(name, value)
                      for name, value in sorted(self._values.items())))

    def replace(self, **kwargs):
        """
        :returns: A new instance of the same class with the fields passed
                  in ``kwargs`` replacing the values of this instance.
        """
        values = dict(self._values)
        values.update(kwargs)
        return self.__class__(**values)

    def to_capabilities(self):
        """
        Converts the options to the capabilities that must be sent to
        the remote end.

        :returns: The capabilities, keyed by wire name.
        :rtype: :class:`dict`
        """
        ret = {"browserName": self.browser_name}

        for name, key in STANDARD_FIELDS.items():
            value = self._values.get(name)
            if value is not None:
                ret[key] = value

        for name, key in self.CAPABILITIES.items():
            value = self._values.get(name)
            if value is not None:
                ret[key] = value

        nested = {}
        for name, key in self.NESTED.items():
            value = self._values.get(name)
            if value is not None:
                nested[key] = list(value) if isinstance(value, (list, tuple)) \
                    else value

        if nested:
            ret[self.NESTED_KEY] = nested

        return copy.deepcopy(ret)


class SafariOptions(Options):
    browser_name = "safari"

    CAPABILITIES = {
        "automatic_inspection": "safari:automaticInspection",
        "automatic_profiling": "safari:automaticProfiling",
    }


class ChromeOptions(Options):
    browser_name = "chrome"

    NESTED_KEY = "goog:chromeOptions"
    NESTED = {
        "args": "args",
        "binary": "binary",
        "extensions": "extensions",
        "debugger_address": "debuggerAddress",
    }
