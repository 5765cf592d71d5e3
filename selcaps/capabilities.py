"""
Capability maps and the tables used to normalize their keys.
"""
from .options import STANDARD_FIELDS


def _snake(name):
    return "".join("_" + c.lower() if c.isupper() else c for c in name)


class KeyTable(object):

    def __init__(self, fields):
        """
        A static, bidirectional table mapping the names under which a
        capability may be given to its wire key, and wire keys back to
        attribute names.

        For each ``attribute -> wire key`` pair of ``fields`` the
        following aliases resolve to the wire key:

        * the attribute name (snake case),

        * the wire key itself,

        * for vendor-prefixed wire keys such as
          ``safari:automaticInspection``, the unprefixed key
          (``automaticInspection``) and its snake case form.

        :param fields: Maps attribute names to wire keys.
        :type fields: :class:`dict`
        """
        self.fields = dict(fields)
        self._to_wire = {}
        self._to_attr = {}

        for attr, key in self.fields.items():
            self._to_attr[key] = attr
            aliases = [attr, key]
            if ":" in key:
                bare = key.split(":", 1)[1]
                aliases += [bare, _snake(bare)]
            for alias in aliases:
                self._to_wire[alias] = key

    def __contains__(self, name):
        return name in self._to_wire

    def to_wire(self, name):
        """
        :returns: The wire key for ``name``, or ``name`` itself if the
                  table does not know it.
        """
        return self._to_wire.get(name, name)

    def to_attr(self, key):
        return self._to_attr.get(self.to_wire(key))

    def normalize(self, mapping):
        """
        Creates a copy of ``mapping`` with every key replaced by its
        wire key. When two aliases of the same capability are present,
        the one seen last wins.

        :param mapping: The capabilities to normalize. Not modified.
        :type mapping: :class:`dict`
        :returns: The normalized capabilities.
        :rtype: :class:`dict`
        """
        ret = {}
        for name, value in mapping.items():
            key = self.to_wire(name)
            # Removing first makes the last alias also take the last
            # position.
            ret.pop(key, None)
            ret[key] = value
        return ret

    def merged(self, fields):
        """
        :returns: A new table holding the fields of this table and of
                  ``fields``.
        """
        ret = dict(self.fields)
        ret.update(fields)
        return KeyTable(ret)


STANDARD_KEYS = KeyTable(STANDARD_FIELDS)


class Capabilities(dict):
    """
    A plain map of capabilities. Keys may be given in snake case or in
    camel case; they are kept as given and normalized by
    :meth:`to_capabilities`. Keys that are not standard capabilities are
    passed through unchanged.
    """

    def __getattr__(self, name):
        key = STANDARD_KEYS.to_wire(name)
        if key in self:
            return self[key]
        if name in self:
            return self[name]
        if name in STANDARD_KEYS:
            return None

        raise AttributeError("{!r} object has no attribute {!r}"
                             .format(self.__class__, name))

    def to_capabilities(self):
        return STANDARD_KEYS.normalize(self)


class NormalizedCapabilities(dict):

    def __init__(self, caps):
        """
        Not all remote ends report the capabilities of a session under
        the same names. Older drivers store the browser version under
        ``version`` and the platform under ``platform``, whereas W3C
        drivers use ``browserVersion`` and ``platformName``.

        Instances of this class present a normalized view of the
        capabilities. Instances should be treated as read-only. They
        contain the same fields as the capabilities passed in the
        constructor, with the following differences:

        * ``version`` is renamed ``browserVersion``

        * ``platform`` is renamed ``platformName``

        A legacy field is renamed only if its W3C counterpart is absent.

        Note that this class is meant to be used to normalize
        capabilities **returned** by a remote end. Capabilities sent to
        the remote end are normalized by :class:`KeyTable`.

        :param caps: The original capabilities from which to create
                     a normalized capabilities dictionary.
        """
        # Keep a copy for debugging purposes.
        self.caps = caps

        newcaps = dict(caps or {})
        for old, new in (("platform", "platformName"),
                         ("version", "browserVersion")):
            if old in newcaps and new not in newcaps:
                newcaps[new] = newcaps.pop(old)

        super(NormalizedCapabilities, self).__init__(newcaps)
