class ConflictError(ValueError):
    """
    Raised when a driver is given two mutually exclusive sources of
    capabilities.
    """


class CapabilitiesDeprecationWarning(DeprecationWarning):

    def __init__(self, message, parameter="capabilities",
                 replacement="options"):
        """
        Warning emitted whenever the legacy ``capabilities`` parameter is
        used to build a driver.

        :param message: The human-readable message.
        :type message: :class:`str`
        :param parameter: The name of the deprecated parameter.
        :type parameter: :class:`str`
        :param replacement: The name of the parameter to use instead.
        :type replacement: :class:`str`
        """
        super(CapabilitiesDeprecationWarning, self).__init__(message)
        self.parameter = parameter
        self.replacement = replacement
