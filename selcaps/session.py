import logging

from selenium.common.exceptions import SessionNotCreatedException
from selenium.webdriver.remote.command import Command
from selenium.webdriver.remote.errorhandler import ErrorHandler

logger = logging.getLogger(__name__)


def build_payload(capabilities):
    """
    :param capabilities: The capabilities to request. They are used
                         as-is.
    :type capabilities: :class:`dict`
    :returns: The body of a session-creation request.
    :rtype: :class:`dict`
    """
    return {"capabilities": {"alwaysMatch": capabilities}}


def new_session(connection, capabilities):
    """
    Asks the remote end to create a session.

    :param connection: The connection to the remote end.
    :type connection:
        :class:`selenium.webdriver.remote.remote_connection.RemoteConnection`
    :param capabilities: The capabilities to request.
    :type capabilities: :class:`dict`
    :returns: The session id and the capabilities the remote end
              reported for the session.
    :rtype: :class:`tuple`
    :raises selenium.common.exceptions.WebDriverException: When the
        remote end reports an error.
    :raises selenium.common.exceptions.SessionNotCreatedException: When
        the response does not contain a session id.
    """
    response = connection.execute(Command.NEW_SESSION,
                                  build_payload(capabilities))
    ErrorHandler().check_response(response)

    value = response.get("value") or {}
    session_id = value.get("sessionId")
    if session_id is None:
        raise SessionNotCreatedException(
            "the remote end did not return a session id: {0!r}"
            .format(response))

    logger.debug("created session %s", session_id)
    return session_id, value.get("capabilities") or {}


def end_session(connection, session_id):
    response = connection.execute(Command.QUIT, {"sessionId": session_id})
    ErrorHandler().check_response(response)
    logger.debug("ended session %s", session_id)
