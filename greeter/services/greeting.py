import logging
from typing import Optional, Union

from greeter.exceptions import InvalidInput

logger = logging.getLogger(__name__)

# Response body for every failed greeting, whatever the cause.
FALLBACK_MESSAGE = "An error occurred"

GreetingResult = Union[str, InvalidInput]


def build_greeting(name: Optional[str], log: Optional[logging.Logger] = None) -> GreetingResult:
    """Build the greeting text for ``name``.

    Returns the greeting text, or an ``InvalidInput`` instance (not raised)
    when ``name`` is ``None`` or empty. Whitespace-only names are accepted.
    """
    log = logger if log is None else log
    log.info("Creating greeting message for: %s", name)
    if name is None or len(name) == 0:
        return InvalidInput()
    return "Hello, " + name + "!"


class GreetingHandler:
    """Turns the inbound name into a response body. Never raises; failures become ``FALLBACK_MESSAGE``."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = logger if log is None else log

    def handle(self, name: Optional[str]) -> str:
        self.log.info("Received greeting request for user: %s", name)
        try:
            result = build_greeting(name, self.log)
        except Exception as e:
            self.log.error("Error while creating greeting message: %s", e, exc_info=e)
            return FALLBACK_MESSAGE

        if isinstance(result, InvalidInput):
            self.log.error("Error while creating greeting message: %s", result, exc_info=result)
            return FALLBACK_MESSAGE

        self.log.debug("Greeting message created: %s", result)
        return result
