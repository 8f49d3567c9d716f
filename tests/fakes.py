"""Test doubles shared across test modules."""

from solace.llm.gateway import ResponderGateway


class FakeGateway(ResponderGateway):
    """Responder that returns a canned reply or raises, and records calls."""

    configured = True

    def __init__(self, reply="I'm listening.", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def complete(self, message):
        self.calls.append(message)
        if self.error is not None:
            raise self.error
        return self.reply
