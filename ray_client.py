"""Send debugging output to the Ray desktop app.

Usage::

    from ray_client import Ray, ray

    ray("hello", {"user": 42}).color("green")
    total = Ray().pass_(compute())

Every call posts to ``http://127.0.0.1:23517/`` and returns immediately.
Nothing is raised if the app is not running.
"""
import os
import uuid

from ray_comm import HOST, PORT, RayComm
from ray_payloads import (
    BAN,
    CHARLES,
    color_payload,
    custom_payload,
    hide_payload,
    json_payload,
    make_payload,
    new_screen_payload,
    notify_payload,
    remove_payload,
    size_payload,
)


class Ray:
    """One Ray session; every payload it sends shares ``self.uuid``."""

    def __init__(self, host: str = HOST, port: int = PORT, client: RayComm = None):
        self.uuid = str(uuid.uuid4())
        self.client = client if client is not None else RayComm(host, port)

    def new_screen(self, name: str = ""):
        self.send_request(new_screen_payload(name))
        return self

    def clear_screen(self):
        return self.new_screen()

    def color(self, color: str):
        self.send_request(color_payload(color))
        return self

    def size(self, size: str):
        self.send_request(size_payload(size))
        return self

    def remove(self):
        self.send_request(remove_payload())
        return self

    def hide(self):
        self.send_request(hide_payload())
        return self

    def notify(self, text: str):
        self.send_request(notify_payload(text))
        return self

    def die(self, status: int = 0):
        """Terminate the process immediately.

        This is irreversible: no ``finally`` blocks, atexit handlers or
        buffered I/O run, and posts still queued are lost.
        """
        os._exit(status)

    def show_when(self, condition):
        if callable(condition):
            condition = condition()
        if not condition:
            self.remove()
        return self

    def show_if(self, condition):
        return self.show_when(condition)

    def remove_when(self, condition):
        if callable(condition):
            condition = condition()
        if condition:
            self.remove()
        return self

    def remove_if(self, condition):
        return self.remove_when(condition)

    def ban(self):
        return self.send(BAN)

    def charles(self):
        return self.send(CHARLES)

    def send(self, *values):
        """Send all ``values`` in a single request; a no-op without values."""
        if not values:
            return self
        self.send_request(*[make_payload(value) for value in values])
        return self

    def json(self, value):
        self.send_request(json_payload(value))
        return self

    def pass_(self, value):
        """Send ``value`` and hand it back, for logging inside expressions."""
        self.send(value)
        return value

    def send_custom(self, content, label: str = ""):
        self.send_request(custom_payload(content, label))
        return self

    def send_request(self, *payloads) -> None:
        self.client.send_request(self.uuid, *payloads)


def ray(*values) -> Ray:
    """Start a new session and send ``values`` with it."""
    return Ray().send(*values)
