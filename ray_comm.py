"""HTTP messaging to the Ray desktop app.

``RayComm.send_request`` wraps payloads in a request envelope and posts it
to the local app in a background thread.  Delivery is best effort: the
response is never inspected and transport errors are only logged at DEBUG,
so a script keeps running whether or not the app is listening.
"""
import json
import logging
from concurrent.futures import ThreadPoolExecutor

import requests

from ray_origin import get_origin
from ray_payloads import jsonable, log_default

HOST = "127.0.0.1"
PORT = 23517
TIMEOUT = 5  # seconds
# One worker keeps posts in call order.
MAX_WORKERS = 1

LOGGER = logging.getLogger("ray_client")

_executor = ThreadPoolExecutor(max_workers=MAX_WORKERS, thread_name_prefix="ray-post")


def build_envelope(uuid: str, payloads, origin: dict) -> dict:
    """Return the request body for ``payloads``, each tagged with ``origin``."""
    return {
        "uuid": uuid,
        "payloads": [dict(payload, origin=dict(origin)) for payload in payloads],
        "meta": [],
    }


class RayComm:
    """Posts envelopes to ``http://host:port/``.

    Parameters
    ----------
    host, port:
        Address of the Ray app.
    session:
        ``requests.Session`` to post with; a new one is created by default.
    executor:
        Anything with a ``submit(fn, *args)`` method.  Defaults to a single-worker
        thread pool shared by every ``RayComm``, so posts arrive in call order.
    """

    def __init__(self, host: str = HOST, port: int = PORT, session=None, executor=None):
        self.host = host
        self.port = port
        self.url = f"http://{host}:{port}/"
        self.session = session if session is not None else requests.Session()
        self.executor = executor if executor is not None else _executor

    def send_request(self, uuid: str, *payloads) -> None:
        """Post ``payloads`` as one request without waiting for the result."""
        envelope = build_envelope(uuid, payloads, get_origin())
        # Log values JSON cannot represent go out as ISO dates or their repr.
        body = json.dumps(jsonable(envelope, log_default), allow_nan=False)
        LOGGER.debug(f"post url={self.url} uuid={uuid} payloads={len(payloads)}")
        # Fire and forget: the future is not kept.
        self.executor.submit(self._post, body)

    def _post(self, body: str) -> None:
        try:
            self.session.post(
                self.url,
                data=body.encode("utf-8"),
                headers={"Content-Type": "application/json"},
                timeout=TIMEOUT,
            )
        except requests.RequestException as e:
            LOGGER.debug(f"post failed type={type(e).__name__} url={self.url}: {e}")
