from __future__ import annotations

from collections.abc import Sequence

from nok_exr_client.config import NokExrClientConfig


class Response:
    def __init__(self, status_code: int, payload: object):
        self.status_code = status_code
        self._payload = payload

    def json(self) -> object:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


Step = Response | Exception


class SyncSequencedClient:
    def __init__(self, steps: Sequence[Step]):
        self.steps = list(steps)
        self.calls: list[tuple[str, dict[str, str]]] = []
        self.closed = False

    def get(self, endpoint: str, params: dict[str, str]):
        self.calls.append((endpoint, dict(params)))
        step = self.steps.pop(0)
        if isinstance(step, Exception):
            raise step
        return step

    def close(self):
        self.closed = True


class AsyncSequencedClient:
    def __init__(self, steps: Sequence[Step]):
        self.steps = list(steps)
        self.calls: list[tuple[str, dict[str, str]]] = []
        self.closed = False

    async def get(self, endpoint: str, params: dict[str, str]):
        self.calls.append((endpoint, dict(params)))
        step = self.steps.pop(0)
        if isinstance(step, Exception):
            raise step
        return step

    async def aclose(self):
        self.closed = True


def build_config() -> NokExrClientConfig:
    cfg = NokExrClientConfig()
    cfg.validate()
    return cfg
