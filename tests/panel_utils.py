"""Simulated backend and panel factories shared by the panel tests."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx

from config_panel.api_client import PanelApiClient
from config_panel.notifications import NotificationCenter
from config_panel.panel_state import ConfigurationPanel


class FakeClock:
    def __init__(self) -> None:
        self.now_ms = 0

    def __call__(self) -> float:
        return self.now_ms / 1000.0


class FakeBackend:
    """Serves names, contents and saves from in-memory dicts."""

    def __init__(
        self,
        names: Optional[Dict[str, Any]] = None,
        contents: Optional[Dict[Tuple[str, str], Any]] = None,
    ) -> None:
        self.names = names or {}
        self.contents = contents or {}
        self.save_status = 200
        self.requests: List[httpx.Request] = []
        self.hooks: Dict[Tuple[str, Optional[str]], Callable[[], None]] = {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        name = request.url.params.get("name")
        hook = self.hooks.pop((path, name), None)
        if hook is not None:
            hook()

        if path.startswith("/api/v1/panel/"):
            value = self.names.get(path.rsplit("/", 1)[1], [])
            if isinstance(value, int):
                return httpx.Response(value)
            return httpx.Response(200, json=value)
        if path.startswith("/api/v1/client/"):
            key = (path.rsplit("/", 1)[1], name)
            if key not in self.contents:
                return httpx.Response(404)
            value = self.contents[key]
            if isinstance(value, bytes):
                return httpx.Response(200, content=value)
            return httpx.Response(200, json=value)
        if path.startswith("/api/resources/"):
            return httpx.Response(self.save_status)
        return httpx.Response(404)

    def paths(self, prefix: str) -> List[str]:
        return [str(r.url.path) for r in self.requests if r.url.path.startswith(prefix)]

    def content_requests(self) -> List[Tuple[str, str]]:
        return [
            (r.url.path.rsplit("/", 1)[1], r.url.params["name"])
            for r in self.requests
            if r.url.path.startswith("/api/v1/client/")
        ]

    def posts(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == "POST"]


def sample_backend() -> FakeBackend:
    return FakeBackend(
        names={
            "ClassPlans": ["Week A", "Week B"],
            "TimeLayouts": [],
            "SubjectsSource": ["default"],
            "DefaultSettingsSource": ["default"],
            "PolicySource": ["strict", "lenient"],
        },
        contents={
            ("ClassPlan", "Week A"): {"a": 1},
            ("ClassPlan", "Week B"): {"b": [1, 2]},
            ("SubjectsSourc", "default"): {"Subjects": ["Math"]},
            ("DefaultSettingsSourc", "default"): {"Theme": "dark"},
            ("PolicySourc", "strict"): {"Locked": True},
            ("PolicySourc", "lenient"): {"Locked": False},
        },
    )


def make_panel(backend: FakeBackend, clock: Optional[FakeClock] = None) -> ConfigurationPanel:
    client = PanelApiClient("http://backend.test", transport=httpx.MockTransport(backend))
    return ConfigurationPanel(client, NotificationCenter(clock=clock or FakeClock()))


def mounted_panel(backend: FakeBackend, clock: Optional[FakeClock] = None) -> ConfigurationPanel:
    panel = make_panel(backend, clock)
    panel.mount()
    return panel
