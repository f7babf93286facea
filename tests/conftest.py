"""Shared test fixtures: in-memory stores, fake endpoints, isolated settings.

Everything runs in-process; filesystem stores use ``tmp_path`` and the remote
panel is replaced by fakes or ``httpx.MockTransport``.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from kubepanel.managers.templates import TemplateCache
from kubepanel.models.enums import ResourceKind
from kubepanel.notices import Notifier
from kubepanel.settings import _get_settings_cached
from kubepanel.store.memory import MemoryKeyValueStore, MemoryRecordStore
from tests.fakes import FakeCreator, FakeTemplateSource

INGRESS_TEMPLATE = "apiVersion: networking.k8s.io/v1\nkind: Ingress\nmetadata:\n  name: example\n"
SECRET_TEMPLATE = "apiVersion: v1\nkind: Secret\nmetadata:\n  name: example\ntype: Opaque\n"
POD_TEMPLATE = "apiVersion: v1\nkind: Pod\nmetadata:\n  name: example\n"

KUBECONFIG = """\
apiVersion: v1
kind: Config
clusters:
- name: panel
  cluster:
    server: https://apiserver.example:6443
users:
- name: u1
  user:
    token: abc123
contexts:
- name: panel
  context:
    cluster: panel
    user: u1
current-context: panel
"""


# ---------------------------------------------------------------------------
# Settings isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Point settings at a temp data root and drop the settings cache around each test."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("KUBEPANEL_DATA_ROOT", str(tmp_path / "data"))
    monkeypatch.setenv("KUBEPANEL_API_URL", "http://panel.test")
    monkeypatch.delenv("KUBEPANEL_DATA_PREFIX", raising=False)
    monkeypatch.delenv("KUBEPANEL_REQUEST_TIMEOUT", raising=False)
    _get_settings_cached.cache_clear()
    yield
    _get_settings_cached.cache_clear()


# ---------------------------------------------------------------------------
# Stores and collaborators
# ---------------------------------------------------------------------------


@pytest.fixture
def notifier() -> Notifier:
    return Notifier()


@pytest.fixture
def kv_store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def record_store() -> MemoryRecordStore:
    return MemoryRecordStore()


@pytest.fixture
def source() -> FakeTemplateSource:
    return FakeTemplateSource(
        {
            ResourceKind.INGRESSES: INGRESS_TEMPLATE,
            ResourceKind.SECRETS: SECRET_TEMPLATE,
            ResourceKind.PODS: POD_TEMPLATE,
        }
    )


@pytest.fixture
def creator() -> FakeCreator:
    return FakeCreator()


@pytest.fixture
def templates(kv_store: MemoryKeyValueStore, source: FakeTemplateSource) -> TemplateCache:
    return TemplateCache(kv_store, source)
