"""
Tests for port protocol definitions.

These tests verify that:
1. Protocol definitions are valid and importable
2. Protocols define the expected methods
3. Implementations and fakes provide the Protocol methods
"""
import pytest

# All tests in this module are pure logic tests (no TestClient) - mark as unit
pytestmark = pytest.mark.unit

OBJECT_STORE_METHODS = ["insert", "delete", "get", "query", "save", "subscribe", "transaction"]
COMPOSE_SESSION_METHODS = ["add", "get", "remove", "list_ids"]


class TestProtocolImports:
    """Test that all protocols can be imported."""

    def test_object_store_import(self):
        from application.ports import ObjectStore, StoreChange, StoreObserver
        assert ObjectStore is not None
        assert StoreChange is not None
        assert StoreObserver is not None

    def test_compose_session_repository_import(self):
        from application.ports import ComposeSessionRepository
        assert ComposeSessionRepository is not None


class TestObjectStoreProtocol:
    def test_has_required_methods(self):
        from application.ports import ObjectStore
        for method in OBJECT_STORE_METHODS:
            assert hasattr(ObjectStore, method), f"ObjectStore missing {method}"

    @pytest.mark.parametrize(
        "implementation",
        [
            "infrastructure.db.InMemoryObjectStore",
            "infrastructure.db.YamlFileObjectStore",
            "tests.fakes.FakeObjectStore",
        ],
    )
    def test_implementations_provide_methods(self, implementation):
        import importlib

        module_name, class_name = implementation.rsplit(".", 1)
        cls = getattr(importlib.import_module(module_name), class_name)
        for method in OBJECT_STORE_METHODS:
            assert callable(getattr(cls, method, None)), f"{class_name} missing {method}"

    def test_store_change_is_frozen(self):
        from dataclasses import FrozenInstanceError

        from application.ports import StoreChange
        change = StoreChange("insert", "Workout", "w1")
        with pytest.raises(FrozenInstanceError):
            change.kind = "delete"


class TestComposeSessionRepositoryProtocol:
    def test_has_required_methods(self):
        from application.ports import ComposeSessionRepository
        for method in COMPOSE_SESSION_METHODS:
            assert hasattr(ComposeSessionRepository, method)

    def test_in_memory_repository(self):
        from application.use_cases import ComposeWorkoutSession
        from infrastructure.db import InMemoryComposeSessionRepository
        from tests.fakes import FakeObjectStore

        sessions = InMemoryComposeSessionRepository()
        session = ComposeWorkoutSession(FakeObjectStore(), session_id="s1")

        sessions.add(session)

        assert sessions.get("s1") is session
        assert sessions.list_ids() == ["s1"]
        assert sessions.remove("s1") is True
        assert sessions.remove("s1") is False
        assert sessions.get("s1") is None
