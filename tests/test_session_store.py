"""
Unit tests for the session store and its storage backends.
"""

import json

import pytest

from foodapp.schemas import UserSummary
from foodapp.services.session import (
    FileSessionStorage,
    MemorySessionStorage,
    SessionStore,
    TOKEN_KEY,
    USER_KEY,
)

ADMIN = {"id": "a1", "name": "Admin", "email": "admin@foodapp.com", "role": "admin"}
CUSTOMER = {"id": "c1", "name": "Ann", "email": "ann@example.com", "role": "customer"}


class TestAuthentication:
    """is_authenticated tracks the stored token."""

    def test_empty_store_is_not_authenticated(self, store):
        assert store.is_authenticated() is False
        assert store.get_token() is None
        assert store.snapshot().is_empty

    def test_authenticated_right_after_login(self, store):
        store.record_login("tok", CUSTOMER)
        assert store.is_authenticated() is True
        assert store.get_token() == "tok"

    def test_not_authenticated_right_after_logout(self, store):
        store.record_login("tok", CUSTOMER)
        store.logout()
        assert store.is_authenticated() is False

    def test_empty_token_string_counts_as_absent(self, storage, store):
        storage.set_item(TOKEN_KEY, "")
        assert store.is_authenticated() is False


class TestCurrentUser:
    """get_current_user never raises on bad data."""

    def test_returns_stored_user(self, store):
        store.record_login("tok", CUSTOMER)
        user = store.get_current_user()
        assert isinstance(user, UserSummary)
        assert user.name == "Ann"
        assert user.role == "customer"

    def test_absent_user_is_none(self, store):
        assert store.get_current_user() is None

    def test_corrupt_json_is_none(self, storage, store):
        storage.set_item(USER_KEY, "{not-json")
        assert store.get_current_user() is None

    @pytest.mark.parametrize("raw", ["null", "42", '"ann"', "[1, 2]"])
    def test_non_object_json_is_none(self, storage, store, raw):
        storage.set_item(USER_KEY, raw)
        assert store.get_current_user() is None

    def test_wrongly_typed_fields_are_none(self, storage, store):
        storage.set_item(USER_KEY, json.dumps({"name": ["not", "a", "string"]}))
        assert store.get_current_user() is None

    def test_mongo_style_id_is_accepted(self, storage, store):
        storage.set_item(USER_KEY, json.dumps({"_id": "65f0", "name": "Ann", "role": "customer"}))
        assert store.get_current_user().id == "65f0"

    def test_extra_fields_are_kept(self, store):
        store.record_login("tok", {**CUSTOMER, "phone": "555-0100"})
        assert store.get_current_user().model_extra == {"phone": "555-0100"}


class TestAdminRole:
    """is_admin is an exact, case-sensitive role match."""

    def test_admin_user(self, store):
        store.record_login("tok", ADMIN)
        assert store.is_admin() is True

    def test_customer_user(self, store):
        store.record_login("tok", CUSTOMER)
        assert store.is_admin() is False

    def test_no_user(self, store):
        assert store.is_admin() is False

    @pytest.mark.parametrize("role", ["Admin", "ADMIN", "admin ", None])
    def test_role_must_match_exactly(self, store, role):
        store.record_login("tok", {**ADMIN, "role": role})
        assert store.is_admin() is False

    def test_corrupt_user_is_not_admin(self, storage, store):
        storage.set_item(TOKEN_KEY, "tok")
        storage.set_item(USER_KEY, "{{{")
        assert store.is_admin() is False

    def test_custom_admin_role(self, storage):
        store = SessionStore(storage, admin_role="superuser")
        store.record_login("tok", {**ADMIN, "role": "superuser"})
        assert store.is_admin() is True


class TestRecordLogin:
    """Token and user are written together or not at all."""

    def test_writes_both_keys(self, storage, store):
        assert store.record_login("tok", CUSTOMER) is True
        assert storage.get_item(TOKEN_KEY) == "tok"
        assert json.loads(storage.get_item(USER_KEY)) == CUSTOMER

    @pytest.mark.parametrize(
        "token,user",
        [(None, CUSTOMER), ("", CUSTOMER), ("tok", None)],
    )
    def test_incomplete_login_leaves_store_untouched(self, storage, store, token, user):
        store.record_login("old", ADMIN)
        assert store.record_login(token, user) is False
        assert storage.get_item(TOKEN_KEY) == "old"
        assert json.loads(storage.get_item(USER_KEY)) == ADMIN

    def test_empty_user_object_is_recorded(self, storage, store):
        store.record_login("old", ADMIN)
        assert store.record_login("tok", {}) is True
        assert store.get_token() == "tok"
        assert storage.get_item(USER_KEY) == "{}"
        user = store.get_current_user()
        assert isinstance(user, UserSummary)
        assert (user.id, user.name, user.email, user.role) == (None, None, None, None)
        assert store.is_admin() is False

    def test_accepts_user_model(self, store):
        store.record_login("tok", UserSummary(id=3, name="Bob", role="customer"))
        assert store.get_current_user().id == 3

    def test_new_login_replaces_user_wholesale(self, store):
        store.record_login("tok1", {**ADMIN, "phone": "1"})
        store.record_login("tok2", CUSTOMER)
        user = store.get_current_user()
        assert store.get_token() == "tok2"
        assert user.role == "customer"
        assert user.model_extra == {}


class TestLogout:
    """Logout clears both keys and navigates once."""

    def test_clears_both_keys(self, storage, store, navigator):
        store.record_login("tok", CUSTOMER)
        store.logout()
        assert storage.get_item(TOKEN_KEY) is None
        assert storage.get_item(USER_KEY) is None
        navigator.assert_called_once_with("login.html")

    def test_clears_user_when_only_user_was_set(self, storage, store, navigator):
        storage.set_item(USER_KEY, json.dumps(CUSTOMER))
        store.logout()
        assert storage.get_item(USER_KEY) is None
        navigator.assert_called_once_with("login.html")

    def test_clears_token_when_only_token_was_set(self, storage, store, navigator):
        storage.set_item(TOKEN_KEY, "tok")
        store.logout()
        assert storage.get_item(TOKEN_KEY) is None
        assert navigator.call_count == 1

    def test_logout_when_empty_still_navigates(self, store, navigator):
        store.logout()
        navigator.assert_called_once_with("login.html")

    def test_custom_login_page(self, storage, navigator):
        store = SessionStore(storage, login_page="/signin", navigator=navigator)
        store.logout()
        navigator.assert_called_once_with("/signin")


class TestMemoryStorage:

    def test_round_trip_and_remove(self):
        storage = MemorySessionStorage()
        storage.set_item("token", "abc")
        assert storage.get_item("token") == "abc"
        storage.remove_item("token")
        storage.remove_item("token")
        assert storage.get_item("token") is None
        assert len(storage) == 0

    def test_initial_values(self):
        storage = MemorySessionStorage({"token": "abc"})
        assert SessionStore(storage).is_authenticated()


class TestFileStorage:
    """Session persisted in a JSON file survives a new store instance."""

    def test_session_survives_new_instance(self, tmp_path):
        path = tmp_path / "session.json"
        SessionStore(FileSessionStorage(path)).record_login("tok", ADMIN)

        reloaded = SessionStore(FileSessionStorage(path))
        assert reloaded.get_token() == "tok"
        assert reloaded.is_admin() is True

    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "session.json"
        FileSessionStorage(path).set_item("token", "abc")
        assert json.loads(path.read_text(encoding="utf-8")) == {"token": "abc"}

    def test_missing_file_reads_as_empty(self, tmp_path):
        storage = FileSessionStorage(tmp_path / "absent.json")
        assert storage.get_item("token") is None

    @pytest.mark.parametrize("content", ["{broken", "[1, 2, 3]", ""])
    def test_corrupt_file_reads_as_empty(self, tmp_path, content):
        path = tmp_path / "session.json"
        path.write_text(content, encoding="utf-8")
        store = SessionStore(FileSessionStorage(path))
        assert store.is_authenticated() is False
        assert store.get_current_user() is None

    def test_non_string_values_are_ignored(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text(json.dumps({"token": 123, "user": "{}"}), encoding="utf-8")
        storage = FileSessionStorage(path)
        assert storage.get_item("token") is None
        assert storage.get_item("user") == "{}"

    def test_logout_removes_keys_from_file(self, tmp_path, navigator):
        path = tmp_path / "session.json"
        store = SessionStore(FileSessionStorage(path), navigator=navigator)
        store.record_login("tok", CUSTOMER)
        store.logout()
        assert json.loads(path.read_text(encoding="utf-8")) == {}
        navigator.assert_called_once()

    def test_write_recovers_from_corrupt_file(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("garbage", encoding="utf-8")
        storage = FileSessionStorage(path)
        storage.set_item("token", "abc")
        assert storage.get_item("token") == "abc"

    def test_clear_deletes_file(self, tmp_path):
        path = tmp_path / "session.json"
        storage = FileSessionStorage(path)
        storage.set_item("token", "abc")
        storage.clear()
        assert not path.exists()
        assert storage.get_item("token") is None
