"""
Tests for the local key-value mock backend.
"""
import pytest
from craftfolio.core.errors import AuthError, ConflictError, NotFoundError, ValidationError
from craftfolio.client.routes import SessionState
from craftfolio.local.backend import LocalBackend, open_local_backend
from craftfolio.local.store import CURRENT_USER_KEY, PROJECTS_KEY, USERS_KEY, MemoryStore
from craftfolio.models.project import ProjectStatus
from craftfolio.schemas.project import ProjectCreate, ProjectUpdate
from craftfolio.schemas.user import UserUpdate


@pytest.fixture
def backend():
    return LocalBackend(MemoryStore())


@pytest.fixture
def user(backend):
    return backend.users.register("ada", "ada@example.com", "secret")


def test_register_returns_public_user(backend, user):
    assert user.username == "ada"
    assert user.bio is None
    assert user.skills == []
    assert not hasattr(user, "hashed_password")
    stored = backend.store.read_json(USERS_KEY)
    assert stored[0]["hashed_password"] != "secret"


def test_register_does_not_sign_in(backend, user):
    assert backend.users.current_user() is None


def test_register_duplicate_username(backend, user):
    with pytest.raises(ConflictError):
        backend.users.register("ada", "other@example.com", "secret")
    assert len(backend.store.read_json(USERS_KEY)) == 1


def test_register_duplicate_email(backend, user):
    with pytest.raises(ConflictError):
        backend.users.register("grace", "ada@example.com", "secret")
    stored = backend.store.read_json(USERS_KEY)
    assert [u["username"] for u in stored] == ["ada"]


def test_register_requires_fields(backend):
    with pytest.raises(ValidationError) as exc:
        backend.users.register("", "x@example.com", "secret")
    assert exc.value.field == "username"
    with pytest.raises(ValidationError) as exc:
        backend.users.register("bob", "nope", "secret")
    assert exc.value.field == "email"


def test_authenticate(backend, user):
    signed_in = backend.users.authenticate("ada@example.com", "secret")
    assert signed_in == user
    assert backend.users.current_user() == user
    assert backend.session.state == SessionState.AUTHENTICATED


def test_authenticate_bad_credentials(backend, user):
    with pytest.raises(AuthError):
        backend.users.authenticate("ada@example.com", "wrong")
    with pytest.raises(AuthError):
        backend.users.authenticate("nobody", "secret")
    assert backend.store.get(CURRENT_USER_KEY) is None


def test_update_profile_patch(backend, user):
    backend.users.update_profile(user.id, UserUpdate(skills=["go"], location="Oslo"))
    updated = backend.users.update_profile(user.id, UserUpdate(bio="x"))
    assert updated.bio == "x"
    assert updated.skills == ["go"]
    assert updated.location == "Oslo"
    assert updated.avatar is None
    assert updated.updated_at >= user.updated_at
    assert updated.created_at == user.created_at


def test_update_profile_refreshes_session(backend, user):
    backend.users.authenticate("ada@example.com", "secret")
    backend.users.update_profile(user.id, UserUpdate(bio="hello"))
    assert backend.users.current_user().bio == "hello"


def test_update_profile_leaves_other_session(backend, user):
    grace = backend.users.register("grace", "grace@example.com", "secret")
    backend.users.authenticate("ada@example.com", "secret")
    backend.users.update_profile(grace.id, UserUpdate(bio="hello"))
    assert backend.users.current_user().bio is None


def test_update_profile_unknown_user(backend):
    with pytest.raises(NotFoundError):
        backend.users.update_profile("missing", UserUpdate(bio="x"))


def test_sign_out_is_idempotent(backend, user):
    backend.users.sign_out()
    assert backend.session.state == SessionState.UNAUTHENTICATED
    backend.users.authenticate("ada@example.com", "secret")
    backend.users.sign_out()
    backend.users.sign_out()
    assert backend.users.current_user() is None


def test_session_guard(backend, user):
    assert backend.session.redirect_for("/projects") == "/login"
    backend.users.authenticate("ada@example.com", "secret")
    assert backend.session.redirect_for("/login") == "/dashboard"
    assert backend.session.redirect_for("/projects") is None


def test_create_project_defaults(backend, user):
    project = backend.projects.create(user.id, ProjectCreate(title="Site", description="Mine", tags=["a", "a"]))
    assert project.status == ProjectStatus.PLANNED
    assert project.tags == ["a"]
    assert project.owner_id == user.id
    assert project.created_at == project.updated_at


def test_create_project_empty_title(backend, user):
    with pytest.raises(ValidationError) as exc:
        backend.projects.create(user.id, ProjectCreate(title="", description="y"))
    assert exc.value.field == "title"
    assert backend.projects.list() == []
    assert backend.store.get(PROJECTS_KEY) is None


def test_create_project_unknown_owner(backend):
    with pytest.raises(NotFoundError):
        backend.projects.create("missing", ProjectCreate(title="t", description="d"))


def test_create_then_get(backend, user):
    created = backend.projects.create(
        user.id,
        ProjectCreate(title="Site", description="Mine", repo_url="https://git/site", status="IN_PROGRESS")
    )
    assert backend.projects.get_by_id(created.id) == created
    assert backend.projects.get_by_id("missing") is None


def test_list_keeps_insertion_order(backend, user):
    grace = backend.users.register("grace", "grace@example.com", "secret")
    backend.projects.create(user.id, ProjectCreate(title="One", description="d"))
    backend.projects.create(grace.id, ProjectCreate(title="Two", description="d"))
    backend.projects.create(user.id, ProjectCreate(title="Three", description="d"))
    assert [p.title for p in backend.projects.list()] == ["One", "Two", "Three"]
    assert [p.title for p in backend.projects.list_by_owner(user.id)] == ["One", "Three"]


def test_update_project(backend, user):
    created = backend.projects.create(user.id, ProjectCreate(title="Site", description="Mine", tags=["go"]))
    updated = backend.projects.update(created.id, ProjectUpdate(status="COMPLETED", demo_url=""))
    assert updated.status == ProjectStatus.COMPLETED
    assert updated.tags == ["go"]
    assert updated.demo_url is None
    assert updated.owner_id == user.id
    assert backend.projects.get_by_id(created.id) == updated


def test_update_project_errors(backend, user):
    created = backend.projects.create(user.id, ProjectCreate(title="Site", description="Mine"))
    with pytest.raises(NotFoundError):
        backend.projects.update("missing", ProjectUpdate(title="x"))
    with pytest.raises(ValidationError):
        backend.projects.update(created.id, ProjectUpdate(description=""))
    assert backend.projects.get_by_id(created.id).description == "Mine"


def test_delete_project_twice(backend, user):
    created = backend.projects.create(user.id, ProjectCreate(title="Site", description="Mine"))
    backend.projects.delete(created.id)
    assert backend.projects.get_by_id(created.id) is None
    with pytest.raises(NotFoundError):
        backend.projects.delete(created.id)


def test_file_store_persists(tmp_path):
    first = open_local_backend(str(tmp_path))
    ada = first.users.register("ada", "ada@example.com", "secret")
    first.users.authenticate("ada@example.com", "secret")
    first.projects.create(ada.id, ProjectCreate(title="Site", description="Mine"))

    second = open_local_backend(str(tmp_path))
    assert second.users.current_user() == ada
    assert [p.title for p in second.projects.list()] == ["Site"]
    assert sorted(f.name for f in tmp_path.iterdir()) == ["current_user.json", "projects.json", "users.json"]


def test_corrupt_slot_reads_as_empty(backend):
    backend.store.set(PROJECTS_KEY, b"{not json")
    assert backend.projects.list() == []


def test_update_profile_cannot_clear_email(backend, user):
    with pytest.raises(ValidationError) as exc:
        backend.users.update_profile(user.id, UserUpdate(email=None))
    assert exc.value.field == "email"
    assert backend.users.authenticate("ada@example.com", "secret").email == "ada@example.com"


def test_update_profile_cannot_change_email(backend, user):
    with pytest.raises(ValidationError):
        backend.users.update_profile(user.id, UserUpdate(email="new@example.com", bio="x"))
    stored = backend.store.read_json(USERS_KEY)[0]
    assert stored["email"] == "ada@example.com"
    assert stored["bio"] is None


def test_unreadable_session_is_signed_out(backend, user):
    backend.store.set(CURRENT_USER_KEY, b"{broken")
    assert backend.session.state == SessionState.UNAUTHENTICATED
    assert backend.session.redirect_for("/projects") == "/login"
    assert backend.users.current_user() is None
    assert backend.store.get(CURRENT_USER_KEY) is None


def test_invalid_session_snapshot_is_discarded(backend, user):
    backend.store.write_json(CURRENT_USER_KEY, {"username": "ada"})
    assert backend.users.current_user() is None
    assert backend.session.state == SessionState.UNAUTHENTICATED
