import pytest

from taskboard.database import Database
from taskboard.models import TaskPriority, TaskStatus, User, UserRole
from taskboard.services.task_service import TaskPatch, TaskService
from taskboard.utils.errors import ForbiddenError, NotFoundError, ValidationError


@pytest.fixture
def db():
    database = Database("sqlite://")
    database.create_tables()
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()
        database.dispose()


@pytest.fixture
def users(db):
    admin = User(name="Admin", username="admin", email="admin@example.com", hashed_password="x", role=UserRole.ADMIN)
    alice = User(name="Alice", username="alice", email="alice@example.com", hashed_password="x")
    bob = User(name="Bob", username="bob", email="bob@example.com", hashed_password="x")
    db.add_all([admin, alice, bob])
    db.commit()
    return {"admin": admin, "alice": alice, "bob": bob}


@pytest.fixture
def task(db, users):
    return TaskService(db).create_task(UserRole.ADMIN, "Deploy", None, users["alice"].id, TaskPriority.HIGH)


def test_create_task_defaults(task, users):
    assert task.status == TaskStatus.PENDING
    assert task.has_issue is False
    assert task.priority == TaskPriority.HIGH
    assert task.assigned_to == users["alice"].id


def test_only_admin_creates(db, users):
    with pytest.raises(ForbiddenError):
        TaskService(db).create_task(UserRole.EMPLOYEE, "Deploy", None, users["alice"].id)


def test_create_validates_input(db, users):
    service = TaskService(db)
    with pytest.raises(ValidationError):
        service.create_task(UserRole.ADMIN, "", None, users["alice"].id)
    with pytest.raises(ValidationError):
        service.create_task(UserRole.ADMIN, "Deploy", None, None)
    with pytest.raises(NotFoundError):
        service.create_task(UserRole.ADMIN, "Deploy", None, 999)


def test_list_all_tasks_is_admin_only(db, task):
    with pytest.raises(ForbiddenError):
        TaskService(db).list_all_tasks(UserRole.EMPLOYEE)
    assert [t.title for t in TaskService(db).list_all_tasks(UserRole.ADMIN)] == ["Deploy"]


def test_done_forces_issue_closed(db, task, users):
    service = TaskService(db)
    alice = users["alice"]
    service.update_task(alice.id, UserRole.EMPLOYEE, task.id, TaskPatch(has_issue=True))

    updated = service.update_task(alice.id, UserRole.EMPLOYEE, task.id, TaskPatch(status=TaskStatus.DONE, has_issue=True))
    assert updated.status == TaskStatus.DONE
    assert updated.has_issue is False


def test_issue_can_be_raised_on_done_task(db, task, users):
    service = TaskService(db)
    alice = users["alice"]
    service.update_task(alice.id, UserRole.EMPLOYEE, task.id, TaskPatch(status=TaskStatus.DONE))

    updated = service.update_task(alice.id, UserRole.EMPLOYEE, task.id, TaskPatch(has_issue=True))
    assert updated.status == TaskStatus.DONE
    assert updated.has_issue is True


def test_forbidden_update_leaves_task_unchanged(db, task, users):
    service = TaskService(db)
    with pytest.raises(ForbiddenError):
        service.update_task(users["bob"].id, UserRole.EMPLOYEE, task.id, TaskPatch(description="hijacked"))

    db.expire_all()
    assert service.list_own_tasks(users["alice"].id)[0].description is None


def test_empty_patch_is_a_no_op(db, task, users, monkeypatch):
    assert TaskPatch().is_empty()
    service = TaskService(db)

    def fail_save(*args):
        raise AssertionError("empty patch must not be saved")

    monkeypatch.setattr(service, "_save", fail_save)
    updated = service.update_task(users["admin"].id, UserRole.ADMIN, task.id, TaskPatch())
    assert updated is task
    assert updated.status == TaskStatus.PENDING


def test_empty_patch_still_checks_authorization(db, task, users):
    with pytest.raises(ForbiddenError):
        TaskService(db).update_task(users["bob"].id, UserRole.EMPLOYEE, task.id, TaskPatch())


def test_resolve_issue_is_idempotent(db, task, users):
    service = TaskService(db)
    alice = users["alice"]
    service.update_task(alice.id, UserRole.EMPLOYEE, task.id, TaskPatch(has_issue=True))

    assert service.resolve_issue(alice.id, UserRole.EMPLOYEE, task.id).has_issue is False
    assert service.resolve_issue(alice.id, UserRole.EMPLOYEE, task.id).has_issue is False
