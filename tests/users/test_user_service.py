from __future__ import annotations

from decimal import Decimal

import pytest

from src.payroll_admin.payroll_admin.core.enums import Role
from src.payroll_admin.payroll_admin.core.exceptions import NotFoundError, ValidationError
from src.payroll_admin.payroll_admin.users.model import User
from src.payroll_admin.payroll_admin.users.service import UserService


class FakeUserRepo:
    def __init__(self, users=()):
        self.users = {u.user_id: u for u in users}
        self.created = []
        self.updated = []
        self.deleted = []

    def list_users(self, *, limit=None):
        return list(self.users.values())[:limit]

    def get_by_id(self, user_id):
        return self.users.get(user_id)

    def create_user(self, draft):
        self.created.append(draft)
        return "u-new"

    def update_user(self, user_id, draft):
        self.updated.append((user_id, draft))

    def delete_by_id(self, user_id):
        self.deleted.append(user_id)


def test_create_account_builds_payload():
    repo = FakeUserRepo()
    svc = UserService(repo)

    user_id = svc.create_account(
        name=" Sari ", email="sari@example.com", password="secret1", role="USER", base_salary="4500000"
    )

    assert user_id == "u-new"
    assert repo.created[0].to_payload() == {
        "name": "Sari",
        "email": "sari@example.com",
        "role": "USER",
        "baseSalary": "4500000",
        "password": "secret1",
    }


def test_create_account_rejects_short_password():
    svc = UserService(FakeUserRepo())

    with pytest.raises(ValidationError) as exc:
        svc.create_account(name="Sari", email="sari@example.com", password="123", role="USER")

    assert exc.value.field == "password"


@pytest.mark.parametrize("role", ["SUPER_ADMIN", "OWNER", None])
def test_create_account_rejects_unassignable_role(role):
    svc = UserService(FakeUserRepo())

    with pytest.raises(ValidationError) as exc:
        svc.create_account(name="Sari", email="sari@example.com", password="secret1", role=role)

    assert exc.value.field == "role"


def test_create_account_rejects_bad_email_and_salary():
    svc = UserService(FakeUserRepo())

    with pytest.raises(ValidationError) as exc:
        svc.create_account(name="Sari", email="not-an-email", password="secret1", role="USER")
    assert exc.value.field == "email"

    with pytest.raises(ValidationError) as exc:
        svc.create_account(name="Sari", email="sari@example.com", password="secret1", role="USER", base_salary="-5")
    assert exc.value.field == "baseSalary"


def test_update_account_blank_password_is_not_sent():
    repo = FakeUserRepo()
    svc = UserService(repo)

    svc.update_account("u1", name="Sari", email="sari@example.com", role="ADMIN", password="  ")

    user_id, draft = repo.updated[0]
    assert user_id == "u1"
    assert "password" not in draft.to_payload()
    assert draft.role is Role.ADMIN


def test_get_user_not_found():
    existing = User(user_id="u1", name="Sari", email="sari@example.com", role=Role.USER, base_salary=Decimal("1"))
    svc = UserService(FakeUserRepo([existing]))

    assert svc.get_user("u1") == existing
    with pytest.raises(NotFoundError):
        svc.get_user("u2")
