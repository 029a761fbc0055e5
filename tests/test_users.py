# tests/test_users.py

from __future__ import annotations

import threading

import pytest

from inlier_tasks.core.errors import DuplicateUser, InvalidName, UserNotFound
from inlier_tasks.core.users import UserRegistry, is_valid_name

from .fakes import FakeClock


def test_register_creates_idle_user() -> None:
    clock = FakeClock(start=1234.0)
    reg = UserRegistry(clock=clock)

    user = reg.register("Ana")

    assert user.name == "Ana"
    assert user.total_earnings == 0.0
    assert user.login_at == 1234.0
    assert user.current_task is None
    assert user.is_idle
    assert user.completed_tasks == []
    assert user.uncompleted_tasks == []
    assert reg.lookup("Ana") is user


def test_register_strips_whitespace() -> None:
    reg = UserRegistry()
    user = reg.register("  Bo \n")
    assert user.name == "Bo"
    assert reg.lookup("Bo") is user


@pytest.mark.parametrize("name", ["", "   ", "Ana1", "Ana Maria", "ana_b", "Zoë-x", "12"])
def test_register_rejects_invalid_names(name: str) -> None:
    reg = UserRegistry()
    with pytest.raises(InvalidName):
        reg.register(name)
    assert reg.count_users() == 0


@pytest.mark.parametrize("name", ["Ana", "Gökçe", "İpek", "ŞÜĞÖÇ", "abcXYZ"])
def test_valid_names_include_turkish_letters(name: str) -> None:
    assert is_valid_name(name)


def test_duplicate_is_exact_and_case_sensitive() -> None:
    reg = UserRegistry()
    reg.register("Ana")

    with pytest.raises(DuplicateUser) as exc:
        reg.register("Ana")
    assert exc.value.name == "Ana"

    # Different case is a different user.
    reg.register("ana")
    assert reg.count_users() == 2


def test_lookup_unknown_user() -> None:
    reg = UserRegistry()
    with pytest.raises(UserNotFound):
        reg.lookup("Zed")


def test_list_users_keeps_registration_order() -> None:
    reg = UserRegistry()
    for name in ["Cem", "Ana", "Bo"]:
        reg.register(name)
    assert [u.name for u in reg.list_users()] == ["Cem", "Ana", "Bo"]


def test_concurrent_registration_of_same_name_admits_one() -> None:
    reg = UserRegistry()
    barrier = threading.Barrier(8)
    outcomes: list[str] = []
    lock = threading.Lock()

    def worker() -> None:
        barrier.wait()
        try:
            reg.register("Ana")
            result = "ok"
        except DuplicateUser:
            result = "dup"
        with lock:
            outcomes.append(result)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)

    assert outcomes.count("ok") == 1
    assert outcomes.count("dup") == 7
