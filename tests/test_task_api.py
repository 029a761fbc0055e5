# tests/test_task_api.py

from __future__ import annotations

import pytest

from inlier_tasks.core.errors import DuplicateUser, NoActiveTask, UserNotFound
from inlier_tasks.tasks import task_api
from inlier_tasks.tasks.task_api import SubmitResult, UserSummary


def test_scenario_ana_submits_after_ten_seconds(state, clock) -> None:
    task_api.register_user(state, "Ana")
    task = task_api.assign_task(state, "Ana")
    assert task.id == 1

    clock.advance(10)
    result = task_api.submit_task(state, "Ana")

    assert isinstance(result, SubmitResult)
    assert result.task_id == 1
    assert result.duration_seconds == 10
    assert result.earnings == pytest.approx(3.33, abs=0.01)

    report = task_api.get_earnings_report(state, "Ana")
    assert report.total == pytest.approx(3.33, abs=0.01)
    assert len(report.tasks) == 1
    assert report.tasks[0].task_id == 1
    assert report.tasks[0].duration_seconds == 10


def test_scenario_bo_lets_task_expire(state, clock, timers) -> None:
    task_api.register_user(state, "Bo")
    task_api.assign_task(state, "Bo")

    clock.advance(60)
    timers.fire_all()

    assert task_api.get_admin_summary(state) == [
        UserSummary(user_name="Bo", completed_count=0, uncompleted_count=1, total_earnings=0.0)
    ]


def test_scenario_zed_is_unknown(state) -> None:
    with pytest.raises(UserNotFound):
        task_api.assign_task(state, "Zed")
    with pytest.raises(UserNotFound):
        task_api.get_earnings_report(state, "Zed")


def test_register_duplicate(state) -> None:
    task_api.register_user(state, "Ana")
    with pytest.raises(DuplicateUser):
        task_api.register_user(state, "Ana")


def test_submit_before_assign(state) -> None:
    task_api.register_user(state, "Ana")
    with pytest.raises(NoActiveTask):
        task_api.submit_task(state, "Ana")


def test_earnings_report_lists_only_completed_tasks(state, clock, timers) -> None:
    task_api.register_user(state, "Ana")

    task_api.assign_task(state, "Ana")
    clock.advance(30)
    task_api.submit_task(state, "Ana")

    task_api.assign_task(state, "Ana")
    timers.timers[-1].fire()

    task_api.assign_task(state, "Ana")
    clock.advance(60)
    task_api.submit_task(state, "Ana")

    report = task_api.get_earnings_report(state, "Ana")

    assert [(r.task_id, r.duration_seconds) for r in report.tasks] == [(1, 30), (3, 60)]
    assert [r.earnings for r in report.tasks] == [pytest.approx(10.0), pytest.approx(15.0)]
    assert report.total == pytest.approx(25.0)


def test_admin_summary_in_registration_order(state, clock, timers) -> None:
    for name in ("Cem", "Ana"):
        task_api.register_user(state, name)

    task_api.assign_task(state, "Ana")
    clock.advance(15)
    task_api.submit_task(state, "Ana")

    rows = task_api.get_admin_summary(state)

    assert [r.user_name for r in rows] == ["Cem", "Ana"]
    assert rows[1].completed_count == 1
    assert rows[1].total_earnings == pytest.approx(5.0)
    assert rows[0].completed_count == 0


def test_admin_summary_empty(state) -> None:
    assert task_api.get_admin_summary(state) == []
