from unittest import mock

from dlnet.timers import TaskCancelable, Timer, TimerManager


def test_task_cancelable_calls_and_cancels():
    task = TaskCancelable(lambda a, b: a + b)
    assert bool(task) is True
    assert task(2, 3) == 5
    task.cancel()
    assert bool(task) is False
    assert task(2, 3) is None


def test_task_cancelable_without_callable_is_false():
    task = TaskCancelable(None)
    assert [bool(task), task()] == [False, None]


def test_timer_active_passes_args_and_cancel_gives_zero():
    seen = []

    def fun(arg):
        seen.append(arg)
        return 7

    timer = Timer(100, fun, "payload")
    assert timer.active() == 7
    assert seen == ["payload"]
    timer.cancel()
    assert timer.active() == 0
    assert seen == ["payload"]


def test_empty_manager():
    manager = TimerManager()
    assert manager.get_recent_timeout() is None
    assert manager.process_all_timeout() == 0


def test_due_timer_fires_once_and_is_removed():
    manager = TimerManager()
    calls = []
    manager.add_timer(0, lambda arg: calls.append(arg) or 0, "x")
    assert manager.process_all_timeout() == 0
    assert calls == ["x"]
    assert len(manager) == 0


def test_future_timer_not_fired():
    manager = TimerManager()
    calls = []
    manager.add_timer(60_000, lambda arg: calls.append(arg) or 0)
    remaining = manager.process_all_timeout()
    assert calls == []
    assert 0 < remaining <= 60_000
    assert 0 < manager.get_recent_timeout() <= 60_000


def test_repeating_timer_is_rescheduled():
    manager = TimerManager()
    calls = []

    def fun(arg):
        calls.append(arg)
        return 50

    with mock.patch("time.time", return_value=1000.0):
        manager.add_timer(0, fun, 1)
        assert manager.process_all_timeout() == 50
        assert calls == [1]
        assert manager.get_recent_timeout() == 50
    with mock.patch("time.time", return_value=1000.05):
        assert manager.process_all_timeout() == 50
        assert calls == [1, 1]


def test_timers_fire_in_expiry_order():
    manager = TimerManager()
    order = []
    with mock.patch("time.time", return_value=2000.0):
        manager.add_timer(30, lambda a: order.append(a) or 0, "late")
        manager.add_timer(10, lambda a: order.append(a) or 0, "early")
        manager.add_timer(20, lambda a: order.append(a) or 0, "middle")
    with mock.patch("time.time", return_value=2001.0):
        manager.process_all_timeout()
    assert order == ["early", "middle", "late"]


def test_del_timer():
    manager = TimerManager()
    calls = []
    timer = manager.add_timer(0, lambda a: calls.append(a) or 0)
    assert manager.del_timer(timer) is True
    assert manager.del_timer(timer) is False
    manager.process_all_timeout()
    assert calls == []


def test_add_existing_timer_and_cancel():
    manager = TimerManager()
    calls = []
    timer = Timer(manager.current_millisecs(), lambda a: calls.append(a) or 10, None)
    manager.add(timer)
    timer.cancel()
    assert manager.process_all_timeout() == 0
    assert calls == []
    assert len(manager) == 0


def test_current_millisecs_uses_clock():
    manager = TimerManager()
    with mock.patch("time.time", return_value=12.5):
        assert manager.current_millisecs() == 12500