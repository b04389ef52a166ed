from gridstate.redraw_scheduler import RedrawScheduler


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


def drained(clock):
    scheduler = RedrawScheduler(clock)
    scheduler.should_draw()
    return scheduler


def test_first_frame_is_drawn_once():
    scheduler = RedrawScheduler(FakeClock())
    assert scheduler.should_draw() is True
    assert scheduler.should_draw() is False


def test_queue_next_frame():
    scheduler = drained(FakeClock())
    scheduler.queue_next_frame()
    assert scheduler.should_draw() is True
    assert scheduler.should_draw() is False


def test_past_schedule_draws_once():
    clock = FakeClock()
    scheduler = drained(clock)
    scheduler.schedule(clock.now - 1)
    assert scheduler.should_draw() is True
    assert scheduler.should_draw() is False


def test_future_schedule_waits_until_due():
    clock = FakeClock()
    scheduler = drained(clock)
    scheduler.schedule(clock.now + 5)
    assert scheduler.should_draw() is False
    clock.now += 10
    assert scheduler.should_draw() is True
    assert scheduler.should_draw() is False


def test_earlier_schedule_replaces_later():
    clock = FakeClock()
    scheduler = drained(clock)
    scheduler.schedule(clock.now + 5)
    scheduler.schedule(clock.now - 1)
    assert scheduler.should_draw() is True


def test_later_schedule_does_not_replace_earlier():
    clock = FakeClock()
    scheduler = drained(clock)
    scheduler.schedule(clock.now - 1)
    scheduler.schedule(clock.now + 5)
    assert scheduler.should_draw() is True
    assert scheduler.should_draw() is False