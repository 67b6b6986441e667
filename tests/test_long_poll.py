from tgkit.net.long_poll import LongPoll
from tgkit.types.chat import Update


class FakeApi:
    def __init__(self, batches):
        self.batches = list(batches)
        self.calls = []

    def get_updates(self, offset, limit, timeout, allowed_updates):
        self.calls.append((offset, limit, timeout, allowed_updates))
        return self.batches.pop(0) if self.batches else []


class RecordingHandler:
    def __init__(self):
        self.updates = []

    def handle_update(self, update):
        self.updates.append(update)


def test_first_request_uses_defaults():
    api = FakeApi([[]])
    poll = LongPoll(api, RecordingHandler())
    poll.start()
    assert api.calls == [(0, 100, 10, None)]


def test_updates_are_dispatched_in_order():
    batch = [Update(update_id=10), Update(update_id=11), Update(update_id=12)]
    handler = RecordingHandler()
    poll = LongPoll(FakeApi([batch]), handler)
    poll.start()
    assert handler.updates == batch


def test_offset_advances_past_highest_id():
    batch = [Update(update_id=4), Update(update_id=9)]
    api = FakeApi([batch, []])
    poll = LongPoll(api, RecordingHandler(), limit=5, timeout=1, allowed_updates=["message"])
    poll.start()
    poll.start()
    assert poll.last_update_id == 10
    assert api.calls[1] == (10, 5, 1, ["message"])


def test_older_update_does_not_lower_offset():
    batch = [Update(update_id=20), Update(update_id=3)]
    handler = RecordingHandler()
    poll = LongPoll(FakeApi([batch]), handler)
    poll.start()
    assert poll.last_update_id == 21
    assert [u.update_id for u in handler.updates] == [20, 3]


def test_empty_batch_keeps_offset():
    api = FakeApi([[Update(update_id=1)], []])
    poll = LongPoll(api, RecordingHandler())
    poll.start()
    offset = poll.last_update_id
    poll.start()
    assert poll.last_update_id == offset
    assert api.calls[1][0] == offset