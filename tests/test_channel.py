import threading

import pytest

from funcurry.seq.channel import Channel, chan_as_seq, seq_as_chan


def _producer(channel, values):
    def run():
        try:
            for value in values:
                channel.send(value)
        finally:
            channel.close()

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return thread


def _numbers():
    yield from (1, 2, 3)


def test_chan_as_seq():
    ch = Channel()
    thread = _producer(ch, [1, 2, 3])
    assert list(chan_as_seq(ch)) == [1, 2, 3]
    thread.join(timeout=2)
    assert not thread.is_alive()


def test_chan_early_stop():
    ch = Channel()
    thread = _producer(ch, [1, 2, 3, 4, 5])
    got = []
    for value in chan_as_seq(ch):
        got.append(value)
        if not value < 2:
            break
    assert got == [1, 2]
    assert list(ch) == [3, 4, 5]
    thread.join(timeout=2)
    assert not thread.is_alive()


def test_seq_as_chan():
    ch = seq_as_chan(_numbers())
    assert list(ch) == [1, 2, 3]


def test_seq_as_chan_round_trip():
    ch = seq_as_chan(["a", "b"])
    assert list(chan_as_seq(ch)) == ["a", "b"]


def test_seq_empty_closes_channel():
    ch = seq_as_chan([])
    assert ch.receive() == (None, False)


def test_receive_after_close_reports_closed():
    ch = Channel()
    ch.close()
    assert ch.receive() == (None, False)


def test_send_on_closed_channel_raises():
    ch = Channel()
    ch.close()
    with pytest.raises(ValueError):
        ch.send(1)


def test_close_twice_raises():
    ch = Channel()
    ch.close()
    with pytest.raises(ValueError):
        ch.close()


def test_blocked_sender_completes_on_receive():
    ch = Channel()
    sender = threading.Thread(target=ch.send, args=(42,), daemon=True)
    sender.start()
    assert ch.receive() == (42, True)
    sender.join(timeout=2)
    assert not sender.is_alive()
    ch.close()
    assert ch.receive() == (None, False)