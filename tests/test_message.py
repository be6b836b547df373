import pytest

from robowarehouse.message import EmptyMessageBoxError, Message, MessageBox


def test_new_box_is_empty():
    box = MessageBox()
    assert box.has_message() is False


def test_send_then_receive_round_trip():
    box = MessageBox()
    message = Message(row=6, col=5, current_payload=2, required_payload=2, cmd=1)
    assert box.send(message) is True
    assert box.has_message() is True
    assert box.receive() == message
    assert box.has_message() is False


def test_send_to_full_box_is_refused_and_keeps_first():
    box = MessageBox()
    first = Message(cmd=1)
    second = Message(cmd=2)
    assert box.send(first) is True
    assert box.send(second) is False
    assert box.receive() == first


def test_receive_from_empty_box_raises():
    box = MessageBox()
    with pytest.raises(EmptyMessageBoxError):
        box.receive()


def test_receive_twice_raises_second_time():
    box = MessageBox()
    box.send(Message(cmd=3))
    box.receive()
    with pytest.raises(EmptyMessageBoxError):
        box.receive()


def test_box_stores_a_copy():
    box = MessageBox()
    message = Message(row=1, col=2)
    box.send(message)
    message.row = 4
    assert box.receive().row == 1


def test_box_can_be_reused_after_receive():
    box = MessageBox()
    box.send(Message(cmd=1))
    box.receive()
    assert box.send(Message(cmd=5)) is True
    assert box.receive().cmd == 5