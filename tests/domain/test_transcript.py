"""Unit tests for Transcript."""
from __future__ import annotations

import unittest

from chatai.domain.entity.transcript import Transcript
from chatai.domain.vo.chat_turn import ChatTurn


class TestTranscript(unittest.TestCase):
    """Test cases for Transcript."""

    def setUp(self):
        """Set up test fixtures."""
        self.transcript = Transcript()

    def test_append_keeps_insertion_order(self):
        """Test that turns are kept in the order they were appended."""
        self.transcript.append(ChatTurn.user("Hello"))
        self.transcript.append(ChatTurn.assistant("Hi!"))
        self.transcript.append(ChatTurn.system("Error 500: boom"))

        self.assertEqual(
            self.transcript.snapshot(),
            (
                ChatTurn(role="user", content="Hello"),
                ChatTurn(role="assistant", content="Hi!"),
                ChatTurn(role="system", content="Error 500: boom"),
            ),
        )

    def test_append_does_not_deduplicate_or_strip(self):
        """Test that duplicates and whitespace are stored verbatim."""
        self.transcript.append(ChatTurn.user("  same  "))
        self.transcript.append(ChatTurn.user("  same  "))

        self.assertEqual(len(self.transcript), 2)
        self.assertEqual(self.transcript.snapshot()[0].content, "  same  ")

    def test_no_size_cap(self):
        """Test that the transcript is never trimmed."""
        for i in range(500):
            self.transcript.append(ChatTurn.user(f"Message {i}"))

        snapshot = self.transcript.snapshot()
        self.assertEqual(len(snapshot), 500)
        self.assertEqual(snapshot[0].content, "Message 0")

    def test_snapshot_is_idempotent(self):
        """Test that two snapshots without an append are identical."""
        self.transcript.append(ChatTurn.user("Hello"))
        self.transcript.append(ChatTurn.assistant("Hi!"))

        self.assertEqual(self.transcript.snapshot(), self.transcript.snapshot())

    def test_snapshot_is_not_affected_by_later_appends(self):
        """Test that a snapshot is a copy of the state at call time."""
        self.transcript.append(ChatTurn.user("Hello"))
        snapshot = self.transcript.snapshot()

        self.transcript.append(ChatTurn.assistant("Hi!"))

        self.assertEqual(len(snapshot), 1)
        self.assertEqual(len(self.transcript), 2)

    def test_subscribe_notifies_each_append(self):
        """Test that listeners receive every appended turn in order."""
        received: list[ChatTurn] = []
        self.transcript.subscribe(received.append)

        self.transcript.append(ChatTurn.user("One"))
        self.transcript.append(ChatTurn.assistant("Two"))

        self.assertEqual([t.content for t in received], ["One", "Two"])

    def test_listener_sees_turn_already_stored(self):
        """Test that the turn is in the snapshot when listeners run."""
        lengths: list[int] = []
        self.transcript.subscribe(lambda _turn: lengths.append(len(self.transcript)))

        self.transcript.append(ChatTurn.user("One"))

        self.assertEqual(lengths, [1])

    def test_unsubscribe_stops_notifications(self):
        """Test that an unsubscribed listener is not called again."""
        received: list[ChatTurn] = []
        unsubscribe = self.transcript.subscribe(received.append)

        self.transcript.append(ChatTurn.user("One"))
        unsubscribe()
        unsubscribe()
        self.transcript.append(ChatTurn.user("Two"))

        self.assertEqual(len(received), 1)

    def test_iter_yields_turns(self):
        """Test iterating over the transcript."""
        self.transcript.append(ChatTurn.user("Hello"))

        self.assertEqual(list(self.transcript), [ChatTurn.user("Hello")])


class TestChatTurn(unittest.TestCase):
    """Test cases for ChatTurn."""

    def test_to_message(self):
        """Test the wire representation of a turn."""
        self.assertEqual(
            ChatTurn.system("Exception x").to_message(),
            {"role": "system", "content": "Exception x"},
        )

    def test_turn_is_immutable(self):
        """Test that a turn cannot be changed after creation."""
        turn = ChatTurn.user("Hello")
        with self.assertRaises(AttributeError):
            turn.content = "changed"  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
