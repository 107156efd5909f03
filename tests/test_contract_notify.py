import io
import logging
import unittest

from dayplan.model import Activity
from dayplan.notify import CollectingSink, ConsoleSink, LoggingSink, Notifier
from dayplan.registry import Registry


class _Tagged:
    def __init__(self, tag: str, out: list):
        self.tag = tag
        self.out = out

    def notify(self, message: str) -> None:
        self.out.append((self.tag, message))


class TestNotifyContract(unittest.TestCase):
    def test_sinks_called_in_registration_order(self) -> None:
        seen: list = []
        reg = Registry(sinks=[_Tagged("first", seen)])
        reg.add_sink(_Tagged("second", seen))
        reg.add(Activity.from_text("a", "08:00", "09:00", "low"))
        self.assertEqual(seen, [("first", "Added: a"), ("second", "Added: a")])

    def test_remove_sink(self) -> None:
        sink = CollectingSink()
        reg = Registry(sinks=[sink])
        self.assertTrue(reg.remove_sink(sink))
        self.assertFalse(reg.remove_sink(sink))
        reg.list_all()
        self.assertEqual(sink.messages, [])
        self.assertEqual(reg.sinks, ())

    def test_console_sink_writes_lines(self) -> None:
        buf = io.StringIO()
        reg = Registry(sinks=[ConsoleSink(buf)])
        reg.list_all()
        reg.remove("x")
        self.assertEqual(buf.getvalue(), "No plans today.\nNot found!\n")

    def test_logging_sink_forwards(self) -> None:
        log = logging.getLogger("dayplan.test.sink")
        reg = Registry(sinks=[LoggingSink(log, level=logging.WARNING)])
        with self.assertLogs(log, level="WARNING") as cm:
            reg.complete("nothing")
        self.assertEqual(cm.records[0].getMessage(), "Not found!")

    def test_sink_may_call_back_into_registry(self) -> None:
        reg = Registry()
        counts: list = []

        class Counter:
            def notify(self, message: str) -> None:
                counts.append(len(reg))

        reg.add_sink(Counter())
        reg.add(Activity.from_text("a", "08:00", "09:00", "low"))
        self.assertEqual(counts, [1])

    def test_notifier_emits_to_snapshot_of_sinks(self) -> None:
        n = Notifier()
        late = CollectingSink()

        class AddsAnother:
            def notify(self, message: str) -> None:
                n.add(late)

        n.add(AddsAnother())
        n.emit("one")
        self.assertEqual(late.messages, [])
        n.emit("two")
        self.assertEqual(late.messages, ["two"])

    def test_registry_logs_rejections(self) -> None:
        reg = Registry()
        with self.assertLogs("dayplan.registry", level="INFO") as cm:
            reg.remove("ghost")
        self.assertIn("not_found", cm.output[0])


if __name__ == "__main__":
    unittest.main(verbosity=2)
