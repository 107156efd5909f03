from __future__ import annotations

import datetime as dt
import os
import random
import unittest

from dayplan.interval import overlaps
from dayplan.model import Activity, Priority
from dayplan.registry import Registry


def _rand_time(rng: random.Random) -> dt.time:
    # 10-minute grid keeps touching endpoints frequent.
    m = rng.randrange(0, 24 * 6) * 10
    return dt.time(m // 60, m % 60)


def _assert_no_overlap(tc: unittest.TestCase, reg: Registry) -> None:
    items = list(reg.list_all().view)
    for i, a in enumerate(items):
        for b in items[i + 1:]:
            tc.assertFalse(
                overlaps(a.start, a.end, b.start, b.end),
                f"overlap: {a.render()} / {b.render()}",
            )
    tc.assertEqual(reg.conflicts(), [])
    starts = [a.start for a in items]
    tc.assertEqual(starts, sorted(starts))


class TestOverlapFuzzContract(unittest.TestCase):
    def test_random_adds_and_edits_keep_invariant(self) -> None:
        iters = int(os.environ.get("DAYPLAN_FUZZ_ITERS", "400"))
        seed = int(os.environ.get("DAYPLAN_FUZZ_SEED", "1337"))
        rng = random.Random(seed)
        levels = list(Priority)

        reg = Registry()
        accepted = 0
        for i in range(iters):
            start = _rand_time(rng)
            end = _rand_time(rng)
            names = reg.names()
            if names and rng.random() < 0.3:
                target = rng.choice(names)
                out = reg.edit(target, target, start, end, rng.choice(levels))
            elif names and rng.random() < 0.1:
                out = reg.remove(rng.choice(names))
            else:
                out = reg.add(Activity(f"p{i}", start, end, rng.choice(levels)))
            if out:
                accepted += 1
            _assert_no_overlap(self, reg)

        self.assertGreater(accepted, 0)

    def test_rejected_add_matches_brute_force(self) -> None:
        rng = random.Random(int(os.environ.get("DAYPLAN_FUZZ_SEED", "1337")))
        reg = Registry()
        for i in range(200):
            start = _rand_time(rng)
            end = _rand_time(rng)
            stored = list(reg.list_all().view)
            expect_ok = start < end and not any(overlaps(start, end, s.start, s.end) for s in stored)
            out = reg.add(Activity(f"p{i}", start, end))
            self.assertEqual(bool(out), expect_ok, f"{start}-{end}")


if __name__ == "__main__":
    unittest.main(verbosity=2)
