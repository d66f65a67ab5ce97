"""Sorts table rows on every column in turn."""

import random

rows = []


def set_up(count):
    rng = random.Random(count)
    rows[:] = [[rng.random() for _ in range(6)] for _ in range(count)]


def test(count):
    for column in range(6):
        rows.sort(key=lambda row: row[column])


def tear_down(count):
    rows.clear()
