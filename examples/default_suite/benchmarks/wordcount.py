"""Counts words in generated prose and signals completion through a deferred."""

from collections import Counter

WORDS = ("alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf")

text = ""
counts = Counter()


def set_up(count):
    global text
    text = " ".join(WORDS[n * 7 % len(WORDS)] for n in range(count))


def test_async(deferred, count):
    counts.clear()
    counts.update(text.split())
    deferred.resolve()
