"""Seeded one-dimensional random walk."""

import random


def reset_random():
    random.seed(7)


def test(steps):
    position = 0
    for _ in range(steps):
        position += 1 if random.random() < 0.5 else -1
    return position
