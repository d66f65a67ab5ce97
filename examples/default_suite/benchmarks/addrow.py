"""Appends rows of cells to an in-memory table."""

table = []


def set_up(count):
    table.clear()


def test(count):
    for row in range(count):
        table.append([f"r{row}c{column}" for column in range(8)])


def tear_down(count):
    table.clear()
