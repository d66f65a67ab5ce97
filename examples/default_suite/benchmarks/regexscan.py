"""Scans a generated log for request lines."""

import re

REQUEST = re.compile(r'"(GET|POST) (/\S*) HTTP/1\.[01]" (\d{3})')

lines = []


def set_up(count):
    lines[:] = [
        f'10.0.0.{n % 255} - - "GET /item/{n} HTTP/1.1" {200 + n % 3 * 100}'
        if n % 4
        else f"10.0.0.{n % 255} heartbeat ok"
        for n in range(count)
    ]


def test(count):
    statuses = {}
    for line in lines:
        match = REQUEST.search(line)
        if match:
            statuses[match.group(3)] = statuses.get(match.group(3), 0) + 1
    return statuses
