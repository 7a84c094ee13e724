"""Shared fixtures: elements that record when they are released."""

import pytest


class Tracked:
    """Element that appends its tag to a log when released."""

    def __init__(self, tag, log):
        self.tag = tag
        self.log = log

    def __del__(self):
        self.log.append(self.tag)


@pytest.fixture
def release_log():
    return []


@pytest.fixture
def tracked(release_log):
    def make(tag):
        return Tracked(tag, release_log)
    return make
