"""Tests for the in-memory session table"""

import re

from limetools.auth.sessions import SessionStore


def test_create_then_resolve():
    sessions = SessionStore()
    token = sessions.create("a@x.com")
    assert re.fullmatch(r"[0-9a-f]{32}", token)
    assert sessions.resolve(token) == "a@x.com"
    assert token in sessions


def test_destroy_removes_binding():
    sessions = SessionStore()
    token = sessions.create("a@x.com")
    sessions.destroy(token)
    assert sessions.resolve(token) is None
    assert len(sessions) == 0


def test_destroy_unknown_token_is_noop():
    sessions = SessionStore()
    kept = sessions.create("a@x.com")
    sessions.destroy("deadbeef")
    sessions.destroy(None)
    assert sessions.resolve(kept) == "a@x.com"


def test_resolve_empty_or_unknown():
    sessions = SessionStore()
    assert sessions.resolve(None) is None
    assert sessions.resolve("") is None
    assert sessions.resolve("0" * 32) is None


def test_same_email_gets_distinct_tokens():
    sessions = SessionStore()
    first = sessions.create("a@x.com")
    second = sessions.create("a@x.com")
    assert first != second
    assert len(sessions) == 2


def test_instances_do_not_share_state():
    one, two = SessionStore(), SessionStore()
    token = one.create("a@x.com")
    assert two.resolve(token) is None
