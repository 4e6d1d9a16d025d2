"""
Unit tests for id generation.
"""

from jotter import ingress


def test_generate_id_is_milliseconds(monkeypatch):
    monkeypatch.setattr(ingress.time, "time", lambda: 1768427187.928)
    assert ingress.generate_id() == 1768427187928


def test_next_id_uses_clock(monkeypatch):
    monkeypatch.setattr(ingress.time, "time", lambda: 2000.0)
    assert ingress.next_id([1, 2, 3]) == 2_000_000


def test_next_id_bumps_on_collision(monkeypatch):
    monkeypatch.setattr(ingress.time, "time", lambda: 2000.0)
    assert ingress.next_id([2_000_000]) == 2_000_001
    assert ingress.next_id([5_000_000]) == 5_000_001


def test_next_id_empty(monkeypatch):
    monkeypatch.setattr(ingress.time, "time", lambda: 1.0)
    assert ingress.next_id([]) == 1000
