"""Unit tests.

Purpose
- Check the Room aggregate, the removal handler, the message bus, views and
  CLI helpers in isolation.

Guidelines
- No real database; handler tests run against InMemoryRoomStore or a fake
  derived from it.
- Assert on returned results and stored state, not on call sequences.
"""
