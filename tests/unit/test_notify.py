#!/usr/bin/env python3
"""
Unit tests for the unusual-event log.
"""
import logging

from utils.notify import format_notice, notify

EVENT = {
    "session": {"sessionId": "amzn1.echo-api.session.test"},
    "request": {
        "type": "IntentRequest",
        "requestId": "amzn1.echo-api.request.test",
        "intent": {
            "name": "RegionBottomLineIntent",
            "slots": {
                "region": {"name": "region", "value": "stevens pass", "id": "StevensPass"},
                "state": {"name": "state", "value": None, "id": None},
            },
        },
    },
}


def test_notice_names_intent_and_resolved_slots():
    text = format_notice(EVENT, "Unable to get bottom line for StevensPass", "no bottom line block")
    lines = text.splitlines()

    assert lines[0] == "NOTIFY: Unable to get bottom line for StevensPass"
    assert lines[1] == "REQUEST: IntentRequest RegionBottomLineIntent"
    assert "'stevens pass' -> StevensPass" in lines[2]
    assert "None -> unresolved" in lines[3]
    assert "MESSAGE: no bottom line block" in lines
    assert lines[-1].startswith("EVENT: {")


def test_notice_without_request():
    text = format_notice({"version": "1.0"}, "Exception")
    assert text.splitlines() == ["NOTIFY: Exception", 'EVENT: {"version": "1.0"}']


def test_notify_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="utils.notify"):
        notify(EVENT, "Session Ended", "USER_INITIATED")

    assert len(caplog.records) == 1
    assert caplog.records[0].levelno == logging.WARNING
    assert "Session Ended" in caplog.text
    assert "USER_INITIATED" in caplog.text
