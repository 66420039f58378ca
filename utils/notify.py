#!/usr/bin/python3

# =============================================================================
#
# Copyright 2017 by Leland Lucius
#
# Released under the GNU Affero GPL
# See: https://github.com/lllucius/climacast/blob/master/LICENSE
#
# =============================================================================

import json
import logging

from utils.constants import SLOTS

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def format_notice(event, sub, msg=None):
    """
    Render an unusual event as text.

    The header names the request type, the intent and, for each region or
    state slot, what the user said and the key it resolved to. The event
    summary follows as JSON.
    """
    lines = ["NOTIFY: " + sub]

    request = event.get("request") or {}
    if request:
        intent = request.get("intent") or {}
        lines.append("REQUEST: %s %s" % (request.get("type"), intent.get("name", "")))

        slots = intent.get("slots") or {}
        for slot in SLOTS:
            if slot not in slots:
                continue
            value = slots[slot].get("value")
            resolved = slots[slot].get("id")
            lines.append("  %-7s %r -> %s" % (slot + ":", value,
                                               resolved or "unresolved"))

    if msg:
        lines.append("MESSAGE: " + msg)

    lines.append("EVENT: " + json.dumps(event, sort_keys=True, default=str))
    return "\n".join(lines)


def notify(event, sub, msg=None):
    """
    Log an unusual event together with the request that caused it
    """
    logger.warning(format_notice(event, sub, msg))
