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
import random
import sys
import traceback
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from dateutil import tz

from ask_sdk_core.skill_builder import CustomSkillBuilder
from ask_sdk_core.dispatch_components import AbstractRequestHandler, AbstractExceptionHandler
from ask_sdk_core.dispatch_components import AbstractRequestInterceptor, AbstractResponseInterceptor
from ask_sdk_core.utils import is_request_type, is_intent_name
from ask_sdk_core.serialize import DefaultSerializer
from ask_sdk_model import RequestEnvelope

from avalanche.detail import BOTTOM_LINE_STATES
from avalanche.errors import ParseError, NotFoundError, UpstreamError
from avalanche.models import RegionRequest, StateRequest
from avalanche.summarizer import summarize
from storage.local_handlers import LocalJsonCacheHandler
from utils.config import Config
from utils.constants import *
from utils.factories import get_orchestrator, get_detail_source, set_cache_handler
from utils.notify import notify
from utils import speech

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

"""
    Anything defined here will persist for the duration of the lambda
    container, so only initialize them once to reduce initialization time.
"""
VERSION = 1
REVISION = 0

Config.validate()


def event_summary(handler_input) -> Dict[str, Any]:
    """
    Build a minimal event dict describing the request, for notifications.
    """
    request_envelope = handler_input.request_envelope
    request = request_envelope.request
    session = request_envelope.session
    event = {
        "session": {
            "sessionId": session.session_id if session else None,
            "user": {
                "userId": session.user.user_id if session and session.user else None
            }
        },
        "request": {
            "type": request.object_type,
            "requestId": request.request_id
        }
    }

    intent = getattr(request, "intent", None)
    if intent:
        event["request"]["intent"] = {
            "name": intent.name,
            "slots": {}
        }
        if intent.slots:
            for slot_name, slot in intent.slots.items():
                event["request"]["intent"]["slots"][slot_name] = {
                    "name": slot.name,
                    "value": slot.value,
                    "id": resolve_slot(slot)[0]
                }

    return event


def resolve_slot(slot) -> Tuple[Optional[str], Optional[str]]:
    """
    Return the id and name of the first entity resolution match of a slot.
    """
    if slot is None or slot.resolutions is None:
        return None, None
    for authority in slot.resolutions.resolutions_per_authority or []:
        if authority.values:
            value = authority.values[0].value
            return value.id, value.name
    return None, None


class Skill(object):
    """
    Answers one request. Created per request with its collaborators.
    """

    def __init__(self, handler_input, orchestrator, detail_source=None):
        self.handler_input = handler_input
        self.request_envelope = handler_input.request_envelope
        self.session = self.request_envelope.session
        self.request = self.request_envelope.request
        self.orchestrator = orchestrator
        self.detail_source = detail_source
        self.event = event_summary(handler_input)

    def initialize(self):
        """Verify the request and log what was asked"""
        # Amazon says to verify our application id
        if self.session is not None:
            app_id = self.session.application.application_id
        else:
            app_id = self.request_envelope.context.system.application.application_id
        if app_id != Config.APP_ID:
            raise ValueError("Invoked from unknown application.")

        intent = getattr(self.request, "intent", None)
        if intent:
            logger.info("INTENT: %s", intent.name)
            for slot_name, slot in (intent.slots or {}).items():
                if slot_name in SLOTS:
                    logger.info("SLOT: %s = %s", slot_name, slot.value)
        else:
            logger.info("REQUEST: %s", self.request.object_type)

    def _slot(self, name):
        intent = getattr(self.request, "intent", None)
        if intent is None or not intent.slots:
            return None
        return intent.slots.get(name)

    def region_request(self) -> RegionRequest:
        """
        Build the region request from the resolved region slot.

        Raises:
            NotFoundError: If the spoken region did not resolve
        """
        slot = self._slot("region")
        key, name = resolve_slot(slot)
        if key is None:
            raise NotFoundError("region", slot.value if slot and slot.value else "")
        # Prefer the name as the user said it
        return RegionRequest(key=key, name=slot.value or name)

    def state_request(self) -> StateRequest:
        """
        Build the state request from the resolved state slot.

        Raises:
            NotFoundError: If the spoken state did not resolve
        """
        slot = self._slot("state")
        code, name = resolve_slot(slot)
        if code is None:
            raise NotFoundError("state", slot.value if slot and slot.value else "")
        return StateRequest(code=code, name=name or slot.value)

    def respond(self, text, end=True, reprompt=None):
        response_builder = self.handler_input.response_builder
        response_builder.speak(text)
        if reprompt and not end:
            response_builder.ask(reprompt)
        response_builder.set_should_end_session(end)
        return response_builder.response

    def launch_request(self):
        return self.respond(LAUNCH_TEXT, end=False, reprompt=LAUNCH_REPROMPT_TEXT)

    def help_intent(self):
        return self.respond(HELP_TEXT, end=False, reprompt=HELP_TEXT)

    def region_forecast(self, now: datetime) -> str:
        request = self.region_request()
        try:
            forecast = self.orchestrator.resolve(request, now)
        except UpstreamError:
            return UPSTREAM_ERROR_TEXT
        return speech.region_text(forecast, request.name)

    def state_forecast(self, now: datetime) -> str:
        request = self.state_request()
        try:
            forecasts = self.orchestrator.resolve(request, now)
        except UpstreamError:
            return UPSTREAM_ERROR_TEXT
        return speech.state_text(request.name, summarize(forecasts))

    def bottom_line(self, now: datetime) -> str:
        request = self.region_request()
        try:
            forecast = self.orchestrator.resolve(request, now)
        except UpstreamError:
            return UPSTREAM_ERROR_TEXT

        if forecast.state not in BOTTOM_LINE_STATES:
            return BOTTOM_LINE_STATE_TEXT

        if self.detail_source is None:
            logger.warning("No bottom line source configured")
            return BOTTOM_LINE_ERROR_TEXT

        try:
            bottom_line = self.detail_source.fetch(forecast.link)
        except ParseError as e:
            notify(self.event, "Unable to get bottom line for %s" % request.key, str(e))
            return BOTTOM_LINE_ERROR_TEXT

        return speech.bottom_line_text(forecast, request.name, bottom_line)


# ============================================================================
# ASK SDK Request Handlers
# ============================================================================

class BaseIntentHandler(AbstractRequestHandler):
    """Base handler providing common functionality for all intent handlers"""

    def get_skill_helper(self, handler_input):
        """Create and initialize Skill instance from handler_input"""
        skill = Skill(handler_input, get_orchestrator(), get_detail_source())
        skill.initialize()
        return skill


class LaunchRequestHandler(BaseIntentHandler):
    """Handler for Skill Launch"""

    def can_handle(self, handler_input):
        return is_request_type("LaunchRequest")(handler_input)

    def handle(self, handler_input):
        skill = self.get_skill_helper(handler_input)
        return skill.launch_request()


class RegionForecastIntentHandler(BaseIntentHandler):
    """Handler for the danger rating of a single region"""

    def can_handle(self, handler_input):
        return is_intent_name(REGION_FORECAST_INTENT)(handler_input)

    def handle(self, handler_input):
        skill = self.get_skill_helper(handler_input)
        text = skill.region_forecast(datetime.now(tz.UTC))
        return skill.respond(text)


class StateForecastIntentHandler(BaseIntentHandler):
    """Handler for the summary of a state"""

    def can_handle(self, handler_input):
        return is_intent_name(STATE_FORECAST_INTENT)(handler_input)

    def handle(self, handler_input):
        skill = self.get_skill_helper(handler_input)
        text = skill.state_forecast(datetime.now(tz.UTC))
        return skill.respond(text)


class RegionBottomLineIntentHandler(BaseIntentHandler):
    """Handler for the bottom line of a Washington region"""

    def can_handle(self, handler_input):
        return is_intent_name(REGION_BOTTOM_LINE_INTENT)(handler_input)

    def handle(self, handler_input):
        skill = self.get_skill_helper(handler_input)
        text = skill.bottom_line(datetime.now(tz.UTC))
        return skill.respond(text)


class SessionEndedRequestHandler(BaseIntentHandler):
    """Handler for Session End"""

    def can_handle(self, handler_input):
        return is_request_type("SessionEndedRequest")(handler_input)

    def handle(self, handler_input):
        event = event_summary(handler_input)
        request = handler_input.request_envelope.request

        # Check for errors in the request
        error = getattr(request, "error", None)
        if error:
            notify(event, "Error detected", error.message)

        reason = getattr(request, "reason", None)
        if reason:
            notify(event, "Session Ended", str(reason))

        return handler_input.response_builder.response


class CancelAndStopIntentHandler(BaseIntentHandler):
    """Handler for Cancel, Stop and Navigate Home Intents"""

    def can_handle(self, handler_input):
        return (is_intent_name("AMAZON.CancelIntent")(handler_input) or
                is_intent_name("AMAZON.StopIntent")(handler_input) or
                is_intent_name("AMAZON.NavigateHomeIntent")(handler_input))

    def handle(self, handler_input):
        skill = self.get_skill_helper(handler_input)
        return skill.respond(GOODBYE_TEXT)


class HelpIntentHandler(BaseIntentHandler):
    """Handler for Help Intent"""

    def can_handle(self, handler_input):
        return is_intent_name("AMAZON.HelpIntent")(handler_input)

    def handle(self, handler_input):
        skill = self.get_skill_helper(handler_input)
        return skill.help_intent()


# ============================================================================
# Request and Response Interceptors
# ============================================================================

class RequestLogger(AbstractRequestInterceptor):
    """Log the request envelope."""

    def process(self, handler_input):
        logger.info("Request Envelope: %s", handler_input.request_envelope)


class ResponseLogger(AbstractResponseInterceptor):
    """Log the response envelope."""

    def process(self, handler_input, response):
        logger.info("Response: %s", response)


# ============================================================================
# Exception Handler
# ============================================================================

class AllExceptionHandler(AbstractExceptionHandler):
    """
    Catch all exception handler.

    Speaks an apology picked at random from a fixed list. The random
    source can be replaced for repeatable results.
    """

    def __init__(self, rng=None, messages=None):
        self.rng = rng if rng is not None else random.Random()
        self.messages = list(messages if messages is not None else ERROR_MESSAGES)

    def can_handle(self, handler_input, exception):
        return True

    def handle(self, handler_input, exception):
        logger.error("Exception encountered: %s", exception)
        notify(event_summary(handler_input), "Exception", traceback.format_exc())

        speech_text = self.rng.choice(self.messages)
        reprompt_text = self.rng.choice(self.messages)
        handler_input.response_builder.speak(speech_text).ask(reprompt_text)
        return handler_input.response_builder.response


# ============================================================================
# Skill Builder
# ============================================================================

# Create skill builder instance
sb = CustomSkillBuilder()

# Register request handlers
sb.add_request_handler(LaunchRequestHandler())
sb.add_request_handler(RegionForecastIntentHandler())
sb.add_request_handler(StateForecastIntentHandler())
sb.add_request_handler(RegionBottomLineIntentHandler())
sb.add_request_handler(HelpIntentHandler())
sb.add_request_handler(CancelAndStopIntentHandler())
sb.add_request_handler(SessionEndedRequestHandler())

# Register exception handler
sb.add_exception_handler(AllExceptionHandler())

# Register request and response interceptors
sb.add_global_request_interceptor(RequestLogger())
sb.add_global_response_interceptor(ResponseLogger())

# Create the skill instance
skill_instance = sb.create()


# ============================================================================
# Lambda Handler
# ============================================================================

def lambda_handler(event, context=None):
    """
    Lambda handler for Alexa skill using ASK SDK.
    """
    try:
        serializer = DefaultSerializer()
        request_envelope = serializer.deserialize(
            json.dumps(event), RequestEnvelope
        )

        response_envelope = skill_instance.invoke(request_envelope, context)

        # Serialize the response back to dict for Lambda
        if response_envelope:
            response_dict = serializer.serialize(response_envelope)
            if isinstance(response_dict, str):
                return json.loads(response_dict)
            return response_dict
        return None

    except Exception:
        logger.error("Lambda handler exception: %s", traceback.format_exc())
        notify(event, "Exception", traceback.format_exc())
        return {
                 "version": "1.0",
                 "response":
                 {
                   "outputSpeech":
                   {
                     "type": "SSML",
                     "ssml": '<speak>%s</speak>' % FATAL_ERROR_TEXT
                   },
                   "shouldEndSession": True
                 }
               }


def test_one():
    # Use local JSON files instead of DynamoDB
    set_cache_handler(LocalJsonCacheHandler(Config.LOCAL_CACHE_DIR))

    with open(sys.argv[1] if len(sys.argv) > 1 else "test.json") as f:
        event = json.load(f)
        event["session"]["application"]["applicationId"] = Config.APP_ID

        # Print output for testing (this is only used in __main__ test mode)
        print(json.dumps(lambda_handler(event), indent=4))


if __name__ == "__main__":
    logging.basicConfig()
    test_one()
