"""
Constants for the Avalanche Forecast Alexa skill.

This module contains the slot names, intent names, date words and the
fixed texts spoken by the skill.
"""

# Slot names used in Alexa interaction model
SLOTS = [
    "region",
    "state",
]

# Intents that answer with forecast data
REGION_FORECAST_INTENT = "RegionAvalancheForecastIntent"
STATE_FORECAST_INTENT = "StateAvalancheForecastIntent"
REGION_BOTTOM_LINE_INTENT = "RegionBottomLineIntent"

# Day names as words
MONTH_DAYS = [
    "first",
    "second",
    "third",
    "fourth",
    "fifth",
    "sixth",
    "seventh",
    "eighth",
    "ninth",
    "tenth",
    "eleventh",
    "twelfth",
    "thirteenth",
    "fourteenth",
    "fifteenth",
    "sixteenth",
    "seventeenth",
    "eighteenth",
    "nineteenth",
    "twentieth",
    "twenty first",
    "twenty second",
    "twenty third",
    "twenty fourth",
    "twenty fifth",
    "twenty sixth",
    "twenty seventh",
    "twenty eighth",
    "twenty ninth",
    "thirtieth",
    "thirty first",
]

# Month names
MONTH_NAMES = [
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
]

# Pause inserted between sentences of longer answers
BREAK = '<break time="500ms"/>'

LAUNCH_TEXT = (
    "Welcome to Avalanche Forecast! I can tell you the latest avalanche "
    "information in the United States. To learn what you can ask me, say "
    '"help". You can also check the instructions in the Alexa app under the '
    "Avalanche Forecast skill description."
)

LAUNCH_REPROMPT_TEXT = "Hi there! I can tell you the latest avalanche forecast. Ask away!"

HELP_TEXT = (
    "I can help you with three things. " + BREAK + " First, I can tell you the "
    "danger rating and travel advice for a region in the US. For example, you "
    'can just say "What is the avalanche forecast in Stevens Pass?" or '
    '"Conditions in Mount Shasta". ' + BREAK + " Second, I can give you a "
    "summary of the avalanche forecast in your state while telling you where "
    'the lowest danger is. Just ask: "Where can I go in Utah?" or "What is the '
    'latest forecast in Montana?". ' + BREAK + " Finally, you can ask me what "
    'the bottom line is for regions <emphasis level="moderate">only</emphasis> '
    'in Washington state. Just say "Bottom line for Snoqualmie Pass".'
)

GOODBYE_TEXT = "Thank you for using Avalanche Forecast. Goodbye!"

UPSTREAM_ERROR_TEXT = (
    "I am having trouble getting the latest avalanche forecast. "
    "Please try again later."
)

BOTTOM_LINE_ERROR_TEXT = (
    "I can't get the latest bottom line right now. You can try again later."
)

BOTTOM_LINE_STATE_TEXT = (
    "I am sorry, but I can only provide bottom line information for regions "
    'in <emphasis level="moderate">Washington state</emphasis>.'
)

# Apologies spoken when a request fails unexpectedly
ERROR_MESSAGES = [
    "Hmmm. I can't seem to figure that one out.",
    "There's a chance I misunderstood you, but I don't know how to answer your question.",
    "I'm sorry. I don't know how to help you with that.",
]

# Spoken when a request fails before it reaches the skill
FATAL_ERROR_TEXT = (
    '<say-as interpret-as="interjection">aw man</say-as> '
    "Avalanche Forecast has experienced an error. Please try again later."
)
