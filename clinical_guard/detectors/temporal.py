"""Temporal references: clock times, parts of the day, relative days,
weekdays, ordinal days and durations.

Deliberately broad. Relative time language ("yesterday evening",
"i måndags", "3 days ago") narrows an encounter down to a date as well as
an explicit date does, so any of it blocks the text. Bare 24-hour times
("14:30") are not reported here; only times carrying a cue ("at 14:30",
"kl. 14", "3 pm") are.
"""
from __future__ import annotations
import re
from .base import PatternDetector
from .date import MONTH_NAMES
from ..models import IdentifierReason

_I = re.IGNORECASE

_EN_WEEKDAYS = r"(?:monday|tuesday|wednesday|thursday|friday|saturday|sunday)s?"
_SV_WEEKDAYS = r"(?:mån|tis|ons|tors|fre|lör|sön)dag(?:s|en|ar|arna)?"

_CLOCK = r"(?:[01]?\d|2[0-3])(?:[:.][0-5]\d)?"

# 1. Clock times with a cue
_CLOCK_TIME_RES = (
    re.compile(r"\b(?:[01]?\d|2[0-3])(?::[0-5]\d)?\s*(?:a\.m\.|p\.m\.|am|pm)(?!\w)", _I),
    re.compile(r"(?:\bat|@)\s*(?:[01]?\d|2[0-3]):[0-5]\d\b", _I),
    re.compile(rf"\b(?:kl\.?|klockan)\s*{_CLOCK}\b", _I),
)

# 2. Parts of the day tied to a specific day
_TIME_OF_DAY_RES = (
    re.compile(
        r"\b(?:this|yesterday|tomorrow|last|same)\s+"
        r"(?:morning|afternoon|evening|night)\b",
        _I,
    ),
    re.compile(r"\b(?:tonight|overnight)\b", _I),
    re.compile(
        r"\b(?:i\s*går|i\s*morgon)\s*(?:morse|morgon|förmiddag|eftermiddag|kväll|natt)\b"
        r"|\bi\s*(?:morse|förmiddags|eftermiddags|kväll|natt)\b",
        _I,
    ),
)

# 3. Relative days, weeks, months, years
_RELATIVE_RES = (
    re.compile(r"\b(?:today|yesterday|tomorrow)\b", _I),
    re.compile(
        r"\b(?:the\s+day\s+(?:before|after)\s+(?:yesterday|tomorrow))\b", _I
    ),
    re.compile(
        r"\b(?:last|next|this|previous|past|coming)\s+(?:week|weekend|month|year)\b", _I
    ),
    re.compile(
        r"\b(?:i\s*dag|i\s*går|i\s*morgon|i\s*förrgår|i\s*övermorgon|i\s*fjol|i\s*år)\b", _I
    ),
    re.compile(
        r"\b(?:förra|nästa|denna|den\s+här|kommande)\s+"
        r"(?:veckan|vecka|helgen|helg|månaden|månad|året|år)\b",
        _I,
    ),
)

# 4. Weekdays with a qualifier
_QUALIFIED_WEEKDAY_RES = (
    re.compile(rf"\b(?:last|next|this|on|past|previous|since)\s+{_EN_WEEKDAYS}\b", _I),
    re.compile(rf"\b(?:i|på|förra|nästa|sedan)\s+{_SV_WEEKDAYS}\b", _I),
)

# 5. Bare weekdays
_WEEKDAY_RES = (
    re.compile(rf"\b{_EN_WEEKDAYS}\b", _I),
    re.compile(rf"\b{_SV_WEEKDAYS}\b", _I),
)

# 6. Numeric ordinal days: "24th", "1st", "24:e", "1:a"
_ORDINAL_DAY_RES = (
    re.compile(r"\b(?:[12]?\d|3[01])(?:st|nd|rd|th)\b", _I),
    re.compile(r"\b(?:[12]?\d|3[01]):[ea]\b", _I),
)

# 7. Numeric durations anchored in time: "2 days ago", "for 3 weeks",
#    "för 3 dagar sedan", "i 2 veckor"
_EN_UNITS = (
    r"(?:minutes?|mins?|hours?|hrs?|days?|nights?|weeks?|wks?|months?|years?|yrs?)"
)
_SV_UNITS = (
    r"(?:minuter|minut|min|timmar|timme|tim|dagar|dag|dygn|nätter|natt|"
    r"veckor|vecka|v|månader|månad|mån|år)"
)
_DURATION_RES = (
    re.compile(
        rf"\b\d+(?:[.,]\d+)?\s*{_EN_UNITS}\s+(?:ago|earlier|prior|before|later|previously)\b",
        _I,
    ),
    re.compile(
        rf"\b(?:for|in|within|after|since|over)\s+(?:the\s+(?:last|past)\s+)?"
        rf"\d+(?:[.,]\d+)?\s*{_EN_UNITS}\b",
        _I,
    ),
    re.compile(rf"\b(?:för\s+)?\d+(?:[.,]\d+)?\s*{_SV_UNITS}\s+sedan\b", _I),
    re.compile(
        rf"\b(?:i|om|sedan|under|efter|inom)\s+(?:de\s+senaste\s+)?"
        rf"\d+(?:[.,]\d+)?\s*{_SV_UNITS}\b",
        _I,
    ),
)

# 8. Spelled-out ordinal + month: "first of May", "the third of March",
#    "första maj"
_EN_ORDINAL_WORDS = (
    r"(?:first|second|third|fourth|fifth|sixth|seventh|eighth|ninth|tenth|"
    r"eleventh|twelfth|thirteenth|fourteenth|fifteenth|sixteenth|seventeenth|"
    r"eighteenth|nineteenth|twentieth|thirtieth|"
    r"twenty[-\s](?:first|second|third|fourth|fifth|sixth|seventh|eighth|ninth)|"
    r"thirty[-\s]first)"
)
_SV_ORDINAL_WORDS = (
    r"(?:första|andra|tredje|fjärde|femte|sjätte|sjunde|åttonde|nionde|tionde|"
    r"elfte|tolfte|trettonde|fjortonde|femtonde|sextonde|sjuttonde|artonde|"
    r"nittonde|tjugonde|tjugo(?:första|andra|tredje|fjärde|femte|sjätte|sjunde|"
    r"åttonde|nionde)|trettionde|trettioförsta)"
)
_ORDINAL_MONTH_RES = (
    re.compile(rf"\b(?:the\s+)?{_EN_ORDINAL_WORDS}\s+(?:of\s+)?{MONTH_NAMES}", _I),
    re.compile(rf"\b(?:den\s+)?{_SV_ORDINAL_WORDS}\s+{MONTH_NAMES}", _I),
)


class TemporalReferenceDetector(PatternDetector):
    reason = IdentifierReason.TEMPORAL_REFERENCE
    patterns = (
        *_CLOCK_TIME_RES,
        *_TIME_OF_DAY_RES,
        *_RELATIVE_RES,
        *_QUALIFIED_WEEKDAY_RES,
        *_WEEKDAY_RES,
        *_ORDINAL_DAY_RES,
        *_DURATION_RES,
        *_ORDINAL_MONTH_RES,
    )
