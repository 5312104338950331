"""TypedDict models for the GIGA subscriptions API.

Lightweight types for editor autocomplete and static checks.
At runtime these are plain dicts.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple, TypedDict, Union
from typing_extensions import Literal, NotRequired, Required, get_args


# ---------------------------------------------------------------------------
# Remote methods
# ---------------------------------------------------------------------------


class Method(str, Enum):
    """Methods exposed by the subscriptions API endpoint."""

    GET_CONTACT_DATA = "getContactData"
    SET_CONTACT_DATA = "setContactData"
    GET_CONTACT_HASH = "getContactHash"
    ADD_SUBSCRIBER = "addSubscriber"


HTTPVerb = Literal["GET", "POST"]

QueryValue = Union[str, int, float, bool, None]


# ---------------------------------------------------------------------------
# Contacts
# ---------------------------------------------------------------------------

ProfessionalBackground = Literal[
    "research",
    "agency",
    "policy",
    "foundation",
    "ngo",
    "media",
    "business",
    "other",
]

PROFESSIONAL_BACKGROUNDS: Tuple[str, ...] = get_args(ProfessionalBackground)


class SubscriptionFlags(TypedDict, total=False):
    """Mailing lists a contact can be on: 1 subscribes, 0 unsubscribes."""

    giga_en_latinamerica: int
    giga_de_latinamerica: int
    giga_en_middleeast: int
    giga_de_middleeast: int
    giga_en_asia: int
    giga_de_asia: int
    giga_en_global: int
    giga_de_global: int
    giga_en_africa: int
    giga_de_afrika: int
    journal_africa_spectrum_de: int
    journal_africa_spectrum_en: int
    journal_chinese_affairs_de: int
    journal_chinese_affairs_en: int
    journal_latin_america_de: int
    journal_latin_america_en: int
    journal_se_asia_de: int
    journal_se_asia_en: int
    working_papers_en: int
    working_papers_de: int
    events: int
    press_global: int
    press_africa: int
    press_asia: int
    press_latin_america: int
    press_middle_east: int


SUBSCRIPTION_FLAGS: Tuple[str, ...] = tuple(SubscriptionFlags.__annotations__)


class ContactAuth(TypedDict):
    email: str
    hash: str


class ContactHashRequest(TypedDict):
    email: str


class ContactHash(TypedDict):
    hash: str


class ContactData(SubscriptionFlags, total=False):
    contact_id: Union[int, str]
    id: Union[int, str]
    first_name: str
    last_name: str
    prefix_id: Union[int, str, None]
    individual_prefix: str
    email: str
    professional_background: ProfessionalBackground
    institution: str


class ContactDataUpdate(SubscriptionFlags, total=False):
    hash: Required[str]
    email: Required[str]
    first_name: str
    last_name: str
    individual_prefix: str
    new_email: str
    professional_background: Union[ProfessionalBackground, Literal[""]]
    institution: str


# ---------------------------------------------------------------------------
# Subscribers
# ---------------------------------------------------------------------------


class SubscriberCreate(SubscriptionFlags, total=False):
    new_email: Required[str]
    first_name: str
    last_name: str
    individual_prefix: str
    professional_background: ProfessionalBackground
    institution: str


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class APIError(TypedDict):
    error: str
    # Only present on ``Authentication Required`` from addSubscriber.
    hash: NotRequired[str]
