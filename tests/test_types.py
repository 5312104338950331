from typing import get_type_hints

from typing_extensions import get_args

from giga_subscriptions import types


def test_subscription_flags_match_typed_dict() -> None:
    hints = get_type_hints(types.SubscriptionFlags)

    assert types.SUBSCRIPTION_FLAGS == tuple(hints)
    assert len(types.SUBSCRIPTION_FLAGS) == 26
    assert "giga_en_global" in types.SUBSCRIPTION_FLAGS
    assert "giga_de_afrika" in types.SUBSCRIPTION_FLAGS
    assert all(hint is int for hint in hints.values())


def test_update_and_create_shapes_accept_subscription_flags() -> None:
    for shape in (types.ContactData, types.ContactDataUpdate, types.SubscriberCreate):
        assert set(types.SUBSCRIPTION_FLAGS) <= set(shape.__annotations__)


def test_professional_backgrounds_match_literal() -> None:
    assert types.PROFESSIONAL_BACKGROUNDS == get_args(types.ProfessionalBackground)
    assert set(types.PROFESSIONAL_BACKGROUNDS) == {
        "research",
        "agency",
        "policy",
        "foundation",
        "ngo",
        "media",
        "business",
        "other",
    }


def test_method_values_are_remote_names() -> None:
    assert [m.value for m in types.Method] == [
        "getContactData",
        "setContactData",
        "getContactHash",
        "addSubscriber",
    ]
