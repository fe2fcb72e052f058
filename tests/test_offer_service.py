import httpx
import pytest
from postgrest.exceptions import APIError

from app.core.exceptions import (
    ConflictError,
    NotFoundError,
    OfferOpsError,
    TransientFailure,
    ValidationError,
    translate_backend_error,
)
from app.modules.offers.schemas import OfferUpdate, price_range_errors
from app.modules.offers.service import (
    OfferService,
    clean_search_term,
    default_campaign_name,
    generate_offer_id,
)


def test_generate_offer_id():
    assert generate_offer_id("ACA", now_ms=1700000000123) == "ACA-123"
    assert generate_offer_id("Auto Insurance", now_ms=1700000000045) == "AUTOIN-045"
    assert generate_offer_id("Debt Settlement", now_ms=9) == "DEBTSE-9"


def test_default_campaign_name():
    assert default_campaign_name("Medicare", "Transfer") == "Medicare Transfer"


def test_price_range_errors():
    assert price_range_errors({"publisher_payout_min": 5, "publisher_payout_max": 5}) == []
    assert price_range_errors({"publisher_payout_min": 5, "publisher_payout_max": None}) == []
    errors = price_range_errors({
        "publisher_payout_min": 9, "publisher_payout_max": 3,
        "advertiser_price_min": 20, "advertiser_price_max": 10,
    })
    assert len(errors) == 2


def test_translate_postgrest_errors():
    not_found = APIError({"message": "no rows", "code": "PGRST116", "hint": None, "details": None})
    duplicate = APIError({"message": "duplicate key", "code": "23505", "hint": None, "details": None})
    foreign_key = APIError({"message": "violates foreign key", "code": "23503", "hint": None, "details": None})
    other = APIError({"message": "boom", "code": "XX000", "hint": None, "details": None})

    assert isinstance(translate_backend_error(not_found, "Offer"), NotFoundError)
    assert isinstance(translate_backend_error(duplicate, "Offer"), ConflictError)
    assert isinstance(translate_backend_error(foreign_key, "Offer"), ValidationError)
    translated = translate_backend_error(other, "Offer")
    assert type(translated) is OfferOpsError
    assert translated.status_code == 500


def test_translate_network_error():
    translated = translate_backend_error(httpx.ConnectTimeout("timed out"), "Buyer")
    assert isinstance(translated, TransientFailure)
    assert translated.status_code == 503


def test_translate_passes_through_own_errors():
    error = NotFoundError("gone")
    assert translate_backend_error(error, "Offer") is error


def test_service_translates_backend_errors(fake_supabase):
    duplicate = APIError({"message": "duplicate key", "code": "23505", "hint": None, "details": None})
    fake_supabase.fail("offers", duplicate)
    with pytest.raises(ConflictError):
        OfferService(fake_supabase).get_offer("ACA-101")


def test_empty_update_returns_current_offer(fake_supabase):
    offer = OfferService(fake_supabase).update_offer("ACA-101", OfferUpdate())
    assert offer["campaign_name"] == "ACA Transfer"
    assert offer["updated_at"] == "2024-03-01T00:00:00+00:00"


def test_translate_not_null_violation():
    not_null = APIError({"message": "null value in column \"status\"", "code": "23502", "hint": None, "details": None})
    assert isinstance(translate_backend_error(not_null, "Offer"), ValidationError)


def test_clean_search_term():
    assert clean_search_term("ACA Transfer") == "ACA Transfer"
    assert clean_search_term("(ACA.Transfer),") == "ACA Transfer"
    assert clean_search_term('a:b*c%d"e\\f') == "a b c d e f"
    assert clean_search_term("().,") == ""
    assert clean_search_term("ACA-101") == "ACA-101"
