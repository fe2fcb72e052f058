import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.core.dependencies import get_current_user_id
from app.database.supabase_client import get_supabase
from tests.fakes import FakeSupabase

BUYER_ACME_ID = "7d0c1f5e-0000-4000-8000-000000000001"
BUYER_ZEN_ID = "7d0c1f5e-0000-4000-8000-000000000002"
PUBLISHER_ONE_ID = "9a4e2b10-0000-4000-8000-000000000001"

SEED = {
    "buyers": [
        {
            "id": BUYER_ZEN_ID,
            "buyer_id": "B-002",
            "buyer_name": "Zenith Health",
            "company_name": "Zenith Health LLC",
            "email": "ops@zenith.example.com",
            "status": "Active",
            "payment_terms": "Net 15",
            "quality_score": 88,
            "notes": None,
            "created_at": "2024-01-02T00:00:00+00:00",
            "updated_at": "2024-01-02T00:00:00+00:00",
        },
        {
            "id": BUYER_ACME_ID,
            "buyer_id": "B-001",
            "buyer_name": "Acme Insurance",
            "company_name": "Acme Insurance Co",
            "email": "buying@acme.example.com",
            "status": "Active",
            "payment_terms": "Net 30",
            "quality_score": 92,
            "notes": "Prefers transfers",
            "created_at": "2024-01-01T00:00:00+00:00",
            "updated_at": "2024-01-01T00:00:00+00:00",
        },
    ],
    "publishers": [
        {
            "id": PUBLISHER_ONE_ID,
            "publisher_id": "P-001",
            "publisher_name": "Call Source Media",
            "company_name": "Call Source Media Inc",
            "email": "team@callsource.example.com",
            "status": "Active",
            "notes": None,
            "created_at": "2024-01-01T00:00:00+00:00",
            "updated_at": "2024-01-01T00:00:00+00:00",
        },
    ],
    "offers": [
        {
            "id": "c1a00000-0000-4000-8000-000000000001",
            "offer_id": "ACA-101",
            "campaign_name": "ACA Transfer",
            "vertical": "ACA",
            "status": "Active",
            "offer_type": "Transfer",
            "direction": "Selling",
            "publisher_payout_min": 5.0,
            "publisher_payout_max": 15.0,
            "advertiser_price_min": 20.0,
            "advertiser_price_max": 35.0,
            "states_allowed": ["TX", "FL"],
            "age_range": "18-64",
            "hours_of_operation": "9-5 CST",
            "compliance_requirements": "TCPA consent",
            "payment_terms": "Net 30",
            "notes": "Buyer contact prefers email",
            "buyer_id": BUYER_ACME_ID,
            "publisher_id": PUBLISHER_ONE_ID,
            "created_at": "2024-03-01T00:00:00+00:00",
            "updated_at": "2024-03-01T00:00:00+00:00",
        },
        {
            "id": "c1a00000-0000-4000-8000-000000000002",
            "offer_id": "MEDICA-202",
            "campaign_name": "Medicare CPA",
            "vertical": "Medicare",
            "status": "Paused",
            "offer_type": "CPA",
            "direction": "Buying",
            "publisher_payout_min": None,
            "publisher_payout_max": None,
            "advertiser_price_min": 40.0,
            "advertiser_price_max": 40.0,
            "states_allowed": None,
            "age_range": "65+",
            "hours_of_operation": None,
            "compliance_requirements": None,
            "payment_terms": None,
            "notes": None,
            "buyer_id": BUYER_ZEN_ID,
            "publisher_id": None,
            "created_at": "2024-03-02T00:00:00+00:00",
            "updated_at": "2024-03-02T00:00:00+00:00",
        },
        {
            "id": "c1a00000-0000-4000-8000-000000000003",
            "offer_id": "FE-303",
            "campaign_name": "Final Expense Inbound",
            "vertical": "Final Expense",
            "status": "Active",
            "offer_type": "Inbound",
            "direction": "Selling",
            "publisher_payout_min": 10.0,
            "publisher_payout_max": 12.0,
            "advertiser_price_min": None,
            "advertiser_price_max": None,
            "states_allowed": None,
            "age_range": None,
            "hours_of_operation": None,
            "compliance_requirements": None,
            "payment_terms": None,
            "notes": None,
            "buyer_id": None,
            "publisher_id": None,
            "created_at": "2024-03-03T00:00:00+00:00",
            "updated_at": "2024-03-03T00:00:00+00:00",
        },
    ],
}


@pytest.fixture
def fake_supabase():
    return FakeSupabase(SEED)


@pytest.fixture
def make_client(fake_supabase):
    """Build a TestClient whose caller holds the given role ('admin', 'viewer', ... or None)."""
    def _make(role="admin"):
        app_metadata = {} if role is None else {"role": role}
        app.dependency_overrides[get_supabase] = lambda: fake_supabase
        app.dependency_overrides[get_current_user_id] = lambda: {
            "id": "user-1",
            "email": "user@example.com",
            "app_metadata": app_metadata,
        }
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
