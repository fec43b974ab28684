"""Smoke tests against a real tenant.

Run with AUTHOK_DOMAIN plus AUTHOK_API_TOKEN (or client credentials) set:
    pytest -m integration
"""
import os

import pytest

from authok.config import load_settings
from authok.management import Management, ManagementError, per_page

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not os.environ.get("AUTHOK_DOMAIN"), reason="AUTHOK_DOMAIN not set"),
]


@pytest.fixture(scope="module")
def live_api():
    return Management.from_settings(load_settings())


def test_read_tenant_settings(live_api):
    tenant = live_api.tenant.read()
    assert tenant is not None


def test_list_users_first_page(live_api):
    users = live_api.user.list(per_page(1))
    assert len(users.items()) <= 1


def test_unknown_user_is_404(live_api):
    with pytest.raises(ManagementError) as exc_info:
        live_api.user.read("authok|does-not-exist")
    assert exc_info.value.status_code == 404
