"""Example API tests. They target ``API_BASE_URL`` and are skipped until it is set."""

import logging
import os

import pytest

from e2e.data import ApiEndpoints, to_payload, valid_user
from e2e.logging_setup import log_step

logger = logging.getLogger(__name__)

pytestmark = [
    pytest.mark.e2e,
    pytest.mark.skipif(not os.environ.get("API_BASE_URL"), reason="API_BASE_URL is not set"),
]


class TestUsersApi:
    @pytest.mark.asyncio
    async def test_create_user(self, api_helper):
        user = valid_user()

        log_step(logger, "Create user via API")
        response = await api_helper.post(ApiEndpoints.USERS, to_payload(user))
        api_helper.validate_status(response, 201)

        data = await api_helper.parse_json(response)
        assert data["id"]
        logger.info(f"User created with ID: {data['id']}")

    @pytest.mark.asyncio
    async def test_list_users(self, api_helper):
        log_step(logger, "Fetch users list")
        response = await api_helper.get(ApiEndpoints.USERS)
        api_helper.validate_status(response, 200)

        users = await api_helper.parse_json(response)
        assert isinstance(users, list)
        logger.info(f"Fetched {len(users)} users")
