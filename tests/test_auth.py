from pathlib import Path

import pytest

from e2e.auth import AuthHelper, has_storage_state, storage_state_path


class TestStorageStatePaths:
    def test_default_name(self, config):
        assert storage_state_path(config=config) == Path(config.auth_dir) / "auth.json"

    def test_custom_name(self, config):
        assert storage_state_path("admin.json", config).name == "admin.json"

    def test_has_storage_state(self, config):
        assert has_storage_state(config=config) is False
        path = storage_state_path(config=config)
        path.parent.mkdir(parents=True)
        path.write_text("{}")
        assert has_storage_state(config=config) is True


class TestAuthHelper:
    def test_creates_auth_dir(self, mock_page, config):
        AuthHelper(mock_page, config)
        assert Path(config.auth_dir).is_dir()

    @pytest.mark.asyncio
    async def test_login_saves_state_only(self, mock_page, config):
        auth = AuthHelper(mock_page, config)
        path = await auth.login("user", "secret")
        assert path == Path(config.auth_dir) / "auth.json"
        mock_page.context.storage_state.assert_awaited_once_with(path=str(path))
        mock_page.goto.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_login_submits_form(self, mock_page, config):
        auth = AuthHelper(mock_page, config)
        path = await auth.login("user", "secret", "user.json", login_path="/login")
        mock_page.goto.assert_awaited_once_with("/login", timeout=30_000)
        mock_page.fill.assert_any_await('[name="username"]', "user")
        mock_page.fill.assert_any_await('[name="password"]', "secret")
        mock_page.click.assert_awaited_once_with('button[type="submit"]')
        assert path.name == "user.json"

    @pytest.mark.asyncio
    async def test_logout_clears_cookies(self, mock_page, config):
        await AuthHelper(mock_page, config).logout()
        mock_page.context.clear_cookies.assert_awaited_once()
