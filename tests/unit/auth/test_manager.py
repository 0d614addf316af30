"""Tests for lazy credential refresh."""

import threading
import time

import pytest

from api_wrapper.auth.exceptions import TokenExchangeError
from api_wrapper.auth.manager import TokenManager
from api_wrapper.auth.tokens import AccessToken
from api_wrapper.testing import FakeProvider


class TestEnsureValidToken:
    """Test when an exchange happens."""

    @pytest.mark.unit
    def test_exchanges_once_when_no_token_held(self, provider):
        manager = TokenManager(provider)

        token = manager.ensure_valid_token()
        again = manager.ensure_valid_token()

        assert len(provider.exchanges) == 1
        assert token is again
        assert manager.access_token is token

    @pytest.mark.unit
    def test_no_exchange_while_token_valid(self, provider, valid_token):
        manager = TokenManager(provider)
        manager.set_access_token(valid_token)

        assert manager.ensure_valid_token() is valid_token
        assert provider.exchanges == []

    @pytest.mark.unit
    def test_exchanges_when_token_expired(self, provider, expired_token):
        manager = TokenManager(provider)
        manager.set_access_token(expired_token)

        token = manager.ensure_valid_token()

        assert len(provider.exchanges) == 1
        assert token is not expired_token

    @pytest.mark.unit
    def test_token_without_expiry_is_reused(self, provider):
        manager = TokenManager(provider)
        manager.set_access_token(AccessToken(access_token="forever"))

        manager.ensure_valid_token()

        assert provider.exchanges == []


class TestGrantSelection:
    """Test which grant is used for the exchange."""

    @pytest.mark.unit
    def test_client_credentials_without_refresh_token(self, provider):
        manager = TokenManager(provider)
        manager.set_scopes(["invoices", "contacts"])

        manager.ensure_valid_token()

        assert provider.exchanges == [("client_credentials", {"scope": "invoices contacts"})]

    @pytest.mark.unit
    def test_refresh_token_grant_when_configured(self, provider):
        manager = TokenManager(provider, refresh_token="refresh-123")
        manager.set_scopes(["invoices"])

        manager.ensure_valid_token()

        assert provider.exchanges == [
            ("refresh_token", {"refresh_token": "refresh-123", "scope": "invoices"}),
        ]

    @pytest.mark.unit
    def test_empty_scope_set_sends_empty_scope(self, provider):
        TokenManager(provider).ensure_valid_token()

        assert provider.exchanges == [("client_credentials", {"scope": ""})]

    @pytest.mark.unit
    def test_scopes_deduplicated_in_order(self, provider):
        manager = TokenManager(provider)
        manager.set_scopes(["b", "a", "b"])

        assert manager.scopes == ["b", "a"]


class TestSetRefreshToken:
    """Setting a refresh token forces a new exchange."""

    @pytest.mark.unit
    def test_clears_held_token(self, provider, valid_token):
        manager = TokenManager(provider)
        manager.set_access_token(valid_token)

        manager.set_refresh_token("new-refresh")

        assert manager.access_token is None
        assert manager.refresh_token == "new-refresh"

    @pytest.mark.unit
    def test_next_call_exchanges_exactly_once(self, provider):
        manager = TokenManager(provider)
        manager.ensure_valid_token()

        manager.set_refresh_token("new-refresh")
        manager.ensure_valid_token()
        manager.ensure_valid_token()

        assert [grant for grant, _ in provider.exchanges] == ["client_credentials", "refresh_token"]

    @pytest.mark.unit
    def test_constructor_refresh_token(self, provider):
        manager = TokenManager(provider, refresh_token="initial")
        assert manager.refresh_token == "initial"
        assert manager.access_token is None


class TestExchangeFailure:
    """Exchange failures propagate untouched."""

    @pytest.mark.unit
    def test_exchange_error_propagates(self):
        class RejectingProvider(FakeProvider):
            def get_access_token(self, grant, params):
                raise TokenExchangeError("invalid_grant", grant_type=grant, status_code=400)

        provider = RejectingProvider()
        manager = TokenManager(provider, refresh_token="revoked")

        with pytest.raises(TokenExchangeError) as exc_info:
            manager.ensure_valid_token()

        assert exc_info.value.grant_type == "refresh_token"
        assert manager.access_token is None
        provider.close()


@pytest.mark.unit
def test_concurrent_callers_share_one_exchange():
    """Callers racing on an empty manager trigger a single exchange."""

    class SlowProvider(FakeProvider):
        def get_access_token(self, grant, params):
            time.sleep(0.05)
            return super().get_access_token(grant, params)

    provider = SlowProvider()
    manager = TokenManager(provider)
    results = []

    threads = [threading.Thread(target=lambda: results.append(manager.ensure_valid_token())) for _ in range(5)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(provider.exchanges) == 1
    assert len({id(token) for token in results}) == 1
    provider.close()


@pytest.mark.unit
def test_rotation_during_validity_check_still_returns_checked_token(provider):
    """A refresh token set while the held token is being checked never yields None."""
    manager = TokenManager(provider)

    class RotatedMidCheck(AccessToken):
        def has_expired(self, now=None):
            manager.set_refresh_token("rotated")
            return False

    token = RotatedMidCheck(access_token="held", expires_at=time.time() + 60)
    manager.set_access_token(token)

    assert manager.ensure_valid_token() is token
    assert manager.access_token is None
    assert manager.ensure_valid_token().access_token == "token-1"
    assert provider.exchanges == [("refresh_token", {"refresh_token": "rotated", "scope": ""})]
