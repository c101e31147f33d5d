"""Unit tests for the DFA service factory."""

from types import SimpleNamespace

import pytest
from zeep.exceptions import Fault

from dfa_services.clients.base import AuthenticatedServiceClient, DfaServiceClient
from dfa_services.errors import (
    AuthenticationError,
    InvalidArgumentError,
    RemoteCallError,
    SignatureTypeError,
)
from dfa_services.factory import DfaServiceFactory
from dfa_services.models.auth import AuthToken
from dfa_services.models.signature import DfaServiceSignature, ServiceSignature
from dfa_services.services import DfaService, v1_11, v1_12
from dfa_services.services.v1_12 import NAMESPACE as V1_12_NAMESPACE

TEST_SERVER = "https://dfa.example.com/"


class ReportingService(AuthenticatedServiceClient):
    BINDING_NAMESPACE = V1_12_NAMESPACE


class HeaderlessService(DfaServiceClient):
    pass


REPORTING = DfaServiceSignature(
    service_name="Reporting",
    version="v1.12",
    service_endpoint="Reporting",
    service_type=ReportingService,
)


class TestCreateService:
    """Tests for DfaServiceFactory.create_service."""

    def test_reporting_scenario(self, user, mock_login):
        """URL is composed, login happens once, token is attached."""
        service = user.get_service(REPORTING)

        assert isinstance(service, ReportingService)
        assert service.url == f"{TEST_SERVER}v1.12/api/dfa-api/Reporting"
        assert service.user is user
        mock_login.assert_called_once_with("u", "p")
        assert service.token == AuthToken(user_name="u", token="T1")

    def test_registered_service_url(self, user, mock_login):
        service = user.get_service(DfaService.v1_12.SpotlightRemoteService)
        assert isinstance(service, v1_12.SpotlightRemoteService)
        assert service.url == f"{TEST_SERVER}v1.12/api/dfa-api/spotlight"

    def test_explicit_server_url_wins(self, user, mock_login):
        service = user.get_service(REPORTING, "https://other.example.com")
        assert service.url == "https://other.example.com/v1.12/api/dfa-api/Reporting"

    def test_login_happens_once(self, user, mock_login):
        first = user.get_service(REPORTING)
        second = user.get_service(DfaService.v1_12.CampaignRemoteService)

        assert mock_login.call_count == 1
        assert first.token == second.token == user.factory.auth_token

    def test_set_headers_forces_new_login(self, user, mock_login):
        user.get_service(REPORTING)
        mock_login.return_value = SimpleNamespace(name="other", token="T2")

        user.set_headers({"userName": "other", "password": "secret"})
        assert user.factory.auth_token is None

        service = user.get_service(REPORTING)
        assert mock_login.call_count == 2
        mock_login.assert_called_with("other", "secret")
        assert service.token == AuthToken(user_name="other", token="T2")

    def test_login_service_gets_no_token(self, user, mock_login):
        service = user.get_service(DfaService.v1_12.LoginRemoteService)

        assert isinstance(service, v1_12.LoginRemoteService)
        assert service.url == f"{TEST_SERVER}v1.12/api/dfa-api/login"
        mock_login.assert_not_called()
        assert user.factory.auth_token is None

    def test_request_header_above_v1_11(self, user, mock_login):
        service = user.get_service(DfaService.v1_12.SpotlightRemoteService)

        header = service.request_header
        assert header is not None
        assert header.application_name == f"{user.config.library_signature}|app"
        assert header.target_namespace == V1_12_NAMESPACE

    def test_no_request_header_for_v1_11(self, user, mock_login_v1_11):
        service = user.get_service(DfaService.v1_11.UserRemoteService)

        mock_login_v1_11.assert_called_once_with("u", "p")
        assert service.token is not None
        assert service.request_header is None

    def test_request_header_for_v1_9(self, settings, mock_login):
        """v1.9 compares as 1.9 > 1.11, so it gets a RequestHeader."""
        factory = DfaServiceFactory(settings=settings)
        factory.set_headers({"authToken": "T", "userName": "u", "applicationName": "app"})
        signature = DfaServiceSignature(
            service_name="Reporting",
            version="v1.9",
            service_type=ReportingService,
        )

        service = factory.create_service(signature, object())

        mock_login.assert_not_called()
        assert service.url == f"{TEST_SERVER}v1.9/api/dfa-api/Reporting"
        assert service.token == AuthToken(user_name="u", token="T")
        assert service.request_header is not None
        assert service.request_header.application_name == f"{settings.library_signature}|app"
        assert service.request_header.target_namespace == V1_12_NAMESPACE

    def test_request_header_without_application_name(self, settings, mock_login):
        factory = DfaServiceFactory(settings=settings)
        factory.set_headers({"userName": "u", "password": "p"})

        service = factory.create_service(REPORTING, object())
        assert service.request_header.application_name is None
        assert service.request_header.target_namespace == V1_12_NAMESPACE

    def test_proxy_and_timeout_from_config(self, settings, mock_login):
        proxied = settings.model_copy(
            update={"proxy": "http://proxy:3128", "request_timeout": 30}
        )
        factory = DfaServiceFactory(settings=proxied)
        factory.set_headers(factory.read_headers_from_config(proxied))

        service = factory.create_service(REPORTING, object())
        assert service.proxy == "http://proxy:3128"
        assert service.timeout == 30


class TestValidation:
    """Tests for argument validation at the factory boundary."""

    def test_missing_signature(self, user):
        with pytest.raises(InvalidArgumentError, match="signature"):
            user.factory.create_service(None, user)

    def test_missing_user(self, user):
        with pytest.raises(InvalidArgumentError, match="user"):
            user.factory.create_service(REPORTING, None)

    def test_invalid_argument_is_value_error(self, user):
        with pytest.raises(ValueError):
            user.factory.create_service(None, user)

    def test_wrong_signature_kind(self, user):
        signature = ServiceSignature(service_name="Reporting", version="v1.12")

        with pytest.raises(SignatureTypeError, match="DfaServiceSignature"):
            user.get_service(signature)

    def test_service_without_auth_capability(self, user, mock_login):
        signature = DfaServiceSignature(
            service_name="Headerless",
            version="v1.12",
            service_type=HeaderlessService,
        )
        with pytest.raises(SignatureTypeError, match="HeaderlessService"):
            user.get_service(signature)
        mock_login.assert_not_called()


class TestAuthenticationToken:
    """Tests for DfaServiceFactory.get_authentication_token."""

    def test_token_from_headers_skips_login(self, settings, mock_login):
        factory = DfaServiceFactory(settings=settings)
        factory.set_headers({"authToken": "T", "userName": "u"})

        token = factory.get_authentication_token(REPORTING, object(), TEST_SERVER)

        assert token == AuthToken(user_name="u", token="T")
        mock_login.assert_not_called()

    def test_empty_header_token_logs_in(self, settings, mock_login):
        factory = DfaServiceFactory(settings=settings)
        factory.set_headers({"authToken": "", "userName": "u", "password": "p"})

        token = factory.get_authentication_token(REPORTING, object(), TEST_SERVER)

        mock_login.assert_called_once_with("u", "p")
        assert token.token == "T1"

    def test_login_uses_same_version(self, settings, mock_login, mock_login_v1_11):
        factory = DfaServiceFactory(settings=settings)
        factory.set_headers({"userName": "u", "password": "p"})

        factory.get_authentication_token(
            DfaService.v1_11.AdRemoteService, object(), TEST_SERVER
        )
        mock_login_v1_11.assert_called_once_with("u", "p")
        mock_login.assert_not_called()

    def test_fault_is_wrapped(self, user, mock_login):
        fault = Fault("Invalid credentials")
        mock_login.side_effect = RemoteCallError("authenticate", fault)

        with pytest.raises(AuthenticationError) as exc_info:
            user.get_service(REPORTING)

        error = exc_info.value
        assert "Failed to authenticate user" in str(error)
        assert isinstance(error.cause, RemoteCallError)
        assert error.__cause__ is error.cause
        assert mock_login.call_count == 1
        assert user.factory.auth_token is None

    def test_missing_password_is_wrapped(self, settings, mock_login):
        factory = DfaServiceFactory(settings=settings)
        factory.set_headers({"userName": "u"})

        with pytest.raises(AuthenticationError) as exc_info:
            factory.create_service(REPORTING, object())
        assert isinstance(exc_info.value.cause, KeyError)

    def test_malformed_profile_is_wrapped(self, user, mock_login):
        mock_login.return_value = None

        with pytest.raises(AuthenticationError) as exc_info:
            user.get_service(REPORTING)
        assert isinstance(exc_info.value.cause, AttributeError)

    def test_unknown_version_is_wrapped(self, settings):
        factory = DfaServiceFactory(settings=settings)
        factory.set_headers({"userName": "u", "password": "p"})

        class OldService(AuthenticatedServiceClient):
            pass

        signature = DfaServiceSignature(
            service_name="OldService", version="v1.9", service_type=OldService
        )
        with pytest.raises(AuthenticationError) as exc_info:
            factory.create_service(signature, object())
        assert isinstance(exc_info.value.cause, InvalidArgumentError)


class TestHeaders:
    """Tests for the header source."""

    def test_read_headers_from_config(self, settings):
        factory = DfaServiceFactory(settings=settings)
        headers = factory.read_headers_from_config(settings)

        assert headers == {"userName": "u", "password": "p", "applicationName": "app"}

    def test_read_headers_includes_auth_token(self, settings):
        with_token = settings.model_copy(update={"auth_token": "T"})
        factory = DfaServiceFactory(settings=with_token)

        assert factory.read_headers_from_config(with_token)["authToken"] == "T"

    def test_user_headers_override_config(self, settings, mock_login):
        from dfa_services.user import DfaUser

        user = DfaUser(headers={"authToken": "T", "userName": "x"}, settings=settings)
        service = user.get_service(REPORTING)

        assert service.token == AuthToken(user_name="x", token="T")
        mock_login.assert_not_called()


class TestNamespacePatching:
    """Tests for set_request_header_namespace."""

    def test_no_header_is_noop(self):
        service = ReportingService()
        DfaServiceFactory.set_request_header_namespace(REPORTING, service)
        assert service.request_header is None

    def test_login_service_is_noop(self):
        signature = DfaService.v1_12.LoginRemoteService
        service = v1_12.LoginRemoteService()
        DfaServiceFactory.set_request_header_namespace(signature, service)
        assert not hasattr(service, "request_header")

    def test_each_version_has_own_namespace(self):
        assert v1_11.SpotlightRemoteService.BINDING_NAMESPACE.endswith("/v1.11")
        assert v1_12.SpotlightRemoteService.BINDING_NAMESPACE.endswith("/v1.12")
