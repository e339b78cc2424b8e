"""
Tests for TwilioWhatsAppGateway.

Covers:
- Disabled / unconfigured no-op paths
- Number normalization and channel prefix
- Retry with linear backoff, terminal failure, interruption
- is_available, from_settings, lazy client creation
"""

from __future__ import annotations

from unittest.mock import Mock, call, patch

from django.test import TestCase, override_settings

from barbearia.exceptions import NotificationError
from barbearia.notifications.backends.twilio_whatsapp import (
    TwilioWhatsAppGateway,
    format_whatsapp_number,
)


def make_gateway(client=None, **kwargs) -> TwilioWhatsAppGateway:
    params = {
        "account_sid": "ACtest",
        "auth_token": "token",
        "from_number": "+14155238886",
        "retry_delay": 0.01,
        "client": client if client is not None else Mock(),
    }
    params.update(kwargs)
    return TwilioWhatsAppGateway(**params)


class FormatWhatsAppNumberTests(TestCase):
    """Tests for format_whatsapp_number."""

    def test_strips_non_digits(self) -> None:
        """Should strip formatting characters."""
        self.assertEqual(format_whatsapp_number("+55 (11) 99999-9999"), "5511999999999")

    def test_prefixes_country_code(self) -> None:
        """Should prefix the Brazilian country code."""
        self.assertEqual(format_whatsapp_number("11999999999"), "5511999999999")

    def test_keeps_existing_country_code(self) -> None:
        """Should not prefix a number that already has it."""
        self.assertEqual(format_whatsapp_number("5511999999999"), "5511999999999")

    def test_custom_country_code(self) -> None:
        """Should use the given country code."""
        self.assertEqual(format_whatsapp_number("2025550123", country_code="1"), "12025550123")

    def test_strips_non_ascii_digits(self) -> None:
        """Should keep only ASCII digits in the destination."""
        self.assertEqual(format_whatsapp_number("(１１) 99999-9999"), "55999999999")
        self.assertEqual(format_whatsapp_number("١١٩٩٩٩٩٩٩٩٩"), "55")

    def test_none_raises(self) -> None:
        """Should raise ValueError for None."""
        with self.assertRaises(ValueError):
            format_whatsapp_number(None)


class AvailabilityTests(TestCase):
    """Tests for is_available."""

    def test_available_with_credentials_and_enabled(self) -> None:
        """Should be available with credentials and enabled."""
        self.assertTrue(make_gateway().is_available())

    def test_unavailable_without_sid(self) -> None:
        """Should be unavailable without account SID."""
        self.assertFalse(make_gateway(account_sid="").is_available())
        self.assertFalse(make_gateway(account_sid=None).is_available())

    def test_unavailable_without_token(self) -> None:
        """Should be unavailable without auth token."""
        self.assertFalse(make_gateway(auth_token="").is_available())

    def test_unavailable_when_disabled(self) -> None:
        """Should be unavailable when disabled."""
        self.assertFalse(make_gateway(enabled=False).is_available())


class NoOpPathTests(TestCase):
    """Disabled or unconfigured gateways complete successfully without sending."""

    def test_disabled_gateway_simulates_send(self) -> None:
        """Should complete without calling Twilio when disabled."""
        client = Mock()
        gateway = make_gateway(client=client, enabled=False)

        result = gateway.send_whatsapp("+5511999999999", "Olá").result(timeout=5)

        self.assertTrue(result.success)
        self.assertTrue(result.skipped)
        client.messages.create.assert_not_called()
        gateway.shutdown()

    def test_missing_credentials_is_noop(self) -> None:
        """Should complete without calling Twilio when credentials are missing."""
        client = Mock()
        gateway = make_gateway(client=client, account_sid="", auth_token="")

        with patch("barbearia.notifications.backends.twilio_whatsapp.logger") as mock_logger:
            result = gateway.send_whatsapp("+5511999999999", "Olá").result(timeout=5)

        self.assertTrue(result.success)
        self.assertTrue(result.skipped)
        client.messages.create.assert_not_called()
        mock_logger.warning.assert_called_once()
        gateway.shutdown()


class DeliveryTests(TestCase):
    """Tests for the provider call and retry loop."""

    def test_send_success(self) -> None:
        """Should send with whatsapp: prefixed numbers."""
        client = Mock()
        client.messages.create.return_value = Mock(sid="SM123")
        gateway = make_gateway(client=client)

        result = gateway.send_whatsapp("(11) 99999-9999", "Olá João").result(timeout=5)

        self.assertTrue(result.success)
        self.assertFalse(result.skipped)
        self.assertEqual(result.message_id, "SM123")
        client.messages.create.assert_called_once_with(
            to="whatsapp:+5511999999999",
            from_="whatsapp:+14155238886",
            body="Olá João",
        )
        gateway.shutdown()

    def test_retries_then_succeeds_on_third_attempt(self) -> None:
        """Should retry with linear backoff until success."""
        client = Mock()
        client.messages.create.side_effect = [
            Exception("503 Service Unavailable"),
            Exception("timeout"),
            Mock(sid="SM999"),
        ]
        gateway = make_gateway(client=client, retry_delay=1.0)

        with patch.object(gateway, "_wait", return_value=True) as mock_wait:
            result = gateway.send_whatsapp("+5511999999999", "Olá").result(timeout=5)

        self.assertTrue(result.success)
        self.assertEqual(result.message_id, "SM999")
        self.assertEqual(client.messages.create.call_count, 3)
        self.assertEqual(mock_wait.call_args_list, [call(1.0), call(2.0)])
        gateway.shutdown()

    def test_backoff_uses_real_wait(self) -> None:
        """Should retry after a real wait."""
        client = Mock()
        client.messages.create.side_effect = [Exception("boom"), Mock(sid="SM1")]
        gateway = make_gateway(client=client, retry_delay=0.01)

        result = gateway.send_whatsapp("+5511999999999", "Olá").result(timeout=5)

        self.assertEqual(result.message_id, "SM1")
        self.assertEqual(client.messages.create.call_count, 2)
        gateway.shutdown()

    def test_terminal_failure_after_max_retries(self) -> None:
        """Should fail with delivery_failed after MAX_RETRIES."""
        client = Mock()
        client.messages.create.side_effect = Exception("provider down")
        gateway = make_gateway(client=client)

        future = gateway.send_whatsapp("+5511999999999", "Olá")

        with self.assertRaises(NotificationError) as ctx:
            future.result(timeout=5)

        self.assertEqual(ctx.exception.code, "delivery_failed")
        self.assertEqual(ctx.exception.context["attempts"], 3)
        self.assertEqual(client.messages.create.call_count, TwilioWhatsAppGateway.MAX_RETRIES)
        gateway.shutdown()

    def test_interruption_during_backoff_fails_send(self) -> None:
        """Should fail with interrupted when shut down during backoff."""
        client = Mock()
        client.messages.create.side_effect = Exception("provider down")
        gateway = make_gateway(client=client, retry_delay=30.0)

        future = gateway.send_whatsapp("+5511999999999", "Olá")
        gateway.shutdown(wait=True)

        with self.assertRaises(NotificationError) as ctx:
            future.result(timeout=5)

        self.assertEqual(ctx.exception.code, "interrupted")
        self.assertEqual(client.messages.create.call_count, 1)

    def test_closed_after_shutdown(self) -> None:
        """Should report closed only after shutdown."""
        gateway = make_gateway()

        self.assertFalse(gateway.closed)
        gateway.shutdown()
        self.assertTrue(gateway.closed)

    def test_each_send_has_its_own_retry_counter(self) -> None:
        """Should count attempts per send."""
        client = Mock()
        client.messages.create.side_effect = [
            Exception("boom"),
            Mock(sid="SM-A"),
            Mock(sid="SM-B"),
        ]
        gateway = make_gateway(client=client, max_workers=1)

        first = gateway.send_whatsapp("+5511111111111", "A").result(timeout=5)
        second = gateway.send_whatsapp("+5522222222222", "B").result(timeout=5)

        self.assertEqual(first.message_id, "SM-A")
        self.assertEqual(second.message_id, "SM-B")
        gateway.shutdown()


class ConstructionTests(TestCase):
    """Tests for from_settings and client creation."""

    @override_settings(
        BARBEARIA={
            "TWILIO_ACCOUNT_SID": "ACsettings",
            "TWILIO_AUTH_TOKEN": "secret",
            "TWILIO_WHATSAPP_FROM": "+15550001111",
            "NOTIFICATIONS_ENABLED": False,
            "NOTIFICATIONS_RETRY_DELAY": 0.5,
        }
    )
    def test_from_settings(self) -> None:
        """Should read every option from settings."""
        gateway = TwilioWhatsAppGateway.from_settings()

        self.assertEqual(gateway.account_sid, "ACsettings")
        self.assertEqual(gateway.auth_token, "secret")
        self.assertEqual(gateway.from_number, "+15550001111")
        self.assertFalse(gateway.enabled)
        self.assertEqual(gateway.retry_delay, 0.5)
        self.assertEqual(gateway.country_code, "55")
        gateway.shutdown()

    def test_default_from_number(self) -> None:
        """Should fall back to the sandbox number."""
        gateway = TwilioWhatsAppGateway(account_sid="AC", auth_token="t", from_number="")

        self.assertEqual(gateway.from_number, "+14155238886")
        gateway.shutdown()

    @patch("twilio.rest.Client")
    def test_client_created_lazily_once(self, mock_client_cls) -> None:
        """Should create the Twilio client once, on first use."""
        gateway = TwilioWhatsAppGateway(account_sid="ACtest", auth_token="token")

        mock_client_cls.assert_not_called()
        first = gateway._get_client()
        second = gateway._get_client()

        self.assertIs(first, second)
        mock_client_cls.assert_called_once_with("ACtest", "token")
        gateway.shutdown()
