from unittest.mock import MagicMock

from photothing.app.config import Settings
from photothing.services.messaging import emailer as emailer_module
from photothing.services.messaging.emailer import LogOnlyEmailer, ResendEmailer, init_emailer


def test_log_only_emailer_records_messages():
    emailer = LogOnlyEmailer()
    assert emailer.send_message("a@example.com", "hello")
    assert emailer.send_message("b@example.com", "bye")
    assert emailer.sent_messages == ["<a@example.com>::[hello]", "<b@example.com>::[bye]"]


def test_init_without_api_key_is_log_only():
    settings = Settings(RESEND_API_KEY=None)
    assert isinstance(init_emailer(settings), LogOnlyEmailer)


def test_resend_emailer_sends(mocker):
    send = mocker.patch.object(emailer_module.resend.Emails, "send", return_value={"id": "abc"})
    emailer = ResendEmailer("re_test", "noreply@example.com", backoff_seconds=0)

    assert emailer.send_message("a@example.com", "token 123", subject="Reset")

    payload = send.call_args[0][0]
    assert payload["to"] == "a@example.com"
    assert payload["from"] == "noreply@example.com"
    assert payload["subject"] == "Reset"
    assert "token 123" in payload["html"]


def test_resend_emailer_gives_up_after_retries(mocker):
    send = mocker.patch.object(emailer_module.resend.Emails, "send", side_effect=RuntimeError("down"))
    mocker.patch.object(emailer_module, "sleep")
    emailer = ResendEmailer("re_test", "noreply@example.com", max_retries=3, backoff_seconds=0)

    assert emailer.send_message("a@example.com", "hi") is False
    assert send.call_count == 3


def test_sends_hold_the_lock():
    emailer = LogOnlyEmailer()
    emailer._lock = MagicMock()
    emailer.send_message("a@example.com", "hi")
    emailer._lock.__enter__.assert_called_once()
    emailer._lock.__exit__.assert_called_once()
