"""HTTP tests for /api/verify."""

import pytest
from twilio.base.exceptions import TwilioRestException


VERIFY_URI = "https://verify.twilio.com/v2/Services/VA/Verifications"


def test_send_phone_code(client, verify_api) -> None:
    response = client.post("/api/verify/phone", json={"phone": "+14155552671"})

    assert response.status_code == 200
    assert response.json() == {"success": True}
    verify_api.verifications.create.assert_called_once_with(to="+14155552671", channel="sms")


@pytest.mark.parametrize("channel, expected", [("call", "call"), ("sms", "sms"), ("fax", "sms")])
def test_send_phone_code_channel(client, verify_api, channel, expected) -> None:
    client.post("/api/verify/phone", json={"phone": "+14155552671", "channel": channel})
    verify_api.verifications.create.assert_called_once_with(to="+14155552671", channel=expected)


@pytest.mark.parametrize(
    "path, payload, message",
    [
        ("/api/verify/phone", {}, "Phone required"),
        ("/api/verify/phone", {"phone": ""}, "Phone required"),
        ("/api/verify/phone/validate", {"phone": "+14155552671"}, "Phone and code required"),
        ("/api/verify/email", {}, "Email required"),
        ("/api/verify/email/validate", {"code": "123456"}, "Email and code required"),
    ],
)
def test_missing_fields(client, verify_api, path, payload, message) -> None:
    response = client.post(path, json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": message}
    verify_api.verifications.create.assert_not_called()
    verify_api.verification_checks.create.assert_not_called()


def test_missing_body(client) -> None:
    response = client.post("/api/verify/email")

    assert response.status_code == 400
    assert response.json() == {"error": "Email required"}


def test_validate_phone_code(client, verify_api) -> None:
    response = client.post(
        "/api/verify/phone/validate", json={"phone": "+14155552671", "code": "123456"}
    )

    assert response.json() == {"valid": True}
    verify_api.verification_checks.create.assert_called_once_with(to="+14155552671", code="123456")


def test_numeric_code_is_accepted(client, verify_api) -> None:
    response = client.post(
        "/api/verify/phone/validate", json={"phone": "+14155552671", "code": 123456}
    )

    assert response.status_code == 200
    assert response.json() == {"valid": True}
    verify_api.verification_checks.create.assert_called_once_with(to="+14155552671", code="123456")


def test_wrong_code_is_not_valid(client, verify_api) -> None:
    verify_api.verification_checks.create.return_value.status = "pending"

    response = client.post(
        "/api/verify/email/validate", json={"email": "user@example.com", "code": "000000"}
    )

    assert response.status_code == 200
    assert response.json() == {"valid": False}


def test_send_email_code(client, verify_api) -> None:
    response = client.post("/api/verify/email", json={"email": "user@example.com"})

    assert response.json() == {"success": True}
    verify_api.verifications.create.assert_called_once_with(to="user@example.com", channel="email")


@pytest.mark.parametrize(
    "code, status, message",
    [
        (20404, 404, "Verification service not found"),
        (60200, 400, "Invalid phone number format"),
        (60202, 429, "Max verification attempts reached"),
        (20003, 403, "Authentication failed"),
    ],
)
def test_provider_errors(client, verify_api, code, status, message) -> None:
    verify_api.verifications.create.side_effect = TwilioRestException(500, VERIFY_URI, msg="raw", code=code)

    response = client.post("/api/verify/phone", json={"phone": "+14155552671"})

    assert response.status_code == status
    assert response.json() == {"error": message}


def test_unknown_provider_error(client, verify_api) -> None:
    verify_api.verification_checks.create.side_effect = TwilioRestException(
        404, VERIFY_URI, msg="The requested resource was not found", code=20001
    )

    response = client.post(
        "/api/verify/phone/validate", json={"phone": "+14155552671", "code": "123456"}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "The requested resource was not found"}
