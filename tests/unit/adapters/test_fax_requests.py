from fox.adapters.fax_requests import (
    FORM_CONTENT_TYPE,
    FaxApiConfig,
    build_cancel_request,
    build_get_request,
    build_list_request,
    build_send_request,
    build_url,
)
from fox.domain.models import FaxQuality, ListOptions, SendOptions


CFG = FaxApiConfig()


def test_build_url_without_sid():
    assert build_url(CFG) == "https://fax.twilio.com/v1/Faxes"


def test_build_url_with_sid():
    assert build_url(CFG, "PARAM") == "https://fax.twilio.com/v1/Faxes/PARAM"


def test_build_url_uses_configured_scheme_and_host():
    cfg = FaxApiConfig(scheme="http", host="127.0.0.1:8080")
    assert build_url(cfg, "FX1") == "http://127.0.0.1:8080/v1/Faxes/FX1"


def test_send_request_shape():
    req = build_send_request(
        CFG, "+15558675310", "+15017122661", "https://x/doc.pdf", SendOptions(ttl_minutes=5)
    )

    assert req.method == "POST"
    assert req.url == "https://fax.twilio.com/v1/Faxes"
    assert req.headers == {"Content-Type": FORM_CONTENT_TYPE}
    assert FORM_CONTENT_TYPE == "application/x-www-form-urlencoded; param=value"
    assert req.params is None
    assert list(req.data) == [
        ("To", "+15558675310"),
        ("From", "+15017122661"),
        ("MediaUrl", "https://x/doc.pdf"),
        ("Quality", "fine"),
        ("StoreMedia", "true"),
        ("Ttl", "5"),
    ]


def test_send_request_uses_given_quality():
    req = build_send_request(CFG, "a", "b", "c", SendOptions(quality=FaxQuality.STANDARD))
    assert ("Quality", "standard") in req.data


def test_get_request_shape():
    req = build_get_request(CFG, "FX123")
    assert req.method == "GET"
    assert req.url == "https://fax.twilio.com/v1/Faxes/FX123"
    assert req.data is None
    assert req.params is None


def test_list_request_without_options_has_no_query():
    req = build_list_request(CFG)
    assert req.method == "GET"
    assert req.url == "https://fax.twilio.com/v1/Faxes"
    assert req.params is None
    assert build_list_request(CFG, ListOptions()).params is None


def test_list_request_with_filters():
    req = build_list_request(CFG, ListOptions(from_="+1", to="+2"))
    assert req.params == (("From", "+1"), ("To", "+2"))
    assert req.data is None


def test_cancel_request_shape():
    req = build_cancel_request(CFG, "FX123")
    assert req.method == "POST"
    assert req.url == "https://fax.twilio.com/v1/Faxes/FX123"
    assert req.data == (("Status", "canceled"),)
    assert req.headers["Content-Type"] == FORM_CONTENT_TYPE
