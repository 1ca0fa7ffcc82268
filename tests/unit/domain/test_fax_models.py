import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from fox.domain.errors import FaxDecodeError
from fox.domain.models import FaxListPage, FaxResource, FaxStatus
from tests.helpers.http_fakes import FAX_SID, fax_payload, list_payload


def test_fax_resource_from_json_queued():
    fax = FaxResource.from_json(json.dumps(fax_payload()))

    assert fax.sid == FAX_SID
    assert fax.status == "queued"
    assert fax.fax_status is FaxStatus.QUEUED
    assert fax.direction == "outbound"
    assert fax.from_ == "+15017122661"
    assert fax.date_created == datetime(2015, 7, 30, 20, 0, 0, tzinfo=timezone.utc)
    assert fax.links.media.endswith("/Media")
    assert fax.duration is None
    assert fax.num_pages is None
    assert fax.price is None
    assert fax.media_url is None


def test_fax_resource_completed_fields():
    fax = FaxResource.from_dict(
        fax_payload(
            status="delivered",
            duration=61,
            num_pages=3,
            price="-0.021",
            price_unit="USD",
            media_url="https://example.com/media.pdf",
        )
    )
    assert fax.fax_status is FaxStatus.DELIVERED
    assert fax.duration == 61
    assert fax.num_pages == 3
    assert fax.price == "-0.021"
    assert fax.price_unit == "USD"


def test_fax_resource_unknown_status_kept_raw():
    fax = FaxResource.from_dict(fax_payload(status="teleported"))
    assert fax.status == "teleported"
    assert fax.fax_status is None


def test_fax_resource_is_immutable():
    fax = FaxResource.from_dict(fax_payload())
    with pytest.raises(ValidationError):
        fax.status = "canceled"  # type: ignore[misc]


def test_fax_resource_to_dict_uses_wire_names():
    d = FaxResource.from_dict(fax_payload()).to_dict()
    assert d["from"] == "+15017122661"
    assert d["date_created"] == "2015-07-30T20:00:00Z"
    assert d["links"]["media"].endswith("/Media")


@pytest.mark.parametrize(
    "body",
    [
        b"not json",
        b"",
        b"[1, 2]",
        json.dumps(fax_payload(date_created="yesterday")).encode(),
        json.dumps(fax_payload(num_pages="3")).encode(),
        json.dumps(fax_payload(sid=42)).encode(),
        json.dumps(fax_payload(links="nope")).encode(),
    ],
)
def test_fax_resource_decode_errors(body):
    with pytest.raises(FaxDecodeError):
        FaxResource.from_json(body)


def test_fax_list_page_from_json():
    payload = list_payload(
        faxes=[fax_payload(), fax_payload(sid="FX2", status="failed")],
        next_page_url="https://fax.twilio.com/v1/Faxes?Page=1",
        page_size=2,
    )
    page = FaxListPage.from_json(json.dumps(payload))

    assert len(page) == 2
    assert isinstance(page.faxes, tuple)
    assert [f.sid for f in page.faxes] == [FAX_SID, "FX2"]
    assert page.meta.key == "faxes"
    assert page.meta.page == 0
    assert page.meta.page_size == 2
    assert page.meta.next_page_url.endswith("Page=1")
    assert page.meta.previous_page_url is None


def test_fax_list_page_empty():
    page = FaxListPage.from_json(json.dumps(list_payload(faxes=[])))
    assert len(page) == 0


def test_fax_list_page_rejects_non_list_faxes():
    with pytest.raises(FaxDecodeError):
        FaxListPage.from_dict({"faxes": {"sid": "x"}, "meta": {}})


def test_fax_resource_fractional_seconds_and_offsets():
    fax = FaxResource.from_dict(
        fax_payload(date_created="2015-07-30T20:00:00.12Z", date_updated="2015-07-30T22:00:00+02:00")
    )
    assert fax.date_created == datetime(2015, 7, 30, 20, 0, 0, 120000, tzinfo=timezone.utc)
    assert fax.date_updated == datetime(2015, 7, 30, 20, 0, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize("value", ["2015-07-30", "2015-07-30T20:00:00"])
def test_fax_resource_rejects_timestamps_without_offset(value):
    with pytest.raises(FaxDecodeError):
        FaxResource.from_dict(fax_payload(date_created=value))


def test_fax_resource_nulls_and_numeric_price():
    fax = FaxResource.from_dict(fax_payload(to=None, links=None, price=-0.021, date_updated=""))
    assert fax.to == ""
    assert fax.links.media == ""
    assert fax.price == "-0.021"
    assert fax.date_updated is None


def test_decode_error_carries_body_excerpt():
    with pytest.raises(FaxDecodeError) as e:
        FaxResource.from_json(b"<html>oops</html>", status=200)
    assert e.value.status == 200
    assert "oops" in e.value.body_excerpt
    assert isinstance(e.value.__cause__, ValidationError)
