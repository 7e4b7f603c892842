import dataclasses

from rdapclient.decode_data import DecodeData
from rdapclient.models import Autnum, Common, Event, Link, Notice, PublicID, Remark


def _rdap_names(instance):
    return {
        f.name: f.metadata["rdap"]
        for f in dataclasses.fields(instance)
        if "rdap" in f.metadata
    }


def test_event_rdap_names():
    event = Event(action="registration", date="2017-01-01T00:00:00Z")
    assert event.action == "registration"
    assert _rdap_names(event) == {
        "action": "eventAction",
        "actor": "eventActor",
        "date": "eventDate",
    }


def test_link_and_autnum_rdap_names():
    assert _rdap_names(Link(href="https://example.com/")) == {"hreflang": "hreflang"}
    assert _rdap_names(Autnum(handle="AS1")) == {
        "conformance": "rdapConformance",
        "ip_version": "ipVersion",
    }


def test_default_lists_are_independent():
    a = Autnum()
    b = Autnum()
    a.status.append("active")
    assert b.status == []
    n1, n2 = Notice(), Notice()
    n1.description.append("x")
    assert n2.description == []


def test_autnum_inherits_common():
    a = Autnum(lang="en", handle="AS1", start_autnum=1, end_autnum=2)
    assert isinstance(a, Common)
    assert a.lang == "en"
    assert (a.start_autnum, a.end_autnum) == (1, 2)


def test_autnum_defaults():
    a = Autnum()
    assert a.start_autnum is None
    assert a.decode_data is None
    assert a.port43 == ""


def test_equality_and_nesting():
    link = Link(href="https://example.com/x", rel="self", hreflang=["en"])
    r1 = Remark(title="t", links=[link])
    r2 = Remark(title="t", links=[Link(href="https://example.com/x", rel="self", hreflang=["en"])])
    assert r1 == r2
    assert r1 != Remark(title="u", links=[link])


def test_decode_data_attached():
    dd = DecodeData(values={"identifier": "42"}, known=["identifier"])
    pid = PublicID(decode_data=dd, type="IANA Registrar ID", identifier="42")
    assert pid.decode_data.value("identifier") == pid.identifier