import pytest

from cvforge.profile import (
    Contact,
    Experience,
    PdfSettings,
    Portfolio,
    Profile,
)


def test_contact_title_falls_back_to_value():
    contact = Contact(contact_icon="Mail", contact_value="me@example.com")
    assert contact.display_title() == "me@example.com"


def test_contact_title_used_when_present():
    contact = Contact(contact_value="me@example.com", contact_title="Email me")
    assert contact.display_title() == "Email me"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("http://example.com", True),
        ("https://example.com", True),
        ("ftp://example.com", False),
        ("HTTPS://example.com", False),
        ("example.com", False),
    ],
)
def test_contact_http_detection(value, expected):
    assert Contact(contact_value=value).is_http_url() is expected


def test_experience_description_versions():
    exp = Experience(describe="long", describe_pdf_data="short")
    assert exp.pdf_description() == "long"
    exp.use_describe_pdf_version = True
    assert exp.pdf_description() == "short"


def test_experience_missing_pdf_description_raises():
    exp = Experience(describe="long", use_describe_pdf_version=True)
    with pytest.raises(ValueError):
        exp.pdf_description()


def test_portfolio_detail_versions():
    item = Portfolio(portfolio_detail="full", portfolio_detail_pdf_data="brief")
    assert item.pdf_detail() == "full"
    item.use_portfolio_detail_pdf_version = True
    assert item.pdf_detail() == "brief"


def test_portfolio_missing_pdf_detail_raises():
    with pytest.raises(ValueError):
        Portfolio(use_portfolio_detail_pdf_version=True).pdf_detail()


def test_portfolio_stacks_are_independent():
    first, second = Portfolio(), Portfolio()
    first.stacks.append("Rust")
    assert second.stacks == []


def test_profile_avatar_versions():
    profile = Profile(
        avatar="a.png",
        pdf=PdfSettings(avatar_pdf_url="b.png"),
    )
    assert profile.pdf_avatar() == "a.png"
    profile.pdf.use_avatar_pdf_version = True
    assert profile.pdf_avatar() == "b.png"


def test_profile_about_versions():
    profile = Profile(about="web", pdf=PdfSettings(about_pdf_data="print"))
    assert profile.pdf_about() == "web"
    profile.pdf.use_about_pdf_version = True
    assert profile.pdf_about() == "print"


def test_profile_missing_pdf_versions_raise():
    profile = Profile(
        pdf=PdfSettings(use_avatar_pdf_version=True, use_about_pdf_version=True)
    )
    with pytest.raises(ValueError):
        profile.pdf_avatar()
    with pytest.raises(ValueError):
        profile.pdf_about()


def test_profile_defaults_have_no_sections():
    profile = Profile()
    assert profile.contacts is None and profile.skills is None
    assert profile.pdf.show_avatar is False