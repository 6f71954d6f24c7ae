"""Profile data model rendered into the CV document."""

from __future__ import annotations

from dataclasses import dataclass, field


def _required(value: str | None, what: str) -> str:
    if value is None:
        raise ValueError(f"{what} is enabled but no value is set")
    return value


@dataclass(kw_only=True)
class PdfSettings:
    """Which parts of the profile the PDF shows, and how."""

    use_pdf: bool = False
    use_generate: bool = False
    pdf_link: str | None = None
    use_about_pdf_version: bool = False
    about_pdf_data: str | None = None
    use_avatar_pdf_version: bool = False
    avatar_pdf_url: str | None = None
    show_contact: bool = False
    show_language: bool = False
    show_about: bool = False
    show_education: bool = False
    show_experience: bool = False
    show_portfolio: bool = False
    show_skill: bool = False
    show_profile: bool = False
    show_avatar: bool = False


@dataclass(kw_only=True)
class Contact:
    contact_icon: str = ""
    contact_value: str = ""
    contact_title: str | None = None
    use_link: bool = False

    def display_title(self) -> str:
        """The title to show, falling back to the value."""
        return self.contact_value if self.contact_title is None else self.contact_title

    def is_http_url(self) -> bool:
        """Whether the value is an http or https URL."""
        return self.contact_value.startswith(("http://", "https://"))


@dataclass(kw_only=True)
class Language:
    name: str = ""
    level: str = ""


@dataclass(kw_only=True)
class Skill:
    name: str = ""
    level: str = ""


@dataclass(kw_only=True)
class Education:
    degree: str = ""
    major: str = ""
    graduated_year: str = ""
    institute_name: str = ""


@dataclass(kw_only=True)
class Experience:
    company_name: str = ""
    position_name: str = ""
    start_date: str = ""
    end_date: str = ""
    describe: str = ""
    use_describe_pdf_version: bool = False
    describe_pdf_data: str | None = None

    def pdf_description(self) -> str:
        """The description used in the PDF."""
        if self.use_describe_pdf_version:
            return _required(self.describe_pdf_data, "PDF description")
        return self.describe


@dataclass(kw_only=True)
class Portfolio:
    portfolio_name: str = ""
    portfolio_detail: str = ""
    is_opensource: bool = False
    stacks: list[str] = field(default_factory=list)
    use_portfolio_detail_pdf_version: bool = False
    portfolio_detail_pdf_data: str | None = None

    def pdf_detail(self) -> str:
        """The detail text used in the PDF."""
        if self.use_portfolio_detail_pdf_version:
            return _required(self.portfolio_detail_pdf_data, "PDF portfolio detail")
        return self.portfolio_detail


@dataclass(kw_only=True)
class Profile:
    id: str | None = None
    first_name: str = ""
    last_name: str = ""
    about: str = ""
    nick_name: str = ""
    pdf: PdfSettings = field(default_factory=PdfSettings)
    gender: str = ""
    role: str = ""
    birth_date: str = ""
    nationality: str = ""
    avatar: str = ""
    address: str = ""
    skills: list[Skill] | None = None
    experiences: list[Experience] | None = None
    portfolios: list[Portfolio] | None = None
    contacts: list[Contact] | None = None
    languages: list[Language] | None = None
    educations: list[Education] | None = None

    def pdf_avatar(self) -> str:
        """The avatar URL used in the PDF."""
        if self.pdf.use_avatar_pdf_version:
            return _required(self.pdf.avatar_pdf_url, "PDF avatar")
        return self.avatar

    def pdf_about(self) -> str:
        """The about text used in the PDF."""
        if self.pdf.use_about_pdf_version:
            return _required(self.pdf.about_pdf_data, "PDF about text")
        return self.about