"""Date helpers and icon lookups used when rendering a profile."""

from __future__ import annotations

from datetime import date, datetime, timezone

FONT_AWESOME_MAP: dict[str, str] = {
    "Bitbucket": "fab fa-bitbucket",
    "Discord": "fab fa-discord",
    "Facebook": "fab fa-facebook",
    "Github": "fab fa-github",
    "Gitlab": "fab fa-gitlab",
    "Home": "fas fa-house",
    "Instagram": "fab fa-instagram",
    "Kakaotalk": "fas fa-comment",
    "Kik": "fab fa-kik",
    "Line": "fab fa-line",
    "Linkedin": "fab fa-linkedin",
    "Mail": "fas fa-envelope",
    "Phone": "fas fa-phone",
    "QQ": "fab fa-qq",
    "Reddit": "fab fa-reddit",
    "Signal": "fab fa-signal-messenger",
    "Slack": "fab fa-slack",
    "Snapchat": "fab fa-snapchat",
    "Telegram": "fab fa-telegram",
    "Tiktok": "fab fa-tiktok",
    "Twitter": "fab fa-square-x-twitter",
    "Viber": "fab fa-viber",
    "Wechat": "fab fa-weixin",
    "Weibo": "fab fa-weibo",
    "Whatsapp": "fab fa-whatsapp",
    "Website": "fas fa-globe",
    "Portfolio": "fas fa-briefcase",
    "Address": "fas fa-map-marker-alt",
}

_ACCEPTED_FORMATS = ("%Y-%m-%d", "%m/%d/%Y", "%d-%m-%Y")
_FALLBACK_DATE = date(2000, 1, 1)
_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def _month_year(value: date) -> str:
    return f"{value.month:02d}/{value.year:04d}"


def calculate_age(birth_date: str, today: date | None = None) -> int:
    """Return the age in whole years for a ``YYYY-MM-DD`` birth date.

    ``today`` defaults to the current UTC date. Raises ValueError when the
    birth date cannot be parsed.
    """
    born = datetime.strptime(birth_date, "%Y-%m-%d").date()
    if today is None:
        today = datetime.now(timezone.utc).date()
    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age


def convert_date_format(value: str) -> str:
    """Render a date as ``MM/YYYY``; ``"Now"`` is kept as is.

    Unparseable input falls back to January 2000.
    """
    if value == "Now":
        return "Now"
    for fmt in _ACCEPTED_FORMATS:
        try:
            parsed = datetime.strptime(value, fmt).date()
        except ValueError:
            continue
        return _month_year(parsed)
    return _month_year(_FALLBACK_DATE)


def format_date_for_input(date_str: str) -> str:
    """Turn a ``YYYY-MM-DDTHH:MM:SSZ`` timestamp into ``YYYY-MM-DD``."""
    try:
        parsed = datetime.strptime(date_str, _TIMESTAMP_FORMAT)
    except ValueError:
        return _FALLBACK_DATE.isoformat()
    return parsed.date().isoformat()


def font_awesome_icon(name: str, default: str | None = None) -> str | None:
    """Return the Font Awesome class for a contact icon name."""
    return FONT_AWESOME_MAP.get(name, default)