# cvforge

cvforge holds the building blocks for a résumé site. It has three modules:

- `cvforge.profile` holds a profile data model.
- `cvforge.dates` has date and icon helpers for displaying that profile.
- `cvforge.cache` has a small async cache and rate limiter backed by Redis.

## Installation

```
pip install cvforge
```

Caching and rate limiting need a running Redis server.

## Profiles

`cvforge.profile` holds plain keyword-only dataclasses: `Profile`, `PdfSettings`, `Contact`, `Language`, `Skill`, `Education`, `Experience` and `Portfolio`. Every field has a default.

- **`PdfSettings`** records which sections a printed version should show and whether separate print versions of some fields are used. The sections are `show_contact`, `show_language`, `show_about`, `show_education`, `show_experience`, `show_portfolio`, `show_skill`, `show_profile` and `show_avatar`. The print-version fields are `use_avatar_pdf_version`/`avatar_pdf_url` and `use_about_pdf_version`/`about_pdf_data`.
- **List fields** on `Profile` (`skills`, `experiences`, `portfolios`, `contacts`, `languages`, `educations`) are `None` when absent.

```python
from cvforge.profile import Profile, PdfSettings, Contact, Skill

profile = Profile(
    first_name="Ada",
    last_name="Example",
    nick_name="Ada",
    role="Engineer",
    birth_date="1990-05-17",
    nationality="Nowhere",
    address="1 Example Street",
    about="Builds things.",
    avatar="avatar.png",
    pdf=PdfSettings(show_contact=True, show_skill=True),
    contacts=[Contact(contact_icon="Mail", contact_value="ada@example.com")],
    skills=[Skill(name="Python", level="4")],
)
```

Helper methods:

- `Contact.display_title()` returns `contact_title`, or `contact_value` when there is no title.
- `Contact.is_http_url()` tells whether the value starts with `http://` or `https://`.
- `Profile.pdf_avatar()` and `Profile.pdf_about()` return the print version of the avatar or about text when it is enabled, and the regular value otherwise.
- `Experience.pdf_description()` and `Portfolio.pdf_detail()` work the same way for an experience's description and a portfolio's detail.

Each of these four print-version helpers raises `ValueError` when the print version is enabled but no value is set.

## Dates and icons

```python
from datetime import date
from cvforge.dates import calculate_age, convert_date_format, format_date_for_input

calculate_age("1990-05-17", today=date(2024, 5, 16))  # 33
convert_date_format("2021-03-15")                    # "03/2021"
convert_date_format("Now")                           # "Now"
format_date_for_input("2021-03-15T00:00:00Z")        # "2021-03-15"
```

- **`calculate_age`** uses the current UTC date when `today` is omitted. It raises `ValueError` for a birth date that is not `YYYY-MM-DD`.
- **`convert_date_format`** accepts `YYYY-MM-DD`, `MM/DD/YYYY` and `DD-MM-YYYY`. Anything else becomes `"01/2000"`.
- **`format_date_for_input`** returns `"2000-01-01"` for input it cannot parse.

`font_awesome_icon(name, default=None)` maps contact kinds such as `"Github"`, `"Mail"` or `"Address"` to Font Awesome class names. It returns `default` for unknown names. The full table is `FONT_AWESOME_MAP`.

## Cache and rate limiting

```python
import asyncio
from cvforge.cache import get_cache, update_cache, check_rate_limit

async def main():
    await update_cache("profile", "{...}", 3600)
    cached = await get_cache("profile")
    allowed = await check_rate_limit("login", "203.0.113.7", 5, 60)

asyncio.run(main())
```

Each function takes an optional `client` argument, which is any async Redis client. Without one, they share the client from `get_client()`. That client is created once from `redis_url()` and decodes responses to `str`.

`redis_url(debug)` chooses the Redis URL:

- In debug mode it uses `REDIS_URL_DEV`, defaulting to `redis://localhost:6379`.
- Otherwise it uses `REDIS_URL_PROD`, defaulting to `redis://redis:6379`.
- `debug` defaults to Python's `__debug__`.

How each function behaves:

- **`get_cache`** returns the stored string. It returns `None` when the key is missing or on any Redis error.
- **`update_cache`** stores the value with a TTL in seconds and returns `True`. It raises `CacheError` when the server cannot be reached or times out. Other write errors are logged and ignored.
- **`check_rate_limit`** increments `rate_limit:<action_key>:<identifier>`. On the first hit it sets the key to expire after `seconds`. It returns `False` once the count exceeds `limit`, and `True` otherwise. Any Redis error raises `CacheError`.

## What it does not do

cvforge does not render a profile to HTML or PDF. It does not serve pages, and it provides no command-line program. It supplies the model and helpers that such a renderer or server would use.

## Running the tests

```
pip install "cvforge[test]"
pytest
```