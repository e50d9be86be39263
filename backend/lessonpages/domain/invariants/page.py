from ..exceptions import ValidationError

AUDIENCES = ("junior", "undergrad", "general")
PAGE_STATUSES = ("draft", "published")


def assert_page(page):
    if not page.title or not page.slug:
        raise ValidationError("Title and slug are required.")

    if page.audience not in AUDIENCES:
        raise ValidationError(f"Invalid audience: {page.audience!r}")

    if page.status not in PAGE_STATUSES:
        raise ValidationError(f"Invalid status: {page.status!r}")
