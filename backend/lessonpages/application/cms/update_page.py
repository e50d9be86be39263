from types import SimpleNamespace
from typing import Any, Dict, Optional
from lessonpages.models.page import Page
from lessonpages.domain.exceptions import ConflictError, ValidationError
from lessonpages.domain.invariants.page import assert_page
from lessonpages.domain.policy import AuthContext, PAGE_EDIT, authorize
from lessonpages.repository import CMSRepository
from lessonpages.utils.audit import log_action
from lessonpages.utils.form import text_field
from lessonpages.utils.optimistic_lock import enforce_optimistic_lock
from lessonpages.utils.slug import normalize_slug
from .create_page import SLUG_TAKEN


ALLOWED_UPDATE_FIELDS = ("title", "slug", "audience", "status")


def update_page(
    *,
    repo: CMSRepository,
    ctx: AuthContext,
    page_id: str,
    data: Dict[str, Any],
    if_unmodified_since: Optional[str] = None,
) -> Page:
    """
    Update mutable fields on a page.

    Design rules:
    - Only whitelisted fields are mutable
    - Slug is re-normalized; a blank slug is re-derived from the title
    - Invariants always revalidated
    """
    authorize(ctx, PAGE_EDIT)

    page = repo.require_page(page_id)
    enforce_optimistic_lock(page, if_unmodified_since)

    values = {
        field: getattr(page, field)
        for field in ALLOWED_UPDATE_FIELDS
    }
    for field in ALLOWED_UPDATE_FIELDS:
        if field in data and data[field] is not None:
            values[field] = data[field]

    form = {"data": dict(data)}
    values["title"] = text_field(data, "title", page.title or "", context=form).strip()
    values["slug"] = normalize_slug(text_field(data, "slug", page.slug or "", context=form) or values["title"])

    # Checked on a detached copy; the row is untouched on failure
    try:
        assert_page(SimpleNamespace(**values))
    except ValidationError as exc:
        exc.context.setdefault("data", dict(data))
        raise

    if values["slug"] != page.slug and repo.slug_taken(values["slug"], exclude_id=page.id):
        raise ConflictError(SLUG_TAKEN, context={"data": dict(data)})

    changed_fields: list[str] = []

    with repo.transaction(conflict_message=SLUG_TAKEN):
        for field, value in values.items():
            if getattr(page, field) != value:
                setattr(page, field, value)
                changed_fields.append(field)

        log_action(
            action="page.update",
            entity_type="page",
            entity_id=page.id,
            actor_id=ctx.id,
            payload={
                "fields": changed_fields,
            },
        )

    return page
