from typing import Any, Dict
from lessonpages.models.page import Page
from lessonpages.domain.exceptions import ConflictError, ValidationError
from lessonpages.domain.invariants.page import assert_page
from lessonpages.domain.policy import AuthContext, PAGE_CREATE, authorize
from lessonpages.repository import CMSRepository
from lessonpages.utils.audit import log_action
from lessonpages.utils.form import text_field
from lessonpages.utils.slug import normalize_slug

SLUG_TAKEN = "Slug already exists. Choose another."


def create_page(
    *,
    repo: CMSRepository,
    ctx: AuthContext,
    data: Dict[str, Any],
) -> Page:
    """
    Create a new CMS page.

    Edge cases handled:
    - Blank slug falls back to the title
    - Missing title/slug, unknown audience or status
    - Duplicate slug (pre-check and unique constraint)
    """
    authorize(ctx, PAGE_CREATE)

    form = {"data": dict(data)}
    title = text_field(data, "title", context=form).strip()
    slug = normalize_slug(text_field(data, "slug", context=form) or title)

    page = Page()
    page.title = title
    page.slug = slug
    page.audience = data.get("audience") or "general"
    page.status = data.get("status") or "draft"

    # 🔒 Domain invariants (single source of truth)
    try:
        assert_page(page)
    except ValidationError as exc:
        exc.context.setdefault("data", dict(data))
        raise

    if repo.slug_taken(slug):
        raise ConflictError(SLUG_TAKEN, context={"data": dict(data)})

    with repo.transaction(conflict_message=SLUG_TAKEN):
        repo.add(page)
        repo.flush()  # ensures page.id is available

        log_action(
            action="page.create",
            entity_type="page",
            entity_id=page.id,
            actor_id=ctx.id,
            payload={
                "title": page.title,
                "slug": page.slug,
                "status": page.status,
            },
        )

    return page
