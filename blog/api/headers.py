"""HTTP response header helpers.

Alert headers carry a message key and a parameter for the UI toast layer:

    X-<app>-alert:  comment.created | comment.updated | comment.deleted
    X-<app>-params: the entity id
    X-<app>-error:  error.<error_key> (on rejected requests)

Pagination headers follow the RFC 5988 ``Link`` convention plus
``X-Total-Count``.
"""

from __future__ import annotations

from blog.config import constants
from blog.domain.models import Page


def _alert(message: str, param: str) -> dict[str, str]:
    return {
        f"X-{constants.APPLICATION_NAME}-alert": message,
        f"X-{constants.APPLICATION_NAME}-params": param,
    }


def entity_creation_alert(entity_name: str, param: str) -> dict[str, str]:
    return _alert(f"{entity_name}.created", param)


def entity_update_alert(entity_name: str, param: str) -> dict[str, str]:
    return _alert(f"{entity_name}.updated", param)


def entity_deletion_alert(entity_name: str, param: str) -> dict[str, str]:
    return _alert(f"{entity_name}.deleted", param)


def failure_alert(entity_name: str, error_key: str) -> dict[str, str]:
    return {
        f"X-{constants.APPLICATION_NAME}-error": f"error.{error_key}",
        f"X-{constants.APPLICATION_NAME}-params": entity_name,
    }


def _page_uri(base_url: str, page: int, size: int) -> str:
    return f"{base_url}?page={page}&size={size}"


def pagination_headers(page: Page, base_url: str) -> dict[str, str]:
    """Build ``X-Total-Count`` and ``Link`` headers for one page of results.

    Link entries are emitted in the order next, prev, last, first; next and
    prev only when such a page exists. ``last`` points at page 0 when the
    collection is empty.

    Args:
        page:     The page that was returned.
        base_url: Collection path the links point at (e.g. ``/api/comments``).
    """
    links: list[str] = []
    if page.has_next:
        links.append(f'<{_page_uri(base_url, page.number + 1, page.size)}>; rel="next"')
    if page.has_previous:
        links.append(f'<{_page_uri(base_url, page.number - 1, page.size)}>; rel="prev"')

    last_page = max(page.total_pages - 1, 0)
    links.append(f'<{_page_uri(base_url, last_page, page.size)}>; rel="last"')
    links.append(f'<{_page_uri(base_url, 0, page.size)}>; rel="first"')

    return {
        "X-Total-Count": str(page.total_elements),
        "Link": ",".join(links),
    }
