"""Unit tests for blog.api.dependencies — principal and pagination binding.

get_current_principal is exercised with real Starlette user objects placed in
the ASGI scope, the way an upstream AuthenticationMiddleware would.
get_pageable is called directly with explicit arguments.
"""

from __future__ import annotations

import pytest
from starlette.authentication import SimpleUser, UnauthenticatedUser
from starlette.requests import Request

from blog.api.dependencies import get_current_principal, get_pageable
from blog.domain.exceptions import BadRequestAlertException
from blog.domain.models import Order, Principal, SortDirection


def _request(**scope: object) -> Request:
    return Request({"type": "http", "headers": [], **scope})


class TestGetCurrentPrincipal:
    def test_authenticated_user_becomes_principal(self) -> None:
        principal = get_current_principal(_request(user=SimpleUser("alice")))
        assert principal == Principal(username="alice")

    def test_unauthenticated_user_is_none(self) -> None:
        assert get_current_principal(_request(user=UnauthenticatedUser())) is None

    def test_no_auth_middleware_is_none(self) -> None:
        assert get_current_principal(_request()) is None

    def test_falls_back_to_display_name(self) -> None:
        class _TokenUser:
            is_authenticated = True
            display_name = "bob"

        assert get_current_principal(_request(user=_TokenUser())) == Principal(username="bob")


class TestGetPageable:
    def test_binds_page_and_size(self) -> None:
        pageable = get_pageable(page=2, size=5, sort=[])
        assert (pageable.page, pageable.size, pageable.sort) == (2, 5, ())

    def test_repeated_sort_values_keep_their_order(self) -> None:
        pageable = get_pageable(page=0, size=20, sort=["story.id,asc", "id,desc"])
        assert pageable.sort == (
            Order(column="story_id", direction=SortDirection.ASC),
            Order(column="id", direction=SortDirection.DESC),
        )

    def test_unknown_sort_property_is_bad_request(self) -> None:
        with pytest.raises(BadRequestAlertException) as exc_info:
            get_pageable(page=0, size=20, sort=["nope,asc"])
        assert exc_info.value.error_key == "sortinvalid"
        assert exc_info.value.entity_name == "comment"
