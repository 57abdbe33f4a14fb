"""Generic pagination helpers.

They work with any list-style service method, i.e. anything called as
``f(opt, *options)`` that returns ``(items, response)``::

    users = all_pages(client.users.list_users)

    mrs = all_pages(
        client.merge_requests.list_merge_requests,
        ListMergeRequestsOptions(per_page=100, pagination='keyset', order_by='created_at'),
    )

    for user, err in page_iterator(client.users.list_users):
        if err is not None:
            break  # the iterator would retry the failed page forever
        process(user)

Pages are followed through the ``Link: rel="next"`` cursor, which GitLab
sends for both offset and keyset pagination.
"""

from typing import Any, Callable, Iterator, List, Optional, Protocol, Tuple, TypeVar

from .request_options import RequestOptionFunc, with_keyset_pagination_parameters
from .response import Response

T = TypeVar('T')

Paginatable = Callable[..., Tuple[List[T], Response]]
"""``f(opt, *options) -> (items, response)``, e.g. ``UsersService.list_users``."""

PaginatableForID = Callable[..., Tuple[List[T], Response]]
"""``f(id, opt, *options) -> (items, response)``, e.g. ``TagsService.list_tags``."""


class PageOptions(Protocol):
    """Options exposing an offset ``page`` attribute, e.g. ``ListOptions``."""

    page: Optional[int]


def all_pages(
    f: Paginatable[T], opt: Any = None, *options: RequestOptionFunc
) -> List[T]:
    """Fetch every page of a paginated resource.

    Args:
        f: List function returning a page of items and the response
        opt: Options passed unchanged to every call
        *options: Request options passed to every call

    Returns:
        All items in page order

    Raises:
        Exception: The first error raised by ``f``; no partial result is returned
    """
    collected: List[T] = []
    next_link = ''
    while True:
        page, resp = f(opt, *options, with_keyset_pagination_parameters(next_link))
        collected.extend(page)
        if not resp.next_link:
            break
        next_link = resp.next_link
    return collected


def all_pages_for_id(
    id: Any, f: PaginatableForID[T], opt: Any = None, *options: RequestOptionFunc
) -> List[T]:
    """Like ``all_pages`` for resources below a parent, e.g. tags of a project."""

    def id_func(opt: Any, *options: RequestOptionFunc) -> Tuple[List[T], Response]:
        return f(id, opt, *options)

    return all_pages(id_func, opt, *options)


def page_iterator(
    f: Paginatable[T], opt: Any = None, *options: RequestOptionFunc
) -> Iterator[Tuple[Optional[T], Optional[Exception]]]:
    """Lazily iterate over every item of a paginated resource.

    Yields ``(item, None)`` for each item. When fetching a page fails it
    yields ``(None, error)`` and then fetches the same page again, so a
    persistent failure repeats until the consumer stops iterating.

    Each call returns a new, independent iterator.

    Args:
        f: List function returning a page of items and the response
        opt: Options passed unchanged to every call
        *options: Request options passed to every call
    """
    next_link = ''
    while True:
        try:
            page, resp = f(opt, *options, with_keyset_pagination_parameters(next_link))
        except Exception as e:
            yield None, e
            continue

        for item in page:
            yield item, None

        if not resp.next_link:
            return
        next_link = resp.next_link


def page_iterator_for_id(
    id: Any, f: PaginatableForID[T], opt: Any = None, *options: RequestOptionFunc
) -> Iterator[Tuple[Optional[T], Optional[Exception]]]:
    """Like ``page_iterator`` for resources below a parent."""

    def id_func(opt: Any, *options: RequestOptionFunc) -> Tuple[List[T], Response]:
        return f(id, opt, *options)

    return page_iterator(id_func, opt, *options)


def collect(
    f: Callable[..., Tuple[List[T], Response]],
    opt: PageOptions,
    *options: RequestOptionFunc,
) -> List[T]:
    """Fetch every page using offset pagination.

    Sets ``opt.page`` to 1 and follows ``X-Next-Page`` until it is empty.
    ``opt`` is modified in place.

    Raises:
        ValueError: If ``opt`` is ``None``
    """
    if opt is None:
        raise ValueError('collect requires an options object with a page attribute')

    collected: List[T] = []
    opt.page = 1
    while opt.page:
        page, resp = f(opt, *options)
        collected.extend(page)
        opt.page = resp.next_page
    return collected
