"""
Shared layout for paginated list reports.
"""

from typing import Callable, List, TypeVar

from ridewithgps_mcp.api.model import Page


T = TypeVar("T")

NEXT_PAGE_HINT = "Use the next page parameter to get more results."


def empty_message(noun: str) -> str:
    return f"No {noun}s found."


def render_list(page: Page[T], noun: str, render_entry: Callable[[int, T], List[str]]) -> str:
    """Numbered 1-based entries between a count header and a next-page footer.

    Args:
        page: Parsed list envelope
        noun: Singular resource name ("route", "trip", "event")
        render_entry: Returns the lines for one entry given (position, item)
    """
    if not page.items:
        return empty_message(noun)

    count = len(page.items)
    header = f"Found {count} {noun}(s)"
    if page.pagination is not None:
        total = page.pagination.record_count
        header += f" (Page showing {count} of {total if total is not None else 'Unknown'} total)"
    lines = [header + ":", ""]

    for index, item in enumerate(page.items, start=1):
        lines.extend(render_entry(index, item))
        lines.append("")

    if page.pagination is not None and page.pagination.has_next_page:
        lines.append(NEXT_PAGE_HINT)

    return "\n".join(lines).rstrip()
