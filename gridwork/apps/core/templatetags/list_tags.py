"""List page component tags: filter_tabs, list_search, pagination, empty_state."""

from django import template

register = template.Library()


@register.inclusion_tag("components/filter_tabs.html")
def filter_tabs(tabs: list):
    """Render status tabs above a list.

    Usage:
        {% filter_tabs filter_tabs %}

    Args:
        tabs: FilterTab list from build_filter_tabs()
    """
    return {"tabs": tabs}


@register.inclusion_tag("components/list_search.html")
def list_search(search_form, active_status: str = "all", placeholder: str = "Search"):
    """Render the search bar for a list page.

    The active status tab is carried as a hidden field so searching keeps
    the filter. The page number is not carried, so a new search starts on
    page 1.

    Usage:
        {% list_search search_form active_status placeholder="Search tickets" %}
    """
    return {
        "search_form": search_form,
        "active_status": active_status,
        "placeholder": placeholder,
    }


@register.inclusion_tag("components/pagination.html")
def pagination(list_page):
    """Render previous / numbered / next pagination controls.

    Previous is disabled on the first page and next on the last page.

    Usage:
        {% pagination list_page %}
    """
    return {"list_page": list_page}


@register.inclusion_tag("components/empty_state.html")
def empty_state(empty_message: str, search_message: str = "", is_search: bool = False):
    """Render an empty state message, with search-aware variant.

    Usage:
        {% empty_state empty_message="No tickets found." search_message="No tickets match your search." is_search=list_page.state.query %}

    Args:
        empty_message: Message shown when there are no items
        search_message: Message shown when search returns no results
            (falls back to empty_message)
        is_search: Whether a search is active
    """
    return {
        "empty_message": empty_message,
        "search_message": search_message or empty_message,
        "is_search": bool(is_search),
    }
