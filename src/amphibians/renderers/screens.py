"""Amphibian screens: one renderer per UI state variant, plus the page chrome."""

from __future__ import annotations

from typing import TYPE_CHECKING

from amphibians.renderers import render_template, strings
from amphibians.ui.state import AmphibianUiState, Error, Loading, Success

if TYPE_CHECKING:
    from collections.abc import Sequence

    from amphibians.schemas import Amphibian

RETRY_URL = "/retry"

#: Seconds between browser reloads while a fetch is in flight.
LOADING_REFRESH_SECONDS = 1


def _retry_context(retry_url: str) -> dict[str, str]:
    return {"retry_url": retry_url, "retry_label": strings.RETRY_BUTTON}


def build_loading_html() -> str:
    """Spinner with a loading label."""
    return render_template("loading.html.j2", message=strings.LOADING_AMPHIBIANS)


def build_error_html(retry_url: str = RETRY_URL) -> str:
    """Generic failure message with a retry control."""
    return render_template(
        "error.html.j2",
        message=strings.LOADING_FAILED,
        **_retry_context(retry_url),
    )


def build_amphibian_card_html(amphibian: Amphibian) -> str:
    """Card with heading, image (or placeholder), and description."""
    return render_template(
        "amphibian_card.html.j2",
        title=amphibian.title,
        img_src=amphibian.img_src,
        alt=strings.AMPHIBIAN_IMAGE_DESCRIPTION.format(name=amphibian.name),
        description=amphibian.description,
    )


def build_amphibian_list_html(
    amphibians: Sequence[Amphibian],
    retry_url: str = RETRY_URL,
) -> str:
    """
    One card per record, in the given order.

    An empty list renders the "no results" message and a retry control
    instead of an empty list area.
    """
    cards = [build_amphibian_card_html(a) for a in amphibians]
    return render_template(
        "amphibian_list.html.j2",
        cards=cards,
        empty_message=strings.NO_AMPHIBIANS_FOUND,
        **_retry_context(retry_url),
    )


def build_screen_html(state: AmphibianUiState, retry_url: str = RETRY_URL) -> str:
    """Select the screen for the current state variant."""
    if isinstance(state, Loading):
        return build_loading_html()
    if isinstance(state, Success):
        return build_amphibian_list_html(state.amphibians, retry_url)
    if isinstance(state, Error):
        return build_error_html(retry_url)
    msg = f"Unknown UI state: {state!r}"
    raise TypeError(msg)


def build_page_html(
    state: AmphibianUiState,
    *,
    title: str = strings.APP_NAME,
    retry_url: str = RETRY_URL,
    auto_refresh: bool = True,
) -> str:
    """
    Full HTML page: top app bar plus the screen for ``state``.

    With ``auto_refresh``, a Loading page reloads itself so the browser picks
    up the next state without user action.
    """
    refresh = LOADING_REFRESH_SECONDS if auto_refresh and isinstance(state, Loading) else None
    return render_template(
        "base.html.j2",
        title=title,
        auto_refresh=refresh,
        screen_html=build_screen_html(state, retry_url),
    )
