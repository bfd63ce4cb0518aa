"""
Prefect flow for building a static snapshot of the amphibian screen.

Runs one fetch through the view model, renders whichever state it lands in,
and writes ``site/index.html``. The snapshot has no live server behind it,
so the Loading page does not auto-refresh.

Run locally:
    python -m amphibians.flows.build
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from prefect import flow, task

from amphibians.config import Settings, get_settings
from amphibians.renderers.screens import build_page_html
from amphibians.ui.state import AmphibianUiState, Success
from amphibians.ui.viewmodel import AmphibianViewModel

SITE_DIR = Path("site")

# Relative so the snapshot's retry form posts to a live server mounted at the same root.
SNAPSHOT_RETRY_URL = "retry"


@task(name="fetch-state")
def fetch_state(settings: Settings) -> AmphibianUiState:
    """Run the view model's initial fetch to completion and return the state it wrote."""
    with AmphibianViewModel.from_settings(settings) as view_model:
        return view_model.initial_fetch.result()


@task(name="render-page")
def render_page(state: AmphibianUiState, title: str) -> str:
    """Render the full page for ``state``."""
    return build_page_html(
        state, title=title, retry_url=SNAPSHOT_RETRY_URL, auto_refresh=False
    )


@task(name="write-site")
def write_site(html: str) -> Path:
    """Write HTML to site directory."""
    SITE_DIR.mkdir(parents=True, exist_ok=True)
    output_path = SITE_DIR / "index.html"
    with output_path.open("w", encoding="utf-8") as f:
        f.write(html)
    return output_path


@flow(name="build-site", log_prints=True)
def build_site(base_url: str | None = None) -> dict[str, Any]:
    """
    Fetch the amphibian list once and write the rendered page.

    Returns:
        Summary with ``state`` (success/error), ``amphibians`` count, and
        ``output`` path.
    """
    settings = get_settings()
    if base_url is not None:
        settings = settings.model_copy(update={"base_url": base_url})

    print(f"Fetching amphibians from {settings.base_url}...")
    state = fetch_state(settings)

    if isinstance(state, Success):
        count = len(state.amphibians)
        print(f"Fetched {count} amphibians.")
        status = "success"
    else:
        count = 0
        print("Fetch failed; rendering the error screen.")
        status = "error"

    html = render_page(state, settings.app_name)
    output_path = write_site(html)

    print(f"Site built: {output_path}")
    return {"state": status, "amphibians": count, "output": str(output_path)}


if __name__ == "__main__":
    result = build_site()
    print(f"Flow complete: {result}")
