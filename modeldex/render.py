"""Plain-text rendering of the browser views.

Every function here is pure: the same input always yields the same text.
"""

import textwrap
from collections.abc import Sequence

from modeldex.models import ModelRecord
from modeldex.session import ResultSession
from modeldex.view_state import DetailView

WIDTH = 78
SPONSORED_EVERY = 4
SPONSORED_SLOT = "- - - - - - - - - - - - - [ sponsored ] - - - - - - - - - - - - -"

WELCOME_MESSAGE = "Type a query to search for AI models (e.g. image generation)."
LOADING_MESSAGE = "Searching for AI models..."
NO_RESULTS_MESSAGE = "No models found for your criteria. Please try a different search or filter."


def render_error(message: str) -> str:
    # Server messages may already end with a period
    return f"Sorry, an error occurred: {message.rstrip('.')}. Please try again."


def render_card(number: int, model: ModelRecord, width: int = WIDTH) -> str:
    header = f"{number}. {model.name}  [{model.primary_function}]"
    body = textwrap.fill(model.description, width=width, initial_indent="   ", subsequent_indent="   ")
    return f"{header}\n{body}\n   Pricing: {model.pricing_model}"


def render_list(
    models: Sequence[ModelRecord],
    sponsored_every: int = SPONSORED_EVERY,
    width: int = WIDTH,
) -> str:
    """
    Render result cards numbered from 1.

    A sponsored slot follows every `sponsored_every`-th card; it takes no
    number, so card numbers always match positions in `models`.
    """
    if not models:
        return NO_RESULTS_MESSAGE

    blocks: list[str] = []
    for index, model in enumerate(models):
        blocks.append(render_card(index + 1, model, width))
        if sponsored_every and (index + 1) % sponsored_every == 0:
            blocks.append(SPONSORED_SLOT)
    return "\n\n".join(blocks)


def render_detail(model: ModelRecord, width: int = WIDTH) -> str:
    lines = [
        "< Back to results (:back)",
        "",
        model.name,
        "=" * min(len(model.name), width),
        f"[{model.primary_function}]  Pricing: {model.pricing_model}",
        "",
        textwrap.fill(model.long_description, width=width),
        "",
        f"Visit Website: {model.website_url}",
    ]
    return "\n".join(lines)


def render_session(session: ResultSession, width: int = WIDTH) -> str:
    """Render whatever the session currently shows."""
    view_state = session.view_state
    if isinstance(view_state, DetailView):
        return render_detail(view_state.model, width)
    if session.loading:
        return LOADING_MESSAGE
    if session.error is not None:
        return render_error(session.error)
    if session.query is None:
        return WELCOME_MESSAGE
    return render_list(session.derive_view(), width=width)
