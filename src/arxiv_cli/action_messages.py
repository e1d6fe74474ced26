"""User-facing copy builders for errors and notifications."""

from __future__ import annotations


def _ensure_sentence(text: str) -> str:
    """Return text with terminal sentence punctuation."""
    cleaned = text.strip()
    if not cleaned:
        return ""
    if cleaned.endswith((".", "!", "?")):
        return cleaned
    return f"{cleaned}."


def build_actionable_error(
    action: str,
    *,
    next_step: str,
    why: str | None = None,
) -> str:
    """Build a 2-3 line actionable error message."""
    lines = [f"Could not {action.strip()}."]
    if why:
        lines.append(f"Why: {_ensure_sentence(why)}")
    lines.append(build_next_step_hint(next_step))
    return "\n".join(lines)


def build_next_step_hint(next_step: str) -> str:
    """Build a canonical next-step guidance line."""
    return f"Next step: {_ensure_sentence(next_step)}"


def build_fetch_error_message(
    reason: str,
    *,
    query: str,
    page: int,
    status_code: int | None = None,
) -> str:
    """Build the fatal error shown when a page fetch fails."""
    if status_code == 429:
        next_step = "wait a few seconds and run arxiv-cli again"
    elif status_code is not None and status_code >= 500:
        next_step = "the search service is having trouble, retry later"
    elif status_code is not None:
        next_step = "check --query/--page and --base-url, then retry"
    else:
        next_step = "check your network connection and --base-url, then retry"
    return build_actionable_error(
        f"fetch page {page} for query {query!r}",
        why=reason,
        next_step=next_step,
    )


def build_seen_save_error_message(reason: str) -> str:
    """Build the error shown when the seen set cannot be written at exit."""
    return build_actionable_error(
        "save your seen papers",
        why=reason,
        next_step="check permissions on the seen file or pass --seen-file",
    )


def build_open_url_notification(url: str) -> str:
    """Build notification text for handing a URL to the browser."""
    return f"Opening {url}"


__all__ = [
    "build_actionable_error",
    "build_fetch_error_message",
    "build_next_step_hint",
    "build_open_url_notification",
    "build_seen_save_error_message",
]
