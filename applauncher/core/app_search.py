from collections.abc import Iterable, Sequence

from .launcher_types import ApplicationEntry


def search_applications(
    query: str, applications: Sequence[ApplicationEntry], max_results: int
) -> list[ApplicationEntry]:
    """Filters applications by case-insensitive substring match on the name.

    Results keep index order. When several entries share a name, the first one
    in index order is kept.

    Args:
        query: Text typed by the user. An empty query matches everything.
        applications: Application index.
        max_results: Maximum number of entries to return.

    Returns:
        At most `max_results` matching entries.
    """
    q = query.lower()
    seen: set[str] = set()
    results: list[ApplicationEntry] = []

    for app in applications:
        if len(results) >= max_results:
            break
        if q not in app.name.lower():
            continue
        if app.name in seen:
            continue
        seen.add(app.name)
        results.append(app)

    return results


def seed_recent_apps(
    recent_names: Iterable[str],
    applications: Sequence[ApplicationEntry],
    max_results: int,
) -> list[ApplicationEntry]:
    """Resolves recently launched app names against the index.

    Names without an index entry (e.g. uninstalled apps) are skipped.

    Args:
        recent_names: Names in persisted order.
        applications: Application index.
        max_results: Maximum number of entries to return.

    Returns:
        Matching entries in the same order as `recent_names`.
    """
    results: list[ApplicationEntry] = []
    for recent in recent_names:
        if len(results) >= max_results:
            break
        match = next((app for app in applications if app.name == recent), None)
        if match is not None:
            results.append(match)
    return results
