"""Resolve an anime's site references into links and event text."""

import logging

from .models import AnimeRecord, ResolvedSite, SiteMeta

logger = logging.getLogger(__name__)

NO_SITES_DESCRIPTION = "无"
URL_PLACEHOLDER = "{{id}}"


def resolve_sites(
    anime: AnimeRecord, site_table: dict[str, SiteMeta]
) -> list[ResolvedSite]:
    """Join the anime's site references with the site metadata table.

    References to unknown sites, or to sites without a title or URL template,
    are skipped. Sites are not filtered by kind: broadcast ("onair") and
    info sites are both kept so that shows without a broadcast site still
    get a link.

    Args:
        anime: Catalog entry
        site_table: Site metadata keyed by site id

    Returns:
        Resolved sites in the anime's own order
    """
    resolved = []
    for ref in anime.sites:
        meta = site_table.get(ref.site_id)
        if meta is None:
            logger.debug(f"Unknown site {ref.site_id!r} for {anime.title!r}")
            continue
        if not meta.title or not meta.url_template:
            continue

        resolved.append(
            ResolvedSite(
                site_id=ref.site_id,
                title=meta.title,
                url=meta.url_template.replace(URL_PLACEHOLDER, ref.external_id, 1),
            )
        )
    return resolved


def describe_sites(sites: list[ResolvedSite]) -> str:
    """Render sites as "title：url" lines, or "无" when there are none."""
    if not sites:
        return NO_SITES_DESCRIPTION
    return "\n".join(f"{site.title}：{site.url}" for site in sites)


def select_url(
    sites: list[ResolvedSite], preferred_order: list[str], fallback_url: str
) -> str:
    """Pick the URL of the most preferred site.

    The first site id in ``preferred_order`` that the anime has wins. Without
    any preferred site the anime's first site is used, and without sites at
    all the fallback URL, so the result is never empty.
    """
    if not sites:
        return fallback_url

    by_id = {}
    for site in sites:
        by_id.setdefault(site.site_id, site)

    for site_id in preferred_order:
        if site_id in by_id:
            return by_id[site_id].url
    return sites[0].url
