"""Assembly of resolved metadata mappings."""

from __future__ import annotations

from typing import Callable

from ..core.types import (
    DESCRIPTION,
    OG_DESCRIPTION,
    OG_IMAGE,
    OG_TITLE,
    OG_URL,
    TITLE,
    OverrideRule,
    RequestContext,
    ResolvedMetadata,
)

AssetResolver = Callable[[str], "str | None"]


def set_title(metadata: ResolvedMetadata, title: str | None) -> None:
    if title:
        metadata[TITLE] = title
        metadata[OG_TITLE] = title


def set_description(metadata: ResolvedMetadata, description: str | None) -> None:
    if description:
        metadata[DESCRIPTION] = description
        metadata[OG_DESCRIPTION] = description


def set_image(metadata: ResolvedMetadata, image_url: str | None) -> None:
    if image_url:
        metadata[OG_IMAGE] = image_url


def minimal_metadata(context: RequestContext) -> ResolvedMetadata:
    """Metadata for a request nothing else applies to: og:url only."""
    return {OG_URL: context.url}


def build_from_rule(
    rule: OverrideRule,
    context: RequestContext,
    resolve_asset: AssetResolver,
) -> ResolvedMetadata:
    """Build metadata from a matched override rule alone.

    Title and description are used verbatim; rule authors supply final
    text, so nothing is summarized. The image is included only when its
    reference resolves to a URL.

    Args:
        rule: The selected override rule.
        context: Current request context.
        resolve_asset: Maps an asset reference to an absolute URL or None.

    Returns:
        Metadata with og:url set to the site base address plus request path.
    """
    metadata: ResolvedMetadata = {}
    set_title(metadata, rule.title)
    set_description(metadata, rule.description)
    if rule.image:
        set_image(metadata, resolve_asset(rule.image))
    metadata[OG_URL] = context.url
    return metadata
