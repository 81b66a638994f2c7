"""
Module: builder.config

Purpose:
    Print configuration for building a separator set. Immutable
    configuration with validation on construction.

Key Classes:
    - SeparatorConfig: Main configuration for building separators
    - ImageQuality: Image size requested from the image proxy

Dependencies:
    - dataclasses (std)
    - common.page_sizes: PageSize, PageDimensions, CardDimensions
    - builder.layout: FlipEdge, LayoutConfig, calculate_cells_per_page

Used By:
    - builder.controller: Main build controller
    - cli: Command line options
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from separator_toolkit.common.page_sizes import (
    DEFAULT_CARD_DIMENSIONS,
    CardDimensions,
    PageDimensions,
    PageSize,
    resolve_page_dimensions,
)

from .layout import FlipEdge, GridMetrics, LayoutConfig, calculate_cells_per_page

logger = logging.getLogger(__name__)


class ImageQuality(Enum):
    """Image size the renderer asks the image proxy for."""

    THUMBNAIL = "thumbnail"
    MEDIUM = "medium"
    FULL = "full"
    ORIGINAL = "original"


# camelCase keys used by the web client -> field names
_CAMEL_KEYS = {
    "setId": "set_id",
    "doubleSided": "double_sided",
    "flipEdge": "flip_edge",
    "showImages": "show_images",
    "imageQuality": "image_quality",
    "showCutLines": "show_cut_lines",
    "pageSize": "page_size",
    "customPageSize": "custom_page_size",
    "cardDimensions": "card_dimensions",
}


@dataclass(frozen=True)
class SeparatorConfig:
    """
    Configuration for building separators (immutable).

    Only `double_sided`, `flip_edge`, `page_size`/`custom_page_size` and
    `card_dimensions` affect the layout. The display flags are carried to
    the renderer through the build metadata.

    Attributes:
        set_id: Collection/set identifier like "OP-01"
        double_sided: Print a flipped back page after every front page
        flip_edge: Edge the sheet is flipped along
        show_images: Render card images on the faces
        image_quality: Image size requested from the image proxy
        show_cut_lines: Draw cut lines between cells
        page_size: Named paper size
        custom_page_size: Dimensions for PageSize.CUSTOM
        card_dimensions: Separator card size

    Example:
        >>> config = SeparatorConfig(set_id="OP-02", double_sided=True)
        >>> config.grid.cells_per_page
        9
    """

    set_id: str = "OP-01"
    double_sided: bool = False
    flip_edge: FlipEdge = FlipEdge.LONG

    # Display
    show_images: bool = True
    image_quality: ImageQuality = ImageQuality.MEDIUM
    show_cut_lines: bool = False

    # Physical layout
    page_size: PageSize = PageSize.A4
    custom_page_size: Optional[PageDimensions] = None
    card_dimensions: CardDimensions = field(default=DEFAULT_CARD_DIMENSIONS)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.set_id or not self.set_id.strip():
            raise ValueError(f"set_id must be non-empty: {self.set_id!r}")

        # Normalise string values handed in from JSON/CLI
        object.__setattr__(self, "flip_edge", FlipEdge.parse(self.flip_edge))
        object.__setattr__(self, "page_size", PageSize.parse(self.page_size))
        if not isinstance(self.image_quality, ImageQuality):
            object.__setattr__(self, "image_quality", ImageQuality(str(self.image_quality).lower()))

        if self.page_size is PageSize.CUSTOM and self.custom_page_size is None:
            raise ValueError("custom_page_size is required when page_size is 'custom'")

    @property
    def page_dimensions(self) -> PageDimensions:
        """Physical page size in millimetres."""
        return resolve_page_dimensions(self.page_size, self.custom_page_size)

    @property
    def grid(self) -> GridMetrics:
        """Cell grid that fits on one page."""
        return calculate_cells_per_page(self.page_dimensions, self.card_dimensions)

    def to_layout_config(self) -> LayoutConfig:
        """
        Build the layout engine configuration.

        Raises:
            InvalidPageCapacity: If a card does not fit on the page
        """
        return LayoutConfig.from_grid(
            self.grid,
            flip_edge=self.flip_edge,
            duplex=self.double_sided,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        page = self.page_dimensions
        card = self.card_dimensions
        return {
            "set_id": self.set_id,
            "double_sided": self.double_sided,
            "flip_edge": self.flip_edge.value,
            "show_images": self.show_images,
            "image_quality": self.image_quality.value,
            "show_cut_lines": self.show_cut_lines,
            "page_size": self.page_size.value,
            "page_dimensions": {"width": page.width, "height": page.height},
            "card_dimensions": {
                "width": card.width,
                "height": card.height,
                "tab_height": card.tab_height,
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SeparatorConfig":
        """
        Create from a dictionary, accepting snake_case or camelCase keys.

        Unknown keys are ignored so stored client settings can be passed
        through unchanged.
        """
        normalised = {_CAMEL_KEYS.get(key, key): value for key, value in data.items()}
        kwargs: dict[str, Any] = {}

        for name in ("set_id", "double_sided", "show_images", "show_cut_lines"):
            if name in normalised:
                kwargs[name] = normalised[name]
        if "flip_edge" in normalised:
            kwargs["flip_edge"] = FlipEdge.parse(normalised["flip_edge"])
        if "image_quality" in normalised:
            kwargs["image_quality"] = ImageQuality(str(normalised["image_quality"]).lower())
        if "page_size" in normalised:
            kwargs["page_size"] = PageSize.parse(normalised["page_size"])

        custom = normalised.get("custom_page_size")
        if custom:
            kwargs["custom_page_size"] = PageDimensions(
                width=custom["width"],
                height=custom["height"],
            )

        card = normalised.get("card_dimensions")
        if card:
            kwargs["card_dimensions"] = CardDimensions(
                width=card["width"],
                height=card["height"],
                tab_height=card.get("tab_height", card.get("tabHeight", 0)),
            )

        ignored = sorted(set(normalised) - set(kwargs) - {"custom_page_size", "card_dimensions"})
        if ignored:
            logger.debug(f"Ignoring unknown config keys: {ignored}")

        return cls(**kwargs)
