"""Shape generator tracing the outline of binary masks."""
import logging
from typing import Dict, Hashable, Optional

import numpy as np
from scipy.ndimage import binary_dilation
from skimage.measure import find_contours
from skimage.morphology import disk

from shapesimplify.generator import AbstractShapeGenerator
from shapesimplify.types import Shape, ShapeNotFoundError, ContourError

logger = logging.getLogger(__name__)


class MaskContourGenerator(AbstractShapeGenerator):
    """
    Produces closed outlines of registered masks.

    The radius grows the mask with a disk before tracing, so outlines keep
    that distance from the masked pixels. Outlines come from Marching
    Squares and carry one point per pixel step, which is what makes them
    worth simplifying.
    """

    def __init__(self, masks: Optional[Dict[Hashable, np.ndarray]] = None, radius: float = 0.0):
        super().__init__(radius)
        self._masks: Dict[Hashable, np.ndarray] = {}
        for identifier, mask in (masks or {}).items():
            self.add_mask(identifier, mask)

    def add_mask(self, identifier: Hashable, mask: np.ndarray) -> None:
        mask = np.asarray(mask, dtype=bool)
        if mask.ndim != 2:
            raise ContourError(f"Mask for {identifier!r} must be 2D, got shape {mask.shape}")
        self._masks[identifier] = mask

    def grown_mask(self, identifier: Hashable) -> np.ndarray:
        """Return the registered mask dilated by the current radius."""
        try:
            mask = self._masks[identifier]
        except KeyError:
            raise ShapeNotFoundError(f"No mask registered for {identifier!r}") from None

        steps = int(round(self.get_radius()))
        if steps <= 0:
            return mask

        # Pad so the grown outline is not clipped by the mask border
        padded = np.pad(mask, steps)
        return binary_dilation(padded, structure=disk(steps))

    def generate(self, identifier: Hashable) -> Shape:
        mask = self.grown_mask(identifier)
        offset = max(int(round(self.get_radius())), 0)

        if not np.any(mask):
            logger.warning(f"Mask {identifier!r} is empty, returning an empty shape")
            return Shape(np.empty((0, 2)), closed=True)

        # Zero border guarantees closed contours
        contours = find_contours(np.pad(mask.astype(float), 1), level=0.5)
        if not contours:
            logger.warning(f"Mask {identifier!r}: no contours found")
            return Shape(np.empty((0, 2)), closed=True)

        longest = max(contours, key=len)
        logger.debug(
            f"Mask {identifier!r}: traced {len(longest)} points from {len(contours)} contours"
        )

        # Closed contours repeat their first point at the end
        if len(longest) > 1 and np.allclose(longest[0], longest[-1]):
            longest = longest[:-1]

        # skimage returns (row, col), undo both paddings and swap to (x, y)
        points = longest[:, [1, 0]] - (1 + offset)
        return Shape(points, closed=True)
