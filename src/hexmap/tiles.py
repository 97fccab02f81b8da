"""Tile records: the per-coordinate unit of map generation."""

from pydantic import BaseModel

from .features import TileFeature
from .resources import TileResource
from .rivers import RiverEdges
from .terrain_types import Terrain
from .types import HexCoord
from .yields import TileYields


class TileRecord(BaseModel, frozen=True):
    """Immutable tile state.

    Yields are derived from the other fields. Build records with
    make_tile() or the with_* helpers so yields are always recomputed.
    """

    position: HexCoord
    terrain: Terrain = Terrain.GRASSLAND
    feature: TileFeature | None = None
    resource: TileResource | None = None
    yields: TileYields = TileYields.ZERO
    rivers: RiverEdges = RiverEdges.NONE
    improved: bool = False

    @property
    def movement_cost(self) -> int:
        """Terrain movement cost plus the feature's addend."""
        cost = self.terrain.movement_cost
        if self.feature is not None:
            cost += self.feature.movement_modifier
        return cost

    def with_feature(self, feature: TileFeature | None) -> "TileRecord":
        """Return copy with a different feature and recomputed yields."""
        return self._rebuild(feature=feature)

    def with_resource(
        self, resource: TileResource | None, improved: bool | None = None
    ) -> "TileRecord":
        """Return copy with a different resource and recomputed yields."""
        if improved is None:
            improved = self.improved
        return self._rebuild(resource=resource, improved=improved)

    def with_rivers(self, rivers: RiverEdges) -> "TileRecord":
        """Return copy with different river edges and recomputed yields."""
        return self._rebuild(rivers=rivers)

    def _rebuild(self, **changes) -> "TileRecord":
        fields = {
            "position": self.position,
            "terrain": self.terrain,
            "feature": self.feature,
            "resource": self.resource,
            "rivers": self.rivers,
            "improved": self.improved,
        }
        fields.update(changes)
        return make_tile(**fields)


def make_tile(
    position: HexCoord,
    terrain: Terrain,
    feature: TileFeature | None = None,
    resource: TileResource | None = None,
    rivers: RiverEdges = RiverEdges.NONE,
    improved: bool = False,
) -> TileRecord:
    """Create a tile record, computing yields from its determinants.

    Args:
        position: Axial coordinate of the tile.
        terrain: Base terrain.
        feature: Overlay feature, if any.
        resource: Resource, if any.
        rivers: River edges; the river flag passed to the yield calculation
            is rivers.has_river.
        improved: Use the resource's improved bonus.

    Returns:
        TileRecord with derived yields.
    """
    calculate = TileYields.calculate_improved if improved else TileYields.calculate
    yields = calculate(terrain, feature, resource, rivers.has_river)
    return TileRecord(
        position=position,
        terrain=terrain,
        feature=feature,
        resource=resource,
        yields=yields,
        rivers=rivers,
        improved=improved,
    )
