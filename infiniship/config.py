from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings for :class:`infiniship.generator.ShipGenerator`.

    Attributes:
        monochrome: Render ships in black / white only.
        tiles_x: Number of ships per sheet row.
        tiles_y: Number of ships per sheet column.
        scale: Integer upscale factor applied when encoding previews.
    """

    monochrome: bool = False
    tiles_x: int = 8
    tiles_y: int = 8
    scale: int = 1

    def __post_init__(self) -> None:
        if self.tiles_x < 0 or self.tiles_y < 0:
            raise ValueError(
                f"Tile counts must be non-negative: {self.tiles_x}x{self.tiles_y}"
            )
        if self.scale < 1:
            raise ValueError(f"Scale must be positive: {self.scale}")
