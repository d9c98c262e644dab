from dataclasses import dataclass, replace

@dataclass(frozen=True)
class GeometryConfig:
    """
    Numerical settings for the geometry engine.

    Attributes:
        epsilon (float): Threshold below which a radius or curvature is degenerate,
            and below which output coordinates are snapped to zero.
        min_lead (float): Lead distances with a smaller magnitude mean "no movement".
        max_lead (float): Lead distances are saturated to [-max_lead, max_lead].
        default_radius (float): Radius used when the supplied radius is near zero.
    """
    epsilon: float = 1e-9
    min_lead: float = 1e-6
    max_lead: float = 1e6
    default_radius: float = 1.0

    def __post_init__(self):
        for name in ("epsilon", "min_lead", "max_lead", "default_radius"):
            if not getattr(self, name) > 0.0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")
        if self.min_lead > self.max_lead:
            raise ValueError("min_lead must not exceed max_lead")

    def replace(self, **changes) -> "GeometryConfig":
        """
        Returns a copy of this configuration with the given fields changed.

        Args:
            **changes: Field names and their new values.

        Returns:
            GeometryConfig: The modified copy.
        """
        return replace(self, **changes)

DEFAULT_CONFIG = GeometryConfig()
