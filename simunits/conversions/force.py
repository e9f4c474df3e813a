"""Force conversions from and to newtons."""

LBF_PER_NEWTON = 0.224808943871
NEWTONS_PER_KILONEWTON = 1000.0


def from_lbf(pounds_force: float) -> float:
    """Convert pound-force to newtons."""
    return pounds_force * (1.0 / LBF_PER_NEWTON)


def to_lbf(newtons: float) -> float:
    """Convert newtons to pound-force."""
    return newtons * LBF_PER_NEWTON


def from_kn(kilonewtons: float) -> float:
    """Convert kilonewtons to newtons."""
    return kilonewtons * NEWTONS_PER_KILONEWTON


def to_kn(newtons: float) -> float:
    """Convert newtons to kilonewtons."""
    return newtons * (1.0 / NEWTONS_PER_KILONEWTON)


def from_n(force: float, is_metric: bool) -> float:
    """Convert newtons to kilonewtons (metric) or pound-force (imperial)."""
    return to_kn(force) if is_metric else to_lbf(force)


def to_n(force: float, is_metric: bool) -> float:
    """Convert kilonewtons (metric) or pound-force (imperial) to newtons."""
    return from_kn(force) if is_metric else from_lbf(force)
