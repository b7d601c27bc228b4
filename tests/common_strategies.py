"""Define strategies for generating common representations for property-based testing."""

from __future__ import annotations

import hypothesis.strategies as st


@st.composite
def real_ranges(draw: st.DrawFn, max_magnitude: float = 1e6) -> tuple[float, float]:
    """Generate random [a,b] ranges of finite reals within [-max_magnitude, max_magnitude]."""
    a = draw(st.floats(min_value=-max_magnitude, max_value=max_magnitude))
    b = draw(st.floats(min_value=-max_magnitude, max_value=max_magnitude))
    return (min(a, b), max(a, b))


@st.composite
def margins(draw: st.DrawFn, dimension: int) -> list[float]:
    """Generate random non-negative search margins, one per dimension."""
    return draw(
        st.lists(
            st.floats(min_value=0.0, max_value=5.0),
            min_size=dimension,
            max_size=dimension,
        ),
    )
