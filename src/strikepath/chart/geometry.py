"""
Chart geometry: screen pixels <-> (price, date).

The left 40% of the chart shows price history; the right 60% is the
"future" region where prediction paths are drawn. The vertical line at the
boundary marks the current price and today.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(slots=True)
class ChartGeometry:
    """
    Coordinate mapping for the prediction chart.

    Attributes:
        current_price: Spot price the price axis is centered on
        width: Canvas width (px)
        height: Canvas height (px)
        history_fraction: Share of width used for price history
        days_ahead: Days spanned by the future region
        price_floor: Bottom of the price axis as a multiple of current_price
        price_ceiling: Top of the price axis as a multiple of current_price
    """

    current_price: float
    width: float = 800.0
    height: float = 450.0
    history_fraction: float = 0.4
    days_ahead: int = 14
    price_floor: float = 0.96
    price_ceiling: float = 1.06

    @property
    def future_boundary(self) -> float:
        """x coordinate of the current-price vertical line."""
        return self.width * self.history_fraction

    @property
    def future_width(self) -> float:
        return self.width * (1 - self.history_fraction)

    @property
    def price_min(self) -> float:
        return self.current_price * self.price_floor

    @property
    def price_max(self) -> float:
        return self.current_price * self.price_ceiling

    def in_future_region(self, x: float) -> bool:
        return x >= self.future_boundary

    def in_bounds(self, x: float, y: float) -> bool:
        """True if (x, y) lies inside the future region of the canvas."""
        return self.in_future_region(x) and x <= self.width and 0 <= y <= self.height

    def price_at(self, y: float) -> float:
        return self.price_max - (y / self.height) * (self.price_max - self.price_min)

    def day_offset_at(self, x: float) -> float:
        """Fractional days from today at screen x (negative in the history region)."""
        return ((x - self.future_boundary) / self.future_width) * self.days_ahead

    def screen_to_chart(self, x: float, y: float, today: datetime) -> tuple[float, datetime]:
        """
        Map a screen point to an implied (price, timestamp).

        Args:
            x: Screen x (px)
            y: Screen y (px)
            today: Reference "now" at the future boundary

        Returns:
            (price, timestamp)
        """
        return self.price_at(y), today + timedelta(days=self.day_offset_at(x))

    def chart_to_screen(self, price: float, day_offset: float) -> tuple[float, float]:
        """Inverse of screen_to_chart for overlays (day_offset in days from today)."""
        x = self.future_boundary + (day_offset / self.days_ahead) * self.future_width
        y = self.height - ((price - self.price_min) / (self.price_max - self.price_min)) * self.height
        return x, y
