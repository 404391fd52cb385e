"""
strikepath Configuration

Config location: config/strikepath.yaml

Schema:
- pricing: volatility and rate held constant along drawn paths
- chart: canvas geometry, throttle and decay rates
- market_data: data provider endpoint, credentials, fallback spot
- logging: loguru sinks
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class PricingConfig:
    """Valuation parameters."""
    volatility: float = 0.20
    risk_free_rate: float = 0.05


@dataclass
class ChartConfig:
    """Prediction chart geometry and animation."""
    width: int = 800
    height: int = 450
    history_fraction: float = 0.4
    days_ahead: int = 14
    price_floor: float = 0.96
    price_ceiling: float = 1.06
    min_sample_distance: float = 5.0
    tick_decay: float = 0.005
    insert_decay: float = 0.02
    frame_interval: float = 1 / 60


@dataclass
class MarketDataConfig:
    """Market data provider settings."""
    base_url: str = "https://data.alpaca.markets/v2"
    api_key: Optional[str] = None
    api_secret: Optional[str] = None
    timeout: float = 10.0
    default_symbol: str = "SPY"
    default_spot: float = 100.0
    seed: Optional[int] = None

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key and self.api_secret)


@dataclass
class LoggingConfig:
    """Loguru sink settings."""
    level: str = "INFO"
    log_file: Optional[str] = "logs/strikepath.log"
    rotation: str = "10 MB"
    retention: str = "14 days"


@dataclass
class StrikepathConfig:
    """Complete configuration."""

    pricing: PricingConfig = field(default_factory=PricingConfig)
    chart: ChartConfig = field(default_factory=ChartConfig)
    market_data: MarketDataConfig = field(default_factory=MarketDataConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "StrikepathConfig":
        """Create config from dictionary with nested dataclass instantiation."""
        pricing = data.get("pricing") or {}
        chart = data.get("chart") or {}
        market = data.get("market_data") or {}
        log = data.get("logging") or {}

        return cls(
            pricing=PricingConfig(
                volatility=float(pricing.get("volatility", 0.20)),
                risk_free_rate=float(pricing.get("risk_free_rate", 0.05)),
            ),
            chart=ChartConfig(
                width=int(chart.get("width", 800)),
                height=int(chart.get("height", 450)),
                history_fraction=float(chart.get("history_fraction", 0.4)),
                days_ahead=int(chart.get("days_ahead", 14)),
                price_floor=float(chart.get("price_floor", 0.96)),
                price_ceiling=float(chart.get("price_ceiling", 1.06)),
                min_sample_distance=float(chart.get("min_sample_distance", 5.0)),
                tick_decay=float(chart.get("tick_decay", 0.005)),
                insert_decay=float(chart.get("insert_decay", 0.02)),
                frame_interval=float(chart.get("frame_interval", 1 / 60)),
            ),
            market_data=MarketDataConfig(
                base_url=market.get("base_url", "https://data.alpaca.markets/v2"),
                api_key=market.get("api_key"),
                api_secret=market.get("api_secret"),
                timeout=float(market.get("timeout", 10.0)),
                default_symbol=str(market.get("default_symbol", "SPY")).upper(),
                default_spot=float(market.get("default_spot", 100.0)),
                seed=market.get("seed"),
            ),
            logging=LoggingConfig(
                level=str(log.get("level", "INFO")).upper(),
                log_file=log.get("log_file", "logs/strikepath.log"),
                rotation=log.get("rotation", "10 MB"),
                retention=log.get("retention", "14 days"),
            ),
        )

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.pricing.volatility <= 0:
            errors.append(f"Invalid volatility: {self.pricing.volatility}")
        if not -1 < self.pricing.risk_free_rate < 1:
            errors.append(f"Invalid risk_free_rate: {self.pricing.risk_free_rate}")

        if self.chart.width <= 0 or self.chart.height <= 0:
            errors.append(f"Invalid chart size: {self.chart.width}x{self.chart.height}")
        if not 0 < self.chart.history_fraction < 1:
            errors.append(f"Invalid history_fraction: {self.chart.history_fraction}")
        if self.chart.days_ahead < 1:
            errors.append(f"Invalid days_ahead: {self.chart.days_ahead}")
        if self.chart.price_floor >= self.chart.price_ceiling:
            errors.append(
                f"price_floor ({self.chart.price_floor}) must be below "
                f"price_ceiling ({self.chart.price_ceiling})"
            )
        if self.chart.tick_decay <= 0:
            errors.append(f"Invalid tick_decay: {self.chart.tick_decay}")
        if self.chart.insert_decay < 0:
            errors.append(f"Invalid insert_decay: {self.chart.insert_decay}")
        if self.chart.frame_interval <= 0:
            errors.append(f"Invalid frame_interval: {self.chart.frame_interval}")

        if self.market_data.default_spot <= 0:
            errors.append(f"Invalid default_spot: {self.market_data.default_spot}")
        if self.market_data.timeout <= 0:
            errors.append(f"Invalid timeout: {self.market_data.timeout}")

        if self.logging.level not in ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Invalid log level: {self.logging.level}")

        return errors
