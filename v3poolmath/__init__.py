"""Exact integer math for concentrated-liquidity pools: ticks, sqrt prices, swap steps, liquidity, fees and tick lists."""

__version__ = "0.1.0"